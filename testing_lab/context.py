from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from testing_lab.adapters.analytics import InMemoryAnalyticsTracker
from testing_lab.adapters.clock import SystemClock
from testing_lab.adapters.currency import StaticExchangeRateAdapter
from testing_lab.adapters.dev_email import DevEmailAdapter
from testing_lab.adapters.payment_stub import PaymentStubAdapter
from testing_lab.adapters.security import RandomSecurityCodeGenerator
from testing_lab.adapters.shipping import StaticShippingQuoteAdapter
from testing_lab.components import pricing, storefront, validation
from testing_lab.components.pricing import PricingConfig
from testing_lab.components.storefront import (
    AnalyticsTrackerPort,
    ClockPort,
    CreditCard,
    EmailSenderPort,
    ExchangeRatePort,
    Order,
    OrderResult,
    PaymentPort,
    SecurityCodePort,
    ShippingQuotePort,
    StorefrontConfig,
)
from testing_lab.components.validation import UserInputOutput, ValidationConfig
from testing_lab.domain.errors import LabError
from testing_lab.rules.models import LabRules


@dataclass
class StorefrontContext:
    """Collaborators and configs wired together; workflow calls without repeating ports."""

    rates: ExchangeRatePort
    shipping: ShippingQuotePort
    analytics: AnalyticsTrackerPort
    payment: PaymentPort
    email: EmailSenderPort
    security: SecurityCodePort
    clock: ClockPort
    storefront_config: StorefrontConfig = field(default_factory=StorefrontConfig)
    pricing_config: PricingConfig = field(default_factory=PricingConfig)
    validation_config: ValidationConfig = field(default_factory=ValidationConfig)

    @classmethod
    def create(cls, rules: LabRules | None = None) -> StorefrontContext:
        """Build a context over the in-process dev adapters."""
        storefront_config = (
            storefront.load_config_from_rules(rules) if rules else StorefrontConfig()
        )

        return cls(
            rates=StaticExchangeRateAdapter(),
            shipping=StaticShippingQuoteAdapter(),
            analytics=InMemoryAnalyticsTracker(),
            payment=PaymentStubAdapter(),
            email=DevEmailAdapter(),
            security=RandomSecurityCodeGenerator(storefront_config.security_code_digits),
            clock=SystemClock(),
            storefront_config=storefront_config,
            pricing_config=pricing.load_config_from_rules(rules) if rules else PricingConfig(),
            validation_config=(
                validation.load_config_from_rules(rules) if rules else ValidationConfig()
            ),
        )

    # --- Workflow shortcuts ---

    def get_price_in_currency(self, price: float, currency: str) -> float:
        return storefront.get_price_in_currency(price, currency, self.rates, self.storefront_config)

    def get_shipping_info(self, destination: str) -> str:
        return storefront.get_shipping_info(destination, self.shipping)

    async def render_page(self) -> str:
        return await storefront.render_page(self.analytics, self.storefront_config)

    async def submit_order(self, order: Order, card: CreditCard) -> OrderResult:
        return await storefront.submit_order(order, card, self.payment)

    async def sign_up(self, email: str) -> bool:
        return await storefront.sign_up(email, self.email)

    async def login(self, email: str) -> None:
        await storefront.login(email, self.email, self.security)

    def is_online(self) -> bool:
        return storefront.is_online(self.clock, self.storefront_config)

    def get_discount(self) -> float:
        return storefront.get_discount(self.clock, self.storefront_config)

    # --- Rule-configured validators ---

    def calculate_discount(self, price: Any, discount_code: Any) -> float | LabError:
        return pricing.calculate_discount(price, discount_code, self.pricing_config)

    def validate_user_input(self, username: Any, age: Any) -> UserInputOutput:
        return validation.validate_user_input(username, age, self.validation_config)

    def is_valid_username(self, username: Any) -> bool:
        return validation.is_valid_username(username, self.validation_config)

    def can_drive(self, age: float, country_code: str) -> bool | LabError:
        return validation.can_drive(age, country_code, self.validation_config)

    def is_strong_password(self, password: str) -> bool:
        return validation.is_strong_password(password, self.validation_config)
