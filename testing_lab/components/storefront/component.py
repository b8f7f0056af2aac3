"""
Storefront component.

Workflow functions that delegate to injected collaborators: currency
conversion, shipping quotes, analytics, payment, email, one-time login
codes and the clock.

Key behaviors:
- No state is retained between calls
- submit_order maps any non-"success" charge to a PAYMENT_ERROR result
- check_shipping returns a SHIPPING_UNAVAILABLE error when there is no quote
- sign_up sends nothing for an invalid address; two emails otherwise
- is_online is open-inclusive, close-exclusive in local time
- get_discount applies for the whole holiday calendar day
"""

from __future__ import annotations

import logging
import re

from testing_lab.domain.errors import DEFAULT_MESSAGES, ErrorCode, LabError
from testing_lab.rules.models import LabRules

from .models import CreditCard, Order, OrderResult, ShippingQuote, StorefrontConfig
from .ports import (
    AnalyticsTrackerPort,
    ClockPort,
    EmailSenderPort,
    ExchangeRatePort,
    PaymentPort,
    SecurityCodePort,
    ShippingQuotePort,
)

logger = logging.getLogger(__name__)

# Local part, "@", and a domain with at least one dot; no whitespace
EMAIL_REGEX = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")

SHIPPING_UNAVAILABLE_MESSAGE = DEFAULT_MESSAGES[ErrorCode.SHIPPING_UNAVAILABLE]


def _format_amount(amount: float) -> str:
    if float(amount).is_integer():
        return str(int(amount))
    return f"{amount:.2f}"


# --- Pricing ---


def get_price_in_currency(
    price: float,
    currency: str,
    rates: ExchangeRatePort,
    config: StorefrontConfig | None = None,
) -> float:
    """Convert a base-currency price into ``currency``."""
    config = config or StorefrontConfig()

    rate = rates.get_exchange_rate(config.base_currency, currency)
    converted = price * rate
    logger.info(f"Converted price={price} {config.base_currency}->{currency} rate={rate}")
    return converted


def check_shipping(destination: str, shipping: ShippingQuotePort) -> ShippingQuote | LabError:
    """
    Fetch a quote for a destination.

    Returns:
        ShippingQuote, or a SHIPPING_UNAVAILABLE error when there is none
    """
    quote = shipping.get_shipping_quote(destination)
    if quote is None:
        return LabError.of(ErrorCode.SHIPPING_UNAVAILABLE, field="destination")
    return quote


def get_shipping_info(destination: str, shipping: ShippingQuotePort) -> str:
    """
    Describe shipping to a destination.

    Returns:
        "shipping unavailable", or "shipping cost: $<cost> (<days> days)"
    """
    quote = check_shipping(destination, shipping)
    if isinstance(quote, LabError):
        logger.info(f"No shipping quote for destination={destination}")
        return str(quote)

    logger.info(f"Shipping quote for destination={destination} cost={quote.cost}")
    return f"shipping cost: ${_format_amount(quote.cost)} ({quote.estimated_days} days)"


# --- Pages ---


async def render_page(
    analytics: AnalyticsTrackerPort,
    config: StorefrontConfig | None = None,
) -> str:
    """Render the home page, recording one page view."""
    config = config or StorefrontConfig()

    analytics.track_page_view(config.home_path)
    logger.info(f"Rendered page path={config.home_path}")
    return config.page_content


# --- Orders ---


async def submit_order(order: Order, card: CreditCard, payment: PaymentPort) -> OrderResult:
    """
    Charge the card for the order total.

    Returns:
        OrderResult(success=True), or a PAYMENT_ERROR result
    """
    result = await payment.charge(card, order.total_amount)

    if result.status != "success":
        logger.info(f"Payment failed for amount={order.total_amount} status={result.status}")
        return OrderResult.payment_error()

    logger.info(f"Order charged amount={order.total_amount}")
    return OrderResult(success=True)


# --- Accounts ---


def is_valid_email(email: str) -> bool:
    """Minimal syntax check: something@domain.tld."""
    return isinstance(email, str) and EMAIL_REGEX.match(email) is not None


def build_welcome_email(email: str) -> str:
    return f"Welcome aboard, {email}! Your account is ready."


def build_verification_email(email: str) -> str:
    return f"Please confirm that {email} is your email address."


async def sign_up(email: str, sender: EmailSenderPort) -> bool:
    """
    Register an email address.

    Sends the welcome email, then the verification email.

    Returns:
        False without sending anything if the address is invalid
    """
    if not is_valid_email(email):
        logger.info(f"Signup rejected: invalid email {email!r}")
        return False

    await sender.send_email(email, build_welcome_email(email))
    await sender.send_email(email, build_verification_email(email))

    logger.info(f"Signup accepted for {email}")
    return True


async def login(email: str, sender: EmailSenderPort, security: SecurityCodePort) -> None:
    """Email a freshly generated one-time login code."""
    code = security.generate_code()
    await sender.send_email(email, str(code))
    logger.info(f"Login code sent to {email}")


# --- Clock-dependent rules ---


def is_online(clock: ClockPort, config: StorefrontConfig | None = None) -> bool:
    config = config or StorefrontConfig()

    hour = clock.now().hour
    online = config.open_hour <= hour < config.close_hour
    logger.info(f"Store online={online} at hour={hour}")
    return online


def get_discount(clock: ClockPort, config: StorefrontConfig | None = None) -> float:
    """Holiday discount: applies for the full calendar day, else 0."""
    config = config or StorefrontConfig()

    today = clock.now()
    if today.month == config.holiday_month and today.day == config.holiday_day:
        logger.info(f"Holiday discount {config.holiday_discount} applied on {today:%m-%d}")
        return config.holiday_discount

    logger.info(f"No discount on {today:%m-%d}")
    return 0


# --- Configuration Loader ---


def load_config_from_rules(rules: LabRules) -> StorefrontConfig:
    """
    Load StorefrontConfig from rules.yaml.

    Args:
        rules: Validated rules

    Returns:
        StorefrontConfig instance
    """
    storefront = rules.storefront

    return StorefrontConfig(
        base_currency=storefront.base_currency,
        home_path=storefront.home_path,
        page_content=storefront.page_content,
        open_hour=storefront.business_hours.open_hour,
        close_hour=storefront.business_hours.close_hour,
        holiday_month=storefront.holiday.month,
        holiday_day=storefront.holiday.day,
        holiday_discount=storefront.holiday.discount,
        security_code_digits=storefront.security_code_digits,
    )
