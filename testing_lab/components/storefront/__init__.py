"""
Storefront component.

Currency conversion, shipping info, page rendering, order submission,
signup, one-time-code login and clock-dependent rules.
"""

from testing_lab.components.storefront.component import (
    EMAIL_REGEX,
    SHIPPING_UNAVAILABLE_MESSAGE,
    build_verification_email,
    check_shipping,
    build_welcome_email,
    get_discount,
    get_price_in_currency,
    get_shipping_info,
    is_online,
    is_valid_email,
    load_config_from_rules,
    login,
    render_page,
    sign_up,
    submit_order,
)
from testing_lab.components.storefront.models import (
    CreditCard,
    Order,
    OrderResult,
    PaymentResult,
    PaymentStatus,
    ShippingQuote,
    StorefrontConfig,
)
from testing_lab.components.storefront.ports import (
    AnalyticsTrackerPort,
    ClockPort,
    EmailSenderPort,
    ExchangeRatePort,
    PaymentPort,
    SecurityCodePort,
    ShippingQuotePort,
)

__all__ = [
    # Workflow functions
    "get_price_in_currency",
    "check_shipping",
    "get_shipping_info",
    "render_page",
    "submit_order",
    "sign_up",
    "login",
    "is_online",
    "get_discount",
    "is_valid_email",
    "build_welcome_email",
    "build_verification_email",
    "load_config_from_rules",
    # Constants
    "EMAIL_REGEX",
    "SHIPPING_UNAVAILABLE_MESSAGE",
    # Models
    "Order",
    "CreditCard",
    "ShippingQuote",
    "PaymentResult",
    "PaymentStatus",
    "OrderResult",
    "StorefrontConfig",
    # Ports
    "ExchangeRatePort",
    "ShippingQuotePort",
    "AnalyticsTrackerPort",
    "PaymentPort",
    "EmailSenderPort",
    "SecurityCodePort",
    "ClockPort",
]
