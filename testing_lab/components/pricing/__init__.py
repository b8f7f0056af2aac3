"""
Pricing component.

Coupons, discount codes and price range checks.
"""

from testing_lab.components.pricing.component import (
    calculate_discount,
    get_coupons,
    is_price_in_range,
    load_config_from_rules,
)
from testing_lab.components.pricing.models import Coupon, PricingConfig

__all__ = [
    # Pure functions
    "get_coupons",
    "calculate_discount",
    "is_price_in_range",
    "load_config_from_rules",
    # Models
    "Coupon",
    "PricingConfig",
]
