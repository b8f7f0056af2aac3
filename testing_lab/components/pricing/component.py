"""
Pricing component.

Pure functions for coupons, discounts and price bounds.

Key behaviors:
- Non-numeric or non-positive prices are rejected with INVALID_PRICE
- Non-string discount codes are rejected with INVALID_DISCOUNT_CODE
- Unrecognised codes apply no discount and are not an error
- Range checks are inclusive on both bounds
"""

from __future__ import annotations

from typing import Any

from testing_lab.domain.checks import is_number
from testing_lab.domain.errors import ErrorCode, LabError
from testing_lab.rules.models import LabRules

from .models import Coupon, PricingConfig


def get_coupons() -> list[Coupon]:
    """Return the coupons currently on offer."""
    return [
        Coupon(code="SAVE20NOW", discount=0.2),
        Coupon(code="DISCOUNT50OFF", discount=0.5),
    ]


def calculate_discount(
    price: Any,
    discount_code: Any,
    config: PricingConfig | None = None,
) -> float | LabError:
    """
    Apply a discount code to a price.

    Args:
        price: Item price, must be a positive number
        discount_code: Code entered by the shopper
        config: Optional pricing config (code table)

    Returns:
        Discounted price, or a LabError for invalid input
    """
    config = config or PricingConfig()

    if not is_number(price) or price <= 0:
        return LabError.of(ErrorCode.INVALID_PRICE, field="price")

    if not isinstance(discount_code, str):
        return LabError.of(ErrorCode.INVALID_DISCOUNT_CODE, field="discount_code")

    discount = config.discount_for(discount_code)
    return price - price * discount


def is_price_in_range(price: float, min_price: float, max_price: float) -> bool:
    return min_price <= price <= max_price


# --- Configuration Loader ---


def load_config_from_rules(rules: LabRules) -> PricingConfig:
    """
    Load PricingConfig from rules.yaml.

    Args:
        rules: Validated rules

    Returns:
        PricingConfig instance
    """
    return PricingConfig(discount_codes=dict(rules.pricing.discount_codes))
