"""
Pricing component models.

Coupons and the discount code table.
"""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True)
class Coupon:
    """
    Coupon offered to shoppers.

    Invariants:
    - code is a non-empty string
    - 0 < discount < 1
    """

    code: str
    discount: float

    def __post_init__(self) -> None:
        if not self.code:
            raise ValueError("Coupon code must be non-empty")
        if not 0 < self.discount < 1:
            raise ValueError(f"Coupon discount must be in (0, 1), got {self.discount}")


# --- Configuration ---


@dataclass(frozen=True)
class PricingConfig:
    """Pricing configuration from rules."""

    # Fraction taken off the price for each recognised code
    discount_codes: dict[str, float] = field(
        default_factory=lambda: {
            "SAVE10": 0.1,
            "SAVE20": 0.2,
        }
    )

    def discount_for(self, code: str) -> float:
        """Unknown codes get no discount."""
        return self.discount_codes.get(code, 0.0)
