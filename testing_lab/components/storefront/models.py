"""
Storefront component models.

Pass-through values exchanged with the storefront collaborators.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Literal

from testing_lab.domain.errors import ErrorCode

PaymentStatus = Literal["success", "failed"]


@dataclass(frozen=True)
class Order:
    total_amount: float


@dataclass(frozen=True)
class CreditCard:
    credit_card_number: str


@dataclass(frozen=True)
class ShippingQuote:
    """Quote returned by the shipping provider."""

    cost: float
    estimated_days: int


@dataclass(frozen=True)
class PaymentResult:
    """Result of a charge attempt."""

    status: PaymentStatus


@dataclass(frozen=True)
class OrderResult:
    """Output from order submission."""

    success: bool
    error: ErrorCode | None = None

    @classmethod
    def payment_error(cls) -> OrderResult:
        return cls(success=False, error=ErrorCode.PAYMENT_ERROR)

    def to_dict(self) -> dict[str, Any]:
        if self.success or self.error is None:
            return {"success": self.success}
        return {"success": False, "error": self.error.value}


# --- Configuration ---


@dataclass(frozen=True)
class StorefrontConfig:
    """Storefront configuration from rules."""

    base_currency: str = "USD"
    home_path: str = "/home"
    page_content: str = "<div>content</div>"
    open_hour: int = 8  # Inclusive
    close_hour: int = 20  # Exclusive
    holiday_month: int = 12
    holiday_day: int = 25
    holiday_discount: float = 0.2
    security_code_digits: int = 6
