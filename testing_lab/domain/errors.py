"""
Tagged error values shared by the lab components.

Expected validation failures are returned, not raised. Each carries a
machine-readable code for matching and the human message callers print.

Error codes:
- INVALID_PRICE / INVALID_DISCOUNT_CODE: pricing input rejected
- INVALID_USERNAME / INVALID_AGE / INVALID_NAME: validation input rejected
- INVALID_COUNTRY_CODE: no driving age configured for the country
- SHIPPING_UNAVAILABLE: quote provider returned nothing
- PAYMENT_ERROR: payment processor did not report success
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class ErrorCode(Enum):
    """Error tag enumeration."""

    INVALID_PRICE = "invalid_price"
    INVALID_DISCOUNT_CODE = "invalid_discount_code"
    INVALID_USERNAME = "invalid_username"
    INVALID_AGE = "invalid_age"
    INVALID_NAME = "invalid_name"
    INVALID_COUNTRY_CODE = "invalid_country_code"
    SHIPPING_UNAVAILABLE = "shipping_unavailable"
    PAYMENT_ERROR = "payment_error"


# Default human messages per code
DEFAULT_MESSAGES: dict[ErrorCode, str] = {
    ErrorCode.INVALID_PRICE: "Invalid price",
    ErrorCode.INVALID_DISCOUNT_CODE: "Invalid discount code",
    ErrorCode.INVALID_USERNAME: "Invalid username",
    ErrorCode.INVALID_AGE: "Invalid age",
    ErrorCode.INVALID_NAME: "Name is missing",
    ErrorCode.INVALID_COUNTRY_CODE: "Invalid country code",
    ErrorCode.SHIPPING_UNAVAILABLE: "shipping unavailable",
    ErrorCode.PAYMENT_ERROR: "payment_error",
}


@dataclass(frozen=True)
class LabError:
    """
    Validation error detail.

    str() yields the message, so substring checks like
    ``"invalid" in str(err).lower()`` keep working alongside tag matching.
    """

    code: ErrorCode
    message: str
    field: str | None = None

    def __str__(self) -> str:
        return self.message

    @classmethod
    def of(cls, code: ErrorCode, field: str | None = None) -> LabError:
        """Build an error with the default message for ``code``."""
        return cls(code=code, message=DEFAULT_MESSAGES[code], field=field)


def is_error(value: object) -> bool:
    """Check whether a component result is a tagged error."""
    return isinstance(value, LabError)
