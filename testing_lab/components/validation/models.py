"""
Validation component models.

Inputs, outputs and configuration for user and product validation.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from testing_lab.domain.errors import LabError

SUCCESS_MESSAGE = "Validation successful"
PRODUCT_PUBLISHED_MESSAGE = "Product was successfully published"


# --- Product ---


@dataclass(frozen=True)
class Product:
    """Product submitted for publishing. Validated, never stored."""

    name: Any
    price: Any


# --- Output Models ---


@dataclass(frozen=True)
class UserInputOutput:
    """Output from user input validation."""

    errors: list[LabError] = field(default_factory=list)

    @property
    def is_valid(self) -> bool:
        return len(self.errors) == 0

    @property
    def message(self) -> str:
        """'Validation successful' or every error message joined by ', '."""
        if self.is_valid:
            return SUCCESS_MESSAGE
        return ", ".join(str(e) for e in self.errors)

    def __str__(self) -> str:
        return self.message


@dataclass(frozen=True)
class CreateProductOutput:
    """Output from product creation."""

    success: bool
    error: LabError | None = None
    message: str | None = None

    def to_dict(self) -> dict[str, Any]:
        if self.success or self.error is None:
            return {"success": self.success, "message": self.message}
        return {
            "success": False,
            "error": {"code": self.error.code.value, "message": self.error.message},
        }


# --- Configuration ---


@dataclass(frozen=True)
class ValidationConfig:
    """Validation configuration from rules."""

    username_min_length: int = 5
    username_max_length: int = 15
    user_input_min_username_length: int = 3
    user_input_min_age: int = 18
    # Minimum driving age per country code
    driving_ages: dict[str, int] = field(
        default_factory=lambda: {
            "US": 16,
            "UK": 17,
        }
    )
    password_min_length: int = 8
