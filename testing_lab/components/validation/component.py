"""
Validation component.

Pure functions validating user input, usernames, driving eligibility,
password strength and products.

Key behaviors:
- validate_user_input reports every violation, not just the first
- can_drive has three outcomes: True, False, or INVALID_COUNTRY_CODE
- Username length bounds are inclusive
"""

from __future__ import annotations

import re
from typing import Any

from testing_lab.domain.checks import is_number
from testing_lab.domain.errors import ErrorCode, LabError
from testing_lab.rules.models import LabRules

from .models import (
    PRODUCT_PUBLISHED_MESSAGE,
    CreateProductOutput,
    Product,
    UserInputOutput,
    ValidationConfig,
)

UPPERCASE_PATTERN = re.compile(r"[A-Z]")
LOWERCASE_PATTERN = re.compile(r"[a-z]")
DIGIT_PATTERN = re.compile(r"\d")


def validate_user_input(
    username: Any,
    age: Any,
    config: ValidationConfig | None = None,
) -> UserInputOutput:
    """
    Validate a signup form.

    Args:
        username: Must be a string of at least 3 characters
        age: Must be a number of at least 18
        config: Optional validation config

    Returns:
        UserInputOutput listing every violation
    """
    config = config or ValidationConfig()
    errors: list[LabError] = []

    if (
        not isinstance(username, str)
        or len(username) < config.user_input_min_username_length
    ):
        errors.append(LabError.of(ErrorCode.INVALID_USERNAME, field="username"))

    if not is_number(age) or age < config.user_input_min_age:
        errors.append(LabError.of(ErrorCode.INVALID_AGE, field="age"))

    return UserInputOutput(errors=errors)


def is_valid_username(username: Any, config: ValidationConfig | None = None) -> bool:
    config = config or ValidationConfig()

    if not username or not isinstance(username, str):
        return False

    return config.username_min_length <= len(username) <= config.username_max_length


def can_drive(
    age: float,
    country_code: str,
    config: ValidationConfig | None = None,
) -> bool | LabError:
    """
    Check driving eligibility for a country.

    Returns:
        True/False for a known country, INVALID_COUNTRY_CODE error otherwise
    """
    config = config or ValidationConfig()

    legal_age = config.driving_ages.get(country_code)
    if not legal_age:
        return LabError.of(ErrorCode.INVALID_COUNTRY_CODE, field="country_code")

    return age >= legal_age


def is_strong_password(password: str, config: ValidationConfig | None = None) -> bool:
    """Require minimum length plus an uppercase letter, a lowercase letter and a digit."""
    config = config or ValidationConfig()

    if len(password) < config.password_min_length:
        return False

    if not UPPERCASE_PATTERN.search(password):
        return False

    if not LOWERCASE_PATTERN.search(password):
        return False

    if not DIGIT_PATTERN.search(password):
        return False

    return True


def create_product(product: Product) -> CreateProductOutput:
    """
    Validate a product before publishing.

    Returns:
        CreateProductOutput with INVALID_NAME or INVALID_PRICE on failure
    """
    if not product.name:
        return CreateProductOutput(
            success=False,
            error=LabError.of(ErrorCode.INVALID_NAME, field="name"),
        )

    if not is_number(product.price) or product.price <= 0:
        return CreateProductOutput(
            success=False,
            error=LabError(
                code=ErrorCode.INVALID_PRICE,
                message="Price is missing",
                field="price",
            ),
        )

    return CreateProductOutput(success=True, message=PRODUCT_PUBLISHED_MESSAGE)


# --- Configuration Loader ---


def load_config_from_rules(rules: LabRules) -> ValidationConfig:
    """
    Load ValidationConfig from rules.yaml.

    Args:
        rules: Validated rules

    Returns:
        ValidationConfig instance
    """
    validation = rules.validation

    return ValidationConfig(
        username_min_length=validation.username.min,
        username_max_length=validation.username.max,
        user_input_min_username_length=validation.user_input.min_username_length,
        user_input_min_age=validation.user_input.min_age,
        driving_ages=dict(validation.driving_ages),
        password_min_length=validation.password_min_length,
    )
