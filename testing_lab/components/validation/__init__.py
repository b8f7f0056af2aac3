"""
Validation component.

User input, username, driving age, password and product validation.
"""

from testing_lab.components.validation.component import (
    can_drive,
    create_product,
    is_strong_password,
    is_valid_username,
    load_config_from_rules,
    validate_user_input,
)
from testing_lab.components.validation.models import (
    PRODUCT_PUBLISHED_MESSAGE,
    SUCCESS_MESSAGE,
    CreateProductOutput,
    Product,
    UserInputOutput,
    ValidationConfig,
)

__all__ = [
    # Pure functions
    "validate_user_input",
    "is_valid_username",
    "can_drive",
    "is_strong_password",
    "create_product",
    "load_config_from_rules",
    # Constants
    "SUCCESS_MESSAGE",
    "PRODUCT_PUBLISHED_MESSAGE",
    # Models
    "Product",
    "UserInputOutput",
    "CreateProductOutput",
    "ValidationConfig",
]
