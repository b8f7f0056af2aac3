"""
Unit tests for the validation component.

Tests:
- validate_user_input (positive and negative testing)
- is_valid_username and can_drive (boundary testing)
- is_strong_password and create_product
"""

import pytest

from testing_lab.components.validation import (
    PRODUCT_PUBLISHED_MESSAGE,
    SUCCESS_MESSAGE,
    Product,
    ValidationConfig,
    can_drive,
    create_product,
    is_strong_password,
    is_valid_username,
    load_config_from_rules,
    validate_user_input,
)
from testing_lab.domain.errors import ErrorCode, LabError
from testing_lab.rules.loader import parse_rules

# --- User Input ---


class TestValidateUserInput:
    """Positive and negative tests for validate_user_input."""

    def test_valid_input_succeeds(self) -> None:
        result = validate_user_input("username", 19)

        assert result.is_valid is True
        assert result.message == SUCCESS_MESSAGE
        assert "success" in str(result).lower()

    def test_non_string_username(self) -> None:
        result = validate_user_input(True, 19)

        assert [e.code for e in result.errors] == [ErrorCode.INVALID_USERNAME]
        assert "invalid username" in result.message.lower()

    def test_short_username(self) -> None:
        result = validate_user_input("us", 19)
        assert [e.code for e in result.errors] == [ErrorCode.INVALID_USERNAME]

    def test_three_character_username_is_enough(self) -> None:
        assert validate_user_input("abc", 18).is_valid is True

    def test_non_numeric_age(self) -> None:
        result = validate_user_input("username", "19")

        assert [e.code for e in result.errors] == [ErrorCode.INVALID_AGE]
        assert "invalid age" in result.message.lower()

    def test_underage(self) -> None:
        result = validate_user_input("username", 17)
        assert [e.code for e in result.errors] == [ErrorCode.INVALID_AGE]

    def test_both_invalid_reports_both_joined(self) -> None:
        result = validate_user_input("", 5)

        assert result.message == "Invalid username, Invalid age"
        assert [e.field for e in result.errors] == ["username", "age"]


# --- Username (boundaries) ---


class TestIsValidUsername:
    @pytest.mark.parametrize(
        ("username", "expected"),
        [
            ("user", False),  # 4 chars
            ("husky", True),  # 5 chars
            ("username", True),
            ("a" * 15, True),
            ("a" * 16, False),
        ],
    )
    def test_length_bounds(self, username: str, expected: bool) -> None:
        assert is_valid_username(username) is expected

    def test_invalid_types(self) -> None:
        assert is_valid_username(None) is False
        assert is_valid_username(1) is False
        assert is_valid_username("") is False

    def test_custom_bounds(self) -> None:
        config = ValidationConfig(username_min_length=2, username_max_length=3)

        assert is_valid_username("ab", config) is True
        assert is_valid_username("abcd", config) is False


# --- Driving Age (boundaries) ---


class TestCanDrive:
    def test_unknown_country_is_error(self) -> None:
        result = can_drive(10, "FR")

        assert isinstance(result, LabError)
        assert result.code == ErrorCode.INVALID_COUNTRY_CODE
        assert "invalid" in str(result).lower()

    @pytest.mark.parametrize(
        ("age", "country_code", "expected"),
        [
            (15, "US", False),
            (16, "US", True),
            (17, "US", True),
            (16, "UK", False),
            (17, "UK", True),
            (18, "UK", True),
        ],
    )
    def test_age_against_country_minimum(
        self, age: int, country_code: str, expected: bool
    ) -> None:
        assert can_drive(age, country_code) is expected


# --- Password ---


class TestIsStrongPassword:
    def test_strong_password(self) -> None:
        assert is_strong_password("Passw0rdOk") is True

    def test_too_short(self) -> None:
        assert is_strong_password("Pa55wrd") is False

    def test_missing_uppercase(self) -> None:
        assert is_strong_password("passw0rdok") is False

    def test_missing_lowercase(self) -> None:
        assert is_strong_password("PASSW0RDOK") is False

    def test_missing_digit(self) -> None:
        assert is_strong_password("PasswordOk") is False

    def test_exactly_minimum_length(self) -> None:
        assert is_strong_password("Abcdefg1") is True

    @pytest.mark.parametrize(
        "password,expected",
        [
            ("Passw0rdOk", False),
            ("Abcdefghij1", False),
            ("Abcdefghijk1", True),
        ],
    )
    def test_configured_minimum_length(self, password: str, expected: bool) -> None:
        config = ValidationConfig(password_min_length=12)

        assert is_strong_password(password, config) is expected


# --- Product ---


class TestCreateProduct:
    def test_missing_name(self) -> None:
        result = create_product(Product(name="", price=10))

        assert result.success is False
        assert result.error is not None
        assert result.error.code == ErrorCode.INVALID_NAME
        assert result.to_dict() == {
            "success": False,
            "error": {"code": "invalid_name", "message": "Name is missing"},
        }

    def test_non_positive_price(self) -> None:
        result = create_product(Product(name="Lamp", price=0))

        assert result.success is False
        assert result.error is not None
        assert result.error.code == ErrorCode.INVALID_PRICE
        assert result.error.message == "Price is missing"

    def test_valid_product(self) -> None:
        result = create_product(Product(name="Lamp", price=25))

        assert result.success is True
        assert result.error is None
        assert result.to_dict() == {"success": True, "message": PRODUCT_PUBLISHED_MESSAGE}


# --- Configuration ---


class TestLoadConfigFromRules:
    def test_defaults_when_section_missing(self) -> None:
        rules = parse_rules("project: {slug: t, rules_version: '1'}\n")

        assert load_config_from_rules(rules) == ValidationConfig()

    def test_custom_driving_ages(self) -> None:
        rules = parse_rules(
            "project: {slug: t, rules_version: '1'}\n"
            "validation:\n"
            "  driving_ages: {FR: 18}\n"
        )

        config = load_config_from_rules(rules)

        assert can_drive(18, "FR", config) is True
        assert isinstance(can_drive(18, "US", config), LabError)
