"""
Unit tests for the intro component.

Plain assertions: each test checks one return value.
"""

import math

import pytest

from testing_lab.components.intro import (
    calculate_average,
    factorial,
    fizz_buzz,
    max_number,
)


class TestMaxNumber:
    def test_returns_first_argument_if_greater(self) -> None:
        assert max_number(2, 1) == 2

    def test_returns_second_argument_if_greater(self) -> None:
        assert max_number(1, 2) == 2

    def test_returns_first_argument_if_equal(self) -> None:
        assert max_number(1, 1) == 1


class TestFizzBuzz:
    def test_divisible_by_3_and_5(self) -> None:
        assert fizz_buzz(15) == "FizzBuzz"

    def test_divisible_by_3_only(self) -> None:
        assert fizz_buzz(6) == "Fizz"

    def test_divisible_by_5_only(self) -> None:
        assert fizz_buzz(10) == "Buzz"

    def test_not_divisible_returns_number_as_string(self) -> None:
        assert fizz_buzz(7) == "7"


class TestCalculateAverage:
    def test_empty_list_is_nan(self) -> None:
        assert math.isnan(calculate_average([]))

    def test_single_element(self) -> None:
        assert calculate_average([1]) == 1

    def test_two_elements(self) -> None:
        assert calculate_average([1, 2]) == 1.5

    def test_three_elements(self) -> None:
        assert calculate_average([1, 2, 3]) == 2

    def test_accepts_tuple(self) -> None:
        assert calculate_average((2.5, 3.5)) == pytest.approx(3.0)


class TestFactorial:
    def test_zero(self) -> None:
        assert factorial(0) == 1

    def test_one(self) -> None:
        assert factorial(1) == 1

    def test_two(self) -> None:
        assert factorial(2) == 2

    def test_five(self) -> None:
        assert factorial(5) == 120

    def test_negative_is_none(self) -> None:
        assert factorial(-1) is None
