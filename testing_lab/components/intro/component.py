"""
Intro component.

Small arithmetic helpers used for the first assertion exercises.
"""

from __future__ import annotations

import math
from collections.abc import Sequence


def max_number(a: float, b: float) -> float:
    """Return the larger argument (``a`` when equal)."""
    if a > b:
        return a
    elif b > a:
        return b
    return a


def fizz_buzz(n: int) -> str:
    if n % 3 == 0 and n % 5 == 0:
        return "FizzBuzz"
    if n % 3 == 0:
        return "Fizz"
    if n % 5 == 0:
        return "Buzz"
    return str(n)


def calculate_average(numbers: Sequence[float]) -> float:
    """
    Arithmetic mean of ``numbers``.

    Returns:
        math.nan for an empty sequence
    """
    if len(numbers) == 0:
        return math.nan
    return sum(numbers) / len(numbers)


def factorial(number: int) -> int | None:
    """
    Compute ``number!``.

    Returns:
        None for negative input, 1 for 0 and 1
    """
    if number < 0:
        return None
    result = 1
    for i in range(2, number + 1):
        result *= i
    return result
