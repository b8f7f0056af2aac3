"""
Intro component.

Arithmetic helpers for plain-assertion exercises.
"""

from testing_lab.components.intro.component import (
    calculate_average,
    factorial,
    fizz_buzz,
    max_number,
)

__all__ = [
    "max_number",
    "fizz_buzz",
    "calculate_average",
    "factorial",
]
