"""
Input type checks shared by the validating components.
"""

from __future__ import annotations

from numbers import Real
from typing import Any


def is_number(value: Any) -> bool:
    """True for ints, floats and other reals; bool is not a number here."""
    return isinstance(value, Real) and not isinstance(value, bool)
