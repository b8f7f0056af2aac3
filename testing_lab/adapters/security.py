from __future__ import annotations

import secrets


class RandomSecurityCodeGenerator:
    """
    One-time numeric login codes from a CSPRNG.

    Codes have exactly ``digits`` digits (no leading zero).
    Satisfies SecurityCodePort.
    """

    def __init__(self, digits: int = 6) -> None:
        if digits < 1:
            raise ValueError("digits must be >= 1")
        self.digits = digits

    def generate_code(self) -> int:
        low = 10 ** (self.digits - 1) if self.digits > 1 else 0
        high = 10**self.digits
        return low + secrets.randbelow(high - low)
