from datetime import datetime, timedelta


class SystemClock:
    def now(self) -> datetime:
        return datetime.now()


class FrozenClock:
    """
    Clock that returns a fixed local time.

    Useful for deterministic testing.
    """

    def __init__(self, frozen: datetime) -> None:
        self._frozen = frozen

    def now(self) -> datetime:
        return self._frozen

    def set(self, frozen: datetime) -> None:
        """Move the clock to a new fixed time (for testing)."""
        self._frozen = frozen

    def set_from_string(self, value: str, fmt: str = "%Y-%m-%d %H:%M") -> None:
        """Parse ``value`` as local time, e.g. '2024-01-01 07:59'."""
        self._frozen = datetime.strptime(value, fmt)

    def advance(self, delta: timedelta) -> None:
        """Advance frozen time by delta (for testing)."""
        self._frozen = self._frozen + delta
