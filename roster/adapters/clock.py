from datetime import datetime, timedelta


class SystemClock:
    def now(self) -> datetime:
        return datetime.now()


class FrozenClock:
    """
    Clock that returns a fixed time.

    Useful for deterministic ages in tests and for the CLI `--on` option.
    """

    def __init__(self, frozen: datetime) -> None:
        self._frozen = frozen

    def now(self) -> datetime:
        return self._frozen

    def advance(self, delta: timedelta) -> None:
        """Advance frozen time by delta (for testing)."""
        self._frozen = self._frozen + delta
