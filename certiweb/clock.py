"""Clock implementations for certiweb."""

import time


class SystemClock:
    """Wall clock in whole seconds since the Unix epoch."""

    def now(self) -> int:
        return int(time.time())


class FixedClock:
    """Clock that returns a settable timestamp.

    Used by tests and by hosts that replay invocations with a recorded
    ledger time.
    """

    def __init__(self, timestamp: int = 0):
        self.timestamp = timestamp

    def now(self) -> int:
        return self.timestamp

    def advance(self, seconds: int) -> int:
        """Move the clock forward and return the new time."""
        if seconds < 0:
            raise ValueError("Clock cannot move backwards")
        self.timestamp += seconds
        return self.timestamp
