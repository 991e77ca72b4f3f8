import time
from dataclasses import dataclass

from ..domain.ports import Clock


class SystemClock(Clock):
    """Wall-clock time, truncated to whole seconds."""

    def now(self) -> int:
        return int(time.time())


@dataclass(slots=True)
class FixedClock(Clock):
    """
    Clock pinned to a given instant. Mostly useful in tests.
    """
    current: int

    def now(self) -> int:
        return self.current

    def advance(self, seconds: int) -> None:
        self.current += seconds
