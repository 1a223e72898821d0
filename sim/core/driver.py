"""External tick loop for a GameClock.

The clock never advances itself; a driver decides how many minutes pass.
"""

import logging
from gameclock.clock import GameClock
from gameclock.timeconv import minutes_in_hours, minutes_in_days

logger = logging.getLogger(__name__)


class ClockDriver:
    """Batches tick() calls and stops at completion."""

    def __init__(self, clock: GameClock):
        self.clock = clock
        self.ticks_run = 0

    def advance(self, n: int = 1) -> int:
        """Tick up to n times, stopping early once the clock completes.

        Returns number of ticks actually applied.
        """
        if n < 0:
            raise ValueError(f"Tick count must be non-negative, got {n}")
        applied = 0
        for _ in range(n):
            if self.clock.is_completed:
                break
            self.clock.tick()
            applied += 1
        self.ticks_run += applied
        return applied

    def advance_hours(self, hours: int) -> int:
        return self.advance(minutes_in_hours(hours))

    def advance_days(self, days: int) -> int:
        return self.advance(minutes_in_days(days))

    def run_until_complete(self, max_ticks: int = 100_000) -> int:
        """Tick until the clock completes.

        Returns number of ticks taken. Raises RuntimeError if the clock is
        still running after max_ticks.
        """
        taken = 0
        while not self.clock.is_completed:
            if taken >= max_ticks:
                raise RuntimeError(
                    f"Clock not completed after {max_ticks} ticks "
                    f"(day {self.clock.day} of {self.clock.completion_day})")
            self.clock.tick()
            taken += 1
        self.ticks_run += taken
        logger.debug("Clock completed after %d ticks", taken)
        return taken
