"""Minute-resolution game clock with scheduled events.

One tick = one in-game minute. Callbacks are grouped by the absolute minute
they are due at; a tick only looks at the bucket for the minute it just
entered, then drops it.
"""

import logging
from typing import Callable, Optional

from gameclock.timeconv import (
    MINUTES_IN_DAY, split_minutes,
    minutes_in_hours, minutes_in_days, total_minutes,
)

logger = logging.getLogger(__name__)


def _callback_name(callback: Callable) -> str:
    return getattr(callback, '__name__', repr(callback))


class ScheduledEvent:
    """A callback bound to an absolute minute. Fires at most once."""

    def __init__(self, scheduled_time: int, callback: Callable[[], None]):
        self._scheduled_time = scheduled_time
        self._callback = callback
        self.completed = False

    @property
    def scheduled_time(self) -> int:
        return self._scheduled_time

    @property
    def callback(self) -> Callable[[], None]:
        return self._callback

    def is_match(self, time: int) -> bool:
        return self._scheduled_time == time

    def trigger(self):
        """Run the callback unless it already ran."""
        if self.completed:
            return
        self._callback()
        self.completed = True

    def __repr__(self):
        return (f"ScheduledEvent(scheduled_time={self._scheduled_time}, "
                f"callback={_callback_name(self._callback)}, "
                f"completed={self.completed})")


class GameClock:
    """Discrete minute clock that completes after a number of days.

    The completion callback is optional; without one, completion only
    flips is_completed.
    """

    MINUTE_DEFAULT = 0
    HOUR_DEFAULT = 0
    DAY_DEFAULT = 0

    minutes_in_hours = staticmethod(minutes_in_hours)
    minutes_in_days = staticmethod(minutes_in_days)
    total_minutes = staticmethod(total_minutes)

    def __init__(self, completion_callback: Optional[Callable[[], None]] = None,
                 day_threshold: int = 3):
        self._completion_callback = completion_callback
        self._completion_time = minutes_in_days(day_threshold)
        self.reset()

    # -- derived fields --------------------------------------------------

    @property
    def current_time(self) -> int:
        return self._current_time

    @property
    def day(self) -> int:
        return split_minutes(self._current_time)[0]

    @property
    def hour(self) -> int:
        return split_minutes(self._current_time)[1]

    @property
    def minute(self) -> int:
        return split_minutes(self._current_time)[2]

    @property
    def completion_time(self) -> int:
        return self._completion_time

    @property
    def completion_day(self) -> int:
        return self._completion_time // MINUTES_IN_DAY

    @property
    def is_completed(self) -> bool:
        return self._is_completed

    @property
    def scheduled_events_count(self) -> int:
        """Number of distinct minutes with queued events."""
        return len(self._scheduled_events)

    @property
    def pending_events(self) -> int:
        return sum(len(bucket) for bucket in self._scheduled_events.values())

    @property
    def history(self) -> list:
        """(minute, callback name) for every event fired since reset."""
        return list(self._history)

    # -- driving ---------------------------------------------------------

    def tick(self):
        """Advance one minute, fire its events, then check completion."""
        if self._is_completed:
            return
        self._current_time += 1
        self._fire_events()
        self._check_completion()

    def reset(self):
        self._current_time = 0
        self._is_completed = False
        self._scheduled_events: dict[int, list[ScheduledEvent]] = {}
        self._history: list[tuple] = []
        logger.debug("Clock reset (completion day %d)", self.completion_day)

    def schedule_event(self, day: int, hour: int, minute: int,
                       callback: Callable[[], None]):
        """Queue callback for the absolute minute (day, hour, minute).

        A time at or before the current minute can never be reached by
        tick(); such events are dropped with a warning.
        """
        t = total_minutes(day, hour, minute)
        if t <= self._current_time:
            logger.warning(
                "Dropping %s scheduled at minute %d: clock is at minute %d",
                _callback_name(callback), t, self._current_time)
            return
        bucket = self._scheduled_events.setdefault(t, [])
        bucket.append(ScheduledEvent(t, callback))

    def _fire_events(self):
        """Fire and evict the bucket for the current minute, if any."""
        bucket = self._scheduled_events.pop(self._current_time, None)
        if bucket is None:
            return
        logger.debug("Firing %d event(s) at minute %d",
                     len(bucket), self._current_time)
        for event in bucket:
            self._history.append((self._current_time,
                                  _callback_name(event.callback)))
            event.trigger()

    def _check_completion(self):
        if self.day < self.completion_day:
            return
        logger.info("Clock completed at day %d (minute %d)",
                    self.day, self._current_time)
        if self._completion_callback is not None:
            self._completion_callback()
        self._is_completed = True
