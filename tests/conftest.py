"""Shared fixtures for gameclock tests."""

import pytest
from gameclock.clock import GameClock


class CompletionRecorder:
    """Completion callback that counts its calls."""

    def __init__(self):
        self.calls = 0

    def __call__(self):
        self.calls += 1

    @property
    def fired(self) -> bool:
        return self.calls > 0


@pytest.fixture
def completion():
    return CompletionRecorder()


@pytest.fixture
def clock(completion):
    """Three-day clock, set explicitly in case the default changes."""
    return GameClock(completion, day_threshold=3)


@pytest.fixture
def cycle(clock):
    """Tick the shared clock a given number of minutes."""
    def _cycle(minutes: int):
        for _ in range(minutes):
            clock.tick()
    return _cycle
