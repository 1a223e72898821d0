"""Tests for minute conversion helpers."""

import pytest
from gameclock.timeconv import (
    MINUTES_IN_HOUR, MINUTES_IN_DAY,
    minutes_in_hours, minutes_in_days, total_minutes, split_minutes,
)


class TestConversions:

    def test_constants(self):
        assert MINUTES_IN_HOUR == 60
        assert MINUTES_IN_DAY == 1440

    @pytest.mark.parametrize('hours,expected', [(0, 0), (1, 60), (2, 120), (-1, -60)])
    def test_minutes_in_hours(self, hours, expected):
        assert minutes_in_hours(hours) == expected

    @pytest.mark.parametrize('days,expected', [(0, 0), (1, 1440), (3, 4320)])
    def test_minutes_in_days(self, days, expected):
        assert minutes_in_days(days) == expected

    def test_total_minutes(self):
        assert total_minutes(1, 11, 45) == 1440 + 660 + 45
        assert total_minutes(2, 11, 43) == 2880 + 660 + 43

    def test_total_minutes_folds_out_of_range(self):
        assert total_minutes(0, 25, 0) == total_minutes(1, 1, 0)
        assert total_minutes(0, 0, 61) == total_minutes(0, 1, 1)
        assert total_minutes(1, -1, 0) == total_minutes(0, 23, 0)

    def test_split_minutes(self):
        assert split_minutes(0) == (0, 0, 0)
        assert split_minutes(total_minutes(1, 11, 45)) == (1, 11, 45)
        assert split_minutes(1439) == (0, 23, 59)
