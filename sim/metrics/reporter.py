"""CSV/JSON output of a clock's fired-event history."""

import json
import csv
import io
from gameclock.clock import GameClock
from gameclock.timeconv import split_minutes

FIELDS = ['minute_abs', 'day', 'hour', 'minute', 'callback']


class HistoryReporter:
    """Generates CSV and JSON reports from GameClock.history."""

    def __init__(self, clock: GameClock):
        self.clock = clock

    def to_dict(self) -> list:
        """Export as list of dicts, one per fired event."""
        rows = []
        for t, name in self.clock.history:
            day, hour, minute = split_minutes(t)
            rows.append({
                'minute_abs': t, 'day': day, 'hour': hour,
                'minute': minute, 'callback': name,
            })
        return rows

    def to_csv(self) -> str:
        output = io.StringIO()
        writer = csv.DictWriter(output, fieldnames=FIELDS)
        writer.writeheader()
        writer.writerows(self.to_dict())
        return output.getvalue()

    def to_json(self) -> str:
        return json.dumps(self.to_dict(), indent=2)

    def summary(self) -> dict:
        """Fired-event counts per day."""
        per_day: dict[int, int] = {}
        for row in self.to_dict():
            per_day[row['day']] = per_day.get(row['day'], 0) + 1
        return {
            'fired': sum(per_day.values()),
            'per_day': per_day,
            'pending': self.clock.pending_events,
            'completed': self.clock.is_completed,
        }

    def write_csv(self, filepath: str):
        """Write CSV to file."""
        with open(filepath, 'w', newline='') as f:
            f.write(self.to_csv())

    def write_json(self, filepath: str):
        """Write JSON to file."""
        with open(filepath, 'w') as f:
            f.write(self.to_json())
