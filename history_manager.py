"""
History Manager for TallyUp
Keeps the calculation history in memory, newest entry first
"""
from collections import deque
from dataclasses import dataclass, field
from datetime import datetime
from itertools import islice

import config
from number_formatter import format_number
from results import Err, ErrorKind, Ok


@dataclass(frozen=True)
class HistoryEntry:
    operation_description: str
    result: object  # float, or ErrorKind for a failed calculation
    timestamp: datetime = field(default_factory=datetime.now)

    @property
    def result_text(self):
        if isinstance(self.result, ErrorKind):
            return self.result.text
        return format_number(self.result)

    def to_dict(self):
        return {
            'operation': self.operation_description,
            'result': self.result.text if isinstance(self.result, ErrorKind) else self.result,
            'display': self.result_text,
            'timestamp': self.timestamp.strftime("%Y-%m-%d %H:%M:%S"),
        }


def _unwrap(result):
    if isinstance(result, Ok):
        return result.value
    if isinstance(result, Err):
        return result.kind
    return result


class HistoryManager:
    def __init__(self, max_items=config.MAX_HISTORY_ITEMS):
        # deque drops the oldest entry once max_items is reached
        self.entries = deque(maxlen=max_items)

    def __len__(self):
        return len(self.entries)

    def add_calculation(self, expression, result):
        """Add a calculation to history"""
        entry = HistoryEntry(expression, _unwrap(result))
        self.entries.appendleft(entry)
        return entry

    def get_calculation_history(self, limit=config.DEFAULT_HISTORY_LIMIT):
        """Get calculation history, most recent first"""
        if limit is None:
            return list(self.entries)
        return list(islice(self.entries, max(limit, 0)))

    def clear_calculation_history(self):
        """Clear all calculation history"""
        self.entries.clear()

    def format_calculation_history(self, limit=None):
        """Format calculation history for display"""
        formatted = []

        for entry in self.get_calculation_history(limit):
            timestamp = entry.timestamp.strftime("%Y-%m-%d %H:%M:%S")
            formatted.append(f"{timestamp}: {entry.operation_description} = {entry.result_text}")

        return formatted
