"""
Tests for the memory store and calculation history.
"""
import math

import pytest

from history_manager import HistoryManager
from results import Err, ErrorKind, Ok


class TestMemoryStore:
    """Tests for the memory accumulator."""

    def test_defaults_to_zero(self, memory):
        assert memory.recall() == 0
        assert memory.has_value() is False

    def test_store_and_recall(self, memory):
        memory.store(42)
        assert memory.recall() == 42.0
        assert memory.has_value() is True

    def test_add_and_subtract(self, memory):
        memory.add_to_memory(5)
        memory.add_to_memory(5)
        memory.subtract_from_memory(3)
        assert memory.recall() == 7.0

    def test_clear_memory(self, memory):
        memory.store(9)
        memory.clear_memory()
        assert memory.recall() == 0
        assert memory.has_value() is False

    @pytest.mark.parametrize("value", [math.nan, math.inf, -math.inf, "12", None, True])
    def test_invalid_values_ignored(self, memory, value):
        memory.store(3)
        memory.store(value)
        memory.add_to_memory(value)
        memory.subtract_from_memory(value)
        assert memory.recall() == 3.0

    def test_overflowing_update_ignored(self, memory):
        memory.store(1e308)
        memory.add_to_memory(1e308)
        assert memory.recall() == 1e308


class TestHistory:
    """Tests for the bounded calculation history."""

    def test_record_newest_first(self, memory):
        memory.record("1 + 1", Ok(2.0))
        memory.record("2 + 2", Ok(4.0))

        history = memory.get_history()
        assert [entry.operation_description for entry in history] == ["2 + 2", "1 + 1"]
        assert history[0].result == 4.0

    def test_error_results_keep_their_kind(self, memory):
        memory.record("5 ÷ 0", Err(ErrorKind.POSITIVE_INFINITY))

        entry = memory.get_history()[0]
        assert entry.result is ErrorKind.POSITIVE_INFINITY
        assert entry.result_text == "Infinity"
        assert entry.to_dict()['result'] == "Infinity"

    def test_default_limit_is_ten(self, memory):
        for i in range(15):
            memory.record(f"{i} + 0", Ok(float(i)))

        assert len(memory.get_history()) == 10
        assert len(memory.get_history(limit=3)) == 3
        assert memory.get_history(limit=0) == []

    def test_capped_at_one_hundred(self, memory):
        for i in range(101):
            memory.record(f"{i} + 0", Ok(float(i)))

        history = memory.get_history(limit=None)
        assert len(history) == 100
        assert history[0].operation_description == "100 + 0"
        assert history[-1].operation_description == "1 + 0"

    def test_clear_history(self, memory):
        memory.record("1 + 1", Ok(2.0))
        memory.clear_history()
        assert memory.get_history() == []

    def test_format_calculation_history(self):
        history = HistoryManager(max_items=5)
        history.add_calculation("1,000 × 2", Ok(2000.0))

        formatted = history.format_calculation_history()
        assert len(formatted) == 1
        assert formatted[0].endswith(": 1,000 × 2 = 2,000")

    def test_to_dict(self):
        history = HistoryManager()
        entry = history.add_calculation("5 + 3", 8.0)

        data = entry.to_dict()
        assert data['operation'] == "5 + 3"
        assert data['result'] == 8.0
        assert data['display'] == "8"
        assert 'timestamp' in data
