"""
Memory Manager for TallyUp
Single memory accumulator (MS/MR/MC/M+/M-) plus the calculation history
"""
import logging
import math

import config
from history_manager import HistoryManager
from operations import is_valid_operand

logger = logging.getLogger(__name__)


class MemoryStore:
    def __init__(self, history=None):
        self.memory = 0.0
        self.history = history if history is not None else HistoryManager(config.MAX_HISTORY_ITEMS)

    def store(self, value):
        """Store value in memory (MS)"""
        if not is_valid_operand(value):
            logger.debug("Ignoring memory store of %r", value)
            return
        self.memory = float(value)
        logger.info("Memory stored: %s", self.memory)

    def recall(self):
        """Recall memory value (MR)"""
        return self.memory

    def clear_memory(self):
        """Clear memory (MC)"""
        self.memory = 0.0
        logger.info("Memory cleared")

    def add_to_memory(self, value):
        """Add value to memory (M+)"""
        self._accumulate(value, 1)

    def subtract_from_memory(self, value):
        """Subtract value from memory (M-)"""
        self._accumulate(value, -1)

    def _accumulate(self, value, sign):
        if not is_valid_operand(value):
            logger.debug("Ignoring memory update with %r", value)
            return

        total = self.memory + sign * float(value)
        if not math.isfinite(total):
            logger.warning("Memory update would overflow, keeping %s", self.memory)
            return

        self.memory = total
        logger.info("Memory updated by %s, new total: %s", sign * float(value), self.memory)

    def has_value(self):
        """Check if memory holds a non-zero value"""
        return self.memory != 0

    def record(self, description, result):
        """Add a calculation to history"""
        return self.history.add_calculation(description, result)

    def get_history(self, limit=config.DEFAULT_HISTORY_LIMIT):
        """Get calculation history, most recent first"""
        return self.history.get_calculation_history(limit)

    def clear_history(self):
        """Clear calculation history"""
        self.history.clear_calculation_history()
        logger.info("History cleared")
