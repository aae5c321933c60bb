"""
Calculator Engine for TallyUp
Turns keypad events into display updates with left-to-right (no precedence) evaluation
"""
import logging
import math
from dataclasses import dataclass
from typing import Optional, Union

import config
from memory_manager import MemoryStore
from number_formatter import (
    fit_display,
    format_number,
    format_result,
    is_sentinel,
    parse_number,
    remove_thousands_separator,
)
from operations import ArithmeticEngine, Operator, describe_operation, normalize_operator

logger = logging.getLogger(__name__)

DIGITS = "0123456789"


@dataclass(frozen=True)
class PendingOperation:
    """Left operand and operator waiting for a right operand"""
    previous_value: float
    operator: Operator


@dataclass(frozen=True)
class Idle:
    """Freshly cleared, nothing pending"""

    @property
    def pending(self):
        return None


@dataclass(frozen=True)
class Accumulating:
    """Digits are being appended to the displayed numeral"""
    pending: Optional[PendingOperation] = None


@dataclass(frozen=True)
class PendingOperator:
    """Operator chosen; the next digit replaces the display"""
    pending: PendingOperation


@dataclass(frozen=True)
class JustCalculated:
    """A finished value is showing; the next digit starts a new numeral"""
    pending: Optional[PendingOperation] = None


CalculatorState = Union[Idle, Accumulating, PendingOperator, JustCalculated]


class Calculator:
    def __init__(self, engine=None, memory=None):
        self.engine = engine if engine is not None else ArithmeticEngine()
        self.memory = memory if memory is not None else MemoryStore()
        self.state: CalculatorState = Idle()
        self.display = "0"
        self.expression = ""

    # Display helpers

    def _set_display(self, text):
        self.display = fit_display(text)

    def _display_is_error(self):
        return is_sentinel(self.display)

    def _current_value(self):
        """Current display as an operand; a sentinel reads as 0"""
        if self._display_is_error():
            return 0.0
        return parse_number(self.display)

    def _append(self, char):
        current = "0" if self._display_is_error() else self.display

        if current == "0" and char != ".":
            self._set_display(char)
            return

        # Prevent multiple decimal points
        if char == "." and "." in current:
            return

        if len(current) >= config.MAX_INPUT_LENGTH:
            logger.debug("Input limit of %d characters reached", config.MAX_INPUT_LENGTH)
            return

        self._set_display(current + char)

    def _evaluate(self, pending, right):
        """Run the pending operation against `right` and log it to history"""
        result = self.engine.calculate(pending.previous_value, right, pending.operator)
        description = describe_operation(pending.previous_value, pending.operator, right)
        self.memory.record(description, result)
        logger.debug("Evaluated %s -> %s", description, format_result(result))
        return result, description

    # Keypad

    def input_digit(self, digit):
        """Input a number digit"""
        if not isinstance(digit, str) or len(digit) != 1 or digit not in DIGITS:
            logger.warning("Ignoring non-digit input: %r", digit)
            return

        if isinstance(self.state, (PendingOperator, JustCalculated)):
            self._set_display(digit)
        else:
            self._append(digit)

        self.state = Accumulating(self.state.pending)

    def input_decimal(self):
        """Input decimal point"""
        if isinstance(self.state, (PendingOperator, JustCalculated)):
            self._set_display("0.")
        else:
            self._append(".")

        self.state = Accumulating(self.state.pending)

    def input_operator(self, symbol):
        """Select an operator, evaluating any complete pending operation first"""
        operator = normalize_operator(symbol)
        if operator is None:
            logger.warning("Ignoring unknown operator: %r", symbol)
            return

        pending = self.state.pending
        current = self._current_value()

        if pending is None or isinstance(self.state, PendingOperator):
            # First operator, or re-selecting without a second operand
            left = current
        else:
            result, description = self._evaluate(pending, current)
            if not result.is_ok:
                self._set_display(result.kind.text)
                self.expression = f"{description} ="
                self.state = JustCalculated()
                return
            left = result.value
            self._set_display(format_number(left))

        self.state = PendingOperator(PendingOperation(left, operator))
        self.expression = f"{format_number(left)} {operator.value}"

    def equals(self):
        """Evaluate the pending operation"""
        pending = self.state.pending
        if pending is None:
            return

        result, description = self._evaluate(pending, self._current_value())
        self._set_display(format_result(result))
        self.expression = f"{description} ="
        self.state = JustCalculated()

    def clear(self):
        """Clear calculator completely; memory and history are kept"""
        self.display = "0"
        self.expression = ""
        self.state = Idle()
        logger.info("Calculator cleared")

    def delete(self):
        """Delete last input character"""
        if isinstance(self.state, PendingOperator):
            return

        if self._display_is_error():
            self.clear()
            return

        raw = remove_thousands_separator(self.display)[:-1]
        # Keep trimming partial exponents or a lone sign until the numeral parses again
        while raw and not math.isfinite(parse_number(raw)):
            raw = raw[:-1]

        self._set_display(raw or "0")

    def percentage(self):
        """Convert the displayed value to a percentage in place"""
        value = self._current_value()
        result = self.engine.percentage(value)

        self._set_display(format_result(result))
        self.expression = describe_operation(value, "percentage")

        # The pending operator survives, a later equals applies it to the converted value
        if not isinstance(self.state, PendingOperator):
            self.state = JustCalculated(self.state.pending)

    # Memory keys

    def memory_store(self):
        """Store the displayed value (MS)"""
        self.memory.store(parse_number(self.display))

    def memory_recall(self):
        """Show the memory value as a finished operand (MR)"""
        self._set_display(format_number(self.memory.recall()))
        self.state = JustCalculated(self.state.pending)

    def memory_clear(self):
        """Clear memory (MC)"""
        self.memory.clear_memory()

    def memory_add(self):
        """Add the displayed value to memory (M+)"""
        self.memory.add_to_memory(parse_number(self.display))

    def memory_subtract(self):
        """Subtract the displayed value from memory (M-)"""
        self.memory.subtract_from_memory(parse_number(self.display))

    def has_memory(self):
        return self.memory.has_value()

    # Read-only views

    def get_display_value(self):
        return self.display

    def get_expression_label(self):
        return self.expression

    def get_history(self, limit=config.DEFAULT_HISTORY_LIMIT):
        return self.memory.get_history(limit)

    def snapshot(self):
        """Current display state for the UI layer"""
        return {
            'display': self.display,
            'expression': self.expression,
            'has_memory': self.has_memory(),
            'state': type(self.state).__name__,
        }
