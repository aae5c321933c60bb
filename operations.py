"""
Arithmetic Engine for TallyUp
Handles all calculator arithmetic; failures come back as Err results, never exceptions
"""
import logging
import math
import sys
from enum import Enum

import config
from number_formatter import format_number
from results import Err, ErrorKind, Ok

logger = logging.getLogger(__name__)


class Operator(Enum):
    ADD = "+"
    SUBTRACT = "-"
    MULTIPLY = "×"
    DIVIDE = "÷"

    def __str__(self):
        return self.value


OPERATOR_ALIASES = {
    "*": Operator.MULTIPLY,
    "/": Operator.DIVIDE,
}

UNARY_DESCRIPTIONS = {
    "sqrt": "√{}",
    "reciprocal": "1/{}",
    "negate": "-{}",
    "percentage": "{}%",
}


def normalize_operator(symbol):
    """Map a symbol or alias onto an Operator, None if it is not one"""
    if isinstance(symbol, Operator):
        return symbol
    if not isinstance(symbol, str):
        return None
    if symbol in OPERATOR_ALIASES:
        return OPERATOR_ALIASES[symbol]
    try:
        return Operator(symbol)
    except ValueError:
        return None


def is_valid_operand(value):
    """True for finite ints and floats (bools excluded)"""
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return False
    try:
        return math.isfinite(value)
    except OverflowError:
        return False


def fix_precision(value, precision=config.SIGNIFICANT_DIGITS):
    """Collapse values below machine epsilon to zero, round the rest to `precision` significant digits"""
    if abs(value) < sys.float_info.epsilon:
        return 0.0
    rounded = float(f"{value:.{precision}g}")
    # Rounding up next to float max would overflow
    if math.isinf(rounded):
        return value
    return rounded


def _finish(value):
    if math.isnan(value):
        return Err(ErrorKind.ERROR)
    if math.isinf(value):
        return Err(ErrorKind.for_infinity(value))
    return Ok(fix_precision(value))


def describe_operation(a, operator, b=None):
    """Format an operation for the history log and expression line"""
    symbol = operator.value if isinstance(operator, Operator) else operator
    formatted_a = format_number(a)

    if b is None:
        return UNARY_DESCRIPTIONS.get(symbol, "{}").format(formatted_a)

    return f"{formatted_a} {symbol} {format_number(b)}"


class ArithmeticEngine:
    """Stateless arithmetic; one instance can be shared freely"""

    def calculate(self, a, b, operator):
        """Apply a binary operator to a and b"""
        op = normalize_operator(operator)
        if op is None:
            logger.warning("Unknown operator: %r", operator)
            return Err(ErrorKind.ERROR)

        handlers = {
            Operator.ADD: self.add,
            Operator.SUBTRACT: self.subtract,
            Operator.MULTIPLY: self.multiply,
            Operator.DIVIDE: self.divide,
        }
        result = handlers[op](a, b)

        if not result.is_ok:
            logger.debug("%s %s %s -> %s", a, op, b, result.kind.text)
        return result

    def add(self, a, b):
        if not (is_valid_operand(a) and is_valid_operand(b)):
            return Err(ErrorKind.ERROR)
        return _finish(float(a) + float(b))

    def subtract(self, a, b):
        if not (is_valid_operand(a) and is_valid_operand(b)):
            return Err(ErrorKind.ERROR)
        return _finish(float(a) - float(b))

    def multiply(self, a, b):
        if not (is_valid_operand(a) and is_valid_operand(b)):
            return Err(ErrorKind.ERROR)
        return _finish(float(a) * float(b))

    def divide(self, a, b):
        """Division with zero-division handling: 0/0 is Error, x/0 is a signed infinity"""
        if not (is_valid_operand(a) and is_valid_operand(b)):
            return Err(ErrorKind.ERROR)
        if b == 0:
            if a == 0:
                return Err(ErrorKind.ERROR)
            return Err(ErrorKind.for_infinity(a))
        return _finish(float(a) / float(b))

    def percentage(self, value):
        if not is_valid_operand(value):
            return Err(ErrorKind.ERROR)
        return _finish(float(value) / 100)

    def sqrt(self, value):
        if not is_valid_operand(value) or value < 0:
            # Complex numbers not supported
            return Err(ErrorKind.ERROR)
        return _finish(math.sqrt(value))

    def power(self, base, exponent):
        if not (is_valid_operand(base) and is_valid_operand(exponent)):
            return Err(ErrorKind.ERROR)
        try:
            result = math.pow(base, exponent)
        except (OverflowError, ValueError):
            return Err(ErrorKind.ERROR)
        if not math.isfinite(result):
            return Err(ErrorKind.ERROR)
        return Ok(fix_precision(result))

    def reciprocal(self, value):
        if not is_valid_operand(value) or value == 0:
            return Err(ErrorKind.ERROR)
        return _finish(1 / float(value))

    def negate(self, value):
        if not is_valid_operand(value):
            return Err(ErrorKind.ERROR)
        return Ok(fix_precision(-float(value)))

    def absolute(self, value):
        if not is_valid_operand(value):
            return Err(ErrorKind.ERROR)
        return Ok(fix_precision(abs(float(value))))
