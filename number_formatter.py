"""
Number Formatter for TallyUp
Converts between numeric values and the strings shown on the display
"""
import logging
import math
from decimal import Decimal

import config
from results import Ok

logger = logging.getLogger(__name__)

SENTINELS = (
    config.ERROR_TEXT,
    config.POSITIVE_INFINITY_TEXT,
    config.NEGATIVE_INFINITY_TEXT,
)


def format_number(value, max_decimals=config.MAX_DECIMALS):
    """Format a number for display"""
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return config.ERROR_TEXT

    try:
        value = float(value)
    except OverflowError:
        return config.ERROR_TEXT

    if math.isnan(value):
        return config.ERROR_TEXT
    if math.isinf(value):
        return config.POSITIVE_INFINITY_TEXT if value > 0 else config.NEGATIVE_INFINITY_TEXT

    magnitude = abs(value)

    # Very large and very small numbers go to scientific notation
    if magnitude >= config.SCIENTIFIC_UPPER or (value != 0 and magnitude < config.SCIENTIFIC_LOWER):
        return f"{value:.{config.EXPONENT_DIGITS}e}"

    # repr() gives the shortest form of the rounded float, Decimal keeps it out of e-notation
    rounded = round(value, max_decimals)
    formatted = _strip_trailing_zeros(format(Decimal(repr(rounded)), "f"))

    # Decided on the rounded value, 999.99999999999 shows as 1,000
    if abs(rounded) >= config.THOUSANDS_THRESHOLD:
        return add_thousands_separator(formatted)

    return formatted


def format_result(result):
    """Format an Ok/Err result: numbers through format_number, errors as their sentinel"""
    if isinstance(result, Ok):
        return format_number(result.value)
    return result.kind.text


def _strip_trailing_zeros(text):
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    if text == "-0":
        return "0"
    return text


def add_thousands_separator(text):
    """Insert separators into the integer part only"""
    integer, dot, fraction = text.partition(".")
    sign = "-" if integer.startswith("-") else ""
    grouped = f"{int(integer.lstrip('-')):,}".replace(",", config.THOUSANDS_SEPARATOR)
    return f"{sign}{grouped}{dot}{fraction}"


def remove_thousands_separator(text):
    return text.replace(config.THOUSANDS_SEPARATOR, "")


def parse_number(text):
    """
    Parse a display string back into a float.
    Unparseable text gives NaN; the infinity sentinels parse to signed infinity.
    """
    if isinstance(text, (int, float)) and not isinstance(text, bool):
        return float(text)

    cleaned = remove_thousands_separator(str(text).strip())
    if cleaned == config.ERROR_TEXT:
        return math.nan

    try:
        return float(cleaned)
    except (ValueError, OverflowError):
        logger.debug("Could not parse display value %r", text)
        return math.nan


def is_sentinel(text):
    return text in SENTINELS


def fit_display(text):
    """Switch over-long numerals to exponential notation"""
    if is_sentinel(text) or "e" in text.lower():
        return text

    raw = remove_thousands_separator(text)
    if len(raw) > config.MAX_INPUT_LENGTH:
        return f"{parse_number(raw):.{config.EXPONENT_DIGITS}e}"
    return text
