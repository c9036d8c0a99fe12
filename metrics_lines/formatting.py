"""Locale independent number formatting for metric lines"""
import math
from decimal import Decimal

# Values outside of this range are written in exponential notation
EXPONENTIAL_UPPER_BOUND = 1e15
EXPONENTIAL_LOWER_BOUND = 1e-15


def format_double(value: float) -> str:
    """Format a float the way the ingest endpoint expects it.

    Uses the shortest representation that round-trips to the same float.
    Zero (including negative zero) is written as ``0``, very large and very
    small magnitudes as ``<mantissa>E<+/-exponent>`` and everything else in
    positional notation without trailing zeros.
    """
    value = float(value)
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "Infinity" if value > 0 else "-Infinity"
    if value == 0:
        return "0"

    magnitude = abs(value)
    if magnitude < EXPONENTIAL_LOWER_BOUND or magnitude > EXPONENTIAL_UPPER_BOUND:
        return _format_exponential(value)
    return _format_positional(value)


def _format_positional(value: float) -> str:
    text = format(Decimal(repr(value)), "f")
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    return text


def _format_exponential(value: float) -> str:
    sign, digits, exponent = Decimal(repr(value)).as_tuple()
    digits_text = "".join(str(digit) for digit in digits)
    power = len(digits_text) - 1 + exponent

    digits_text = digits_text.rstrip("0") or "0"
    # always keep at least one fractional digit in the mantissa: 1e100 -> 1.0E+100
    mantissa = f"{digits_text[0]}.{digits_text[1:] or '0'}"
    return f"{'-' if sign else ''}{mantissa}E{power:+d}"
