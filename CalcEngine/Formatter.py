# Formatter.py
"""
Result formatting for the calculator display.

The display string is the shortest decimal that round-trips to the float,
written the way a calculator shows numbers (no trailing '.0', positional
notation between 1e-6 and 1e21). Long fractions are rounded to a fixed
number of decimal places, and values that are just floating point noise
around zero are shown as 0.
"""

import math
from decimal import Decimal, ROUND_HALF_UP, localcontext

DEFAULT_DECIMAL_PLACES = 8
DEFAULT_ZERO_THRESHOLD = 1e-10

# Positional notation is used for magnitudes in [1e-6, 1e21)
POSITIONAL_MIN = 1e-6
POSITIONAL_MAX = 1e21


# -----------------------------
# Utilities / small helpers
# -----------------------------

def shortest_string(value):
    """Shortest round-trip rendering of a finite float."""
    if value == 0:
        return "0"

    magnitude = abs(value)
    if POSITIONAL_MIN <= magnitude < POSITIONAL_MAX:
        # repr holds only the significant digits; normalize drops the '.0' of integral values
        return format(Decimal(repr(value)).normalize(), "f")

    # Exponent form: repr gives '1e-07' / '1.5e+21', the display wants '1e-7' / '1.5e+21'
    mantissa, exponent = repr(value).split("e")
    exponent = int(exponent)
    sign = "+" if exponent >= 0 else "-"
    return f"{mantissa}e{sign}{abs(exponent)}"


def fraction_digits(text):
    """Number of characters after the '.', 0 if there is none."""
    if "." not in text:
        return 0
    return len(text.split(".", 1)[1])


def round_places(value, decimal_places):
    """Round half-up on the exact binary value, like a fixed-point display would."""
    if decimal_places > 0:
        rundungs_muster = Decimal("1e-" + str(decimal_places))
    else:
        rundungs_muster = Decimal("1")
    with localcontext() as context:
        # Temporary precision boost so quantize never overflows the context
        context.prec = 50
        return float(Decimal(value).quantize(rundungs_muster, rounding=ROUND_HALF_UP))


# -----------------------------
# Result formatting
# -----------------------------

def format_result(value, settings=None):
    """Render a float as the canonical display string.

    Returns "Error" for NaN, "Infinity" for infinite values and a decimal string
    otherwise. Recognised settings: decimal_places, zero_threshold, signed_infinity.
    """
    settings = settings or {}
    decimal_places = settings.get("decimal_places", DEFAULT_DECIMAL_PLACES)
    zero_threshold = settings.get("zero_threshold", DEFAULT_ZERO_THRESHOLD)

    if math.isnan(value):
        return "Error"

    if math.isinf(value):
        if value < 0 and settings.get("signed_infinity", False):
            return "-Infinity"
        return "Infinity"

    if value != 0 and abs(value) < zero_threshold:
        return "0"

    text = shortest_string(value)
    if fraction_digits(text) > decimal_places and abs(value) < POSITIONAL_MAX:
        text = shortest_string(round_places(value, decimal_places))
    return text
