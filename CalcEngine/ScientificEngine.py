# ScientificEngine
"""
Constants and scientific functions available to expressions.

Every function takes one float and returns a float. Out-of-domain arguments
produce NaN and overflow produces infinity, following IEEE-754 rather than
raising, so the formatter can classify the outcome.
"""
import math
from types import MappingProxyType


# Largest n whose factorial still fits into a double
MAX_FACTORIAL = 170


def ieee(func):
    """Wrap a math function so domain errors give NaN and overflow gives inf."""
    def wrapper(x):
        if math.isnan(x):
            return math.nan
        try:
            return func(x)
        except ValueError:
            return math.nan
        except OverflowError:
            return math.inf
    wrapper.__name__ = func.__name__
    wrapper.__doc__ = func.__doc__
    return wrapper


def fact(n):
    """Factorial of a non-negative integral value; NaN for anything else."""
    if math.isnan(n) or n < 0:
        return math.nan
    if math.isinf(n):
        return math.inf
    if n != int(n):
        return math.nan
    if n > MAX_FACTORIAL:
        return math.inf
    return float(math.factorial(int(n)))


def log(x):
    """Base-10 logarithm."""
    return math.log10(x)


def ln(x):
    """Natural logarithm."""
    return math.log(x)


# Trigonometric functions take radians; degrees are converted by whoever
# builds the expression, e.g. sin(30 * PI / 180).
FUNCTIONS = {
    "sin": ieee(math.sin),
    "cos": ieee(math.cos),
    "tan": ieee(math.tan),
    "sqrt": ieee(math.sqrt),
    "log": ieee(log),
    "log10": ieee(log),
    "ln": ieee(ln),
    "abs": ieee(math.fabs),
    "fact": fact,
}

CONSTANTS = {
    "PI": math.pi,
    "E": math.e,
}


def build_context():
    """Return the read-only name -> constant/function table."""
    table = dict(CONSTANTS)
    table.update(FUNCTIONS)
    return MappingProxyType(table)


CONTEXT = build_context()


def isFunction(name, context=CONTEXT):
    return callable(context.get(name))


def isConstant(name, context=CONTEXT):
    return name in context and not callable(context[name])
