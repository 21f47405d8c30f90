# Evaluator.py
"""
Tree-walking evaluator for the expression AST.

All arithmetic is IEEE-754 double arithmetic: division by zero and overflow
give infinities, invalid operations give NaN. Nothing here raises for a
numeric reason; classification happens in MathEngine.calculate.
"""

import math

from . import error as E
from . import Parser as P
from .ScientificEngine import CONTEXT


def divide(left_value, right_value):
    """IEEE division: x/0 is a signed infinity, 0/0 is NaN."""
    if right_value == 0:
        if left_value == 0 or math.isnan(left_value):
            return math.nan
        return math.copysign(math.inf, left_value) * math.copysign(1.0, right_value)
    return left_value / right_value


def power(base, exponent):
    """Real exponentiation; never returns a complex number."""
    try:
        return math.pow(base, exponent)
    except OverflowError:
        # Negative base with an odd integral exponent keeps its sign
        if base < 0 and exponent == int(exponent) and int(exponent) % 2 == 1:
            return -math.inf
        return math.inf
    except ValueError:
        if base == 0 and exponent < 0:
            return math.inf
        # Fractional power of a negative base
        return math.nan


def apply_binary(operator, left_value, right_value):
    if operator == '+':
        return left_value + right_value
    elif operator == '-':
        return left_value - right_value
    elif operator == '*':
        return left_value * right_value
    elif operator == '/':
        return divide(left_value, right_value)
    elif operator == '**':
        return power(left_value, right_value)
    else:
        raise E.EvalError(f"Unknown operator: {operator}", code="3011")


def evaluate(node, context=CONTEXT):
    """Return the float value of an AST node."""
    if isinstance(node, P.Number):
        return node.value

    elif isinstance(node, P.Constant):
        return float(context[node.name])

    elif isinstance(node, P.UnaryOp):
        operand = evaluate(node.operand, context)
        return -operand if node.operator == '-' else operand

    elif isinstance(node, P.BinOp):
        left_value = evaluate(node.left, context)
        right_value = evaluate(node.right, context)
        return apply_binary(node.operator, left_value, right_value)

    elif isinstance(node, P.Percent):
        return evaluate(node.operand, context) / 100

    elif isinstance(node, P.FunctionCall):
        argument = evaluate(node.argument, context)
        return float(context[node.name](argument))

    raise E.EvalError(f"Cannot evaluate node: {node!r}", code="9999")
