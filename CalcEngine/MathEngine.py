# MathEngine.py
"""
Core calculation engine for the scientific calculator.

Pipeline
--------
1) Lexer: converts a raw input string into a flat list of tokens.
2) Parser (AST): builds an Abstract Syntax Tree (recursive-descent, precedence aware).
3) Evaluator: walks the tree with IEEE double arithmetic and the scientific functions.
4) Formatter: renders the float as the display string.

Input text is never executed as code; only the closed set of operators and
functions in ScientificEngine can run.
"""

import logging
import math

from . import error as E
from . import Evaluator
from . import Formatter
from . import Lexer
from . import Parser
from .ScientificEngine import CONTEXT

logger = logging.getLogger(__name__)

# What the voice-command translator answers when it could not find a calculation
TRANSLATOR_SENTINEL = "ERROR"


# -----------------------------
# Internal entry point
# -----------------------------

def calculate(problem, context=CONTEXT):
    """Parse and evaluate, raising a MathError subclass on every failure.

    Empty input evaluates to 0.0. A NaN result raises DomainError and an
    infinite one raises InfiniteResult carrying the signed value.
    """
    try:
        tokens = Lexer.tokenize(problem)
        tree = Parser.parse(tokens, context)
        if tree is None:
            return 0.0

        ergebnis = Evaluator.evaluate(tree, context)

    # Attach the source equation to our own errors
    except E.MathError as e:
        e.equation = problem
        raise e
    except RecursionError:
        raise E.ParseError("Expression is nested too deeply.", code="9999", equation=problem)

    if math.isnan(ergebnis):
        raise E.DomainError(f"Result is not a number: {problem}", code="2002", equation=problem)
    if math.isinf(ergebnis):
        raise E.InfiniteResult("Number too big.", value=ergebnis, equation=problem)
    return ergebnis


# -----------------------------
# Public entry points
# -----------------------------

def evaluate_expression(raw_text, settings=None):
    """Main API: text -> display string. Never raises.

    Returns a formatted number, "Infinity" or "Error".
    """
    if raw_text is None:
        return "Error"

    try:
        ergebnis = calculate(raw_text)
        return Formatter.format_result(ergebnis, settings)

    except E.InfiniteResult as e:
        return Formatter.format_result(e.value, settings)
    except E.MathError as e:
        logger.debug("Calculation failed [%s]: %s (%r)", e.code, e.message, raw_text)
        return "Error"
    # The display only needs to know whether it worked
    except Exception:
        logger.warning("Unexpected error while evaluating %r", raw_text, exc_info=True)
        return "Error"


def evaluate_translation(expression, settings=None):
    """Evaluate the output of the natural-language translator.

    A missing answer, an empty one or the translator's ERROR sentinel all mean
    the command could not be understood and display "Error".
    """
    if expression is None:
        return "Error"
    expression = expression.strip()
    if not expression or expression == TRANSLATOR_SENTINEL:
        logger.debug("Translator returned no expression: %r", expression)
        return "Error"
    return evaluate_expression(expression, settings)
