from .MathEngine import calculate, evaluate_expression, evaluate_translation
from .Formatter import format_result

__all__ = [
    "calculate",
    "evaluate_expression",
    "evaluate_translation",
    "format_result",
]
