# Lexer.py
"""
Tokenizer for the scientific calculator.

Turns a raw input string (keypad text or translated voice command) into a flat
list of immutable tokens. Visual glyphs from the keypad are normalized here so
the parser only ever sees one spelling per operator.
"""

import logging
from collections import namedtuple

from . import error as E

logger = logging.getLogger(__name__)


# -----------------------------
# Token kinds
# -----------------------------

NUMBER = "NUMBER"
IDENTIFIER = "IDENTIFIER"
OPERATOR = "OPERATOR"
LPAREN = "LPAREN"
RPAREN = "RPAREN"
COMMA = "COMMA"
END = "END"

Token = namedtuple("Token", ["kind", "value", "position"])

# Keypad glyph -> canonical operator
Glyphs = {
    "×": "*",
    "·": "*",
    "÷": "/",
    "−": "-",
    "^": "**",
}

Operations = ["+", "-", "*", "/", "%"]

# Identifier spellings that map onto a canonical name
Aliases = {
    "e": "E",
    "pi": "PI",
    "π": "PI",
    "√": "sqrt",
}


# -----------------------------
# Utilities / small helpers
# -----------------------------

def isDigit(char):
    """Return True for an ASCII decimal digit."""
    return "0" <= char <= "9"


def isLetter(char):
    """Identifiers start with an ASCII letter or underscore."""
    return ("a" <= char <= "z") or ("A" <= char <= "Z") or char == "_"


def canonical_name(word):
    """Map an identifier to the name used in the evaluation context."""
    if word in Aliases:
        return Aliases[word]
    if word.lower() == "pi":
        return "PI"
    return word


def read_number(problem, b):
    """Read a numeric literal starting at index b.

    Returns:
        (float_value, index_after_literal)
    """
    start = b
    has_dot = False

    while b < len(problem) and (isDigit(problem[b]) or problem[b] == "."):
        if problem[b] == ".":
            if has_dot:
                raise E.MalformedNumber(f"More than one '.' in '{problem[start:b + 1]}'",
                                        code="3008", position=b)
            has_dot = True
        b += 1

    literal = problem[start:b]
    if literal == ".":
        raise E.MalformedNumber("A lone '.' is not a number.", code="3008", position=start)

    # Optional exponent: only when 'e' is followed by digits (1e5, 2.5E-3)
    if b < len(problem) and problem[b] in "eE":
        c = b + 1
        if c < len(problem) and problem[c] in "+-":
            c += 1
        if c < len(problem) and isDigit(problem[c]):
            while c < len(problem) and isDigit(problem[c]):
                c += 1
            literal = problem[start:c]
            b = c

    return float(literal), b


# -----------------------------
# Tokenizer
# -----------------------------

def tokenize(problem):
    """Convert raw input into a token list terminated by an END token.

    Notes:
    - '**' and the keypad '^' both become the power operator.
    - 'e' is Euler's number only as a whole token; 'sec' or 'exp' stay identifiers.
    """
    tokens = []
    b = 0

    while b < len(problem):
        current_char = problem[b]

        # --- Whitespace (ignored) ---
        if current_char.isspace():
            b += 1
            continue

        # --- Numbers: digits and decimal separator ---
        if isDigit(current_char) or current_char == ".":
            value, end = read_number(problem, b)
            tokens.append(Token(NUMBER, value, b))
            b = end
            continue

        # --- Identifiers: functions and constants ---
        if isLetter(current_char):
            end = b
            while end < len(problem) and (isLetter(problem[end]) or isDigit(problem[end])):
                end += 1
            tokens.append(Token(IDENTIFIER, canonical_name(problem[b:end]), b))
            b = end
            continue

        # --- Single glyph constants / functions ---
        if current_char in ("π", "√"):
            tokens.append(Token(IDENTIFIER, Aliases[current_char], b))
            b += 1
            continue

        # --- Operators ---
        operator = Glyphs.get(current_char, current_char)
        # Two multiplication signs in a row are the power operator, whichever glyphs they use
        if operator == "*" and b + 1 < len(problem) and Glyphs.get(problem[b + 1], problem[b + 1]) == "*":
            tokens.append(Token(OPERATOR, "**", b))
            b += 2
            continue

        if operator in Operations or operator == "**":
            tokens.append(Token(OPERATOR, operator, b))

        # --- Parentheses and separators ---
        elif current_char == "(":
            tokens.append(Token(LPAREN, "(", b))
        elif current_char == ")":
            tokens.append(Token(RPAREN, ")", b))
        elif current_char == ",":
            tokens.append(Token(COMMA, ",", b))

        else:
            raise E.UnexpectedCharacter(f"Unexpected character '{current_char}' at position {b}",
                                        code="3001", position=b)
        b += 1

    tokens.append(Token(END, None, len(problem)))
    logger.debug("tokens: %s", tokens)
    return tokens
