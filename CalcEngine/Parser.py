# Parser.py
"""
Recursive-descent parser producing the expression AST.

Grammar (loosest binding first)
-------------------------------
    expression := term (('+' | '-') term)*
    term       := unary (('*' | '/') unary)*
    unary      := ('-' | '+') unary | power
    power      := postfix ('**' unary)?        right-associative
    postfix    := primary '%'*
    primary    := NUMBER | CONSTANT | FUNCTION '(' expression ')' | '(' expression ')'

Unary minus binds looser than '**', so '-2 ** 2' is -(2 ** 2) = -4.
'%' divides its immediate operand by 100: '200 * 10%' is 20.
"""

import logging

from . import error as E
from . import Lexer
from .ScientificEngine import CONTEXT, isConstant, isFunction

logger = logging.getLogger(__name__)


# -----------------------------
# AST node types
# -----------------------------

class Number:
    """Numeric literal."""
    def __init__(self, value):
        self.value = float(value)

    def __eq__(self, other):
        return isinstance(other, Number) and self.value == other.value

    def __repr__(self):
        return f"Number({self.value!r})"


class Constant:
    """Named constant such as PI or E."""
    def __init__(self, name):
        self.name = name

    def __eq__(self, other):
        return isinstance(other, Constant) and self.name == other.name

    def __repr__(self):
        return f"Constant('{self.name}')"


class UnaryOp:
    """Prefix sign: operator is '-' or '+'."""
    def __init__(self, operator, operand):
        self.operator = operator
        self.operand = operand

    def __eq__(self, other):
        return (isinstance(other, UnaryOp) and self.operator == other.operator
                and self.operand == other.operand)

    def __repr__(self):
        return f"UnaryOp({self.operator!r}, {self.operand})"


class BinOp:
    """Binary operation: left <operator> right."""
    def __init__(self, left, operator, right):
        self.left = left
        self.operator = operator
        self.right = right

    def __eq__(self, other):
        return (isinstance(other, BinOp) and self.operator == other.operator
                and self.left == other.left and self.right == other.right)

    def __repr__(self):
        return f"BinOp({self.operator!r}, left={self.left}, right={self.right})"


class FunctionCall:
    """Application of a one-argument scientific function."""
    def __init__(self, name, argument):
        self.name = name
        self.argument = argument

    def __eq__(self, other):
        return (isinstance(other, FunctionCall) and self.name == other.name
                and self.argument == other.argument)

    def __repr__(self):
        return f"FunctionCall('{self.name}', {self.argument})"


class Percent:
    """Postfix percent: operand / 100."""
    def __init__(self, operand):
        self.operand = operand

    def __eq__(self, other):
        return isinstance(other, Percent) and self.operand == other.operand

    def __repr__(self):
        return f"Percent({self.operand})"


# -----------------------------
# Parser (recursive descent)
# -----------------------------

class Parser:
    """Consumes a token list produced by Lexer.tokenize."""

    def __init__(self, tokens, context=CONTEXT):
        self.tokens = tokens
        self.context = context
        self.index = 0

    # ---- token stream helpers ----

    def peek(self):
        return self.tokens[self.index]

    def advance(self):
        token = self.tokens[self.index]
        if token.kind != Lexer.END:
            self.index += 1
        return token

    def at_operator(self, *symbols):
        token = self.peek()
        return token.kind == Lexer.OPERATOR and token.value in symbols

    def unexpected(self, token):
        """Build the error for a token that cannot appear where it was found."""
        if token.kind == Lexer.END:
            return E.UnexpectedEnd("Missing Number.", code="3027", position=token.position)
        if token.kind == Lexer.RPAREN:
            return E.UnbalancedParens(f"Missing '(' for ')' at position {token.position}",
                                      code="3009", position=token.position)
        return E.UnexpectedToken(f"Unexpected token: {token.value!r} at position {token.position}",
                                 code="3011", position=token.position)

    # ---- grammar rules in precedence order ----

    def parse(self):
        """Parse the whole stream; None for an empty input."""
        if self.peek().kind == Lexer.END:
            return None
        tree = self.parse_expression()
        if self.peek().kind != Lexer.END:
            raise self.unexpected(self.peek())
        logger.debug("Final AST: %s", tree)
        return tree

    def parse_expression(self):
        """Addition and subtraction."""
        tree = self.parse_term()
        while self.at_operator("+", "-"):
            operator = self.advance().value
            tree = BinOp(tree, operator, self.parse_term())
        return tree

    def parse_term(self):
        """Multiplication and division."""
        tree = self.parse_unary()
        while self.at_operator("*", "/"):
            operator = self.advance().value
            tree = BinOp(tree, operator, self.parse_unary())
        return tree

    def parse_unary(self):
        """Leading '+'/'-', looser than '**'."""
        if self.at_operator("+", "-"):
            operator = self.advance().value
            return UnaryOp(operator, self.parse_unary())
        return self.parse_power()

    def parse_power(self):
        """Exponentiation; the exponent may carry its own sign (2 ** -1)."""
        base = self.parse_postfix()
        if self.at_operator("**"):
            self.advance()
            return BinOp(base, "**", self.parse_unary())
        return base

    def parse_postfix(self):
        tree = self.parse_primary()
        while self.at_operator("%"):
            self.advance()
            tree = Percent(tree)
        return tree

    def parse_primary(self):
        """Numbers, constants, function calls and sub-expressions in '()'."""
        token = self.advance()

        if token.kind == Lexer.NUMBER:
            return Number(token.value)

        if token.kind == Lexer.LPAREN:
            tree = self.parse_expression()
            self.expect_closing(token)
            return tree

        if token.kind == Lexer.IDENTIFIER:
            name = token.value
            if isConstant(name, self.context):
                return Constant(name)
            if isFunction(name, self.context):
                if self.peek().kind != Lexer.LPAREN:
                    raise E.ExpectedOpenParen(f"Missing opening parenthesis after function {name}",
                                              code="3010", position=self.peek().position)
                opening = self.advance()
                argument = self.parse_expression()
                self.expect_closing(opening)
                return FunctionCall(name, argument)
            raise E.UnknownIdentifier(f"Unknown identifier: {name}", code="3031",
                                      position=token.position)

        # An operand is required here, so even ')' is a misplaced token ("()", "(2+)")
        if token.kind == Lexer.END:
            raise self.unexpected(token)
        raise E.UnexpectedToken(f"Unexpected token: {token.value!r} at position {token.position}",
                                code="3011", position=token.position)

    def expect_closing(self, opening):
        token = self.peek()
        if token.kind == Lexer.RPAREN:
            self.advance()
            return
        if token.kind == Lexer.END:
            raise E.UnbalancedParens(f"Missing closing parenthesis for '(' at position {opening.position}",
                                     code="3009", position=opening.position)
        raise self.unexpected(token)


def parse(tokens, context=CONTEXT):
    """Parse a token list into an AST root (None when the input was empty)."""
    return Parser(tokens, context).parse()
