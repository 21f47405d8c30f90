# error.py


class MathError(Exception):
    def __init__(self, message, code="9999", equation=None, position=None):
        super().__init__(message)
        self.message = message
        self.code = code
        self.equation = equation
        self.position = position

    def __str__(self):
        return f"{self.code}: {self.message}"


# --- Lexer ---

class LexError(MathError):
    pass

class UnexpectedCharacter(LexError):
    pass

class MalformedNumber(LexError):
    pass


# --- Parser ---

class ParseError(MathError):
    pass

class UnbalancedParens(ParseError):
    pass

class ExpectedOpenParen(ParseError):
    pass

class UnexpectedToken(ParseError):
    pass

class UnexpectedEnd(ParseError):
    pass

class UnknownIdentifier(ParseError):
    pass


# --- Evaluation ---

class EvalError(MathError):
    pass

class DomainError(EvalError):
    pass

class InfiniteResult(EvalError):
    def __init__(self, message, value, code="3026", equation=None):
        super().__init__(message, code=code, equation=equation)
        self.value = value


class ConfigurationError(MathError):
    pass



Error_Dictionary = {

    "2" : "Scientific Calculation Error",
    "3" : "Calculator Error",
    "5" : "Configuration Error",
    "9" : "Unexpected Error"

}

#Error Messages are structured in:
# 1. Digit: Main Error
# 2. Digit: Specification
# 3. and 4. Digit: Error Number



ERROR_MESSAGES = {
    "2002" : "Result is not a number (domain error): ", # + Given Problem

    "3001" : "Unexpected character: ", # + character
    "3008" : "More than one '.' in one number.",
    "3009" : "Missing ')'. ",
    "3010" : "Missing '(' after function: ", # + function name
    "3011" : "Unexpected Token: ", # + Token
    "3026" : "Number too big.",
    "3027" : "Missing Number.",
    "3031" : "Unknown identifier: ", # + identifier

    "5001" : "Invalid setting: ", # + key

    "9999" : "Unexpected Error: " #+error
}


def describe(code):
    """Return the main error area and the message template for an error code."""
    area = Error_Dictionary.get(str(code)[:1], Error_Dictionary["9"])
    return area, ERROR_MESSAGES.get(str(code), ERROR_MESSAGES["9999"])
