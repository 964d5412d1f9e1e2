

class MathError(Exception):
    def __init__(self, message, code="9999", equation=None):
        super().__init__(message)
        self.message = message
        self.code = code
        self.equation = equation


class ValidationError(MathError):
    """Raised before parsing, when the equation cannot be evaluated as typed."""
    pass


class ParseError(MathError):
    pass


# --- Validation errors ---

class InvalidTrailingOperator(ValidationError):
    def __init__(self, operator, equation=None):
        super().__init__(f"Equation ends with operator '{operator}'.", code="3101", equation=equation)
        self.operator = operator


class DivisionByLiteralZero(ValidationError):
    def __init__(self, equation=None):
        super().__init__("Division by zero.", code="3102", equation=equation)


class UnclosedGroupAtEnd(ValidationError):
    def __init__(self, equation=None):
        super().__init__("Equation ends with an open parenthesis.", code="3103", equation=equation)


# --- Parse errors ---

class UnexpectedCharacter(ParseError):
    def __init__(self, char, equation=None):
        shown = "end of input" if char is None else repr(char)
        super().__init__(f"Unexpected: {shown}", code="3201", equation=equation)
        self.char = char


class MissingClosingParenthesis(ParseError):
    def __init__(self, function=None, equation=None):
        if function is None:
            message = "Missing ')'"
        else:
            message = f"Missing ')' after argument to {function}"
        super().__init__(message, code="3202", equation=equation)
        self.function = function


class UnknownFunction(ParseError):
    def __init__(self, name, equation=None):
        super().__init__(f"Unknown function: {name}", code="3203", equation=equation)
        self.name = name


class MalformedNumber(ParseError):
    def __init__(self, text, equation=None):
        super().__init__(f"Malformed number: {text}", code="3204", equation=equation)
        self.text = text


Error_Dictionary = {

    "3" : "Calculator Error",
    "4" : "UI Error",
    "5" : "Configuration Error",
    "9" : "Runtime Error"

}

#Error Messages are structured in:
# 1. Digit: Main Error
# 2. Digit: Specification (1 = validation, 2 = parser)
# 3. and 4. Digit: Error Number


ERROR_MESSAGES = {
    "3101" : "Equation ends with an operator.",
    "3102" : "Division by Zero",
    "3103" : "Missing value after '('.",

    "3201" : "Unexpected Token: ", # + Token
    "3202" : "Missing ')'. ",
    "3203" : "Unknown function: ", # + function name
    "3204" : "Invalid Number: ", # + number text

    "4001" : "Clipboard not available.",

    "5001" : "Settings could not be loaded or saved.",

    "9999" : "Unexpected Error: " #+error
}


def describe(error):
    """Return the user facing text for a MathError, e.g. 'Calculator Error 3102: Division by Zero'."""
    category = Error_Dictionary.get(error.code[:1], "Error")
    return f"{category} {error.code}: {ERROR_MESSAGES.get(error.code, 'Unknown error')}"
