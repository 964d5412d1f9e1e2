# MathEngine.py
"""""
Core calculation engine for the Desktop Calculator.

Pipeline
--------
1) Validation: cheap checks on the end of the equation (trailing operator,
   '/0', open parenthesis) before anything is parsed.
2) Parser (AST): recursive descent over the characters with one character of
   lookahead, building Number / UnaryOp / BinOp / Function nodes.
3) Evaluator: walks the AST with binary floating point (see ScientificEngine).
4) Formatter: converts the float to an exact Decimal, rounds to 2 places
   (half-even) and strips trailing zeros.
"""""

from decimal import Decimal, ROUND_HALF_EVEN, localcontext

from . import config_manager as config_manager
from . import Operators
from . import ScientificEngine
from . import error as E

# Debug toggle for optional prints in this module
debug = config_manager.load_setting_value("debug") == True

DIGITS = "0123456789"

# Result rounding: two fractional digits
ROUNDING_PATTERN = Decimal("0.01")


# -----------------------------
# Utilities / small helpers
# -----------------------------

def isDigit(char):
    """Return True for a single ASCII digit."""
    return char is not None and len(char) == 1 and char in DIGITS


def isLower(char):
    """Return True for a single lowercase ASCII letter (function names)."""
    return char is not None and len(char) == 1 and 'a' <= char <= 'z'


# -----------------------------
# AST node types
# -----------------------------

class Number:
    """AST node for a numeric literal."""
    def __init__(self, value):
        self.value = float(value)

    def evaluate(self):
        return self.value

    def __repr__(self):
        return f"Number({self.value!r})"


class UnaryOp:
    """AST node for unary '+' / '-'."""
    def __init__(self, operator, operand):
        self.operator = operator
        self.operand = operand

    def evaluate(self):
        value = self.operand.evaluate()
        if self.operator == '-':
            return -value
        return +value

    def __repr__(self):
        return f"UnaryOp({self.operator!r}, {self.operand})"


class BinOp:
    """AST node for a binary operation: left <operator> right."""
    def __init__(self, left, operator, right):
        self.left = left
        self.operator = operator
        self.right = right

    def evaluate(self):
        """Evaluate both subtrees (left first) and apply the operator."""
        left_value = self.left.evaluate()
        right_value = self.right.evaluate()

        if self.operator == '+':
            return left_value + right_value
        elif self.operator == '-':
            return left_value - right_value
        elif self.operator == '*':
            return left_value * right_value
        elif self.operator == '/':
            return ScientificEngine.divide(left_value, right_value)
        elif self.operator == '^':
            return ScientificEngine.power(left_value, right_value)
        else:
            raise E.UnexpectedCharacter(self.operator)

    def __repr__(self):
        return f"BinOp({self.operator!r}, left={self.left}, right={self.right})"


class Function:
    """AST node for a function call, e.g. square(9)."""
    def __init__(self, name, argument):
        self.name = name
        self.argument = argument

    def evaluate(self):
        return ScientificEngine.unknown_function(self.name, self.argument.evaluate())

    def __repr__(self):
        return f"Function({self.name!r}, {self.argument})"


# -----------------------------
# Parser (recursive descent)
# -----------------------------

class Parser:
    """Owns the cursor for one parse; create a new Parser for every equation.

    Grammar:
        expression := term (('+' | '-') term)*
        term       := factor (('*' | '/') factor)*
        factor     := ('+' | '-') factor
                    | ('(' expression ')' | number | function) ['^' factor]
        function   := name '(' expression ')' | name factor
    """

    def __init__(self, problem):
        self.problem = problem
        self.pos = -1
        self.ch = None
        self.next_char()

    def next_char(self):
        self.pos += 1
        if self.pos < len(self.problem):
            self.ch = Operators.get_char_symbol(self.problem[self.pos])
        else:
            self.ch = None

    def skip_spaces(self):
        while self.ch == ' ':
            self.next_char()

    def eat(self, char_to_eat):
        self.skip_spaces()
        if self.ch == char_to_eat:
            self.next_char()
            return True
        return False

    def parse(self):
        tree = self.parse_expression()
        if self.pos < len(self.problem):
            raise E.UnexpectedCharacter(self.ch)
        return tree

    def parse_expression(self):
        """Addition and subtraction."""
        tree = self.parse_term()
        while True:
            if self.eat('+'):
                tree = BinOp(tree, '+', self.parse_term())
            elif self.eat('-'):
                tree = BinOp(tree, '-', self.parse_term())
            else:
                return tree

    def parse_term(self):
        """Multiplication and division."""
        tree = self.parse_factor()
        while True:
            if self.eat('*'):
                tree = BinOp(tree, '*', self.parse_factor())
            elif self.eat('/'):
                tree = BinOp(tree, '/', self.parse_factor())
            else:
                return tree

    def parse_factor(self):
        """Unary signs, parentheses, numbers, functions and a trailing '^'."""
        if self.eat('+'):
            return UnaryOp('+', self.parse_factor())
        if self.eat('-'):
            return UnaryOp('-', self.parse_factor())

        self.skip_spaces()
        start = self.pos

        if self.eat('('):
            tree = self.parse_expression()
            if not self.eat(')'):
                raise E.MissingClosingParenthesis()

        elif isDigit(self.ch) or self.ch == '.':
            while isDigit(self.ch) or self.ch == '.':
                self.next_char()
            number_text = self.problem[start:self.pos]
            try:
                tree = Number(number_text)
            except ValueError:
                raise E.MalformedNumber(number_text)

        elif self.ch == Operators.Operator.SQUARE_ROOT.glyph or isLower(self.ch):
            if isLower(self.ch):
                while isLower(self.ch):
                    self.next_char()
            else:
                self.next_char()
            name = self.problem[start:self.pos]
            function = Operators.get_symbol(name) or name

            if not ScientificEngine.isRoot(function):
                raise E.UnknownFunction(name)

            if self.eat('('):
                argument = self.parse_expression()
                if not self.eat(')'):
                    raise E.MissingClosingParenthesis(function)
            else:
                argument = self.parse_factor()
            tree = Function(function, argument)

        else:
            raise E.UnexpectedCharacter(self.ch)

        # Right recursion makes '^' right associative: 2^3^2 = 2^(3^2)
        if self.eat('^'):
            tree = BinOp(tree, '^', self.parse_factor())
        return tree


# -----------------------------
# Validation
# -----------------------------

def validate(problem):
    """Reject equations that cannot be finished as typed.

    Only the end of the equation is looked at: '5/0' is rejected,
    '5/0*2' is left to the floating point rules.
    """
    last = problem[-1:]

    if Operators.is_operator(last):
        raise E.InvalidTrailingOperator(last)

    if last == "0" and Operators.get_char_symbol(problem[-2:-1]) == "/":
        raise E.DivisionByLiteralZero()

    if last == "(":
        raise E.UnclosedGroupAtEnd()


# -----------------------------
# Result formatting
# -----------------------------

def cleanup(ergebnis):
    """Convert a float result to a Decimal for display.

    Integral values keep no decimal places; anything else is rounded to two
    places (half-even) and trailing zeros are stripped. inf / nan pass through.
    """
    value = Decimal(ergebnis)
    if not value.is_finite():
        return value

    # A double can have up to 309 integer digits, quantize must not run out of precision
    with localcontext() as ctx:
        ctx.prec = 400

        if value == value.to_integral_value():
            # Also turns -0 into 0
            return value + 0

        gerundetes_ergebnis = value.quantize(ROUNDING_PATTERN, rounding=ROUND_HALF_EVEN)
        if gerundetes_ergebnis == 0:
            return Decimal(0)
        return gerundetes_ergebnis.normalize()


def format_result(ergebnis):
    """Render a cleaned up Decimal in plain notation ('100', never '1E+2')."""
    if ergebnis.is_nan():
        return "NaN"
    if ergebnis.is_infinite():
        return "-Infinity" if ergebnis.is_signed() else "Infinity"
    return format(ergebnis, "f")


# -----------------------------
# Public entry points
# -----------------------------

def evaluate(problem):
    """Validate, parse and evaluate; returns the rounded Decimal.

    Raises a MathError subclass (with .equation set) on any failure.
    """
    try:
        validate(problem)
        finaler_baum = Parser(problem).parse()

        if debug == True:
            print("Final AST:")
            print(finaler_baum)

        return cleanup(finaler_baum.evaluate())

    # Re-raise our domain errors after attaching the source equation
    except E.MathError as e:
        e.equation = problem
        if debug == True:
            print(f"Error {e.code}: {e.message}")
        raise e
    # Deeply nested input or a Decimal edge case: still a recoverable error
    except (ArithmeticError, RecursionError) as e:
        raise E.MathError(message=str(e), code="9999", equation=problem) from e


def calculate(problem):
    """Main API: equation text -> result text, e.g. '2+3*4' -> '14'."""
    return format_result(evaluate(problem))
