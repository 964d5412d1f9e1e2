# Operators.py
"""""
Operator table and input keys for the Desktop Calculator.

Operator
--------
Every operator carries its display glyph (what the button / label shows),
its canonical symbol (what is stored in the equation buffer) and a precedence
rank. Glyph <-> symbol is a one-to-one mapping.

Key
---
Every input the builder understands, in the order of the button grid.
"""""

from enum import Enum


class Operator(Enum):
    MULTIPLY = ("×", "*", 2)
    DIVIDE = ("÷", "/", 2)
    ADD = ("+", "+", 1)
    SUBTRACT = ("-", "-", 1)
    SQUARE_ROOT = ("√", "square", 1)
    POWER_TWO = ("X²", "power2", 3)
    POWER_Y = ("Xʸ", "XY", 0)
    PLUS_MINUS = ("±", "+-", 0)

    def __init__(self, glyph, symbol, precedence):
        self.glyph = glyph
        self.symbol = symbol
        self.precedence = precedence


# Binary operators that may appear as a single character inside an equation
BINARY_OPERATORS = (Operator.MULTIPLY, Operator.DIVIDE, Operator.ADD, Operator.SUBTRACT)


def get_glyph(symbol):
    """Return the display glyph for a canonical symbol, or None if unknown."""
    for operator in Operator:
        if operator.symbol == symbol:
            return operator.glyph
    return None


def get_symbol(glyph):
    """Return the canonical symbol for a display glyph, or None if unknown."""
    for operator in Operator:
        if operator.glyph == glyph:
            return operator.symbol
    return None


def get_char_symbol(char):
    """Map a one-character glyph to the first character of its symbol.

    Any other character is returned unchanged, so the parser can read
    display text ('3×4') and canonical text ('3*4') alike.
    The square-root glyph is left alone; the parser resolves it as a function name.
    """
    if char == Operator.SQUARE_ROOT.glyph:
        return char
    symbol = get_symbol(char)
    if symbol is None:
        return char
    return symbol[0]


def get_precedence(value):
    """Precedence of an operator given by symbol or glyph; None if unknown."""
    for operator in Operator:
        if value == operator.symbol or value == operator.glyph:
            return operator.precedence
    return None


def is_operator(char):
    """True for the four binary operators, in canonical or glyph form."""
    if not char:
        return False
    for operator in BINARY_OPERATORS:
        if char == operator.symbol or char == operator.glyph:
            return True
    return False


def to_display(equation):
    """Render a canonical equation with display glyphs, e.g. '3*square(9)' -> '3×√(9)'."""
    display = equation.replace(Operator.SQUARE_ROOT.symbol, Operator.SQUARE_ROOT.glyph)
    for operator in (Operator.MULTIPLY, Operator.DIVIDE):
        display = display.replace(operator.symbol, operator.glyph)
    return display


class Key(Enum):
    PARENTHESES = "( )"
    CE = "CE"
    CLEAR = "C"
    DELETE = "Del"
    POWER_TWO = Operator.POWER_TWO.symbol
    POWER_Y = Operator.POWER_Y.symbol
    SQUARE_ROOT = Operator.SQUARE_ROOT.symbol
    DIVIDE = Operator.DIVIDE.symbol
    SEVEN = "7"
    EIGHT = "8"
    NINE = "9"
    MULTIPLY = Operator.MULTIPLY.symbol
    FOUR = "4"
    FIVE = "5"
    SIX = "6"
    SUBTRACT = Operator.SUBTRACT.symbol
    ONE = "1"
    TWO = "2"
    THREE = "3"
    ADD = Operator.ADD.symbol
    PLUS_MINUS = Operator.PLUS_MINUS.symbol
    ZERO = "0"
    DOT = "."
    EQUALS = "="
    # Keyboard only, not part of the button grid
    OPEN_PARENTHESIS = "("
    CLOSE_PARENTHESIS = ")"

    @property
    def token(self):
        return self.value

    @property
    def label(self):
        """Text of the button: the operator glyph where there is one."""
        glyph = get_glyph(self.value)
        if glyph is None:
            return self.value
        return glyph

    @property
    def is_digit(self):
        return self.value.isdigit()

    @classmethod
    def from_token(cls, text):
        """Return the Key for a token (or its glyph), None if there is none."""
        for key in cls:
            if key.value == text or key.label == text:
                return key
        return None


# Keys shown on the 6x4 button grid, row by row
BUTTON_KEYS = [key for key in Key if key not in (Key.OPEN_PARENTHESIS, Key.CLOSE_PARENTHESIS)]
