# EquationBuilder.py
"""""
Builds the equation one key at a time.

The equation is a plain string in canonical symbols ('3*square(9)'); the
single space EMPTY means nothing has been entered yet. apply_input never
looks further back than the last two characters (and the parenthesis
counts), so a finished equation can still be malformed. MathEngine decides
that when '=' is pressed.
"""""

from typing import NamedTuple

from . import MathEngine
from . import Operators
from . import error as E
from .MathEngine import isDigit
from .Operators import Key

EMPTY = " "

NEGATIVE_GROUP = "(-"


class CalculatorState(NamedTuple):
    """Everything the UI shows: equation label, its error colour and the result label."""
    equation: str = EMPTY
    error: bool = False
    result: str = "0"


def _as_key(key):
    if isinstance(key, Key):
        return key
    return Key.from_token(key)


def _text(equation):
    # The sentinel never becomes part of an equation
    if equation == EMPTY:
        return ""
    return equation


# -----------------------------
# Single rules
# -----------------------------

def delete_character(equation):
    """Remove the last character; an emptied equation goes back to EMPTY."""
    if equation == EMPTY:
        return equation
    new_equation = equation[:-1]
    if new_equation == "":
        return EMPTY
    return new_equation


def negate(equation):
    """Toggle a negative group at the end of the equation.

    Only the last digit is wrapped: '12' becomes '1(-2'.
    """
    if equation == EMPTY:
        return NEGATIVE_GROUP

    last = equation[-1]
    if equation.endswith(NEGATIVE_GROUP):
        return equation[:-2] or EMPTY

    elif Operators.is_operator(last):
        return equation + NEGATIVE_GROUP

    elif isDigit(last):
        if len(equation) == 3 and equation[1] == '-' and equation[0] == '(':
            return last
        return equation[:-1] + NEGATIVE_GROUP + last

    return equation


def add_power(equation, exponent_group):
    """Append '^(2)' or '^(' after a digit or ')'; anything else is ignored."""
    last = equation[-1]
    if not isDigit(last) and last != ')':
        if MathEngine.debug == True:
            print(f"Power ignored after '{last}'")
        return equation
    return equation + '^' + exponent_group


def add_square_root(equation):
    return _text(equation) + Operators.Operator.SQUARE_ROOT.symbol + '('


def add_parentheses(equation):
    """Open a group when the counts are balanced or nothing can be closed yet, else close one."""
    text = _text(equation)
    lcount = text.count('(')
    rcount = text.count(')')
    last = text[-1:]

    if lcount == rcount:
        return text + '('
    elif last == '(':
        return text + '('
    elif Operators.is_operator(last):
        return text + '('
    else:
        return text + ')'


def add_zero_if_dot(equation, token):
    """Complete a number that ends in '.'; returns None when the rule does not apply."""
    if not equation.endswith('.'):
        return None

    before_dot = equation[-2:-1]
    if isDigit(before_dot):
        if Operators.is_operator(token):
            # 3. + '*' -> 3.0*
            return equation + '0' + token
        if isDigit(token):
            return equation + token
    elif isDigit(token):
        # lone '.' -> 0.<digit>
        return equation[:-1] + '0.' + token
    return None


def replace_operator(equation, token):
    """Replace the last operator by a new one; returns None when the rule does not apply."""
    if Operators.is_operator(equation[-1]) and Operators.is_operator(token):
        return equation[:-1] + token
    return None


def append_token(equation, token):
    if equation == EMPTY:
        # The equation may not start with an operator
        if Operators.is_operator(token):
            return equation
        return token

    new_equation = add_zero_if_dot(equation, token)
    if new_equation is not None:
        return new_equation

    new_equation = replace_operator(equation, token)
    if new_equation is not None:
        return new_equation

    return equation + token


def is_valid(equation):
    """True when '=' would produce a result."""
    try:
        MathEngine.evaluate(equation)
    except E.MathError:
        return False
    return True


def solve(state):
    """Evaluate the equation of a state.

    Returns (new_state, failure). On a MathError the equation and result are
    kept, the error flag is set and failure is the raised error; otherwise
    failure is None.
    """
    try:
        result = MathEngine.calculate(state.equation)
    except E.MathError as e:
        # Keep the equation so it can still be corrected
        return state._replace(error=True), e
    return state._replace(error=False, result=result), None


# -----------------------------
# Public entry points
# -----------------------------

def apply_input(equation, error, key):
    """Apply one key to (equation, error) and return the new pair.

    Unknown tokens leave the state untouched.
    """
    key = _as_key(key)
    if key is None:
        return equation, error

    if not equation:
        equation = EMPTY

    if key in (Key.CLEAR, Key.CE):
        return EMPTY, False

    elif key == Key.DELETE:
        return delete_character(equation), False

    elif key == Key.EQUALS:
        return equation, not is_valid(equation)

    elif key == Key.PLUS_MINUS:
        return negate(equation), error

    elif key == Key.POWER_TWO:
        return add_power(equation, "(2)"), error

    elif key == Key.POWER_Y:
        return add_power(equation, "("), error

    elif key == Key.SQUARE_ROOT:
        return add_square_root(equation), error

    elif key == Key.PARENTHESES:
        return add_parentheses(equation), False

    new_equation = append_token(equation, key.token)
    if key.is_digit or key in (Key.DOT, Key.OPEN_PARENTHESIS, Key.CLOSE_PARENTHESIS):
        error = False
    return new_equation, error


def press(state, key):
    """Apply one key to a CalculatorState; '=' also fills in the result."""
    key = _as_key(key)
    if key is None:
        return state

    if key == Key.EQUALS:
        return solve(state)[0]

    equation, error = apply_input(state.equation, state.error, key)
    if key == Key.CLEAR:
        return CalculatorState(equation, error, "0")
    return state._replace(equation=equation, error=error)
