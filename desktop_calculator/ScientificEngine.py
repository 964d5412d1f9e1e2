# ScientificEngine
"""""
Floating point primitives for the MathEngine.

Everything here follows IEEE 754 double behaviour: instead of raising
ZeroDivisionError / ValueError / OverflowError like Python's float operators,
the functions return inf, -inf or nan.
"""""
import math

from . import error as E


def isRoot(name):
    """Return True if name refers to the square root function ('square' or '√')."""
    return name == "square" or name == "√"


def divide(dividend, divisor):
    if divisor == 0:
        if dividend == 0 or math.isnan(dividend):
            return math.nan
        # Sign follows both operands, including a negative zero divisor
        return math.copysign(math.inf, dividend) * math.copysign(1.0, divisor)
    return dividend / divisor


def square_root(number):
    if number < 0:
        return math.nan
    return math.sqrt(number)


def power(base, exponent):
    try:
        return math.pow(base, exponent)

    except OverflowError:
        if base < 0 and _is_odd_integer(exponent):
            return -math.inf
        return math.inf

    except ValueError:
        # math.pow rejects 0 ** negative and negative ** fraction
        if base == 0:
            if _is_odd_integer(exponent):
                return math.copysign(math.inf, base)
            return math.inf
        return math.nan


def _is_odd_integer(value):
    return math.isfinite(value) and value == int(value) and int(value) % 2 == 1


def unknown_function(name, argument):
    """Apply the named function to an already evaluated argument."""
    if isRoot(name):
        return square_root(argument)
    raise E.UnknownFunction(name)
