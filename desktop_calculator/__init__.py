"""Desktop Calculator: equation builder, expression engine and PySide6 window."""

from .EquationBuilder import CalculatorState, apply_input, press, solve
from .MathEngine import calculate, evaluate
from .Operators import Key, Operator

__all__ = ["CalculatorState", "Key", "Operator", "apply_input", "calculate", "evaluate", "press", "solve"]
