"""Exceptions raised by the calculators."""


class CalculatorError(Exception):
    """Base class for calculator failures."""


class InvalidInput(CalculatorError, ValueError):
    """A precondition on the inputs was violated."""


class NumericError(CalculatorError, ArithmeticError):
    """The arithmetic produced an overflow, NaN or infinite value."""
