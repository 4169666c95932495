"""Exceptions raised by pre-decimal money parsing and arithmetic."""


class FormatError(ValueError):
    """Raised when text does not follow the "Xp Ys Zd" pattern."""
    pass


class NegativeResultError(ArithmeticError):
    """Raised when an operation would produce a negative amount of money."""
    pass


class DivisionByZeroError(ZeroDivisionError):
    """Raised when money is divided by zero."""
    pass
