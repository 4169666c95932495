"""Arithmetic for pre-decimal UK money.

`sum` and `format` are not re-exported here to avoid shadowing the builtins; use
`oldpound.domain.monetary.operations` for the full function API.
"""

__version__ = "0.0.1"

from oldpound.domain.monetary.money import Money
from oldpound.domain.monetary.exceptions import DivisionByZeroError, FormatError, NegativeResultError
from oldpound.domain.monetary.operations import parse, subtract, multiply, divide

__all__ = ["Money", "FormatError", "NegativeResultError", "DivisionByZeroError", "parse", "subtract", "multiply", "divide"]
