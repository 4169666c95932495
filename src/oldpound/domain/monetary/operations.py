"""Function-style API over `Money`.

Each function delegates to the matching `Money` method, so both styles behave the same:

    >>> from oldpound.domain.monetary import operations as lsd
    >>> lsd.format(lsd.divide(lsd.parse("18p 16s 1d"), 15))
    '1p 5s 0d (1s 1d)'
"""
from __future__ import annotations

from oldpound.domain.monetary.money import Money

__all__ = ["parse", "format", "to_pence", "from_pence", "sum", "subtract", "multiply", "divide"]


def parse(text: str) -> Money:
    """Parse text like '5p 17s 8d'. Raises `FormatError` on malformed input."""
    return Money.from_str(text)


def format(money: Money) -> str:
    """Render $money as 'Xp Ys Zd', with a parenthesized remainder if it has one."""
    return money.to_str()


def to_pence(money: Money) -> int:
    return money.to_pence()


def from_pence(total_pence: int, remainder: int = 0) -> Money:
    return Money.from_pence(total_pence, remainder)


def sum(a: Money, b: Money) -> Money:
    return a.sum(b)


def subtract(a: Money, b: Money) -> Money:
    return a.subtract(b)


def multiply(a: Money, factor: int) -> Money:
    return a.multiply(factor)


def divide(a: Money, divisor: int) -> Money:
    return a.divide(divisor)
