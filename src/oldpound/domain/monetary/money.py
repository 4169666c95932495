from __future__ import annotations

import logging
import re
from numbers import Integral
from dataclasses import dataclass

from oldpound.domain.monetary.denomination import Denomination, PENCE_IN_POUND, PENCE_IN_SHILLING
from oldpound.domain.monetary.exceptions import DivisionByZeroError, FormatError, NegativeResultError

logger = logging.getLogger(__name__)

# Everything except ASCII digits, '-' and '.' is dropped from a token before parsing.
# With '.' kept, "1.5p" cleans to "1.5" and fails `int()` rather than becoming 15.
_NON_NUMERIC_PATTERN = re.compile(r"[^0-9.\-]")

# Number of whitespace-separated parts in "Xp Ys Zd"
_TOKEN_COUNT = 3


def _as_int(name: str, value: object, function_name: str) -> int:
    """Return $value as a plain int, accepting any integral type (e.g. `numpy.int64`)."""
    # bool is an Integral subclass; reject it explicitly
    if isinstance(value, bool) or not isinstance(value, Integral):
        raise TypeError(f"Cannot call `{function_name}` because ${name} must be an int, but provided value is: {value!r}")
    return int(value)


def _truncated_divmod(dividend: int, divisor: int) -> tuple[int, int]:
    """Divide with the quotient truncated toward zero.

    Python's `divmod` floors, which gives e.g. `divmod(-13, 12) == (-2, 11)`. Here the
    quotient is truncated instead and the remainder takes the sign of $dividend, so
    `_truncated_divmod(-13, 12) == (-1, -1)`. The invariant
    `quotient * divisor + remainder == dividend` holds in both cases.
    """
    quotient = abs(dividend) // abs(divisor)
    if (dividend < 0) != (divisor < 0):
        quotient = -quotient
    return quotient, dividend - quotient * divisor


@dataclass(frozen=True)
class Money:
    """Immutable amount of pre-decimal UK money.

    Holds pounds, shillings and pence plus a `remainder` in pence, which is left over
    by `divide` and is zero otherwise. All arithmetic converts to a flat number of
    pence, computes with integers and converts back, so every result has shillings
    in [0, 20) and pence in [0, 12). Construction itself does not check ranges:
    denormalized values like `Money(0, 25, 0)` are accepted and convert faithfully.

    Example:
        >>> price = Money.from_str("5p 17s 8d")
        >>> str(price + Money.from_str("3p 4s 10d"))
        '9p 2s 6d'
        >>> str(price / 3)
        '1p 19s 2d (2d)'

    Attributes:
        pounds: Whole pounds.
        shillings: Shillings, conventionally in [0, 20).
        pence: Pence, conventionally in [0, 12).
        remainder: Pence left over from a division, shown in parentheses by `to_str`.
    """

    pounds: int
    shillings: int
    pence: int
    remainder: int = 0

    # region Init

    def __post_init__(self) -> None:
        for name in ("pounds", "shillings", "pence", "remainder"):
            # Use object.__setattr__ because dataclass is frozen
            object.__setattr__(self, name, _as_int(name, getattr(self, name), "Money.__init__"))

    @classmethod
    def zero(cls) -> Money:
        """Return `0p 0s 0d`."""
        return cls(0, 0, 0)

    # endregion

    # region Conversion

    def to_pence(self) -> int:
        """Return the whole amount as a flat number of pence.

        The `remainder` is not included. Out-of-range or negative components are
        taken as they are, e.g. `Money(0, 25, 0).to_pence() == 300`.
        """
        return (
            self.pence * Denomination.PENNY.pence
            + self.shillings * Denomination.SHILLING.pence
            + self.pounds * Denomination.POUND.pence
        )

    @classmethod
    def from_pence(cls, total_pence: int, remainder: int = 0) -> Money:
        """Split a flat number of pence into pounds, shillings and pence.

        Args:
            total_pence: Amount in pence. Expected to be non-negative; a negative
                amount splits into non-positive components (division truncates
                toward zero), which callers are expected to reject beforehand.
            remainder: Division remainder in pence, carried through unchanged.

        Returns:
            Money: New instance with shillings and pence in their conventional ranges.

        Raises:
            TypeError: If $total_pence or $remainder is not an int.
        """
        total_pence = _as_int("total_pence", total_pence, "Money.from_pence")
        remainder = _as_int("remainder", remainder, "Money.from_pence")

        pounds, rest = _truncated_divmod(total_pence, PENCE_IN_POUND)
        shillings, pence = _truncated_divmod(rest, PENCE_IN_SHILLING)
        return cls(pounds, shillings, pence, remainder)

    # endregion

    # region Parsing and formatting

    @classmethod
    def from_str(cls, text: str) -> Money:
        """Parse Money from a string like '12p 6s 10d'.

        The text is split on whitespace into exactly three tokens: pounds, shillings
        and pence, in that order. From each token every character other than digits,
        '-' and '.' is dropped, so any unit suffix is accepted and ignored. A
        fractional amount such as '1.5p' is rejected.

        Args:
            text: String representation.

        Returns:
            Money: Parsed value with `remainder` 0.

        Raises:
            TypeError: If $text is not a string.
            FormatError: If $text does not have three tokens, or a token holds no valid integer.
        """
        if not isinstance(text, str):
            raise TypeError(f"Cannot call `Money.from_str` because $text must be a str, but provided value is: {text!r}")

        tokens = text.split()
        if len(tokens) != _TOKEN_COUNT:
            logger.debug(f"Rejected $text '{text}' with {len(tokens)} token(s)")
            raise FormatError(f"Text with $text = '{text}' must be in format 'Xp Ys Zd' (3 parts separated by whitespace), but has {len(tokens)} part(s)")

        values = []
        for token in tokens:
            cleaned = _NON_NUMERIC_PATTERN.sub("", token)
            try:
                values.append(int(cleaned))
            except ValueError as e:
                logger.debug(f"Rejected token '{token}' in $text '{text}'")
                raise FormatError(f"Invalid part '{token}' in text '{text}': expected a whole number followed by an optional unit") from e

        pounds, shillings, pence = values
        return cls(pounds, shillings, pence)

    def to_str(self) -> str:
        """Return string like '1p 19s 2d', followed by the remainder in parentheses if any.

        The remainder is split into pounds, shillings and pence and only its non-zero
        parts are shown: a remainder of 13 pence gives '(1s 1d)', 2 pence gives '(2d)'.
        """
        result = f"{self.pounds}p {self.shillings}s {self.pence}d"
        remainder = self._format_remainder()
        return f"{result} ({remainder})" if remainder else result

    def _format_remainder(self) -> str:
        if self.remainder == 0:
            return ""
        parts = Money.from_pence(self.remainder)
        amounts = zip(Denomination, (parts.pounds, parts.shillings, parts.pence))
        return " ".join(denomination.format_amount(amount) for denomination, amount in amounts if amount != 0)

    # endregion

    # region Arithmetic

    def sum(self, addend: Money) -> Money:
        """Return this amount plus $addend.

        Raises:
            NegativeResultError: If the result is negative (only possible with negative components).
        """
        if not isinstance(addend, Money):
            raise TypeError(f"Cannot call `sum` because $addend must be a Money instance, but provided value is: {addend!r}")
        return self._checked_result("sum", self.to_pence() + addend.to_pence())

    def subtract(self, subtrahend: Money) -> Money:
        """Return this amount minus $subtrahend.

        Raises:
            NegativeResultError: If $subtrahend is larger than this amount.
        """
        if not isinstance(subtrahend, Money):
            raise TypeError(f"Cannot call `subtract` because $subtrahend must be a Money instance, but provided value is: {subtrahend!r}")
        return self._checked_result("subtract", self.to_pence() - subtrahend.to_pence())

    def multiply(self, multiplier: int) -> Money:
        """Return this amount multiplied by the whole number $multiplier.

        Raises:
            TypeError: If $multiplier is not an int.
            NegativeResultError: If the product is negative.
        """
        multiplier = _as_int("multiplier", multiplier, "multiply")
        return self._checked_result("multiply", self.to_pence() * multiplier)

    def divide(self, divisor: int) -> Money:
        """Divide this amount by the whole number $divisor.

        The quotient is truncated toward zero and the pence that do not divide evenly
        are kept in `remainder` of the result.

        Returns:
            Money: Quotient with the remainder attached.

        Raises:
            TypeError: If $divisor is not an int.
            DivisionByZeroError: If $divisor is 0.
            NegativeResultError: If the quotient is negative.
        """
        divisor = _as_int("divisor", divisor, "divide")

        # Raise: zero divisor is reported before any sign check
        if divisor == 0:
            logger.debug(f"Rejected division of {self} by zero")
            raise DivisionByZeroError(f"Cannot call `divide` because $divisor is 0 (dividend: {self})")

        quotient, remainder = _truncated_divmod(self.to_pence(), divisor)
        return self._checked_result("divide", quotient, remainder)

    def _checked_result(self, operation: str, total_pence: int, remainder: int = 0) -> Money:
        # Raise: negative amounts cannot be represented
        if total_pence < 0:
            logger.debug(f"Rejected negative result of `{operation}` on {self}: {total_pence} pence")
            raise NegativeResultError(f"Cannot call `{operation}` because result ({total_pence} pence) is negative")

        result = Money.from_pence(total_pence, remainder)
        logger.debug(f"`{operation}` on {self} produced {result}")
        return result

    def __add__(self, other):
        if not isinstance(other, Money):
            return NotImplemented
        return self.sum(other)

    def __sub__(self, other):
        if not isinstance(other, Money):
            return NotImplemented
        return self.subtract(other)

    def __mul__(self, other):
        if isinstance(other, bool) or not isinstance(other, Integral):
            return NotImplemented  # Money * Money and fractional factors are not supported
        return self.multiply(other)

    def __rmul__(self, other):
        """Right multiplication: int * Money."""
        return self.__mul__(other)

    def __truediv__(self, other):
        if isinstance(other, bool) or not isinstance(other, Integral):
            return NotImplemented
        return self.divide(other)

    # endregion

    # region Convenience

    def copy(
        self,
        *,
        pounds: int | None = None,
        shillings: int | None = None,
        pence: int | None = None,
        remainder: int | None = None,
    ) -> Money:
        """Return a new Money copied from this instance with optional overrides.

        Example:
            >>> Money(1, 2, 3).copy(pence=0)
            Money(1p 2s 0d, remainder=0)
        """
        return Money(
            pounds=pounds if pounds is not None else self.pounds,
            shillings=shillings if shillings is not None else self.shillings,
            pence=pence if pence is not None else self.pence,
            remainder=remainder if remainder is not None else self.remainder,
        )

    def is_zero(self) -> bool:
        """Check if the amount (remainder excluded) is exactly zero pence."""
        return self.to_pence() == 0

    def has_remainder(self) -> bool:
        """Check if a division left pence over."""
        return self.remainder != 0

    # endregion

    # region Magic

    # Ordering compares amounts in pence; equality is field-by-field
    def __lt__(self, other) -> bool:
        if not isinstance(other, Money):
            return NotImplemented
        return self.to_pence() < other.to_pence()

    def __le__(self, other) -> bool:
        if not isinstance(other, Money):
            return NotImplemented
        return self.to_pence() <= other.to_pence()

    def __gt__(self, other) -> bool:
        if not isinstance(other, Money):
            return NotImplemented
        return self.to_pence() > other.to_pence()

    def __ge__(self, other) -> bool:
        if not isinstance(other, Money):
            return NotImplemented
        return self.to_pence() >= other.to_pence()

    def __str__(self) -> str:
        return self.to_str()

    def __repr__(self) -> str:
        """Return string like 'Money(1p 19s 2d, remainder=2)'."""
        return f"{self.__class__.__name__}({self.pounds}p {self.shillings}s {self.pence}d, remainder={self.remainder})"

    # endregion
