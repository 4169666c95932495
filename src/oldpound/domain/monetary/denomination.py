from __future__ import annotations

from enum import Enum

# Conversion rates of the pre-decimal system
PENCE_IN_SHILLING = 12
SHILLINGS_IN_POUND = 20
PENCE_IN_POUND = PENCE_IN_SHILLING * SHILLINGS_IN_POUND


class Denomination(Enum):
    """Represents one denomination of pre-decimal UK money.

    Members are ordered from the largest to the smallest unit, which is also the
    order in which they appear in the textual form "Xp Ys Zd".

    Members:
        POUND: 240 pence, written with suffix "p".
        SHILLING: 12 pence, written with suffix "s".
        PENNY: The minor unit, written with suffix "d".
    """

    POUND = "p"
    SHILLING = "s"
    PENNY = "d"

    @property
    def symbol(self) -> str:
        """Get the suffix used when formatting an amount of this denomination."""
        return self.value

    @property
    def pence(self) -> int:
        """Get how many pence one unit of this denomination is worth."""
        return _PENCE_PER_UNIT[self]

    def format_amount(self, amount: int) -> str:
        """Return $amount followed by the unit suffix, e.g. `format_amount(3)` -> '3s'."""
        return f"{amount}{self.symbol}"


_PENCE_PER_UNIT = {
    Denomination.POUND: PENCE_IN_POUND,
    Denomination.SHILLING: PENCE_IN_SHILLING,
    Denomination.PENNY: 1,
}
