from __future__ import annotations

# Bridge between pandas DataFrames holding "Xp Ys Zd" price strings and `Money` values.

import logging
from typing import Iterable

import pandas as pd

from oldpound.domain.monetary.exceptions import FormatError, NegativeResultError
from oldpound.domain.monetary.money import Money

logger = logging.getLogger(__name__)

# Columns produced by `prices_to_frame`, in order
FRAME_COLUMNS = ["pounds", "shillings", "pence", "remainder", "total_pence", "text"]


def prices_from_frame(df: pd.DataFrame, column: str = "price") -> list[Money]:
    """Parse every cell of $column into `Money`.

    Args:
        df: Source data with one price string per row.
        column: Name of the column holding the prices.

    Returns:
        Parsed prices in row order.

    Raises:
        ValueError: If $df is not a DataFrame or has no $column.
        FormatError: If a cell cannot be parsed; the message names the row label.
    """
    # Check: $df must be a pandas DataFrame
    if not isinstance(df, pd.DataFrame):
        raise ValueError(f"Expected a pandas DataFrame, but received {type(df).__name__}")

    # Check: $column must be present
    if column not in df.columns:
        raise ValueError(f"The provided DataFrame has no column '{column}'. Available columns: {list(df.columns)}")

    prices = []
    for label, cell in df[column].items():
        try:
            prices.append(Money.from_str(str(cell)))
        except FormatError as e:
            raise FormatError(f"Cannot parse column '{column}' at row {label!r}: {e}") from e

    logger.debug(f"Parsed {len(prices)} price(s) from column '{column}'")
    return prices


def prices_to_frame(prices: Iterable[Money]) -> pd.DataFrame:
    """Return a DataFrame with one row per price and the columns listed in `FRAME_COLUMNS`.

    Integer columns hold `numpy.int64` values, which `Money` accepts back as components.
    """
    rows = [
        {
            "pounds": m.pounds,
            "shillings": m.shillings,
            "pence": m.pence,
            "remainder": m.remainder,
            "total_pence": m.to_pence(),
            "text": m.to_str(),
        }
        for m in prices
    ]
    return pd.DataFrame(rows, columns=FRAME_COLUMNS)


def total_price(df: pd.DataFrame, column: str = "price") -> Money:
    """Add up all prices in $column; an empty column totals 0p 0s 0d.

    Prices are added in pence first and the sign is checked once on the total, so
    the result does not depend on row order even when some rows are negative.

    Raises:
        NegativeResultError: If the total of the column is negative.
    """
    total_pence = 0
    for price in prices_from_frame(df, column):
        total_pence += price.to_pence()

    # Raise: negative amounts cannot be represented
    if total_pence < 0:
        logger.debug(f"Rejected negative total of column '{column}': {total_pence} pence")
        raise NegativeResultError(f"Cannot call `total_price` because total of column '{column}' ({total_pence} pence) is negative")

    total = Money.from_pence(total_pence)
    logger.debug(f"Total of column '{column}' is {total}")
    return total
