from __future__ import annotations

import logging

import pandas as pd

from oldpound.domain.monetary import operations as lsd
from oldpound.domain.monetary.exceptions import DivisionByZeroError, NegativeResultError
from oldpound.utils.price_table import prices_from_frame, prices_to_frame, total_price


logger = logging.getLogger(__name__)


def run() -> None:
    price = lsd.parse("5p 17s 8d")
    other = lsd.parse("3p 4s 10d")

    # The four operations
    logger.info(f"{price} + {other} = {lsd.sum(price, other)}")
    logger.info(f"{price} - {other} = {lsd.subtract(price, other)}")
    logger.info(f"{price} * 2 = {lsd.multiply(price, 2)}")
    logger.info(f"{price} / 3 = {lsd.divide(price, 3)}")
    logger.info(f"18p 16s 1d / 15 = {lsd.divide(lsd.parse('18p 16s 1d'), 15)}")

    # Results that cannot be represented
    try:
        lsd.subtract(lsd.parse("1p 0s 0d"), lsd.parse("2p 0s 0d"))
    except NegativeResultError as e:
        logger.info(f"Refused: {e}")
    try:
        lsd.divide(price, 0)
    except DivisionByZeroError as e:
        logger.info(f"Refused: {e}")

    # A small shopping list
    df = pd.DataFrame({"item": ["hat", "gloves", "umbrella"], "price": ["1p 2s 6d", "0p 7s 11d", "0p 15s 9d"]})
    logger.info(f"Shopping list:\n{prices_to_frame(prices_from_frame(df))}")
    logger.info(f"Total: {total_price(df)}")


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO, format="%(message)s")
    run()
