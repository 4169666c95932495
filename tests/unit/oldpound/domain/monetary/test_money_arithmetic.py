import logging

import pytest

from oldpound.domain.monetary.exceptions import DivisionByZeroError, NegativeResultError
from oldpound.domain.monetary.money import Money

# Constants
PRICE = Money(5, 17, 8)  # 1412 pence
OTHER_PRICE = Money(3, 4, 10)  # 778 pence


# region Sum


def test_sum():
    assert PRICE.sum(OTHER_PRICE) == Money(9, 2, 6)
    assert PRICE + OTHER_PRICE == Money(9, 2, 6)


def test_sum_normalizes_denormalized_operands():
    assert Money(0, 25, 0) + Money(0, 0, 30) == Money(1, 7, 6)


def test_sum_with_negative_components_can_fail():
    with pytest.raises(NegativeResultError):
        Money(0, 0, -5) + Money(0, 0, 2)


def test_sum_rejects_non_money():
    with pytest.raises(TypeError):
        PRICE.sum(240)
    with pytest.raises(TypeError):
        PRICE + 1


# endregion

# region Subtract


def test_subtract():
    assert PRICE.subtract(OTHER_PRICE) == Money(2, 12, 10)
    assert PRICE - OTHER_PRICE == Money(2, 12, 10)


def test_subtract_to_zero():
    assert PRICE - PRICE == Money(0, 0, 0)


def test_subtract_negative_result():
    with pytest.raises(NegativeResultError):
        Money(1, 0, 0) - Money(2, 0, 0)
    with pytest.raises(NegativeResultError):
        Money(0, 0, 0).subtract(Money(0, 0, 1))


def test_subtract_rejects_non_money():
    with pytest.raises(TypeError):
        PRICE.subtract("1p 0s 0d")


# endregion

# region Multiply


def test_multiply():
    assert PRICE.multiply(2) == Money(11, 15, 4)
    assert PRICE * 2 == Money(11, 15, 4)
    assert 2 * PRICE == Money(11, 15, 4)


def test_multiply_by_zero_and_one():
    assert PRICE * 0 == Money(0, 0, 0)
    assert PRICE * 1 == PRICE


def test_multiply_negative_factor():
    with pytest.raises(NegativeResultError):
        PRICE * -1
    # Zero stays zero whatever the sign of the factor
    assert Money(0, 0, 0) * -3 == Money(0, 0, 0)


@pytest.mark.parametrize("factor", [1.5, "2", True, None])
def test_multiply_rejects_non_int(factor):
    with pytest.raises(TypeError):
        PRICE.multiply(factor)
    with pytest.raises(TypeError):
        PRICE * factor


def test_multiply_money_by_money_is_not_supported():
    with pytest.raises(TypeError):
        PRICE * OTHER_PRICE


# endregion

# region Divide


def test_divide_with_remainder():
    result = PRICE.divide(3)
    assert result == Money(1, 19, 2, remainder=2)
    assert PRICE / 3 == result


def test_divide_remainder_over_a_shilling():
    result = Money(18, 16, 1) / 15
    assert result == Money(1, 5, 0, remainder=13)
    assert str(result) == "1p 5s 0d (1s 1d)"


def test_divide_exact():
    result = Money(11, 15, 4) / 2
    assert result == PRICE
    assert not result.has_remainder()


def test_divide_by_larger_divisor():
    assert Money(0, 0, 5) / 12 == Money(0, 0, 0, remainder=5)


def test_divide_by_zero():
    with pytest.raises(DivisionByZeroError):
        Money(1, 0, 0) / 0
    # Distinct from the negative result error, but still a ZeroDivisionError
    with pytest.raises(ZeroDivisionError):
        Money(1, 0, 0).divide(0)


def test_divide_by_zero_is_checked_before_sign():
    with pytest.raises(DivisionByZeroError):
        Money(0, 0, -5).divide(0)


def test_divide_negative_divisor():
    with pytest.raises(NegativeResultError):
        Money(1, 0, 0) / -1
    with pytest.raises(NegativeResultError):
        Money(0, 0, 5) / -3


def test_divide_negative_divisor_with_zero_quotient():
    # Quotient truncates toward zero, so it is not negative here
    assert Money(0, 0, 5) / -10 == Money(0, 0, 0, remainder=5)


@pytest.mark.parametrize("divisor", [1.5, "3", False])
def test_divide_rejects_non_int(divisor):
    with pytest.raises(TypeError):
        PRICE.divide(divisor)
    with pytest.raises(TypeError):
        PRICE / divisor


# endregion

# region Common


def test_operand_remainder_is_ignored():
    divided = Money(1, 0, 0, remainder=5)
    assert divided + Money(0, 0, 1) == Money(1, 0, 1)
    assert divided * 2 == Money(2, 0, 0)
    assert divided / 2 == Money(0, 10, 0)


def test_operations_return_new_values():
    a = Money(5, 17, 8)
    b = Money(3, 4, 10)

    results = [a + b, a - b, a * 2, a / 3]

    for result in results:
        assert result is not a
        assert result is not b
    assert a == Money(5, 17, 8)
    assert b == Money(3, 4, 10)


def test_results_are_normalized():
    for result in [Money(0, 0, 239) + Money(0, 19, 11), Money(0, 11, 11) * 7, Money(50, 0, 0) / 7]:
        assert 0 <= result.shillings < 20
        assert 0 <= result.pence < 12


def test_negative_result_is_logged(caplog):
    caplog.set_level(logging.DEBUG, logger="oldpound.domain.monetary.money")
    with pytest.raises(NegativeResultError):
        Money(1, 0, 0) - Money(2, 0, 0)
    assert "subtract" in caplog.text
    assert "-240" in caplog.text


# endregion
