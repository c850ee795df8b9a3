from __future__ import annotations

import pytest

from role_acl.exceptions import ArithmeticDomainError, ArithmeticOverflowError
from role_acl.uint import (
    can_add,
    div_rem,
    div_rem_unchecked,
    div_round_down,
    div_round_up,
    max_value,
    shift_words_left,
    shift_words_left_checked,
    shift_words_right,
    to_decimal,
)

U256_MAX = max_value(256)


def test_div_rem_checked_and_unchecked():
    assert div_rem(17, 5) == (3, 2)
    assert div_rem_unchecked(17, 5) == (3, 2)
    assert div_rem_unchecked(17, 0) == (0, 0)

    with pytest.raises(ArithmeticDomainError):
        div_rem(17, 0)


def test_rounding_division():
    assert div_round_down(10, 4) == 2
    assert div_round_up(10, 4) == 3
    assert div_round_up(12, 4) == 3
    assert div_round_up(0, 4) == 0

    with pytest.raises(ArithmeticDomainError):
        div_round_up(1, 0)


def test_can_add_at_the_width_boundary():
    assert can_add(U256_MAX - 1, 1)
    assert not can_add(U256_MAX, 1)
    assert can_add(0xFF, 0, bits=8)
    assert not can_add(0x80, 0x80, bits=8)


def test_word_shifts():
    assert shift_words_left(1, 1) == 1 << 64
    assert shift_words_left(1, 4) == 0
    assert shift_words_right(1 << 130, 2) == 1 << 2
    assert shift_words_left_checked(0xFFFF, 3) == 0xFFFF << 192

    with pytest.raises(ArithmeticOverflowError):
        shift_words_left_checked(1 << 200, 1)


def test_word_shift_past_the_width():
    assert shift_words_left(1, 10**10) == 0
    assert shift_words_left(U256_MAX, 4) == 0
    assert shift_words_left(0xFF, 1, bits=64) == 0
    assert shift_words_left_checked(0, 10**10) == 0
    assert shift_words_right(U256_MAX, 10**10) == 0

    with pytest.raises(ArithmeticOverflowError):
        shift_words_left_checked(1, 10**10)


def test_to_decimal():
    assert to_decimal(0) == "0"
    assert to_decimal(U256_MAX) == str(2**256 - 1)


@pytest.mark.parametrize("value", [-1, 2**256, True, 1.5])
def test_operands_must_be_unsigned_within_width(value):
    with pytest.raises(ArithmeticDomainError):
        to_decimal(value)
