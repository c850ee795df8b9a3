"""Fixed-width unsigned integer helpers.

Python integers are unbounded, so every helper here takes an explicit bit
width (256 by default) and treats values outside ``[0, 2**bits)`` as domain
errors. Word shifts move whole 64-bit words.
"""

from __future__ import annotations

from typing import Any

from role_acl.exceptions import ArithmeticDomainError, ArithmeticOverflowError

DEFAULT_BITS = 256
WORD_BITS = 64


def max_value(bits: int = DEFAULT_BITS) -> int:
    return (1 << bits) - 1


def _require_uint(value: Any, *, bits: int, name: str) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise ArithmeticDomainError(f"{name} must be an int, got {type(value).__name__}")
    if value < 0 or value > max_value(bits):
        raise ArithmeticDomainError(f"{name}={value} does not fit in an unsigned {bits}-bit integer")
    return value


def _require_divisor(b: int) -> None:
    if b == 0:
        raise ArithmeticDomainError("division by zero")


def div_rem(a: int, b: int, *, bits: int = DEFAULT_BITS) -> tuple[int, int]:
    """Return ``(a // b, a % b)``; raises on a zero divisor."""

    _require_uint(a, bits=bits, name="a")
    _require_uint(b, bits=bits, name="b")
    _require_divisor(b)
    return divmod(a, b)


def div_rem_unchecked(a: int, b: int, *, bits: int = DEFAULT_BITS) -> tuple[int, int]:
    """Like :func:`div_rem` but returns ``(0, 0)`` for a zero divisor."""

    _require_uint(a, bits=bits, name="a")
    _require_uint(b, bits=bits, name="b")
    if b == 0:
        return 0, 0
    return divmod(a, b)


def div_round_down(a: int, b: int, *, bits: int = DEFAULT_BITS) -> int:
    return div_rem(a, b, bits=bits)[0]


def div_round_up(a: int, b: int, *, bits: int = DEFAULT_BITS) -> int:
    quotient, remainder = div_rem(a, b, bits=bits)
    return quotient + 1 if remainder else quotient


def can_add(a: int, b: int, *, bits: int = DEFAULT_BITS) -> bool:
    """Whether ``a + b`` fits in ``bits`` without wrapping."""

    _require_uint(a, bits=bits, name="a")
    _require_uint(b, bits=bits, name="b")
    return a <= max_value(bits) - b


def shift_words_left(value: int, words: int, *, bits: int = DEFAULT_BITS) -> int:
    """Shift left by ``words`` 64-bit words, dropping bits past the width."""

    _require_uint(value, bits=bits, name="value")
    if words < 0:
        raise ArithmeticDomainError("words must be non-negative")
    if words * WORD_BITS >= bits:
        return 0
    return (value << (words * WORD_BITS)) & max_value(bits)


def shift_words_left_checked(value: int, words: int, *, bits: int = DEFAULT_BITS) -> int:
    """Shift left by whole words; raises if any set bit would be dropped."""

    shifted = shift_words_left(value, words, bits=bits)
    if words * WORD_BITS >= bits:
        if value:
            raise ArithmeticOverflowError(f"shifting {value} left by {words} word(s) overflows {bits} bits")
        return 0
    if shifted >> (words * WORD_BITS) != value:
        raise ArithmeticOverflowError(f"shifting {value} left by {words} word(s) overflows {bits} bits")
    return shifted


def shift_words_right(value: int, words: int, *, bits: int = DEFAULT_BITS) -> int:
    _require_uint(value, bits=bits, name="value")
    if words < 0:
        raise ArithmeticDomainError("words must be non-negative")
    return value >> (words * WORD_BITS)


def to_decimal(value: int, *, bits: int = DEFAULT_BITS) -> str:
    return str(_require_uint(value, bits=bits, name="value"))


__all__ = [
    "DEFAULT_BITS",
    "WORD_BITS",
    "can_add",
    "div_rem",
    "div_rem_unchecked",
    "div_round_down",
    "div_round_up",
    "max_value",
    "shift_words_left",
    "shift_words_left_checked",
    "shift_words_right",
    "to_decimal",
]
