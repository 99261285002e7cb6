"""
64-bit word bounds and double-width word primitives.

Values are Python ints constrained to the unsigned 64-bit range [0, 2^64).
Double-width results are returned as (hi, lo) word pairs so callers can
check the high word before committing to a single-width result.
"""
from typing import Tuple

WORD_BITS = 64
MASK64 = (1 << WORD_BITS) - 1

INT64_MAX = (1 << 63) - 1
INT64_MIN = -(1 << 63)
INT32_MAX = (1 << 31) - 1

Wide = Tuple[int, int]  # (hi, lo)


def mul64(x: int, y: int) -> Wide:
    """Full 128-bit product of two unsigned words as (hi, lo)."""
    p = x * y
    return p >> WORD_BITS, p & MASK64


def add64(x: int, y: int, carry: int) -> Tuple[int, int]:
    """Word sum with carry in; returns (sum, carry_out), carry_out in {0, 1}."""
    s = x + y + carry
    return s & MASK64, s >> WORD_BITS


def sub64(x: int, y: int, borrow: int) -> Tuple[int, int]:
    """Word difference with borrow in; returns (diff, borrow_out)."""
    diff = x - y - borrow
    return diff & MASK64, 1 if diff < 0 else 0


def div64(hi: int, lo: int, y: int) -> Tuple[int, int]:
    """
    Divide the 128-bit value hi:lo by the word y; returns (quo, rem).
    The quotient must fit in one word, so y must be greater than hi.
    """
    if y == 0:
        raise ZeroDivisionError("div64: division by zero")
    if y <= hi:
        raise OverflowError("div64: quotient overflow")
    return divmod((hi << WORD_BITS) | lo, y)


def wide_less(ah: int, al: int, bh: int, bl: int) -> bool:
    return ah < bh or (ah == bh and al < bl)


def bit_len64(x: int) -> int:
    return x.bit_length()


def trailing_zeros64(x: int) -> int:
    if x == 0:
        return WORD_BITS
    return (x & -x).bit_length() - 1


def is_pow2(x: int) -> bool:
    return x > 0 and x & (x - 1) == 0
