"""
Overflow-aware rational arithmetic on (numerator, denominator) pairs.

Every function takes and returns pairs in lowest terms with a positive
denominator and both parts within the int64 range, numerator never INT64_MIN.
Each operation has two paths:

- narrow: all magnitudes are below INT32_MAX, so the plain products and sums
  provably fit in 63 bits and ordinary arithmetic is used;
- wide:   products are formed as (hi, lo) word pairs and every step that could
  exceed one word is checked before a result is committed.

Overflow is always raised, never wrapped or rounded.
"""
from __future__ import annotations
import logging
from typing import Tuple

from errors import (
    DenominatorInvalid, DenominatorOverflow, NumeratorOverflow, DivisionByZero,
)
from gcd import gcd
from overflow import (
    INT64_MAX, INT64_MIN, INT32_MAX,
    mul64, add64, sub64, div64, wide_less,
)

LOG = logging.getLogger(__name__)

Pair = Tuple[int, int]

ZERO: Pair = (0, 1)
ONE: Pair = (1, 1)

NARROW_LIMIT = INT32_MAX


def sign(m: int) -> int:
    if m == 0:
        return 0
    return -1 if m < 0 else 1


def reduce(m: int, n: int) -> Pair:
    """Lowest terms of m/n for n > 0. Raises NumeratorOverflow on INT64_MIN."""
    if m == 0:
        return ZERO
    s = sign(m)
    a = abs(m)
    d = gcd(a, n)
    m, n = s * (a // d), n // d
    if m == INT64_MIN:
        raise NumeratorOverflow()
    return m, n


def make(m: int, n: int) -> Pair:
    """Validate a raw numerator/denominator and return it reduced."""
    if n <= 0:
        raise DenominatorInvalid()
    if m < INT64_MIN or m > INT64_MAX:
        raise NumeratorOverflow()
    if n > INT64_MAX:
        raise DenominatorOverflow()
    return reduce(m, n)


def _narrow(*magnitudes: int) -> bool:
    return all(x < NARROW_LIMIT for x in magnitudes)


def neg(x: Pair) -> Pair:
    return -x[0], x[1]


def absolute(x: Pair) -> Pair:
    return abs(x[0]), x[1]


def add(x: Pair, y: Pair) -> Pair:
    m1, n1 = x
    m2, n2 = y

    if _narrow(abs(m1), abs(m2), n1, n2):
        # |m1*n2|, |m2*n1| < 2^62, their sum < 2^63, n1*n2 < 2^62
        return make(m1 * n2 + m2 * n1, n1 * n2)

    s1, s2 = sign(m1), sign(m2)
    if s1 == 0:
        return y
    if s2 == 0:
        return x

    LOG.debug("add: wide path for %d/%d + %d/%d", m1, n1, m2, n2)
    m1h, m1l = mul64(abs(m1), n2)
    m2h, m2l = mul64(abs(m2), n1)
    nh, nl = mul64(n1, n2)

    # Combine |m1*n2| and |m2*n1| by sign:
    #   same signs:            +-(|a| + |b|)
    #   differing, |a| > |b|:  sign(a) * (|a| - |b|)
    #   differing, |a| < |b|:  sign(b) * (|b| - |a|)
    s = 1
    if s1 == s2:
        if s1 < 0:
            s = -1
        ml, carry = add64(m1l, m2l, 0)
        mh, carry = add64(m1h, m2h, carry)
        if carry:
            LOG.debug("add: numerator carry out")
            raise NumeratorOverflow()
    else:
        if s2 > 0:
            s = -s
        if wide_less(m1h, m1l, m2h, m2l):
            m1h, m2h = m2h, m1h
            m1l, m2l = m2l, m1l
            s = -s
        ml, borrow = sub64(m1l, m2l, 0)
        mh, borrow = sub64(m1h, m2h, borrow)
        if borrow:
            raise NumeratorOverflow()

    d = gcd(n1, n2)
    if d <= mh:
        LOG.debug("add: reduced numerator exceeds one word")
        raise NumeratorOverflow()
    m, _ = div64(mh, ml, d)
    if m > INT64_MAX:
        raise NumeratorOverflow()
    if d <= nh:
        LOG.debug("add: reduced denominator exceeds one word")
        raise DenominatorOverflow()
    n, _ = div64(nh, nl, d)
    if n > INT64_MAX:
        raise DenominatorOverflow()
    return make(s * m, n)


def sub(x: Pair, y: Pair) -> Pair:
    return add(x, neg(y))


def mul(x: Pair, y: Pair) -> Pair:
    s = sign(x[0]) * sign(y[0])
    if s == 0:
        return ZERO
    mx, nx = abs(x[0]), x[1]
    my, ny = abs(y[0]), y[1]

    # x and y are reduced, but mx may share factors with ny and my with nx
    d = gcd(mx, ny)
    if d != 1:
        mx, ny = mx // d, ny // d
    d = gcd(my, nx)
    if d != 1:
        my, nx = my // d, nx // d

    if _narrow(mx, my, nx, ny):
        return make(s * mx * my, nx * ny)

    LOG.debug("mul: wide path for %d/%d * %d/%d", x[0], x[1], y[0], y[1])
    mh, ml = mul64(mx, my)
    if mh > 0 or ml > INT64_MAX:
        raise NumeratorOverflow()
    nh, nl = mul64(nx, ny)
    if nh > 0 or nl > INT64_MAX:
        raise DenominatorOverflow()
    return make(s * ml, nl)


def inv(x: Pair) -> Pair:
    m, n = x
    if m == 0:
        raise DivisionByZero()
    return make(sign(m) * n, abs(m))


def div(x: Pair, y: Pair) -> Pair:
    if y[0] == 0:
        raise DivisionByZero()
    return mul(x, inv(y))


def cmp(x: Pair, y: Pair) -> int:
    """Total order on pairs; exact, never overflows."""
    if x == y:
        return 0
    s1, s2 = sign(x[0]), sign(y[0])
    if s1 != s2:
        return -1 if s1 < s2 else 1
    # same nonzero sign: compare |m1|*n2 with |m2|*n1
    ah, al = mul64(abs(x[0]), y[1])
    bh, bl = mul64(abs(y[0]), x[1])
    if (ah, al) == (bh, bl):
        return 0
    less = wide_less(ah, al, bh, bl)
    if s1 < 0:
        less = not less
    return -1 if less else 1
