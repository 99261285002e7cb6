"""
Exact mapping between rational pairs and IEEE-754 binary floats.
"""
from __future__ import annotations
import math
from typing import Tuple

from arithmetic import Pair, ZERO, make
from errors import DenominatorOverflow, InvalidFormat, NumeratorOverflow
from formats import FLOAT64, FloatFormat
from overflow import bit_len64, is_pow2, trailing_zeros64, WORD_BITS

# bits available to a magnitude once the sign bit is taken
MAGNITUDE_BITS = WORD_BITS - 1


def to_float64(x: Pair) -> Tuple[float, bool]:
    """
    Nearest double to x and whether it is exactly equal to x.
    Integers are exact when they fit the 53-bit significand; other values
    additionally need a power-of-two denominator.
    """
    m, n = x
    if m == 0:
        return 0.0, True
    prec = bit_len64(abs(m))
    if n == 1:
        return float(m), prec <= FLOAT64.p
    # int / int true division is correctly rounded
    return m / n, prec <= FLOAT64.p and is_pow2(n)


def fits_format(x: Pair, fmt: FloatFormat) -> bool:
    """True if x is exactly representable in fmt (precision and exponent range)."""
    m, n = x
    if m == 0:
        return True
    a = abs(m)
    prec = bit_len64(a)
    if prec > fmt.p or not is_pow2(n):
        return False
    k = n.bit_length() - 1
    msb = prec - 1 - k
    lsb = trailing_zeros64(a) - k
    return msb <= fmt.emax and lsb >= fmt.emin - (fmt.p - 1)


def to_float(x: Pair, fmt: FloatFormat):
    """x as a numpy scalar of fmt.dtype, plus the exactness flag."""
    m, n = x
    return fmt.dtype(m / n), fits_format(x, fmt)


def from_float64(v: float) -> Pair:
    """
    The pair exactly equal to v.

    v = f*2^e with f in [0.5, 1) is rescaled to an integer mantissa in
    [2^52, 2^53); after stripping trailing zero bits the sign of the exponent
    says whether v is an integer (numerator must fit) or not (2^-e must fit
    as the denominator).
    """
    v = float(v)
    if math.isnan(v):
        raise InvalidFormat("cannot convert NaN")
    if math.isinf(v):
        raise NumeratorOverflow()
    if v == 0:
        return ZERO

    f, e = math.frexp(v)
    s = 1
    if f < 0:
        s, f = -1, -f
    m = int(math.ldexp(f, FLOAT64.p))
    e -= FLOAT64.p

    tz = trailing_zeros64(m)
    m >>= tz
    e += tz
    prec = bit_len64(m)

    if e >= 0:
        if prec + e > MAGNITUDE_BITS:
            raise NumeratorOverflow()
        return make(s * (m << e), 1)
    if e <= -MAGNITUDE_BITS:
        raise DenominatorOverflow()
    return make(s * m, 1 << -e)
