"""
Text forms of rational pairs: "m/n" and positional decimals.
"""
from __future__ import annotations
import re

import arithmetic as ar
from arithmetic import Pair
from errors import DenominatorOverflow, InvalidFormat, NumeratorOverflow, RationalError
from overflow import INT64_MAX, INT64_MIN, mul64, div64

DEFAULT_SEPARATOR = "/"

TEN: Pair = (10, 1)

_INTEGER = re.compile(r"[+-]?[0-9]+")


def _parse_int64(s: str, what: str, overflow: type) -> int:
    if not _INTEGER.fullmatch(s):
        raise InvalidFormat(f"parsing {what}: invalid syntax {s!r}")
    v = int(s)
    if v < INT64_MIN or v > INT64_MAX:
        raise overflow(f"parsing {what}: {s} out of range")
    return v


def parse_rational(s: str, sep: str = DEFAULT_SEPARATOR) -> Pair:
    """
    Parse "m/n" (base 10). Only m may be negative; m/n need not be in lowest
    terms, but both parts must fit in int64.
    """
    if not sep:
        raise InvalidFormat("empty separator")
    parts = s.split(sep)
    if len(parts) != 2:
        raise InvalidFormat(f"expected exactly one {sep!r} in {s!r}")
    num = _parse_int64(parts[0], "numerator", NumeratorOverflow)
    den = _parse_int64(parts[1], "denominator", DenominatorOverflow)
    return ar.make(num, den)


def _checked(context: str, fn, *args) -> Pair:
    try:
        return fn(*args)
    except RationalError as err:
        raise type(err)(f"{context}: {err}") from err


def parse_decimal(s: str) -> Pair:
    """
    Parse "A", "A.B" or ".B" where A may carry a leading '-' and leading zeros,
    and B may carry trailing zeros. The value is accumulated digit by digit
    with checked arithmetic, so anything that does not fit raises the
    matching overflow error.
    """
    neg = False
    first = last = dot = -1
    digits = 0
    for i, ch in enumerate(s):
        if ch == "-":
            if i != 0:
                raise InvalidFormat(f"unexpected '-' at position {i}")
            neg = True
        elif ch == ".":
            if dot >= 0:
                raise InvalidFormat(f"second '.' at position {i}")
            dot = i
        elif "0" <= ch <= "9":
            digits += 1
            if ch != "0":
                if first < 0:
                    first = i
                last = i
        else:
            raise InvalidFormat(f"unexpected {ch!r} at position {i}")
    if digits == 0:
        raise InvalidFormat(f"no digits in {s!r}")
    if first < 0:
        return ar.ZERO

    # power of ten of the first significant digit
    if dot < 0:
        exp = len(s) - 1 - first
    elif first < dot:
        exp = dot - first - 1
    else:
        exp = dot - first

    place = ar.ONE
    step = ar.mul if exp > 0 else ar.div
    for _ in range(abs(exp)):
        place = _checked(f"computing pow10({exp})", step, place, TEN)

    result = ar.ZERO
    for i in range(first, last + 1):
        if i == dot:
            continue
        if i != first:
            place = _checked(f"updating place for digit at index {i}", ar.div, place, TEN)
        placed = _checked(f"placing digit at index {i}", ar.mul, (ord(s[i]) - ord("0"), 1), place)
        result = _checked(f"adding digit at index {i}", ar.add, result, placed)
    if neg:
        result = ar.neg(result)
    return result


def format_rational(x: Pair, sep: str = DEFAULT_SEPARATOR) -> str:
    return f"{x[0]}{sep}{x[1]}"


def format_decimal(x: Pair, precision: int) -> str:
    """
    x with `precision` digits after the radix point, the last one rounded to
    nearest with ties away from zero. precision <= 0 rounds to an integer and
    omits the radix point. A negative x that rounds to zero keeps its sign
    ("-0"), which is what big-rational reference formatters print.
    """
    m, n = x
    sign = ""
    if m < 0:
        sign = "-"
        m = -m
    q, r = divmod(m, n)
    # leading 0 absorbs a carry out of the integer part
    digits = [0] + [int(c) for c in str(q)]
    frac = max(precision, 0)
    for _ in range(frac + 1):
        if r < INT64_MAX // 10:
            q, r = divmod(r * 10, n)
        else:
            rh, rl = mul64(r, 10)
            q, r = div64(rh, rl, n)
        digits.append(q)

    if digits.pop() >= 5:
        i = len(digits) - 1
        digits[i] += 1
        while digits[i] > 9:
            digits[i] = 0
            i -= 1
            digits[i] += 1
    if digits[0] == 0:
        del digits[0]

    text = "".join(str(d) for d in digits)
    if frac > 0:
        text = f"{text[:-frac]}.{text[-frac:]}"
    return sign + text
