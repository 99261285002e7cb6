"""
Rat64: exact rational numbers with a 64-bit numerator and denominator.

One bit of the numerator holds the sign and the denominator must be positive,
so 63 bits of magnitude are available to each. Values are kept in lowest
terms, which makes field-wise equality the same as numeric equality.

The denominator is stored biased by one, so the all-zero value Rat64() is
0/1. Build values with try_new/new (or the parse/convert functions); the
keyword constructor Rat64(_m=..., _n=...) writes the raw fields unchecked,
and is_valid() reports whether such a value honours the invariants.

Fallible operations come in pairs: try_add etc. raise the specific
RationalError, while add etc. (and the operators) raise Panic instead.
"""
from __future__ import annotations
from dataclasses import dataclass, field
from fractions import Fraction
import numbers
import operator
import re
from typing import Tuple, Union

import arithmetic as ar
import conversion
import parsing
from errors import unwrap
from formats import FloatFormat, get_float_format
from overflow import INT64_MAX

Q = Fraction  # unbounded reference type

_DECIMAL_SPEC = re.compile(r"\.(\d+)f")


def _coerce(x):
    if isinstance(x, Rat64):
        return x
    if isinstance(x, int):
        return Rat64.new(x, 1)
    return None


def _binary(name: str):
    """Forward and reflected operators delegating to the unwrapping method `name`."""
    def forward(a, b):
        b = _coerce(b)
        if b is None:
            return NotImplemented
        return getattr(a, name)(b)

    def reverse(b, a):
        a = _coerce(a)
        if a is None:
            return NotImplemented
        return getattr(a, name)(b)

    forward.__name__ = f"__{name}__"
    reverse.__name__ = f"__r{name}__"
    return forward, reverse


def _comparison(test):
    """Ordering between Rat64 values only, consistent with dataclass equality."""
    def compare(a, b):
        if not isinstance(b, Rat64):
            return NotImplemented
        return test(a.cmp(b))
    return compare


@dataclass(frozen=True, repr=False, slots=True)
class Rat64:
    _m: int = field(default=0, kw_only=True)
    _n: int = field(default=0, kw_only=True)  # denominator - 1

    # -- construction -------------------------------------------------------

    @classmethod
    def _from_pair(cls, p: ar.Pair) -> Rat64:
        return cls(_m=p[0], _n=p[1] - 1)

    @classmethod
    def try_new(cls, num: int, den: int) -> Rat64:
        return cls._from_pair(ar.make(operator.index(num), operator.index(den)))

    @classmethod
    def new(cls, num: int, den: int) -> Rat64:
        return unwrap(cls.try_new, num, den)

    @classmethod
    def parse_rational(cls, s: str, sep: str = parsing.DEFAULT_SEPARATOR) -> Rat64:
        return cls._from_pair(parsing.parse_rational(s, sep))

    @classmethod
    def parse_decimal(cls, s: str) -> Rat64:
        return cls._from_pair(parsing.parse_decimal(s))

    @classmethod
    def from_float64(cls, v: float) -> Rat64:
        """The value exactly equal to v, or NumeratorOverflow/DenominatorOverflow."""
        return cls._from_pair(conversion.from_float64(v))

    @classmethod
    def from_fraction(cls, f: numbers.Rational) -> Rat64:
        return cls._from_pair(ar.make(f.numerator, f.denominator))

    # -- accessors ----------------------------------------------------------

    @property
    def numerator(self) -> int:
        return self._m

    @property
    def denominator(self) -> int:
        return self._n + 1

    @property
    def _pair(self) -> ar.Pair:
        return self._m, self._n + 1

    def sign(self) -> int:
        return ar.sign(self._m)

    def is_zero(self) -> bool:
        return self._m == 0

    def is_valid(self) -> bool:
        m, n = self._m, self._n
        if not (isinstance(m, int) and isinstance(n, int)):
            return False
        if n < 0 or n >= INT64_MAX or abs(m) > INT64_MAX:
            return False
        return ar.reduce(m, n + 1) == (m, n + 1)

    # -- arithmetic ---------------------------------------------------------

    def try_add(self, other: Rat64) -> Rat64:
        return self._from_pair(ar.add(self._pair, other._pair))

    def add(self, other: Rat64) -> Rat64:
        return unwrap(self.try_add, other)

    def try_sub(self, other: Rat64) -> Rat64:
        return self._from_pair(ar.sub(self._pair, other._pair))

    def sub(self, other: Rat64) -> Rat64:
        return unwrap(self.try_sub, other)

    def try_mul(self, other: Rat64) -> Rat64:
        return self._from_pair(ar.mul(self._pair, other._pair))

    def mul(self, other: Rat64) -> Rat64:
        return unwrap(self.try_mul, other)

    def try_div(self, other: Rat64) -> Rat64:
        return self._from_pair(ar.div(self._pair, other._pair))

    def div(self, other: Rat64) -> Rat64:
        return unwrap(self.try_div, other)

    def try_inv(self) -> Rat64:
        return self._from_pair(ar.inv(self._pair))

    def inv(self) -> Rat64:
        return unwrap(self.try_inv)

    # neg, abs and cmp cannot fail; the try_ forms exist for a uniform API

    def try_neg(self) -> Rat64:
        return Rat64(_m=-self._m, _n=self._n)

    neg = try_neg

    def try_abs(self) -> Rat64:
        return Rat64(_m=abs(self._m), _n=self._n)

    abs = try_abs

    def try_cmp(self, other: Rat64) -> int:
        return ar.cmp(self._pair, other._pair)

    cmp = try_cmp

    __add__, __radd__ = _binary("add")
    __sub__, __rsub__ = _binary("sub")
    __mul__, __rmul__ = _binary("mul")
    __truediv__, __rtruediv__ = _binary("div")

    __lt__ = _comparison(lambda c: c < 0)
    __le__ = _comparison(lambda c: c <= 0)
    __gt__ = _comparison(lambda c: c > 0)
    __ge__ = _comparison(lambda c: c >= 0)

    def __neg__(self) -> Rat64:
        return self.neg()

    def __pos__(self) -> Rat64:
        return self

    def __abs__(self) -> Rat64:
        return self.abs()

    def __bool__(self) -> bool:
        return self._m != 0

    # -- conversion ---------------------------------------------------------

    def to_float64(self) -> Tuple[float, bool]:
        """(value, exact): exact is True iff value == self bit for bit."""
        return conversion.to_float64(self._pair)

    def to_float(self, fmt: Union[str, FloatFormat] = "float64"):
        if isinstance(fmt, str):
            fmt = get_float_format(fmt)
        return conversion.to_float(self._pair, fmt)

    def __float__(self) -> float:
        return self.to_float64()[0]

    def to_fraction(self) -> Fraction:
        return Q(self._m, self._n + 1)

    def to_rational_string(self, sep: str = parsing.DEFAULT_SEPARATOR) -> str:
        return parsing.format_rational(self._pair, sep)

    def to_decimal_string(self, precision: int) -> str:
        return parsing.format_decimal(self._pair, precision)

    def __str__(self) -> str:
        return self.to_rational_string()

    def __repr__(self) -> str:
        return f"Rat64({self})"

    def __format__(self, spec: str) -> str:
        if not spec:
            return str(self)
        match = _DECIMAL_SPEC.fullmatch(spec)
        if match is None:
            raise ValueError(f"Invalid format specifier {spec!r} for Rat64")
        return self.to_decimal_string(int(match.group(1)))


ZERO = Rat64()
ONE = Rat64.new(1, 1)

try_new = Rat64.try_new
new = Rat64.new
parse_rational = Rat64.parse_rational
parse_decimal = Rat64.parse_decimal
from_float64 = Rat64.from_float64
from_fraction = Rat64.from_fraction
