import dataclasses
from fractions import Fraction

import pytest

import rational
from errors import (
    DenominatorInvalid, DenominatorOverflow, NumeratorOverflow, Panic, RationalError,
)
from gcd import gcd
from overflow import INT64_MAX, INT64_MIN
from rational import ONE, ZERO, Rat64

R = Rat64.new


def test_try_new_reduces():
    x = rational.try_new(2, 4)
    assert x.numerator == 1
    assert x.denominator == 2
    assert x == R(1, 2)
    assert rational.try_new(-6, 9) == R(-2, 3)
    assert rational.try_new(0, 17) == ZERO


@pytest.mark.parametrize("den", [0, -1, -2, INT64_MIN])
def test_try_new_rejects_non_positive_denominator(den):
    with pytest.raises(DenominatorInvalid):
        rational.try_new(1, den)


def test_new_panics():
    with pytest.raises(Panic) as info:
        rational.new(1, 0)
    assert info.value.kind is DenominatorInvalid
    assert isinstance(info.value.error, DenominatorInvalid)
    assert "denominator is not positive" in str(info.value)


def test_panic_is_not_an_ordinary_exception():
    with pytest.raises(Panic):
        try:
            rational.new(1, 0)
        except Exception:
            pytest.fail("Panic was caught as an Exception")


def test_error_kinds_are_builtin_compatible():
    with pytest.raises(ValueError):
        rational.try_new(1, 0)
    with pytest.raises(ArithmeticError):
        rational.try_new(1, 0)
    with pytest.raises(ZeroDivisionError):
        ONE.try_div(ZERO)


def test_extreme_numerator():
    with pytest.raises(NumeratorOverflow):
        rational.try_new(INT64_MIN, 1)
    assert rational.try_new(INT64_MIN, 2) == R(-(2**62), 1)
    assert rational.try_new(-INT64_MAX, 1).numerator == -INT64_MAX
    with pytest.raises(NumeratorOverflow):
        rational.try_new(2**63, 1)
    with pytest.raises(DenominatorOverflow):
        rational.try_new(1, 2**63)


def test_try_new_requires_integers():
    with pytest.raises(TypeError):
        rational.try_new(1.5, 2)


def test_zero_value():
    assert Rat64() == ZERO
    assert ZERO.numerator == 0
    assert ZERO.denominator == 1
    assert ZERO.is_zero()
    assert ZERO.sign() == 0
    assert not ZERO
    assert ZERO.is_valid()


def test_sign():
    assert R(-3, 4).sign() == -1
    assert R(3, 4).sign() == 1
    assert R(3, 4)


def test_is_valid(samples):
    for x in samples:
        assert x.is_valid()
        m, n = x.numerator, x.denominator
        assert m == 0 or gcd(abs(m), n) == 1
        assert rational.try_new(m, n) == x
    assert not Rat64(_m=2, _n=3).is_valid()           # 2/4
    assert not Rat64(_m=0, _n=4).is_valid()           # 0/5
    assert not Rat64(_m=1, _n=-1).is_valid()          # 1/0
    assert not Rat64(_m=1, _n=INT64_MAX).is_valid()   # 1/2^63
    assert not Rat64(_m=INT64_MIN, _n=0).is_valid()


def test_equality_and_hashing():
    assert R(1, 2) == R(2, 4)
    assert R(1, 2) != R(1, 3)
    assert len({R(1, 2), R(2, 4), R(3, 6)}) == 1
    assert R(1, 2) != Fraction(1, 2)


def test_immutable():
    x = R(1, 2)
    with pytest.raises(dataclasses.FrozenInstanceError):
        x._m = 3


def test_int_operands():
    assert R(1, 2) + 1 == R(3, 2)
    assert 1 - R(1, 2) == R(1, 2)
    assert 2 * R(1, 3) == R(2, 3)
    assert 2 / R(1, 3) == R(6, 1)
    with pytest.raises(TypeError):
        R(1, 2) + 0.5


def test_ordering_matches_equality_for_ints():
    # ints mix into arithmetic but not into comparisons: R(1, 1) != 1
    assert R(1, 1) != 1
    with pytest.raises(TypeError):
        R(1, 2) < 1
    with pytest.raises(TypeError):
        1 >= R(1, 1)
    assert R(1, 2) < R(1, 1)


def test_ordering():
    values = [R(3, 2), R(-1, 2), ZERO, R(1, 3), R(-7, 3)]
    assert sorted(values) == [R(-7, 3), R(-1, 2), ZERO, R(1, 3), R(3, 2)]
    assert max(values) == R(3, 2)


def test_string_forms():
    x = R(-5, 6)
    assert str(x) == "-5/6"
    assert repr(x) == "Rat64(-5/6)"
    assert x.to_rational_string(":") == "-5:6"
    assert f"{R(76, 7):.3f}" == "10.857"
    assert f"{x}" == "-5/6"
    with pytest.raises(ValueError):
        format(x, "e")


def test_fraction_interop(samples):
    for x in samples:
        assert rational.from_fraction(x.to_fraction()) == x
    assert rational.from_fraction(Fraction(6, 8)) == R(3, 4)
    assert rational.from_fraction(5) == R(5, 1)
    with pytest.raises(NumeratorOverflow):
        rational.from_fraction(Fraction(2**70, 3))
    with pytest.raises(DenominatorOverflow):
        rational.from_fraction(Fraction(1, 2**70))


def test_float_dunder():
    assert float(R(1, 4)) == 0.25
    assert float(R(-1, 3)) == -1 / 3


def test_rational_errors_share_a_base():
    for kind in (DenominatorInvalid, DenominatorOverflow, NumeratorOverflow):
        assert issubclass(kind, RationalError)
