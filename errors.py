"""
Error kinds raised by rat64 operations.

Every fallible operation raises one of the RationalError subclasses below.
The unwrapping forms (Rat64.add, x + y, new, ...) convert those into Panic,
which derives from BaseException so that ordinary `except Exception` blocks
do not treat it as a recoverable condition.
"""
from __future__ import annotations


class RationalError(ArithmeticError):
    default_message = "rational error"

    def __init__(self, message: str | None = None):
        super().__init__(message or self.default_message)


class DenominatorInvalid(RationalError, ValueError):
    default_message = "denominator is not positive"


class DenominatorOverflow(RationalError, OverflowError):
    default_message = "denominator overflow"


class NumeratorOverflow(RationalError, OverflowError):
    default_message = "numerator overflow"


class DivisionByZero(RationalError, ZeroDivisionError):
    default_message = "division by zero"


class InvalidFormat(RationalError, ValueError):
    default_message = "invalid number format"


class Panic(BaseException):
    """Fatal abort carrying the RationalError that caused it."""

    def __init__(self, error: RationalError):
        super().__init__(error)
        self.error = error

    @property
    def kind(self) -> type:
        return type(self.error)

    def __str__(self) -> str:
        return f"panic: {self.error}"


def unwrap(fn, *args):
    try:
        return fn(*args)
    except RationalError as err:
        raise Panic(err) from err
