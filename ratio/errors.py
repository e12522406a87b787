"""Exceptions raised by rational arithmetic

Both kinds of error are contract failures on the caller's side. The library
never catches them itself.

"""


class RationalError(ArithmeticError):
    """Base class for every error raised by `ratio`"""


class ZeroDenominatorError(RationalError, ZeroDivisionError):
    """A zero denominator was supplied, or a rational was divided by zero"""


class RationalOverflowError(RationalError, OverflowError):
    """An intermediate value left the 64-bit signed range"""
