"""Integer helpers for the rational type

The rational type stores its fields as 64-bit signed integers. Python ints
don't wrap, so every value that the fixed-width algorithm would store is
passed through `checked()` instead.

"""

import logging
import operator

from .errors import RationalOverflowError

log = logging.getLogger(__name__)

INT_BITS = 64
INT_MIN = -(1 << (INT_BITS - 1))
INT_MAX = (1 << (INT_BITS - 1)) - 1


def as_int(x):
    """Return `x` as a plain int

    Anything usable as a sequence index is accepted except bool.

    >>> x = 3

    """
    if isinstance(x, bool):
        raise TypeError(f'expected an integer, got {type(x).__name__}')
    return operator.index(x)

def checked(x):
    """Return `x` if it fits in the fixed-width type, otherwise raise

    >>> x = 1 << 63

    """
    if not INT_MIN <= x <= INT_MAX:
        log.debug('%d is outside [%d, %d]', x, INT_MIN, INT_MAX)
        raise RationalOverflowError(f'{x} does not fit in {INT_BITS} bits')
    return x

def gcd(a, b):
    """Compute the greatest common divisor of `a` and `b`

    Euclid's algorithm, alternating which operand gets reduced. The sign of
    the result is whatever the returned operand happens to carry, so callers
    that need a positive divisor take `abs()` themselves.

    gcd(0, 0) is 0. A zero denominator never reaches this function.

    >>> a = -4
    >>> b = 6

    """
    a, b = as_int(a), as_int(b)
    while True:
        if a == 0:
            return b
        b %= a

        if b == 0:
            return a
        a %= b
