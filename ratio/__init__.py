"""Exact rational arithmetic over 64-bit integers"""

from .arith import INT_MAX, INT_MIN, gcd
from .errors import RationalError, RationalOverflowError, ZeroDenominatorError
from .formatting import to_text
from .rational import Rational
