"""Exact fractions held in two 64-bit fields

`Rational` keeps a numerator and a denominator in lowest terms, with the
sign on the numerator and zero always stored as 0/1. Both fields stay within
the 64-bit signed range. An arithmetic step that would need a wider value
raises `RationalOverflowError`, and the operand keeps its old value.

Values change only through `assign()`, `normalize()` and the in-place
operators (`+=`, `-=`, `*=`, `/=`). Take a `copy()` before mutating a value
that is shared.

"""

import logging
import numbers
import operator

from . import formatting
from .arith import as_int, checked, gcd
from .errors import ZeroDenominatorError

log = logging.getLogger(__name__)


def _normalized(numer, denom):
    """Return `numer/denom` reduced to canonical form

    >>> numer = 4
    >>> denom = -6

    """
    if denom == 0:
        log.debug('zero denominator for numerator %d', numer)
        raise ZeroDenominatorError(f'{numer}/0 has a zero denominator')
    if numer == 0:
        return 0, 1
    g = abs(gcd(numer, denom))
    numer = checked(numer // g)
    denom = checked(denom // g)

    if denom < 0:
        numer = checked(-numer)
        denom = checked(-denom)
    return numer, denom

def _fields(numer, denom):
    numer = checked(as_int(numer))
    denom = checked(as_int(denom))
    if denom == 1: # already normalized
        return numer, denom
    return _normalized(numer, denom)

def _add(a, b, c, d, op=operator.add):
    """Return a/b + c/d (or a/b - c/d with `op=operator.sub`) in canonical form

    Both operands must already be canonical. Let g = gcd(b, d), b = b1*g and
    d = d1*g, so gcd(b1, d1) = 1. The sum is (a*d1 + c*b1) / (b1*d1*g). Any
    factor h > 1 shared by that numerator and denominator can't divide b1
    (it would have to divide a, but gcd(a, b1) = 1) and likewise can't
    divide d1, so it divides g. Dividing by gcd(a*d1 + c*b1, g) is therefore
    enough, and b*d is never formed. The same holds for a*d1 - c*b1.

    >>> a, b = 1, 3
    >>> c, d = 1, 6
    >>> op = operator.sub

    """
    g = gcd(b, d)
    b1 = b // g
    numer = checked(op(checked(a * (d // g)), checked(c * b1)))
    g = abs(gcd(numer, g))
    return numer // g, checked(b1 * (d // g))

def _coerce(x):
    if isinstance(x, Rational):
        return x
    if isinstance(x, numbers.Integral) and not isinstance(x, bool):
        return Rational(x)
    return None

def _operand(x):
    r = _coerce(x)
    if r is None:
        raise TypeError(f'unsupported operand type: {type(x).__name__}')
    return r

def _fields_of(x):
    """Return (numer, denom) of `x` for comparison, or None

    Integers are taken as i/1 with no range check, since nothing is stored.

    """
    if isinstance(x, Rational):
        return x._numer, x._denom
    if isinstance(x, numbers.Integral) and not isinstance(x, bool):
        return operator.index(x), 1
    return None

def _comparand(x):
    f = _fields_of(x)
    if f is None:
        raise TypeError(f'unsupported operand type: {type(x).__name__}')
    return f


class Rational:
    def __init__(self, numer=0, denom=1):
        """Constructor

        With no arguments the value is 0, with one it is `numer/1`, and with
        two the pair is normalized.

        >>> self = Rational.__new__(Rational)
        >>> numer = 2
        >>> denom = 4

        """
        self._numer, self._denom = _fields(numer, denom)

    @classmethod
    def _from_fields(cls, numer, denom):
        r = cls.__new__(cls)
        r._numer = numer
        r._denom = denom
        return r

    @property
    def numerator(self):
        return self._numer

    @property
    def denominator(self):
        return self._denom

    def assign(self, numer, denom=1):
        """Replace the value with `numer/denom`

        On error the previous value is kept.

        >>> self = Rational(3, 4)
        >>> numer = 10
        >>> denom = -4

        """
        self._numer, self._denom = _fields(numer, denom)
        return self

    def normalize(self):
        """Reduce the fields to canonical form in place

        The public operations already leave every instance normalized, so
        this is a no-op unless the fields were set by hand.

        """
        self._numer, self._denom = _normalized(self._numer, self._denom)
        return self

    def copy(self):
        return self._from_fields(self._numer, self._denom)

    def __copy__(self):
        return self.copy()

    def __deepcopy__(self, memo):
        return self.copy()

    # Unary operations

    def positive(self):
        return self.copy()

    def negate(self):
        return self._from_fields(checked(-self._numer), self._denom)

    def absolute(self):
        return self._from_fields(checked(abs(self._numer)), self._denom)

    def reciprocal(self):
        if self._numer == 0:
            raise ZeroDenominatorError('0 has no reciprocal')
        return self._from_fields(*_normalized(self._denom, self._numer))

    # In-place arithmetic. These are the real implementations, everything
    # else copies and delegates here.

    def iadd(self, other):
        """Add `other` to this value in place

        >>> self = Rational(3, 4)
        >>> other = self

        """
        r = _operand(other)
        # Read `r` first, it may be `self`
        r_numer, r_denom = r._numer, r._denom
        self._numer, self._denom = _add(self._numer, self._denom, r_numer, r_denom)
        return self

    def isub(self, other):
        r = _operand(other)
        r_numer, r_denom = r._numer, r._denom
        self._numer, self._denom = _add(self._numer, self._denom, r_numer, r_denom, operator.sub)
        return self

    def imul(self, other):
        """Multiply this value by `other` in place

        Numerators and denominators are multiplied, then reduced once.

        """
        r = _operand(other)
        numer = checked(self._numer * r._numer)
        denom = checked(self._denom * r._denom)
        self._numer, self._denom = _normalized(numer, denom)
        return self

    def itruediv(self, other):
        """Divide this value by `other` in place

        Same as multiplying by the reciprocal of `other`. Dividing by zero
        raises `ZeroDenominatorError` and leaves this value unchanged.

        >>> self = Rational(1, 2)
        >>> other = Rational(-3, 4)

        """
        r = _operand(other)
        if r._numer == 0:
            log.debug('division of %r by zero', self)
            raise ZeroDenominatorError(f'division of {self} by zero')
        numer = checked(self._numer * r._denom)
        denom = checked(self._denom * r._numer)
        self._numer, self._denom = _normalized(numer, denom)
        return self

    def add(self, other):
        return self.copy().iadd(other)

    def sub(self, other):
        return self.copy().isub(other)

    def mul(self, other):
        return self.copy().imul(other)

    def truediv(self, other):
        return self.copy().itruediv(other)

    # Comparison

    def equals(self, other):
        """Return whether this value equals `other`

        Both sides are canonical, so comparing fields is enough. An integer
        of any size is compared as i/1.

        """
        numer, denom = _comparand(other)
        return self._numer == numer and self._denom == denom

    def less_than(self, other):
        """Return whether this value is smaller than `other`

        Denominators are positive, so cross-multiplying keeps the sign of the
        comparison. The products are computed exactly and can't overflow.

        >>> self = Rational(1, 3)
        >>> other = Rational(1, 2)

        """
        numer, denom = _comparand(other)
        return self._numer * denom < numer * self._denom

    def greater_than(self, other):
        numer, denom = _comparand(other)
        return numer * self._denom < self._numer * denom

    def compare_to(self, other):
        """Return -1, 0 or 1 as this value is less than, equal to or greater than `other`"""
        if self.equals(other):
            return 0
        return -1 if self.less_than(other) else 1

    # Operators

    def __pos__(self):
        return self.positive()

    def __neg__(self):
        return self.negate()

    def __abs__(self):
        return self.absolute()

    def __add__(self, other):
        r = _coerce(other)
        if r is None:
            return NotImplemented
        return self.add(r)

    def __radd__(self, other):
        r = _coerce(other)
        if r is None:
            return NotImplemented
        return r.add(self)

    def __iadd__(self, other):
        r = _coerce(other)
        if r is None:
            return NotImplemented
        return self.iadd(r)

    def __sub__(self, other):
        r = _coerce(other)
        if r is None:
            return NotImplemented
        return self.sub(r)

    def __rsub__(self, other):
        r = _coerce(other)
        if r is None:
            return NotImplemented
        return r.sub(self)

    def __isub__(self, other):
        r = _coerce(other)
        if r is None:
            return NotImplemented
        return self.isub(r)

    def __mul__(self, other):
        r = _coerce(other)
        if r is None:
            return NotImplemented
        return self.mul(r)

    def __rmul__(self, other):
        r = _coerce(other)
        if r is None:
            return NotImplemented
        return r.mul(self)

    def __imul__(self, other):
        r = _coerce(other)
        if r is None:
            return NotImplemented
        return self.imul(r)

    def __truediv__(self, other):
        r = _coerce(other)
        if r is None:
            return NotImplemented
        return self.truediv(r)

    def __rtruediv__(self, other):
        r = _coerce(other)
        if r is None:
            return NotImplemented
        return r.truediv(self)

    def __itruediv__(self, other):
        r = _coerce(other)
        if r is None:
            return NotImplemented
        return self.itruediv(r)

    def __eq__(self, other):
        if _fields_of(other) is None:
            return NotImplemented
        return self.equals(other)

    # Mutable, so not hashable
    __hash__ = None

    def __lt__(self, other):
        if _fields_of(other) is None:
            return NotImplemented
        return self.less_than(other)

    def __gt__(self, other):
        if _fields_of(other) is None:
            return NotImplemented
        return self.greater_than(other)

    def __le__(self, other):
        if _fields_of(other) is None:
            return NotImplemented
        return not self.greater_than(other)

    def __ge__(self, other):
        if _fields_of(other) is None:
            return NotImplemented
        return not self.less_than(other)

    # Conversions

    def __bool__(self):
        return self._numer != 0

    def __float__(self):
        return self._numer / self._denom

    def __int__(self):
        q = abs(self._numer) // self._denom
        return -q if self._numer < 0 else q

    # Display

    def __str__(self):
        return formatting.to_text(self._numer, self._denom)

    def __repr__(self):
        return f'{type(self).__name__}({self._numer}, {self._denom})'

    def _repr_pretty_(self, p, cycle):
        p.text(str(self))

    def _repr_latex_(self):
        return formatting.to_latex(self._numer, self._denom)
