"""Fold integer numerator/denominator pairs with one operator

    ratio-calc -o add 1 3 1 6        # prints 1/2
    ratio-calc -o div 3 4 0 1        # zero divisor, exits with status 1

Operands are plain integers taken two at a time. Rational text such as
"1/3" is not accepted.

"""

import logging
import os

import plac

from .errors import RationalError
from .rational import Rational

OPS = {
    'add': Rational.iadd,
    'sub': Rational.isub,
    'mul': Rational.imul,
    'div': Rational.itruediv,
}


def fold(op, operands):
    """Combine the pairs in `operands` left to right with `op`

    Args:
        op (str): one of the keys of `OPS`
        operands (list): numerator, denominator, numerator, denominator, ...

    Returns:
        r (Rational): the combined value

    >>> op = 'add'
    >>> operands = [1, 3, 1, 6]

    """
    if not operands or len(operands) % 2:
        raise ValueError(f'expected numerator/denominator pairs, got {len(operands)} integers')
    pairs = list(zip(operands[::2], operands[1::2]))
    r = Rational(*pairs[0])
    for numer, denom in pairs[1:]:
        logging.debug('%s %s %d/%d', r, op, numer, denom)
        OPS[op](r, Rational(numer, denom))
    return r


@plac.annotations(
        op=('operator to fold the operands with', 'option', 'o', str, sorted(OPS)),
        loglevel=('logging level, defaults to $RATIO_LOG_LEVEL or WARNING', 'option', 'l', str),
        operands=('numerator denominator pairs', 'positional', None, int),
)
def main(op='add', loglevel=None, *operands):
    """Print the folded value of `operands`

    Exits with status 2 on a bad operand count or an unknown log level, and
    with 1 when the arithmetic fails (zero denominator or overflow).

    """
    loglevel = loglevel or os.environ.get('RATIO_LOG_LEVEL', 'WARNING')
    level = logging.getLevelName(loglevel.upper())
    if not isinstance(level, int):
        logging.error('unknown log level %r', loglevel)
        raise SystemExit(2)
    logging.basicConfig(level=level)

    try:
        r = fold(op, operands)
    except ValueError as e:
        logging.error('%s', e)
        raise SystemExit(2)
    except RationalError as e:
        logging.error('%s: %s', type(e).__name__, e)
        raise SystemExit(1)

    text = str(r)
    print(text)
    return text


if __name__ == '__main__':
    plac.call(main)
