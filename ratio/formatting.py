"""Text forms of a numerator/denominator pair

The pair is expected to be normalized already; nothing here reduces it.

"""


def to_text(numer, denom):
    """Return "numer" when `denom` is 1, otherwise "numer/denom"

    >>> numer = 3
    >>> denom = 4

    """
    if denom == 1:
        return f'{numer}'
    return f'{numer}/{denom}'

def to_latex(numer, denom):
    """Return the LaTeX math used by Jupyter to render the pair"""
    if denom == 1:
        return f'${numer}$'
    sign = '-' if numer < 0 else ''
    return f'${sign}\\frac{{{abs(numer)}}}{{{denom}}}$'
