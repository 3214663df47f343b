'''
Metric prefixes.

The table contains all 24 prefixes of the International System of Units,
from quecto (10⁻³⁰) to quetta (10³⁰).

    >>> from dimscale import prefix
    >>> prefix.by_exponent(-6)
    Prefix('µ', 'micro', -6)
    >>> prefix.by_symbol('da').exponent
    1
'''

import typing


class Prefix(typing.NamedTuple):
    symbol: str
    name: str
    exponent: int

    def __repr__(self):
        return f'Prefix({self.symbol!r}, {self.name!r}, {self.exponent})'


PREFIXES = (
    Prefix('q', 'quecto', -30),
    Prefix('r', 'ronto', -27),
    Prefix('y', 'yocto', -24),
    Prefix('z', 'zepto', -21),
    Prefix('a', 'atto', -18),
    Prefix('f', 'femto', -15),
    Prefix('p', 'pico', -12),
    Prefix('n', 'nano', -9),
    Prefix('µ', 'micro', -6),
    Prefix('m', 'milli', -3),
    Prefix('c', 'centi', -2),
    Prefix('d', 'deci', -1),
    Prefix('da', 'deca', 1),
    Prefix('h', 'hecto', 2),
    Prefix('k', 'kilo', 3),
    Prefix('M', 'mega', 6),
    Prefix('G', 'giga', 9),
    Prefix('T', 'tera', 12),
    Prefix('P', 'peta', 15),
    Prefix('E', 'exa', 18),
    Prefix('Z', 'zetta', 21),
    Prefix('Y', 'yotta', 24),
    Prefix('R', 'ronna', 27),
    Prefix('Q', 'quetta', 30),
)

_by_exponent = {p.exponent: p for p in PREFIXES}
_by_symbol = {p.symbol: p for p in PREFIXES}
_by_symbol['μ'] = _by_symbol['µ'] # greek mu
_by_symbol['u'] = _by_symbol['µ'] # ascii, as in UCUM
_by_name = {p.name: p for p in PREFIXES}
_by_name['deka'] = _by_name['deca']

# longest first so that 'da' is tried before 'd'
_symbols = sorted(_by_symbol, key=len, reverse=True)
_names = sorted(_by_name, key=len, reverse=True)


def by_exponent(n):
    'prefix for ``10^n``, or ``None`` if ``n`` has no prefix'

    return _by_exponent.get(n)


def by_symbol(s):
    return _by_symbol.get(s)


def by_name(s):
    return _by_name.get(s.lower())


def strip_symbol(s):
    '''Split a prefix symbol from ``s``.

    Generates all ``(prefix, remainder)`` pairs for which ``s`` starts with the
    prefix symbol and the remainder is not empty, longest prefix first.

    >>> [(p.name, rest) for p, rest in strip_symbol('dam')]
    [('deca', 'm'), ('deci', 'am')]
    '''

    for symbol in _symbols:
        if s.startswith(symbol) and len(s) > len(symbol):
            yield _by_symbol[symbol], s[len(symbol):]


def strip_name(s):
    '''Split a prefix name from ``s``, accepting a capitalized first letter.

    >>> [(p.name, rest) for p, rest in strip_name('Kilometer')]
    [('kilo', 'meter')]
    '''

    head = s[:1].lower() + s[1:]
    for name in _names:
        if head.startswith(name) and len(head) > len(name):
            yield _by_name[name], head[len(name):]


# vim:sw=4:sts=4:et
