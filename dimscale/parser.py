'''
The parser module turns unit expressions into dimension and scale vectors.

    >>> from dimscale.parser import parse_unit_expression
    >>> dimension, scale = parse_unit_expression('kg*m/s^2')
    >>> dimension
    DimensionVector(mass=1, length=1, time=-2)
    >>> scale
    ScaleVector()

An expression is a product of unit symbols separated by ``*``, ``·`` or
``.``, optionally followed by a single ``/`` and a denominator. Exponents are
written as ``^2``, ``**2``, ``²`` or, as in UCUM, as trailing digits:

    >>> parse_unit_expression('mm²') == parse_unit_expression('mm^2') == parse_unit_expression('mm2')
    True
    >>> from dimscale import pretty
    >>> pretty.format_unit(*parse_unit_expression('N*m'))
    'J'

Unit symbols are resolved against the catalog, with SI prefixes on base units
and long names as fallbacks:

    >>> parse_unit_expression('kilometers').scale
    ScaleVector(p2=3, p5=3)

Units that are not an exact power-of-prime multiple of the coherent unit carry
a rational conversion factor:

    >>> parse_unit_expression('ft').factor
    Fraction(381, 125)

A malformed expression raises :class:`dimscale.exception.ParseError` holding
the offending position:

    >>> parse_unit_expression('m/s/s')
    Traceback (most recent call last):
         ...
    dimscale.exception.ParseError: unexpected second '/' at position 3 in 'm/s/s'
'''

from . import catalog, exception, lookup, prefix, pretty, warnings, _util
from .dimension import DimensionVector, ScaleVector, DIMENSIONLESS, IDENTITY
import fractions
import treelog

_digits = '0123456789'
_superscripts = '⁻⁰¹²³⁴⁵⁶⁷⁸⁹'
_multiply = '*·⋅.'


class Expression:
    '''Parsed unit expression.

    Args
    ----
    dimension : :class:`dimscale.dimension.DimensionVector`
    scale : :class:`dimscale.dimension.ScaleVector`
    factor : :class:`fractions.Fraction`
        Product of the conversion factors of all units in the expression.
    offset : :class:`fractions.Fraction`
        Affine offset; only ever non-zero for a lone affine unit.
    text : :class:`str`, optional
        The source text.

    Iterating over an expression yields the dimension and the scale.
    '''

    __slots__ = 'dimension', 'scale', 'factor', 'offset', 'text'

    def __init__(self, dimension=DIMENSIONLESS, scale=IDENTITY, factor=1, offset=0, text=None):
        self.dimension = DimensionVector(dimension)
        self.scale = ScaleVector(scale)
        self.factor = fractions.Fraction(factor)
        self.offset = fractions.Fraction(offset)
        self.text = text

    @property
    def storage(self) -> bool:
        return self.factor == 1

    @property
    def affine(self) -> bool:
        return self.offset != 0

    def __iter__(self):
        yield self.dimension
        yield self.scale

    def __eq__(self, other):
        return isinstance(other, Expression) and self._key == other._key

    def __hash__(self):
        return hash(self._key)

    @property
    def _key(self):
        return self.dimension, self.scale, self.factor, self.offset

    def __repr__(self):
        if self.text is not None:
            return f'Expression({self.text!r})'
        return f'Expression({self.dimension!r}, {self.scale!r}, {self.factor!r}, {self.offset!r})'

    def __str__(self):
        if self.text is not None:
            return self.text
        if self.storage and not self.affine:
            return pretty.format_unit(self.dimension, self.scale)
        raise ValueError('expression has no textual form')

    @classmethod
    def __stringly_loads__(cls, s):
        return parse_unit_expression(s)

    @classmethod
    def __stringly_dumps__(cls, v):
        return str(v)


def parse_unit_expression(text, *, strict=False):
    '''Parse a unit expression.

    Args
    ----
    text : :class:`str`
        Unit expression, e.g. ``kg*m/s^2``.
    strict : :class:`bool`
        Reject units with a conversion factor other than one, such that the
        result is fully described by its dimension and scale.

    Returns
    -------
    :class:`Expression`
    '''

    if not isinstance(text, str):
        raise ValueError(f'expected a str, received {type(text).__name__}')
    scanner = _Scanner(text, strict)
    expression = scanner.expression()
    scanner.skip()
    if scanner.pos < len(text):
        scanner.fail(f'unexpected character {text[scanner.pos]!r}')
    expression.text = text
    return expression


# INTERNAL HELPER FUNCTIONS

def _drop_offset(expression):
    if not expression.affine:
        return expression
    warnings.warn(f'dropping the offset of affine unit {expression.text!r} in a compound expression', warnings.AffineWarning)
    return Expression(expression.dimension, expression.scale, expression.factor, text=expression.text)


def _product(a, b):
    a = _drop_offset(a)
    b = _drop_offset(b)
    return Expression(a.dimension + b.dimension, a.scale + b.scale, a.factor * b.factor)


def _power(a, n):
    if n == 1:
        return a
    a = _drop_offset(a)
    return Expression(a.dimension * n, a.scale * n, a.factor ** n)


def _resolve(symbol, strict, position):
    found = catalog.lookup_unit_by_symbol(symbol)
    if found is not None:
        dimension, unit = found
        return _leaf(symbol, dimension, unit, None, strict, position)
    for p, rest in prefix.strip_symbol(symbol):
        found = catalog.lookup_unit_by_symbol(rest)
        if found is not None and found[1].base:
            return _leaf(symbol, *found, p, strict, position)
    for p, rest in prefix.strip_name(symbol):
        found = catalog.lookup_unit_by_name(rest)
        if found is not None and found[1].base:
            return _leaf(symbol, *found, p, strict, position)
    found = catalog.lookup_unit_by_name(symbol)
    if found is not None:
        return _leaf(symbol, *found, None, strict, position)
    raise exception.UnknownUnit(symbol, lookup.suggestion(symbol), position)


def _leaf(symbol, dimension, unit, p, strict, position):
    if strict and not unit.storage:
        raise exception.UnknownUnit(symbol, f'{unit.name} is not a storage unit', position)
    scale = unit.scale
    if p is not None:
        scale += ScaleVector.ten(p.exponent)
    treelog.debug(f'resolved {symbol!r} as {p.name if p else ""}{unit.name}')
    return Expression(dimension.exponents, scale, unit.conversion_factor, unit.affine_offset, text=symbol)


class _Scanner:

    def __init__(self, text, strict):
        self.text = text
        self.strict = strict
        self.pos = 0

    def fail(self, reason, pos=None):
        raise exception.ParseError(self.text, self.pos if pos is None else pos, reason)

    def peek(self):
        return self.text[self.pos] if self.pos < len(self.text) else ''

    def skip(self):
        while self.peek().isspace():
            self.pos += 1

    def expression(self):
        numerator = self.term()
        self.skip()
        if self.peek() != '/':
            return numerator
        self.pos += 1
        denominator = self.term()
        self.skip()
        if self.peek() == '/':
            self.fail("unexpected second '/'")
        return _product(numerator, _power(denominator, -1))

    def term(self):
        result = self.factor()
        while True:
            self.skip()
            c = self.peek()
            if not c or c not in _multiply or self.text.startswith('**', self.pos):
                return result
            self.pos += 1
            result = _product(result, self.factor())

    def factor(self):
        self.skip()
        start = self.pos
        c = self.peek()
        if c == '(':
            self.pos += 1
            result = self.expression()
            self.skip()
            if self.peek() != ')':
                self.fail("expected ')'")
            self.pos += 1
        elif _isdigit(c):
            result = self.number()
        elif _issymbol(c):
            while _issymbol(self.peek()):
                self.pos += 1
            result = _resolve(self.text[start:self.pos], self.strict, start)
            c = self.peek()
            if _isdigit(c) or c == '-' and _isdigit(self.text[self.pos+1:self.pos+2]):
                return _power(result, self.integer())
        elif not c:
            self.fail('expected a unit')
        else:
            self.fail(f'unexpected character {c!r}')
        return _power(result, self.exponent())

    def number(self):
        start = self.pos
        n = self.integer()
        if n == 1:
            return Expression()
        if n == 10:
            return Expression(scale=ScaleVector.ten(1))
        self.fail(f'unsupported numeric factor {n}', start)

    def exponent(self):
        if self.peek() == '^':
            self.pos += 1
        elif self.text.startswith('**', self.pos):
            self.pos += 2
        elif self.peek() and self.peek() in _superscripts:
            start = self.pos
            while self.peek() and self.peek() in _superscripts:
                self.pos += 1
            try:
                return int(_util.unsuperscript(self.text[start:self.pos]))
            except ValueError:
                self.fail('invalid exponent', start)
        else:
            return 1
        return self.integer()

    def integer(self):
        start = self.pos
        if self.peek() in ('-', '+'):
            self.pos += 1
        while _isdigit(self.peek()):
            self.pos += 1
        try:
            return int(self.text[start:self.pos])
        except ValueError:
            self.fail('expected an integer', start)


def _issymbol(c):
    return bool(c) and (c.isalpha() or c in '_°')


def _isdigit(c):
    return bool(c) and c in _digits


# vim:sw=4:sts=4:et
