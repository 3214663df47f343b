'''
The pretty module renders a dimension and scale pair as the most readable
unit name available.

Catalog units are used wherever one matches the scale exactly:

    >>> from dimscale import pretty
    >>> from dimscale.dimension import DimensionVector, ScaleVector, IDENTITY
    >>> energy = DimensionVector(mass=1, length=2, time=-2)
    >>> pretty.format_unit(energy, IDENTITY)
    'J'
    >>> pretty.format_unit(energy, ScaleVector.ten(3), long_name=True)
    'kilojoule'

Other quantities are named systematically from the base units, with an SI
prefix where the scale allows one. A prefix that divides the exponent of a
single base unit binds to that unit:

    >>> length = DimensionVector(length=1)
    >>> pretty.format_unit(length, ScaleVector.ten(-3))
    'mm'
    >>> pretty.format_unit(length * 2, ScaleVector.ten(-6))
    'mm²'
    >>> pretty.format_unit(length * 2, ScaleVector.ten(-3))
    'm(m²)'
    >>> pretty.format_unit(length - DimensionVector(time=1), ScaleVector.ten(3))
    'k(m·s⁻¹)'

Scales without a prefix are written out, as a power of ten or as a number with
:func:`digits` significant digits:

    >>> pretty.format_unit(length, ScaleVector.ten(4))
    '10⁴ m'
    >>> pretty.format_unit(DimensionVector(time=1), ScaleVector(p2=3, p3=1, p5=1))
    '(120)s'

Unresolved exponents never cause an error; they are grouped after the
resolved part:

    >>> pretty.format_unit(DimensionVector(length=1, time=None), IDENTITY)
    'm·(Tˀ)'
'''

from . import catalog, prefix, _util
from . import scale as _scale
from .dimension import DimensionVector, ScaleVector, IDENTITY, PRIMES, UNRESOLVED
from ._util import superscript


@_util.set_current
@_util.defaults_from_env
def digits(digits: int = 5):
    if digits < 1:
        raise ValueError('the number of significant digits must be positive')
    return digits


def format_unit(dimension, scale, long_name=False):
    '''Readable unit name of a dimension and scale.

    Args
    ----
    dimension : :class:`dimscale.dimension.DimensionVector`
        Exponents of the base quantities, possibly unresolved.
    scale : :class:`dimscale.dimension.ScaleVector`
        Scale relative to the SI-coherent unit, possibly unresolved.
    long_name : :class:`bool`
        Use unit and prefix names rather than symbols.

    Returns
    -------
    :class:`str`
        ``?`` if nothing is known, ``1`` for the dimensionless identity, and a
        unit name otherwise. An unresolved scale is appended in brackets, see
        :func:`format_scale`.
    '''

    dimension = DimensionVector(dimension)
    scale = ScaleVector(scale)
    if dimension.isunknown and scale.isunknown:
        return '?'
    if not scale.resolved:
        return format_unit(dimension, IDENTITY, long_name) + format_scale(scale)
    if not dimension.resolved:
        solved = DimensionVector(n or 0 for n in dimension)
        head = format_unit(solved, scale, long_name)
        tail = str(DimensionVector(None if n is None else 0 for n in dimension))
        if head == '1':
            return tail
        return head + (' ' if solved.iszero else '·') + tail
    if dimension.iszero:
        return _format_number(scale, '')
    return _format_named(dimension, scale, long_name) or _format_systematic(dimension, scale, long_name)


def format_dimension_name(dimension):
    '''Catalog name of a dimension, or its symbolic rendering.

    >>> format_dimension_name(DimensionVector(mass=1, length=2, time=-2))
    'Energy'
    >>> format_dimension_name(DimensionVector(length=4, time=None))
    'L⁴·(Tˀ)'
    '''

    dimension = DimensionVector(dimension)
    entry = catalog.lookup_dimension(dimension)
    return entry.name if entry is not None else str(dimension)


def format_dimension_verbose(dimension):
    '''Dimension written out with the names of the base quantities.

    >>> format_dimension_verbose(DimensionVector(mass=1, length=2, time=None))
    'Mass·Length²·(Timeˀ)'
    '''

    dimension = DimensionVector(dimension)
    if dimension.isunknown:
        return '?'
    solved = [entry.name + (superscript(n) if n != 1 else '') for entry, n in zip(catalog.ATOMIC, dimension) if n]
    unsolved = [entry.name + UNRESOLVED for entry, n in zip(catalog.ATOMIC, dimension) if n is None]
    if unsolved:
        solved.append('({})'.format('·'.join(unsolved)))
    return '·'.join(solved) or '1'


def format_scale(scale):
    '''Bracketed list of the non-zero prime exponents of a scale.

    The identity scale renders as an empty string.

    >>> format_scale(ScaleVector.ten(3))
    ' [2³, 5³]'
    >>> format_scale(ScaleVector(p2=1, pi=None))
    ' [2¹, πˀ]'
    '''

    terms = [prime + (UNRESOLVED if n is None else superscript(n)) for prime, n in zip(PRIMES, ScaleVector(scale)) if n != 0]
    return ' [{}]'.format(', '.join(terms)) if terms else ''


def format_ucum(dimension, scale):
    '''UCUM case-sensitive code of a dimension and scale.

    Base units are joined by ``.`` with plain exponents. The scale binds to the
    first base unit as a prefix where possible, and is written as a leading
    ``10^n`` or integer factor otherwise.

    >>> format_ucum(DimensionVector(mass=1, length=2, time=-2), IDENTITY)
    'kg.m2.s-2'
    >>> format_ucum(DimensionVector(length=1), ScaleVector.ten(-6))
    'um'
    >>> format_ucum(DimensionVector(length=2), ScaleVector.ten(-3))
    '10^-3.m2'
    >>> format_ucum(DimensionVector(time=1), ScaleVector(p2=2, p3=1, p5=1))
    '60.s'

    Power-of-ten scales parse back with
    :func:`dimscale.parser.parse_unit_expression`. Scales involving π or a
    fraction other than a power of ten have no UCUM code and raise
    :class:`ValueError`, as do unresolved vectors.
    '''

    dimension = DimensionVector(dimension).require_resolved('dimension')
    scale = ScaleVector(scale).require_resolved('scale')
    parts = []
    for index in dimension.nonzero():
        base = catalog.ATOMIC[index].base_unit
        scale -= base.scale * dimension[index]
        parts.append([base.symbol, dimension[index]])
    if parts and scale.log10:
        n = parts[0][1]
        p = prefix.by_exponent(scale.log10 // n) if scale.log10 % n == 0 else None
        if p is not None:
            parts[0][0] = _ucum_prefixes.get(p.symbol, p.symbol) + parts[0][0]
            scale = IDENTITY
    terms = [symbol + (str(n) if n != 1 else '') for symbol, n in parts]
    if scale != IDENTITY:
        terms.insert(0, _ucum_factor(scale))
    return '.'.join(terms) or '1'


# INTERNAL HELPER FUNCTIONS

def _format_named(dimension, scale, long_name):
    entry = catalog.lookup_dimension(dimension)
    if entry is None:
        return None
    unit = entry.find_unit(scale)
    if unit is not None:
        return unit.name if long_name else unit.symbol
    if entry.si_symbol is None:
        return None
    name = entry.si_name if long_name else entry.si_symbol
    if scale.log10 == 0:
        return name
    p = prefix.by_exponent(scale.log10) if scale.log10 is not None else None
    if p is not None:
        return _prefix_name(p, long_name) + name
    if scale.log10 is None and not name.isalpha():
        name = f'({name})'
    return _format_number(scale, name)


def _format_systematic(dimension, scale, long_name):
    indices = dimension.nonzero()
    if len(indices) == 1:
        index, = indices
        base = catalog.ATOMIC[index].base_unit
        exponent = dimension[index]
        return _format_scaled(base.name if long_name else base.symbol, exponent, scale - base.scale * exponent, long_name)
    parts = []
    for index in indices:
        base = catalog.ATOMIC[index].base_unit
        if base.scale == IDENTITY:
            name = base.name if long_name else base.symbol
        else:
            # coherent mass unit
            p = prefix.by_exponent(-base.scale.log10)
            name = _prefix_name(p, long_name) + (base.name if long_name else base.symbol)
        parts.append(name + (superscript(dimension[index]) if dimension[index] != 1 else ''))
    return _format_scaled('({})'.format('·'.join(parts)), None, scale, long_name)


def _format_scaled(name, exponent, scale, long_name):
    # `scale` is relative to `name` raised to `exponent`; the exponent is None
    # for compounds, in which case `name` is already parenthesized
    unit = name if exponent is None else name + (superscript(exponent) if exponent != 1 else '')
    effective = scale.log10
    if effective is None:
        return _format_number(scale, unit)
    if effective == 0:
        return unit
    if exponent is not None and effective % exponent == 0:
        p = prefix.by_exponent(effective // exponent)
        if p is not None:
            return _prefix_name(p, long_name) + unit
    p = prefix.by_exponent(effective)
    if p is not None:
        return _prefix_name(p, long_name) + (unit if unit.startswith('(') else f'({unit})')
    return f'10{superscript(effective)} {unit}'


def _format_number(scale, unit):
    if scale.log10 is not None:
        return str(scale) + (' ' + unit if unit else '')
    return f'({_util.f2s(_scale.value(scale), digits.current)}){unit}'


def _prefix_name(p, long_name):
    return p.name if long_name else p.symbol


_ucum_prefixes = {'µ': 'u'}


def _ucum_factor(scale):
    if scale.log10 is not None:
        return f'10^{scale.log10}'
    if scale.pi == 0 and min(scale) >= 0:
        return str(2**scale.p2 * 3**scale.p3 * 5**scale.p5)
    raise ValueError(f'scale{format_scale(scale)} has no UCUM representation')


# vim:sw=4:sts=4:et
