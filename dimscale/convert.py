'''
Conversion of plain values between unit expressions.

    >>> from dimscale import convert
    >>> convert.factor('km/h', 'm/s')
    0.2777777777777778
    >>> convert.convert(0, 'degC', 'K')
    273.15

Expressions of different dimension are never converted:

    >>> convert.factor('m', 'g')
    Traceback (most recent call last):
         ...
    dimscale.exception.DimensionMismatch: expected [M], got [L]
'''

from . import parser, scale
from .dimension import ScaleVector
import math


def _expression(arg):
    return arg if isinstance(arg, parser.Expression) else parser.parse_unit_expression(arg)


def _rational(s):
    return ScaleVector((s.p2, s.p3, s.p5, 0))


def factor(source, target, *, exact=False):
    '''Multiplier that converts a value in ``source`` units to ``target`` units.

    Affine offsets are ignored; use :func:`convert` for absolute values of
    affine units.'''

    source = _expression(source)
    target = _expression(target)
    scale.check_compatible(target.dimension, source.dimension)
    if exact:
        return source.factor / target.factor * scale.conversion_factor(source.scale, target.scale, source.dimension, exact=True)
    from_scale = source.scale.require_resolved('source scale')
    to_scale = target.scale.require_resolved('target scale')
    # rational part exactly, powers of pi in floating point
    f = source.factor / target.factor * scale.conversion_factor(_rational(from_scale), _rational(to_scale), source.dimension, exact=True)
    return float(f) * math.pi**(from_scale.pi - to_scale.pi)


def convert(value, source, target):
    '''Convert a value, or an array of values, from ``source`` to ``target`` units.

    The value is first brought to the coherent unit, adding the affine offset of
    the source, then expressed in the target unit, subtracting the affine offset
    of the target.'''

    source = _expression(source)
    target = _expression(target)
    f = factor(source, target)
    if not source.affine and not target.affine:
        return value * f
    return (value + float(source.offset)) * f - float(target.offset)


# vim:sw=4:sts=4:et
