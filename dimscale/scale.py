'''
The scale module computes the factors that convert between scales.

A scale vector ``[p2, p3, p5, pi]`` represents the multiplier
``2^p2 · 3^p3 · 5^p5 · π^pi``. Converting a value stored at one scale to
another multiplies it by the ratio of the two multipliers:

    >>> from dimscale.dimension import ScaleVector
    >>> from dimscale import scale
    >>> kilo, milli = ScaleVector.ten(3), ScaleVector.ten(-3)
    >>> scale.conversion_factor(kilo, milli, exact=True)
    Fraction(1000000, 1)
    >>> scale.rescale(7, milli, kilo)
    0

Scales must be resolved. An unresolved scale is rejected before any arithmetic
is attempted:

    >>> scale.conversion_factor(ScaleVector.unknown(), milli)
    Traceback (most recent call last):
         ...
    dimscale.exception.UnresolvedOperand: source scale ScaleVector(p2=None, p3=None, p5=None, pi=None) has unresolved exponents
'''

from . import exception
from .dimension import DimensionVector, ScaleVector, IDENTITY
import fractions
import math
import numbers
import numpy
import treelog

# Rational approximation of π used by the exact path.
PI = fractions.Fraction(710, 113)

_exact_bases = 2, 3, 5, PI
_float_bases = 2., 3., 5., math.pi


def _delta(from_scale, to_scale, dimension_weight):
    from_scale = ScaleVector(from_scale).require_resolved('source scale')
    to_scale = ScaleVector(to_scale).require_resolved('target scale')
    if dimension_weight is not None:
        DimensionVector(dimension_weight).require_resolved('dimension weight')
    return from_scale - to_scale


def ratio(from_scale, to_scale, dimension_weight=None):
    '''Exact conversion factor as a reduced ``(numerator, denominator)`` pair.

    Both scales are aggregate scales of a quantity, so the per-base exponent
    difference is applied once irrespective of the dimension exponents; the
    optional ``dimension_weight`` is only checked for being resolved. The π
    component is approximated by :data:`PI`.'''

    numerator = denominator = 1
    for base, delta in zip(_exact_bases, _delta(from_scale, to_scale, dimension_weight)):
        base = fractions.Fraction(base)
        if delta > 0:
            numerator *= base.numerator**delta
            denominator *= base.denominator**delta
        elif delta < 0:
            numerator *= base.denominator**-delta
            denominator *= base.numerator**-delta
    gcd = math.gcd(numerator, denominator)
    return numerator // gcd, denominator // gcd


def conversion_factor(from_scale, to_scale, dimension_weight=None, *, exact=False):
    '''Factor that converts a value at ``from_scale`` to ``to_scale``.

    Args
    ----
    from_scale, to_scale : :class:`dimscale.dimension.ScaleVector`
        Resolved source and target scales.
    dimension_weight : :class:`dimscale.dimension.DimensionVector`, optional
        Dimension of the quantity being converted.
    exact : :class:`bool`
        Return a :class:`fractions.Fraction` rather than a :class:`float`.

    Returns
    -------
    :class:`float` or :class:`fractions.Fraction`
    '''

    if exact:
        return fractions.Fraction(*ratio(from_scale, to_scale, dimension_weight))
    factor = 1.
    for base, delta in zip(_float_bases, _delta(from_scale, to_scale, dimension_weight)):
        if delta:
            factor *= base**delta
    return factor


def value(scale):
    'floating point value of a scale vector'

    return conversion_factor(scale, IDENTITY)


def check_compatible(expected, actual):
    '''Raise :class:`dimscale.exception.DimensionMismatch` unless both
    dimension vectors are resolved and equal.'''

    expected = DimensionVector(expected).require_resolved('expected dimension')
    actual = DimensionVector(actual).require_resolved('actual dimension')
    if expected != actual:
        raise exception.DimensionMismatch(expected, actual)


def rescale(value, from_scale, to_scale):
    '''Convert a value stored at ``from_scale`` to ``to_scale``.

    Python integers and fractions are converted exactly, with integer results
    rounded toward negative infinity. Numpy integer scalars and arrays keep
    their dtype: values for which ``value * numerator`` would overflow are
    divided first, computing ``(value // denominator) * numerator`` at the
    expense of precision, and an :class:`OverflowError` is raised if even that
    exceeds the range of the dtype. All other values are multiplied by the floating
    point conversion factor.'''

    if isinstance(value, numbers.Rational) and not isinstance(value, numpy.integer):
        numerator, denominator = ratio(from_scale, to_scale)
        if isinstance(value, numbers.Integral):
            return int(value) * numerator // denominator
        return value * fractions.Fraction(numerator, denominator)
    array = numpy.asarray(value)
    if array.dtype.kind in 'iu':
        result = _rescale_integer(array, *ratio(from_scale, to_scale))
        return result[()] if array.ndim == 0 else result
    return (value if array.ndim == 0 else array) * conversion_factor(from_scale, to_scale)


def _rescale_integer(array, numerator, denominator):
    iinfo = numpy.iinfo(array.dtype)
    if numerator > iinfo.max or denominator > iinfo.max:
        raise OverflowError(f'conversion factor {numerator}/{denominator} is not representable as {array.dtype}')
    limit = iinfo.max // numerator
    large = array > limit
    if iinfo.min < 0:
        large |= array < -limit
    if large.any():
        treelog.debug(f'dividing {large.sum()} value(s) before multiplication to avoid {array.dtype} overflow')
    small = numpy.where(large, 0, array).astype(array.dtype)
    quotient = numpy.where(large, array, 0).astype(array.dtype) // denominator
    if (quotient > limit).any() or iinfo.min < 0 and (quotient < -limit).any():
        raise OverflowError(f'rescaling by {numerator}/{denominator} exceeds the range of {array.dtype}')
    return (small * numerator // denominator + quotient * numerator).astype(array.dtype)


# vim:sw=4:sts=4:et
