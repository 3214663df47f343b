'''
The dimension module defines the two vector types that describe a physical
quantity: the :class:`DimensionVector` holds the exponents of the eight base
quantities, and the :class:`ScaleVector` holds the exponents of the prime
factorized multiplier relative to the SI-coherent unit.

    >>> from dimscale.dimension import DimensionVector, ScaleVector
    >>> force = DimensionVector(mass=1, length=1, time=-2)
    >>> force
    DimensionVector(mass=1, length=1, time=-2)
    >>> print(force * 2)
    M²·L²·T⁻⁴

Exponents that are not known are represented by ``None``. Such unresolved
slots propagate through arithmetic and are never equal to zero:

    >>> partial = DimensionVector(length=1, time=None)
    >>> partial.resolved
    False
    >>> print(partial + force)
    M·L²·(Tˀ)

A scale is a product of powers of 2, 3, 5 and π. Scales that are powers of ten
report their base-10 logarithm:

    >>> ScaleVector.ten(-3).log10
    -3
    >>> print(ScaleVector(p2=2, p3=2, p5=1))
    2²·3²·5
'''

import operator
from . import exception, _util

BASES = 'mass', 'length', 'time', 'current', 'temperature', 'amount', 'luminosity', 'angle'
SYMBOLS = 'M', 'L', 'T', 'I', 'θ', 'N', 'Cd', 'A'
PRIMES = '2', '3', '5', 'π'

UNRESOLVED = 'ˀ'


class _Exponents(tuple):
    '''Immutable vector of integer exponents with ``None`` for unresolved slots.'''

    __slots__ = ()
    _names = ()
    _symbols = ()

    def __new__(cls, items=None, **exponents):
        if exponents:
            if items is not None:
                raise TypeError(f'{cls.__name__} accepts either a sequence or keyword arguments, not both')
            unknown = set(exponents).difference(cls._names)
            if unknown:
                raise TypeError(f'{cls.__name__} got unexpected exponent(s): {", ".join(sorted(unknown))}')
            items = [exponents.get(name, 0) for name in cls._names]
        elif items is None:
            items = (0,) * len(cls._names)
        items = tuple(items)
        if len(items) != len(cls._names):
            raise ValueError(f'{cls.__name__} requires {len(cls._names)} exponents, got {len(items)}')
        return super().__new__(cls, [item if item is None else operator.index(item) for item in items])

    @classmethod
    def unknown(cls):
        'vector with all slots unresolved'

        return cls([None] * len(cls._names))

    @property
    def resolved(self) -> bool:
        return None not in self

    @property
    def isunknown(self) -> bool:
        return all(item is None for item in self)

    @property
    def iszero(self) -> bool:
        return all(item == 0 for item in self)

    def require_resolved(self, what='operand'):
        if not self.resolved:
            raise exception.UnresolvedOperand(f'{what} {self!r} has unresolved exponents')
        return self

    def _zip(self, op, other):
        if type(other) is not type(self):
            # never fall back to tuple concatenation
            raise TypeError(f'cannot combine {type(self).__name__} with {type(other).__name__}')
        return type(self)(None if a is None or b is None else op(a, b) for a, b in zip(self, other))

    def __add__(self, other):
        return self._zip(operator.add, other)

    def __sub__(self, other):
        return self._zip(operator.sub, other)

    def __neg__(self):
        return type(self)(None if a is None else -a for a in self)

    def __mul__(self, other):
        try:
            n = operator.index(other)
        except TypeError:
            return NotImplemented
        return type(self)(None if a is None else a * n for a in self)

    __rmul__ = __mul__

    def __getnewargs__(self):
        return tuple(self),

    def __repr__(self):
        return '{}({})'.format(type(self).__name__, ', '.join(f'{name}={value}' for name, value in zip(self._names, self) if value != 0))

    def __str__(self):
        solved = [symbol + (_util.superscript(n) if n != 1 else '') for symbol, n in zip(self._symbols, self) if n]
        unsolved = [symbol + UNRESOLVED for symbol, n in zip(self._symbols, self) if n is None]
        if unsolved:
            if not solved:
                return '?' if len(unsolved) == len(self) else '({})'.format('·'.join(unsolved))
            solved.append('({})'.format('·'.join(unsolved)))
        return '·'.join(solved) or '1'

    @classmethod
    def __stringly_loads__(cls, s):
        return cls(None if item.strip() == '?' else int(item) for item in s.split(','))

    @classmethod
    def __stringly_dumps__(cls, v):
        return ','.join('?' if item is None else str(item) for item in cls(v))


class DimensionVector(_Exponents):
    '''Exponents of the eight base quantities.

    The slots are, in order, mass, length, time, current, temperature, amount
    of substance, luminous intensity and angle. Construct either from a
    sequence of eight integers (or ``None``) or from keyword arguments, in
    which case omitted slots are zero.'''

    __slots__ = ()
    _names = BASES
    _symbols = SYMBOLS

    mass = property(operator.itemgetter(0))
    length = property(operator.itemgetter(1))
    time = property(operator.itemgetter(2))
    current = property(operator.itemgetter(3))
    temperature = property(operator.itemgetter(4))
    amount = property(operator.itemgetter(5))
    luminosity = property(operator.itemgetter(6))
    angle = property(operator.itemgetter(7))

    def nonzero(self):
        'indices of the resolved, non-zero slots'

        return tuple(i for i, n in enumerate(self) if n)

    @property
    def atomic(self):
        '''Index of the single non-zero slot, or ``None`` if the vector is not a
        power of a single base quantity.'''

        if not self.resolved:
            return None
        indices = self.nonzero()
        return indices[0] if len(indices) == 1 else None


class ScaleVector(_Exponents):
    '''Exponents of the prime factorized multiplier ``2^p2 3^p3 5^p5 π^pi``.'''

    __slots__ = ()
    _names = 'p2', 'p3', 'p5', 'pi'
    _symbols = PRIMES

    p2 = property(operator.itemgetter(0))
    p3 = property(operator.itemgetter(1))
    p5 = property(operator.itemgetter(2))
    pi = property(operator.itemgetter(3))

    @classmethod
    def ten(cls, n):
        'scale of ``10^n``'

        return cls((n, 0, n, 0))

    @property
    def log10(self):
        'base-10 logarithm if the scale is a pure power of ten, otherwise ``None``'

        if self.resolved and self.p2 == self.p5 and self.p3 == 0 and self.pi == 0:
            return self.p2
        return None

    def __str__(self):
        if self.resolved and self.log10 is not None:
            return '10' + _util.superscript(self.log10) if self.log10 else '1'
        return super().__str__()


DIMENSIONLESS = DimensionVector()
IDENTITY = ScaleVector()


# vim:sw=4:sts=4:et
