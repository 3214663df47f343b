'''
The catalog module holds the static table of dimensions and units.

Every :class:`Dimension` is identified by its unique exponent vector and lists
the units that measure it. The scale of a unit is expressed relative to the
SI-coherent unit of its dimension, so that the gram carries a scale of 10⁻³
with respect to the kilogram:

    >>> from dimscale import catalog
    >>> dimension, unit = catalog.lookup_unit_by_symbol('g')
    >>> dimension.name, unit.name, str(unit.scale)
    ('Mass', 'gram', '10⁻³')

Units that are not an exact power-of-prime multiple of the coherent unit carry
an additional rational conversion factor; affine units such as the degree
Celsius also carry an offset:

    >>> dimension, unit = catalog.lookup_unit_by_symbol('degC')
    >>> unit.affine_offset
    Fraction(5463, 20)

Each dimension designates at most one base unit, which is the unit that SI
prefixes attach to:

    >>> catalog.lookup_dimension_by_name('density').name
    'Volume Mass Density'
    >>> catalog.lookup_dimension_by_name('Length').base_unit.name
    'meter'

The catalog is assembled once, on first import, and is read-only afterwards.
'''

import enum
import fractions
import itertools
from .dimension import DimensionVector, ScaleVector, IDENTITY, BASES


class System(enum.Enum):
    METRIC = 'Metric'
    IMPERIAL = 'Imperial'
    ASTRONOMICAL = 'Astronomical'


class Unit:
    '''A unit of measurement.

    Args
    ----
    name : :class:`str`
        Long name, lower case with underscores separating words.
    symbols : :class:`str` or sequence of :class:`str`
        Symbol or symbols. The first symbol is canonical.
    scale : :class:`dimscale.dimension.ScaleVector`
        Scale relative to the SI-coherent unit of the dimension.
    factor :
        Rational conversion factor on top of the scale, given as anything
        :class:`fractions.Fraction` accepts. Decimal strings are exact.
    offset :
        Affine offset, such that ``coherent = (value + offset) * factor * scale``.
    system : :class:`System`
        Measurement system.
    base : :class:`bool`
        Whether SI prefixes may be attached to this unit.
    '''

    __slots__ = 'name', 'symbols', 'scale', 'conversion_factor', 'affine_offset', 'system', 'base', 'dimension'

    def __init__(self, name, symbols, scale=IDENTITY, factor=1, offset=0, system=System.METRIC, base=False):
        self.name = name
        self.symbols = (symbols,) if isinstance(symbols, str) else tuple(symbols)
        if not self.symbols:
            raise ValueError(f'unit {name!r} requires at least one symbol')
        self.scale = ScaleVector(scale).require_resolved('scale of unit ' + name)
        self.conversion_factor = fractions.Fraction(factor)
        self.affine_offset = fractions.Fraction(offset)
        self.system = System(system)
        self.base = bool(base)
        self.dimension = None

    @property
    def symbol(self):
        'canonical symbol'

        return self.symbols[0]

    @property
    def storage(self) -> bool:
        'true if the unit has no conversion factor beyond its scale'

        return self.conversion_factor == 1

    @property
    def coherent(self) -> bool:
        return self.storage and self.scale == IDENTITY and not self.affine

    @property
    def affine(self) -> bool:
        return self.affine_offset != 0

    def __repr__(self):
        return f'Unit({self.name!r}, {self.symbol!r})'


class Dimension:
    '''A physical dimension and the units that measure it.'''

    __slots__ = 'name', 'exponents', 'units', 'si_symbol', 'si_name', 'aliases'

    def __init__(self, name, exponents, units=(), si_symbol=None, si_name=None, aliases=()):
        self.name = name
        self.exponents = DimensionVector(exponents).require_resolved('exponents of dimension ' + name)
        self.units = tuple(units)
        self.si_symbol = si_symbol
        self.si_name = si_name
        self.aliases = tuple(aliases)
        if sum(unit.base for unit in self.units) > 1:
            raise ValueError(f'dimension {name!r} declares more than one base unit')
        for unit in self.units:
            if unit.dimension is not None:
                raise ValueError(f'unit {unit.name!r} is already assigned to dimension {unit.dimension.name!r}')
            unit.dimension = self

    @property
    def symbol(self):
        'symbolic rendering of the exponents, e.g. ``M·L·T⁻²``'

        return str(self.exponents)

    @property
    def base_unit(self):
        'the unit that SI prefixes attach to, or ``None``'

        for unit in self.units:
            if unit.base:
                return unit
        return None

    def find_unit(self, scale):
        'first storage unit with exactly the given scale, or ``None``'

        for unit in self.units:
            if unit.storage and not unit.affine and unit.scale == scale:
                return unit
        return None

    def __repr__(self):
        return f'Dimension({self.name!r}, {self.symbol!r})'


# INTERNAL HELPER FUNCTIONS

_declared = []

def _declare(name, exponents, *units, **kwargs):
    exponents = tuple(exponents) + (0,) * (len(BASES) - len(exponents))
    _declared.append(Dimension(name, exponents, units, **kwargs))

def _10(n):
    return ScaleVector((n, 0, n, 0))

def _6(n):
    return ScaleVector((n, n, 0, 0))

def _2(n):
    return ScaleVector((n, 0, 0, 0))

def _normalize(s):
    return s.lower().replace('_', ' ').strip()

# irregular plurals of unit names
_plurals = dict(feet='foot', inches='inch', henries='henry')


## ATOMIC DIMENSIONS

IMPERIAL = System.IMPERIAL
ASTRONOMICAL = System.ASTRONOMICAL

_declare('Mass', [1],
    Unit('gram', 'g', _10(-3), base=True),
    Unit('grain', 'gr', _10(-4), '0.6479891', system=IMPERIAL),
    Unit('carat', 'ct', _10(-4) + _2(1)),
    Unit('ounce', 'oz', _10(-2), '2.8349523125', system=IMPERIAL),
    Unit('troy_ounce', 'ozt', _10(-2), '3.11034768', system=IMPERIAL),
    Unit('troy_pound', 'lbt', IDENTITY, '0.3732417216', system=IMPERIAL),
    Unit('pound', 'lb', IDENTITY, '0.45359237', system=IMPERIAL),
    Unit('stone', 'st', _10(1), '0.635029318', system=IMPERIAL),
    Unit('slug', 'slg', _10(1), '1.4593902937206365', system=IMPERIAL),
    Unit('ton', 't', _10(3), '1.0160469088', system=IMPERIAL))

_declare('Length', [0, 1],
    Unit('meter', 'm', base=True),
    Unit('inch', 'in', _10(-2), '2.54', system=IMPERIAL),
    Unit('foot', 'ft', _10(-1), '3.048', system=IMPERIAL),
    Unit('yard', 'yd', IDENTITY, '0.9144', system=IMPERIAL),
    Unit('fathom', 'ftm', IDENTITY, '1.8288', system=IMPERIAL),
    Unit('furlong', 'fur', _10(2), '2.01168', system=IMPERIAL),
    Unit('mile', 'mi', _10(3), '1.609344', system=IMPERIAL),
    Unit('nautical_mile', 'nmi', _10(3), '1.852', system=IMPERIAL),
    Unit('astronomical_unit', 'AU', _10(11), '1.495978707', system=ASTRONOMICAL),
    Unit('light_year', 'ly', _10(16), '0.94607304725808', system=ASTRONOMICAL),
    Unit('parsec', 'pc', _10(16), '3.08567758128', system=ASTRONOMICAL))

_declare('Time', [0, 0, 1],
    Unit('second', 's', base=True),
    Unit('minute', 'min', _10(1) + _6(1)),
    Unit('hour', ('h', 'hr'), _10(2) + _6(2)),
    Unit('day', 'd', _10(2) + _6(3) + _2(2)),
    Unit('week', 'wk', _10(3) + _6(3) + _2(2), '0.7'),
    Unit('month', 'mo', _10(3) + _6(4) + _2(1)),
    Unit('year', 'yr', _10(7), '3.1556926'))

_declare('Current', [0, 0, 0, 1],
    Unit('ampere', 'A', base=True),
    aliases=['electric current'])

_declare('Temperature', [0, 0, 0, 0, 1],
    Unit('kelvin', 'K', base=True),
    Unit('celsius', ('degC', '°C'), offset='273.15'),
    Unit('rankine', ('R', '°R'), ScaleVector((0, -2, 1, 0)), system=IMPERIAL),
    Unit('fahrenheit', ('degF', '°F'), ScaleVector((0, -2, 1, 0)), offset='459.67', system=IMPERIAL))

_declare('Amount', [0, 0, 0, 0, 0, 1],
    Unit('mole', 'mol', base=True),
    aliases=['amount of substance'])

_declare('Luminosity', [0, 0, 0, 0, 0, 0, 1],
    Unit('candela', 'cd', base=True),
    Unit('lumen', 'lm'),
    aliases=['luminous intensity', 'luminous flux'])

_declare('Angle', [0, 0, 0, 0, 0, 0, 0, 1],
    Unit('radian', 'rad', base=True),
    Unit('degree', ('deg', '°'), ScaleVector((-2, -2, -1, 1))),
    Unit('gradian', 'grad', ScaleVector((-3, 0, -2, 1))),
    Unit('turn', ('rot', 'turn'), ScaleVector((1, 0, 0, 1))),
    Unit('arcminute', 'arcmin', ScaleVector((-4, -3, -2, 1))),
    Unit('arcsecond', 'arcsec', ScaleVector((-6, -4, -3, 1))))


## DERIVED DIMENSIONS WITH UNITS

_declare('Area', [0, 2],
    Unit('hectare', ('ha', 'hect'), _10(4)),
    Unit('acre', 'acre', _10(4), '0.40468564224', system=IMPERIAL))

_declare('Volume', [0, 3],
    Unit('liter', ('L', 'l'), _10(-3), base=True),
    Unit('gallon', ('gal', 'gallon'), _10(-2), '0.3785411784', system=IMPERIAL),
    Unit('uk_gallon', 'uk_gal', _10(-2), '0.454609', system=IMPERIAL),
    Unit('quart', 'qrt', _10(-3), '0.946352946', system=IMPERIAL),
    Unit('uk_quart', 'uk_qrt', _10(-3), '1.1365225', system=IMPERIAL),
    Unit('pint', 'pnt', _10(-3), '0.473176473', system=IMPERIAL),
    Unit('uk_pint', 'uk_pnt', _10(-3), '0.56826125', system=IMPERIAL),
    Unit('cup', 'cup', _10(-4), '2.365882365', system=IMPERIAL),
    Unit('uk_cup', 'uk_cup', _10(-4), '2.84130625', system=IMPERIAL),
    Unit('fluid_ounce', 'fl_oz', _10(-5), '2.95735295625', system=IMPERIAL),
    Unit('uk_fluid_ounce', 'uk_fl_oz', _10(-5), '2.84130625', system=IMPERIAL),
    Unit('tablespoon', 'tbsp', _10(-5), '1.478676478125', system=IMPERIAL),
    Unit('uk_tablespoon', 'uk_tbsp', _10(-5), '1.77581640625', system=IMPERIAL),
    Unit('teaspoon', 'tsp', _10(-5), '0.492892159375', system=IMPERIAL),
    Unit('uk_teaspoon', 'uk_tsp', _10(-5), '0.59193880208333', system=IMPERIAL),
    Unit('bushel', 'bu', _10(-1), '0.3523907016688', system=IMPERIAL))

_declare('Frequency', [0, 0, -1],
    Unit('hertz', 'Hz', base=True),
    si_symbol='Hz', si_name='hertz')

_declare('Force', [1, 1, -2],
    Unit('newton', 'N', base=True),
    si_symbol='N', si_name='newton', aliases=['weight'])

_declare('Energy', [1, 2, -2],
    Unit('joule', 'J', base=True),
    Unit('newton_meter', 'Nm'),
    Unit('electron_volt', 'eV', _10(-19), '1.602176634'),
    Unit('erg', 'erg', _10(-7)),
    Unit('calorie', 'cal', _10(1), '0.4184'),
    Unit('foot_pound', 'ft_lb', _10(1), '0.13558179483314004', system=IMPERIAL),
    Unit('kilowatt_hour', 'kWh', _10(5) + _6(2)),
    Unit('therm', 'thm', _10(8), '1.05505585262', system=IMPERIAL),
    si_symbol='J', si_name='joule', aliases=['work', 'heat'])

_declare('Power', [1, 2, -3],
    Unit('watt', 'W', base=True),
    Unit('horsepower', 'hp', _10(3), '0.7456998715822702', system=IMPERIAL),
    si_symbol='W', si_name='watt')

_declare('Pressure', [1, -1, -2],
    Unit('pascal', 'Pa', base=True),
    Unit('torr', 'Torr', _10(2), '1.3332236842105263'),
    Unit('psi', 'psi', _10(4), '0.6894757293168361', system=IMPERIAL),
    Unit('bar', 'bar', _10(5)),
    Unit('atmosphere', 'atm', _10(5), '1.01325'),
    si_symbol='Pa', si_name='pascal', aliases=['stress'])

_declare('Electric Charge', [0, 0, 1, 1],
    Unit('coulomb', 'C', base=True),
    si_symbol='C', si_name='coulomb', aliases=['charge'])

_declare('Electric Potential', [1, 2, -3, -1],
    Unit('volt', 'V', base=True),
    si_symbol='V', si_name='volt', aliases=['potential', 'voltage'])

_declare('Capacitance', [-1, -2, 4, 2],
    Unit('farad', 'F', base=True),
    si_symbol='F', si_name='farad')

_declare('Electric Resistance', [1, 2, -3, -2],
    Unit('ohm', ('Ω', 'ohm'), base=True),
    si_symbol='Ω', si_name='ohm', aliases=['resistance', 'impedance'])

_declare('Electric Conductance', [-1, -2, 3, 2],
    Unit('siemens', 'S', base=True),
    si_symbol='S', si_name='siemens', aliases=['conductance'])

_declare('Inductance', [1, 2, -2, -2],
    Unit('henry', 'H', base=True),
    si_symbol='H', si_name='henry')

_declare('Magnetic Field', [1, 0, -2, -1],
    Unit('tesla', 'T', base=True),
    Unit('gauss', 'G', _10(-4)),
    si_symbol='T', si_name='tesla', aliases=['magnetic flux density'])

_declare('Magnetic Flux', [1, 2, -2, -1],
    Unit('weber', 'Wb', base=True),
    si_symbol='Wb', si_name='weber')

_declare('Illuminance', [0, -2, 0, 0, 0, 0, 1],
    Unit('lux', 'lx', base=True),
    si_symbol='lx', si_name='lux')

_declare('Volume Mass Density', [1, -3],
    aliases=['density'])

_declare('Linear Mass Density', [1, -1])

_declare('Dynamic Viscosity', [1, -1, -1],
    si_symbol='Pa·s', si_name='pascal second', aliases=['viscosity'])

_declare('Kinematic Viscosity', [0, 2, -1],
    Unit('stokes', 'St', _10(-4), base=True))


## DERIVED DIMENSIONS WITHOUT UNITS

_declare('Wave Number', [0, -1], aliases=['inverse length'])
_declare('Velocity', [0, 1, -1], aliases=['speed'])
_declare('Acceleration', [0, 1, -2])
_declare('Jerk', [0, 1, -3])
_declare('Momentum', [1, 1, -1], si_symbol='N·s', si_name='newton second')
_declare('Action', [1, 2, -1], si_symbol='J·s', si_name='joule second')
_declare('Surface Mass Density', [1, -2])
_declare('Surface Tension', [1, 0, -2], si_symbol='N/m', si_name='newton per meter')
_declare('Specific Energy', [0, 2, -2], si_symbol='J/kg', si_name='joule per kilogram')
_declare('Specific Power', [0, 2, -3], si_symbol='W/kg', si_name='watt per kilogram')
_declare('Mass Flow Rate', [1, 0, -1])
_declare('Volume Flow Rate', [0, 3, -1])
_declare('Power Density', [1, -1, -3], si_symbol='W/m³', si_name='watt per cubic meter')
_declare('Force Density', [1, -2, -2], si_symbol='N/m³', si_name='newton per cubic meter')
_declare('Heat Flux', [1, 0, -3], si_symbol='W/m²', si_name='watt per square meter')
_declare('Electric Field', [1, 1, -3, -1], si_symbol='V/m', si_name='volt per meter')
_declare('Linear Charge Density', [0, -1, 1, 1], si_symbol='C/m', si_name='coulomb per meter')
_declare('Surface Charge Density', [0, -2, 1, 1], si_symbol='C/m²', si_name='coulomb per square meter')
_declare('Volume Charge Density', [0, -3, 1, 1], si_symbol='C/m³', si_name='coulomb per cubic meter')
_declare('Magnetizing Field', [0, -1, 0, 1], si_symbol='A/m', si_name='ampere per meter')
_declare('Entropy', [1, 2, -2, 0, -1], si_symbol='J/K', si_name='joule per kelvin')
_declare('Specific Heat Capacity', [0, 2, -2, 0, -1], si_symbol='J/(kg·K)', si_name='joule per kilogram kelvin')
_declare('Molar Heat Capacity', [1, 2, -2, 0, -1, -1], si_symbol='J/(mol·K)', si_name='joule per mole kelvin')
_declare('Thermal Conductivity', [1, 1, -3, 0, -1], si_symbol='W/(m·K)', si_name='watt per meter kelvin')
_declare('Thermal Resistance', [-1, -2, 3, 0, 1], si_symbol='K/W', si_name='kelvin per watt')
_declare('Thermal Expansion', [0, 0, 0, 0, -1])
_declare('Molar Mass', [1, 0, 0, 0, 0, -1])
_declare('Molar Volume', [0, 3, 0, 0, 0, -1])
_declare('Molar Concentration', [0, -3, 0, 0, 0, 1], aliases=['concentration'])
_declare('Molal Concentration', [-1, 0, 0, 0, 0, 1])
_declare('Molar Flow Rate', [0, 0, -1, 0, 0, 1], aliases=['catalytic activity'])
_declare('Molar Flux', [0, -2, -1, 0, 0, 1])
_declare('Molar Energy', [1, 2, -2, 0, 0, -1], si_symbol='J/mol', si_name='joule per mole')
_declare('Luminous Exposure', [0, -2, 1, 0, 0, 0, 1], si_symbol='lx·s', si_name='lux second')
_declare('Luminous Efficacy', [-1, -2, 3, 0, 0, 0, 1], si_symbol='lm/W', si_name='lumen per watt')

_declare('dimensionless', [])


## CATALOG

def _index(dimensions):
    by_exponents = {}
    by_name = {}
    by_symbol = {}
    by_unit_name = {}
    for dimension in dimensions:
        if dimension.exponents in by_exponents:
            raise ValueError(f'dimensions {by_exponents[dimension.exponents].name!r} and {dimension.name!r} share exponents')
        by_exponents[dimension.exponents] = dimension
        for key in itertools.chain([_normalize(dimension.name)], map(_normalize, dimension.aliases)):
            if key in by_name:
                raise ValueError(f'dimension name {key!r} is declared twice')
            by_name[key] = dimension
        for unit in dimension.units:
            for symbol in unit.symbols:
                if symbol in by_symbol:
                    raise ValueError(f'unit symbol {symbol!r} is declared twice')
                by_symbol[symbol] = dimension, unit
            if unit.name in by_unit_name:
                raise ValueError(f'unit name {unit.name!r} is declared twice')
            by_unit_name[unit.name] = dimension, unit
    return by_exponents, by_name, by_symbol, by_unit_name


DIMENSIONS = tuple(_declared)
ATOMIC = DIMENSIONS[:len(BASES)]
DIMENSIONLESS = DIMENSIONS[-1]

_by_exponents, _by_name, _by_symbol, _by_unit_name = _index(DIMENSIONS)
_by_stripped_name = {key.replace(' ', ''): dimension for key, dimension in _by_name.items()}

del _declared


def units():
    'iterate over all ``(dimension, unit)`` pairs in declaration order'

    for dimension in DIMENSIONS:
        for unit in dimension.units:
            yield dimension, unit


def lookup_dimension(exponents):
    'dimension with the given exponent vector, or ``None``'

    exponents = DimensionVector(exponents)
    if not exponents.resolved:
        return None
    return _by_exponents.get(exponents)


def lookup_dimension_by_name(name):
    '''Dimension by name, or ``None``.

    Matching is case insensitive and accepts underscores for spaces, names
    written without spaces (``VolumeMassDensity``) and a fixed set of
    synonyms (``density``, ``resistance``, ...).'''

    key = _normalize(name)
    return _by_name.get(key) or _by_stripped_name.get(key.replace(' ', ''))


def lookup_unit_by_symbol(symbol):
    '''``(dimension, unit)`` pair for an exact unit symbol, or ``None``.

    Symbols are case sensitive: ``mm`` is not a catalog symbol (it is a
    prefixed meter, see :mod:`dimscale.parser`) and ``T`` is the tesla.'''

    return _by_symbol.get(symbol)


def lookup_unit_by_name(name):
    '''``(dimension, unit)`` pair for a unit's long name, or ``None``.

    Matching is case insensitive, accepts spaces for underscores and plural
    forms (``meters``, ``feet``).'''

    key = name.strip().lower().replace(' ', '_')
    if key in _by_unit_name:
        return _by_unit_name[key]
    singular = _plurals.get(key) or (key[:-1] if key.endswith('s') else None)
    if singular is not None:
        return _by_unit_name.get(singular)
    return None


# vim:sw=4:sts=4:et
