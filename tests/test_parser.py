from dimscale import exception, warnings
from dimscale.testing import TestCase, parametrize
from dimscale.dimension import DimensionVector, ScaleVector, DIMENSIONLESS, IDENTITY
from dimscale.parser import parse_unit_expression, Expression
import fractions
import stringly

force = DimensionVector(mass=1, length=1, time=-2)
length = DimensionVector(length=1)


class grammar(TestCase):

    def assertParses(self, text, dimension, scale=IDENTITY):
        expression = parse_unit_expression(text)
        self.assertEqual(expression.dimension, dimension)
        self.assertEqual(expression.scale, scale)

    def test_compound(self):
        self.assertParses('kg*m/s^2', force)

    def test_operators(self):
        for text in 'kg*m*s^-2', 'kg·m·s⁻²', 'kg⋅m⋅s⁻²', 'kg.m.s-2', 'kg * m / s^2', ' kg*m/s**2 ':
            with self.subTest(text):
                self.assertParses(text, force)

    def test_exponents(self):
        area = DimensionVector(length=2)
        for text in 'm^2', 'm**2', 'm²', 'm2', 'm^+2':
            with self.subTest(text):
                self.assertParses(text, area)
        self.assertParses('s-1', DimensionVector(time=-1))
        self.assertParses('s⁻¹', DimensionVector(time=-1))

    def test_parentheses(self):
        self.assertParses('J/(kg·K)', DimensionVector(length=2, time=-2, temperature=-1))
        self.assertParses('(m/s)^2', DimensionVector(length=2, time=-2))
        self.assertParses('((m))', length)

    def test_numeric(self):
        self.assertParses('1/s', DimensionVector(time=-1))
        self.assertParses('1', DIMENSIONLESS)
        self.assertEqual(parse_unit_expression('10^3*m'), parse_unit_expression('km'))
        self.assertEqual(parse_unit_expression('10*m').scale, ScaleVector.ten(1))


@parametrize
class errors(TestCase):

    def test_position(self):
        with self.assertRaises(exception.ParseError) as cm:
            parse_unit_expression(self.text)
        self.assertEqual(cm.exception.position, self.position)
        self.assertEqual(cm.exception.text, self.text)
        self.assertIsInstance(cm.exception, ValueError)


errors('second_slash', text='m/s/s', position=3)
errors('empty', text='', position=0)
errors('missing_exponent', text='m^', position=2)
errors('unclosed', text='(m', position=2)
errors('unopened', text='m)', position=1)
errors('numeric_factor', text='2m', position=0)
errors('invalid_character', text='m$', position=1)
errors('juxtaposition', text='m s', position=2)
errors('dangling_operator', text='m*', position=2)


class messages(TestCase):

    def test_second_slash(self):
        with self.assertRaises(exception.ParseError) as cm:
            parse_unit_expression('m/s/s')
        self.assertEqual(str(cm.exception), "unexpected second '/' at position 3 in 'm/s/s'")

    def test_numeric_factor(self):
        with self.assertRaises(exception.ParseError) as cm:
            parse_unit_expression('2m')
        self.assertEqual(cm.exception.reason, 'unsupported numeric factor 2')

    def test_not_a_string(self):
        with self.assertRaises(ValueError):
            parse_unit_expression(3)


class resolution(TestCase):

    def test_unknown(self):
        with self.assertRaises(exception.UnknownUnit) as cm:
            parse_unit_expression('foo')
        self.assertEqual(cm.exception.symbol, 'foo')

    def test_suggestion(self):
        with self.assertRaises(exception.UnknownUnit) as cm:
            parse_unit_expression('metre')
        self.assertEqual(str(cm.exception), "unknown unit 'metre'; did you mean 'meter'?")

    def test_unknown_position(self):
        for text, position in ('foo', 0), ('m/foo', 2), ('kg*m/(s*xyz)^2', 8):
            with self.subTest(text):
                with self.assertRaises(exception.UnknownUnit) as cm:
                    parse_unit_expression(text)
                self.assertEqual(cm.exception.position, position)
        with self.assertRaises(exception.UnknownUnit) as cm:
            parse_unit_expression('m/ft', strict=True)
        self.assertEqual(cm.exception.position, 2)

    def test_prefix_requires_base_unit(self):
        for text in 'kmin', 'kft':
            with self.subTest(text):
                with self.assertRaises(exception.UnknownUnit):
                    parse_unit_expression(text)

    def test_prefix(self):
        self.assertEqual(parse_unit_expression('km').scale, ScaleVector.ten(3))
        self.assertEqual(parse_unit_expression('mg').scale, ScaleVector.ten(-6))
        self.assertEqual(parse_unit_expression('kΩ').dimension, DimensionVector(mass=1, length=2, time=-3, current=-2))

    def test_micro(self):
        self.assertEqual(parse_unit_expression('μm'), parse_unit_expression('µm'))
        self.assertEqual(parse_unit_expression('um'), parse_unit_expression('µm'))
        self.assertEqual(parse_unit_expression('µm').scale, ScaleVector.ten(-6))

    def test_long_names(self):
        self.assertEqual(parse_unit_expression('kilometers'), parse_unit_expression('km'))
        self.assertEqual(parse_unit_expression('newton'), parse_unit_expression('N'))
        self.assertEqual(parse_unit_expression('feet'), parse_unit_expression('ft'))

    def test_exact_symbol_first(self):
        # 'min' is a minute, not a milli-inch
        self.assertEqual(parse_unit_expression('min').scale, ScaleVector(p2=2, p3=1, p5=1))

    def test_strict(self):
        self.assertEqual(parse_unit_expression('km', strict=True).scale, ScaleVector.ten(3))
        with self.assertRaises(exception.UnknownUnit):
            parse_unit_expression('ft', strict=True)
        with self.assertRaises(exception.UnknownUnit):
            parse_unit_expression('m/ft', strict=True)


class factors(TestCase):

    def test_storage(self):
        self.assertEqual(parse_unit_expression('km/h').factor, 1)
        self.assertTrue(parse_unit_expression('km/h').storage)

    def test_imperial(self):
        ft = parse_unit_expression('ft')
        self.assertFalse(ft.storage)
        self.assertEqual(ft.factor, fractions.Fraction(381, 125))
        self.assertEqual(parse_unit_expression('ft^2').factor, fractions.Fraction(381, 125)**2)
        self.assertEqual(parse_unit_expression('1/ft').factor, fractions.Fraction(125, 381))


class affine(TestCase):

    def test_offset(self):
        celsius = parse_unit_expression('degC')
        self.assertTrue(celsius.affine)
        self.assertEqual(celsius.offset, fractions.Fraction('273.15'))
        self.assertEqual(celsius, parse_unit_expression('°C'))

    def test_compound(self):
        with self.assertWarns(warnings.AffineWarning):
            rate = parse_unit_expression('degC/s')
        self.assertEqual(rate.offset, 0)
        self.assertEqual(rate.dimension, DimensionVector(temperature=1, time=-1))

    def test_power(self):
        with self.assertWarns(warnings.AffineWarning):
            self.assertFalse(parse_unit_expression('degC^2').affine)


class expression(TestCase):

    def test_unpack(self):
        dimension, scale = parse_unit_expression('km')
        self.assertEqual(dimension, length)
        self.assertEqual(scale, ScaleVector.ten(3))

    def test_equality(self):
        a = parse_unit_expression('N*m')
        b = parse_unit_expression('J')
        self.assertEqual(a, b)
        self.assertEqual(hash(a), hash(b))
        self.assertNotEqual(parse_unit_expression('m'), parse_unit_expression('ft'))
        self.assertNotEqual(parse_unit_expression('K'), parse_unit_expression('degC'))
        self.assertNotEqual(parse_unit_expression('m'), (length, IDENTITY))

    def test_str(self):
        self.assertEqual(str(parse_unit_expression('kg*m/s^2')), 'kg*m/s^2')
        self.assertEqual(str(Expression(length, ScaleVector.ten(3))), 'km')
        with self.assertRaises(ValueError):
            str(Expression(length, factor=fractions.Fraction(381, 125)))

    def test_repr(self):
        self.assertEqual(repr(parse_unit_expression('km')), "Expression('km')")

    def test_stringly(self):
        e = stringly.loads(Expression, 'km/h')
        self.assertEqual(e, parse_unit_expression('km/h'))
        self.assertEqual(stringly.dumps(Expression, e), 'km/h')


# vim:sw=4:sts=4:et
