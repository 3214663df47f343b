from dimscale import convert, exception
from dimscale.testing import TestCase, parametrize
from dimscale.dimension import DimensionVector, ScaleVector
from dimscale.parser import parse_unit_expression, Expression
import fractions
import math
import numpy


@parametrize
class factor(TestCase):

    def test_float(self):
        self.assertAlmostEqual(convert.factor(self.source, self.target), float(self.expect))

    def test_exact(self):
        self.assertEqual(convert.factor(self.source, self.target, exact=True), self.expect)

    def test_inverse(self):
        self.assertEqual(convert.factor(self.target, self.source, exact=True), fractions.Fraction(1) / self.expect)


factor('prefix', source='km', target='m', expect=1000)
factor('speed', source='km/h', target='m/s', expect=fractions.Fraction(5, 18))
factor('foot', source='ft', target='m', expect=fractions.Fraction('0.3048'))
factor('mile', source='mi', target='km', expect=fractions.Fraction('1.609344'))
factor('area', source='ft^2', target='m^2', expect=fractions.Fraction('0.09290304'))
factor('energy', source='kWh', target='J', expect=3600000)
factor('pressure', source='kPa', target='N/m^2', expect=1000)
factor('rankine', source='R', target='K', expect=fractions.Fraction(5, 9))


class factor_details(TestCase):

    def test_float_type(self):
        self.assertIsInstance(convert.factor('km', 'm'), float)
        self.assertIsInstance(convert.factor('km', 'm', exact=True), fractions.Fraction)

    def test_angle(self):
        self.assertAlmostEqual(convert.factor('deg', 'rad'), math.pi / 180)
        self.assertAlmostEqual(convert.factor('rad', 'deg'), 180 / math.pi)

    def test_angle_subdivisions(self):
        self.assertEqual(convert.factor('grad', 'deg'), .9)
        self.assertEqual(convert.factor('deg', 'arcmin'), 60.)
        self.assertEqual(convert.factor('arcmin', 'arcsec'), 60.)
        self.assertEqual(convert.factor('rot', 'grad', exact=True), 400)
        self.assertEqual(convert.factor('rot', 'arcsec', exact=True), 1296000)
        self.assertAlmostEqual(convert.factor('grad', 'rad'), math.pi / 200)

    def test_expression(self):
        km = parse_unit_expression('km')
        self.assertEqual(convert.factor(km, 'm'), 1000.)
        self.assertEqual(convert.factor(Expression(DimensionVector(length=1), ScaleVector.ten(-3)), km), 1e-6)

    def test_mismatch(self):
        with self.assertRaises(exception.DimensionMismatch) as cm:
            convert.factor('m', 's')
        self.assertEqual(str(cm.exception), 'expected [T], got [L]')

    def test_unresolved(self):
        length = DimensionVector(length=1)
        with self.assertRaises(exception.UnresolvedOperand):
            convert.factor(Expression(length, ScaleVector(p2=None)), 'm')
        with self.assertRaises(exception.UnresolvedOperand):
            convert.factor(Expression(length, ScaleVector(p2=None)), 'm', exact=True)

    def test_unknown(self):
        with self.assertRaises(exception.UnknownUnit):
            convert.factor('m', 'metre')


class convert_values(TestCase):

    def test_linear(self):
        self.assertEqual(convert.convert(2, 'km', 'm'), 2000.)
        self.assertAlmostEqual(convert.convert(36, 'km/h', 'm/s'), 10.)

    def test_affine(self):
        self.assertAlmostEqual(convert.convert(0, 'degC', 'K'), 273.15)
        self.assertAlmostEqual(convert.convert(273.15, 'K', 'degC'), 0.)
        self.assertAlmostEqual(convert.convert(212, 'degF', 'degC'), 100.)
        self.assertAlmostEqual(convert.convert(100, 'degC', 'degF'), 212.)
        self.assertAlmostEqual(convert.convert(-40, 'degF', 'degC'), -40.)
        self.assertAlmostEqual(convert.convert(0, 'degF', 'R'), 459.67)

    def test_array(self):
        self.assertAllAlmostEqual(convert.convert(numpy.array([0., 100.]), 'degC', 'K'), [273.15, 373.15])
        self.assertAllAlmostEqual(convert.convert(numpy.array([1., 2.5]), 'ft', 'in'), [12., 30.])

    def test_mismatch(self):
        with self.assertRaises(exception.DimensionMismatch):
            convert.convert(1, 'degC', 'm')


# vim:sw=4:sts=4:et
