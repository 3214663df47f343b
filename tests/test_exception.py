from dimscale import exception
from dimscale.testing import TestCase


class messages(TestCase):

    def test_unknown_unit(self):
        self.assertEqual(str(exception.UnknownUnit('foo')), "unknown unit 'foo'")
        self.assertEqual(str(exception.UnknownUnit('metre', "did you mean 'meter'?")), "unknown unit 'metre'; did you mean 'meter'?")
        self.assertIsNone(exception.UnknownUnit('foo').position)
        self.assertEqual(exception.UnknownUnit('foo', position=4).position, 4)

    def test_unknown_dimension(self):
        e = exception.UnknownDimension('Lenght', "did you mean 'Length'?")
        self.assertEqual(e.key, 'Lenght')
        self.assertEqual(str(e), "unknown dimension 'Lenght'; did you mean 'Length'?")

    def test_mismatch(self):
        e = exception.DimensionMismatch('M', 'L')
        self.assertEqual((e.expected, e.actual), ('M', 'L'))
        self.assertEqual(str(e), 'expected [M], got [L]')

    def test_parse_error(self):
        e = exception.ParseError('m^', 2, 'expected an integer')
        self.assertEqual(e.position, 2)
        self.assertEqual(str(e), "expected an integer at position 2 in 'm^'")


class hierarchy(TestCase):

    def test_base(self):
        for cls in exception.UnknownUnit, exception.UnknownDimension, exception.DimensionMismatch, exception.ParseError, exception.UnresolvedOperand:
            with self.subTest(cls.__name__):
                self.assertTrue(issubclass(cls, exception.DimscaleError))

    def test_builtin(self):
        self.assertTrue(issubclass(exception.UnknownUnit, LookupError))
        self.assertTrue(issubclass(exception.UnknownDimension, LookupError))
        self.assertTrue(issubclass(exception.DimensionMismatch, TypeError))
        self.assertTrue(issubclass(exception.ParseError, ValueError))
        self.assertTrue(issubclass(exception.UnresolvedOperand, ValueError))


# vim:sw=4:sts=4:et
