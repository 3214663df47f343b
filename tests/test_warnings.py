from dimscale import testing, warnings
import warnings as py_warnings


class via(testing.TestCase):

    def test(self):

        printed = []
        with warnings.via(printed.append):
            py_warnings.warn('via on')
        py_warnings.warn('via off')

        self.assertEqual(len(printed), 1)
        self.assertTrue(printed[0].startswith('UserWarning: via on\n  In'))


class categories(testing.TestCase):

    def test_hierarchy(self):
        self.assertTrue(issubclass(warnings.AffineWarning, warnings.DimscaleWarning))
        self.assertTrue(issubclass(warnings.ConfigurationWarning, warnings.DimscaleWarning))

    def test_warn(self):
        with self.assertWarns(warnings.AffineWarning):
            warnings.warn('offset dropped', warnings.AffineWarning)

    def test_error(self):
        with self.assertRaises(warnings.DimscaleWarning):
            warnings.warn('raised by the test case filter')


# vim:sw=4:sts=4:et
