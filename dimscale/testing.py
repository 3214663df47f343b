'''
Extensions of the :mod:`unittest` module.
'''

import unittest
import sys
import types as builtin_types
import operator
import treelog
import doctest
import re
import warnings as _builtin_warnings
import logging
import numpy
from dimscale import warnings


class PrintHandler(logging.Handler):
    'similar to StreamHandler except using always the current sys.stdout'

    def emit(self, record):
        print(record.msg)


class _ParametrizedCollection(type):

    def __new__(mcls, name, bases, namespace, base):
        return super().__new__(mcls, name, bases, namespace)

    def __init__(cls, name, bases, namespace, base):
        super().__init__(name, bases, namespace)
        cls.__base = base
        cls.__test_cases = []
        for attr in '__module__', '__qualname__', '__doc__':
            if hasattr(base, attr):
                setattr(cls, attr, getattr(base, attr))

    def __call__(cls, name=None, **params):
        if name is None:
            name = ','.join(f'{k}={v}' for k, v in sorted(params.items()))
        name = name.replace('%', '%25').replace('.', '%2E')
        assert not hasattr(cls, name), 'duplicate test name'

        def setUp(self):
            for k, v in params.items():
                setattr(self, k, v)
            return cls.__base.setUp(self)

        def populate(ns):
            ns.update(setUp=setUp, __qualname__=cls.__qualname__+':'+name, __module__=cls.__module__, __doc__=cls.__doc__)
            return ns

        TestCase = builtin_types.new_class(name, (cls.__base,), exec_body=populate)
        cls.__test_cases.append(TestCase)
        setattr(cls, name, TestCase)
        # make the test case discoverable by unittest.TestLoader.loadTestsFromModule
        setattr(sys.modules[cls.__module__], cls.__qualname__+':'+name, TestCase)
        return TestCase

    def suite(cls):
        loader = unittest.defaultTestLoader
        return unittest.TestSuite(loader.loadTestsFromTestCase(test_case) for test_case in sorted(cls.__test_cases, key=operator.attrgetter('__name__')))


def parametrize(TestCase):
    '''Parametrize a :class:`unittest.TestCase`.

    Every call of the returned collection registers a copy of the test case
    with the keyword arguments set as instance attributes.

    >>> @parametrize
    ... class TestSomething(unittest.TestCase):
    ...     def test_equality(self):
    ...         self.assertEqual(self.x, self.y)
    >>> TestSomething(x=1, y=1)
    <class '...TestSomething:x=1,y=1'>
    '''

    return builtin_types.new_class(TestCase.__name__, (), dict(metaclass=_ParametrizedCollection, base=TestCase))


class TestCase(unittest.TestCase):
    '''A class whose instances are single test cases.

    Log messages of the ``dimscale`` logger are printed, and all
    :class:`dimscale.warnings.DimscaleWarning` are turned into an exception by
    default. Use

    ::

        def test(self):
            with self.assertWarns(warnings.AffineWarning):
                ...

    to assert expected warnings.
    '''

    maxDiff = None

    def enter_context(self, ctx):
        retval = ctx.__enter__()
        self.addCleanup(ctx.__exit__, None, None, None)
        return retval

    def setUp(self):
        super().setUp()
        print_handler = PrintHandler()
        logger = logging.getLogger('dimscale')
        logger.setLevel('INFO')
        logger.addHandler(print_handler)
        self.addCleanup(logger.removeHandler, print_handler)
        self.enter_context(treelog.set(treelog.LoggingLog('dimscale')))
        self.enter_context(_builtin_warnings.catch_warnings())
        _builtin_warnings.simplefilter('error', warnings.DimscaleWarning)

    def assertAllEqual(self, actual, desired):
        actual = numpy.asarray(actual)
        desired = numpy.asarray(desired)
        self.assertEqual(actual.shape, desired.shape)
        self.assertEqual(actual.dtype.kind, desired.dtype.kind)
        for args in numpy.broadcast(actual, desired):
            self.assertEqual(*args)

    def assertAllAlmostEqual(self, actual, desired, **kwargs):
        actual = numpy.asarray(actual)
        desired = numpy.asarray(desired)
        self.assertEqual(actual.shape, desired.shape)
        for args in numpy.broadcast(actual, desired):
            self.assertAlmostEqual(*args, **kwargs)


class FloatNeighborhoodOutputChecker(doctest.OutputChecker):
    '''Output checker that accepts ``value±spread`` in the expected output.

    >>> FloatNeighborhoodOutputChecker().check_output('0.333±1e-3\\n', '0.3333333333333333\\n', 0)
    True
    '''

    posnum = '(?:[0-9]+[.][0-9]*|[.][0-9]+|[0-9]+)(?:e[+-]?[0-9]+)?'
    re_spread = re.compile(f'\\b(-?{posnum}±{posnum})\\b')
    re_number = re.compile(f'^(-?{posnum})')

    def check_output(self, want, got, optionflags):
        if want == got:
            return True
        if '±' in want and self._check_plus_minus(want, got):
            return True
        return super().check_output(want, got, optionflags)

    @classmethod
    def _check_plus_minus(cls, want, got):
        for i, part in enumerate(cls.re_spread.split(want)):
            if i % 2 == 0:
                if got[:len(part)] != part:
                    return False
                got = got[len(part):]
            else:
                match = cls.re_number.search(got)
                if not match:
                    return False
                got = got[len(match.group(0)):]
                want_number, want_spread = map(float, part.split('±'))
                if not abs(float(match.group(1)) - want_number) <= want_spread:
                    return False
        return not got


# vim:sw=4:sts=4:et
