import doctest as _doctest, unittest, importlib, pathlib, warnings, treelog
import dimscale.testing

_doctestlog = treelog.FilterLog(treelog.StdoutLog(), minlevel=treelog.proto.Level.info)


class DocTestCase(dimscale.testing.TestCase, _doctest.DocTestCase):

    def setUp(self):
        super().setUp()
        self.enter_context(warnings.catch_warnings())
        warnings.simplefilter('ignore')
        self.enter_context(treelog.set(_doctestlog))

    def shortDescription(self):
        return None

    def __repr__(self):
        return '{} ({}.doctest)'.format(self.id(), __name__)

    __str__ = __repr__


doctest = unittest.TestSuite()
parser = _doctest.DocTestParser()
finder = _doctest.DocTestFinder(parser=parser)
checker = dimscale.testing.FloatNeighborhoodOutputChecker()
root = pathlib.Path(__file__).parent.parent
for path in sorted((root/'dimscale').glob('**/*.py')):
    name = '.'.join(path.relative_to(root).parts)[:-3]
    if name.endswith('.__init__'):
        name = name[:-9]
    module = importlib.import_module(name)
    for test in sorted(finder.find(module)):
        if len(test.examples) == 0:
            continue
        if not test.filename:
            test.filename = module.__file__
        doctest.addTest(DocTestCase(test, optionflags=_doctest.ELLIPSIS, checker=checker))

# hide the class from test discovery, which would instantiate it without a test
del DocTestCase


def load_tests(loader, suite, pattern):
    # ignore the default suite, which would instantiate `DocTestCase` without a test
    return doctest
