import warnings, contextlib


class DimscaleWarning(Warning):
    'Base class for warnings from dimscale.'


class AffineWarning(DimscaleWarning):
    'Warning about an affine offset that cannot be carried through an expression.'


class ConfigurationWarning(DimscaleWarning):
    'Warning about configuration values that are ignored.'


def warn(message, category=DimscaleWarning, stacklevel=1):
    warnings.warn(message, category, stacklevel=stacklevel)


@contextlib.contextmanager
def via(print):
    '''context manager to set/reset warnings.showwarning'''

    oldshowwarning = warnings.showwarning
    warnings.showwarning = lambda message, category, filename, lineno, *args: print(f'{category.__name__}: {message}\n  In {filename}:{lineno}')
    yield
    warnings.showwarning = oldshowwarning


# vim:sw=4:sts=4:et
