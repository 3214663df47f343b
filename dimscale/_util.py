"""
The util module provides a collection of general purpose methods.
"""

from . import warnings
import stringly
import os
import inspect
import functools
import contextlib


def set_current(f):
    '''Decorator for setting global state.

    The decorator turns a function into a context that holds the return value
    in its ``.current`` attribute. All function arguments are required to have
    a default value, and the corresponding return value is the initial value of
    the ``.current`` attribute.

    Example:

    >>> @set_current
    ... def state(x=1, y=2):
    ...     return f'x={x}, y={y}'
    >>> state.current
    'x=1, y=2'
    >>> with state(10):
    ...     state.current
    'x=10, y=2'
    >>> state.current
    'x=1, y=2'
    '''

    @functools.wraps(f)
    @contextlib.contextmanager
    def set_current(*args, **kwargs):
        previous = set_current.current
        set_current.current = f(*args, **kwargs)
        try:
            yield
        finally:
            set_current.current = previous

    set_current.current = f()
    return set_current


def defaults_from_env(f):
    '''Decorator for changing function defaults based on environment.

    This decorator searches the environment for variables matching the pattern
    ``DIMSCALE_MYPARAM``, where ``myparam`` is a parameter of the decorated
    function. Only parameters with type annotation and a default value are
    considered, and the string value is deserialized using `Stringly
    <https://pypi.org/project/stringly/>`_. In case deserialization fails, a
    warning is emitted and the original default is maintained.'''

    sig = inspect.signature(f)
    params = []
    changed = False
    for param in sig.parameters.values():
        envname = f'DIMSCALE_{param.name.upper()}'
        if envname in os.environ and param.annotation != param.empty and param.default != param.empty:
            try:
                v = stringly.loads(param.annotation, os.environ[envname])
            except Exception as e:
                warnings.warn(f'ignoring environment variable {envname}: {e}', warnings.ConfigurationWarning)
            else:
                param = param.replace(default=v)
                changed = True
        params.append(param)
    if not changed:
        return f
    sig = sig.replace(parameters=params)
    @functools.wraps(f)
    def defaults_from_env(*args, **kwargs):
        bound = sig.bind(*args, **kwargs)
        bound.apply_defaults()
        return f(*bound.args, **bound.kwargs)
    defaults_from_env.__signature__ = sig
    return defaults_from_env


def superscript(n):
    '''Render an integer with unicode superscript digits.

    >>> superscript(-12)
    '⁻¹²'
    '''

    return str(n).translate(_superscripts)


def unsuperscript(s):
    '''Inverse of :func:`superscript`, leaving other characters untouched.'''

    return s.translate(_unsuperscripts)


_superscripts = str.maketrans('-0123456789', '⁻⁰¹²³⁴⁵⁶⁷⁸⁹')
_unsuperscripts = str.maketrans('⁻⁰¹²³⁴⁵⁶⁷⁸⁹', '-0123456789')


def f2s(v, digits=None):
    '''Convert float to string without scientific notation.

    If ``digits`` is given the value is first rounded to that many significant
    digits.

    >>> f2s(1e16)
    '10000000000000000'
    >>> f2s(0.017453292519943295, digits=5)
    '0.017453'
    '''

    if digits is not None:
        v = float(f'{v:.{digits}g}')
    s, sep, e = str(v).partition('e')
    a, sep, b = s.partition('.')
    pos = len(a) + int(e or 0)
    s = (a + b).rstrip('0')
    return s.ljust(pos, '0') if pos >= len(s) \
        else '0.' + '0' * -pos + s if pos <= 0 \
        else s[:pos] + '.' + s[pos:]


# vim:sw=4:sts=4:et
