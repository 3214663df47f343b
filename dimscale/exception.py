'''
Exceptions raised by dimscale.

All errors derive from :class:`DimscaleError` as well as from the builtin
exception that best describes their nature, so that callers can catch either.
'''


class DimscaleError(Exception):
    'Base class for errors from dimscale.'


class UnknownUnit(DimscaleError, LookupError):
    '''A unit symbol or name that does not resolve against the catalog.

    Raised from within a unit expression, the ``position`` attribute holds the
    zero-based offset of the symbol; it is ``None`` otherwise.'''

    def __init__(self, symbol, suggestion='', position=None):
        self.symbol = symbol
        self.position = position
        super().__init__(f'unknown unit {symbol!r}' + (f'; {suggestion}' if suggestion else ''))


class UnknownDimension(DimscaleError, LookupError):
    '''A dimension name or exponent vector that is not in the catalog.'''

    def __init__(self, key, suggestion=''):
        self.key = key
        super().__init__(f'unknown dimension {key!r}' + (f'; {suggestion}' if suggestion else ''))


class DimensionMismatch(DimscaleError, TypeError):
    '''Conversion attempted between quantities of different dimension.'''

    def __init__(self, expected, actual):
        self.expected = expected
        self.actual = actual
        super().__init__(f'expected [{expected}], got [{actual}]')


class ParseError(DimscaleError, ValueError):
    '''Malformed unit expression.

    The ``position`` attribute holds the zero-based offset in the expression at
    which the problem was detected.'''

    def __init__(self, text, position, reason):
        self.text = text
        self.position = position
        self.reason = reason
        super().__init__(f'{reason} at position {position} in {text!r}')


class UnresolvedOperand(DimscaleError, ValueError):
    '''Operation requires a resolved vector but received an unresolved one.'''


# vim:sw=4:sts=4:et
