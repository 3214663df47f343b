'''
The lookup module resolves dimensions and units by name, symbol or exponent
vector, and ranks near misses for "did you mean" diagnostics.

Exact lookups return ``None`` when nothing matches; the ``get_*`` variants
raise instead, with a suggestion in the message:

    >>> from dimscale import lookup
    >>> lookup.lookup_dimension_by_symbol('M·L·T⁻²').name
    'Force'
    >>> lookup.get_dimension('Lenght')
    Traceback (most recent call last):
         ...
    dimscale.exception.UnknownDimension: unknown dimension 'Lenght'; did you mean 'Length'?

Similarity is measured by the optimal string alignment variant of the
Damerau-Levenshtein distance, normalized by the length of the longer string,
and is case insensitive:

    >>> lookup.similarity('lenght', 'Length')
    0.8333333333333334

Suggestions never replace a failed lookup; they only inform the error
message. The minimal similarity for a suggestion defaults to 0.6 and can be
changed for a block of code using the :func:`similarity_threshold` context, or
globally through the ``DIMSCALE_THRESHOLD`` environment variable.
'''

from . import catalog, exception, _util
from .dimension import DimensionVector
from .catalog import lookup_dimension_by_name, lookup_unit_by_symbol, lookup_unit_by_name
import numpy
import treelog


@_util.set_current
@_util.defaults_from_env
def similarity_threshold(threshold: float = .6):
    if not 0 <= threshold <= 1:
        raise ValueError('similarity threshold must lie between 0 and 1')
    return threshold


def lookup_dimension_by_exponents(exponents):
    'dimension with the given exponent vector, or ``None``'

    return catalog.lookup_dimension(exponents)


def lookup_dimension_by_symbol(symbol):
    '''Dimension by its symbolic exponent rendering, or ``None``.

    Both the dotted (``M·L²``) and the juxtaposed (``ML²``) forms are
    accepted.'''

    return _by_symbol.get(_strip_operators(symbol))


def distance(a, b):
    '''Damerau-Levenshtein distance between two strings.

    This is the optimal string alignment variant: the minimal number of
    insertions, deletions, substitutions and transpositions of adjacent
    characters, where no substring is edited more than once.'''

    d = numpy.empty((len(a)+1, len(b)+1), dtype=int)
    d[:,0] = numpy.arange(len(a)+1)
    d[0,:] = numpy.arange(len(b)+1)
    for i in range(1, len(a)+1):
        for j in range(1, len(b)+1):
            d[i,j] = min(d[i-1,j] + 1, d[i,j-1] + 1, d[i-1,j-1] + (a[i-1] != b[j-1]))
            if i > 1 and j > 1 and a[i-1] == b[j-2] and a[i-2] == b[j-1]:
                d[i,j] = min(d[i,j], d[i-2,j-2] + 1)
    return int(d[-1,-1])


def similarity(a, b):
    'case insensitive similarity score between 0 (unrelated) and 1 (equal)'

    n = max(len(a), len(b))
    if n == 0:
        return 1.
    return 1 - distance(a.lower(), b.lower()) / n


def _rank(query, candidates, threshold):
    if threshold is None:
        threshold = similarity_threshold.current
    scores = {}
    for name, aliases in candidates:
        score = max(similarity(query, alias) for alias in aliases)
        if score >= threshold:
            scores[name] = max(score, scores.get(name, 0))
    return sorted(scores.items(), key=lambda item: (-item[1], item[0]))


def find_similar_dimension_names(query, threshold=None):
    '''Rank dimension names by similarity to ``query``.

    Every dimension is scored by the best match among its name, its symbol and
    its synonyms. Returns a list of ``(name, score)`` tuples with a score of
    at least ``threshold``, best match first.'''

    return _rank(query, ((dimension.name, (dimension.name, dimension.symbol, *dimension.aliases)) for dimension in catalog.DIMENSIONS), threshold)


def find_similar_unit_names(query, threshold=None):
    '''Rank unit names by similarity to ``query``.

    Every unit is scored by the best match among its long name and its
    symbols. Returns a list of ``(name, score)`` tuples with a score of at
    least ``threshold``, best match first.'''

    return _rank(query, ((unit.name, (unit.name, *unit.symbols)) for dimension, unit in catalog.units()), threshold)


def suggestion(query, kind='unit'):
    '''"did you mean" hint for a failed lookup, or an empty string.'''

    if kind == 'unit':
        matches = find_similar_unit_names(query)
    elif kind == 'dimension':
        matches = find_similar_dimension_names(query)
    else:
        raise ValueError(f'invalid kind {kind!r}')
    if not matches:
        return ''
    name, score = matches[0]
    treelog.debug(f'closest match for {query!r} is {name!r} with similarity {score:.2f}')
    return f'did you mean {name!r}?'


def get_dimension(key):
    '''Dimension by name, symbol or exponent vector.

    Raises :class:`dimscale.exception.UnknownDimension` if there is no
    match.'''

    if isinstance(key, str):
        dimension = lookup_dimension_by_name(key)
        if dimension is None:
            dimension = lookup_dimension_by_symbol(key)
            if dimension is not None:
                treelog.debug(f'{key!r} matched dimension {dimension.name!r} by symbol')
        if dimension is None:
            raise exception.UnknownDimension(key, suggestion(key, 'dimension'))
    else:
        key = DimensionVector(key)
        dimension = catalog.lookup_dimension(key)
        if dimension is None:
            raise exception.UnknownDimension(key)
    return dimension


def get_unit(key):
    '''``(dimension, unit)`` pair by exact symbol or long name.

    Raises :class:`dimscale.exception.UnknownUnit` if there is no match.'''

    found = lookup_unit_by_symbol(key)
    if found is None:
        found = lookup_unit_by_name(key)
    if found is None:
        raise exception.UnknownUnit(key, suggestion(key))
    return found


def _strip_operators(s):
    return s.replace('·', '').replace('⋅', '').replace('*', '').replace(' ', '')


_by_symbol = {_strip_operators(dimension.symbol): dimension for dimension in catalog.DIMENSIONS}


# vim:sw=4:sts=4:et
