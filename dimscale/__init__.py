'Dimensional Analysis and Unit Scaling'

__version__ = version = '1.0'
version_name = None
long_version = ('{} "{}"' if version_name else '{}').format(version, version_name)

__all__ = [
    'catalog',
    'convert',
    'dimension',
    'exception',
    'lookup',
    'parser',
    'prefix',
    'pretty',
    'scale',
    'testing',
    'warnings',
]

# vim:sw=4:sts=4:et
