'Physical quantities with explicit units for flight simulation data'

__version__ = version = '1.0'

__all__ = [
    'abbreviation',
    'dimensions',
    'errors',
    'model',
    'numeric',
    'quantity',
    'testing',
    'units',
    'warnings',
]

# vim:sw=4:sts=4:et
