'''
Numerical input handling.

Every value that enters a quantity passes through :func:`validate`, which
rejects NaN and infinities. Factory functions accept a wider range of numerical
types, from Python integers and decimals to Numpy scalars as read from
external data sources; these are normalized by :class:`QuantityValue`.

    >>> float(QuantityValue(numpy.int16(3)))
    3.0
    >>> QuantityValue(decimal.Decimal('0.1')).to_decimal()
    Decimal('0.1')
'''

import decimal
import fractions
import numbers
import numpy
from .errors import InvalidValue


def validate(x):
    '''Return ``x`` if it is a finite number, raise :class:`InvalidValue` otherwise.'''

    if not numpy.isfinite(x):
        raise InvalidValue(f'{x!r} is not a valid number')
    return x


def isnumeric(value):
    '''Test if ``value`` is accepted by :class:`QuantityValue`.'''

    if isinstance(value, QuantityValue):
        return True
    if isinstance(value, (bool, numpy.bool_)):
        return False
    return isinstance(value, (numbers.Real, decimal.Decimal))


class QuantityValue:
    '''Numerical value prior to quantity construction.

    Accepts integers, floats, fractions, decimals and Numpy scalars. Decimals
    are kept as is, so that :meth:`to_decimal` returns them without loss of
    precision; all other types are converted to float. Booleans are rejected
    even though Python considers them integers.
    '''

    __slots__ = '_value',

    def __init__(self, value):
        if isinstance(value, QuantityValue):
            value = value._value
        elif not isnumeric(value):
            raise TypeError(f'expected a number, got {type(value).__name__}')
        elif isinstance(value, decimal.Decimal):
            if not value.is_finite():
                raise InvalidValue(f'{value!r} is not a valid number')
        else:
            try:
                value = float(value)
            except OverflowError:
                raise InvalidValue(f'{value!r} is too large to be represented') from None
            validate(value)
        self._value = value

    def __float__(self):
        return validate(float(self._value))

    def to_decimal(self):
        if isinstance(self._value, decimal.Decimal):
            return self._value
        return decimal.Decimal(self._value)

    def to_fraction(self):
        return fractions.Fraction(self._value)

    def __eq__(self, other):
        if not isinstance(other, QuantityValue):
            return NotImplemented
        return self.to_fraction() == other.to_fraction()

    def __hash__(self):
        return hash(self.to_fraction())

    def __repr__(self):
        return f'QuantityValue({self._value!r})'

    def __str__(self):
        return str(self._value)


def as_float(value):
    '''Convert any value accepted by :class:`QuantityValue` to a finite float.'''

    if type(value) is float:
        return validate(value)
    return float(QuantityValue(value))


# vim:sw=4:sts=4:et
