'''
Exception types raised by simunits.

All errors derive from :class:`QuantityError` as well as from the builtin
exception that best describes the failure, so that callers can catch either.
'''


class QuantityError(Exception):
    'Base class for errors raised by simunits.'


class InvalidValue(QuantityError, ValueError):
    'Numerical value is not finite.'


class InvalidUnit(QuantityError, ValueError):
    'Unit is missing or does not belong to the dimension.'


class UnknownAbbreviation(InvalidUnit):
    'Text does not match any abbreviation of the dimension.'


class UnsupportedUnit(QuantityError, LookupError):
    'Unit has no entry in a conversion or abbreviation table.'


class UnsupportedFormat(QuantityError, ValueError):
    'Format specifier or locale is not recognized.'


class IncomparableType(QuantityError, TypeError):
    'Quantity compared against an object of an incompatible type.'


# vim:sw=4:sts=4:et
