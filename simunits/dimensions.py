'''
Length, mass, speed and temperature.

    >>> Length.from_feet(5280).miles
    1.0
    >>> Temperature.from_celsius(0).kelvin
    273.15
    >>> f'{Mass.from_kilograms(1).to_unit(MassUnit.POUND):F2}'
    '2.20 lb'

All conversions are defined exactly in terms of the base unit of each
dimension, following the international yard and pound of 1959 and the
international nautical mile.
'''

import fractions
from . import warnings
from .quantity import Quantity, Dimension
from .units import LengthUnit, MassUnit, SpeedUnit, TemperatureUnit

_FOOT = fractions.Fraction('0.3048')
_MILE = 5280 * _FOOT
_NAUTICAL_MILE = fractions.Fraction(1852)
_POUND = fractions.Fraction('0.45359237')
_MINUTE = 60
_HOUR = 3600


class Length(Quantity, units=LengthUnit, base=LengthUnit.METRE, conversions={
        LengthUnit.MILLIMETRE: '0.001',
        LengthUnit.CENTIMETRE: '0.01',
        LengthUnit.METRE: 1,
        LengthUnit.KILOMETRE: 1000,
        LengthUnit.INCH: _FOOT / 12,
        LengthUnit.FOOT: _FOOT,
        LengthUnit.YARD: 3 * _FOOT,
        LengthUnit.MILE: _MILE,
        LengthUnit.NAUTICAL_MILE: _NAUTICAL_MILE}):

    __slots__ = ()

    @classmethod
    def from_meters(cls, meters):
        warnings.deprecation('Length.from_meters is deprecated; use Length.from_metres instead')
        return cls.from_metres(meters)

    @classmethod
    def from_kilometers(cls, kilometers):
        warnings.deprecation('Length.from_kilometers is deprecated; use Length.from_kilometres instead')
        return cls.from_kilometres(kilometers)


class Mass(Quantity, units=MassUnit, base=MassUnit.KILOGRAM, conversions={
        MassUnit.MILLIGRAM: '0.000001',
        MassUnit.GRAM: '0.001',
        MassUnit.KILOGRAM: 1,
        MassUnit.TONNE: 1000,
        MassUnit.OUNCE: _POUND / 16,
        MassUnit.POUND: _POUND,
        MassUnit.STONE: 14 * _POUND,
        MassUnit.SHORT_TON: 2000 * _POUND,
        MassUnit.LONG_TON: 2240 * _POUND}):

    __slots__ = ()


class Speed(Quantity, units=SpeedUnit, base=SpeedUnit.METRE_PER_SECOND, conversions={
        SpeedUnit.METRE_PER_SECOND: 1,
        SpeedUnit.METRE_PER_MINUTE: fractions.Fraction(1, _MINUTE),
        SpeedUnit.METRE_PER_HOUR: fractions.Fraction(1, _HOUR),
        SpeedUnit.KILOMETRE_PER_SECOND: 1000,
        SpeedUnit.KILOMETRE_PER_MINUTE: fractions.Fraction(1000, _MINUTE),
        SpeedUnit.KILOMETRE_PER_HOUR: fractions.Fraction(1000, _HOUR),
        SpeedUnit.FOOT_PER_SECOND: _FOOT,
        SpeedUnit.FOOT_PER_MINUTE: _FOOT / _MINUTE,
        SpeedUnit.FOOT_PER_HOUR: _FOOT / _HOUR,
        SpeedUnit.MILE_PER_HOUR: _MILE / _HOUR,
        SpeedUnit.KNOT: _NAUTICAL_MILE / _HOUR}):

    __slots__ = ()

    @classmethod
    def from_kilometres_per_minutes(cls, value):
        warnings.deprecation('Speed.from_kilometres_per_minutes is deprecated; use Speed.from_kilometres_per_minute instead')
        return cls.from_kilometres_per_minute(value)

    @classmethod
    def from_metres_per_minutes(cls, value):
        warnings.deprecation('Speed.from_metres_per_minutes is deprecated; use Speed.from_metres_per_minute instead')
        return cls.from_metres_per_minute(value)


class Temperature(Quantity, units=TemperatureUnit, base=TemperatureUnit.KELVIN, conversions={
        TemperatureUnit.KELVIN: 1,
        TemperatureUnit.CELSIUS: (1, '273.15'),
        TemperatureUnit.FAHRENHEIT: ('5/9', fractions.Fraction('459.67') * 5 / 9)}):

    __slots__ = ()


def lookup(name):
    '''Return the quantity type by case insensitive name, e.g. ``'length'``.'''

    for dimension_name, dimension in Dimension.registry().items():
        if dimension_name.lower() == name.lower():
            return dimension
    raise KeyError(f'unknown dimension {name!r}')


# vim:sw=4:sts=4:et
