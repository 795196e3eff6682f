'''
Unit enumerations.

Every dimension has a closed set of units. The value of each member is the
plural name under which the unit is exposed on quantities, e.g. the
``from_feet`` factory and ``feet`` accessor of :class:`simunits.dimensions.Length`.
'''

import enum


class LengthUnit(enum.Enum):
    MILLIMETRE = 'millimetres'
    CENTIMETRE = 'centimetres'
    METRE = 'metres'
    KILOMETRE = 'kilometres'
    INCH = 'inches'
    FOOT = 'feet'
    YARD = 'yards'
    MILE = 'miles'
    NAUTICAL_MILE = 'nautical_miles'


class MassUnit(enum.Enum):
    MILLIGRAM = 'milligrams'
    GRAM = 'grams'
    KILOGRAM = 'kilograms'
    TONNE = 'tonnes'
    OUNCE = 'ounces'
    POUND = 'pounds'
    STONE = 'stone'
    SHORT_TON = 'short_tons'
    LONG_TON = 'long_tons'


class SpeedUnit(enum.Enum):
    METRE_PER_SECOND = 'metres_per_second'
    METRE_PER_MINUTE = 'metres_per_minute'
    METRE_PER_HOUR = 'metres_per_hour'
    KILOMETRE_PER_SECOND = 'kilometres_per_second'
    KILOMETRE_PER_MINUTE = 'kilometres_per_minute'
    KILOMETRE_PER_HOUR = 'kilometres_per_hour'
    FOOT_PER_SECOND = 'feet_per_second'
    FOOT_PER_MINUTE = 'feet_per_minute'
    FOOT_PER_HOUR = 'feet_per_hour'
    MILE_PER_HOUR = 'miles_per_hour'
    KNOT = 'knots'


class TemperatureUnit(enum.Enum):
    KELVIN = 'kelvin'
    CELSIUS = 'celsius'
    FAHRENHEIT = 'fahrenheit'


# vim:sw=4:sts=4:et
