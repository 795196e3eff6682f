'''
Unit abbreviations and text formatting.

Each unit has one or more abbreviations, the first of which is used for
output; the others are accepted when parsing.

    >>> from simunits.units import SpeedUnit
    >>> get_abbreviation(SpeedUnit, SpeedUnit.KNOT)
    'kn'
    >>> parse_unit(SpeedUnit, 'knots')
    <SpeedUnit.KNOT: 'knots'>
    >>> format_quantity(5280., LengthUnit.FOOT)
    '5280 ft'
    >>> format_quantity(2.5, LengthUnit.METRE, 'F3', 'de-DE')
    '2,500 m'

Abbreviations are case sensitive where it matters: ``st`` is a stone while
``ST`` is a short ton. Other abbreviations are matched case insensitively, as
long as the match is unambiguous within the dimension.
'''

import re
import threading
import typing
import treelog
from . import _util as util
from .errors import UnknownAbbreviation, UnsupportedUnit, UnsupportedFormat
from .units import LengthUnit, MassUnit, SpeedUnit, TemperatureUnit


_DEFINITIONS = (
    (LengthUnit.CENTIMETRE, 'cm'),
    (LengthUnit.FOOT, 'ft', "'", '′'),
    (LengthUnit.INCH, 'in', '"', '″'),
    (LengthUnit.KILOMETRE, 'km'),
    (LengthUnit.METRE, 'm'),
    (LengthUnit.MILE, 'mi'),
    (LengthUnit.MILLIMETRE, 'mm'),
    (LengthUnit.NAUTICAL_MILE, 'NM'),
    (LengthUnit.YARD, 'yd'),
    (MassUnit.GRAM, 'g'),
    (MassUnit.KILOGRAM, 'kg'),
    (MassUnit.LONG_TON, 'long tn'),
    (MassUnit.MILLIGRAM, 'mg'),
    (MassUnit.OUNCE, 'oz'),
    (MassUnit.POUND, 'lb', 'lbs', 'lbm'),
    (MassUnit.SHORT_TON, 't (short)', 'short tn', 'ST'),
    (MassUnit.STONE, 'st'),
    (MassUnit.TONNE, 't'),
    (SpeedUnit.FOOT_PER_HOUR, 'ft/h'),
    (SpeedUnit.FOOT_PER_MINUTE, 'ft/min'),
    (SpeedUnit.FOOT_PER_SECOND, 'ft/s'),
    (SpeedUnit.KILOMETRE_PER_HOUR, 'km/h'),
    (SpeedUnit.KILOMETRE_PER_MINUTE, 'km/min'),
    (SpeedUnit.KILOMETRE_PER_SECOND, 'km/s'),
    (SpeedUnit.KNOT, 'kn', 'kt', 'knot', 'knots'),
    (SpeedUnit.METRE_PER_HOUR, 'm/h'),
    (SpeedUnit.METRE_PER_MINUTE, 'm/min'),
    (SpeedUnit.METRE_PER_SECOND, 'm/s'),
    (SpeedUnit.MILE_PER_HOUR, 'mph'),
    (TemperatureUnit.CELSIUS, '°C', 'degC'),
    (TemperatureUnit.FAHRENHEIT, '°F', 'degF'),
    (TemperatureUnit.KELVIN, 'K'),
)


class AbbreviationTable:
    '''Lookup table between units and their abbreviations.

    The table is built from ``definitions`` on first use, at most once even if
    first accessed from several threads simultaneously, and is read-only
    afterwards.'''

    def __init__(self, definitions):
        self._definitions = tuple(definitions)
        self._lock = threading.Lock()
        self._built = None

    def _tables(self):
        built = self._built
        if built is None:
            with self._lock:
                built = self._built
                if built is None:
                    built = self._built = self._build()
        return built

    def _build(self):
        forward = {}
        exact = {}
        folded = {}
        for unit, *abbreviations in self._definitions:
            if not abbreviations:
                raise ValueError(f'no abbreviations defined for {unit!r}')
            unit_type = type(unit)
            if (unit_type, unit) in forward:
                raise ValueError(f'abbreviations for {unit!r} are defined twice')
            forward[unit_type, unit] = tuple(abbreviations)
            for abbreviation in abbreviations:
                if exact.setdefault((unit_type, abbreviation), unit) != unit:
                    raise ValueError(f'{abbreviation!r} is ambiguous for {unit_type.__name__}')
                folded.setdefault((unit_type, abbreviation.casefold()), set()).add(unit)
        treelog.debug(f'built abbreviation table for {len(forward)} units')
        return forward, exact, {key: frozenset(units) for key, units in folded.items()}

    def abbreviations(self, unit_type, unit):
        forward, exact, folded = self._tables()
        try:
            return forward[unit_type, unit]
        except (KeyError, TypeError):
            raise UnsupportedUnit(f'no abbreviation defined for {unit!r}') from None

    def parse(self, unit_type, text):
        forward, exact, folded = self._tables()
        text = text.strip()
        try:
            return exact[unit_type, text]
        except KeyError:
            pass
        candidates = folded.get((unit_type, text.casefold()), ())
        if len(candidates) == 1:
            unit, = candidates
            return unit
        if candidates:
            raise UnknownAbbreviation(f'ambiguous abbreviation {text!r} for {unit_type.__name__}: ' + ', '.join(sorted(unit.name for unit in candidates)))
        raise UnknownAbbreviation(f'unknown abbreviation {text!r} for {unit_type.__name__}')


table = AbbreviationTable(_DEFINITIONS)


def get_abbreviation(unit_type, unit):
    '''Return the default abbreviation of ``unit``.'''

    return table.abbreviations(unit_type, unit)[0]


def get_abbreviations(unit_type, unit):
    '''Return all abbreviations of ``unit``, the default one first.'''

    return table.abbreviations(unit_type, unit)


def parse_unit(unit_type, text):
    '''Return the member of ``unit_type`` abbreviated by ``text``.'''

    if not isinstance(text, str):
        raise TypeError(f'expected a str, got {type(text).__name__}')
    return table.parse(unit_type, text)


## FORMATTING

class Locale(typing.NamedTuple):
    name: str
    decimal_point: str


locales = {locale.name: locale for locale in (
    Locale('invariant', '.'),
    Locale('en-US', '.'),
    Locale('en-GB', '.'),
    Locale('de-DE', ','),
    Locale('fr-FR', ','),
    Locale('nl-NL', ','),
)}


def get_locale(locale):
    if locale is None:
        return locales['invariant']
    if isinstance(locale, Locale):
        return locale
    try:
        return locales[locale]
    except (KeyError, TypeError):
        raise UnsupportedFormat(f'unsupported locale {locale!r}') from None


_format_spec = re.compile('([GgFfEe])([0-9]{0,2})')


def format_value(value, format_spec='G', locale=None):
    '''Format a float.

    The format specifier consists of a single letter optionally followed by a
    precision: ``G`` for general notation, ``F`` for fixed point notation and
    ``E`` for scientific notation. The general notation without precision
    yields the shortest representation that reads back as the same float.
    Fixed point defaults to 2 decimals, scientific notation to 6. The case of
    the letter determines the case of the exponent character.'''

    match = _format_spec.fullmatch(format_spec or 'G')
    if not match:
        raise UnsupportedFormat(f'unsupported format specifier {format_spec!r}')
    kind, precision = match.groups()
    if kind in 'Gg':
        if precision and int(precision):
            s = format(value, f'.{precision}{kind}')
        else:
            s = repr(float(value))
            if s.endswith('.0'):
                s = s[:-2]
            if kind == 'G':
                s = s.upper()
    else:
        s = format(value, '.{}{}'.format(precision or (2 if kind in 'Ff' else 6), kind))
    return s.replace('.', get_locale(locale).decimal_point)


@util.defaults_from_env
def format_quantity(value, unit, format_spec: str = 'G', locale: str = 'invariant'):
    '''Format a value and unit as ``'<value> <abbreviation>'``.'''

    return format_value(value, format_spec, locale) + ' ' + get_abbreviation(type(unit), unit)


# vim:sw=4:sts=4:et
