'''
Conversion between the units of a single dimension.

Every unit is related to the dimension's base unit by a scale and an offset,
such that ``base = value * scale + offset``. Ratio scales such as length and
mass have a zero offset; temperature scales other than kelvin are affine.
Adding a unit to a dimension therefore takes a single table entry, rather than
one conversion rule for every pair of units.

Scales and offsets are held as exact fractions, so that conversions are exact
up to the final rounding to float:

    >>> from simunits.units import LengthUnit as L
    >>> model = ConversionModel(L, L.METRE, {L.METRE: 1, L.FOOT: '0.3048', L.INCH: '0.0254'})
    >>> model.convert(12., L.INCH, L.FOOT)
    1.0
'''

import fractions
import typing
from .errors import UnsupportedUnit


class Conversion(typing.NamedTuple):
    '''Relation of a unit to its base unit: ``base = value * scale + offset``.'''

    scale: fractions.Fraction
    offset: fractions.Fraction = fractions.Fraction(0)

    @classmethod
    def create(cls, arg):
        '''Create a conversion from a scale, or from a (scale, offset) tuple.

        Numbers and strings are converted to :class:`fractions.Fraction`;
        strings permit exact decimals such as ``'0.3048'`` as well as ratios
        such as ``'5/9'``.'''

        scale, offset = arg if isinstance(arg, tuple) else (arg, 0)
        scale = fractions.Fraction(scale)
        if not scale:
            raise ValueError('scale must be nonzero')
        return cls(scale, fractions.Fraction(offset))


class ConversionModel:
    '''Conversion table of a dimension.

    Args
    ----
    units : :class:`enum.EnumMeta`
        Enumeration of the dimension's units.
    base : :class:`enum.Enum`
        The base unit, which must convert with scale 1 and offset 0.
    table : :class:`dict`
        Mapping from unit to a scale or a (scale, offset) tuple, see
        :meth:`Conversion.create`.
    '''

    def __init__(self, units, base, table):
        if not isinstance(base, units):
            raise ValueError(f'base unit {base!r} is not a member of {units.__name__}')
        self.units = units
        self.base = base
        self._table = {}
        for unit, arg in table.items():
            if not isinstance(unit, units):
                raise ValueError(f'{unit!r} is not a member of {units.__name__}')
            self._table[unit] = Conversion.create(arg)
        if self._table.get(base) != Conversion(fractions.Fraction(1)):
            raise ValueError(f'base unit {base.name} must have scale 1 and offset 0')

    def __contains__(self, unit):
        return unit in self._table

    def __getitem__(self, unit):
        try:
            return self._table[unit]
        except (KeyError, TypeError):
            raise UnsupportedUnit(f'no conversion defined for {unit!r}') from None

    def exact_base(self, value, unit):
        '''Return ``value`` in base units as an exact fraction.'''

        scale, offset = self[unit]
        return fractions.Fraction(value) * scale + offset

    def to_base(self, value, unit):
        '''Convert ``value`` from ``unit`` to the base unit.'''

        return float(self.exact_base(value, unit))

    def from_base(self, base_value, unit):
        '''Convert ``base_value`` from the base unit to ``unit``.'''

        scale, offset = self[unit]
        return float((fractions.Fraction(base_value) - offset) / scale)

    def convert(self, value, from_unit, to_unit):
        '''Convert ``value`` from ``from_unit`` to ``to_unit``.

        Identical units return ``value`` unchanged. Otherwise the value is
        converted via the base unit, with rounding to float taking place only
        once at the end.'''

        if from_unit == to_unit:
            return value
        scale, offset = self[to_unit]
        return float((self.exact_base(value, from_unit) - offset) / scale)

    def __repr__(self):
        return f'ConversionModel({self.units.__name__}, base={self.base.name})'


# vim:sw=4:sts=4:et
