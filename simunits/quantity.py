'''
The quantity module provides the generic value type shared by all dimensions.

A quantity is an immutable pair of a finite float and a unit. Quantity types
are created by subclassing :class:`Quantity` with a unit enumeration, a base
unit, and a conversion table relating every unit to the base unit:

    >>> import enum
    >>> class TimeUnit(enum.Enum):
    ...     SECOND = 'seconds'
    ...     MINUTE = 'minutes'
    >>> class Time(Quantity, units=TimeUnit, base=TimeUnit.SECOND,
    ...         conversions={TimeUnit.SECOND: 1, TimeUnit.MINUTE: 60}, register=False):
    ...     __slots__ = ()

The enumeration values name the generated factories and accessors:

    >>> t = Time.from_minutes(1.5)
    >>> t.seconds
    90.0

Arithmetic keeps the unit of the left operand, while comparisons convert the
right operand before comparing:

    >>> t + Time.from_seconds(30)
    Time(2.0, TimeUnit.MINUTE)
    >>> Time.from_seconds(90) == t
    True

A quantity divided by a quantity of the same dimension is a plain float:

    >>> t / Time.from_seconds(30)
    3.0

Types defined with ``register=False``, like the one above, are kept out of
:meth:`Dimension.registry`.

    >>> 'Time' in Dimension.registry()
    False

Strings are accepted wherever a unit is expected, provided the abbreviation
table has entries for the dimension. See :mod:`simunits.dimensions` for the
predefined length, mass, speed and temperature types.
'''

import re
import numpy
from . import abbreviation, numeric, _util as util
from .errors import InvalidUnit, InvalidValue, IncomparableType
from .model import ConversionModel


class Dimension(type):
    '''Metaclass of quantity types.

    Subclasses of :class:`Quantity` that pass the ``units``, ``base`` and
    ``conversions`` class arguments become concrete quantity types. For every
    unit ``u`` of the enumeration a factory ``from_<u.value>`` and an accessor
    ``<u.value>`` are generated, unless the class body defines them already.
    Concrete types are registered by name unless ``register=False`` is
    passed.
    '''

    __registry = {}

    def __new__(mcls, name, bases, namespace, **kwargs):
        return super().__new__(mcls, name, bases, namespace)

    def __init__(cls, name, bases, namespace, units=None, base=None, conversions=None, register=True):
        super().__init__(name, bases, namespace)
        if units is None:
            return
        if register and name in Dimension.__registry:
            raise ValueError(f'dimension {name!r} is already defined')
        cls.unit_type = units
        cls.base_unit = base
        cls.units = tuple(units)
        cls.model = ConversionModel(units, base, conversions or {})
        for unit in units:
            if 'from_' + unit.value not in namespace:
                setattr(cls, 'from_' + unit.value, _factory(unit))
            if unit.value not in namespace:
                setattr(cls, unit.value, _accessor(unit))
        limits = numpy.finfo(float)
        cls.zero = cls(0., base)
        cls.min_value = cls(float(limits.min), base)
        cls.max_value = cls(float(limits.max), base)
        if register:
            Dimension.__registry[name] = cls

    @classmethod
    def registry(mcls):
        '''Return all quantity types by name.'''

        return dict(mcls.__registry)

    def __call__(cls, *args, **kwargs):
        if getattr(cls, 'model', None) is None:
            raise TypeError('Quantity base class cannot be instantiated')
        if len(args) == 1 and not kwargs and isinstance(args[0], str):
            return cls.parse(args[0])
        return super().__call__(*args, **kwargs)

    def __stringly_loads__(cls, s):
        return cls.parse(s)

    def __stringly_dumps__(cls, v):
        if not isinstance(v, cls):
            raise ValueError(f'expected {cls.__name__}, got {type(v).__name__}')
        return util.f2s(v.value) + cls.get_abbreviation(v.unit)


def _factory(unit):
    def factory(cls, value):
        return cls.from_value(value, unit)
    factory.__name__ = factory.__qualname__ = 'from_' + unit.value
    factory.__doc__ = 'Create a quantity from a value in {}.'.format(unit.value.replace('_', ' '))
    return classmethod(factory)


def _accessor(unit):
    def accessor(self):
        return self.as_unit(unit)
    accessor.__name__ = accessor.__qualname__ = unit.value
    accessor.__doc__ = 'Value in {}.'.format(unit.value.replace('_', ' '))
    return property(accessor)


_quantity = re.compile(r'\s*([+-]?(?:[0-9]+(?:[.][0-9]*)?|[.][0-9]+)(?:[eE][+-]?[0-9]+)?)\s*(.*?)\s*')


class Quantity(metaclass=Dimension):
    '''Finite value with a unit.

    Args
    ----
    value : number
        Any number accepted by :class:`simunits.numeric.QuantityValue`.
    unit : unit enumeration member or :class:`str`
        Unit of ``value``; strings are parsed as abbreviations.
    '''

    __slots__ = '_value', '_unit'

    # numpy scalars defer to the reflected operators
    __array_ufunc__ = None

    def __init__(self, value, unit):
        object.__setattr__(self, '_value', numeric.as_float(value))
        object.__setattr__(self, '_unit', self._resolve_unit(unit))

    def __setattr__(self, name, value):
        raise AttributeError(f'{type(self).__name__} is immutable')

    def __delattr__(self, name):
        raise AttributeError(f'{type(self).__name__} is immutable')

    def __reduce__(self):
        return type(self), (self._value, self._unit)

    @classmethod
    def _resolve_unit(cls, unit):
        if isinstance(unit, cls.unit_type):
            return unit
        if isinstance(unit, str):
            return abbreviation.parse_unit(cls.unit_type, unit)
        raise InvalidUnit(f'{unit!r} is not a unit of {cls.__name__}')

    @classmethod
    def from_value(cls, value, unit):
        '''Create a quantity from any supported number type.'''

        return cls(numeric.QuantityValue(value), unit)

    @classmethod
    def parse(cls, s):
        '''Create a quantity from a string such as ``'5280 ft'``.'''

        match = _quantity.fullmatch(s)
        if not match:
            raise InvalidValue(f'invalid {cls.__name__.lower()} {s!r}: expected a number followed by a unit')
        number, unit = match.groups()
        return cls(float(number), unit)

    @classmethod
    def get_abbreviation(cls, unit):
        '''Return the default abbreviation of ``unit``.'''

        return abbreviation.get_abbreviation(cls.unit_type, cls._resolve_unit(unit))

    @property
    def value(self):
        return self._value

    @property
    def unit(self):
        return self._unit

    def as_unit(self, unit):
        '''Return the value expressed in ``unit``.'''

        return self.model.convert(self._value, self._unit, self._resolve_unit(unit))

    def to_unit(self, unit):
        '''Return an equal quantity expressed in ``unit``.'''

        unit = self._resolve_unit(unit)
        return type(self)(self.model.convert(self._value, self._unit, unit), unit)

    def _compatible(self, other):
        return isinstance(other, Quantity) and other.model is self.model

    def _convert(self, other):
        return self.model.convert(other._value, other._unit, self._unit)

    ## ARITHMETIC

    def __neg__(self):
        return type(self)(-self._value, self._unit)

    def __pos__(self):
        return self

    def __abs__(self):
        return type(self)(abs(self._value), self._unit)

    def __add__(self, other):
        if not self._compatible(other):
            return NotImplemented
        return type(self)(self._value + self._convert(other), self._unit)

    def __sub__(self, other):
        if not self._compatible(other):
            return NotImplemented
        return type(self)(self._value - self._convert(other), self._unit)

    def __mul__(self, other):
        if not numeric.isnumeric(other):
            return NotImplemented
        return type(self)(self._value * numeric.as_float(other), self._unit)

    __rmul__ = __mul__

    def __truediv__(self, other):
        if isinstance(other, str):
            return self.as_unit(other)
        if self._compatible(other):
            return self.model.to_base(self._value, self._unit) / other.model.to_base(other._value, other._unit)
        if not numeric.isnumeric(other):
            return NotImplemented
        return type(self)(self._value / numeric.as_float(other), self._unit)

    ## COMPARISON

    def __eq__(self, other):
        if not self._compatible(other):
            return NotImplemented
        return self._value == self._convert(other)

    def __lt__(self, other):
        if not self._compatible(other):
            return NotImplemented
        return self._value < self._convert(other)

    def __le__(self, other):
        if not self._compatible(other):
            return NotImplemented
        return self._value <= self._convert(other)

    def __gt__(self, other):
        if not self._compatible(other):
            return NotImplemented
        return self._value > self._convert(other)

    def __ge__(self, other):
        if not self._compatible(other):
            return NotImplemented
        return self._value >= self._convert(other)

    def __hash__(self):
        # equality rounds in the unit of the left operand, so no value derived
        # hash is consistent with it across units
        return hash(self.model)

    def equals(self, other):
        '''Test for equality, returning False for any incompatible object.'''

        return self._compatible(other) and self._value == self._convert(other)

    def compare(self, other):
        '''Return -1, 0 or 1 if this quantity is less than, equal to or greater than ``other``.'''

        if not self._compatible(other):
            raise IncomparableType(f'cannot compare {type(self).__name__} with {type(other).__name__}')
        v = self._convert(other)
        return (self._value > v) - (self._value < v)

    ## FORMATTING

    def to_string(self, format_spec=None, locale=None):
        '''Format as value and abbreviation, e.g. ``'5280 ft'``.

        Args
        ----
        format_spec : :class:`str`
            ``G`` (default), ``F`` or ``E``, optionally followed by a
            precision; see :func:`simunits.abbreviation.format_value`.
        locale : :class:`str` or :class:`simunits.abbreviation.Locale`
            Defaults to the invariant locale.
        '''

        if format_spec is None:
            return abbreviation.format_quantity(self._value, self._unit, locale=locale or 'invariant')
        return abbreviation.format_quantity(self._value, self._unit, format_spec, locale or 'invariant')

    def __format__(self, format_spec):
        return self.to_string(format_spec or None)

    def __str__(self):
        return self.to_string()

    def __repr__(self):
        return f'{type(self).__name__}({self._value!r}, {self._unit})'


# vim:sw=4:sts=4:et
