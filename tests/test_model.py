from simunits import model, errors
from simunits.testing import TestCase
from simunits.units import LengthUnit, TemperatureUnit
import fractions
import enum


class Conversion(TestCase):

    def test_scale(self):
        c = model.Conversion.create('0.3048')
        self.assertEqual(c.scale, fractions.Fraction(3048, 10000))
        self.assertEqual(c.offset, 0)

    def test_affine(self):
        c = model.Conversion.create(('5/9', 10))
        self.assertEqual(c, (fractions.Fraction(5, 9), fractions.Fraction(10)))

    def test_zero_scale(self):
        with self.assertRaises(ValueError):
            model.Conversion.create(0)


class ConversionModel(TestCase):

    def setUp(self):
        super().setUp()
        T = TemperatureUnit
        self.model = model.ConversionModel(T, T.KELVIN, {
            T.KELVIN: 1,
            T.CELSIUS: (1, '273.15'),
            T.FAHRENHEIT: ('5/9', fractions.Fraction('459.67') * 5 / 9)})

    def test_to_base(self):
        self.assertEqual(self.model.to_base(0., TemperatureUnit.CELSIUS), 273.15)
        self.assertEqual(self.model.to_base(32., TemperatureUnit.FAHRENHEIT), 273.15)
        self.assertEqual(self.model.to_base(5., TemperatureUnit.KELVIN), 5.)

    def test_from_base(self):
        self.assertEqual(self.model.from_base(5., TemperatureUnit.KELVIN), 5.)
        self.assertAlmostEqual(self.model.from_base(373.15, TemperatureUnit.CELSIUS), 100., places=12)
        self.assertAlmostEqual(self.model.from_base(0., TemperatureUnit.FAHRENHEIT), -459.67, places=12)

    def test_convert(self):
        self.assertEqual(self.model.convert(100., TemperatureUnit.CELSIUS, TemperatureUnit.FAHRENHEIT), 212.)
        self.assertEqual(self.model.convert(-40., TemperatureUnit.FAHRENHEIT, TemperatureUnit.CELSIUS), -40.)

    def test_identity(self):
        for v in .1, 1/3, -273.15, 1e300:
            for unit in TemperatureUnit:
                with self.subTest(v=v, unit=unit):
                    self.assertIs(self.model.convert(v, unit, unit), v)

    def test_exact_base(self):
        self.assertEqual(self.model.exact_base(0, TemperatureUnit.CELSIUS), fractions.Fraction(27315, 100))

    def test_contains(self):
        self.assertIn(TemperatureUnit.CELSIUS, self.model)
        self.assertNotIn(LengthUnit.METRE, self.model)

    def test_repr(self):
        self.assertEqual(repr(self.model), 'ConversionModel(TemperatureUnit, base=KELVIN)')


class incomplete(TestCase):

    class Unit(enum.Enum):
        A = 'as'
        B = 'bs'
        C = 'cs'

    def setUp(self):
        super().setUp()
        self.model = model.ConversionModel(self.Unit, self.Unit.A, {self.Unit.A: 1, self.Unit.B: 2})

    def test_unsupported(self):
        with self.assertRaises(errors.UnsupportedUnit):
            self.model.to_base(1., self.Unit.C)
        with self.assertRaises(errors.UnsupportedUnit):
            self.model.from_base(1., self.Unit.C)
        with self.assertRaises(errors.UnsupportedUnit):
            self.model.convert(1., self.Unit.A, self.Unit.C)
        with self.assertRaises(LookupError):
            self.model.convert(1., self.Unit.C, self.Unit.B)

    def test_foreign_unit(self):
        with self.assertRaises(errors.UnsupportedUnit):
            self.model.to_base(1., LengthUnit.METRE)

    def test_supported(self):
        self.assertEqual(self.model.convert(3., self.Unit.B, self.Unit.A), 6.)


class invalid(TestCase):

    def test_base_not_unit(self):
        with self.assertRaises(ValueError):
            model.ConversionModel(LengthUnit, TemperatureUnit.KELVIN, {LengthUnit.METRE: 1})

    def test_base_not_identity(self):
        with self.assertRaises(ValueError):
            model.ConversionModel(LengthUnit, LengthUnit.METRE, {LengthUnit.METRE: 2})
        with self.assertRaises(ValueError):
            model.ConversionModel(LengthUnit, LengthUnit.METRE, {LengthUnit.METRE: (1, 1)})

    def test_base_missing(self):
        with self.assertRaises(ValueError):
            model.ConversionModel(LengthUnit, LengthUnit.METRE, {LengthUnit.FOOT: '0.3048'})

    def test_foreign_key(self):
        with self.assertRaises(ValueError):
            model.ConversionModel(LengthUnit, LengthUnit.METRE, {LengthUnit.METRE: 1, TemperatureUnit.KELVIN: 1})


# vim:sw=4:sts=4:et
