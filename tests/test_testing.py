from simunits import testing
import treelog


@testing.parametrize
class parametrize(testing.TestCase):

    def test_params(self):
        self.assertEqual(self.x + self.y, 3)

    def test_setup(self):
        self.assertTrue(self.setup_called)

    def setUp(self):
        super().setUp()
        self.setup_called = True


parametrize(x=1, y=2)
parametrize('swapped', x=2, y=1)


class TestCase(testing.TestCase):

    def test_names(self):
        self.assertTrue(hasattr(parametrize, 'x=1,y=2'))
        self.assertTrue(hasattr(parametrize, 'swapped'))
        self.assertIn('parametrize:swapped', globals())

    def test_logging(self):
        with self.assertLogs('simunits', level='INFO') as cm:
            treelog.info('hello')
        self.assertEqual(cm.output, ['INFO:simunits:hello'])

    def test_all_almost_equal(self):
        self.assertAllAlmostEqual([1., 2.], [1., 2. + 1e-12])
        with self.assertRaises(AssertionError):
            self.assertAllAlmostEqual([1., 2.], [1., 2.1])
        with self.assertRaises(AssertionError):
            self.assertAllAlmostEqual([1.], [1., 2.])


# vim:sw=4:sts=4:et
