'''
Extensions of the :mod:`unittest` module.
'''

import unittest
import sys
import types as builtin_types
import operator
import treelog
import warnings as _builtin_warnings
import logging
from simunits import warnings


class PrintHandler(logging.Handler):
    'similar to StreamHandler except using always the current sys.stdout'

    def emit(self, record):
        print(record.msg)


class _ParametrizedCollection(type):

    def __new__(mcls, name, bases, namespace, base):
        return super().__new__(mcls, name, bases, namespace)

    def __init__(cls, name, bases, namespace, base):
        super().__init__(name, bases, namespace)
        cls.__base = base
        cls.__test_cases = []
        for attr in '__module__', '__qualname__', '__doc__':
            if hasattr(base, attr):
                setattr(cls, attr, getattr(base, attr))

    def __call__(*args, **params):
        assert 1 <= len(args) <= 2
        cls = args[0]

        if len(args) == 1 and not params:
            loader = unittest.defaultTestLoader
            ts = unittest.TestSuite()
            for test_case in sorted(cls.__test_cases, key=operator.attrgetter('__name__')):
                ts.addTest(loader.loadTestsFromTestCase(test_case))
            return ts

        name = args[1] if len(args) == 2 else None
        if name is None:
            name = ','.join('{}={}'.format(k, getattr(v, '__name__', v)) for k, v in sorted(params.items()))
            name = name.replace('%', '%{}'.format(ord('%'))).replace('.', '%{}'.format(ord('.')))
        assert '.' not in name
        assert not hasattr(cls, name), 'duplicate test name'

        def setUp(self):
            for k, v in params.items():
                setattr(self, k, v)
            return cls.__base.setUp(self)

        def populate(ns):
            ns.update(setUp=setUp, __qualname__=cls.__qualname__+':'+name, __module__=cls.__module__, __doc__=cls.__doc__)
            return ns
        TestCase = builtin_types.new_class(name, (cls.__base,), exec_body=populate)

        cls.__test_cases.append(TestCase)
        # Add `TestCase` as `name` to this collection.
        setattr(cls, name, TestCase)
        # Trick `unittest.loader.TestLoader.loadTestsFromModule` into finding
        # this test case.
        setattr(sys.modules[cls.__module__], cls.__qualname__+':'+name, TestCase)


def parametrize(TestCase):
    '''Parametrize a :class:`unittest.TestCase`.

    >>> @parametrize
    ... class TestSomething(unittest.TestCase):
    ...   def test_equality(self):
    ...     self.assertEqual(self.x, self.y)
    >>> TestSomething(x=1, y=1)
    >>> TestSomething(x=2, y=2)
    '''
    return builtin_types.new_class(TestCase.__name__, (), dict(metaclass=_ParametrizedCollection, base=TestCase))


class TestCase(unittest.TestCase):
    '''A class whose instances are single test cases.

    All :class:`simunits.warnings.SimunitsWarning` are turned into an
    exception by default. Use

    ::

      def test(self):
        with TestCase.assertWarns(...):
          ...

    to assert expected warnings.
    '''

    maxDiff = None  # prevent assertEqual from shortening the diff error message

    def enter_context(self, ctx):
        retval = ctx.__enter__()
        self.addCleanup(ctx.__exit__, None, None, None)
        return retval

    def setUp(self):
        super().setUp()
        print_handler = PrintHandler()
        simunits_logger = logging.getLogger('simunits')
        simunits_logger.setLevel('INFO')  # handle events of level INFO and up
        simunits_logger.addHandler(print_handler)
        self.addCleanup(simunits_logger.removeHandler, print_handler)
        self.enter_context(treelog.set(treelog.LoggingLog('simunits')))
        self.enter_context(_builtin_warnings.catch_warnings())
        _builtin_warnings.simplefilter('error', warnings.SimunitsWarning)

    def assertAllAlmostEqual(self, actual, desired, **kwargs):
        self.assertEqual(len(actual), len(desired))
        for a, d in zip(actual, desired):
            self.assertAlmostEqual(a, d, **kwargs)


# vim:sw=4:sts=4:et
