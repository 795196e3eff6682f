'''
The util module provides a collection of general purpose methods.
'''

from . import warnings
import stringly
import os
import inspect
import functools


def defaults_from_env(f):
    '''Decorator for changing function defaults based on environment.

    This decorator searches the environment for variables matching the pattern
    ``SIMUNITS_MYPARAM``, where ``myparam`` is a parameter of the decorated
    function. Only parameters with type annotation and a default value are
    considered, and the string value is deserialized using `Stringly
    <https://pypi.org/project/stringly/>`_. In case deserialization fails, a
    warning is emitted and the original default is maintained.'''

    sig = inspect.signature(f)
    params = []
    changed = False
    for param in sig.parameters.values():
        envname = f'SIMUNITS_{param.name.upper()}'
        if envname in os.environ and param.annotation != param.empty and param.default != param.empty:
            try:
                v = stringly.loads(param.annotation, os.environ[envname])
            except Exception as e:
                warnings.warn(f'ignoring environment variable {envname}: {e}')
            else:
                param = param.replace(default=v)
                changed = True
        params.append(param)
    if not changed:
        return f
    sig = sig.replace(parameters=params)
    @functools.wraps(f)
    def defaults_from_env(*args, **kwargs):
        bound = sig.bind(*args, **kwargs)
        bound.apply_defaults()
        return f(*bound.args, **bound.kwargs)
    defaults_from_env.__signature__ = sig
    return defaults_from_env


def f2s(v):
    'convert float to string without scientific notation'

    sign = '-' if str(v).startswith('-') else ''
    s, sep, e = str(abs(v)).partition('e')
    a, sep, b = s.partition('.')
    pos = len(a) + int(e or 0)
    s = (a + b).lstrip('0')
    pos -= len(a + b) - len(s)
    s = s.rstrip('0')
    if not s:
        return '0'
    return sign + (s.ljust(pos, '0') if pos >= len(s)
        else '0.' + '0' * -pos + s if pos <= 0
        else s[:pos] + '.' + s[pos:])


# vim:sw=4:sts=4:et
