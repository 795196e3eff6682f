import warnings


class SimunitsWarning(Warning):
    'Base class for warnings from simunits.'


class SimunitsDeprecationWarning(SimunitsWarning):
    'Warning about deprecated simunits features.'


def warn(message, category=SimunitsWarning, stacklevel=1):
    warnings.warn(message, category, stacklevel=stacklevel+1)


def deprecation(message):
    # skip this helper and the deprecated function itself
    warnings.warn(message, SimunitsDeprecationWarning, stacklevel=3)


# vim:sw=4:sts=4:et
