from setuptools import setup

long_description = """
Simunits is a Python library for physical quantities as they are exchanged with
flight simulators: lengths, masses, speeds and temperatures that carry an
explicit unit. Quantities convert exactly between units via a base unit per
dimension, support arithmetic that keeps the unit of the left operand,
compare and hash independently of the unit they were created in, and format
deterministically with standard unit abbreviations.
"""

import os, re
with open(os.path.join('simunits', '__init__.py')) as f:
  version = next(filter(None, map(re.compile("^__version__ = version = '([a-zA-Z0-9.]+)'$").match, f))).group(1)

setup(
  name = 'simunits',
  version = version,
  description = 'Physical quantities with explicit units for flight simulation data',
  author = 'Evalf',
  packages = ['simunits'],
  long_description = long_description,
  license = 'MIT',
  python_requires = '>=3.8',
  install_requires = ['numpy>=1.12', 'treelog>=1.0b5', 'stringly'],
)
