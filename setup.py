from setuptools import setup

long_description = """
Dimscale is a Python library for dimensional analysis and unit scaling. It
describes physical quantities by the exponents of eight base quantities and
by a scale that is an exact product of powers of 2, 3, 5 and π, such that
conversions between metric, imperial and astronomical units are computed
without intermediate rounding.

Dimscale provides a catalog of common dimensions and units with SI prefix
support, a parser for compound unit expressions such as ``kg*m/s^2``, a
pretty printer that names any dimension and scale with the most readable unit
available, and fuzzy "did you mean" suggestions for misspelled names.
"""

import os, re
with open(os.path.join('dimscale', '__init__.py')) as f:
  version = next(filter(None, map(re.compile("^__version__ = version = '([a-zA-Z0-9.]+)'$").match, f))).group(1)

setup(
  name = 'dimscale',
  version = version,
  description = 'Dimensional Analysis and Unit Scaling',
  packages = ['dimscale'],
  long_description = long_description,
  license = 'MIT',
  python_requires = '>=3.7',
  install_requires = ['numpy>=1.12', 'treelog>=1.0b5', 'stringly'],
)
