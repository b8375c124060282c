"""Provide utility functions used by the various tiling tools in
this package.

"""

from .core import *

from . import numerical, testing
