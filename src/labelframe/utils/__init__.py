"""Generic utilities and helpers.

This is a collection of utilities that sit on top of
the data structures, like rendering them as text,
and are not needed by the data structures themselves.
"""

from . import tabulate
from .tabulate import DisplayOptions

__all__ = ("tabulate", "DisplayOptions")
