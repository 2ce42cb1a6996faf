"""
Core module for configstore.

This module provides the foundational components used throughout the package:
- Exception classes
- Item and ItemList data types
"""

from .exceptions import *
from .item import Item, ItemList

__all__ = ['Item', 'ItemList']

from .exceptions import __all__ as exceptions_all

__all__.extend(exceptions_all)
