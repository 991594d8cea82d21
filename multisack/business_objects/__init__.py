# -*- coding: utf-8 -*-
"""
Public exports for the business objects layer.
"""

from .errors import SchemaError, StateValidationError, ParseError
from .items import Item
from .knapsacks import KnapsackSpec

__all__ = [
    # errors
    "SchemaError",
    "StateValidationError",
    "ParseError",
    # core models
    "Item",
    "KnapsackSpec",
]
