# -*- coding: utf-8 -*-
"""
Public exports for the business objects layer.
"""

from .errors import InvalidArgumentError, StateValidationError
from .items import Item

__all__ = [
    # errors
    "InvalidArgumentError",
    "StateValidationError",
    # core models
    "Item",
]
