# -*- coding: utf-8 -*-
"""
boxes: item containers with pluggable admission policies.
"""

from .business_objects import InvalidArgumentError, Item, StateValidationError
from .containers import (
    Container,
    MisplacingContainer,
    SingleItemContainer,
    WeightLimitedContainer,
)

__all__ = [
    "InvalidArgumentError",
    "StateValidationError",
    "Item",
    "Container",
    "WeightLimitedContainer",
    "SingleItemContainer",
    "MisplacingContainer",
]

__version__ = "0.1.0"
