# -*- coding: utf-8 -*-
"""
Container layer public API.

  - Container              abstract interface (can_add / add / add_all / contains)
  - WeightLimitedContainer bounded by total weight
  - SingleItemContainer    keeps only the first item
  - MisplacingContainer    stores everything, reports nothing
"""

from .base import Container
from .weight_limited import WeightLimitedContainer
from .single_item import SingleItemContainer
from .misplacing import MisplacingContainer

__all__ = [
    "Container",
    "WeightLimitedContainer",
    "SingleItemContainer",
    "MisplacingContainer",
]
