# -*- coding: utf-8 -*-
"""
Container bounded by total item weight.
"""

from __future__ import annotations
from typing import List, Optional

from boxes.business_objects.errors import StateValidationError
from boxes.business_objects.items import Item
from boxes.utils.logging import get_logger
from .base import Container, require_item

logger = get_logger(__name__)


class WeightLimitedContainer(Container):
    """
    Admits an item only while the running weight stays within capacity.

    Attributes
    ----------
    capacity : int
        Maximum total weight (inclusive).
    current_weight : int
        Sum of the weights of admitted items.
    """

    def __init__(self, capacity: int) -> None:
        if isinstance(capacity, bool) or not isinstance(capacity, int):
            raise StateValidationError(f"capacity must be an int, got {capacity!r}.")
        if capacity < 0:
            raise StateValidationError("capacity must be >= 0.")
        self._capacity = capacity
        self._current_weight = 0
        self._items: List[Item] = []

    @property
    def capacity(self) -> int:
        return self._capacity

    @property
    def current_weight(self) -> int:
        return self._current_weight

    @property
    def remaining_capacity(self) -> int:
        return self._capacity - self._current_weight

    def can_add(self, item: Optional[Item]) -> bool:
        if item is None:
            return False
        return self._current_weight + item.weight <= self._capacity

    def add(self, item: Item) -> bool:
        require_item(item)
        if not self.can_add(item):
            logger.debug(
                "item_rejected",
                container="weight_limited",
                item=item.name,
                weight=item.weight,
                remaining=self.remaining_capacity,
            )
            return False
        self._items.append(item)
        self._current_weight += item.weight
        logger.debug(
            "item_admitted",
            container="weight_limited",
            item=item.name,
            remaining=self.remaining_capacity,
        )
        return True

    def contains(self, item: Optional[Item]) -> bool:
        if item is None:
            return False
        return item in self._items

    def items(self) -> List[Item]:
        return list(self._items)
