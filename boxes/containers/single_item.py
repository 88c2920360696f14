# -*- coding: utf-8 -*-
"""
Container that holds at most one item.
"""

from __future__ import annotations
from typing import List, Optional

from boxes.business_objects.items import Item
from boxes.utils.logging import get_logger
from .base import Container, require_item

logger = get_logger(__name__)


class SingleItemContainer(Container):
    """Keeps the first item it is given and ignores the rest."""

    def __init__(self) -> None:
        self._item: Optional[Item] = None

    @property
    def item(self) -> Optional[Item]:
        """The held item, or None while empty."""
        return self._item

    def can_add(self, item: Optional[Item]) -> bool:
        if item is None:
            return False
        return self._item is None

    def add(self, item: Item) -> bool:
        require_item(item)
        if not self.can_add(item):
            logger.debug(
                "item_rejected",
                container="single_item",
                item=item.name,
                held=self._item.name,
            )
            return False
        self._item = item
        logger.debug("item_admitted", container="single_item", item=item.name)
        return True

    def contains(self, item: Optional[Item]) -> bool:
        if item is None:
            return False
        return self._item is not None and self._item == item

    def items(self) -> List[Item]:
        return [] if self._item is None else [self._item]
