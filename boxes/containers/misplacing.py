# -*- coding: utf-8 -*-
"""
Container that accepts everything and never admits to holding anything.

Items go into a separate "lost" collection; membership checks always
answer False. Use reveal_contents() to see what was actually stored.
"""

from __future__ import annotations
from typing import List, Optional

from boxes.business_objects.items import Item
from boxes.utils.logging import get_logger
from .base import Container, require_item

logger = get_logger(__name__)


class MisplacingContainer(Container):
    """Accepts any item and then loses it."""

    def __init__(self) -> None:
        self._lost: List[Item] = []

    def can_add(self, item: Optional[Item]) -> bool:
        return item is not None

    def add(self, item: Item) -> bool:
        require_item(item)
        self._lost.append(item)
        logger.debug(
            "item_misplaced",
            container="misplacing",
            item=item.name,
            lost_count=len(self._lost),
        )
        return True

    def contains(self, item: Optional[Item]) -> bool:
        return False

    def items(self) -> List[Item]:
        # Nothing is ever reported as held.
        return []

    def reveal_contents(self) -> List[Item]:
        """Copy of every item ever added, in insertion order."""
        return list(self._lost)
