# -*- coding: utf-8 -*-
"""
Container interface.

Every container owns its own storage and its own admission rule. The
interface only fixes the contract:

  - can_add(item)   admission check, never mutates state
  - add(item)       admit one item per the container's policy
  - add_all(items)  admit a batch, one item at a time, in order
  - contains(item)  value-based membership

Rejections are silent (add returns False). Handing a container an absent
item (None) raises InvalidArgumentError.
"""

from __future__ import annotations
from abc import ABC, abstractmethod
from typing import Iterable, Iterator, List, Optional

from boxes.business_objects.errors import InvalidArgumentError
from boxes.business_objects.items import Item


class Container(ABC):
    """Abstract container with a pluggable admission policy."""

    @abstractmethod
    def can_add(self, item: Optional[Item]) -> bool:
        """Return True if `item` would be admitted right now. None is never admitted."""

    @abstractmethod
    def add(self, item: Item) -> bool:
        """
        Attempt to admit the item. Returns True if committed, False if the
        policy rejected it.

        Raises
        ------
        InvalidArgumentError
            If `item` is None.
        """

    @abstractmethod
    def contains(self, item: Optional[Item]) -> bool:
        """True iff an item equal to `item` is reported as held."""

    @abstractmethod
    def items(self) -> List[Item]:
        """Snapshot of the items reported as held, in insertion order."""

    def add_all(self, items: Iterable[Item]) -> int:
        """
        Attempt each item in order; no atomicity across the batch.
        Returns the number of items admitted.
        """
        if items is None:
            raise InvalidArgumentError("Item batch cannot be None.")
        admitted = 0
        for item in items:
            if self.add(item):
                admitted += 1
        return admitted

    # Python container protocol

    def __contains__(self, item: object) -> bool:
        return isinstance(item, Item) and self.contains(item)

    def __len__(self) -> int:
        return len(self.items())

    def __iter__(self) -> Iterator[Item]:
        return iter(self.items())

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.items()!r})"


def require_item(item: Optional[Item]) -> None:
    """Fail fast on an absent item."""
    if item is None:
        raise InvalidArgumentError("Item cannot be None.")
