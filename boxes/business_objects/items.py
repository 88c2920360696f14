# -*- coding: utf-8 -*-
"""
Item model for boxes.
"""

from __future__ import annotations
from dataclasses import dataclass
from .errors import StateValidationError


@dataclass(frozen=True)
class Item:
    """
    A thing that can be put into a container.

    Equality and hashing are by value: two items with the same name and
    weight are the same item as far as membership checks are concerned.

    Attributes
    ----------
    name : str
        Non-empty display name.
    weight : int
        Nonnegative weight (capacity consumption). Defaults to 0.
    """
    name: str
    weight: int = 0

    def __post_init__(self) -> None:  # type: ignore[override]
        if not self.name:
            raise StateValidationError("Item.name must be non-empty.")
        if isinstance(self.weight, bool) or not isinstance(self.weight, int):
            raise StateValidationError(
                f"Item[{self.name}] weight must be an int, got {self.weight!r}."
            )
        if self.weight < 0:
            raise StateValidationError(f"Item[{self.name}] weight must be >= 0.")

    def __str__(self) -> str:
        return f"{self.name} ({self.weight} kg)"
