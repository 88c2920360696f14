"""
Pytest fixtures: a few coffees of known weight.
"""

import pytest

from boxes import Item


@pytest.fixture
def saludo() -> Item:
    return Item("Saludo", 5)


@pytest.fixture
def pirkka() -> Item:
    return Item("Pirkka", 5)


@pytest.fixture
def kopi_luwak() -> Item:
    return Item("Kopi Luwak", 5)


@pytest.fixture
def coffees(saludo, pirkka, kopi_luwak):
    return [saludo, pirkka, kopi_luwak]
