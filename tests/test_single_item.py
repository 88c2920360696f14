"""
Tests for SingleItemContainer.
"""

import pytest

from boxes import InvalidArgumentError, Item, SingleItemContainer


def test_keeps_only_first_item(saludo, pirkka):
    """The second distinct item is silently ignored."""
    box = SingleItemContainer()
    assert box.add(saludo) is True
    assert box.add(pirkka) is False

    assert box.contains(Item("Saludo", 5))
    assert not box.contains(Item("Pirkka", 5))
    assert box.item == saludo


def test_can_add_only_while_empty(saludo, pirkka):
    box = SingleItemContainer()
    assert box.can_add(saludo)
    box.add(saludo)
    assert not box.can_add(pirkka)
    assert not box.can_add(saludo)


def test_empty_box():
    box = SingleItemContainer()
    assert box.item is None
    assert len(box) == 0
    assert not box.contains(Item("Saludo", 5))


def test_none_argument(saludo):
    """Adding None raises and leaves the box empty; contains(None) is False."""
    box = SingleItemContainer()
    with pytest.raises(InvalidArgumentError):
        box.add(None)  # type: ignore[arg-type]
    assert box.item is None
    assert not box.can_add(None)

    box.add(saludo)
    assert not box.contains(None)


def test_add_all_admits_first_only(coffees):
    box = SingleItemContainer()
    assert box.add_all(coffees) == 1
    assert list(box) == [coffees[0]]
