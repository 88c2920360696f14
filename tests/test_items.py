"""
Tests for the Item value object.
"""

import pytest

from boxes import Item, StateValidationError


def test_equal_by_name_and_weight():
    """Separately constructed items with the same fields are equal."""
    assert Item("Saludo", 5) == Item("Saludo", 5)
    assert hash(Item("Saludo", 5)) == hash(Item("Saludo", 5))


def test_different_weight_is_different_item():
    assert Item("Saludo", 5) != Item("Saludo", 6)
    assert Item("Saludo", 5) != Item("Pirkka", 5)


def test_weight_defaults_to_zero():
    assert Item("Saludo").weight == 0
    assert Item("Saludo") == Item("Saludo", 0)


def test_items_are_immutable():
    item = Item("Saludo", 5)
    with pytest.raises(AttributeError):
        item.weight = 1  # type: ignore[misc]


@pytest.mark.parametrize(
    "name, weight",
    [("", 1), ("Saludo", -1), ("Saludo", 2.5), ("Saludo", "5"), ("Saludo", True)],
)
def test_invalid_fields_rejected(name, weight):
    with pytest.raises(StateValidationError):
        Item(name, weight)


def test_str():
    assert str(Item("Saludo", 5)) == "Saludo (5 kg)"
