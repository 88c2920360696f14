#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Fill one of each container kind and print what each one reports holding.

This version does NOT use argparse.
Just set the variables at the top of the file and run:

    python scripts/run_demo.py

Expected output:
    True / True / False   (weight-limited, capacity 10, three 5 kg coffees)
    True / False          (single item)
    False / False         (misplacing)
"""

from __future__ import annotations
from typing import List

# ====== CONFIGURATION ======
CAPACITY = 10
COFFEES = [("Saludo", 5), ("Pirkka", 5), ("Kopi Luwak", 5)]
# ============================

from boxes import Item, MisplacingContainer, SingleItemContainer, WeightLimitedContainer
from boxes.utils.logging import setup_logging


def main() -> None:
    setup_logging()

    coffees: List[Item] = [Item(name, weight) for name, weight in COFFEES]

    coffee_box = WeightLimitedContainer(CAPACITY)
    coffee_box.add_all(coffees)

    print("\n=== Weight-limited box ===")
    for coffee in coffees:
        print(coffee_box.contains(coffee))

    box = SingleItemContainer()
    box.add_all(coffees[:2])

    print("\n=== Single-item box ===")
    for coffee in coffees[:2]:
        print(box.contains(coffee))

    mibox = MisplacingContainer()
    mibox.add_all(coffees[:2])

    print("\n=== Misplacing box ===")
    for coffee in coffees[:2]:
        print(mibox.contains(coffee))

    print("\nMisplacing box contents (even though contains() says False):")
    for coffee in mibox.reveal_contents():
        print(f"  - {coffee}")


if __name__ == "__main__":
    main()
