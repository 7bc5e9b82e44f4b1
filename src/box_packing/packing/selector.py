# src/box_packing/packing/selector.py

from __future__ import annotations

from typing import Sequence

from box_packing.metrics import box_volume, product_volume
from box_packing.models import Box, Product
from box_packing.packing.fit import fits


def best_subset_for_box(products: Sequence[Product], box: Box) -> list[Product]:
    """
    Largest-first volume pass selecting the products one box can take.

    - Drops products that fit the box in no rotation
    - Sorts big products first (stable, so equal volumes keep input order)
    - Single forward pass: a product is taken if its volume is <= the
      remaining capacity, otherwise skipped and never retried

    Only volumes are summed, positions are not tracked. A subset accepted
    here may not be physically arrangeable inside the box.
    """
    candidates = sorted(
        (p for p in products if fits(p, box)),
        key=product_volume,
        reverse=True,
    )

    selected: list[Product] = []
    remaining_volume = box_volume(box)
    for product in candidates:
        volume = product_volume(product)
        if volume <= remaining_volume:
            selected.append(product)
            remaining_volume -= volume

    return selected
