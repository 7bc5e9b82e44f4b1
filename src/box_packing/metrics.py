from __future__ import annotations

from typing import Iterable

from box_packing.models import Box, Product


def product_volume(product: Product) -> float:
    return product.dimensions.volume


def box_volume(box: Box) -> float:
    return box.dimensions.volume


def compute_fill_rate(box: Box, products: Iterable[Product]) -> float:
    """Fill rate = sum of product volumes / box volume."""
    capacity = box_volume(box)
    used_volume = sum(product_volume(p) for p in products)
    return 0.0 if capacity == 0 else used_volume / capacity
