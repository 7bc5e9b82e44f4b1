# src/box_packing/packing/engine.py

from __future__ import annotations

import logging
from typing import Sequence

from box_packing.boxes import BOX_CATALOG
from box_packing.metrics import compute_fill_rate
from box_packing.models import UNFIT_OBSERVATION, Box, Order, PackedBox, PackedOrder, Product
from box_packing.packing.selector import best_subset_for_box

logger = logging.getLogger(__name__)


def find_best_box(products: Sequence[Product], catalog: Sequence[Box]) -> tuple[Box, list[Product]]:
    """
    Pick the box taking the most products.

    Comparison is strictly greater-than, so the first box in catalog order
    wins ties. The returned subset is empty when no box takes any product.
    """
    best_box = catalog[0]
    best_products: list[Product] = []

    for box in catalog:
        subset = best_subset_for_box(products, box)
        if len(subset) > len(best_products):
            best_box, best_products = box, subset

    return best_box, best_products


def pack_order(order: Order, catalog: Sequence[Box] = BOX_CATALOG) -> PackedOrder:
    """
    Greedy best-fit-by-count packer for a single order.
    - Repeatedly fills the box that takes the most remaining products
    - Products that fit no box go to one final entry with box_id=None
    - Deterministic (catalog order and stable sorts)
    """
    packed_boxes: list[PackedBox] = []
    remaining = list(order.products)

    while remaining:
        box, subset = find_best_box(remaining, catalog)

        if not subset:
            packed_boxes.append(
                PackedBox(
                    box_id=None,
                    products=[p.product_id for p in remaining],
                    observation=UNFIT_OBSERVATION,
                )
            )
            break

        packed_boxes.append(
            PackedBox(box_id=box.id, products=[p.product_id for p in subset])
        )
        logger.debug(
            "order=%s box=%s products=%d fill_rate=%.3f",
            order.order_id, box.id, len(subset), compute_fill_rate(box, subset),
        )

        packed_ids = {p.product_id for p in subset}
        remaining = [p for p in remaining if p.product_id not in packed_ids]

    unfit = sum(len(b.products) for b in packed_boxes if b.box_id is None)
    logger.info(
        f"order_id={order.order_id}, products={len(order.products)}, "
        f"boxes={len(packed_boxes)}, unfit_products={unfit}"
    )

    return PackedOrder(order_id=order.order_id, boxes=packed_boxes)


def process_orders(orders: Sequence[Order], catalog: Sequence[Box] = BOX_CATALOG) -> list[PackedOrder]:
    """Pack each order independently, preserving input order."""
    return [pack_order(order, catalog) for order in orders]


class PackingEngine:
    """Packing engine bound to an immutable box catalog."""

    def __init__(self, catalog: Sequence[Box] = BOX_CATALOG):
        if not catalog:
            raise ValueError("Box catalog must contain at least one box")
        self.catalog: tuple[Box, ...] = tuple(catalog)

    def pack_order(self, order: Order) -> PackedOrder:
        return pack_order(order, self.catalog)

    def process_orders(self, orders: Sequence[Order]) -> list[PackedOrder]:
        return process_orders(orders, self.catalog)
