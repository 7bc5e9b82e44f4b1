"""Tests for the per-box volume selection."""

from __future__ import annotations

from box_packing.boxes import BOX_CATALOG
from box_packing.models import Box, Dimensions, Product
from box_packing.packing.selector import best_subset_for_box


def product(pid: str, h: float, w: float, l: float) -> Product:
    return Product(product_id=pid, dimensions=Dimensions(height=h, width=w, length=l))


CUBE_10 = Box(id="cube", dimensions=Dimensions(height=10, width=10, length=10))


def ids(products: list[Product]) -> list[str]:
    return [p.product_id for p in products]


def test_products_that_do_not_fit_are_filtered() -> None:
    products = [product("small", 10, 10, 10), product("huge", 100, 100, 100)]
    assert ids(best_subset_for_box(products, BOX_CATALOG[0])) == ["small"]


def test_sorted_by_descending_volume() -> None:
    products = [
        product("a", 1, 1, 1),
        product("b", 5, 5, 5),
        product("c", 2, 2, 2),
    ]
    assert ids(best_subset_for_box(products, CUBE_10)) == ["b", "c", "a"]


def test_equal_volumes_keep_input_order() -> None:
    products = [
        product("first", 2, 5, 10),
        product("second", 10, 10, 1),
        product("third", 5, 5, 4),
    ]
    assert ids(best_subset_for_box(products, CUBE_10)) == ["first", "second", "third"]


def test_single_forward_pass_skips_without_retry() -> None:
    """
    600 is taken, 500 no longer fits the remaining 400 and is skipped,
    400 fills the box exactly.
    """
    products = [
        product("mid", 10, 10, 5),
        product("big", 10, 10, 6),
        product("small", 10, 10, 4),
    ]
    assert ids(best_subset_for_box(products, CUBE_10)) == ["big", "small"]


def test_volume_equal_to_remaining_capacity_is_taken() -> None:
    products = [product("half-a", 10, 10, 5), product("half-b", 5, 10, 10)]
    assert ids(best_subset_for_box(products, CUBE_10)) == ["half-a", "half-b"]


def test_empty_when_nothing_fits() -> None:
    assert best_subset_for_box([product("huge", 11, 11, 11)], CUBE_10) == []
    assert best_subset_for_box([], CUBE_10) == []


def test_volume_sum_is_an_intentional_approximation() -> None:
    """
    Only volumes are summed, shapes are not placed.

    In Caixa 1 (30x40x80) the 30x40x50 product can only stand one way and
    leaves a 30x40x30 slot, where a 25x35x35 product cannot go. Their
    volumes (60000 + 30625) are under 96000, so both are accepted. This is
    the expected behaviour and consumers rely on it.
    """
    products = [product("A", 30, 40, 50), product("B", 25, 35, 35)]
    assert ids(best_subset_for_box(products, BOX_CATALOG[0])) == ["A", "B"]
