# src/box_packing/packing/fit.py

from __future__ import annotations

from box_packing.models import Box, Dimensions, Product


def orientations(dimensions: Dimensions) -> list[tuple[float, float, float]]:
    """
    Return the 6 axis-aligned orientations of (height, width, length).
    order:
      0:(H,W,L) 1:(H,L,W) 2:(W,H,L) 3:(W,L,H) 4:(L,H,W) 5:(L,W,H)
    """
    H, W, L = dimensions.as_tuple()
    return [
        (H, W, L),
        (H, L, W),
        (W, H, L),
        (W, L, H),
        (L, H, W),
        (L, W, H),
    ]


def fits(product: Product, box: Box) -> bool:
    """
    True if some rotation of the product is <= the box on every axis.

    Touching walls (equal dimension) counts as fitting.
    """
    box_h, box_w, box_l = box.dimensions.as_tuple()
    return any(
        h <= box_h and w <= box_w and l <= box_l
        for h, w, l in orientations(product.dimensions)
    )
