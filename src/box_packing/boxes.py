# src/box_packing/boxes.py
from __future__ import annotations

from box_packing.models import Box, Dimensions

# Inner dims (height, width, length). Order matters: earlier boxes win ties.
BOX_CATALOG: tuple[Box, ...] = (
    Box(id="Caixa 1", dimensions=Dimensions(height=30, width=40, length=80)),
    Box(id="Caixa 2", dimensions=Dimensions(height=50, width=50, length=40)),
    Box(id="Caixa 3", dimensions=Dimensions(height=50, width=80, length=60)),
)
