from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


UNFIT_OBSERVATION = "Produto não cabe em nenhuma caixa disponível."


class Dimensions(BaseModel):
    """Axis-aligned dimensions shared by products and boxes (any unit, same for all)."""

    model_config = ConfigDict(frozen=True)

    height: float = Field(gt=0, allow_inf_nan=False, description="Height")
    width: float = Field(gt=0, allow_inf_nan=False, description="Width")
    length: float = Field(gt=0, allow_inf_nan=False, description="Length")

    @property
    def volume(self) -> float:
        return float(self.height) * float(self.width) * float(self.length)

    def as_tuple(self) -> tuple[float, float, float]:
        return float(self.height), float(self.width), float(self.length)


class Product(BaseModel):
    """Product to be packed, identified by an id unique within its order."""

    model_config = ConfigDict(frozen=True)

    product_id: str = Field(description="Unique identifier of the product within the order")
    dimensions: Dimensions


class Box(BaseModel):
    """Catalog box with identifier and inner dimensions."""

    model_config = ConfigDict(frozen=True)

    id: str = Field(description="Unique identifier for the box")
    dimensions: Dimensions


class Order(BaseModel):
    order_id: int = Field(description="Identifier of the order")
    products: list[Product] = Field(default_factory=list)


class PackedBox(BaseModel):
    """
    Products assigned to one box.

    box_id is None only for the unfit entry, which carries UNFIT_OBSERVATION.
    """

    box_id: Optional[str] = Field(default=None, description="Identifier of the chosen box")
    products: list[str] = Field(default_factory=list, description="Product ids packed in the box")
    observation: Optional[str] = Field(default=None, description="Set when products fit in no box")


class PackedOrder(BaseModel):
    """Standard result returned by the packing engine for one order."""

    order_id: int
    boxes: list[PackedBox] = Field(default_factory=list)
