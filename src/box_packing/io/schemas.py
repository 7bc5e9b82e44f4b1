"""Request/response schemas for the order processing endpoint (Portuguese field names)."""

from typing import List, Optional

from pydantic import BaseModel, Field, field_validator, model_serializer


class DimensoesSchema(BaseModel):
    """Schema for product dimensions."""
    altura: float = Field(gt=0, allow_inf_nan=False, description="Altura do produto")
    largura: float = Field(gt=0, allow_inf_nan=False, description="Largura do produto")
    comprimento: float = Field(gt=0, allow_inf_nan=False, description="Comprimento do produto")


class ProdutoSchema(BaseModel):
    """Schema for a product."""
    produto_id: str = Field(min_length=1, description="Identificador único do produto", examples=["PS5"])
    dimensoes: DimensoesSchema = Field(description="Dimensões do produto")


class PedidoSchema(BaseModel):
    """Schema for an order."""
    pedido_id: int = Field(description="Identificador único do pedido", examples=[1])
    produtos: List[ProdutoSchema] = Field(description="Lista de produtos do pedido")

    @field_validator("produtos")
    @classmethod
    def unique_produto_ids(cls, produtos: List[ProdutoSchema]) -> List[ProdutoSchema]:
        seen = set()
        duplicates = []
        for produto in produtos:
            if produto.produto_id in seen:
                duplicates.append(produto.produto_id)
            seen.add(produto.produto_id)
        if duplicates:
            raise ValueError(f"produto_id repetido no pedido: {sorted(set(duplicates))}")
        return produtos


class CaixaSchema(BaseModel):
    """Schema for a packed box."""
    caixa_id: Optional[str] = Field(description="Identificador da caixa", examples=["Caixa 2"])
    produtos: List[str] = Field(description="Lista de produto_ids na caixa", examples=[["PS5", "Volante"]])
    observacao: Optional[str] = Field(
        None,
        description="Observação sobre produtos que não cabem",
        examples=["Produto não cabe em nenhuma caixa disponível."],
    )

    @model_serializer(mode="wrap")
    def drop_empty_observacao(self, handler):
        data = handler(self)
        if data.get("observacao") is None:
            data.pop("observacao", None)
        return data


class PedidoEmbalagemSchema(BaseModel):
    """Schema for a packed order."""
    pedido_id: int = Field(description="Identificador único do pedido", examples=[1])
    caixas: List[CaixaSchema] = Field(description="Lista de caixas usadas no pedido")


class ProcessOrdersRequestSchema(BaseModel):
    """Schema for a processing request."""
    pedidos: List[PedidoSchema] = Field(description="Lista de pedidos para processar")


class ProcessOrdersResponseSchema(BaseModel):
    """Schema for a processing result."""
    pedidos: List[PedidoEmbalagemSchema] = Field(description="Lista de pedidos processados com embalagens")
