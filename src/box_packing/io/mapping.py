"""Translation between the Portuguese wire schemas and the engine models."""

from __future__ import annotations

from box_packing.io.schemas import (
    CaixaSchema,
    PedidoEmbalagemSchema,
    PedidoSchema,
    ProcessOrdersRequestSchema,
    ProcessOrdersResponseSchema,
)
from box_packing.models import Dimensions, Order, PackedOrder, Product
from box_packing.packing.engine import PackingEngine


def pedido_to_order(pedido: PedidoSchema) -> Order:
    """
    Map an incoming pedido to the engine's Order.

    pedido_id -> order_id, produto_id -> product_id,
    altura/largura/comprimento -> height/width/length.
    """
    return Order(
        order_id=pedido.pedido_id,
        products=[
            Product(
                product_id=produto.produto_id,
                dimensions=Dimensions(
                    height=produto.dimensoes.altura,
                    width=produto.dimensoes.largura,
                    length=produto.dimensoes.comprimento,
                ),
            )
            for produto in pedido.produtos
        ],
    )


def packed_order_to_pedido_embalagem(packed_order: PackedOrder) -> PedidoEmbalagemSchema:
    """Map a PackedOrder back to the outgoing schema (observacao only when set)."""
    return PedidoEmbalagemSchema(
        pedido_id=packed_order.order_id,
        caixas=[
            CaixaSchema(
                caixa_id=box.box_id,
                produtos=list(box.products),
                observacao=box.observation,
            )
            for box in packed_order.boxes
        ],
    )


def process_request(request: ProcessOrdersRequestSchema, engine: PackingEngine) -> ProcessOrdersResponseSchema:
    """Decode pedidos, pack them with the engine and encode the answer."""
    orders = [pedido_to_order(pedido) for pedido in request.pedidos]
    packed_orders = engine.process_orders(orders)
    return ProcessOrdersResponseSchema(
        pedidos=[packed_order_to_pedido_embalagem(p) for p in packed_orders]
    )
