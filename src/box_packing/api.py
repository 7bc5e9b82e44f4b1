"""FastAPI endpoint for the box packing service."""

from __future__ import annotations

import logging
from typing import Any

from fastapi import Body, Depends, FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware

from box_packing.config import get_cors_origins
from box_packing.io.mapping import process_request
from box_packing.io.schemas import ProcessOrdersRequestSchema, ProcessOrdersResponseSchema
from box_packing.packing.engine import PackingEngine

logger = logging.getLogger(__name__)

REQUEST_EXAMPLES: dict[str, Any] = {
    "example1": {
        "summary": "Example with PS5 and Volante",
        "value": {
            "pedidos": [
                {
                    "pedido_id": 1,
                    "produtos": [
                        {"produto_id": "PS5", "dimensoes": {"altura": 40, "largura": 10, "comprimento": 25}},
                        {"produto_id": "Volante", "dimensoes": {"altura": 40, "largura": 30, "comprimento": 30}},
                    ],
                }
            ]
        },
    },
    "example2": {
        "summary": "Example with product that does not fit",
        "value": {
            "pedidos": [
                {
                    "pedido_id": 1,
                    "produtos": [
                        {"produto_id": "Smartphone", "dimensoes": {"altura": 15, "largura": 7, "comprimento": 1}},
                        {"produto_id": "TV Grande", "dimensoes": {"altura": 100, "largura": 150, "comprimento": 20}},
                    ],
                }
            ]
        },
    },
}

# FastAPI app instance (exactly one)
app = FastAPI(
    title="Box Packing API",
    description="API para processamento de pedidos e empacotamento de produtos em caixas disponíveis",
    version="1.0",
    docs_url="/api",
    openapi_tags=[{"name": "orders", "description": "Endpoints para processamento de pedidos"}],
)

_cors_origins = get_cors_origins()
if _cors_origins:
    app.add_middleware(
        CORSMiddleware,
        allow_origins=list(_cors_origins),
        allow_methods=["GET", "POST", "OPTIONS"],
        allow_headers=["*"],
        max_age=3600,
    )

_engine = PackingEngine()


def get_engine() -> PackingEngine:
    return _engine


@app.post(
    "/orders/process",
    tags=["orders"],
    response_model=ProcessOrdersResponseSchema,
    summary="Process orders and pack products into boxes",
    description="Receives a list of orders with products and returns how to pack them into available boxes",
)
def process_orders(
    request: ProcessOrdersRequestSchema = Body(openapi_examples=REQUEST_EXAMPLES),
    engine: PackingEngine = Depends(get_engine),
) -> ProcessOrdersResponseSchema:
    """
    Pack every pedido independently.

    Validation errors (missing fields, non-positive dimensions, repeated
    produto_id) are answered with 422 before the engine runs.
    """
    try:
        response = process_request(request, engine)
    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"ERROR in /orders/process endpoint: {e}", exc_info=True)
        raise HTTPException(status_code=500, detail=str(e))

    # Log one concise line
    logger.info(
        f"orders={len(response.pedidos)}, "
        f"boxes={sum(len(p.caixas) for p in response.pedidos)}"
    )
    return response


@app.get("/health")
def health() -> dict[str, Any]:
    """Health check endpoint."""
    return {"ok": True}
