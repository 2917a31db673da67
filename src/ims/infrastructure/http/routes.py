"""Product routes.

Handlers are plain functions closed over one ``InventoryService`` and
registered explicitly with ``add_api_route``. They are synchronous, so
FastAPI runs each request on its own worker thread.

``/search`` and ``/summary`` are registered before ``/{product_id}`` so
they are matched first.
"""

from fastapi import APIRouter, HTTPException, Query, Response, status

from ims.application.inventory_service import InventoryService
from ims.infrastructure.config import Settings
from ims.infrastructure.http.schemas import (
    ProductCreateRequest,
    ProductPageResponse,
    ProductResponse,
    ProductSummaryResponse,
    to_page_response,
    to_product_response,
    to_summary_response,
)

PREFIX = "/api/v1/products"


def build_product_router(service: InventoryService, settings: Settings) -> APIRouter:
    router = APIRouter(prefix=PREFIX, tags=["products"])

    def create_product(body: ProductCreateRequest, response: Response) -> ProductResponse:
        """Create a new product."""
        product = service.create_product(
            name=body.name, price=body.price, quantity=body.quantity,
        )
        response.headers["Location"] = f"{PREFIX}/{product.id}"
        return to_product_response(product)

    def list_products(
        page: int = Query(0, ge=0),
        size: int | None = Query(None, ge=1),
    ) -> ProductPageResponse:
        """Get all products (paginated)."""
        size = min(size or settings.default_page_size, settings.max_page_size)
        return to_page_response(service.list_products(page, size))

    def search_products(query: str = Query(...)) -> list[ProductResponse]:
        """Search products by name, ignoring case."""
        if not query.strip():
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST,
                detail="Query must not be blank",
            )
        return [to_product_response(p) for p in service.search_products(query)]

    def get_summary() -> ProductSummaryResponse:
        """Get inventory statistics."""
        return to_summary_response(service.get_summary())

    def get_product(product_id: int) -> ProductResponse:
        return to_product_response(service.get_product(product_id))

    def update_quantity(product_id: int, quantity: int = Query(...)) -> ProductResponse:
        """Update product quantity."""
        return to_product_response(service.update_quantity(product_id, quantity))

    def delete_product(product_id: int) -> Response:
        """Delete a product."""
        service.delete_product(product_id)
        return Response(status_code=status.HTTP_204_NO_CONTENT)

    router.add_api_route(
        "", create_product, methods=["POST"],
        response_model=ProductResponse, status_code=status.HTTP_201_CREATED,
    )
    router.add_api_route(
        "", list_products, methods=["GET"], response_model=ProductPageResponse,
    )
    router.add_api_route(
        "/search", search_products, methods=["GET"],
        response_model=list[ProductResponse],
    )
    router.add_api_route(
        "/summary", get_summary, methods=["GET"],
        response_model=ProductSummaryResponse,
    )
    router.add_api_route(
        "/{product_id}", get_product, methods=["GET"], response_model=ProductResponse,
    )
    router.add_api_route(
        "/{product_id}/quantity", update_quantity, methods=["PUT"],
        response_model=ProductResponse,
    )
    router.add_api_route(
        "/{product_id}", delete_product, methods=["DELETE"],
        status_code=status.HTTP_204_NO_CONTENT, response_class=Response,
    )
    return router
