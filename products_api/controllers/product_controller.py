from typing import Any, Callable, Dict, List, Optional, Tuple
from urllib.parse import urlencode
from fastapi import APIRouter, Depends, Query, Response, status
from sqlalchemy.ext.asyncio import AsyncSession
from products_api.core.config import settings
from products_api.core.database import get_async_session
from products_api.core.identifiers import parse_product_id
from products_api.entities.product_page import ProductPage
from products_api.schemas.product_schemas import (
    ProductCreateRequest,
    ProductListResponse,
    ProductResponse,
    ProductUpdateRequest,
)
from products_api.services.product_service import MAX_PAGE, ProductService, product_service
import structlog

logger = structlog.get_logger()

# (method, path, endpoint, add_api_route options)
Route = Tuple[str, str, Callable[..., Any], Dict[str, Any]]


class ProductController:
    """
    HTTP handlers for the products resource.

    `base_url` is the public URL the products router is mounted under and is
    only used to build the `next` pagination link.
    """

    def __init__(self, service: ProductService, base_url: str):
        self.service = service
        self.base_url = base_url.rstrip("/")

    async def create(
        self,
        payload: ProductCreateRequest,
        db: AsyncSession = Depends(get_async_session),
    ):
        """Create a new product"""
        return await self.service.create_product(db, payload)

    async def index(
        self,
        page: int = Query(1, ge=1, le=MAX_PAGE),
        q: Optional[str] = None,
        db: AsyncSession = Depends(get_async_session),
    ) -> ProductListResponse:
        """List products newest first, 20 per page, optionally filtered by description prefix"""
        result = await self.service.list_products(db, page=page, q=q)
        return ProductListResponse(
            products=[ProductResponse.model_validate(p) for p in result.products],
            next=self.next_link(result, q) if result.has_next else None,
            previous=result.has_previous,
        )

    async def update(
        self,
        product_id: str,
        payload: ProductUpdateRequest,
        db: AsyncSession = Depends(get_async_session),
    ):
        """Replace a product's description and value"""
        parsed_id = parse_product_id(product_id)
        return await self.service.update_product(db, parsed_id, payload)

    async def delete(
        self,
        product_id: str,
        db: AsyncSession = Depends(get_async_session),
    ) -> Response:
        """Delete a product"""
        parsed_id = parse_product_id(product_id)
        await self.service.delete_product(db, parsed_id)
        return Response(status_code=status.HTTP_204_NO_CONTENT)

    def next_link(self, result: ProductPage, q: Optional[str] = None) -> str:
        params = {"page": result.next_page}
        if q:
            params["q"] = q
        return f"{self.base_url}/products?{urlencode(params)}"

    def routes(self) -> List[Route]:
        return [
            ("POST", "", self.create, {"response_model": ProductResponse}),
            ("GET", "", self.index, {"response_model": ProductListResponse}),
            ("PUT", "/{product_id}", self.update, {"response_model": ProductResponse}),
            (
                "DELETE",
                "/{product_id}",
                self.delete,
                {"status_code": status.HTTP_204_NO_CONTENT, "response_class": Response},
            ),
        ]


def build_router(controller: ProductController) -> APIRouter:
    router = APIRouter(prefix="/products", tags=["Products"])
    for method, path, endpoint, options in controller.routes():
        router.add_api_route(path, endpoint, methods=[method], **options)
    return router


product_controller = ProductController(product_service, settings.products_base_url)

router = build_router(product_controller)
