from typing import Optional
from sqlalchemy.ext.asyncio import AsyncSession
from products_api.core.exceptions import ProductNotFoundError
from products_api.dao.product_dao import product_dao
from products_api.entities.product_page import ProductPage
from products_api.models.product import Product, utc_now
from products_api.schemas.product_schemas import ProductCreateRequest, ProductUpdateRequest
from uuid import UUID
import structlog

logger = structlog.get_logger()

PAGE_SIZE = 20
# Largest page whose offset still fits a signed 64-bit integer column
MAX_PAGE = (2**63 - 1) // PAGE_SIZE


class ProductService:
    """
    Product use cases. Storage errors are logged by the DAO and propagate
    unchanged; only the not-found case is turned into an HTTP error here.
    """

    def __init__(self, page_size: int = PAGE_SIZE):
        self.product_dao = product_dao
        self.page_size = page_size

    async def create_product(self, db: AsyncSession, product_create: ProductCreateRequest) -> Product:
        product = await self.product_dao.create(db, obj_in=product_create.model_dump())
        logger.info("Product created successfully", product_id=str(product.id))
        return product

    async def get_product(self, db: AsyncSession, product_id: UUID) -> Product:
        product = await self.product_dao.get_by_id(db, product_id)
        if not product:
            logger.warning("Product not found", product_id=str(product_id))
            raise ProductNotFoundError(product_id)
        return product

    async def list_products(self, db: AsyncSession, page: int = 1, q: Optional[str] = None) -> ProductPage:
        products = await self.product_dao.get_page(
            db,
            q=q,
            skip=(page - 1) * self.page_size,
            limit=self.page_size,
        )

        # The oldest row overall marks the end of the listing; it ignores `q`
        has_next = False
        if products:
            oldest = await self.product_dao.get_oldest(db)
            has_next = oldest is not None and products[-1].id != oldest.id

        logger.info("Retrieved products", page=page, q=q, count=len(products), has_next=has_next)
        return ProductPage(products=list(products), page=page, has_next=has_next)

    async def update_product(self, db: AsyncSession, product_id: UUID, product_update: ProductUpdateRequest) -> Product:
        product = await self.get_product(db, product_id)

        update_data = product_update.model_dump()
        update_data["updatedAt"] = utc_now()
        product = await self.product_dao.update(db, db_obj=product, obj_in=update_data)
        logger.info("Product updated successfully", product_id=str(product_id))
        return product

    async def delete_product(self, db: AsyncSession, product_id: UUID) -> None:
        product = await self.get_product(db, product_id)
        await self.product_dao.delete(db, db_obj=product)
        logger.info("Product deleted successfully", product_id=str(product_id))


product_service = ProductService()
