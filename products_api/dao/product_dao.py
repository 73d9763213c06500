from typing import List, Optional
from sqlmodel import select
from sqlalchemy.ext.asyncio import AsyncSession
from products_api.dao.base_dao import BaseDAO
from products_api.models.product import Product
import structlog

logger = structlog.get_logger()

LIKE_ESCAPE = "\\"


def prefix_pattern(text: str) -> str:
    """LIKE pattern matching values that start with `text`, wildcards in `text` taken literally."""
    escaped = (
        text.replace(LIKE_ESCAPE, LIKE_ESCAPE * 2)
        .replace("%", f"{LIKE_ESCAPE}%")
        .replace("_", f"{LIKE_ESCAPE}_")
    )
    return f"{escaped}%"


class ProductDAO(BaseDAO[Product]):
    def __init__(self):
        super().__init__(Product)

    async def get_page(
        self, db: AsyncSession, *, q: Optional[str] = None, skip: int = 0, limit: int = 20
    ) -> List[Product]:
        """Newest first, optionally narrowed to descriptions starting with `q` (any case)."""
        try:
            query = select(Product)
            if q:
                query = query.where(Product.description.ilike(prefix_pattern(q), escape=LIKE_ESCAPE))
            result = await db.execute(
                query
                .order_by(Product.createdAt.desc())
                .offset(skip)
                .limit(limit)
            )
            return result.scalars().all()
        except Exception as e:
            logger.error("Error getting products page", q=q, skip=skip, limit=limit, error=str(e))
            raise

    async def get_oldest(self, db: AsyncSession) -> Optional[Product]:
        try:
            result = await db.execute(
                select(Product)
                .order_by(Product.createdAt.asc())
                .limit(1)
            )
            return result.scalars().first()
        except Exception as e:
            logger.error("Error getting oldest product", error=str(e))
            raise


product_dao = ProductDAO()
