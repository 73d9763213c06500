from typing import Generic, TypeVar, Type, Optional
from sqlmodel import SQLModel
from sqlalchemy.ext.asyncio import AsyncSession
from uuid import UUID
import structlog

logger = structlog.get_logger()

ModelType = TypeVar("ModelType", bound=SQLModel)


class BaseDAO(Generic[ModelType]):
    """Single-statement writes; each one commits on its own and re-raises after rollback."""

    def __init__(self, model: Type[ModelType]):
        self.model = model

    @property
    def model_name(self) -> str:
        return self.model.__name__

    async def _persist(self, db: AsyncSession, db_obj: ModelType) -> ModelType:
        db.add(db_obj)
        await db.commit()
        await db.refresh(db_obj)
        return db_obj

    async def create(self, db: AsyncSession, *, obj_in: dict) -> ModelType:
        try:
            db_obj = await self._persist(db, self.model(**obj_in))
        except Exception as e:
            await db.rollback()
            logger.error(f"Error creating {self.model_name}", error=str(e))
            raise
        logger.info(f"Created {self.model_name}", id=str(db_obj.id))
        return db_obj

    async def get_by_id(self, db: AsyncSession, id: UUID) -> Optional[ModelType]:
        try:
            return await db.get(self.model, id)
        except Exception as e:
            logger.error(f"Error loading {self.model_name}", id=str(id), error=str(e))
            raise

    async def update(
        self, db: AsyncSession, *, db_obj: ModelType, obj_in: dict
    ) -> ModelType:
        """Overwrite every field in `obj_in`; None is written as-is."""
        try:
            for field, value in obj_in.items():
                setattr(db_obj, field, value)
            db_obj = await self._persist(db, db_obj)
        except Exception as e:
            await db.rollback()
            logger.error(f"Error updating {self.model_name}", id=str(db_obj.id), error=str(e))
            raise
        logger.info(f"Updated {self.model_name}", id=str(db_obj.id))
        return db_obj

    async def delete(self, db: AsyncSession, *, db_obj: ModelType) -> ModelType:
        try:
            await db.delete(db_obj)
            await db.commit()
            logger.info(f"Deleted {self.model_name}", id=str(db_obj.id))
            return db_obj
        except Exception as e:
            await db.rollback()
            logger.error(f"Error deleting {self.model_name}", id=str(db_obj.id), error=str(e))
            raise
