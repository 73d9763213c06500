from sqlmodel import SQLModel, Field
from sqlalchemy import DateTime
from datetime import datetime, timezone
import uuid


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


class ProductBase(SQLModel):
    description: str
    value: float


class Product(ProductBase, table=True):
    __tablename__ = "products"

    id: uuid.UUID = Field(
        default_factory=uuid.uuid4,
        primary_key=True,
        index=True,
        nullable=False
    )
    createdAt: datetime = Field(default_factory=utc_now, sa_type=DateTime(timezone=True), index=True)
    updatedAt: datetime = Field(default_factory=utc_now, sa_type=DateTime(timezone=True))
