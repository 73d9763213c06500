from pydantic import BaseModel, Field
from typing import Optional, List
from datetime import datetime
from uuid import UUID


class ProductCreateRequest(BaseModel):
    description: str = Field(..., min_length=1)
    value: float = Field(..., allow_inf_nan=False)


class ProductUpdateRequest(ProductCreateRequest):
    """Full replace: both fields are required, same rules as create."""


class ProductResponse(BaseModel):
    id: UUID
    description: str
    value: float
    createdAt: datetime
    updatedAt: Optional[datetime]

    class Config:
        from_attributes = True


class ProductListResponse(BaseModel):
    products: List[ProductResponse]
    next: Optional[str]
    previous: bool
