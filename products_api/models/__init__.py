# Import all models so they register on SQLModel.metadata
from .product import Product, ProductBase

__all__ = [
    "Product", "ProductBase",
]
