"""
Entities package for the products API.
Contains plain domain values passed between services and controllers.
"""

from .product_page import ProductPage

__all__ = ["ProductPage"]
