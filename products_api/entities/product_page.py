"""
ProductPage entity: one page of the product listing plus what the caller
needs to build pagination links.
"""

from dataclasses import dataclass, field
from typing import List

from products_api.models.product import Product


@dataclass
class ProductPage:
    products: List[Product] = field(default_factory=list)
    page: int = 1
    has_next: bool = False

    @property
    def has_previous(self) -> bool:
        # By page number only; page 2 of an empty listing still reports a previous page
        return self.page > 1

    @property
    def next_page(self) -> int:
        return self.page + 1
