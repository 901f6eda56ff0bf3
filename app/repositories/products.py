from typing import Any

from app.models import Product, ProductCreate, ProductPatch, product_from_row
from app.repositories.base import Repository


class ProductRepository(Repository[Product, ProductCreate, ProductPatch]):
    table = "products"
    entity = "Product"
    columns = ("name", "description", "price")

    def from_row(self, row: dict[str, Any]) -> Product:
        return product_from_row(row)
