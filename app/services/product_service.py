# File: app/services/product_service.py

from typing import Optional, Sequence

from app.repositories.base import ProductRepository
from app.schemas.product import ProductCreate, ProductRead, ProductUpdate


class ProductService:
    def __init__(self, product_repository: ProductRepository):
        self.product_repository = product_repository

    def get_all_products(self) -> Sequence[ProductRead]:
        return self.product_repository.find_all()

    def get_product_by_id(self, product_id: int) -> Optional[ProductRead]:
        return self.product_repository.find_by_id(product_id)

    def create_product(self, product: ProductCreate) -> ProductRead:
        return self.product_repository.create(product.model_dump())

    def update_product(self, product: ProductUpdate, product_id: int) -> Optional[ProductRead]:
        values = product.model_dump(exclude_unset=True)
        # Only the description may be cleared.
        values = {k: v for k, v in values.items() if v is not None or k == "description"}
        return self.product_repository.update(values, product_id)

    def delete_product(self, product_id: int) -> bool:
        return self.product_repository.delete(product_id)
