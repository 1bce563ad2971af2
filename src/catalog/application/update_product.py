"""Application service: Update Product use case."""

from __future__ import annotations

from catalog.application.dto import ProductDTO
from catalog.domain.model.product import ProductDraft
from catalog.domain.repository.product_repository import ProductRepository


class UpdateProductHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(
        self,
        product_id: int,
        name: str,
        price: str | float | int,
        description: str | None = None,
        quantity: int | None = None,
    ) -> ProductDTO:
        """Replace every field of an existing product except its id.

        A missing quantity is stored as 0, the same as on creation.
        """
        draft = ProductDraft.of(name, price, description, quantity)
        product = self._product_repo.replace(product_id, draft)
        return ProductDTO.from_entity(product)
