"""Application service: Add Product use case."""

from __future__ import annotations

from catalog.application.dto import ProductDTO
from catalog.domain.model.product import ProductDraft
from catalog.domain.repository.product_repository import ProductRepository


class AddProductHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(
        self,
        name: str,
        price: str | float | int,
        description: str | None = None,
        quantity: int | None = None,
    ) -> ProductDTO:
        """Add a new product to the catalog.

        The draft is validated before the repository is touched, so a
        rejected request leaves the catalog unchanged.
        """
        draft = ProductDraft.of(name, price, description, quantity)
        product = self._product_repo.create(draft)
        return ProductDTO.from_entity(product)
