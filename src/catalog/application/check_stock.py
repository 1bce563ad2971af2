"""Application service: Check Stock use case (query)."""

from __future__ import annotations

from catalog.domain.repository.product_repository import ProductRepository


class CheckStockHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(self, product_id: int) -> bool:
        """Return True if at least one unit of the product is on hand."""
        return self._product_repo.get(product_id).in_stock
