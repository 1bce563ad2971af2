"""Application service: Search Products use case (query)."""

from __future__ import annotations

from catalog.application.dto import ProductDTO, SearchCriteria
from catalog.domain.repository.product_repository import ProductRepository


class SearchProductsHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(self, criteria: SearchCriteria) -> list[ProductDTO]:
        matches = self._product_repo.find_by(criteria.to_predicate())
        return [ProductDTO.from_entity(p) for p in sorted(matches, key=lambda p: p.id)]
