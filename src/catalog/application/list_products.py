"""Application service: List Products use case (query)."""

from __future__ import annotations

from operator import attrgetter

from catalog.application.dto import ProductDTO
from catalog.domain.exceptions import ValidationError
from catalog.domain.repository.product_repository import ProductRepository

SORT_KEYS = ("id", "name", "price", "quantity")


class ListProductsHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(self, sort_by: str = "id", descending: bool = False) -> list[ProductDTO]:
        """Return every product, ordered by ``sort_by``.

        The repository makes no ordering promise, so ordering happens here.
        Ties are broken by id.
        """
        if sort_by not in SORT_KEYS:
            raise ValidationError(
                f"Cannot sort by '{sort_by}'. Expected one of: {', '.join(SORT_KEYS)}"
            )
        dtos = sorted(
            (ProductDTO.from_entity(p) for p in self._product_repo.list_all()),
            key=attrgetter("id"),
        )
        if sort_by == "name":
            dtos.sort(key=lambda dto: dto.name.casefold(), reverse=descending)
        else:
            dtos.sort(key=attrgetter(sort_by), reverse=descending)
        return dtos
