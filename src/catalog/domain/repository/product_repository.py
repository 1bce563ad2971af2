"""Abstract repository for the Product entity.

Defined in the domain layer so the domain never depends on
infrastructure. The in-memory implementation lives in the
infrastructure layer.

Repositories do not validate: drafts reaching them have already
passed through ProductDraft's checks.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Callable

from catalog.domain.model.product import Product, ProductDraft

ProductPredicate = Callable[[Product], bool]


class ProductRepository(ABC):

    @abstractmethod
    def create(self, draft: ProductDraft) -> Product:
        """Store a draft under a fresh id and return the stored product."""

    @abstractmethod
    def get(self, product_id: int) -> Product:
        """Return the product with this id.

        Raises ProductNotFoundError if it is not stored.
        """

    @abstractmethod
    def list_all(self) -> list[Product]:
        """Return a snapshot of every stored product, in no particular order."""

    @abstractmethod
    def replace(self, product_id: int, draft: ProductDraft) -> Product:
        """Overwrite every field except the id.

        Raises ProductNotFoundError if the id is not stored; never creates.
        """

    @abstractmethod
    def delete(self, product_id: int) -> None:
        """Remove a product. Raises ProductNotFoundError if it is not stored."""

    @abstractmethod
    def exists(self, product_id: int) -> bool:
        """Return True if a product with this id is currently stored."""

    @abstractmethod
    def find_by(self, predicate: ProductPredicate) -> list[Product]:
        """Return every stored product for which the predicate holds."""

    @abstractmethod
    def count(self) -> int:
        """Return the number of stored products."""
