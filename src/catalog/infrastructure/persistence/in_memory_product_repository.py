"""In-memory, thread-safe implementation of ProductRepository."""

from __future__ import annotations

import threading

import structlog

from catalog.domain.exceptions import ProductNotFoundError
from catalog.domain.model.product import Product, ProductDraft
from catalog.domain.repository.product_repository import (
    ProductPredicate,
    ProductRepository,
)

log = structlog.get_logger(__name__)


class InMemoryProductRepository(ProductRepository):
    """Keeps products in a dict guarded by a single lock.

    The lock covers both the dict and the id counter, so every
    operation sees either all or none of another operation's effect.
    Products are frozen, which lets snapshots share instances with the
    store safely.
    """

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._store: dict[int, Product] = {}
        self._last_id = 0

    # --- ProductRepository interface ------------------------------------------

    def create(self, draft: ProductDraft) -> Product:
        with self._lock:
            self._last_id += 1
            product = Product.from_draft(self._last_id, draft)
            self._store[product.id] = product
        log.debug("product_created", product_id=product.id, name=product.name)
        return product

    def get(self, product_id: int) -> Product:
        with self._lock:
            product = self._store.get(product_id)
        if product is None:
            raise ProductNotFoundError(product_id)
        return product

    def list_all(self) -> list[Product]:
        with self._lock:
            return list(self._store.values())

    def replace(self, product_id: int, draft: ProductDraft) -> Product:
        with self._lock:
            if product_id not in self._store:
                raise ProductNotFoundError(product_id)
            product = Product.from_draft(product_id, draft)
            self._store[product_id] = product
        log.debug("product_replaced", product_id=product_id)
        return product

    def delete(self, product_id: int) -> None:
        with self._lock:
            if self._store.pop(product_id, None) is None:
                raise ProductNotFoundError(product_id)
        log.debug("product_deleted", product_id=product_id)

    def exists(self, product_id: int) -> bool:
        with self._lock:
            return product_id in self._store

    def find_by(self, predicate: ProductPredicate) -> list[Product]:
        with self._lock:
            return [p for p in self._store.values() if predicate(p)]

    def count(self) -> int:
        with self._lock:
            return len(self._store)
