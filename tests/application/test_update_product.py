"""Integration tests for the UpdateProduct use case."""

from decimal import Decimal

import pytest

from catalog.application.add_product import AddProductHandler
from catalog.application.update_product import UpdateProductHandler
from catalog.domain.exceptions import EntityNotFoundError, ValidationError
from catalog.infrastructure.persistence.in_memory_product_repository import (
    InMemoryProductRepository,
)


def _setup() -> tuple[UpdateProductHandler, InMemoryProductRepository]:
    repo = InMemoryProductRepository()
    AddProductHandler(repo).handle("Laptop", "999.99", "Fast laptop", 10)
    return UpdateProductHandler(repo), repo


class TestUpdateProduct:

    def test_replaces_every_field(self):
        handler, repo = _setup()
        dto = handler.handle(1, "Gaming Laptop", "1299.99", quantity=5)
        assert dto.id == 1
        assert dto.name == "Gaming Laptop"
        assert dto.price == Decimal("1299.99")
        assert dto.description is None
        assert dto.quantity == 5
        assert repo.get(1).name == "Gaming Laptop"

    def test_missing_quantity_becomes_zero(self):
        handler, _ = _setup()
        assert handler.handle(1, "Laptop", "999.99").quantity == 0

    def test_unknown_id_rejected(self):
        handler, repo = _setup()
        with pytest.raises(EntityNotFoundError, match="Product with id 9 not found"):
            handler.handle(9, "Tablet", "10")
        assert repo.count() == 1
        assert not repo.exists(9)

    def test_invalid_draft_leaves_product_unchanged(self):
        handler, repo = _setup()
        before = repo.get(1)
        with pytest.raises(ValidationError, match="cannot be negative"):
            handler.handle(1, "Laptop", "-5")
        assert repo.get(1) == before

    def test_invalid_draft_for_unknown_id_is_a_validation_error(self):
        handler, _ = _setup()
        with pytest.raises(ValidationError):
            handler.handle(9, "", "1")
