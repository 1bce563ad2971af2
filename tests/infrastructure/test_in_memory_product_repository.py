"""Tests for the in-memory product store."""

from concurrent.futures import ThreadPoolExecutor

import pytest

from catalog.domain import predicates
from catalog.domain.exceptions import EntityNotFoundError, ProductNotFoundError
from catalog.domain.model.product import ProductDraft
from catalog.domain.model.value_objects import Money
from catalog.infrastructure.persistence.in_memory_product_repository import (
    InMemoryProductRepository,
)


def _draft(name: str = "Widget", price: str = "15.00", quantity: int = 0) -> ProductDraft:
    return ProductDraft.of(name, price, quantity=quantity)


class TestCreate:

    def test_first_id_is_one(self):
        repo = InMemoryProductRepository()
        assert repo.create(_draft()).id == 1

    def test_get_returns_equal_product(self):
        repo = InMemoryProductRepository()
        created = repo.create(_draft("Laptop", "999.99", 10))
        assert repo.get(created.id) == created

    def test_ids_strictly_increase(self):
        repo = InMemoryProductRepository()
        ids = [repo.create(_draft()).id for _ in range(5)]
        assert ids == [1, 2, 3, 4, 5]

    def test_ids_not_reused_after_delete(self):
        repo = InMemoryProductRepository()
        first = repo.create(_draft())
        second = repo.create(_draft())
        repo.delete(second.id)
        repo.delete(first.id)
        assert repo.create(_draft()).id == 3


class TestGet:

    def test_missing_id_raises_not_found(self):
        repo = InMemoryProductRepository()
        with pytest.raises(ProductNotFoundError) as excinfo:
            repo.get(42)
        assert excinfo.value.product_id == 42
        assert "42" in str(excinfo.value)

    def test_not_found_is_an_entity_not_found(self):
        repo = InMemoryProductRepository()
        with pytest.raises(EntityNotFoundError):
            repo.get(1)


class TestReplace:

    def test_overwrites_all_fields_but_id(self):
        repo = InMemoryProductRepository()
        created = repo.create(ProductDraft.of("Laptop", "999.99", "Fast", 10))
        updated = repo.replace(created.id, ProductDraft.of("Gaming Laptop", "1299.99", quantity=5))
        assert updated.id == created.id
        assert updated.name == "Gaming Laptop"
        assert updated.price == Money.of("1299.99")
        assert updated.description is None
        assert updated.quantity == 5
        assert repo.get(created.id) == updated

    def test_missing_id_raises_and_changes_nothing(self):
        repo = InMemoryProductRepository()
        repo.create(_draft("A"))
        before = repo.list_all()
        with pytest.raises(ProductNotFoundError):
            repo.replace(99, _draft("B"))
        assert repo.list_all() == before
        assert not repo.exists(99)

    def test_does_not_consume_an_id(self):
        repo = InMemoryProductRepository()
        with pytest.raises(ProductNotFoundError):
            repo.replace(1, _draft())
        assert repo.create(_draft()).id == 1


class TestDelete:

    def test_then_get_raises(self):
        repo = InMemoryProductRepository()
        created = repo.create(_draft())
        repo.delete(created.id)
        with pytest.raises(ProductNotFoundError):
            repo.get(created.id)

    def test_missing_id_raises(self):
        repo = InMemoryProductRepository()
        repo.create(_draft())
        with pytest.raises(ProductNotFoundError):
            repo.delete(2)
        assert repo.count() == 1

    def test_twice_raises(self):
        repo = InMemoryProductRepository()
        created = repo.create(_draft())
        repo.delete(created.id)
        with pytest.raises(ProductNotFoundError):
            repo.delete(created.id)


class TestListAndExists:

    def test_list_holds_exactly_live_ids(self):
        repo = InMemoryProductRepository()
        for name in ("A", "B", "C", "D"):
            repo.create(_draft(name))
        repo.delete(2)
        repo.delete(4)
        ids = [p.id for p in repo.list_all()]
        assert sorted(ids) == [1, 3]
        assert len(ids) == len(set(ids))

    def test_list_is_a_snapshot(self):
        repo = InMemoryProductRepository()
        repo.create(_draft("A"))
        snapshot = repo.list_all()
        repo.create(_draft("B"))
        repo.delete(1)
        assert [p.name for p in snapshot] == ["A"]

    def test_exists(self):
        repo = InMemoryProductRepository()
        created = repo.create(_draft())
        assert repo.exists(created.id)
        repo.delete(created.id)
        assert not repo.exists(created.id)

    def test_count(self):
        repo = InMemoryProductRepository()
        assert repo.count() == 0
        repo.create(_draft())
        assert repo.count() == 1


class TestFindBy:

    def _seeded(self) -> InMemoryProductRepository:
        repo = InMemoryProductRepository()
        repo.create(_draft("Laptop", "999.99", 10))
        repo.create(_draft("Mouse", "29.99", 0))
        repo.create(_draft("Keyboard", "79.99", 3))
        return repo

    def test_price_below_100(self):
        repo = self._seeded()
        found = repo.find_by(predicates.price_below("100"))
        assert sorted(p.name for p in found) == ["Keyboard", "Mouse"]

    def test_matches_filtered_list(self):
        repo = self._seeded()
        for predicate in (
            predicates.in_stock(),
            predicates.name_contains("o"),
            predicates.price_between("30", "1000"),
            predicates.all_of(),
        ):
            expected = {p.id for p in repo.list_all() if predicate(p)}
            assert {p.id for p in repo.find_by(predicate)} == expected

    def test_no_match_returns_empty_list(self):
        repo = self._seeded()
        assert repo.find_by(predicates.name_contains("tablet")) == []


class TestConcurrency:

    def test_concurrent_creates_get_distinct_ids(self):
        repo = InMemoryProductRepository()
        workers, per_worker = 8, 50

        def create_many(worker: int) -> list[int]:
            return [
                repo.create(_draft(f"w{worker}-{i}")).id for i in range(per_worker)
            ]

        with ThreadPoolExecutor(max_workers=workers) as pool:
            results = list(pool.map(create_many, range(workers)))

        ids = [product_id for batch in results for product_id in batch]
        assert len(set(ids)) == workers * per_worker
        assert sorted(p.id for p in repo.list_all()) == sorted(ids)
        for batch in results:
            assert batch == sorted(batch)

    def test_concurrent_deletes_of_one_id_succeed_once(self):
        repo = InMemoryProductRepository()
        created = repo.create(_draft())

        def try_delete(_: int) -> bool:
            try:
                repo.delete(created.id)
            except ProductNotFoundError:
                return False
            return True

        with ThreadPoolExecutor(max_workers=8) as pool:
            outcomes = list(pool.map(try_delete, range(16)))

        assert outcomes.count(True) == 1
        assert repo.count() == 0


class TestScenario:

    def test_create_replace_delete(self):
        repo = InMemoryProductRepository()
        created = repo.create(ProductDraft.of("Laptop", 999.99, quantity=10))
        assert created.id == 1
        assert created.name == "Laptop"
        assert created.price == Money.of("999.99")
        assert created.description is None
        assert created.quantity == 10

        updated = repo.replace(1, ProductDraft.of("Gaming Laptop", 1299.99, quantity=5))
        assert (updated.id, updated.name, updated.price, updated.quantity) == (
            1, "Gaming Laptop", Money.of("1299.99"), 5,
        )

        repo.delete(1)
        with pytest.raises(ProductNotFoundError):
            repo.get(1)
