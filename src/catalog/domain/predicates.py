"""Composable predicates over Product.

Queries are expressed as plain callables passed to
ProductRepository.find_by, so the repository never has to know
what shape a query takes.
"""

from __future__ import annotations

from decimal import Decimal

from catalog.domain.model.product import Product
from catalog.domain.model.value_objects import Money
from catalog.domain.repository.product_repository import ProductPredicate

PriceLike = str | float | int | Decimal | Money


def _money(value: PriceLike) -> Money:
    return value if isinstance(value, Money) else Money.of(value)


def name_contains(text: str) -> ProductPredicate:
    """Case-insensitive substring match on the name."""
    needle = text.casefold()
    return lambda product: needle in product.name.casefold()


def name_equals(text: str) -> ProductPredicate:
    """Case-insensitive exact match on the name."""
    wanted = text.casefold()
    return lambda product: product.name.casefold() == wanted


def price_below(limit: PriceLike) -> ProductPredicate:
    """Strictly cheaper than ``limit``."""
    bound = _money(limit)
    return lambda product: product.price < bound


def price_at_most(limit: PriceLike) -> ProductPredicate:
    bound = _money(limit)
    return lambda product: product.price <= bound


def price_above(limit: PriceLike) -> ProductPredicate:
    """Strictly more expensive than ``limit``."""
    bound = _money(limit)
    return lambda product: product.price > bound


def price_at_least(limit: PriceLike) -> ProductPredicate:
    bound = _money(limit)
    return lambda product: product.price >= bound


def price_between(low: PriceLike, high: PriceLike) -> ProductPredicate:
    """Inclusive on both ends."""
    return all_of(price_at_least(low), price_at_most(high))


def quantity_above(threshold: int) -> ProductPredicate:
    return lambda product: product.quantity > threshold


def in_stock() -> ProductPredicate:
    return lambda product: product.in_stock


def all_of(*predicates: ProductPredicate) -> ProductPredicate:
    """Match when every predicate matches; no predicates matches everything."""
    return lambda product: all(p(product) for p in predicates)


def any_of(*predicates: ProductPredicate) -> ProductPredicate:
    """Match when at least one predicate matches."""
    return lambda product: any(p(product) for p in predicates)
