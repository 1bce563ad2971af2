"""Data Transfer Objects: plain containers that cross layer boundaries.

DTOs carry data between the outer surfaces (HTTP, CLI) and the
application layer without exposing domain internals.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal

from catalog.domain import predicates
from catalog.domain.exceptions import ValidationError
from catalog.domain.model.product import Product
from catalog.domain.model.value_objects import MAX_AMOUNT, MAX_DECIMAL_PLACES, Money
from catalog.domain.predicates import PriceLike
from catalog.domain.repository.product_repository import ProductPredicate


@dataclass(frozen=True)
class ProductDTO:
    """Output: a product as returned to callers."""

    id: int
    name: str
    price: Decimal
    description: str | None
    quantity: int
    in_stock: bool

    @staticmethod
    def from_entity(product: Product) -> ProductDTO:
        return ProductDTO(
            id=product.id,
            name=product.name,
            price=product.price.amount,
            description=product.description,
            quantity=product.quantity,
            in_stock=product.in_stock,
        )


@dataclass(frozen=True)
class SearchCriteria:
    """Input: optional filters, combined with AND.

    ``max_price`` is exclusive, ``min_price`` inclusive and
    ``min_quantity`` exclusive (quantity strictly greater).
    """

    name: str | None = None
    min_price: PriceLike | None = None
    max_price: PriceLike | None = None
    min_quantity: int | None = None
    in_stock_only: bool = False

    def __post_init__(self) -> None:
        low = _price_bound("min_price", self.min_price)
        high = _price_bound("max_price", self.max_price)
        if low is not None and high is not None:
            if low > high:
                raise ValidationError(
                    f"min_price {self.min_price} is greater than max_price {self.max_price}"
                )

    def to_predicate(self) -> ProductPredicate:
        parts: list[ProductPredicate] = []
        if self.name:
            parts.append(predicates.name_contains(self.name))
        if self.min_price is not None:
            parts.append(predicates.price_at_least(self.min_price))
        if self.max_price is not None:
            parts.append(predicates.price_below(self.max_price))
        if self.min_quantity is not None:
            parts.append(predicates.quantity_above(self.min_quantity))
        if self.in_stock_only:
            parts.append(predicates.in_stock())
        return predicates.all_of(*parts)


def _price_bound(field_name: str, value: PriceLike | None) -> Money | None:
    if value is None:
        return None
    try:
        return value if isinstance(value, Money) else Money.of(value)
    except ValidationError as exc:
        raise ValidationError(
            f"Invalid {field_name} {value}: must be between 0 and {MAX_AMOUNT} "
            f"with at most {MAX_DECIMAL_PLACES} decimal places"
        ) from exc
