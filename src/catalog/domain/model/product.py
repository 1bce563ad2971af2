"""Product entity and the draft it is created from.

A draft carries everything a caller supplies; the id is only ever
assigned by the repository, once, when the draft is first stored.
"""

from __future__ import annotations

from dataclasses import dataclass

from catalog.domain.exceptions import ValidationError
from catalog.domain.model.value_objects import Money

MAX_DESCRIPTION_LENGTH = 1000


@dataclass(frozen=True)
class ProductDraft:
    """Caller-supplied product fields, validated on construction."""

    name: str
    price: Money
    description: str | None = None
    quantity: int = 0

    def __post_init__(self) -> None:
        if not isinstance(self.name, str) or not self.name.strip():
            raise ValidationError("Product name is required")
        if not isinstance(self.price, Money):
            raise ValidationError(
                f"Product price must be Money, got {type(self.price).__name__}"
            )
        if isinstance(self.quantity, bool) or not isinstance(self.quantity, int):
            raise ValidationError(
                f"Quantity must be an integer, got {type(self.quantity).__name__}"
            )
        if self.quantity < 0:
            raise ValidationError(f"Quantity cannot be negative, got {self.quantity}")
        if self.description is not None:
            if not isinstance(self.description, str):
                raise ValidationError("Description must be text")
            if len(self.description) > MAX_DESCRIPTION_LENGTH:
                raise ValidationError(
                    f"Description cannot exceed {MAX_DESCRIPTION_LENGTH} characters"
                )

    @staticmethod
    def of(
        name: str,
        price: str | float | int | Money,
        description: str | None = None,
        quantity: int | None = None,
    ) -> ProductDraft:
        """Build a draft from raw input.

        Strips the name, parses the price and treats a missing quantity as 0.
        """
        if isinstance(name, str):
            name = name.strip()
        if not isinstance(price, Money):
            price = Money.of(price)
        return ProductDraft(
            name=name,
            price=price,
            description=description,
            quantity=0 if quantity is None else quantity,
        )


@dataclass(frozen=True)
class Product:
    """A product held by the catalog.

    Frozen, so the instances handed out by a repository can never be
    used to mutate what the repository holds.
    """

    id: int
    name: str
    price: Money
    description: str | None
    quantity: int

    @property
    def in_stock(self) -> bool:
        return self.quantity > 0

    @staticmethod
    def from_draft(product_id: int, draft: ProductDraft) -> Product:
        return Product(
            id=product_id,
            name=draft.name,
            price=draft.price,
            description=draft.description,
            quantity=draft.quantity,
        )
