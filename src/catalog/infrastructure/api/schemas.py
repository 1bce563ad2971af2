"""Pydantic schemas for the products API.

Field-level business rules (non-negative price, name required, ...) are
left to the domain so that breaking them yields a 400, not a 422.
"""

from __future__ import annotations

from pydantic import BaseModel, Field

from catalog.application.dto import ProductDTO


class ProductIn(BaseModel):
    """Request body for creating or replacing a product."""

    name: str = Field(..., description="Product name, must not be blank")
    price: float | str = Field(
        ..., description="Unit price, at most 2 decimal places, must not be negative"
    )
    description: str | None = Field(None, description="Up to 1000 characters")
    quantity: int | None = Field(None, description="Units on hand; defaults to 0")


class ProductOut(BaseModel):
    """Response body for a single product."""

    id: int
    name: str
    price: float
    description: str | None
    quantity: int

    @classmethod
    def from_dto(cls, dto: ProductDTO) -> ProductOut:
        return cls(
            id=dto.id,
            name=dto.name,
            price=float(dto.price),
            description=dto.description,
            quantity=dto.quantity,
        )


class StockOut(BaseModel):
    id: int
    in_stock: bool


class HealthOut(BaseModel):
    status: str
    products: int
