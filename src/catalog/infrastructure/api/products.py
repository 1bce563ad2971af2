"""Product endpoints.

Each request builds the handler it needs around the repository held in
``app.state``; handlers raise domain exceptions, which the app turns
into 400 and 404 responses.
"""

from __future__ import annotations

from decimal import Decimal

from fastapi import APIRouter, Depends, Query, Request, Response, status

from catalog.application.add_product import AddProductHandler
from catalog.application.check_stock import CheckStockHandler
from catalog.application.dto import SearchCriteria
from catalog.application.list_products import ListProductsHandler
from catalog.application.remove_product import RemoveProductHandler
from catalog.application.search_products import SearchProductsHandler
from catalog.application.show_product import ShowProductHandler
from catalog.application.update_product import UpdateProductHandler
from catalog.domain.repository.product_repository import ProductRepository
from catalog.infrastructure.api.schemas import ProductIn, ProductOut, StockOut

router = APIRouter()


def get_repository(request: Request) -> ProductRepository:
    return request.app.state.repository


@router.get("", response_model=list[ProductOut])
def list_products(
    sort: str = Query("id", description="id, name, price or quantity"),
    desc: bool = Query(False),
    repo: ProductRepository = Depends(get_repository),
) -> list[ProductOut]:
    dtos = ListProductsHandler(repo).handle(sort_by=sort, descending=desc)
    return [ProductOut.from_dto(dto) for dto in dtos]


@router.get("/search", response_model=list[ProductOut])
def search_products(
    name: str | None = Query(None, description="Case-insensitive name fragment"),
    min_price: Decimal | None = Query(None, description="Inclusive lower bound"),
    max_price: Decimal | None = Query(None, description="Exclusive upper bound"),
    min_quantity: int | None = Query(None, description="Quantity strictly above"),
    in_stock: bool = Query(False),
    repo: ProductRepository = Depends(get_repository),
) -> list[ProductOut]:
    criteria = SearchCriteria(
        name=name,
        min_price=min_price,
        max_price=max_price,
        min_quantity=min_quantity,
        in_stock_only=in_stock,
    )
    return [ProductOut.from_dto(dto) for dto in SearchProductsHandler(repo).handle(criteria)]


@router.get("/{product_id}", response_model=ProductOut)
def get_product(
    product_id: int,
    repo: ProductRepository = Depends(get_repository),
) -> ProductOut:
    return ProductOut.from_dto(ShowProductHandler(repo).handle(product_id))


@router.get("/{product_id}/stock", response_model=StockOut)
def get_stock(
    product_id: int,
    repo: ProductRepository = Depends(get_repository),
) -> StockOut:
    return StockOut(id=product_id, in_stock=CheckStockHandler(repo).handle(product_id))


@router.post("", response_model=ProductOut, status_code=status.HTTP_201_CREATED)
def create_product(
    body: ProductIn,
    repo: ProductRepository = Depends(get_repository),
) -> ProductOut:
    dto = AddProductHandler(repo).handle(
        name=body.name,
        price=body.price,
        description=body.description,
        quantity=body.quantity,
    )
    return ProductOut.from_dto(dto)


@router.put("/{product_id}", response_model=ProductOut)
def update_product(
    product_id: int,
    body: ProductIn,
    repo: ProductRepository = Depends(get_repository),
) -> ProductOut:
    dto = UpdateProductHandler(repo).handle(
        product_id,
        name=body.name,
        price=body.price,
        description=body.description,
        quantity=body.quantity,
    )
    return ProductOut.from_dto(dto)


@router.delete("/{product_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_product(
    product_id: int,
    repo: ProductRepository = Depends(get_repository),
) -> Response:
    RemoveProductHandler(repo).handle(product_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
