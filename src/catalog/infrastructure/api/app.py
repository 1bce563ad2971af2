"""Assembles the FastAPI application.

``create_app`` takes the repository explicitly so tests and the CLI can
hand in the instance they built; with none given, one is built from
settings (and seeded if ``CATALOG_SEED_PATH`` is set).
"""

from __future__ import annotations

import structlog
from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from catalog.config.settings import CatalogSettings
from catalog.domain.exceptions import EntityNotFoundError, ValidationError
from catalog.domain.repository.product_repository import ProductRepository
from catalog.infrastructure.api.products import router as products_router
from catalog.infrastructure.api.schemas import HealthOut
from catalog.infrastructure.bootstrap import product_repository

log = structlog.get_logger(__name__)


def create_app(
    repository: ProductRepository | None = None,
    settings: CatalogSettings | None = None,
) -> FastAPI:
    settings = settings or CatalogSettings()
    if repository is None:
        repository = product_repository(settings.seed_path)

    app = FastAPI(title=settings.api_title)
    app.state.repository = repository
    app.include_router(products_router, prefix="/api/products", tags=["products"])

    @app.exception_handler(ValidationError)
    async def validation_error_handler(request: Request, exc: ValidationError) -> JSONResponse:
        log.info("request_rejected", path=request.url.path, reason=str(exc))
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST, content={"detail": str(exc)}
        )

    @app.exception_handler(EntityNotFoundError)
    async def not_found_handler(request: Request, exc: EntityNotFoundError) -> JSONResponse:
        return JSONResponse(
            status_code=status.HTTP_404_NOT_FOUND, content={"detail": str(exc)}
        )

    @app.get("/health", response_model=HealthOut)
    def health() -> HealthOut:
        return HealthOut(status="ok", products=repository.count())

    return app
