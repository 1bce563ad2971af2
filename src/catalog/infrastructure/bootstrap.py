"""Composition root: wires concrete implementations to domain interfaces.

This is the only place in the codebase that knows about *all* layers.
Every other module depends only on abstractions and receives its
repository through its constructor.
"""

from __future__ import annotations

from pathlib import Path

import structlog

from catalog.infrastructure.persistence.in_memory_product_repository import (
    InMemoryProductRepository,
)
from catalog.infrastructure.persistence.json_seed import load_seed

log = structlog.get_logger(__name__)


def product_repository(seed_path: Path | None = None) -> InMemoryProductRepository:
    """Build an empty store, optionally filled from a seed file in file order."""
    repo = InMemoryProductRepository()
    if seed_path is not None:
        drafts = load_seed(seed_path)
        for draft in drafts:
            repo.create(draft)
        log.info("catalog_seeded", path=str(seed_path), products=len(drafts))
    return repo
