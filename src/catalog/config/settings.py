"""Service settings: CLI flags and env vars in one object.

Priority chain (highest to lowest):
  1. Init kwargs: CLI flags passed by Click
  2. Env vars: ``CATALOG_*`` prefix
  3. Code defaults
"""

from __future__ import annotations

from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class CatalogSettings(BaseSettings):
    """Settings for the HTTP service and the CLI.

    Attributes:
        seed_path: JSON file of products loaded into the store at start-up.
    """

    model_config = SettingsConfigDict(frozen=True, env_prefix="CATALOG_")

    host: str = "127.0.0.1"
    port: int = Field(default=8000, ge=1, le=65535)
    seed_path: Path | None = None
    verbose: bool = False
    log_json: bool = False
    api_title: str = "Product Catalog"
