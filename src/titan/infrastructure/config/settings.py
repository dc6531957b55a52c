"""Runtime configuration, read from ``TITAN_*`` environment variables or ``.env``."""

from __future__ import annotations

from enum import Enum
from functools import lru_cache
from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class LogFormat(str, Enum):
    CONSOLE = "console"
    JSON = "json"


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="TITAN_",
        env_file=".env",
        extra="ignore",
    )

    # Storage
    data_dir: Path = Field(default=Path("./data"), description="Catalog and order files")
    cart_file: Path | None = Field(default=None, description="Defaults to <data_dir>/cart.json")
    cart_key: str = Field(default="titan_cart", description="Key holding the cart in cart_file")

    # HTTP
    host: str = "127.0.0.1"
    port: int = 3000
    api_url: str | None = Field(
        default=None,
        description="Checkout API base URL; when unset the CLI checks out in-process",
    )
    request_timeout: float = Field(default=10.0, gt=0)

    # Checkout
    lookup_workers: int = Field(default=4, ge=1, description="Concurrent catalog lookups")

    # Logging
    log_level: str = "INFO"
    log_format: LogFormat = LogFormat.CONSOLE

    @property
    def products_file(self) -> Path:
        return self.data_dir / "products.json"

    @property
    def orders_file(self) -> Path:
        return self.data_dir / "orders.json"

    @property
    def resolved_cart_file(self) -> Path:
        return self.cart_file or self.data_dir / "cart.json"


@lru_cache
def get_settings() -> Settings:
    return Settings()
