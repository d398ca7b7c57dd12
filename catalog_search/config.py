"""Application configuration and constants."""
from __future__ import annotations

import os
from dataclasses import dataclass


def _get_env(name: str, default: str) -> str:
    value = os.getenv(name)
    return value if value is not None else default


@dataclass(frozen=True)
class Settings:
    """Simple settings container with environment variable overrides."""

    es_host: str = _get_env("ES_HOST", "http://localhost:9200")
    product_index: str = _get_env("PRODUCT_INDEX", "products")
    category_index: str = _get_env("CATEGORY_INDEX", "categories")
    product_mapping_path: str = _get_env("PRODUCT_MAPPING_PATH", "config/product-mapping.json")
    category_mapping_path: str = _get_env("CATEGORY_MAPPING_PATH", "config/category-mapping.json")
    catalog_path: str = _get_env("CATALOG_PATH", "catalog.json")
    redis_host: str = _get_env("REDIS_HOST", "localhost")
    redis_port: int = int(_get_env("REDIS_PORT", "6379"))
    cache_ttl_seconds: int = int(_get_env("CACHE_TTL_SECONDS", "60"))
    load_on_startup: bool = _get_env("LOAD_ON_STARTUP", "true").lower() in {"1", "true", "yes"}
    log_level: str = _get_env("LOG_LEVEL", "INFO")


settings = Settings()
