"""Catalog snapshot provider.

The ranking code never fetches anything itself: callers load a
:class:`CatalogSnapshot` here and pass its products and categories in.
"""
from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass, field
from typing import Any, Dict, List, Sequence

from elasticsearch import Elasticsearch
from elasticsearch.exceptions import NotFoundError

from .config import settings
from .es_client import scan_sources
from .models import DEFAULT_AVAILABILITY, Category, Product

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CatalogSnapshot:
    products: List[Product] = field(default_factory=list)
    categories: List[Category] = field(default_factory=list)

    def to_payload(self) -> Dict[str, Any]:
        return {
            "products": [product.model_dump(mode="json", by_alias=True) for product in self.products],
            "categories": [category.model_dump(mode="json", by_alias=True) for category in self.categories],
        }

    @classmethod
    def from_payload(cls, payload: Dict[str, Any]) -> "CatalogSnapshot":
        return cls(
            products=[Product.model_validate(item) for item in payload.get("products", [])],
            categories=[Category.model_validate(item) for item in payload.get("categories", [])],
        )


def is_available_at_store(product: Product, store_id: str | None) -> bool:
    if not store_id:
        return True
    availability = product.available_at or DEFAULT_AVAILABILITY
    return bool(getattr(availability, store_id, False))


def filter_by_store(products: Sequence[Product], store_id: str | None) -> List[Product]:
    """Keep products stocked at ``store_id``; no store means every product."""
    if not store_id:
        return list(products)
    return [product for product in products if is_available_at_store(product, store_id)]


async def _scan_or_empty(es: Elasticsearch, index: str) -> List[Dict[str, Any]]:
    try:
        return await asyncio.to_thread(scan_sources, es, index)
    except NotFoundError:
        logger.warning("Index %s is missing; treating it as empty", index)
        return []


async def fetch_catalog(es: Elasticsearch) -> CatalogSnapshot:
    product_docs = await _scan_or_empty(es, settings.product_index)
    category_docs = await _scan_or_empty(es, settings.category_index)
    snapshot = CatalogSnapshot(
        products=sorted((Product.model_validate(doc) for doc in product_docs), key=lambda p: p.id),
        categories=sorted((Category.model_validate(doc) for doc in category_docs), key=lambda c: c.id),
    )
    logger.info(
        "Fetched catalog snapshot products=%s categories=%s",
        len(snapshot.products),
        len(snapshot.categories),
    )
    return snapshot
