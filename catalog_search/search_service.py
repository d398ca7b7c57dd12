"""Service layer gluing the snapshot provider, cache and ranking code."""
from __future__ import annotations

import logging
from time import perf_counter
from typing import Callable, Dict, List, Sequence

from elasticsearch import Elasticsearch

from .cache import SNAPSHOT_KEY, get_cache
from .catalog import CatalogSnapshot, fetch_catalog, filter_by_store
from .config import settings
from .listings import (
    get_best_seller_products,
    get_featured_products,
    get_new_arrival_products,
    get_trending_products,
)
from .models import FilterSet, Product, SuggestionEntry
from .search import search
from .suggestions import get_search_suggestions

logger = logging.getLogger(__name__)

LISTINGS: Dict[str, Callable[[Sequence[Product]], List[Product]]] = {
    "best-sellers": get_best_seller_products,
    "new-arrivals": get_new_arrival_products,
    "featured": get_featured_products,
    "trending": get_trending_products,
}


async def load_snapshot(es: Elasticsearch) -> CatalogSnapshot:
    cache = get_cache()
    cached = cache.get(SNAPSHOT_KEY)
    if cached is not None:
        logger.debug("snapshot cache hit")
        return CatalogSnapshot.from_payload(cached)
    snapshot = await fetch_catalog(es)
    cache.set(SNAPSHOT_KEY, snapshot.to_payload(), settings.cache_ttl_seconds)
    logger.debug("cache_store snapshot ttl=%s", settings.cache_ttl_seconds)
    return snapshot


def invalidate_snapshot() -> None:
    get_cache().delete(SNAPSHOT_KEY)


async def search_catalog(
    es: Elasticsearch,
    query: str,
    filters: FilterSet | None = None,
    store_id: str | None = None,
) -> Dict[str, object]:
    t0 = perf_counter()
    snapshot = await load_snapshot(es)
    t1 = perf_counter()
    products = filter_by_store(snapshot.products, store_id)
    results = search(query, filters, products, snapshot.categories)
    t2 = perf_counter()

    load_ms = (t1 - t0) * 1000
    rank_ms = (t2 - t1) * 1000
    logger.info(
        "timing: total=%.2fms load=%.2fms rank=%.2fms q=%r store=%s candidates=%s hits=%s",
        load_ms + rank_ms,
        load_ms,
        rank_ms,
        query,
        store_id,
        len(products),
        len(results),
    )
    return {
        "query": query,
        "results": results,
        "took_ms": load_ms + rank_ms,
    }


async def list_products(es: Elasticsearch, kind: str, store_id: str | None = None) -> List[Product]:
    """Run one of :data:`LISTINGS` over the store's products."""
    snapshot = await load_snapshot(es)
    products = LISTINGS[kind](filter_by_store(snapshot.products, store_id))
    logger.info("listing kind=%s store=%s results=%s", kind, store_id, len(products))
    return products


async def suggest(es: Elasticsearch, query: str) -> List[SuggestionEntry]:
    # Suggestions always span every store.
    snapshot = await load_snapshot(es)
    return get_search_suggestions(query, snapshot.products, snapshot.categories)
