"""FastAPI application wiring the catalog search service."""
from __future__ import annotations

import asyncio
import logging
from typing import List, Optional

from fastapi import FastAPI, HTTPException, Query

from . import search_service
from .config import settings
from .es_client import get_client
from .importer import import_if_empty, reindex_data
from .indexing import ensure_indices, index_is_empty
from .models import (
    FilterSet,
    HealthResponse,
    ProductListResponse,
    ProductTag,
    SearchResponse,
    StoreAvailability,
    SuggestionResponse,
)

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
LOG_LEVEL = logging.getLevelName(settings.log_level.upper())

# Force a predictable logging setup even when run under uvicorn. ``force=True``
# replaces uvicorn's default handlers.
logging.basicConfig(level=LOG_LEVEL, format=LOG_FORMAT, force=True)
for name in ("uvicorn", "uvicorn.error", "uvicorn.access", "elastic_transport"):
    logging.getLogger(name).setLevel(LOG_LEVEL)

logger = logging.getLogger(__name__)
logger.info("Logging configured at %s", settings.log_level.upper())

app = FastAPI(title="Catalog Search Service")

STORES = frozenset(StoreAvailability.model_fields)


def _check_store(store: Optional[str]) -> Optional[str]:
    if store is not None and store not in STORES:
        raise HTTPException(status_code=400, detail=f"Unknown store {store!r}")
    return store


@app.on_event("startup")
async def startup_event() -> None:
    es = get_client()
    await ensure_indices(es)
    if settings.load_on_startup:
        imported = await import_if_empty(es)
        if imported:
            logger.info("Imported %s products on startup", imported)


@app.get("/health", response_model=HealthResponse)
async def health() -> HealthResponse:
    es = get_client()
    status = await asyncio.to_thread(es.cluster.health)
    empty = await index_is_empty(es)
    return HealthResponse(elasticsearch=status.get("status"), product_index=settings.product_index, empty=empty)


@app.get("/search", response_model=SearchResponse)
async def search(
    q: str = Query("", description="Search query; blank browses the whole catalog"),
    category_id: Optional[int] = Query(None, alias="categoryId"),
    min_price: Optional[float] = Query(None, alias="minPrice"),
    max_price: Optional[float] = Query(None, alias="maxPrice"),
    min_rating: Optional[float] = Query(None, alias="minRating"),
    tags: List[ProductTag] = Query(default=[]),
    store: Optional[str] = None,
) -> SearchResponse:
    filters = FilterSet(
        category_id=category_id,
        min_price=min_price,
        max_price=max_price,
        min_rating=min_rating,
        tags=tuple(tags),
    )
    payload = await search_service.search_catalog(get_client(), q, filters, _check_store(store))
    results = payload["results"]
    return SearchResponse(query=q, results=results, total=len(results), took_ms=payload["took_ms"])


@app.get("/suggestions", response_model=SuggestionResponse)
async def suggestions(q: str = Query("", description="Prefix or fragment typed so far")) -> SuggestionResponse:
    entries = await search_service.suggest(get_client(), q)
    return SuggestionResponse(query=q, suggestions=entries)


@app.get("/products/{kind}", response_model=ProductListResponse)
async def product_list(kind: str, store: Optional[str] = None) -> ProductListResponse:
    if kind not in search_service.LISTINGS:
        raise HTTPException(status_code=404, detail=f"Unknown product list {kind!r}")
    products = await search_service.list_products(get_client(), kind, _check_store(store))
    return ProductListResponse(results=products, total=len(products))


@app.post("/reindex")
async def reindex() -> dict:
    es = get_client()
    count = await reindex_data(es)
    search_service.invalidate_snapshot()
    return {"indexed": count}
