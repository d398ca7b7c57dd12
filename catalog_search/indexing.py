"""Index creation and maintenance helpers."""
from __future__ import annotations

import asyncio
import json
import logging
from pathlib import Path

from elasticsearch import Elasticsearch
from elasticsearch.exceptions import BadRequestError, NotFoundError

from .config import settings

logger = logging.getLogger(__name__)


def _load_mapping(mapping_path: Path) -> dict:
    with mapping_path.open("r", encoding="utf-8") as fh:
        return json.load(fh)


def _catalog_indices() -> list[tuple[str, Path]]:
    return [
        (settings.product_index, Path(settings.product_mapping_path)),
        (settings.category_index, Path(settings.category_mapping_path)),
    ]


async def _ensure_index(es: Elasticsearch, index: str, mapping_path: Path) -> None:
    exists = await asyncio.to_thread(es.indices.exists, index=index)
    if exists:
        return
    body = _load_mapping(mapping_path)
    logger.info("Creating index %s using %s", index, mapping_path)
    try:
        await asyncio.to_thread(es.indices.create, index=index, body=body)
    except BadRequestError as exc:
        if getattr(exc, "error", "") == "resource_already_exists_exception":
            logger.info("Index %s already exists", index)
            return
        logger.exception("Failed to create index %s: %s", index, exc)
        raise


async def ensure_indices(es: Elasticsearch) -> None:
    """Create the product and category indices if they are missing."""

    for index, mapping_path in _catalog_indices():
        await _ensure_index(es, index, mapping_path)


async def drop_indices(es: Elasticsearch) -> None:
    for index, _ in _catalog_indices():
        try:
            await asyncio.to_thread(es.indices.delete, index=index)
        except NotFoundError:
            continue


async def index_is_empty(es: Elasticsearch) -> bool:
    try:
        stats = await asyncio.to_thread(es.count, index=settings.product_index)
        return stats.get("count", 0) == 0
    except NotFoundError:
        return True
