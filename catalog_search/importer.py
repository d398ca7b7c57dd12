"""Loads the nested catalog seed file and indexes it into Elasticsearch."""
from __future__ import annotations

import asyncio
import json
import logging
from pathlib import Path
from typing import Any, Iterable

from elasticsearch import Elasticsearch, helpers

from .catalog import CatalogSnapshot
from .config import settings
from .models import Category, Product

logger = logging.getLogger(__name__)


def _load_raw_categories(path: Path) -> list[dict]:
    if not path.exists():
        logger.warning("Catalog file %s is missing", path)
        return []
    # Detect Git LFS placeholder to avoid attempting to parse it as JSON.
    with path.open("r", encoding="utf-8") as fh:
        first_line = fh.readline()
        if first_line.startswith("version https://git-lfs.github.com/spec/v1"):
            logger.warning("Catalog file %s is a Git LFS pointer; real data not downloaded", path)
            return []
        fh.seek(0)
        data = json.load(fh)
    if isinstance(data, dict):
        return data.get("categories", [])
    return data


def flatten_catalog(raw_categories: Iterable[dict]) -> CatalogSnapshot:
    """Split categories -> subcategories -> products into flat record lists.

    Products inherit their category and subcategory ids from where they are
    nested unless they carry their own.
    """
    products: list[Product] = []
    categories: list[Category] = []
    for raw_category in raw_categories:
        for raw_subcategory in raw_category.get("subcategories", []):
            for raw_product in raw_subcategory.get("products", []):
                record: dict[str, Any] = {
                    "categoryId": raw_category["id"],
                    "subcategoryId": raw_subcategory["id"],
                    **raw_product,
                }
                products.append(Product.model_validate(record))
        categories.append(Category.model_validate(raw_category))
    return CatalogSnapshot(products=products, categories=categories)


def load_catalog_file(path: str | Path) -> CatalogSnapshot:
    return flatten_catalog(_load_raw_categories(Path(path)))


def _iter_actions(index: str, records: Iterable[Product | Category]) -> Iterable[dict]:
    for record in records:
        yield {
            "_index": index,
            "_id": str(record.id),
            "_source": record.model_dump(mode="json", by_alias=True),
        }


async def import_catalog(es: Elasticsearch) -> int:
    snapshot = load_catalog_file(settings.catalog_path)
    if not snapshot.products and not snapshot.categories:
        return 0
    category_actions = list(_iter_actions(settings.category_index, snapshot.categories))
    product_actions = list(_iter_actions(settings.product_index, snapshot.products))
    await asyncio.to_thread(helpers.bulk, es, category_actions, refresh=True)
    await asyncio.to_thread(helpers.bulk, es, product_actions, refresh=True)
    logger.info(
        "Indexed %s products and %s categories from %s",
        len(product_actions),
        len(category_actions),
        settings.catalog_path,
    )
    return len(product_actions)


async def import_if_empty(es: Elasticsearch) -> int:
    from .indexing import index_is_empty

    if not await index_is_empty(es):
        return 0
    return await import_catalog(es)


async def reindex_data(es: Elasticsearch) -> int:
    from .indexing import drop_indices, ensure_indices

    await drop_indices(es)
    await ensure_indices(es)
    return await import_catalog(es)
