"""Elasticsearch client factory and document helpers.

The rest of the code works against the official synchronous client. Blocking
calls are wrapped via ``asyncio.to_thread`` by the caller where necessary.
"""
from __future__ import annotations

import logging
from functools import lru_cache
from typing import Any, Dict, List

from elasticsearch import Elasticsearch, helpers

from .config import settings

logger = logging.getLogger(__name__)


@lru_cache(maxsize=1)
def get_client() -> Elasticsearch:
    logger.info("Connecting to Elasticsearch at %s", settings.es_host)
    return Elasticsearch(settings.es_host)


def scan_sources(es: Elasticsearch, index: str) -> List[Dict[str, Any]]:
    """Return the ``_source`` of every document in ``index``."""
    hits = helpers.scan(es, index=index, query={"query": {"match_all": {}}})
    sources = [hit.get("_source", {}) for hit in hits]
    logger.debug("scanned index=%s documents=%s", index, len(sources))
    return sources
