"""Typo-tolerant relevance search over an in-memory catalog snapshot.

Every product is scored by independent additive signals (substring hits,
per-word hits, fuzzy similarity and a curated misspelling table). Scores are
uncapped, so a product matching on many signals beats one matching strongly
on a single signal. Nothing here performs I/O or keeps state between calls.
"""
from __future__ import annotations

import logging
from typing import Dict, Iterable, List, Sequence, Tuple

from .models import Category, FilterSet, Product
from .similarity import similarity

logger = logging.getLogger(__name__)

NAME_MATCH = 100
CATEGORY_MATCH = 80
DESCRIPTION_MATCH = 40
NAME_WORD_MATCH = 30
CATEGORY_WORD_MATCH = 20
DESCRIPTION_WORD_MATCH = 10
NAME_FUZZY_WEIGHT = 50
CATEGORY_FUZZY_WEIGHT = 30
FUZZY_THRESHOLD = 0.6
MISSPELLING_MATCH = 60

# Canonical term -> misspellings seen in real queries. Hand maintained.
COMMON_MISSPELLINGS: Dict[str, Tuple[str, ...]] = {
    "decorative": ("decarative", "decoritive", "decorativ"),
    "trophy": ("trophie", "trophies", "trophy", "trofy"),
    "medal": ("medel", "medle", "medals"),
    "momento": ("momentos", "mementos", "memento"),
    "home": ("hom", "hme"),
    "wall": ("wal", "wll"),
    "art": ("arte", "arts"),
}


def resolve_category_names(product: Product, categories: Iterable[Category]) -> Tuple[str, str]:
    """Return the lower-cased (category, subcategory) names of ``product``."""
    for category in categories:
        if category.id != product.category_id:
            continue
        subcategory = category.find_subcategory(product.subcategory_id)
        return category.name.lower(), subcategory.name.lower() if subcategory else ""
    return "", ""


def score_product(query: str, product: Product, category_name: str = "", subcategory_name: str = "") -> float:
    """Relevance of ``product`` for an already lower-cased, trimmed query.

    ``0`` means the product does not match at all.
    """
    name = product.name.lower()
    description = product.description.lower()
    score = 0.0

    if query in name:
        score += NAME_MATCH
    if query in category_name or query in subcategory_name:
        score += CATEGORY_MATCH
    if query in description:
        score += DESCRIPTION_MATCH

    for word in query.split():
        if word in name:
            score += NAME_WORD_MATCH
        if word in category_name or word in subcategory_name:
            score += CATEGORY_WORD_MATCH
        if word in description:
            score += DESCRIPTION_WORD_MATCH

    name_similarity = similarity(query, name)
    if name_similarity > FUZZY_THRESHOLD:
        score += name_similarity * NAME_FUZZY_WEIGHT

    category_similarity = similarity(query, category_name)
    if category_similarity > FUZZY_THRESHOLD:
        score += category_similarity * CATEGORY_FUZZY_WEIGHT

    for correct, misspellings in COMMON_MISSPELLINGS.items():
        if any(misspelling in query for misspelling in misspellings):
            if correct in name or correct in category_name:
                score += MISSPELLING_MATCH

    return score


def matches_filters(product: Product, filters: FilterSet | None) -> bool:
    """Conjunctive filter predicate; price bounds apply to the list price."""
    if filters is None:
        return True
    if filters.category_id is not None and product.category_id != filters.category_id:
        return False
    if filters.min_price is not None and product.price < filters.min_price:
        return False
    if filters.max_price is not None and product.price > filters.max_price:
        return False
    if filters.min_rating is not None and product.rating < filters.min_rating:
        return False
    if filters.tags and not any(tag in product.tags for tag in filters.tags):
        return False
    return True


def search(
    query: str,
    filters: FilterSet | None,
    products: Sequence[Product],
    categories: Sequence[Category] = (),
) -> List[Product]:
    """Rank ``products`` for ``query``; a blank query browses the whole catalog.

    Equal scores are ordered by product id.
    """
    query_lower = query.lower().strip()
    if not query_lower:
        return [product for product in products if matches_filters(product, filters)]

    scored: List[Tuple[Product, float]] = []
    for product in products:
        if not matches_filters(product, filters):
            continue
        category_name, subcategory_name = resolve_category_names(product, categories)
        score = score_product(query_lower, product, category_name, subcategory_name)
        if score > 0:
            scored.append((product, score))

    scored.sort(key=lambda item: (-item[1], item[0].id))
    logger.debug("search q=%r candidates=%s matched=%s", query_lower, len(products), len(scored))
    return [product for product, _ in scored]
