"""Autocomplete suggestions built from plain substring matches."""
from __future__ import annotations

from typing import List, Sequence, Set

from .listings import get_trending_products
from .models import Category, CategorySuggestion, Product, ProductSuggestion, SuggestionEntry

SUGGESTION_LIMIT = 8
EMPTY_QUERY_LIMIT = 6


def get_search_suggestions(
    query: str,
    products: Sequence[Product],
    categories: Sequence[Category] = (),
) -> List[SuggestionEntry]:
    """Products then categories whose names contain ``query``, one entry per name.

    A blank query suggests the leading trending products instead.
    """
    seen: Set[str] = set()
    suggestions: List[SuggestionEntry] = []

    if not query.strip():
        for product in get_trending_products(products):
            if len(suggestions) == EMPTY_QUERY_LIMIT:
                break
            if product.name in seen:
                continue
            suggestions.append(ProductSuggestion(id=product.id, name=product.name, image=product.image))
            seen.add(product.name)
        return suggestions

    query_lower = query.lower()
    for product in products:
        if query_lower in product.name.lower() and product.name not in seen:
            suggestions.append(ProductSuggestion(id=product.id, name=product.name, image=product.image))
            seen.add(product.name)

    for category in categories:
        if query_lower in category.name.lower() and category.name not in seen:
            suggestions.append(CategorySuggestion(id=category.id, name=category.name))
            seen.add(category.name)

    return suggestions[:SUGGESTION_LIMIT]
