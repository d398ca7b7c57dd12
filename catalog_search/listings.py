"""Merchandising lists derived from product tags and ratings."""
from __future__ import annotations

from typing import List, Sequence

from .models import Product, ProductTag

LIST_LIMIT = 8
FEATURED_MIN_RATING = 4.5

TAG_PRIORITY = {
    ProductTag.BEST_SELLER: 3,
    ProductTag.TRENDING: 2,
    ProductTag.NEW_ARRIVAL: 1,
}


def _top_rated_with_tag(products: Sequence[Product], tag: ProductTag) -> List[Product]:
    tagged = [product for product in products if product.has_tag(tag)]
    tagged.sort(key=lambda p: (-p.rating, -p.reviews))
    return tagged[:LIST_LIMIT]


def get_best_seller_products(products: Sequence[Product]) -> List[Product]:
    return _top_rated_with_tag(products, ProductTag.BEST_SELLER)


def get_new_arrival_products(products: Sequence[Product]) -> List[Product]:
    return _top_rated_with_tag(products, ProductTag.NEW_ARRIVAL)


def get_featured_products(products: Sequence[Product]) -> List[Product]:
    """Trending products first, then untagged products rated 4.5 or above."""
    featured = [
        product
        for product in products
        if product.has_tag(ProductTag.TRENDING) or (not product.tags and product.rating >= FEATURED_MIN_RATING)
    ]
    featured.sort(key=lambda p: (not p.has_tag(ProductTag.TRENDING), -p.rating))
    return featured[:LIST_LIMIT]


def tag_priority(product: Product) -> int:
    return sum(weight for tag, weight in TAG_PRIORITY.items() if product.has_tag(tag))


def get_trending_products(products: Sequence[Product]) -> List[Product]:
    """Tagged products by tag priority, backfilled with top-rated untagged ones."""
    trending = [product for product in products if product.tags]
    trending.sort(key=lambda p: (-tag_priority(p), -p.rating))
    trending = trending[:LIST_LIMIT]

    if len(trending) < LIST_LIMIT:
        backfill = [product for product in products if not any(product is chosen for chosen in trending)]
        backfill.sort(key=lambda p: -p.rating)
        trending.extend(backfill[: LIST_LIMIT - len(trending)])

    return trending
