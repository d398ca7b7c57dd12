"""Tests for best-seller, new-arrival, featured and trending lists."""

from catalog_search.listings import (
    LIST_LIMIT,
    get_best_seller_products,
    get_featured_products,
    get_new_arrival_products,
    get_trending_products,
    tag_priority,
)


def _ids(products):
    return [product.id for product in products]


def test_best_sellers_sorted_by_rating_then_reviews_and_capped(make_product):
    products = [
        make_product(i, f"Trophy {i}", rating=4.0 + i / 10, reviews=i, tags=["best-seller"]) for i in range(10)
    ]
    products.append(make_product(50, "Plain Cup", rating=5.0))
    products.append(make_product(51, "Tied Trophy", rating=4.0 + 9 / 10, reviews=500, tags=["best-seller"]))

    results = get_best_seller_products(products)

    assert len(results) == LIST_LIMIT
    assert _ids(results) == [51, 9, 8, 7, 6, 5, 4, 3]


def test_new_arrivals_break_rating_ties_by_reviews(make_product):
    products = [
        make_product(1, "Few Reviews", rating=4.5, reviews=3, tags=["new-arrival"]),
        make_product(2, "Many Reviews", rating=4.5, reviews=30, tags=["new-arrival"]),
        make_product(3, "Best Seller", rating=5.0, tags=["best-seller"]),
    ]

    assert _ids(get_new_arrival_products(products)) == [2, 1]


def test_featured_prefers_trending_then_high_rated_untagged(make_product):
    products = [
        make_product(1, "Untagged Star", rating=4.9),
        make_product(2, "Trending Low", rating=3.0, tags=["trending"]),
        make_product(3, "Untagged Low", rating=4.4),
        make_product(4, "Best Seller Top", rating=5.0, tags=["best-seller"]),
        make_product(5, "Trending High", rating=4.7, tags=["trending", "new-arrival"]),
        make_product(6, "Untagged Edge", rating=4.5),
    ]

    assert _ids(get_featured_products(products)) == [5, 2, 1, 6]


def test_tag_priority_is_additive(make_product):
    assert tag_priority(make_product(1, "All", tags=["best-seller", "trending", "new-arrival"])) == 6
    assert tag_priority(make_product(2, "Limited", tags=["limited-edition"])) == 0
    assert tag_priority(make_product(3, "None")) == 0


def test_trending_backfills_with_top_rated_untagged(make_product):
    tagged = [
        make_product(1, "New", rating=5.0, tags=["new-arrival"]),
        make_product(2, "Hot", rating=4.1, tags=["trending"]),
        make_product(3, "Seller", rating=3.5, tags=["best-seller"]),
    ]
    untagged = [make_product(10 + i, f"Plain {i}", rating=3.0 + i / 10) for i in range(7)]

    results = get_trending_products(untagged + tagged)

    assert len(results) == LIST_LIMIT
    assert _ids(results[:3]) == [3, 2, 1]
    assert _ids(results[3:]) == [16, 15, 14, 13, 12]


def test_trending_returns_whole_small_catalog(make_product):
    products = [
        make_product(1, "Plain", rating=4.0),
        make_product(2, "Hot", rating=3.0, tags=["trending"]),
        make_product(3, "Better Plain", rating=4.5),
    ]

    assert _ids(get_trending_products(products)) == [2, 3, 1]


def test_trending_caps_tagged_products(make_product):
    products = [make_product(i, f"Hot {i}", rating=4.0, tags=["trending"]) for i in range(12)]
    products.insert(0, make_product(99, "Everything", rating=1.0, tags=["best-seller", "trending", "new-arrival"]))

    results = get_trending_products(products)

    assert len(results) == LIST_LIMIT
    assert results[0].id == 99


def test_lists_on_empty_catalog():
    assert get_best_seller_products([]) == []
    assert get_new_arrival_products([]) == []
    assert get_featured_products([]) == []
    assert get_trending_products([]) == []
