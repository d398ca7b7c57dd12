"""Shared catalog fixtures."""

import pytest

from catalog_search.catalog import CatalogSnapshot
from catalog_search.models import Category, Product, Subcategory


@pytest.fixture
def make_product():
    def _make(id, name, **overrides):
        data = {
            "id": id,
            "name": name,
            "category_id": 1,
            "subcategory_id": 101,
            "price": 100.0,
            "rating": 4.0,
        }
        data.update(overrides)
        return Product(**data)

    return _make


@pytest.fixture
def categories():
    return [
        Category(
            id=1,
            name="Trophies",
            subcategories=(Subcategory(id=101, name="Sports Trophies"), Subcategory(id=102, name="Academic Awards")),
        ),
        Category(id=2, name="Medals", subcategories=(Subcategory(id=201, name="Gold Medals"),)),
        Category(id=4, name="Home Decor", subcategories=(Subcategory(id=401, name="Vases & Planters"),)),
    ]


@pytest.fixture
def snapshot(make_product, categories):
    products = [
        make_product(1, "Golden Trophy", rating=4.8, reviews=120, price=5999, tags=["best-seller"]),
        make_product(2, "Silver Trophy", rating=4.9, reviews=40, price=4999),
        make_product(3, "Bronze Cup", rating=4.2, price=1999, tags=["trending"], description="Bronze trophy cup"),
        make_product(
            4,
            "Premium Gold Medal Set",
            category_id=2,
            subcategory_id=201,
            rating=4.6,
            price=2499,
            discount_price=1999,
            tags=["best-seller", "new-arrival"],
            available_at={"hyderabad": True, "vizag": True, "warangal": True},
        ),
        make_product(5, "Ceramic Vase", category_id=4, subcategory_id=401, rating=3.9, price=7499, tags=["limited-edition"]),
    ]
    return CatalogSnapshot(products=products, categories=categories)
