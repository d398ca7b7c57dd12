"""Tests for snapshot loading, store narrowing and the seed file importer."""

import json

from catalog_search.catalog import CatalogSnapshot, filter_by_store, is_available_at_store
from catalog_search.importer import flatten_catalog, load_catalog_file

SEED = [
    {
        "id": 1,
        "name": "Trophies",
        "iconName": "Award",
        "subcategories": [
            {
                "id": 101,
                "name": "Sports Trophies",
                "products": [
                    {"id": 1001, "name": "Golden Champion Trophy", "price": 7499, "rating": 4.8, "tags": ["best-seller"]},
                    {"id": 1002, "name": "Silver Star Trophy", "price": 5499, "rating": 4.6, "subcategoryId": 102},
                ],
            }
        ],
    }
]


def test_products_without_availability_are_flagship_only(make_product):
    product = make_product(1, "Cup")

    assert is_available_at_store(product, "hyderabad")
    assert not is_available_at_store(product, "vizag")
    assert is_available_at_store(product, None)


def test_filter_by_store(snapshot):
    assert [p.id for p in filter_by_store(snapshot.products, "vizag")] == [4]
    assert filter_by_store(snapshot.products, None) == snapshot.products
    assert filter_by_store(snapshot.products, "mars") == []


def test_flatten_catalog_inherits_parent_ids():
    flattened = flatten_catalog(SEED)

    assert [p.id for p in flattened.products] == [1001, 1002]
    assert flattened.products[0].category_id == 1
    assert flattened.products[0].subcategory_id == 101
    assert flattened.products[1].subcategory_id == 102
    assert flattened.categories[0].subcategories[0].name == "Sports Trophies"


def test_snapshot_payload_survives_json(snapshot):
    payload = json.loads(json.dumps(snapshot.to_payload()))

    restored = CatalogSnapshot.from_payload(payload)

    assert restored == snapshot


def test_load_catalog_file_accepts_wrapped_and_bare_lists(tmp_path):
    wrapped = tmp_path / "wrapped.json"
    wrapped.write_text(json.dumps({"categories": SEED}), encoding="utf-8")
    bare = tmp_path / "bare.json"
    bare.write_text(json.dumps(SEED), encoding="utf-8")

    assert len(load_catalog_file(wrapped).products) == 2
    assert len(load_catalog_file(bare).products) == 2


def test_missing_or_lfs_catalog_file_is_empty(tmp_path):
    pointer = tmp_path / "catalog.json"
    pointer.write_text("version https://git-lfs.github.com/spec/v1\noid sha256:abc\n", encoding="utf-8")

    assert load_catalog_file(tmp_path / "absent.json") == CatalogSnapshot()
    assert load_catalog_file(pointer) == CatalogSnapshot()
