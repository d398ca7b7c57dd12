"""Pydantic models for catalog records and request/response payloads."""
from __future__ import annotations

from enum import Enum
from typing import Annotated, Literal, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator
from pydantic.alias_generators import to_camel


class CatalogModel(BaseModel):
    """Immutable record that reads and writes the store's camelCase JSON."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)


class ProductTag(str, Enum):
    BEST_SELLER = "best-seller"
    NEW_ARRIVAL = "new-arrival"
    TRENDING = "trending"
    LIMITED_EDITION = "limited-edition"


class StoreAvailability(CatalogModel):
    hyderabad: bool = False
    vizag: bool = False
    warangal: bool = False


# Records stored without ``availableAt`` are only stocked at the flagship store.
DEFAULT_AVAILABILITY = StoreAvailability(hyderabad=True)


class Product(CatalogModel):
    id: int
    name: str
    description: str = ""
    category_id: int
    subcategory_id: int
    price: float = Field(..., ge=0)
    discount_price: float | None = Field(default=None, ge=0)
    rating: float = Field(default=0.0, ge=0, le=5)
    reviews: int = Field(default=0, ge=0)
    tags: frozenset[ProductTag] = frozenset()
    stock: int = Field(default=0, ge=0)
    image: str | None = None
    features: tuple[str, ...] = ()
    available_at: StoreAvailability | None = None

    @field_validator("tags", mode="before")
    @classmethod
    def _missing_tags_are_empty(cls, value):
        return frozenset() if value is None else value

    @field_validator("description", mode="before")
    @classmethod
    def _missing_description_is_empty(cls, value):
        return "" if value is None else value

    @model_validator(mode="after")
    def _discount_not_above_price(self) -> "Product":
        if self.discount_price is not None and self.discount_price > self.price:
            raise ValueError("discountPrice must not exceed price")
        return self

    def has_tag(self, tag: ProductTag) -> bool:
        return tag in self.tags


class Subcategory(CatalogModel):
    id: int
    name: str
    image: str | None = None
    product_count: int = 0
    available_at: StoreAvailability | None = None


class Category(CatalogModel):
    id: int
    name: str
    icon_name: str | None = None
    image: str | None = None
    description: str = ""
    subcategories: tuple[Subcategory, ...] = ()
    available_at: StoreAvailability | None = None

    def find_subcategory(self, subcategory_id: int) -> Subcategory | None:
        for subcategory in self.subcategories:
            if subcategory.id == subcategory_id:
                return subcategory
        return None


class FilterSet(CatalogModel):
    """Optional conjunctive constraints; ``None`` or empty means unconstrained."""

    category_id: int | None = None
    min_price: float | None = None
    max_price: float | None = None
    min_rating: float | None = None
    tags: tuple[ProductTag, ...] = ()


class ProductSuggestion(CatalogModel):
    kind: Literal["product"] = "product"
    id: int
    name: str
    image: str | None = None


class CategorySuggestion(CatalogModel):
    kind: Literal["category"] = "category"
    id: int
    name: str


SuggestionEntry = Annotated[Union[ProductSuggestion, CategorySuggestion], Field(discriminator="kind")]


class SearchResponse(CatalogModel):
    query: str
    results: list[Product]
    total: int
    took_ms: float


class ProductListResponse(CatalogModel):
    results: list[Product]
    total: int


class SuggestionResponse(CatalogModel):
    query: str
    suggestions: list[SuggestionEntry]


class HealthResponse(CatalogModel):
    elasticsearch: str | None
    product_index: str
    empty: bool
