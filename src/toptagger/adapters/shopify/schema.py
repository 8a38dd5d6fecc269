"""Pydantic models describing the Shopify Admin GraphQL payloads."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, field_validator


def _list_or_empty(value: object) -> object:
    if isinstance(value, list):
        return value
    return []


class ShopifyBaseModel(BaseModel):
    model_config = ConfigDict(extra="ignore", populate_by_name=True)


class ProductNode(ShopifyBaseModel):
    id: str
    title: str = ""
    vendor: str = ""
    product_type: str = Field(default="", alias="productType")
    tags: list[str] = Field(default_factory=list[str])

    _normalize_tags = field_validator("tags", mode="before")(_list_or_empty)

    @field_validator("title", "vendor", "product_type", mode="before")
    @classmethod
    def _none_to_blank(cls, value: object) -> object:
        return "" if value is None else value


class ProductEdge(ShopifyBaseModel):
    node: ProductNode


class ProductConnection(ShopifyBaseModel):
    edges: list[ProductEdge] = Field(default_factory=list[ProductEdge])


class ProductSearchData(ShopifyBaseModel):
    products: ProductConnection


class UserError(ShopifyBaseModel):
    field: list[str] | None = None
    message: str


class UpdatedProduct(ShopifyBaseModel):
    id: str
    tags: list[str] = Field(default_factory=list[str])

    _normalize_tags = field_validator("tags", mode="before")(_list_or_empty)


class ProductUpdatePayload(ShopifyBaseModel):
    product: UpdatedProduct | None = None
    user_errors: list[UserError] = Field(default_factory=list[UserError], alias="userErrors")


class ProductUpdateData(ShopifyBaseModel):
    product_update: ProductUpdatePayload = Field(alias="productUpdate")


class GraphQLError(ShopifyBaseModel):
    message: str


class GraphQLEnvelope(ShopifyBaseModel):
    """Top level ``{"data": ..., "errors": [...]}`` response body."""

    data: dict[str, object] | None = None
    errors: list[GraphQLError] = Field(default_factory=list[GraphQLError])

    @field_validator("errors", mode="before")
    @classmethod
    def _none_to_empty(cls, value: object) -> object:
        return [] if value is None else value
