"""Translate Shopify payloads into catalog entries and update responses."""

from __future__ import annotations

from typing import TYPE_CHECKING

from toptagger.domain.model import CatalogEntry, FieldError, TagUpdateResponse

if TYPE_CHECKING:
    from .schema import ProductNode, ProductSearchData, ProductUpdatePayload, UserError


def parse_catalog_entry(node: ProductNode) -> CatalogEntry:
    return CatalogEntry(
        id=node.id,
        title=node.title,
        vendor=node.vendor,
        product_type=node.product_type,
        tags=tuple(node.tags),
    )


def parse_search_results(data: ProductSearchData) -> list[CatalogEntry]:
    return [parse_catalog_entry(edge.node) for edge in data.products.edges]


def parse_field_error(error: UserError) -> FieldError:
    return FieldError(message=error.message, field=tuple(error.field or ()))


def parse_update_response(payload: ProductUpdatePayload) -> TagUpdateResponse:
    product = payload.product
    return TagUpdateResponse(
        entry_id=product.id if product is not None else None,
        tags=tuple(product.tags) if product is not None else (),
        errors=tuple(parse_field_error(error) for error in payload.user_errors),
    )
