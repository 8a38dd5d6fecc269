"""Public interface for the Shopify adapter."""

from __future__ import annotations

from .client import SEARCH_QUERY, UPDATE_TAGS_MUTATION, ShopifyAPIError, ShopifyCatalog
from .schema import ProductNode, ProductUpdatePayload
from .translator import parse_catalog_entry, parse_update_response

__all__ = [
    "SEARCH_QUERY",
    "UPDATE_TAGS_MUTATION",
    "ProductNode",
    "ProductUpdatePayload",
    "ShopifyAPIError",
    "ShopifyCatalog",
    "parse_catalog_entry",
    "parse_update_response",
]
