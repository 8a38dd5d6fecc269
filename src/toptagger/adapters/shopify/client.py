"""GraphQL client for the Shopify Admin API."""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from logging import getLogger
from typing import TYPE_CHECKING, Final

import httpx
from pydantic import ValidationError

from toptagger.adapters.http_resilience import ResilientClient
from toptagger.domain.errors import CatalogError

from .schema import GraphQLEnvelope, ProductSearchData, ProductUpdateData
from .translator import parse_search_results, parse_update_response

if TYPE_CHECKING:
    from collections.abc import Callable, Sequence
    from types import TracebackType

    from toptagger.adapters.http_resilience import ResilienceConfig
    from toptagger.config.shopify import ShopifyConfig
    from toptagger.domain.model import CatalogEntry, TagUpdateResponse

log = getLogger(__name__)

SEARCH_QUERY: Final = """
query searchProducts($searchQuery: String!, $first: Int!) {
  products(first: $first, query: $searchQuery) {
    edges {
      node {
        id
        title
        vendor
        productType
        tags
      }
    }
  }
}
"""

UPDATE_TAGS_MUTATION: Final = """
mutation productUpdate($input: ProductInput!) {
  productUpdate(input: $input) {
    product {
      id
      tags
    }
    userErrors {
      field
      message
    }
  }
}
"""


def _default_client_factory(config: ResilienceConfig) -> ResilientClient:
    return ResilientClient(config)


class ShopifyAPIError(CatalogError):
    """Raised when a Shopify call fails at the HTTP or GraphQL layer."""

    def __init__(self, message: str, *, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code


@dataclass(slots=True)
class ShopifyCatalog:
    """Catalog service backed by the Shopify Admin GraphQL API.

    One HTTP session is opened on ``async with`` and reused for every call until exit.
    """

    config: ShopifyConfig
    client_factory: Callable[[ResilienceConfig], ResilientClient] = field(
        default=_default_client_factory
    )
    _client: ResilientClient | None = field(default=None, init=False, repr=False)

    async def __aenter__(self) -> ShopifyCatalog:
        self._client = self.client_factory(self.config.resilience)
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        client, self._client = self._client, None
        if client is not None:
            await client.aclose()

    async def search(self, query: str, *, limit: int) -> list[CatalogEntry]:
        data = await self._execute(SEARCH_QUERY, {"searchQuery": query, "first": limit})
        try:
            parsed = ProductSearchData.model_validate(data)
        except ValidationError as exc:
            raise ShopifyAPIError(f"Unexpected product search payload: {exc}") from exc
        return parse_search_results(parsed)

    async def update_tags(self, entry_id: str, tags: Sequence[str]) -> TagUpdateResponse:
        variables = {"input": {"id": entry_id, "tags": list(tags)}}
        data = await self._execute(UPDATE_TAGS_MUTATION, variables)
        try:
            parsed = ProductUpdateData.model_validate(data)
        except ValidationError as exc:
            raise ShopifyAPIError(f"Unexpected product update payload: {exc}") from exc
        return parse_update_response(parsed.product_update)

    async def _execute(self, query: str, variables: dict[str, object]) -> dict[str, object]:
        client = self._require_client()
        log.debug("Shopify request variables: %s", variables)
        try:
            response = await client.post(
                self.config.endpoint,
                json={"query": query, "variables": variables},
            )
            response.raise_for_status()
        except httpx.HTTPStatusError as exc:
            raise ShopifyAPIError(
                f"Shopify returned HTTP {exc.response.status_code}",
                status_code=exc.response.status_code,
            ) from exc
        except httpx.HTTPError as exc:
            raise ShopifyAPIError(f"Shopify request failed: {exc}") from exc

        try:
            envelope = GraphQLEnvelope.model_validate(response.json())
        except (json.JSONDecodeError, ValidationError) as exc:
            raise ShopifyAPIError("Unexpected Shopify response payload") from exc
        log.debug("Shopify response data: %s", envelope.data)

        if envelope.errors:
            message = "; ".join(error.message for error in envelope.errors)
            log.error("Shopify GraphQL error: %s", message)
            raise ShopifyAPIError(message)
        if envelope.data is None:
            raise ShopifyAPIError("Shopify response carried no data")
        return envelope.data

    def _require_client(self) -> ResilientClient:
        if self._client is None:
            raise RuntimeError("ShopifyCatalog must be used inside 'async with'")
        return self._client
