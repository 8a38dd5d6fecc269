"""Shopify Admin API configuration values."""

from __future__ import annotations

from dataclasses import dataclass

from .env import optional_env_var, require_env_vars
from .http_resilience import RateLimit, ResilienceConfig, RetryPolicy

DEFAULT_SHOPIFY_API_VERSION = "2024-04"
SHOPIFY_TIMEOUT_SECONDS = 30.0
SHOPIFY_ACCESS_TOKEN_HEADER = "X-Shopify-Access-Token"


@dataclass(frozen=True)
class ShopifyConfig:
    """Holds Shopify Admin GraphQL API configuration values."""

    shop_name: str
    access_token: str
    resilience: ResilienceConfig
    api_version: str = DEFAULT_SHOPIFY_API_VERSION

    @property
    def endpoint(self) -> str:
        return shopify_graphql_endpoint(self.shop_name, self.api_version)

    def __repr__(self) -> str:
        return (
            f"ShopifyConfig(shop_name={self.shop_name!r}, api_version={self.api_version!r}, "
            "access_token='***')"
        )


def shopify_graphql_endpoint(shop_name: str, api_version: str) -> str:
    return f"https://{shop_name}.myshopify.com/admin/api/{api_version}/graphql.json"


def build_shopify_resilience(access_token: str, *, endpoint: str) -> ResilienceConfig:
    return ResilienceConfig(
        name="shopify",
        base_url=endpoint,
        timeout_seconds=SHOPIFY_TIMEOUT_SECONDS,
        retry=RetryPolicy(total=3),
        ratelimit=RateLimit(max_calls=2, per_seconds=1.0),
        default_headers={
            SHOPIFY_ACCESS_TOKEN_HEADER: access_token,
            "Content-Type": "application/json",
        },
    )


def get_shopify_config(*, resilience: ResilienceConfig | None = None) -> ShopifyConfig:
    values = require_env_vars(("SHOPIFY_SHOP_NAME", "SHOPIFY_ACCESS_TOKEN"))
    shop_name = values["SHOPIFY_SHOP_NAME"]
    access_token = values["SHOPIFY_ACCESS_TOKEN"]
    api_version = optional_env_var("SHOPIFY_API_VERSION", DEFAULT_SHOPIFY_API_VERSION)
    return ShopifyConfig(
        shop_name=shop_name,
        access_token=access_token,
        api_version=api_version,
        resilience=resilience
        or build_shopify_resilience(
            access_token,
            endpoint=shopify_graphql_endpoint(shop_name, api_version),
        ),
    )
