from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

from tests.support.runs import RecordingSleep
from toptagger.config import (
    RateLimit,
    ResilienceConfig,
    RetryPolicy,
    ShopifyConfig,
    TaggingConfig,
)

if TYPE_CHECKING:
    from pathlib import Path

SHOPIFY_ENDPOINT = "https://example-shop.myshopify.com/admin/api/2024-04/graphql.json"


@pytest.fixture
def recording_sleep() -> RecordingSleep:
    return RecordingSleep()


@pytest.fixture
def shopify_config() -> ShopifyConfig:
    return ShopifyConfig(
        shop_name="example-shop",
        access_token="shpat_test",  # noqa: S106
        resilience=ResilienceConfig(
            name="shopify-test",
            base_url=SHOPIFY_ENDPOINT,
            retry=RetryPolicy(total=0),
            ratelimit=RateLimit(max_calls=100, per_seconds=1.0),
            default_headers={"X-Shopify-Access-Token": "shpat_test"},
        ),
    )


@pytest.fixture
def tagging_config(tmp_path: Path) -> TaggingConfig:
    return TaggingConfig(
        pacing_seconds=0.0,
        input_path=tmp_path / "best sellers.csv",
        report_dir=tmp_path / "reports",
    )
