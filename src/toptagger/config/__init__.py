"""Application configuration helpers."""

from __future__ import annotations

from .env import optional_env_var, require_env_vars
from .errors import ConfigurationError, MissingConfigurationError
from .http_resilience import RateLimit, ResilienceConfig, RetryPolicy
from .logging import configure_logging
from .shopify import ShopifyConfig, get_shopify_config
from .tagging import TaggingConfig, get_tagging_config

__all__ = [
    "ConfigurationError",
    "MissingConfigurationError",
    "RateLimit",
    "ResilienceConfig",
    "RetryPolicy",
    "ShopifyConfig",
    "TaggingConfig",
    "configure_logging",
    "get_shopify_config",
    "get_tagging_config",
    "optional_env_var",
    "require_env_vars",
]
