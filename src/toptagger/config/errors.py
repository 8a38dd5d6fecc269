"""Errors raised while assembling run configuration."""

from __future__ import annotations


class ConfigurationError(RuntimeError):
    """Base class for configuration problems detected before a run starts."""


class MissingConfigurationError(ConfigurationError):
    """Raised when a required setting, such as the Shopify access token, is absent or blank."""
