"""Shared helpers for dropdowns-py."""

from dd_common.api import ConfigurationError, DDError, configure_logging

__all__ = ["configure_logging", "ConfigurationError", "DDError"]
