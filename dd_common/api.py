"""Public API surface for dd_common."""

from dd_common.config import env_flag, parse_bool_env, parse_int_env
from dd_common.errors import (
    ConfigurationError,
    DataLoadError,
    DDError,
    error_to_payload,
    wrap_error,
)
from dd_common.logging import configure_logging

__all__ = [
    "configure_logging",
    "ConfigurationError",
    "DataLoadError",
    "DDError",
    "env_flag",
    "error_to_payload",
    "parse_bool_env",
    "parse_int_env",
    "wrap_error",
]
