"""Process settings using environ-config.

This module defines the process-level settings read from environment
variables. Per-connection options are read from the URL and connection
properties instead.

Environment Variables:
    IAM_DB_DRIVER_LOG_LEVEL: Log level for structlog. Default: "INFO"
    IAM_DB_DRIVER_DEV_MODE: Use the console renderer instead of JSON. Default: false
    IAM_DB_DRIVER_CONFIGURE_LOGGING: Configure structlog during driver
        registration. Default: false
    IAM_DB_DRIVER_URL_PREFIX: Connectivity prefix of registered wrappers. Default: "jdbc:"
"""

import os
from collections.abc import Mapping

import environ

from .url import DEFAULT_URL_PREFIX


@environ.config(prefix="IAM_DB_DRIVER")
class DriverSettings:
    """Process-level settings for the IAM driver wrapper."""

    log_level: str = environ.var(default="INFO", help="Log level")
    dev_mode: bool = environ.bool_var(
        default=False, help="Enable development mode logging"
    )
    configure_logging: bool = environ.bool_var(
        default=False, help="Configure structlog when registering drivers"
    )
    url_prefix: str = environ.var(
        default=DEFAULT_URL_PREFIX, help="Connectivity prefix of wrapper URLs"
    )


def load_settings(env: Mapping[str, str] | None = None) -> DriverSettings:
    """Load settings from environment variables.

    Args:
        env: Mapping to read from. If None, uses os.environ.

    Returns:
        DriverSettings populated from the environment.
    """
    return environ.to_config(DriverSettings, environ=os.environ if env is None else env)
