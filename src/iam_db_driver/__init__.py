"""IAM authentication wrapper for database drivers.

Connections opened through IamAuthDriverWrapper authenticate with short-lived
RDS IAM tokens derived from the AWS credential chain instead of a stored
password.
"""

from .driver import Driver, DriverPropertyInfo
from .driver_manager import DriverManager, driver_manager
from .exceptions import (
    ConfigurationError,
    DriverLoadError,
    IamDriverError,
    InvalidUrlError,
    TokenGenerationError,
    UnsupportedOperationError,
)
from .presets import GENERIC_PRESET, MYSQL_PRESET, POSTGRESQL_PRESET, WrapperPreset
from .registration import initialise_driver_registration
from .registry import DriverFactoryRegistry, default_registry, register_driver_factory
from .wrapper import UNKNOWN_VERSION, IamAuthDriverWrapper, WrapperState

__all__ = [
    "GENERIC_PRESET",
    "MYSQL_PRESET",
    "POSTGRESQL_PRESET",
    "UNKNOWN_VERSION",
    "ConfigurationError",
    "Driver",
    "DriverFactoryRegistry",
    "DriverLoadError",
    "DriverManager",
    "DriverPropertyInfo",
    "IamAuthDriverWrapper",
    "IamDriverError",
    "InvalidUrlError",
    "TokenGenerationError",
    "UnsupportedOperationError",
    "WrapperPreset",
    "WrapperState",
    "default_registry",
    "driver_manager",
    "initialise_driver_registration",
    "register_driver_factory",
]
