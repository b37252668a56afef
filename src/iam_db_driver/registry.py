"""Delegate driver factory registry.

This module maps driver identifiers to constructor functions. Applications
register the identifiers they use; identifiers that are not registered are
treated as import paths (``package.module:Name`` or ``package.module.Name``)
and loaded dynamically.
"""

import importlib
import threading
from collections.abc import Callable

import structlog

from .driver import Driver
from .exceptions import DriverLoadError

# Get logger for this module
logger = structlog.get_logger(__name__)

DriverFactory = Callable[[], Driver]


class DriverFactoryRegistry:
    """Registry of delegate driver constructors keyed by identifier."""

    def __init__(self) -> None:
        """Initialize an empty registry."""
        self._factories: dict[str, DriverFactory] = {}
        self._lock = threading.Lock()

    def register(self, identifier: str, factory: DriverFactory) -> None:
        """Register a driver factory under an identifier."""
        with self._lock:
            self._factories[identifier] = factory
        logger.debug("Registered driver factory", identifier=identifier)

    def unregister(self, identifier: str) -> None:
        """Remove a driver factory; unknown identifiers are ignored."""
        with self._lock:
            self._factories.pop(identifier, None)

    def list_identifiers(self) -> list[str]:
        """List all registered identifiers."""
        with self._lock:
            return list(self._factories.keys())

    def get_factory(self, identifier: str) -> DriverFactory:
        """Return the factory for an identifier.

        Registered factories are used first; otherwise the identifier is
        imported as a dotted path.

        Raises:
            DriverLoadError: If the identifier cannot be imported.
        """
        with self._lock:
            factory = self._factories.get(identifier)
        if factory is not None:
            return factory
        return _import_factory(identifier)

    def create(self, identifier: str) -> Driver:
        """Instantiate the driver for an identifier.

        Args:
            identifier: Registered identifier or import path of the driver.

        Returns:
            A new driver instance.

        Raises:
            DriverLoadError: If the driver cannot be loaded or instantiated.
        """
        factory = self.get_factory(identifier)
        try:
            driver = factory()
        except Exception as e:
            error_message = f"Unable to instantiate delegate driver '{identifier}'"
            raise DriverLoadError(error_message, identifier) from e

        logger.info(
            "Loaded delegate driver",
            identifier=identifier,
            driver_type=type(driver).__name__,
        )
        return driver


def _import_factory(identifier: str) -> DriverFactory:
    """Import the callable named by a ``module:attr`` or ``module.attr`` path."""
    if ":" in identifier:
        module_name, _, attr_path = identifier.partition(":")
    else:
        module_name, _, attr_path = identifier.rpartition(".")

    if not module_name or not attr_path:
        error_message = f"Unknown delegate driver identifier '{identifier}'"
        raise DriverLoadError(error_message, identifier)

    try:
        target: object = importlib.import_module(module_name)
        for attr in attr_path.split("."):
            target = getattr(target, attr)
    except Exception as e:
        # Relative paths raise TypeError; module bodies can raise anything
        error_message = f"Unable to load delegate driver '{identifier}'"
        raise DriverLoadError(error_message, identifier) from e

    if not callable(target):
        error_message = f"Delegate driver '{identifier}' is not callable"
        raise DriverLoadError(error_message, identifier)
    return target  # type: ignore[return-value]


# Process-wide default registry
default_registry = DriverFactoryRegistry()


def register_driver_factory(identifier: str, factory: DriverFactory) -> None:
    """Register a driver factory with the default registry."""
    default_registry.register(identifier, factory)
