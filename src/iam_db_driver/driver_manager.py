"""Process-wide driver registry.

This module keeps the ordered list of drivers available to the process and
routes connection requests to the first driver that accepts a URL.
"""

import threading
from collections.abc import Callable, Iterable, MutableMapping
from typing import Any

import structlog

from .driver import Driver
from .exceptions import ConfigurationError

# Get logger for this module
logger = structlog.get_logger(__name__)


class DriverManager:
    """Thread-safe, ordered registry of drivers."""

    def __init__(self) -> None:
        """Initialize an empty driver manager."""
        self._drivers: list[Driver] = []
        self._lock = threading.Lock()
        self._initial_drivers: tuple[Driver, ...] | None = None

    def register_driver(self, driver: Driver) -> bool:
        """Register a driver; registering the same instance again is a no-op.

        Returns:
            True if the driver was added, False if it was already registered.
        """
        with self._lock:
            if any(registered is driver for registered in self._drivers):
                return False
            self._drivers.append(driver)
        logger.debug("Registered driver", driver=repr(driver))
        return True

    def deregister_driver(self, driver: Driver) -> bool:
        """Remove a driver; returns False if it was not registered."""
        with self._lock:
            for index, registered in enumerate(self._drivers):
                if registered is driver:
                    del self._drivers[index]
                    return True
        return False

    def get_drivers(self) -> list[Driver]:
        """Return a snapshot of the registered drivers, in registration order."""
        with self._lock:
            return list(self._drivers)

    def get_driver(self, url: str) -> Driver:
        """Return the first registered driver that accepts the URL.

        Raises:
            ConfigurationError: If no registered driver accepts the URL.
        """
        for driver in self.get_drivers():
            if driver.accepts_url(url):
                return driver
        error_message = "No suitable driver found for URL"
        raise ConfigurationError(error_message, "driver_manager")

    def connect(
        self, url: str, properties: MutableMapping[str, str] | None = None
    ) -> Any:
        """Connect through the first accepting driver that returns a connection.

        Args:
            url: Connection URL.
            properties: Connection properties handed to the driver.

        Returns:
            The connection returned by the driver.

        Raises:
            ConfigurationError: If no registered driver handles the URL.
        """
        for driver in self.get_drivers():
            if not driver.accepts_url(url):
                continue
            connection = driver.connect(url, properties)
            if connection is not None:
                return connection
        error_message = "No suitable driver found for URL"
        raise ConfigurationError(error_message, "driver_manager")

    def initialise(
        self, create_drivers: Callable[[], Iterable[Driver]]
    ) -> tuple[Driver, ...]:
        """Register the drivers produced by ``create_drivers`` exactly once.

        Later calls return the drivers registered by the first call.
        """
        with self._lock:
            if self._initial_drivers is None:
                self._initial_drivers = tuple(create_drivers())
                self._drivers.extend(
                    driver
                    for driver in self._initial_drivers
                    if not any(driver is registered for registered in self._drivers)
                )
                logger.info(
                    "Initialised driver registration",
                    drivers=[repr(driver) for driver in self._initial_drivers],
                )
            return self._initial_drivers


# Process-wide driver manager
driver_manager = DriverManager()
