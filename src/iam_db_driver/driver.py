"""Driver capability contract.

This module defines the Driver protocol implemented by the IAM wrapper and by
every delegate driver it forwards to, plus the property descriptor returned by
property introspection.
"""

import logging
from collections.abc import MutableMapping
from dataclasses import dataclass
from typing import Any, Protocol, runtime_checkable


@dataclass(frozen=True)
class DriverPropertyInfo:
    """Description of one connection property a driver understands."""

    name: str
    value: str | None = None
    description: str | None = None
    required: bool = False
    choices: tuple[str, ...] | None = None


@runtime_checkable
class Driver(Protocol):
    """Interface for database drivers."""

    def accepts_url(self, url: str) -> bool:
        """Return whether the driver can open connections for the URL."""
        ...

    def connect(
        self, url: str, properties: MutableMapping[str, str] | None = None
    ) -> Any:
        """Open a connection, or return None if the URL is not for this driver."""
        ...

    def get_property_info(
        self, url: str, properties: MutableMapping[str, str] | None = None
    ) -> list[DriverPropertyInfo]:
        """Describe the properties the driver accepts for the URL."""
        ...

    def get_major_version(self) -> int:
        """Return the driver's major version."""
        ...

    def get_minor_version(self) -> int:
        """Return the driver's minor version."""
        ...

    def is_compliant(self) -> bool:
        """Return whether the driver is a fully compliant DB-API 2.0 driver."""
        ...

    def get_parent_logger(self) -> logging.Logger:
        """Return the logger the driver's library logs through."""
        ...
