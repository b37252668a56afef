"""Base adapter for DB-API 2.0 delegate drivers.

This module provides DbApiDriver, which turns a delegate-scheme URL and
connection properties into keyword arguments for a DB-API module's
``connect`` function.
"""

import importlib
import logging
import re
from collections.abc import Mapping, MutableMapping
from types import ModuleType
from typing import Any

from iam_db_driver.config import load_settings
from iam_db_driver.driver import DriverPropertyInfo
from iam_db_driver.presets import DEFAULT_PASSWORD_PROPERTY, DEFAULT_USER_PROPERTY
from iam_db_driver.properties import WRAPPER_OPTION_NAMES
from iam_db_driver.url import ParsedUrl, parse_url

_VERSION_PART = re.compile(r"\d+")


class DbApiDriver:
    """Driver adapter around a DB-API 2.0 module.

    Subclasses set the URL scheme they own, the module to import and the
    keyword the module expects for the database name.
    """

    scheme_name: str = ""
    module_name: str = ""
    database_keyword: str = "database"

    def __init__(
        self,
        url_prefix: str | None = None,
        *,
        user_property: str = DEFAULT_USER_PROPERTY,
        password_property: str = DEFAULT_PASSWORD_PROPERTY,
    ) -> None:
        """Initialize the adapter and import the underlying module.

        Args:
            url_prefix: Connectivity prefix accepted URLs start with. If None,
                the prefix from the process settings is used.
            user_property: Property holding the database user. Must match the
                wrapper preset that forwards to this adapter.
            password_property: Property holding the password or IAM token.

        Raises:
            ImportError: If the underlying DB-API module is not installed.
        """
        self._url_prefix = url_prefix or load_settings().url_prefix
        self._user_property = user_property
        self._password_property = password_property
        self._module: ModuleType = importlib.import_module(self.module_name)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(scheme={self.scheme_name!r})"

    def accepts_url(self, url: str) -> bool:
        """Return whether the URL uses this adapter's scheme."""
        parsed = parse_url(url, self._url_prefix)
        return parsed is not None and parsed.scheme == self.scheme_name

    def connect(
        self, url: str, properties: MutableMapping[str, str] | None = None
    ) -> Any:
        """Open a connection with the underlying module.

        Returns:
            A DB-API connection, or None if the URL is not for this adapter.
        """
        parsed = parse_url(url, self._url_prefix)
        if parsed is None or parsed.scheme != self.scheme_name:
            return None
        kwargs = self.build_connect_kwargs(parsed, properties or {})
        return self._module.connect(**kwargs)

    def build_connect_kwargs(
        self, parsed: ParsedUrl, properties: Mapping[str, str]
    ) -> dict[str, Any]:
        """Translate a parsed URL and properties into ``connect`` arguments.

        Host, port and database come from the URL; user and password from the
        configured properties. Query parameters that are not wrapper options are passed
        through unchanged.
        """
        kwargs: dict[str, Any] = {}
        if parsed.host:
            kwargs["host"] = parsed.host
        if parsed.port is not None:
            kwargs["port"] = parsed.port
        if parsed.database:
            kwargs[self.database_keyword] = parsed.database
        for keyword, name in (
            ("user", self._user_property),
            ("password", self._password_property),
        ):
            value = properties.get(name)
            if value is not None:
                kwargs[keyword] = value
        for key, value in parsed.query.items():
            if key not in WRAPPER_OPTION_NAMES:
                kwargs.setdefault(key, value)
        return kwargs

    def get_property_info(
        self, url: str, properties: MutableMapping[str, str] | None = None
    ) -> list[DriverPropertyInfo]:
        """Describe the connection properties the adapter uses."""
        parsed = parse_url(url, self._url_prefix)
        properties = properties or {}
        return [
            DriverPropertyInfo(
                name="host",
                value=parsed.host if parsed else None,
                description="Database server hostname",
                required=True,
            ),
            DriverPropertyInfo(
                name="port",
                value=str(parsed.port) if parsed and parsed.port is not None else None,
                description="Database server port",
            ),
            DriverPropertyInfo(
                name=self.database_keyword,
                value=parsed.database if parsed else None,
                description="Database name",
            ),
            DriverPropertyInfo(
                name="user",
                value=properties.get(self._user_property),
                description="Database user",
                required=True,
            ),
            DriverPropertyInfo(name="password", description="Database password"),
        ]

    def get_major_version(self) -> int:
        return self._version_parts()[0]

    def get_minor_version(self) -> int:
        return self._version_parts()[1]

    def is_compliant(self) -> bool:
        return getattr(self._module, "apilevel", None) == "2.0"

    def get_parent_logger(self) -> logging.Logger:
        return logging.getLogger(self.module_name)

    def _version_parts(self) -> tuple[int, int]:
        version = str(getattr(self._module, "__version__", ""))
        parts = [int(part) for part in _VERSION_PART.findall(version)[:2]]
        parts.extend([0] * (2 - len(parts)))
        return parts[0], parts[1]
