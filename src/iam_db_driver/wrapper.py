"""IAM authentication driver wrapper.

This module provides IamAuthDriverWrapper, the public entry point. It accepts
connection URLs in its own scheme, mints an RDS IAM authentication token for
each connection attempt, injects the token as the password property and
forwards the request to a delegate driver resolved on first use.
"""

import logging
import threading
from collections.abc import Mapping, MutableMapping
from enum import Enum
from typing import Any

import structlog

from .auth_token import generate_auth_token
from .credentials import resolve_credential_source
from .driver import Driver, DriverPropertyInfo
from .driver_manager import DriverManager, driver_manager
from .exceptions import (
    ConfigurationError,
    DriverLoadError,
    InvalidUrlError,
    UnsupportedOperationError,
)
from .presets import GENERIC_PRESET, WrapperPreset
from .properties import ResolvedConfig, resolve_config
from .region import resolve_region
from .registry import DriverFactoryRegistry, default_registry
from .url import ParsedUrl, parse_url

# Get logger for this module
logger = structlog.get_logger(__name__)

UNKNOWN_VERSION = -1


class WrapperState(Enum):
    """Lifecycle of a wrapper's delegate driver binding."""

    UNBOUND = "unbound"
    BOUND = "bound"


class IamAuthDriverWrapper:
    """Driver that injects RDS IAM auth tokens before delegating connections.

    The delegate driver is resolved lazily, at most once per wrapper, from the
    ``delegateDriverClass`` option or the preset default. Once bound it is
    never replaced. Token generation is fail-open by default: if no token can
    be minted the connection is still attempted with the caller's password.
    """

    def __init__(
        self,
        preset: WrapperPreset = GENERIC_PRESET,
        *,
        driver_factories: DriverFactoryRegistry | None = None,
        manager: DriverManager | None = None,
        fail_open: bool = True,
    ) -> None:
        """Initialize the wrapper.

        Args:
            preset: Scheme, port and delegate defaults for this wrapper.
            driver_factories: Registry used to instantiate the delegate.
                Defaults to the process-wide registry.
            manager: Driver manager the delegate is registered with once
                bound. Defaults to the process-wide manager.
            fail_open: Whether to connect without a fresh token when token
                generation fails. When False the failure is raised.
        """
        self._preset = preset
        self._driver_factories = driver_factories or default_registry
        self._manager = manager or driver_manager
        self._fail_open = fail_open
        self._lock = threading.Lock()
        self._delegate: Driver | None = None
        self._delegate_scheme_name = preset.delegate_scheme_name

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(scheme={self._preset.scheme_name!r}, "
            f"delegate_scheme={self._delegate_scheme_name!r}, state={self.state.value})"
        )

    @property
    def preset(self) -> WrapperPreset:
        """The preset this wrapper was built with."""
        return self._preset

    @property
    def state(self) -> WrapperState:
        """Whether a delegate driver has been bound."""
        return WrapperState.UNBOUND if self._delegate is None else WrapperState.BOUND

    @property
    def delegate(self) -> Driver | None:
        """The bound delegate driver, if any."""
        return self._delegate

    @property
    def delegate_scheme_name(self) -> str | None:
        """The scheme wrapper URLs are rewritten to, once known."""
        return self._delegate_scheme_name

    def accepts_url(self, url: str) -> bool:
        """Return whether this wrapper handles the URL.

        Wrapper-scheme URLs are always accepted. Other URLs are accepted only
        when delegate URLs are enabled and the bound delegate accepts them.
        A best-effort delegate resolution is attempted; failures are logged
        and ignored.

        Raises:
            InvalidUrlError: If the URL is None.
        """
        if url is None:
            error_message = "Connection URL must not be None"
            raise InvalidUrlError(error_message)

        parsed = parse_url(url, self._preset.url_prefix)
        if parsed is None:
            return False

        self._try_resolve_delegate(None, parsed.query)

        if self._is_wrapper_scheme(parsed):
            return True

        delegate = self._delegate
        if delegate is not None and self._preset.accept_delegate_urls:
            return delegate.accepts_url(url)
        return False

    def connect(
        self, url: str, properties: MutableMapping[str, str] | None = None
    ) -> Any:
        """Open a connection through the delegate driver with an IAM token.

        The password property of ``properties`` is overwritten in place with
        the generated token.

        Args:
            url: Connection URL in the wrapper or delegate scheme.
            properties: Connection properties; updated in place.

        Returns:
            The delegate's connection, or None if the URL is not accepted.

        Raises:
            ConfigurationError: If no delegate driver or scheme is configured.
            DriverLoadError: If the delegate driver cannot be loaded.
        """
        parsed = parse_url(url, self._preset.url_prefix)
        if parsed is not None:
            # Caller properties may name the delegate before the URL does
            self._try_resolve_delegate(properties, parsed.query)

        if not self.accepts_url(url) or parsed is None:
            return None

        if properties is None:
            properties = {}

        config = resolve_config(properties, parsed.query, self._preset)

        delegate = self._resolve_delegate(config)
        delegate_scheme_name = self._resolve_delegate_scheme_name(config)

        token = self._generate_token(parsed, config)
        if token is not None:
            properties[config.password_property] = token

        connect_url = url
        if self._is_wrapper_scheme(parsed):
            connect_url = self._replace_scheme(url, delegate_scheme_name)

        logger.debug(
            "Forwarding connection to delegate driver",
            host=parsed.host,
            scheme=parsed.scheme,
            token_injected=token is not None,
        )
        return delegate.connect(connect_url, properties)

    def get_property_info(
        self, url: str, properties: MutableMapping[str, str] | None = None
    ) -> list[DriverPropertyInfo]:
        """Describe the delegate's connection properties for the URL."""
        parsed = parse_url(url, self._preset.url_prefix)
        if parsed is not None:
            self._try_resolve_delegate(properties, parsed.query)

        delegate = self._delegate
        if delegate is None:
            logger.warning("Delegate driver not resolved, no property info available")
            return []
        return delegate.get_property_info(url, properties)

    def get_major_version(self) -> int:
        """Return the delegate's major version, or UNKNOWN_VERSION if unbound."""
        delegate = self._delegate
        if delegate is None:
            logger.warning("Delegate driver not resolved, major version unknown")
            return UNKNOWN_VERSION
        return delegate.get_major_version()

    def get_minor_version(self) -> int:
        """Return the delegate's minor version, or UNKNOWN_VERSION if unbound."""
        delegate = self._delegate
        if delegate is None:
            logger.warning("Delegate driver not resolved, minor version unknown")
            return UNKNOWN_VERSION
        return delegate.get_minor_version()

    def is_compliant(self) -> bool:
        """Return the delegate's compliance flag, or False if unbound."""
        delegate = self._delegate
        if delegate is None:
            logger.warning("Delegate driver not resolved, reporting non-compliant")
            return False
        return delegate.is_compliant()

    def get_parent_logger(self) -> logging.Logger:
        """Return the delegate's parent logger.

        Raises:
            UnsupportedOperationError: If no delegate driver is bound yet.
        """
        delegate = self._delegate
        if delegate is None:
            error_message = "Parent logger unavailable before a delegate driver is resolved"
            raise UnsupportedOperationError(error_message, "get_parent_logger")
        return delegate.get_parent_logger()

    def _is_wrapper_scheme(self, parsed: ParsedUrl) -> bool:
        return (
            self._preset.scheme_name is not None
            and parsed.scheme == self._preset.scheme_name
        )

    def _replace_scheme(self, url: str, delegate_scheme_name: str | None) -> str:
        if delegate_scheme_name is None:
            error_message = "No delegate scheme name configured"
            raise ConfigurationError(error_message, "delegate_scheme")
        return url.replace(self._preset.scheme_name, delegate_scheme_name, 1)  # type: ignore[arg-type]

    def _try_resolve_delegate(
        self,
        properties: Mapping[str, str] | None,
        query_params: Mapping[str, str],
    ) -> None:
        """Resolve the delegate if possible, swallowing resolution failures."""
        if self._delegate is not None:
            return

        config = resolve_config(properties, query_params, self._preset)
        try:
            self._resolve_delegate(config)
        except ConfigurationError as e:
            logger.debug("Delegate driver not resolvable yet", error=e.message)
        except DriverLoadError as e:
            logger.warning(
                "Failed to load delegate driver",
                identifier=e.identifier,
                error=e.message,
                cause=str(e.__cause__) if e.__cause__ else None,
            )

    def _resolve_delegate(self, config: ResolvedConfig) -> Driver:
        """Bind the delegate driver on first use and return it."""
        delegate = self._delegate
        if delegate is not None:
            return delegate

        with self._lock:
            if self._delegate is not None:
                return self._delegate

            identifier = config.driver_class_name
            if identifier is None:
                error_message = "No delegate driver configured"
                raise ConfigurationError(error_message, "delegate_driver")

            delegate = self._driver_factories.create(identifier)
            self._delegate = delegate

        logger.info(
            "Bound delegate driver",
            identifier=identifier,
            wrapper_scheme=self._preset.scheme_name,
        )
        self._manager.register_driver(delegate)
        return delegate

    def _resolve_delegate_scheme_name(self, config: ResolvedConfig) -> str | None:
        """Fix the delegate scheme name on first use and return it."""
        if self._delegate_scheme_name is None and config.delegate_scheme_name:
            with self._lock:
                if self._delegate_scheme_name is None:
                    self._delegate_scheme_name = config.delegate_scheme_name
        return self._delegate_scheme_name

    def _generate_token(self, parsed: ParsedUrl, config: ResolvedConfig) -> str | None:
        """Mint an auth token, returning None on failure when fail-open."""
        try:
            host = self._host(parsed)
            port = self._port(parsed)
            region = resolve_region(config.region, config.profile)
            credentials = resolve_credential_source(config)
            return generate_auth_token(host, port, config.username, region, credentials)
        except Exception as e:
            if not self._fail_open:
                raise
            logger.warning(
                "IAM auth token generation failed, connecting without a fresh token",
                host=parsed.host,
                error_type=type(e).__name__,
                error=str(e),
            )
            return None

    def _host(self, parsed: ParsedUrl) -> str:
        if parsed.host is None:
            error_message = (
                "No database host specified. IAM auth requires a host in the URL."
            )
            raise ConfigurationError(error_message, "url")
        return parsed.host

    def _port(self, parsed: ParsedUrl) -> int:
        if parsed.port is not None:
            return parsed.port
        if self._preset.default_port is not None:
            return self._preset.default_port
        error_message = "No database port specified. IAM auth requires a port in the URL."
        raise ConfigurationError(error_message, "url")
