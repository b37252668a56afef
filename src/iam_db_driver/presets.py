"""Scheme presets for the IAM authentication wrapper.

A preset fixes the wrapper scheme, the delegate scheme, the default port and
the delegate driver identifier for one database flavour. Presets are plain
values composed into ``IamAuthDriverWrapper``.
"""

from dataclasses import dataclass, replace

from .url import DEFAULT_URL_PREFIX

DEFAULT_PASSWORD_PROPERTY = "password"
DEFAULT_USER_PROPERTY = "user"


@dataclass(frozen=True)
class WrapperPreset:
    """Configuration of one wrapper flavour.

    Attributes:
        scheme_name: URL scheme owned by the wrapper, e.g. ``iammysql``.
            None for the generic, scheme-less wrapper.
        delegate_scheme_name: Scheme the wrapper scheme is rewritten to.
        default_port: Port used when the URL does not carry one.
        driver_class_name: Identifier of the delegate driver to load.
        accept_delegate_urls: Whether URLs in the delegate's own scheme are
            accepted and passed through unchanged.
        password_property: Property overwritten with the generated token.
        user_property: Property holding the database username.
        url_prefix: Connectivity prefix every accepted URL starts with.
    """

    scheme_name: str | None = None
    delegate_scheme_name: str | None = None
    default_port: int | None = None
    driver_class_name: str | None = None
    accept_delegate_urls: bool = True
    password_property: str = DEFAULT_PASSWORD_PROPERTY
    user_property: str = DEFAULT_USER_PROPERTY
    url_prefix: str = DEFAULT_URL_PREFIX

    def with_options(self, **changes: object) -> "WrapperPreset":
        """Return a copy of the preset with the given fields changed."""
        return replace(self, **changes)  # type: ignore[arg-type]


GENERIC_PRESET = WrapperPreset()

MYSQL_PRESET = WrapperPreset(
    scheme_name="iammysql",
    delegate_scheme_name="mysql",
    default_port=3306,
    driver_class_name="iam_db_driver.drivers.mysql:PyMySQLDriver",
)

POSTGRESQL_PRESET = WrapperPreset(
    scheme_name="iampostgresql",
    delegate_scheme_name="postgresql",
    default_port=5432,
    driver_class_name="iam_db_driver.drivers.postgresql:PsycopgDriver",
)
