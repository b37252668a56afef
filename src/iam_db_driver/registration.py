"""Explicit driver registration.

Importing the package registers nothing. Applications call
``initialise_driver_registration`` once at startup to make the built-in
wrappers available through the process-wide driver manager.
"""

from .config import DriverSettings, load_settings
from .driver import Driver
from .driver_manager import DriverManager, driver_manager
from .observability import configure_logging
from .presets import GENERIC_PRESET, MYSQL_PRESET, POSTGRESQL_PRESET
from .wrapper import IamAuthDriverWrapper


def create_builtin_wrappers(
    manager: DriverManager, url_prefix: str
) -> tuple[IamAuthDriverWrapper, ...]:
    """Create the MySQL, PostgreSQL and generic wrappers.

    The registered MySQL wrapper only accepts ``iammysql`` URLs so that plain
    ``mysql`` URLs reach the MySQL driver itself.
    """
    return (
        IamAuthDriverWrapper(
            MYSQL_PRESET.with_options(
                accept_delegate_urls=False, url_prefix=url_prefix
            ),
            manager=manager,
        ),
        IamAuthDriverWrapper(
            POSTGRESQL_PRESET.with_options(url_prefix=url_prefix), manager=manager
        ),
        IamAuthDriverWrapper(
            GENERIC_PRESET.with_options(url_prefix=url_prefix), manager=manager
        ),
    )


def initialise_driver_registration(
    manager: DriverManager | None = None,
    settings: DriverSettings | None = None,
) -> tuple[Driver, ...]:
    """Register the built-in wrappers with the driver manager once.

    Args:
        manager: Driver manager to register with. Defaults to the process-wide one.
        settings: Process settings. If None, loaded from the environment.

    Returns:
        The registered wrappers; repeated calls return the same instances.
    """
    manager = manager or driver_manager
    settings = settings or load_settings()

    if settings.configure_logging:
        configure_logging(settings.log_level, dev_mode=settings.dev_mode)

    return manager.initialise(
        lambda: create_builtin_wrappers(manager, settings.url_prefix)
    )
