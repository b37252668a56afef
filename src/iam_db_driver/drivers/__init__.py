"""Built-in delegate drivers for DB-API 2.0 modules."""

from .base import DbApiDriver
from .mysql import PyMySQLDriver
from .postgresql import PsycopgDriver

__all__ = ["DbApiDriver", "PsycopgDriver", "PyMySQLDriver"]
