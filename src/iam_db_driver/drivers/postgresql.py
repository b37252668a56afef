"""PostgreSQL delegate driver backed by psycopg."""

from .base import DbApiDriver


class PsycopgDriver(DbApiDriver):
    """Adapter for ``postgresql`` URLs using psycopg 3."""

    scheme_name = "postgresql"
    module_name = "psycopg"
    database_keyword = "dbname"
