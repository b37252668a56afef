"""MySQL delegate driver backed by PyMySQL.

RDS IAM authentication with MySQL sends the token with the cleartext
password plugin, which requires TLS on the connection. Pass ``ssl_ca`` (or
another PyMySQL ssl option) as a URL query parameter.
"""

from .base import DbApiDriver


class PyMySQLDriver(DbApiDriver):
    """Adapter for ``mysql`` URLs using PyMySQL."""

    scheme_name = "mysql"
    module_name = "pymysql"
