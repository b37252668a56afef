"""Connection URL parsing.

This module provides the parser for ``<prefix><scheme>://<host>[:<port>]...``
connection URLs and the query-string codec used to read wrapper options out of
them.
"""

from dataclasses import dataclass, field
from urllib.parse import quote, unquote_plus, urlsplit

DEFAULT_URL_PREFIX = "jdbc:"


@dataclass(frozen=True)
class ParsedUrl:
    """Structured view of a connection URL, without its prefix."""

    scheme: str | None
    host: str | None
    port: int | None
    path: str = ""
    query: dict[str, str] = field(default_factory=dict)

    @property
    def database(self) -> str | None:
        """Database name taken from the URL path, if any."""
        name = self.path.lstrip("/")
        return name or None


def parse_url(url: str | None, prefix: str = DEFAULT_URL_PREFIX) -> ParsedUrl | None:
    """Parse a connection URL.

    Args:
        url: The URL to parse, e.g. ``jdbc:iammysql://db:3306/app?awsRegion=x``.
        prefix: The connectivity prefix the URL must start with.

    Returns:
        The parsed URL, or None if the URL is empty, does not carry the prefix
        or cannot be parsed as a URI.
    """
    if not url or not url.startswith(prefix):
        return None

    remainder = url[len(prefix) :]
    try:
        parts = urlsplit(remainder)
        port = parts.port
    except ValueError:
        return None

    # urlsplit lowercases scheme and host; matching is case-sensitive
    scheme = remainder.partition(":")[0]
    if scheme.lower() != parts.scheme:
        scheme = parts.scheme
    return ParsedUrl(
        scheme=scheme or None,
        host=_raw_hostname(parts.netloc),
        port=port,
        path=parts.path,
        query=parse_query_string(parts.query),
    )


def parse_query_string(query: str | None) -> dict[str, str]:
    """Decode a raw query string into a mapping.

    Pairs without ``=`` are skipped. A literal ``+`` in a value is kept as is
    instead of being decoded to a space, since secret keys may contain it.

    Args:
        query: The raw (still percent-encoded) query string.

    Returns:
        Decoded parameters in the order they appear; later duplicates win.
    """
    params: dict[str, str] = {}
    if not query:
        return params

    for pair in query.split("&"):
        key, sep, value = pair.partition("=")
        if not sep:
            continue
        params[unquote_plus(key)] = unquote_plus(value.replace("+", "%2B"))
    return params


def encode_query_string(params: dict[str, str]) -> str:
    """Percent-encode a mapping so that ``parse_query_string`` restores it."""
    return "&".join(
        f"{quote(key, safe='')}={quote(value, safe='')}"
        for key, value in params.items()
    )


def _raw_hostname(netloc: str) -> str | None:
    """Return the host part of a netloc with its original case."""
    hostinfo = netloc.rpartition("@")[2]
    if hostinfo.startswith("["):
        host = hostinfo[1:].partition("]")[0]
    else:
        host = hostinfo.partition(":")[0]
    return host or None
