# File: email_scout/utils.py
"""email_scout.utils: URL helpers shared by the crawler and the HTTP layer."""

from __future__ import annotations

from collections.abc import Sequence
from urllib.parse import urlsplit, urlunsplit

from email_scout.logger import logger

__all__: Sequence[str] = ("origin_of", "is_absolute_http_url", "lower_scheme_host")

_DEFAULT_PORTS = {"http": 80, "https": 443}


def is_absolute_http_url(url: str) -> bool:
    """Проверяет, что URL абсолютный, с хостом и схемой http(s)."""
    try:
        parsed = urlsplit(url)
        # port access raises ValueError for non-numeric or out-of-range ports
        parsed.port
    except ValueError as exc:
        logger.debug("Unparsable URL %r: %s", url, exc)
        return False
    return parsed.scheme.lower() in _DEFAULT_PORTS and bool(parsed.hostname)


def origin_of(url: str) -> str:
    """Return ``scheme://host[:port]`` for *url*.

    Scheme and host are lower-cased, credentials dropped and the port kept only
    when it is not the default one for the scheme, so that the result prefixes
    the absolute URLs produced by ``urljoin`` for the same site.
    """
    parsed = urlsplit(url)
    scheme = parsed.scheme.lower()
    host = parsed.hostname or ""
    if ":" in host:
        host = f"[{host}]"
    port = parsed.port
    if port is None or port == _DEFAULT_PORTS.get(scheme):
        return f"{scheme}://{host}"
    return f"{scheme}://{host}:{port}"


def lower_scheme_host(url: str) -> str:
    """Lower-case scheme and host of an absolute URL and drop a default port.

    Path, query, fragment and credentials are kept as written. URLs without a
    host (``mailto:``, ``javascript:``) come back unchanged. Raises ValueError
    for an unparsable host or port.
    """
    parts = urlsplit(url)
    if not parts.netloc:
        return url
    scheme = parts.scheme.lower()
    userinfo, _, hostport = parts.netloc.rpartition("@")
    port = parts.port
    if port is not None and port == _DEFAULT_PORTS.get(scheme):
        hostport = hostport[: hostport.rfind(":")]
    netloc = f"{userinfo}@{hostport.lower()}" if userinfo else hostport.lower()
    return urlunsplit((scheme, netloc, parts.path, parts.query, parts.fragment))
