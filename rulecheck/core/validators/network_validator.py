"""
Network predicates - IP literals and URLs.

``active_url`` is the only predicate that performs I/O: it resolves the
URL's host with a blocking DNS lookup.
"""

import ipaddress
import logging
import socket
from urllib.parse import urlsplit

logger = logging.getLogger(__name__)

URL_SCHEMES = ("http://", "https://")


def _has_web_scheme(value: str) -> bool:
    return value.lower().startswith(URL_SCHEMES)


def validate_ip(name: str, value: str, inputs: dict[str, str], params: list[str]) -> bool:
    """Value must be an IPv4 or IPv6 literal (scoped IPv6 addresses are rejected)."""
    if "%" in value:
        return False
    try:
        ipaddress.ip_address(value)
    except ValueError:
        return False
    return True


def validate_url(name: str, value: str, inputs: dict[str, str], params: list[str]) -> bool:
    """Only the http/https scheme prefix is checked."""
    return _has_web_scheme(value)


def validate_active_url(name: str, value: str, inputs: dict[str, str], params: list[str]) -> bool:
    """
    Value must be an http(s) URL whose host resolves.

    Any resolution failure (unknown host, no network, malformed host)
    fails the rule.
    """
    if not _has_web_scheme(value):
        return False

    try:
        host = urlsplit(value.lower()).hostname
    except ValueError:
        return False
    if not host:
        return False

    try:
        socket.getaddrinfo(host, None)
    except (OSError, UnicodeError) as e:
        logger.debug(f"DNS lookup failed for {host}: {e}")
        return False
    return True
