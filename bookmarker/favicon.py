"""Favicon address lookup for bookmark URLs."""

from __future__ import annotations

from urllib.parse import quote

from ._utils import hostname
from .constants import FAVICON_FALLBACK_DOMAIN, FAVICON_SERVICE


def favicon_url(url: str) -> str:
    """Return the favicon image address for *url*.

    Malformed URLs fall back to the service's default icon instead of
    raising.
    """
    domain = hostname(url) or FAVICON_FALLBACK_DOMAIN
    return FAVICON_SERVICE.format(domain=quote(domain, safe=".-"))
