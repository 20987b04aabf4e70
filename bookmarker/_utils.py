"""Shared helpers for timestamps and URLs."""

from __future__ import annotations

from datetime import MAXYEAR, MINYEAR, datetime, timezone
from urllib.parse import urlsplit


def utc_now() -> datetime:
    """Current UTC time truncated to milliseconds."""
    now = datetime.now(timezone.utc)
    return now.replace(microsecond=now.microsecond // 1000 * 1000)


def format_timestamp(value: datetime) -> str:
    """Render *value* as ISO-8601 UTC with milliseconds and a ``Z`` suffix.

    ``2024-05-01T12:30:00.123Z`` -- the same shape JavaScript's
    ``Date.toISOString()`` produces, so existing data files stay readable.
    """
    if value.tzinfo is None:
        value = value.astimezone()
    value = value.astimezone(timezone.utc)
    return value.strftime("%Y-%m-%dT%H:%M:%S.") + f"{value.microsecond // 1000:03d}Z"


def parse_timestamp(text: str) -> datetime:
    """Parse an ISO-8601 timestamp into an aware UTC datetime.

    Naive timestamps are taken to be in the local timezone.  Raises
    ``ValueError`` for anything unparsable.
    """
    if not isinstance(text, str):
        raise ValueError(f"timestamp must be a string, not {type(text).__name__}")
    text = text.strip()
    if text.endswith(("Z", "z")):
        text = text[:-1] + "+00:00"
    value = datetime.fromisoformat(text)
    # Years 1 and 9999 cannot be shifted into every timezone
    if value.year in (MINYEAR, MAXYEAR):
        raise ValueError(f"timestamp out of supported range: {text}")
    try:
        if value.tzinfo is None:
            value = value.astimezone()
        return value.astimezone(timezone.utc)
    except OverflowError as exc:
        raise ValueError(f"timestamp out of supported range: {text}") from exc


def hostname(url: str) -> str | None:
    """Return the hostname of *url*, or ``None`` if it has none."""
    try:
        return urlsplit(url).hostname or None
    except (TypeError, ValueError, AttributeError):
        return None


def is_valid_url(url: str) -> bool:
    """True when *url* has both a scheme and a host (``https://example.com``)."""
    try:
        parts = urlsplit(url.strip())
    except (ValueError, AttributeError):
        return False
    return bool(parts.scheme) and bool(parts.netloc) and hostname(url.strip()) is not None
