"""
Locale tag handling and Accept-Language negotiation.

Tags are normalized to lowercase with ``-`` separators (``de_AT`` ->
``de-at``). Negotiation never raises: anything unusable yields the
default locale.
"""

import re
from collections.abc import Collection
from typing import Optional

_TAG_PATTERN = re.compile(r"[a-z]{1,8}(?:-[a-z0-9]{1,8})*")
_WILDCARD = "*"


def normalize_locale(tag: str) -> str:
    """Return the canonical form of a locale tag."""
    return tag.strip().replace("_", "-").lower()


def primary_language(tag: str) -> str:
    """Return the language subtag, e.g. ``de`` for ``de-at``."""
    return normalize_locale(tag).split("-", 1)[0]


def _parse_entry(entry: str) -> Optional[tuple[str, float]]:
    tag, *params = (part.strip() for part in entry.split(";"))
    tag = normalize_locale(tag)
    if tag != _WILDCARD and not _TAG_PATTERN.fullmatch(tag):
        return None

    weight = 1.0
    for param in params:
        name, _, value = param.partition("=")
        if name.strip().lower() != "q":
            continue
        try:
            weight = float(value)
        except ValueError:
            return None
        if not 0.0 <= weight <= 1.0:
            return None
    return tag, weight


def parse_accept_language(header: Optional[str]) -> list[str]:
    """Parse an Accept-Language value into tags, most preferred first.

    Malformed entries and entries with ``q=0`` are dropped. Ties keep
    header order.
    """
    if not header:
        return []
    parsed = [_parse_entry(entry) for entry in header.split(",") if entry.strip()]
    ranked = sorted(
        (item for item in parsed if item is not None and item[1] > 0),
        key=lambda item: item[1],
        reverse=True,
    )
    return [tag for tag, _ in ranked]


def negotiate_locale(
    header: Optional[str], supported: Collection[str], default: str
) -> str:
    """Pick the locale for a request.

    Args:
        header: Raw ``Accept-Language`` value, possibly absent.
        supported: Normalized tags the catalog has templates for.
        default: Locale used when nothing else matches.

    Returns:
        The first requested tag that is supported, trying the exact tag
        before its primary language, else ``default``.
    """
    for tag in parse_accept_language(header):
        if tag == _WILDCARD:
            return default
        if tag in supported:
            return tag
        language = primary_language(tag)
        if language in supported:
            return language
    return default
