"""Absolute URL resolution shared by every composer."""

from __future__ import annotations


def resolve_absolute_url(path: str | None, base: str) -> str:
    """Return ``base`` joined with the root-relative ``path``.

    ``base`` never ends with ``/`` and ``path`` always starts with one, so the
    two are concatenated as-is. ``None`` resolves to the site root.

    Examples
    --------
    >>> resolve_absolute_url("/about", "https://investfounders.com")
    'https://investfounders.com/about'
    >>> resolve_absolute_url(None, "https://investfounders.com")
    'https://investfounders.com'
    """
    if path is None:
        return base
    return f"{base}{path}"


__all__ = ["resolve_absolute_url"]
