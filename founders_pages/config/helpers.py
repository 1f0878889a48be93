"""Utility helpers shared by the site configuration loader."""

from __future__ import annotations

import datetime as dt
import typing as typ

from .models import (
    PageConfig,
    PageConfigError,
    SiteConfig,
    SiteConfigError,
    SocialConfig,
)

SITE_FIELDS = (
    "name",
    "description",
    "url",
    "logo",
    "favicon",
    "author",
    "language",
    "locale",
    "timezone",
)
PAGE_FIELDS = ("image", "url", "author", "robots", "section")
TIMESTAMP_FIELDS = ("published_time", "modified_time")


def _optional_str(value: object | None) -> str | None:
    """Return a stripped string value or None when empty."""
    if value is None:
        return None
    text = str(value).strip()
    return text or None


def _format_timestamp(value: object | None) -> str | None:
    """Return an ISO-8601 string for YAML timestamps, or a stripped string."""
    match value:
        case dt.datetime():
            if value.tzinfo is None:
                value = value.replace(tzinfo=dt.UTC)
            return value.astimezone(dt.UTC).isoformat().replace("+00:00", "Z")
        case dt.date():
            return value.isoformat()
        case _:
            return _optional_str(value)


def _normalize_strings(value: str | list[object] | None) -> tuple[str, ...] | None:
    """Normalize a keyword-style list into a tuple of non-empty strings.

    A comma-separated string is split on commas. ``None`` stays ``None`` so
    callers can tell an absent list from an empty one.
    """
    if value is None:
        return None
    if isinstance(value, str):
        segments = (segment.strip() for segment in value.split(","))
        return tuple(segment for segment in segments if segment)
    if isinstance(value, list | tuple):
        normalized: list[str] = []
        for segment in value:
            text = str(segment).strip()
            if text:
                normalized.append(text)
        return tuple(normalized)
    msg = f"Expected a list of strings, got {type(value).__name__}."
    raise SiteConfigError(msg)


def _require_mapping(value: object, label: str) -> dict[str, typ.Any]:
    """Return ``value`` as a dict, treating ``None`` as an empty mapping."""
    match value:
        case None:
            return {}
        case dict():
            return dict(value)
        case _:
            msg = f"{label} configuration must be a mapping."
            raise SiteConfigError(msg)


def _override_str(override: typ.Mapping[str, typ.Any], key: str, base: str) -> str:
    """Return the stripped override for ``key``, or ``base`` when null or blank."""
    value = _optional_str(override.get(key))
    return base if value is None else value


def _merge_site(base: SiteConfig, override: typ.Mapping[str, typ.Any]) -> SiteConfig:
    """Merge an override mapping into the base SiteConfig."""
    if not override:
        return base
    values: dict[str, typ.Any] = {
        name: _override_str(override, name, getattr(base, name)) for name in SITE_FIELDS
    }
    keywords = _normalize_strings(override.get("keywords"))
    values["keywords"] = base.keywords if keywords is None else keywords
    return SiteConfig(**values)


def _merge_social(
    base: SocialConfig, override: typ.Mapping[str, typ.Any]
) -> SocialConfig:
    """Merge an override mapping into the base SocialConfig."""
    if not override:
        return base
    twitter = _require_mapping(override.get("twitter"), "Social twitter")
    facebook = _require_mapping(override.get("facebook"), "Social facebook")
    linkedin = _require_mapping(override.get("linkedin"), "Social linkedin")
    profiles = _normalize_strings(override.get("profiles"))
    return SocialConfig(
        twitter_site=_override_str(twitter, "site", base.twitter_site),
        twitter_creator=_override_str(twitter, "creator", base.twitter_creator),
        twitter_card=_override_str(twitter, "card", base.twitter_card),
        facebook_app_id=_override_str(facebook, "app_id", base.facebook_app_id),
        facebook_page_id=_override_str(facebook, "page_id", base.facebook_page_id),
        linkedin_company_id=_override_str(
            linkedin, "company_id", base.linkedin_company_id
        ),
        profiles=base.profiles if profiles is None else profiles,
    )


def _build_page_config(key: str, payload: object) -> PageConfig:
    """Build a PageConfig for a single catalog entry."""
    match payload:
        case {"title": title, "description": description, **rest}:
            pass
        case dict():
            msg = f"Page '{key}' requires 'title' and 'description'."
            raise PageConfigError(msg)
        case _:
            msg = f"Page '{key}' must be a mapping."
            raise PageConfigError(msg)
    optional = {name: _optional_str(rest.get(name)) for name in PAGE_FIELDS}
    optional.update(
        {name: _format_timestamp(rest.get(name)) for name in TIMESTAMP_FIELDS}
    )
    return PageConfig(
        title=str(title or ""),
        description=str(description or ""),
        keywords=_normalize_strings(rest.get("keywords")),
        tags=_normalize_strings(rest.get("tags")),
        type=rest.get("type") or "website",
        **optional,
    )


__all__ = [
    "PAGE_FIELDS",
    "SITE_FIELDS",
    "TIMESTAMP_FIELDS",
    "_build_page_config",
    "_format_timestamp",
    "_merge_site",
    "_merge_social",
    "_normalize_strings",
    "_optional_str",
    "_override_str",
    "_require_mapping",
]
