"""Typed dataclasses describing the site registry and per-page metadata inputs."""

from __future__ import annotations

import dataclasses as dc
import enum


class SiteConfigError(ValueError):
    """Raised when the site registry or its YAML source is invalid."""


class PageConfigError(ValueError):
    """Raised when a page definition is missing required fields."""


class PageType(enum.StrEnum):
    """Open Graph object types a page may declare."""

    WEBSITE = "website"
    ARTICLE = "article"
    PROFILE = "profile"


@dc.dataclass(frozen=True, slots=True)
class SiteConfig:
    """Site-wide constants shared by every composed page.

    Attributes
    ----------
    name : str
        Brand name appended to page titles and used as publisher.
    description : str
        Default site description embedded in structured data.
    url : str
        Absolute base URL without a trailing slash.
    logo : str
        Root-relative path to the logo asset.
    favicon : str
        Root-relative path to the favicon.
    keywords : tuple[str, ...]
        Ordered default keyword set.
    author, language, locale, timezone : str
        Authorship and localisation defaults.
    """

    name: str
    description: str
    url: str
    logo: str
    favicon: str
    keywords: tuple[str, ...]
    author: str
    language: str
    locale: str
    timezone: str

    def __post_init__(self) -> None:
        """Reject base URLs that would double the path separator."""
        if not self.url:
            msg = "Site configuration requires a 'url'."
            raise SiteConfigError(msg)
        if self.url.endswith("/"):
            msg = f"Site url '{self.url}' must not end with a trailing slash."
            raise SiteConfigError(msg)


@dc.dataclass(frozen=True, slots=True)
class SocialConfig:
    """Social platform handles and profile links for the site."""

    twitter_site: str
    twitter_creator: str
    twitter_card: str = "summary_large_image"
    facebook_app_id: str = ""
    facebook_page_id: str = ""
    linkedin_company_id: str = ""
    profiles: tuple[str, ...] = ()

    def __post_init__(self) -> None:
        """Only the two card layouts supported by Twitter are accepted."""
        if self.twitter_card not in {"summary", "summary_large_image"}:
            msg = f"Unsupported twitter card type '{self.twitter_card}'."
            raise SiteConfigError(msg)


@dc.dataclass(frozen=True, slots=True)
class PageConfig:
    """Per-page metadata description supplied by the page layer.

    Only ``title`` and ``description`` are required. Every other field is
    optional and resolved against the site registry during composition.
    """

    title: str
    description: str
    keywords: tuple[str, ...] | None = None
    image: str | None = None
    url: str | None = None
    type: PageType = PageType.WEBSITE
    author: str | None = None
    robots: str | None = None
    published_time: str | None = None
    modified_time: str | None = None
    section: str | None = None
    tags: tuple[str, ...] | None = None

    def __post_init__(self) -> None:
        """Fail fast on missing required fields and coerce the page type."""
        for field_name in ("title", "description"):
            value = getattr(self, field_name)
            if not isinstance(value, str) or not value.strip():
                msg = f"Page configuration requires a non-empty '{field_name}'."
                raise PageConfigError(msg)
        try:
            page_type = PageType(self.type)
        except ValueError as exc:
            allowed = ", ".join(member.value for member in PageType)
            msg = f"Unknown page type '{self.type}'. Expected one of: {allowed}"
            raise PageConfigError(msg) from exc
        object.__setattr__(self, "type", page_type)
        if self.keywords is not None:
            object.__setattr__(self, "keywords", tuple(self.keywords))
        if self.tags is not None:
            object.__setattr__(self, "tags", tuple(self.tags))


@dc.dataclass(frozen=True, slots=True)
class AnalyticsKeys:
    """Analytics identifiers, present only in production."""

    google_analytics: str | None = None
    mixpanel: str | None = None


@dc.dataclass(frozen=True, slots=True)
class MonitoringKeys:
    """Error-monitoring identifiers, present only in production."""

    sentry: str | None = None


@dc.dataclass(frozen=True, slots=True)
class EnvironmentProfile:
    """Runtime environment flags derived from process environment variables."""

    is_production: bool
    is_development: bool
    base_url: str
    analytics: AnalyticsKeys
    monitoring: MonitoringKeys


@dc.dataclass(frozen=True, slots=True)
class SiteBundle:
    """Site registry, social registry and page catalog loaded together."""

    site: SiteConfig
    social: SocialConfig
    pages: dict[str, PageConfig] = dc.field(default_factory=dict)


__all__ = [
    "AnalyticsKeys",
    "EnvironmentProfile",
    "MonitoringKeys",
    "PageConfig",
    "PageConfigError",
    "PageType",
    "SiteBundle",
    "SiteConfig",
    "SiteConfigError",
    "SocialConfig",
]
