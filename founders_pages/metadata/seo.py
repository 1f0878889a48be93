"""Compose search-engine directives and the site's structured data."""

from __future__ import annotations

import typing as typ

from founders_pages._constants import (
    BROWSER_CONFIG,
    COPYRIGHT_TEMPLATE,
    DEFAULT_ROBOTS,
    DISTRIBUTION,
    RATING,
    REVISIT,
    THEME_COLOR,
)

from .clock import SYSTEM_CLOCK
from .models import SeoMeta
from .structured_data import build_financial_service
from .urls import resolve_absolute_url

if typ.TYPE_CHECKING:
    from founders_pages.config import SiteConfig, SocialConfig

    from .clock import Clock


def vendor_directives(site: SiteConfig) -> dict[str, str]:
    """Return the mobile and web-app meta directives for ``site``."""
    return {
        "application-name": site.name,
        "apple-mobile-web-app-title": site.name,
        "apple-mobile-web-app-capable": "yes",
        "apple-mobile-web-app-status-bar-style": "default",
        "format-detection": "telephone=no",
        "mobile-web-app-capable": "yes",
        "msapplication-TileColor": THEME_COLOR,
        "msapplication-config": BROWSER_CONFIG,
        "theme-color": THEME_COLOR,
    }


def generate_seo_meta(
    *,
    site: SiteConfig,
    social: SocialConfig,
    canonical: str,
    robots: str | None = None,
    author: str | None = None,
    clock: Clock | None = None,
) -> SeoMeta:
    """Build the SEO directive set for a page.

    Parameters
    ----------
    site : SiteConfig
        Site registry supplying language, publisher and structured data.
    social : SocialConfig
        Social registry supplying the ``sameAs`` profile links.
    canonical : str
        Absolute canonical URL resolved by the caller; used verbatim.
    robots : str, optional
        Page override for the robots directive.
    author : str, optional
        Page override for the author; defaults to ``site.author``.
    clock : Clock, optional
        Time source for the copyright year; defaults to the system clock.

    Returns
    -------
    SeoMeta
        Directives, vendor meta tags and the ``FinancialService`` document.
    """
    year = (clock or SYSTEM_CLOCK).now().year
    structured_data = build_financial_service(
        name=site.name,
        description=site.description,
        url=site.url,
        logo=resolve_absolute_url(site.logo, site.url),
        same_as=social.profiles,
    )
    return SeoMeta(
        robots=robots or DEFAULT_ROBOTS,
        canonical=canonical,
        language=site.language,
        author=author or site.author,
        publisher=site.name,
        copyright=COPYRIGHT_TEMPLATE.format(year=year, name=site.name),
        rating=RATING,
        distribution=DISTRIBUTION,
        revisit=REVISIT,
        vendor=vendor_directives(site),
        structured_data=structured_data,
    )


__all__ = ["generate_seo_meta", "vendor_directives"]
