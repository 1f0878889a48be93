"""Static page metadata catalog for the marketing site.

The page layer looks a page up by identifier and hands the resulting
:class:`PageConfig` to :func:`compose_metadata`. A YAML file loaded with
:func:`founders_pages.config.load_site_config` can stand in for this catalog.
"""

from __future__ import annotations

import typing as typ

from .config import PageConfig
from .metadata import compose_metadata

if typ.TYPE_CHECKING:
    import collections.abc as cabc

    from .config import SiteConfig, SocialConfig
    from .metadata import Clock, ResolvedMetadata

PAGE_METADATA: dict[str, PageConfig] = {
    "home": PageConfig(
        title="Invest Founders - Professional Investment Platform",
        description=(
            "Invest in startups, manage crypto portfolios, and discover early "
            "opportunities. Professional investment platform for founders and "
            "investors."
        ),
        keywords=(
            "investment platform",
            "startup funding",
            "crypto investment",
            "early opportunities",
            "asset management",
        ),
        url="/",
    ),
    "about": PageConfig(
        title="About Us - Invest Founders",
        description=(
            "Learn about Invest Founders' mission to democratize investment "
            "opportunities and support innovative founders worldwide."
        ),
        keywords=(
            "about invest founders",
            "company mission",
            "investment philosophy",
            "team",
        ),
        url="/about",
    ),
    "members": PageConfig(
        title="Members - Invest Founders",
        description=(
            "Join our exclusive community of investors and founders. Access to "
            "premium investment opportunities and networking."
        ),
        keywords=(
            "investment community",
            "exclusive members",
            "networking",
            "premium access",
        ),
        url="/members",
    ),
    "insights": PageConfig(
        title="Insights & Analysis - Invest Founders",
        description=(
            "Stay informed with our latest market insights, investment analysis, "
            "and industry trends."
        ),
        keywords=(
            "market insights",
            "investment analysis",
            "industry trends",
            "research",
        ),
        url="/insights",
    ),
    "prelist": PageConfig(
        title="Prelist - Early Investment Opportunities",
        description=(
            "Discover upcoming projects and early investment opportunities "
            "before they hit the mainstream market."
        ),
        keywords=(
            "early investments",
            "prelist",
            "upcoming projects",
            "early opportunities",
        ),
        url="/prelist",
    ),
    "portfolio": PageConfig(
        title="Portfolio Management - Invest Founders Pro",
        description=(
            "Track your investments and portfolio performance with our "
            "professional portfolio management tools."
        ),
        keywords=(
            "portfolio management",
            "investment tracking",
            "performance analysis",
            "pro tools",
        ),
        url="/portfolio",
    ),
    "market": PageConfig(
        title="Market Data & Analysis - Invest Founders",
        description=(
            "Real-time market data, analysis tools, and comprehensive market "
            "insights for informed investment decisions."
        ),
        keywords=(
            "market data",
            "real-time analysis",
            "market insights",
            "trading tools",
        ),
        url="/market",
    ),
    "contact": PageConfig(
        title="Contact Us - Invest Founders",
        description=(
            "Get in touch with our investment team. We're here to help you with "
            "your investment journey."
        ),
        keywords=(
            "contact invest founders",
            "investment support",
            "customer service",
            "help",
        ),
        url="/contact",
    ),
}


def get_page(
    page_id: str, catalog: cabc.Mapping[str, PageConfig] | None = None
) -> PageConfig:
    """Return the page registered under ``page_id``.

    Raises
    ------
    KeyError
        If ``page_id`` is not in the catalog; the message lists known pages.
    """
    pages = PAGE_METADATA if catalog is None else catalog
    try:
        return pages[page_id]
    except KeyError as exc:
        available = ", ".join(sorted(pages))
        msg = f"Unknown page '{page_id}'. Known pages: {available}"
        raise KeyError(msg) from exc


def compose_page_metadata(
    page_id: str,
    *,
    catalog: cabc.Mapping[str, PageConfig] | None = None,
    site: SiteConfig | None = None,
    social: SocialConfig | None = None,
    clock: Clock | None = None,
) -> ResolvedMetadata:
    """Look up ``page_id`` and compose its metadata record."""
    page = get_page(page_id, catalog)
    return compose_metadata(page, site=site, social=social, clock=clock)


__all__ = ["PAGE_METADATA", "compose_page_metadata", "get_page"]
