"""Process-wide site and social registries.

Both registries are built once at import time and exposed through read-only
accessors. Composers receive them as explicit arguments; the accessors exist so
callers at the edge of the system (CLI, page layer) have a single place to
obtain the defaults.

Examples
--------
>>> from founders_pages.config import get_site_config
>>> get_site_config().url
'https://investfounders.com'
"""

from __future__ import annotations

import os

from .models import SiteConfig, SocialConfig

SITE_CONFIG = SiteConfig(
    name="Invest Founders",
    description=(
        "Professional investment platform for founders, crypto investors, and "
        "asset management. Discover early opportunities, manage portfolios, and "
        "track market data."
    ),
    url="https://investfounders.com",
    logo="/images/logos/kriptaz-invest-full-white-logo.svg",
    favicon="/favicon/favicon.ico",
    keywords=(
        # platform
        "investment platform",
        "startup funding",
        "venture capital",
        "angel investors",
        "founder investment",
        "early opportunities",
        "prelist investments",
        # crypto
        "crypto investment",
        "cryptocurrency",
        "bitcoin investment",
        "ethereum staking",
        "crypto portfolio management",
        "digital assets",
        "blockchain investment",
        "market data",
        "real-time analysis",
        # features
        "investment opportunities",
        "fundraising platform",
        "investor network",
        "startup ecosystem",
        "crypto trading",
        "defi investment",
        "portfolio tracking",
        "market insights",
        "investment analysis",
        # asset management
        "asset management",
        "portfolio management",
        "wealth management",
        "investment strategy",
        "risk management",
        "performance tracking",
        # community
        "investment community",
        "exclusive members",
        "networking",
        "premium access",
        "professional tools",
    ),
    author="Invest Founders Team",
    language="en",
    locale="en_US",
    timezone="UTC",
)

SOCIAL_CONFIG = SocialConfig(
    twitter_site="@investfounders",
    twitter_creator="@investfounders",
    twitter_card="summary_large_image",
    facebook_app_id=os.getenv("FACEBOOK_APP_ID", ""),
    facebook_page_id="investfounders",
    linkedin_company_id="invest-founders",
    profiles=(
        "https://twitter.com/investfounders",
        "https://linkedin.com/company/investfounders",
        "https://facebook.com/investfounders",
    ),
)


def get_site_config() -> SiteConfig:
    """Return the site registry."""
    return SITE_CONFIG


def get_social_config() -> SocialConfig:
    """Return the social registry."""
    return SOCIAL_CONFIG


__all__ = ["SITE_CONFIG", "SOCIAL_CONFIG", "get_site_config", "get_social_config"]
