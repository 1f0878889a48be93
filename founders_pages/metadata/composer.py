"""Expand a page description into a complete metadata record.

:func:`compose_metadata` is the single entry point used by the page layer. It
resolves the page's absolute URLs once, hands them to the SEO and social
composers, and merges their output with the site-wide keyword, icon and
manifest defaults.

Examples
--------
>>> from founders_pages.config import PageConfig
>>> from founders_pages.metadata import compose_metadata
>>> meta = compose_metadata(
...     PageConfig(title="Contact", description="Reach us", url="/contact")
... )
>>> meta.title
'Contact | Invest Founders'
>>> meta.alternates.canonical
'https://investfounders.com/contact'
"""

from __future__ import annotations

import logging
import typing as typ

from founders_pages._constants import MANIFEST_PATH
from founders_pages.config import get_site_config, get_social_config

from .models import Alternates, Icon, IconManifest, ResolvedMetadata
from .seo import generate_seo_meta
from .social import generate_open_graph, generate_twitter_card
from .urls import resolve_absolute_url

if typ.TYPE_CHECKING:
    from founders_pages.config import PageConfig, SiteConfig, SocialConfig

    from .clock import Clock

logger = logging.getLogger(__name__)

TITLE_SEPARATOR = " | "
KEYWORD_SEPARATOR = ", "

ICON_MANIFEST = IconManifest(
    icon=(
        Icon(url="/favicon/favicon-16x16.png", sizes="16x16", type="image/png"),
        Icon(url="/favicon/favicon-32x32.png", sizes="32x32", type="image/png"),
        Icon(url="/favicon/favicon.ico", sizes="any"),
    ),
    apple=(
        Icon(url="/favicon/apple-touch-icon.png", sizes="180x180", type="image/png"),
    ),
)


def full_title(title: str, site_name: str) -> str:
    """Append the site name unless ``title`` already mentions it anywhere."""
    if site_name in title:
        return title
    return f"{title}{TITLE_SEPARATOR}{site_name}"


def compose_metadata(
    page: PageConfig,
    *,
    site: SiteConfig | None = None,
    social: SocialConfig | None = None,
    clock: Clock | None = None,
) -> ResolvedMetadata:
    """Compose the complete metadata record for ``page``.

    Parameters
    ----------
    page : PageConfig
        Page description from the catalog.
    site : SiteConfig, optional
        Site registry; defaults to :func:`get_site_config`.
    social : SocialConfig, optional
        Social registry; defaults to :func:`get_social_config`.
    clock : Clock, optional
        Time source for the copyright year and ``og:updated_time``.

    Returns
    -------
    ResolvedMetadata
        Fresh record whose canonical URL is shared by the SEO block, the
        alternates block, and the Open Graph and Twitter URLs.
    """
    site = site or get_site_config()
    social = social or get_social_config()

    title = full_title(page.title, site.name)
    url = resolve_absolute_url(page.url, site.url)
    image = resolve_absolute_url(page.image, site.url) if page.image else None

    seo = generate_seo_meta(
        site=site,
        social=social,
        canonical=url,
        robots=page.robots,
        author=page.author,
        clock=clock,
    )
    open_graph = generate_open_graph(
        site=site,
        social=social,
        title=page.title,
        description=page.description,
        url=url,
        image=image,
        type=page.type,
        author=page.author,
        published_time=page.published_time,
        modified_time=page.modified_time,
        section=page.section,
        tags=page.tags,
        clock=clock,
    )
    twitter = generate_twitter_card(
        site=site,
        social=social,
        title=page.title,
        description=page.description,
        url=url,
        images=[image] if image else None,
    )
    keywords = KEYWORD_SEPARATOR.join(page.keywords or site.keywords)

    logger.debug("Composed metadata for %s (%s)", url, page.type.value)
    return ResolvedMetadata(
        title=title,
        description=page.description,
        keywords=keywords,
        seo=seo,
        open_graph=open_graph,
        twitter=twitter,
        alternates=Alternates(canonical=url),
        icons=ICON_MANIFEST,
        manifest=MANIFEST_PATH,
    )


__all__ = [
    "ICON_MANIFEST",
    "KEYWORD_SEPARATOR",
    "TITLE_SEPARATOR",
    "compose_metadata",
    "full_title",
]
