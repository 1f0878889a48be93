"""Compose Open Graph and Twitter Card link-preview records."""

from __future__ import annotations

import collections.abc as cabc
import typing as typ

from founders_pages._constants import (
    DEFAULT_OG_IMAGE,
    OG_IMAGE_HEIGHT,
    OG_IMAGE_TYPE,
    OG_IMAGE_WIDTH,
)
from founders_pages.config import PageType

from .clock import SYSTEM_CLOCK, format_timestamp
from .models import ArticleMeta, OpenGraphImage, OpenGraphMeta, TwitterCard
from .urls import resolve_absolute_url

if typ.TYPE_CHECKING:
    from founders_pages.config import SiteConfig, SocialConfig

    from .clock import Clock


def default_image_url(site: SiteConfig) -> str:
    """Return the absolute URL of the fallback share image."""
    return resolve_absolute_url(DEFAULT_OG_IMAGE, site.url)


def generate_open_graph(
    *,
    site: SiteConfig,
    social: SocialConfig,
    title: str,
    description: str,
    url: str | None = None,
    image: str | None = None,
    type: PageType | str = PageType.WEBSITE,  # noqa: A002
    author: str | None = None,
    published_time: str | None = None,
    modified_time: str | None = None,
    section: str | None = None,
    tags: cabc.Sequence[str] | None = None,
    clock: Clock | None = None,
) -> OpenGraphMeta:
    """Build the Open Graph record for a page.

    ``url`` and ``image`` must already be absolute; absent values fall back to
    the site root and the default share image. The ``article:*`` block is only
    attached when ``type`` is ``article``.
    """
    page_type = PageType(type)
    article = None
    if page_type is PageType.ARTICLE:
        article = ArticleMeta(
            author=author or site.author,
            published_time=published_time,
            modified_time=modified_time,
            section=section,
            tag=", ".join(tags) if tags else None,
        )
    return OpenGraphMeta(
        title=title,
        description=description,
        url=url or site.url,
        site_name=site.name,
        images=(
            OpenGraphImage(
                url=image or default_image_url(site),
                width=OG_IMAGE_WIDTH,
                height=OG_IMAGE_HEIGHT,
                alt=title,
            ),
        ),
        locale=site.locale,
        type=page_type.value,
        image_type=OG_IMAGE_TYPE,
        updated_time=format_timestamp((clock or SYSTEM_CLOCK).now()),
        fb_app_id=social.facebook_app_id,
        article=article,
    )


def generate_twitter_card(
    *,
    site: SiteConfig,
    social: SocialConfig,
    title: str,
    description: str,
    url: str | None = None,
    images: cabc.Sequence[str] | None = None,
) -> TwitterCard:
    """Build the Twitter Card record for a page."""
    return TwitterCard(
        card=social.twitter_card,
        site=social.twitter_site,
        creator=social.twitter_creator,
        title=title,
        description=description,
        images=(default_image_url(site),) if images is None else tuple(images),
        domain=site.url,
        url=url or site.url,
    )


__all__ = ["default_image_url", "generate_open_graph", "generate_twitter_card"]
