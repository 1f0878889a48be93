"""Compose document metadata records from page descriptions.

The subpackage is a pure data transformation: a :class:`PageConfig` plus the
site and social registries go in, a :class:`ResolvedMetadata` comes out. The
only non-deterministic inputs are read through an injectable :class:`Clock`.
"""

from .clock import SYSTEM_CLOCK, Clock, FixedClock, SystemClock, format_timestamp
from .composer import ICON_MANIFEST, compose_metadata, full_title
from .models import (
    Alternates,
    ArticleMeta,
    Icon,
    IconManifest,
    OpenGraphImage,
    OpenGraphMeta,
    ResolvedMetadata,
    SeoMeta,
    TwitterCard,
)
from .seo import generate_seo_meta
from .social import default_image_url, generate_open_graph, generate_twitter_card
from .structured_data import FinancialService, build_financial_service, encode_json_ld
from .urls import resolve_absolute_url

__all__ = [
    "ICON_MANIFEST",
    "SYSTEM_CLOCK",
    "Alternates",
    "ArticleMeta",
    "Clock",
    "FinancialService",
    "FixedClock",
    "Icon",
    "IconManifest",
    "OpenGraphImage",
    "OpenGraphMeta",
    "ResolvedMetadata",
    "SeoMeta",
    "SystemClock",
    "TwitterCard",
    "build_financial_service",
    "compose_metadata",
    "default_image_url",
    "encode_json_ld",
    "format_timestamp",
    "full_title",
    "generate_open_graph",
    "generate_seo_meta",
    "generate_twitter_card",
    "resolve_absolute_url",
]
