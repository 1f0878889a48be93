"""Immutable records produced by metadata composition."""

from __future__ import annotations

import dataclasses as dc
import typing as typ

from .structured_data import FinancialService, encode_json_ld


@dc.dataclass(frozen=True, slots=True)
class SeoMeta:
    """Search-engine directives emitted as ``<meta name=...>`` tags.

    ``vendor`` holds the mobile/web-app directives keyed by their meta name;
    ``structured_data`` is serialized only through :attr:`json_ld`.
    """

    robots: str
    canonical: str
    language: str
    author: str
    publisher: str
    copyright: str
    rating: str
    distribution: str
    revisit: str
    vendor: dict[str, str]
    structured_data: FinancialService

    @property
    def json_ld(self) -> str:
        """Return the structured-data document as compact JSON text."""
        return encode_json_ld(self.structured_data)

    def meta_tags(self) -> list[tuple[str, str]]:
        """Return ``(name, content)`` pairs in document order."""
        tags = [
            ("robots", self.robots),
            ("language", self.language),
            ("author", self.author),
            ("publisher", self.publisher),
            ("copyright", self.copyright),
            ("rating", self.rating),
            ("distribution", self.distribution),
            ("revisit-after", self.revisit),
        ]
        tags.extend(self.vendor.items())
        return tags

    def to_dict(self) -> dict[str, typ.Any]:
        return {
            "robots": self.robots,
            "canonical": self.canonical,
            "language": self.language,
            "author": self.author,
            "publisher": self.publisher,
            "copyright": self.copyright,
            "rating": self.rating,
            "distribution": self.distribution,
            "revisit": self.revisit,
            **self.vendor,
            "application/ld+json": self.json_ld,
        }


@dc.dataclass(frozen=True, slots=True)
class OpenGraphImage:
    """A single Open Graph image entry."""

    url: str
    width: int
    height: int
    alt: str


@dc.dataclass(frozen=True, slots=True)
class ArticleMeta:
    """``article:*`` properties, only attached to article pages."""

    author: str
    published_time: str | None = None
    modified_time: str | None = None
    section: str | None = None
    tag: str | None = None

    def properties(self) -> dict[str, str]:
        """Return the supplied ``article:*`` properties, omitting absent ones."""
        values = {
            "article:author": self.author,
            "article:published_time": self.published_time,
            "article:modified_time": self.modified_time,
            "article:section": self.section,
            "article:tag": self.tag,
        }
        return {key: value for key, value in values.items() if value is not None}


@dc.dataclass(frozen=True, slots=True)
class OpenGraphMeta:
    """Open Graph link-preview record."""

    title: str
    description: str
    url: str
    site_name: str
    images: tuple[OpenGraphImage, ...]
    locale: str
    type: str
    image_type: str
    updated_time: str
    fb_app_id: str
    article: ArticleMeta | None = None

    def properties(self) -> list[tuple[str, str]]:
        """Return ``(property, content)`` pairs for ``<meta property=...>``."""
        props = [
            ("og:title", self.title),
            ("og:description", self.description),
            ("og:url", self.url),
            ("og:site_name", self.site_name),
            ("og:locale", self.locale),
            ("og:type", self.type),
        ]
        for image in self.images:
            props.extend(
                [
                    ("og:image", image.url),
                    ("og:image:width", str(image.width)),
                    ("og:image:height", str(image.height)),
                    ("og:image:alt", image.alt),
                ]
            )
        props.append(("og:image:type", self.image_type))
        props.append(("og:updated_time", self.updated_time))
        if self.fb_app_id:
            props.append(("fb:app_id", self.fb_app_id))
        if self.article is not None:
            props.extend(self.article.properties().items())
        return props

    def to_dict(self) -> dict[str, typ.Any]:
        first = self.images[0]
        payload: dict[str, typ.Any] = {
            "title": self.title,
            "description": self.description,
            "url": self.url,
            "site_name": self.site_name,
            "images": [dc.asdict(image) for image in self.images],
            "locale": self.locale,
            "type": self.type,
            "og:image:width": str(first.width),
            "og:image:height": str(first.height),
            "og:image:type": self.image_type,
            "og:site_name": self.site_name,
            "og:updated_time": self.updated_time,
            "fb:app_id": self.fb_app_id,
        }
        if self.article is not None:
            payload.update(self.article.properties())
        return payload


@dc.dataclass(frozen=True, slots=True)
class TwitterCard:
    """Twitter Card link-preview record."""

    card: str
    site: str
    creator: str
    title: str
    description: str
    images: tuple[str, ...]
    domain: str
    url: str

    def meta_tags(self) -> list[tuple[str, str]]:
        """Return ``(name, content)`` pairs for ``<meta name="twitter:*">``."""
        tags = [
            ("twitter:card", self.card),
            ("twitter:site", self.site),
            ("twitter:creator", self.creator),
            ("twitter:title", self.title),
            ("twitter:description", self.description),
        ]
        tags.extend(("twitter:image", image) for image in self.images)
        tags.append(("twitter:domain", self.domain))
        tags.append(("twitter:url", self.url))
        return tags

    def to_dict(self) -> dict[str, typ.Any]:
        payload = dc.asdict(self)
        payload["images"] = list(self.images)
        return payload


@dc.dataclass(frozen=True, slots=True)
class Icon:
    """An icon ``<link>`` reference."""

    url: str
    sizes: str
    type: str | None = None


@dc.dataclass(frozen=True, slots=True)
class IconManifest:
    """Favicon and Apple touch icon references."""

    icon: tuple[Icon, ...]
    apple: tuple[Icon, ...]

    def to_dict(self) -> dict[str, list[dict[str, str]]]:
        def _entry(icon: Icon) -> dict[str, str]:
            entry = {"url": icon.url, "sizes": icon.sizes}
            if icon.type:
                entry["type"] = icon.type
            return entry

        return {
            "icon": [_entry(icon) for icon in self.icon],
            "apple": [_entry(icon) for icon in self.apple],
        }


@dc.dataclass(frozen=True, slots=True)
class Alternates:
    """Alternate URLs for the document."""

    canonical: str


@dc.dataclass(frozen=True, slots=True)
class ResolvedMetadata:
    """Complete metadata record for a single page.

    ``alternates.canonical`` and ``seo.canonical`` are derived from the same
    URL and are always equal.
    """

    title: str
    description: str
    keywords: str
    seo: SeoMeta
    open_graph: OpenGraphMeta
    twitter: TwitterCard
    alternates: Alternates
    icons: IconManifest
    manifest: str

    def to_dict(self) -> dict[str, typ.Any]:
        """Return a JSON-ready mapping of the record."""
        return {
            "title": self.title,
            "description": self.description,
            "keywords": self.keywords,
            **self.seo.to_dict(),
            "open_graph": self.open_graph.to_dict(),
            "twitter": self.twitter.to_dict(),
            "alternates": {"canonical": self.alternates.canonical},
            "icons": self.icons.to_dict(),
            "manifest": self.manifest,
        }


__all__ = [
    "Alternates",
    "ArticleMeta",
    "Icon",
    "IconManifest",
    "OpenGraphImage",
    "OpenGraphMeta",
    "ResolvedMetadata",
    "SeoMeta",
    "TwitterCard",
]
