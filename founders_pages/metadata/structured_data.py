"""Typed schema.org records for the site's JSON-LD document.

The document is assembled from nested :mod:`msgspec` structs and only turned
into text by :func:`encode_json_ld`, so its shape can be inspected without
parsing JSON. Field order matches the serialized key order.
"""

from __future__ import annotations

import msgspec
import msgspec.json as msgspec_json

SCHEMA_CONTEXT = "https://schema.org"
SCRIPT_SAFE_ESCAPES = str.maketrans(
    {"<": "\\u003c", ">": "\\u003e", "&": "\\u0026"}
)


class Service(msgspec.Struct, frozen=True, kw_only=True, rename={"type": "@type"}):
    type: str = "Service"
    name: str
    description: str


class Offer(msgspec.Struct, frozen=True, kw_only=True, rename={"type": "@type"}):
    type: str = "Offer"
    item_offered: Service = msgspec.field(name="itemOffered")


class OfferCatalog(msgspec.Struct, frozen=True, kw_only=True, rename={"type": "@type"}):
    type: str = "OfferCatalog"
    name: str
    item_list_element: tuple[Offer, ...] = msgspec.field(name="itemListElement")


class FinancialService(
    msgspec.Struct,
    frozen=True,
    kw_only=True,
    rename={"context": "@context", "type": "@type"},
):
    """schema.org ``FinancialService`` describing the platform."""

    context: str = SCHEMA_CONTEXT
    type: str = "FinancialService"
    name: str
    description: str
    url: str
    logo: str
    same_as: tuple[str, ...] = msgspec.field(name="sameAs")
    service_type: tuple[str, ...] = msgspec.field(name="serviceType")
    area_served: str = msgspec.field(default="Worldwide", name="areaServed")
    has_offer_catalog: OfferCatalog = msgspec.field(name="hasOfferCatalog")


SERVICE_TYPES = (
    "Investment Platform",
    "Cryptocurrency Investment",
    "Asset Management",
    "Staking Services",
)

OFFER_CATALOG = OfferCatalog(
    name="Investment Services",
    item_list_element=(
        Offer(
            item_offered=Service(
                name="Startup Investment",
                description="Invest in early-stage startups and founders",
            )
        ),
        Offer(
            item_offered=Service(
                name="Crypto Investment",
                description="Cryptocurrency investment and portfolio management",
            )
        ),
        Offer(
            item_offered=Service(
                name="Staking Services",
                description="Earn passive income through crypto staking",
            )
        ),
    ),
)


def build_financial_service(
    *, name: str, description: str, url: str, logo: str, same_as: tuple[str, ...]
) -> FinancialService:
    """Return the ``FinancialService`` document for the site.

    ``url`` and ``logo`` must already be absolute.
    """
    return FinancialService(
        name=name,
        description=description,
        url=url,
        logo=logo,
        same_as=same_as,
        service_type=SERVICE_TYPES,
        has_offer_catalog=OFFER_CATALOG,
    )


def encode_json_ld(document: FinancialService) -> str:
    """Serialize ``document`` to compact JSON text.

    ``<``, ``>`` and ``&`` are written as JSON unicode escapes so the text can
    sit inside a ``<script>`` element without closing it. The decoded values
    are unchanged.
    """
    text = msgspec_json.encode(document).decode("utf-8")
    return text.translate(SCRIPT_SAFE_ESCAPES)


__all__ = [
    "OFFER_CATALOG",
    "SCHEMA_CONTEXT",
    "SCRIPT_SAFE_ESCAPES",
    "SERVICE_TYPES",
    "FinancialService",
    "Offer",
    "OfferCatalog",
    "Service",
    "build_financial_service",
    "encode_json_ld",
]
