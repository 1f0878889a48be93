"""Tests for rendering composed metadata into document head tags.

The rendered HTML is parsed with BeautifulSoup so assertions target tag
attributes rather than exact whitespace.
"""

from __future__ import annotations

import dataclasses as dc
import datetime as dt
import typing as typ

import msgspec.json as msgspec_json
import pytest
from bs4 import BeautifulSoup

from founders_pages.catalog import compose_page_metadata
from founders_pages.config import PageConfig, get_site_config
from founders_pages.head import HeadRenderer
from founders_pages.metadata import FixedClock, compose_metadata

if typ.TYPE_CHECKING:
    from pathlib import Path

CLOCK = FixedClock(dt.datetime(2026, 10, 18, tzinfo=dt.UTC))


@pytest.fixture(scope="module")
def renderer() -> HeadRenderer:
    return HeadRenderer()


def _soup(html: str) -> BeautifulSoup:
    return BeautifulSoup(html, "html.parser")


def test_head_contains_core_tags(renderer: HeadRenderer) -> None:
    """Title, canonical link and description metas are emitted."""
    meta = compose_page_metadata("insights", clock=CLOCK)
    soup = _soup(renderer.render(meta))
    assert soup.title is not None
    assert soup.title.string == "Insights & Analysis - Invest Founders"
    canonical = soup.find("link", rel="canonical")
    assert canonical is not None
    assert canonical["href"] == "https://investfounders.com/insights"
    description = soup.find("meta", attrs={"name": "description"})
    assert description is not None
    assert description["content"] == meta.description
    robots = soup.find("meta", attrs={"name": "robots"})
    assert robots is not None
    assert robots["content"] == "index, follow"


def test_head_social_tags(renderer: HeadRenderer) -> None:
    meta = compose_page_metadata("market", clock=CLOCK)
    soup = _soup(renderer.render(meta))
    og_url = soup.find("meta", attrs={"property": "og:url"})
    assert og_url is not None
    assert og_url["content"] == "https://investfounders.com/market"
    og_image = soup.find("meta", attrs={"property": "og:image"})
    assert og_image is not None
    assert og_image["content"] == "https://investfounders.com/og-image.jpg"
    card = soup.find("meta", attrs={"name": "twitter:card"})
    assert card is not None
    assert card["content"] == "summary_large_image"
    article_props = soup.find_all(
        "meta", attrs={"property": lambda v: v and v.startswith("article:")}
    )
    assert not article_props


def test_head_article_tags(renderer: HeadRenderer) -> None:
    page = PageConfig(
        title="Launch",
        description="News",
        url="/insights/launch",
        type="article",  # type: ignore[arg-type]
        section="Insights",
        tags=("a", "b"),
    )
    soup = _soup(renderer.render(compose_metadata(page, clock=CLOCK)))
    tag = soup.find("meta", attrs={"property": "article:tag"})
    assert tag is not None
    assert tag["content"] == "a, b"
    assert soup.find("meta", attrs={"property": "article:published_time"}) is None


def test_head_icons_manifest_and_json_ld(renderer: HeadRenderer) -> None:
    meta = compose_page_metadata("home", clock=CLOCK)
    soup = _soup(renderer.render(meta))
    icons = soup.find_all("link", rel="icon")
    assert [icon["sizes"] for icon in icons] == ["16x16", "32x32", "any"]
    apple = soup.find("link", rel="apple-touch-icon")
    assert apple is not None
    assert apple["sizes"] == "180x180"
    manifest = soup.find("link", rel="manifest")
    assert manifest is not None
    assert manifest["href"] == "/manifest/site.webmanifest"
    scripts = soup.find_all("script", type="application/ld+json")
    assert len(scripts) == 1, "expected exactly one JSON-LD script"
    assert scripts[0].string == meta.seo.json_ld
    assert msgspec_json.decode(scripts[0].string)["@type"] == "FinancialService"


def test_head_write(renderer: HeadRenderer, tmp_path: Path) -> None:
    output = tmp_path / "nested" / "head.html"
    written = renderer.write(compose_page_metadata("contact", clock=CLOCK), output)
    assert written == output
    html = output.read_text(encoding="utf-8")
    assert html.endswith("\n")
    assert html.startswith("<title>Contact Us - Invest Founders</title>")


def test_head_json_ld_cannot_close_its_script(renderer: HeadRenderer) -> None:
    """Markup in site fields stays inside the single JSON-LD script."""
    name = "A</script><b>B & C</b>"
    site = dc.replace(get_site_config(), name=name)
    meta = compose_metadata(
        PageConfig(title="Launch", description="News"), site=site, clock=CLOCK
    )
    html = renderer.render(meta)
    assert "</script><b>" not in html
    soup = _soup(html)
    scripts = soup.find_all("script", type="application/ld+json")
    assert len(scripts) == 1, "expected exactly one JSON-LD script"
    assert soup.find("b") is None, "expected no injected markup"
    payload = msgspec_json.decode(scripts[0].string)
    assert payload["name"] == name
