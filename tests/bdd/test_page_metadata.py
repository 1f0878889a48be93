"""Behaviour tests for page metadata composition using pytest-bdd.

These scenarios compose metadata for small page descriptions and check the
title suffix rule, canonical URL agreement between the SEO, alternates, Open
Graph and Twitter blocks, and the default share image fallback.

Usage
-----
Run ``pytest tests/bdd/test_page_metadata.py -v``. Scenarios live in
``features/page_metadata.feature``.
"""

from __future__ import annotations

import datetime as dt
import typing as typ
from pathlib import Path

import pytest
from pytest_bdd import given, parsers, scenarios, then, when

from founders_pages.config import PageConfig
from founders_pages.metadata import FixedClock, ResolvedMetadata, compose_metadata

FEATURE_FILE = (
    Path(__file__).resolve().parents[2] / "features" / "page_metadata.feature"
)
scenarios(FEATURE_FILE)

DEFAULT_IMAGE = "https://investfounders.com/og-image.jpg"

ScenarioState = dict[str, typ.Any]


@pytest.fixture
def scenario_state() -> ScenarioState:
    """Return a mutable dict used to share scenario state across BDD steps."""
    return {}


@given(parsers.parse('a page titled "{title}" at "{url}"'))
def given_page_with_url(title: str, url: str, scenario_state: ScenarioState) -> None:
    scenario_state["page"] = PageConfig(
        title=title, description="Scenario page", url=url
    )


@given(parsers.parse('a page titled "{title}" without a url'))
def given_page_without_url(title: str, scenario_state: ScenarioState) -> None:
    scenario_state["page"] = PageConfig(title=title, description="Scenario page")


@when("I compose the page metadata")
def when_compose(scenario_state: ScenarioState) -> None:
    page = typ.cast("PageConfig", scenario_state["page"])
    clock = FixedClock(dt.datetime(2026, 10, 18, tzinfo=dt.UTC))
    scenario_state["meta"] = compose_metadata(page, clock=clock)


@then(parsers.parse('the document title is "{title}"'))
def then_title(title: str, scenario_state: ScenarioState) -> None:
    meta = typ.cast("ResolvedMetadata", scenario_state["meta"])
    assert meta.title == title, f"expected title {title!r}, got {meta.title!r}"


@then(parsers.parse('every canonical URL is "{url}"'))
def then_canonical(url: str, scenario_state: ScenarioState) -> None:
    meta = typ.cast("ResolvedMetadata", scenario_state["meta"])
    observed = {
        "seo": meta.seo.canonical,
        "alternates": meta.alternates.canonical,
        "open_graph": meta.open_graph.url,
        "twitter": meta.twitter.url,
    }
    assert set(observed.values()) == {url}, f"expected {url!r}, got {observed!r}"


@then("both social cards use the default share image")
def then_default_image(scenario_state: ScenarioState) -> None:
    meta = typ.cast("ResolvedMetadata", scenario_state["meta"])
    assert meta.open_graph.images[0].url == DEFAULT_IMAGE
    assert meta.twitter.images == (DEFAULT_IMAGE,)
