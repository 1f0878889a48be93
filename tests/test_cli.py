"""Tests for the ``pages`` CLI commands.

The command functions are called directly so the tests do not depend on how
Cyclopts exits after dispatch.
"""

from __future__ import annotations

from pathlib import Path

import msgspec.json as msgspec_json
import pytest

from founders_pages import cli

REPO_CONFIG = Path(__file__).resolve().parents[1] / "config" / "pages.yaml"


def test_list_prints_catalog(capsys: pytest.CaptureFixture[str]) -> None:
    cli.list_pages()
    lines = capsys.readouterr().out.splitlines()
    assert "contact: https://investfounders.com/contact" in lines
    assert "home: https://investfounders.com/" in lines
    assert len(lines) == 8, f"expected eight catalog pages, got {lines!r}"


def test_show_prints_json(capsys: pytest.CaptureFixture[str]) -> None:
    cli.show("about")
    payload = msgspec_json.decode(capsys.readouterr().out)
    assert payload["title"] == "About Us - Invest Founders"
    assert payload["canonical"] == "https://investfounders.com/about"
    assert payload["alternates"]["canonical"] == payload["canonical"]


def test_show_unknown_page() -> None:
    with pytest.raises(KeyError, match="Unknown page 'pricing'"):
        cli.show("pricing")


def test_show_reads_yaml_config(capsys: pytest.CaptureFixture[str]) -> None:
    cli.show("blog-launch", config=REPO_CONFIG)
    payload = msgspec_json.decode(capsys.readouterr().out)
    assert payload["open_graph"]["type"] == "article"
    assert payload["open_graph"]["article:author"] == "Research Desk"
    assert payload["twitter"]["images"] == [
        "https://investfounders.com/images/insights/prelist-launch.jpg"
    ]


def test_render_to_stdout(capsys: pytest.CaptureFixture[str]) -> None:
    cli.render("join", config=REPO_CONFIG)
    out = capsys.readouterr().out
    assert out.startswith("<title>Join | Invest Founders</title>")


def test_render_to_file(
    tmp_path: Path, capsys: pytest.CaptureFixture[str], monkeypatch: pytest.MonkeyPatch
) -> None:
    monkeypatch.chdir(tmp_path)
    output = tmp_path / "public" / "contact-head.html"
    cli.render("contact", output=output)
    assert output.exists()
    assert capsys.readouterr().out.strip() == "wrote public/contact-head.html"
