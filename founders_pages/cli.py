"""Cyclopts CLI entrypoint for inspecting and rendering page metadata.

The ``pages`` console script composes the metadata record for a catalog page
and either prints it as JSON or renders the document head tags. Pages come
from the built-in catalog unless ``--config`` points at a ``pages.yaml`` file.

Examples
--------
List the catalog:

>>> from founders_pages.cli import app
>>> app(["list"])  # doctest: +SKIP

Render the head block for the contact page into a file:

>>> app(["render", "contact", "--output", "public/contact-head.html"])  # doctest: +SKIP
"""

from __future__ import annotations

import logging
import os
import typing as typ
from pathlib import Path

import cyclopts
import msgspec.json as msgspec_json
from cyclopts import App, Parameter

from .catalog import PAGE_METADATA, get_page
from .config import SiteBundle, get_site_config, get_social_config, load_site_config
from .head import HeadRenderer
from .metadata import compose_metadata

LOG_LEVEL_VARIABLE = "PAGES_LOG_LEVEL"

app = App(name="pages", config=cyclopts.config.Env("INPUT_", command=False))  # type: ignore[unknown-argument]


def _format_path(path: Path) -> str:
    """Return a cwd-relative path when possible, otherwise the absolute path."""
    if path.is_absolute():
        try:
            return str(path.relative_to(Path.cwd()))
        except ValueError:  # pragma: no cover - fallback for different roots
            return str(path)
    return str(path)


def _load_bundle(config: Path | None) -> SiteBundle:
    """Return the YAML bundle at ``config`` or the built-in registry and catalog."""
    if config is not None:
        return load_site_config(config)
    return SiteBundle(
        site=get_site_config(), social=get_social_config(), pages=dict(PAGE_METADATA)
    )


@app.command(name="list", help="List catalog pages and their canonical URLs.")
def list_pages(
    *,
    config: typ.Annotated[
        Path | None, Parameter(help="Path to site config", env_var="INPUT_CONFIG")
    ] = None,
) -> None:
    """Print each page identifier alongside its canonical URL."""
    bundle = _load_bundle(config)
    for page_id, page in sorted(bundle.pages.items()):
        meta = compose_metadata(page, site=bundle.site, social=bundle.social)
        print(f"{page_id}: {meta.alternates.canonical}")


@app.command(help="Print the composed metadata record for a page as JSON.")
def show(
    page: typ.Annotated[str, Parameter(help="Page identifier")],
    *,
    config: typ.Annotated[
        Path | None, Parameter(help="Path to site config", env_var="INPUT_CONFIG")
    ] = None,
) -> None:
    """Compose ``page`` and print the record as indented JSON.

    Raises
    ------
    KeyError
        If ``page`` is not part of the selected catalog.
    """
    bundle = _load_bundle(config)
    meta = compose_metadata(
        get_page(page, bundle.pages), site=bundle.site, social=bundle.social
    )
    encoded = msgspec_json.format(msgspec_json.encode(meta.to_dict()), indent=2)
    print(encoded.decode("utf-8"))


@app.command(help="Render the document head tags for a page.")
def render(
    page: typ.Annotated[str, Parameter(help="Page identifier")],
    *,
    config: typ.Annotated[
        Path | None, Parameter(help="Path to site config", env_var="INPUT_CONFIG")
    ] = None,
    output: typ.Annotated[
        Path | None,
        Parameter(help="Write the HTML here instead of stdout", env_var="INPUT_OUTPUT"),
    ] = None,
) -> None:
    """Render the head HTML for ``page`` to ``output`` or stdout."""
    bundle = _load_bundle(config)
    meta = compose_metadata(
        get_page(page, bundle.pages), site=bundle.site, social=bundle.social
    )
    renderer = HeadRenderer()
    if output is None:
        print(renderer.render(meta), end="")
        return
    written = renderer.write(meta, output)
    print(f"wrote {_format_path(written)}")


def main() -> None:
    """Invoke the Cyclopts application that powers the ``pages`` console command.

    The log level is read from ``PAGES_LOG_LEVEL`` (default ``WARNING``).

    Examples
    --------
    >>> main()  # doctest: +SKIP
    """
    logging.basicConfig(
        level=os.getenv(LOG_LEVEL_VARIABLE, "WARNING").upper(),
        format="%(levelname)s %(name)s: %(message)s",
    )
    app()


if __name__ == "__main__":  # pragma: no cover - manual invocation helper
    main()
