"""Page metadata composition for the Invest Founders marketing site.

This package expands small per-page descriptions into complete document
metadata records (title, canonical URL, robots directives, Open Graph and
Twitter Card tags, icons, and schema.org structured data) and exposes the
``pages`` CLI used to inspect and render them.

Exports
-------
- ``app``: Cyclopts application entry for subcommands.
- ``main``: Convenience function that invokes the Cyclopts app.
- ``compose_metadata``: Compose a :class:`ResolvedMetadata` for a page.
- ``compose_page_metadata``: Look a page up in the catalog and compose it.

Examples
--------
>>> from founders_pages import compose_page_metadata
>>> compose_page_metadata("about").seo.canonical
'https://investfounders.com/about'
"""

from __future__ import annotations

from .catalog import PAGE_METADATA, compose_page_metadata, get_page
from .cli import app, main
from .metadata import ResolvedMetadata, compose_metadata

__all__ = [
    "PAGE_METADATA",
    "ResolvedMetadata",
    "app",
    "compose_metadata",
    "compose_page_metadata",
    "get_page",
    "main",
]
