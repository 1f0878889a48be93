"""Render composed metadata into document ``<head>`` tags.

``HeadRenderer`` wraps the ``head.jinja`` template and turns a
:class:`~founders_pages.metadata.ResolvedMetadata` into the tag block the page
layer inserts into each document: title, description/keyword/robots metas,
canonical link, ``og:*`` and ``twitter:*`` metas, icon and manifest links, and
a single JSON-LD script carrying the structured data verbatim.

>>> from founders_pages.catalog import compose_page_metadata
>>> html = HeadRenderer().render(compose_page_metadata("contact"))
>>> html.startswith("<title>Contact Us - Invest Founders</title>")
True
"""

from __future__ import annotations

import typing as typ
from pathlib import Path

from jinja2 import Environment, FileSystemLoader

if typ.TYPE_CHECKING:
    from .metadata import ResolvedMetadata


class HeadRenderer:
    """Render metadata records with the shared head template."""

    def __init__(self, *, templates_dir: Path | None = None) -> None:
        """Initialize the Jinja environment and load ``head.jinja``.

        Parameters
        ----------
        templates_dir : Path, optional
            Directory containing Jinja templates. Defaults to
            ``founders_pages/templates``.
        """
        self.templates_dir = templates_dir or Path(__file__).parent / "templates"
        self.env = Environment(
            loader=FileSystemLoader(self.templates_dir),
            autoescape=True,
            trim_blocks=True,
            lstrip_blocks=True,
        )
        self.template = self.env.get_template("head.jinja")

    def render(self, metadata: ResolvedMetadata) -> str:
        """Return the head HTML for ``metadata``, ending with a newline."""
        html = self.template.render(metadata=metadata)
        if not html.endswith("\n"):
            html += "\n"
        return html

    def write(self, metadata: ResolvedMetadata, output: Path) -> Path:
        """Render ``metadata`` to ``output`` as UTF-8 and return the path."""
        output.parent.mkdir(parents=True, exist_ok=True)
        output.write_text(self.render(metadata), encoding="utf-8")
        return output


__all__ = ["HeadRenderer"]
