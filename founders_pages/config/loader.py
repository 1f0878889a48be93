"""Load site registry overrides and the page catalog from YAML."""

from __future__ import annotations

import logging
import typing as typ

from ruamel.yaml import YAML

from .helpers import _build_page_config, _merge_site, _merge_social, _require_mapping
from .models import PageConfig, SiteBundle
from .registry import SITE_CONFIG, SOCIAL_CONFIG

if typ.TYPE_CHECKING:
    from pathlib import Path

logger = logging.getLogger(__name__)


def load_site_config(path: Path) -> SiteBundle:
    """Load the YAML file describing the site registry and its pages.

    Parameters
    ----------
    path : Path
        Filesystem path to the YAML configuration (for example,
        ``config/pages.yaml``).

    Returns
    -------
    SiteBundle
        Site and social registries, with any ``site``/``social`` overrides
        merged over the built-in defaults, plus the ``pages`` catalog.

    Raises
    ------
    FileNotFoundError
        If the configuration file does not exist at ``path``.
    TypeError
        If the top-level YAML structure is not a mapping.
    SiteConfigError
        If the ``site`` or ``social`` sections are malformed.
    PageConfigError
        If a page entry is missing ``title`` or ``description`` or declares an
        unknown type.

    Examples
    --------
    >>> from pathlib import Path
    >>> from founders_pages.config import load_site_config
    >>> bundle = load_site_config(Path("config/pages.yaml"))  # doctest: +SKIP
    >>> bundle.pages["blog-launch"].type  # doctest: +SKIP
    <PageType.ARTICLE: 'article'>
    """
    if not path.exists():
        msg = f"Configuration file '{path}' not found."
        raise FileNotFoundError(msg)

    loader = YAML(typ="safe")
    loader.version = (1, 2)
    with path.open("r", encoding="utf-8") as handle:
        loaded = loader.load(handle) or {}
    if not isinstance(loaded, dict):
        msg = "Top-level YAML structure must be a mapping."
        raise TypeError(msg)
    raw: dict[str, typ.Any] = dict(loaded)

    site = _merge_site(SITE_CONFIG, _require_mapping(raw.get("site"), "Site"))
    social = _merge_social(SOCIAL_CONFIG, _require_mapping(raw.get("social"), "Social"))

    pages: dict[str, PageConfig] = {}
    for key, payload in _require_mapping(raw.get("pages"), "Pages").items():
        pages[str(key)] = _build_page_config(str(key), payload)

    logger.info("Loaded %d page(s) from %s", len(pages), path)
    return SiteBundle(site=site, social=social, pages=pages)


__all__ = ["load_site_config"]
