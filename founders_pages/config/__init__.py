"""Site registry, environment profile and YAML loading for page metadata.

This subpackage holds the immutable inputs of metadata composition: the
process-wide :class:`SiteConfig` and :class:`SocialConfig` registries, the
per-page :class:`PageConfig` description, and the environment profile derived
from process variables. :func:`load_site_config` reads a ``pages.yaml`` file,
merges its ``site``/``social`` overrides over the built-in registries, and
returns a :class:`SiteBundle` holding the resulting page catalog.

Examples
--------
>>> from founders_pages.config import PageConfig, get_site_config
>>> get_site_config().name
'Invest Founders'
>>> PageConfig(title="Contact", description="Reach us", url="/contact").type
<PageType.WEBSITE: 'website'>
"""

from .environment import DEVELOPMENT_BASE_URL, get_environment_profile
from .loader import load_site_config
from .models import (
    AnalyticsKeys,
    EnvironmentProfile,
    MonitoringKeys,
    PageConfig,
    PageConfigError,
    PageType,
    SiteBundle,
    SiteConfig,
    SiteConfigError,
    SocialConfig,
)
from .registry import SITE_CONFIG, SOCIAL_CONFIG, get_site_config, get_social_config

__all__ = [
    "DEVELOPMENT_BASE_URL",
    "SITE_CONFIG",
    "SOCIAL_CONFIG",
    "AnalyticsKeys",
    "EnvironmentProfile",
    "MonitoringKeys",
    "PageConfig",
    "PageConfigError",
    "PageType",
    "SiteBundle",
    "SiteConfig",
    "SiteConfigError",
    "SocialConfig",
    "get_environment_profile",
    "get_site_config",
    "get_social_config",
    "load_site_config",
]
