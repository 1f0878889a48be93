"""Derive the runtime environment profile from process environment variables."""

from __future__ import annotations

import os
import typing as typ

from .helpers import _optional_str
from .models import AnalyticsKeys, EnvironmentProfile, MonitoringKeys, SiteConfig
from .registry import SITE_CONFIG

ENVIRONMENT_VARIABLE = "SITE_ENV"
DEVELOPMENT_BASE_URL = "http://localhost:3000"


def get_environment_profile(
    environ: typ.Mapping[str, str] | None = None,
    *,
    site: SiteConfig | None = None,
) -> EnvironmentProfile:
    """Return the environment profile for the current process.

    Parameters
    ----------
    environ : Mapping[str, str], optional
        Environment mapping to read; defaults to ``os.environ``.
    site : SiteConfig, optional
        Registry supplying the production base URL; defaults to the built-in
        site registry.

    Returns
    -------
    EnvironmentProfile
        Production/development flags, the effective base URL, and analytics
        and monitoring keys. Keys resolve to ``None`` outside production or
        when the variable is unset or blank.
    """
    env = os.environ if environ is None else environ
    registry = site or SITE_CONFIG
    mode = _optional_str(env.get(ENVIRONMENT_VARIABLE))
    is_production = mode == "production"
    is_development = mode == "development"

    def _production_value(name: str) -> str | None:
        if not is_production:
            return None
        return _optional_str(env.get(name))

    return EnvironmentProfile(
        is_production=is_production,
        is_development=is_development,
        base_url=registry.url if is_production else DEVELOPMENT_BASE_URL,
        analytics=AnalyticsKeys(
            google_analytics=_production_value("GA_ID"),
            mixpanel=_production_value("MIXPANEL_TOKEN"),
        ),
        monitoring=MonitoringKeys(sentry=_production_value("SENTRY_DSN")),
    )


__all__ = ["DEVELOPMENT_BASE_URL", "ENVIRONMENT_VARIABLE", "get_environment_profile"]
