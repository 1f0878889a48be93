"""Common literal values used across founders_pages.

These constants keep platform-wide metadata values centralized so composers,
templates, and tests import the same values without drifting. Intended for
internal use within the founders_pages package.

Examples
--------
>>> from founders_pages import _constants
>>> _constants.DEFAULT_OG_IMAGE
'/og-image.jpg'
>>> _constants.COPYRIGHT_TEMPLATE.format(year=2026, name="Invest Founders")
'© 2026 Invest Founders. All rights reserved.'
"""

DEFAULT_ROBOTS = "index, follow"
RATING = "general"
DISTRIBUTION = "global"
REVISIT = "7 days"
COPYRIGHT_TEMPLATE = "© {year} {name}. All rights reserved."

DEFAULT_OG_IMAGE = "/og-image.jpg"
OG_IMAGE_WIDTH = 1200
OG_IMAGE_HEIGHT = 630
OG_IMAGE_TYPE = "image/jpeg"

THEME_COLOR = "#0f0f0f"
BROWSER_CONFIG = "/browserconfig.xml"
MANIFEST_PATH = "/manifest/site.webmanifest"
