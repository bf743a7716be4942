"""Common literal values used across lumen_pages.

The contact platform set is closed: every author profile lists exactly these
keys, in this order, with an empty string marking a platform that is not
provided.

Examples
--------
>>> from lumen_pages import _constants
>>> _constants.CONTACT_PLATFORMS[:3]
('email', 'facebook', 'telegram')
>>> len(_constants.CONTACT_PLATFORMS)
12
"""

from pathlib import Path

CONTACT_PLATFORMS: tuple[str, ...] = (
    "email",
    "facebook",
    "telegram",
    "twitter",
    "github",
    "rss",
    "vkontakte",
    "linkedin",
    "instagram",
    "line",
    "gitlab",
    "weibo",
)

DEFAULT_EXPORT_PATH = Path("config/site.yaml")
