"""The compiled-in configuration for benjlindsay.com.

:func:`load` builds the record from ``SITE_DEFINITION`` the first time it is
called, validates it, and hands back that same instance for the rest of the
process. No files are read.
"""

from __future__ import annotations

import functools

from .loader import site_config_from_mapping
from .models import SiteConfig
from .validation import validate

SITE_DEFINITION: dict[str, object] = {
    "url": "https://benjlindsay.com",
    "pathPrefix": "/",
    "title": "Ben Lindsay",
    "subtitle": "Musings about data science, tech, and whatever else I feel like",
    "copyright": "© 2019 All rights reserved.",
    "disqusShortname": "benlindsay",
    "postsPerPage": 10,
    "googleAnalyticsId": "UA-71898636-1",
    "useKatex": True,
    "menu": [
        {"label": "Articles", "path": "/"},
        {"label": "About me", "path": "/pages/about"},
        {"label": "Contact me", "path": "/pages/contacts"},
    ],
    "author": {
        "name": "Ben Lindsay",
        "photo": "/photo.jpg",
        "bio": (
            "Data Scientist / Pythonista / Recovering Academic "
            "in the Twin Cities area"
        ),
        "contacts": {
            "email": "benjlindsay@gmail.com",
            "facebook": "",
            "telegram": "",
            "twitter": "ben_j_lindsay",
            "github": "benlindsay",
            "rss": "",
            "vkontakte": "",
            "linkedin": "benjlindsay",
            "instagram": "",
            "line": "",
            "gitlab": "",
            "weibo": "",
        },
    },
}


@functools.cache
def load() -> SiteConfig:
    """Return the validated site configuration shared by the whole process."""
    return validate(site_config_from_mapping(SITE_DEFINITION))


__all__ = ["SITE_DEFINITION", "load"]
