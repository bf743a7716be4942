"""Typed, validated configuration for the benjlindsay.com blog.

This subpackage holds the site metadata, navigation menu and author profile
that the static site renderer reads. The primary entry point is :func:`load`,
which returns the compiled-in :class:`SiteConfig` after checking it with
:func:`validate`. Documents on disk use the renderer's field names and are
read and written by :func:`load_site_config` and :func:`dump_site_config`.

Examples
--------
>>> from lumen_pages.config import load, visible_contacts
>>> site = load()
>>> [item.label for item in site.menu]
['Articles', 'About me', 'Contact me']
>>> dict(visible_contacts(site))["github"]
'benlindsay'
"""

from .contacts import contact_href, contact_links
from .loader import (
    dump_site_config,
    dumps_site_config,
    load_site_config,
    site_config_from_mapping,
    site_config_to_mapping,
)
from .models import (
    INVALID_FIELD,
    AuthorProfile,
    ContactLink,
    MenuItem,
    SiteConfig,
    SiteConfigError,
    ValidationError,
)
from .site import load
from .validation import validate, visible_contacts

__all__ = [
    "INVALID_FIELD",
    "AuthorProfile",
    "ContactLink",
    "MenuItem",
    "SiteConfig",
    "SiteConfigError",
    "ValidationError",
    "contact_href",
    "contact_links",
    "dump_site_config",
    "dumps_site_config",
    "load",
    "load_site_config",
    "site_config_from_mapping",
    "site_config_to_mapping",
    "validate",
    "visible_contacts",
]
