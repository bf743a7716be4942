"""Resolve contact handles into the links the sidebar renders."""

from __future__ import annotations

import typing as typ

from .models import ContactLink, ValidationError
from .validation import visible_contacts

if typ.TYPE_CHECKING:
    import collections.abc as cabc

    from .models import SiteConfig

CONTACT_HREF_TEMPLATES: dict[str, str] = {
    "email": "mailto:{handle}",
    "facebook": "https://www.facebook.com/{handle}",
    "telegram": "telegram:{handle}",
    "twitter": "https://www.twitter.com/{handle}",
    "github": "https://github.com/{handle}",
    "rss": "{handle}",
    "vkontakte": "https://vk.com/{handle}",
    "linkedin": "https://www.linkedin.com/in/{handle}",
    "instagram": "https://www.instagram.com/{handle}",
    "line": "line://ti/p/{handle}",
    "gitlab": "https://www.gitlab.com/{handle}",
    "weibo": "https://www.weibo.com/{handle}",
}


def contact_href(platform: str, handle: str) -> str:
    """Return the link target for ``handle`` on ``platform``.

    >>> contact_href("github", "benlindsay")
    'https://github.com/benlindsay'
    >>> contact_href("email", "a@b.com")
    'mailto:a@b.com'
    """
    try:
        template = CONTACT_HREF_TEMPLATES[platform]
    except KeyError as exc:
        msg = f"unknown platform(s): {platform}"
        raise ValidationError("contacts", msg) from exc
    return template.format(handle=handle)


def contact_links(config: SiteConfig) -> cabc.Iterator[ContactLink]:
    """Yield a :class:`ContactLink` for every visible contact, in order."""
    for platform, handle in visible_contacts(config):
        yield ContactLink(platform, handle, contact_href(platform, handle))


__all__ = ["CONTACT_HREF_TEMPLATES", "contact_href", "contact_links"]
