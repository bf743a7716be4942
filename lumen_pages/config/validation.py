"""Invariant checks for :class:`SiteConfig` and the visible contact view.

``validate`` walks the record in field order and raises
:class:`ValidationError` for the first rule that does not hold, naming the
field and the rule. Nothing is mutated: a valid config is returned as-is, so
callers can write ``config = validate(build())``.

Examples
--------
>>> from lumen_pages.config import load, validate, visible_contacts
>>> validate(load()) is load()
True
>>> list(visible_contacts(load()))[0]
('email', 'benjlindsay@gmail.com')
"""

from __future__ import annotations

import collections.abc as cabc
import typing as typ
from urllib.parse import urlsplit

from .._constants import CONTACT_PLATFORMS
from .models import ValidationError

if typ.TYPE_CHECKING:
    from .models import AuthorProfile, MenuItem, SiteConfig

_URL_SCHEMES = frozenset({"http", "https"})
_TEXT_FIELDS: tuple[tuple[str, str], ...] = (
    ("title", "title"),
    ("subtitle", "subtitle"),
    ("copyright", "copyright"),
    ("disqus_shortname", "disqusShortname"),
    ("google_analytics_id", "googleAnalyticsId"),
)


def validate(config: SiteConfig) -> SiteConfig:
    """Check every configuration invariant and return ``config`` unchanged.

    Parameters
    ----------
    config : SiteConfig
        The record to check.

    Returns
    -------
    SiteConfig
        The same object that was passed in.

    Raises
    ------
    ValidationError
        With ``kind == "InvalidField"`` when a field breaks a rule. The
        ``field`` attribute uses the document field names (``postsPerPage``,
        ``pathPrefix``, ``contacts``...).
    """
    _check_url(config.url)
    _check_path_prefix(config.path_prefix)
    for attribute, field in _TEXT_FIELDS:
        _require_str(getattr(config, attribute), field)
    _check_posts_per_page(config.posts_per_page)
    if not isinstance(config.use_katex, bool):
        raise ValidationError("useKatex", "must be a boolean")
    _check_menu(config.menu)
    _check_author(config.author)
    return config


def visible_contacts(config: SiteConfig) -> cabc.Iterator[tuple[str, str]]:
    """Yield ``(platform, handle)`` for each contact with a non-empty handle.

    Pairs come out in the declaration order of ``CONTACT_PLATFORMS``. Each
    call starts a fresh walk over the (immutable) contacts mapping.
    """
    contacts = config.author.contacts
    for platform in CONTACT_PLATFORMS:
        handle = contacts.get(platform, "")
        if handle:
            yield platform, handle


def _require_str(value: object, field: str) -> None:
    if not isinstance(value, str):
        raise ValidationError(field, "must be a string")


def _check_url(url: object) -> None:
    _require_str(url, "url")
    try:
        parts = urlsplit(typ.cast("str", url))
    except ValueError as exc:
        raise ValidationError("url", f"is not a parseable URI ({exc})") from exc
    if parts.scheme not in _URL_SCHEMES or not parts.hostname:
        raise ValidationError("url", "must be an absolute http(s) URI with a host")
    if any(char.isspace() for char in typ.cast("str", url)):
        raise ValidationError("url", "must not contain whitespace")


def _check_path_prefix(prefix: object) -> None:
    _require_str(prefix, "pathPrefix")
    text = typ.cast("str", prefix)
    if not text.startswith("/"):
        raise ValidationError("pathPrefix", "must start with '/'")
    if not text.endswith("/"):
        raise ValidationError("pathPrefix", "must end with '/'")
    if any(char.isspace() for char in text):
        raise ValidationError("pathPrefix", "must not contain whitespace")


def _check_posts_per_page(value: object) -> None:
    # bool is an int subclass; True must not pass as 1.
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValidationError("postsPerPage", "must be an integer")
    if value <= 0:
        raise ValidationError("postsPerPage", "must be greater than 0")


def _check_menu(menu: cabc.Sequence[MenuItem]) -> None:
    for index, item in enumerate(menu):
        for attribute in ("label", "path"):
            value = getattr(item, attribute)
            field = f"menu[{index}].{attribute}"
            _require_str(value, field)
            if not value.strip():
                raise ValidationError(field, "must not be empty")


def _check_author(author: AuthorProfile) -> None:
    for attribute in ("name", "photo", "bio"):
        _require_str(getattr(author, attribute), f"author.{attribute}")
    _check_contacts(author.contacts)


def _check_contacts(contacts: cabc.Mapping[str, object]) -> None:
    unknown = [key for key in contacts if key not in CONTACT_PLATFORMS]
    if unknown:
        names = ", ".join(sorted(str(key) for key in unknown))
        raise ValidationError("contacts", f"unknown platform(s): {names}")
    missing = [key for key in CONTACT_PLATFORMS if key not in contacts]
    if missing:
        raise ValidationError("contacts", f"missing platform(s): {', '.join(missing)}")
    for platform, handle in contacts.items():
        if not isinstance(handle, str):
            raise ValidationError("contacts", f"handle for '{platform}' must be a string")


__all__ = ["validate", "visible_contacts"]
