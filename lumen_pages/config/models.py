"""Typed dataclasses describing the blog site configuration."""

from __future__ import annotations

import dataclasses as dc
import types
import typing as typ

from .._constants import CONTACT_PLATFORMS

INVALID_FIELD = "InvalidField"


class SiteConfigError(ValueError):
    """Raised when the site configuration is invalid or incomplete."""


class ValidationError(SiteConfigError):
    """Raised when a single field breaks one of the configuration rules."""

    kind = INVALID_FIELD

    def __init__(self, field: str, rule: str) -> None:
        self.field = field
        self.rule = rule
        super().__init__(f"Invalid field '{field}': {rule}")


@dc.dataclass(frozen=True, slots=True)
class MenuItem:
    """Navigation entry shown in the sidebar menu."""

    label: str
    path: str


@dc.dataclass(frozen=True, slots=True)
class AuthorProfile:
    """Author identity plus the handles for each contact platform."""

    name: str
    photo: str
    bio: str
    # Excluded from hashing: the read-only mapping proxy is unhashable.
    contacts: typ.Mapping[str, str] = dc.field(
        default_factory=lambda: dict.fromkeys(CONTACT_PLATFORMS, ""), hash=False
    )

    def __post_init__(self) -> None:
        """Freeze the contacts mapping so the profile stays read-only."""
        object.__setattr__(
            self, "contacts", types.MappingProxyType(dict(self.contacts))
        )


@dc.dataclass(frozen=True, slots=True)
class SiteConfig:
    """Site metadata, menu and author profile consumed by the renderer."""

    url: str
    path_prefix: str
    title: str
    subtitle: str
    copyright: str
    disqus_shortname: str
    posts_per_page: int
    google_analytics_id: str
    use_katex: bool
    menu: tuple[MenuItem, ...]
    author: AuthorProfile

    def __post_init__(self) -> None:
        """Store the menu as a tuple whatever sequence was supplied."""
        object.__setattr__(self, "menu", tuple(self.menu))


@dc.dataclass(frozen=True, slots=True)
class ContactLink:
    """A visible contact resolved to the link a template should render."""

    platform: str
    handle: str
    href: str


__all__ = [
    "INVALID_FIELD",
    "AuthorProfile",
    "ContactLink",
    "MenuItem",
    "SiteConfig",
    "SiteConfigError",
    "ValidationError",
]
