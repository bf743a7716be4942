"""Unit tests for the site configuration record and its validation rules.

Usage
-----
Run ``pytest tests/test_site_config.py -v`` to execute the suite.
"""

from __future__ import annotations

import dataclasses as dc
import typing as typ

import pytest

from lumen_pages._constants import CONTACT_PLATFORMS
from lumen_pages.config import (
    INVALID_FIELD,
    AuthorProfile,
    MenuItem,
    SiteConfig,
    ValidationError,
    contact_href,
    contact_links,
    load,
    validate,
    visible_contacts,
)


def _contacts(**handles: str) -> dict[str, str]:
    contacts = dict.fromkeys(CONTACT_PLATFORMS, "")
    contacts.update(handles)
    return contacts


def _site(**overrides: typ.Any) -> SiteConfig:
    """Construct a small valid SiteConfig, applying field overrides."""
    site = SiteConfig(
        url="https://example.invalid",
        path_prefix="/",
        title="Example",
        subtitle="",
        copyright="",
        disqus_shortname="",
        posts_per_page=5,
        google_analytics_id="",
        use_katex=False,
        menu=(MenuItem("Home", "/"),),
        author=AuthorProfile(name="A", photo="/a.jpg", bio="", contacts=_contacts()),
    )
    return dc.replace(site, **overrides)


def _author(contacts: dict[str, str]) -> AuthorProfile:
    return AuthorProfile(name="A", photo="/a.jpg", bio="", contacts=contacts)


def test_load_returns_literal_site() -> None:
    """The built-in config should carry the blog's title and menu order."""
    site = load()
    assert site.title == "Ben Lindsay"
    assert site.posts_per_page == 10
    labels = [item.label for item in site.menu]
    assert labels == ["Articles", "About me", "Contact me"], (
        f"expected menu in display order, got {labels!r}"
    )
    assert [item.path for item in site.menu] == ["/", "/pages/about", "/pages/contacts"]


def test_load_is_deterministic_and_valid() -> None:
    """Repeated loads return the same validated instance."""
    first = load()
    assert load() is first, "expected load() to hand back the cached instance"
    assert validate(first) is first, "validate should return its argument unchanged"


def test_loaded_site_hides_empty_contacts() -> None:
    """Only platforms with handles appear, in declaration order."""
    assert list(visible_contacts(load())) == [
        ("email", "benjlindsay@gmail.com"),
        ("twitter", "ben_j_lindsay"),
        ("github", "benlindsay"),
        ("linkedin", "benjlindsay"),
    ]


def test_site_config_is_read_only() -> None:
    """Fields and the contacts mapping must reject mutation."""
    site = load()
    with pytest.raises(dc.FrozenInstanceError):
        site.title = "changed"  # type: ignore[misc]
    with pytest.raises(TypeError):
        site.author.contacts["email"] = "x"  # type: ignore[index]
    assert isinstance(site.menu, tuple)


def test_contacts_copy_is_independent_of_source() -> None:
    """Mutating the dict used at construction must not leak into the record."""
    source = _contacts(github="octo")
    author = _author(source)
    source["github"] = "changed"
    assert author.contacts["github"] == "octo"


@pytest.mark.parametrize("value", [0, -1, -10])
def test_non_positive_posts_per_page_rejected(value: int) -> None:
    with pytest.raises(ValidationError) as excinfo:
        validate(_site(posts_per_page=value))
    assert excinfo.value.field == "postsPerPage"
    assert excinfo.value.kind == INVALID_FIELD


def test_boolean_posts_per_page_rejected() -> None:
    with pytest.raises(ValidationError, match="postsPerPage"):
        validate(_site(posts_per_page=True))


def test_path_prefix_without_leading_slash_rejected() -> None:
    with pytest.raises(ValidationError) as excinfo:
        validate(_site(path_prefix="about"))
    assert excinfo.value.field == "pathPrefix"
    assert excinfo.value.rule == "must start with '/'"


def test_path_prefix_without_trailing_slash_rejected() -> None:
    with pytest.raises(ValidationError) as excinfo:
        validate(_site(path_prefix="/blog"))
    assert excinfo.value.rule == "must end with '/'"


def test_nested_path_prefix_accepted() -> None:
    site = _site(path_prefix="/blog/")
    assert validate(site) is site


@pytest.mark.parametrize(
    "url",
    [
        "not a url",
        "benjlindsay.com",
        "ftp://example.invalid",
        "https://",
        "http://:80",
        "https://user@",
        "https://exa mple.com",
        42,
    ],
)
def test_bad_url_rejected(url: object) -> None:
    with pytest.raises(ValidationError) as excinfo:
        validate(_site(url=url))
    assert excinfo.value.field == "url"


def test_extra_contact_key_rejected() -> None:
    contacts = {"mastodon": "x", **_contacts()}
    with pytest.raises(ValidationError) as excinfo:
        validate(_site(author=_author(contacts)))
    assert excinfo.value.field == "contacts"
    assert "mastodon" in excinfo.value.rule


def test_missing_contact_key_rejected() -> None:
    contacts = _contacts()
    del contacts["weibo"]
    with pytest.raises(ValidationError) as excinfo:
        validate(_site(author=_author(contacts)))
    assert excinfo.value.rule == "missing platform(s): weibo"


def test_empty_menu_label_rejected() -> None:
    with pytest.raises(ValidationError) as excinfo:
        validate(_site(menu=(MenuItem("Home", "/"), MenuItem(" ", "/x"))))
    assert excinfo.value.field == "menu[1].label"


def test_error_message_names_field_and_rule() -> None:
    error = ValidationError("postsPerPage", "must be greater than 0")
    assert str(error) == "Invalid field 'postsPerPage': must be greater than 0"


def test_visible_contacts_follows_declaration_order() -> None:
    """Twitter is declared after email regardless of mapping order."""
    contacts = _contacts(twitter="ben", email="a@b.com", github="")
    site = _site(author=_author(contacts))
    assert list(visible_contacts(site)) == [("email", "a@b.com"), ("twitter", "ben")]


def test_visible_contacts_is_restartable() -> None:
    site = _site(author=_author(_contacts(rss="/rss.xml")))
    assert list(visible_contacts(site)) == list(visible_contacts(site))
    assert list(visible_contacts(site)) == [("rss", "/rss.xml")]


def test_contact_links_resolve_hrefs() -> None:
    hrefs = [link.href for link in contact_links(load())]
    assert hrefs == [
        "mailto:benjlindsay@gmail.com",
        "https://www.twitter.com/ben_j_lindsay",
        "https://github.com/benlindsay",
        "https://www.linkedin.com/in/benjlindsay",
    ]


def test_contact_href_unknown_platform() -> None:
    with pytest.raises(ValidationError, match="mastodon"):
        contact_href("mastodon", "x")


def test_url_with_space_in_host_reports_whitespace() -> None:
    with pytest.raises(ValidationError) as excinfo:
        validate(_site(url="https://exa mple.com"))
    assert excinfo.value.field == "url"
    assert excinfo.value.rule == "must not contain whitespace"


def test_url_without_host_reports_host_rule() -> None:
    with pytest.raises(ValidationError) as excinfo:
        validate(_site(url="http://:80"))
    assert excinfo.value.rule == "must be an absolute http(s) URI with a host"


def test_path_prefix_with_whitespace_rejected() -> None:
    with pytest.raises(ValidationError) as excinfo:
        validate(_site(path_prefix="/my blog/"))
    assert excinfo.value.field == "pathPrefix"
    assert excinfo.value.rule == "must not contain whitespace"


@pytest.mark.parametrize("value", [1, "yes", None])
def test_non_boolean_use_katex_rejected(value: object) -> None:
    with pytest.raises(ValidationError) as excinfo:
        validate(_site(use_katex=value))
    assert excinfo.value.field == "useKatex"
    assert excinfo.value.rule == "must be a boolean"


@pytest.mark.parametrize(
    ("attribute", "field"),
    [
        ("title", "title"),
        ("subtitle", "subtitle"),
        ("copyright", "copyright"),
        ("disqus_shortname", "disqusShortname"),
        ("google_analytics_id", "googleAnalyticsId"),
    ],
)
def test_non_string_text_field_rejected(attribute: str, field: str) -> None:
    with pytest.raises(ValidationError) as excinfo:
        validate(_site(**{attribute: None}))
    assert excinfo.value.field == field, (
        f"expected {field!r} to be reported, got {excinfo.value.field!r}"
    )
    assert excinfo.value.rule == "must be a string"


@pytest.mark.parametrize("attribute", ["name", "photo", "bio"])
def test_non_string_author_field_rejected(attribute: str) -> None:
    author = dc.replace(_author(_contacts()), **{attribute: 7})
    with pytest.raises(ValidationError) as excinfo:
        validate(_site(author=author))
    assert excinfo.value.field == f"author.{attribute}"
    assert excinfo.value.rule == "must be a string"


def test_non_string_contact_handle_rejected() -> None:
    contacts: dict[str, typ.Any] = _contacts()
    contacts["github"] = None
    with pytest.raises(ValidationError) as excinfo:
        validate(_site(author=_author(contacts)))
    assert excinfo.value.field == "contacts"
    assert excinfo.value.rule == "handle for 'github' must be a string"


def test_empty_menu_path_rejected() -> None:
    with pytest.raises(ValidationError) as excinfo:
        validate(_site(menu=(MenuItem("Home", ""),)))
    assert excinfo.value.field == "menu[0].path"
    assert excinfo.value.rule == "must not be empty"


def test_site_config_is_hashable() -> None:
    """Frozen records can be hashed; contacts do not take part in the hash."""
    site = load()
    assert hash(site) == hash(load())
    assert {site, load()} == {site}
    other = _author(_contacts(github="octo"))
    assert hash(other) == hash(_author(_contacts()))
    assert other != _author(_contacts()), "contacts must still affect equality"
