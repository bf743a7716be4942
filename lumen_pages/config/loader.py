"""Convert site configuration between typed dataclasses and YAML documents.

Documents use the stable field names shared with the site renderer
(``pathPrefix``, ``postsPerPage``...), while the dataclasses use snake_case
attributes. :func:`site_config_from_mapping` and
:func:`site_config_to_mapping` translate between the two; the file helpers
wrap them with ``ruamel.yaml``.
"""

from __future__ import annotations

import collections.abc as cabc
import io
import typing as typ

from ruamel.yaml import YAML

from .._constants import CONTACT_PLATFORMS
from .models import AuthorProfile, MenuItem, SiteConfig, ValidationError
from .validation import validate

if typ.TYPE_CHECKING:
    from pathlib import Path

# (document key, dataclass attribute) for the flat SiteConfig fields.
_SCALAR_FIELDS: tuple[tuple[str, str], ...] = (
    ("url", "url"),
    ("pathPrefix", "path_prefix"),
    ("title", "title"),
    ("subtitle", "subtitle"),
    ("copyright", "copyright"),
    ("disqusShortname", "disqus_shortname"),
    ("postsPerPage", "posts_per_page"),
    ("googleAnalyticsId", "google_analytics_id"),
    ("useKatex", "use_katex"),
)


def site_config_from_mapping(payload: cabc.Mapping[str, typ.Any]) -> SiteConfig:
    """Build a :class:`SiteConfig` from a plain mapping without validating it.

    Raises
    ------
    ValidationError
        If a required key is absent or a nested section has the wrong shape.
    """
    values = {
        attribute: _required(payload, key, key) for key, attribute in _SCALAR_FIELDS
    }
    menu_raw = _required(payload, "menu", "menu")
    if not _is_sequence(menu_raw):
        raise ValidationError("menu", "must be a sequence")
    menu = tuple(
        _build_menu_item(entry, index) for index, entry in enumerate(menu_raw)
    )
    author = _build_author(_required(payload, "author", "author"))
    return SiteConfig(**values, menu=menu, author=author)


def site_config_to_mapping(config: SiteConfig) -> dict[str, typ.Any]:
    """Return the document form of ``config`` using the renderer's field names."""
    document: dict[str, typ.Any] = {
        key: getattr(config, attribute) for key, attribute in _SCALAR_FIELDS
    }
    document["menu"] = [{"label": item.label, "path": item.path} for item in config.menu]
    contacts = config.author.contacts
    ordered = {platform: contacts.get(platform, "") for platform in CONTACT_PLATFORMS}
    ordered.update(
        (key, value) for key, value in contacts.items() if key not in ordered
    )
    document["author"] = {
        "name": config.author.name,
        "photo": config.author.photo,
        "bio": config.author.bio,
        "contacts": ordered,
    }
    return document


def load_site_config(path: Path) -> SiteConfig:
    """Load and validate a site configuration YAML document.

    Parameters
    ----------
    path : Path
        Filesystem path to the YAML document (for example ``site.yaml``).

    Returns
    -------
    SiteConfig
        The validated configuration.

    Raises
    ------
    FileNotFoundError
        If the document does not exist at ``path``.
    TypeError
        If the top-level YAML structure is not a mapping.
    ValidationError
        If a field is missing or breaks a configuration rule.
    YAMLError
        If the YAML content cannot be parsed by the underlying loader.
    """
    if not path.exists():
        msg = f"Configuration file '{path}' not found."
        raise FileNotFoundError(msg)

    loader = YAML(typ="safe")
    loader.version = (1, 2)
    with path.open("r", encoding="utf-8") as handle:
        loaded = loader.load(handle) or {}
    if not isinstance(loaded, dict):
        msg = "Top-level YAML structure must be a mapping."
        raise TypeError(msg)
    return validate(site_config_from_mapping(loaded))


def dumps_site_config(config: SiteConfig) -> str:
    """Render ``config`` as YAML text."""
    stream = io.StringIO()
    _build_dump_yaml().dump(site_config_to_mapping(config), stream)
    return stream.getvalue()


def dump_site_config(config: SiteConfig, path: Path) -> Path:
    """Write ``config`` to ``path`` as YAML and return the path written."""
    path.parent.mkdir(parents=True, exist_ok=True)
    with path.open("w", encoding="utf-8") as handle:
        _build_dump_yaml().dump(site_config_to_mapping(config), handle)
    return path


def _build_dump_yaml() -> YAML:
    yaml = YAML()
    yaml.width = 120
    yaml.indent(mapping=2, sequence=4, offset=2)
    return yaml


def _is_sequence(value: object) -> bool:
    return isinstance(value, cabc.Sequence) and not isinstance(value, (str, bytes))


def _required(payload: cabc.Mapping[str, typ.Any], key: str, field: str) -> typ.Any:
    try:
        return payload[key]
    except KeyError as exc:
        raise ValidationError(field, "is required") from exc


def _build_menu_item(entry: object, index: int) -> MenuItem:
    field = f"menu[{index}]"
    if not isinstance(entry, cabc.Mapping):
        raise ValidationError(field, "must be a mapping with 'label' and 'path'")
    return MenuItem(
        label=_required(entry, "label", f"{field}.label"),
        path=_required(entry, "path", f"{field}.path"),
    )


def _build_author(payload: object) -> AuthorProfile:
    if not isinstance(payload, cabc.Mapping):
        raise ValidationError("author", "must be a mapping")
    contacts = payload.get("contacts")
    if contacts is None:
        contacts = {}
    if not isinstance(contacts, cabc.Mapping):
        raise ValidationError("contacts", "must be a mapping")
    return AuthorProfile(
        name=_required(payload, "name", "author.name"),
        photo=_required(payload, "photo", "author.photo"),
        bio=_required(payload, "bio", "author.bio"),
        contacts=contacts,
    )


__all__ = [
    "dump_site_config",
    "dumps_site_config",
    "load_site_config",
    "site_config_from_mapping",
    "site_config_to_mapping",
]
