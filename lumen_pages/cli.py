"""Cyclopts CLI entrypoint for inspecting and exporting the blog site config.

The ``pages`` console script defined here prints the compiled-in site
configuration as YAML, checks a YAML document against the configuration
rules, lists the contact links the sidebar will show, and exports the
compiled-in configuration for the site renderer. Every option can also be
supplied through ``INPUT_*`` environment variables, so the same commands run
unchanged inside CI actions.

Examples
--------
Check the compiled-in configuration:

>>> from lumen_pages.cli import main
>>> main()  # doctest: +SKIP

Validate a document on disk:

>>> from lumen_pages.cli import app
>>> app(["check", "--config", "config/site.yaml"])  # doctest: +SKIP
"""

from __future__ import annotations

import typing as typ
from pathlib import Path

import cyclopts
from cyclopts import App, Parameter

from ._constants import DEFAULT_EXPORT_PATH
from .config import (
    SiteConfig,
    contact_links,
    dump_site_config,
    dumps_site_config,
    load,
    load_site_config,
)

app = App(name="pages", config=cyclopts.config.Env("INPUT_", command=False))  # type: ignore[unknown-argument]

ConfigOption = typ.Annotated[
    Path | None,
    Parameter(
        help="YAML site config to read instead of the built-in one",
        env_var="INPUT_CONFIG",
    ),
]


def _format_path(path: Path) -> str:
    """Return a cwd-relative path when possible, otherwise the absolute path."""
    if path.is_absolute():
        try:
            return str(path.relative_to(Path.cwd()))
        except ValueError:  # pragma: no cover - fallback for different roots
            return str(path)
    return str(path)


def _resolve_config(config: Path | None) -> SiteConfig:
    if config is None:
        return load()
    return load_site_config(config)


@app.command(help="Print the site configuration as YAML.")
def show(*, config: ConfigOption = None) -> None:
    """Print the YAML document for the selected site configuration.

    Parameters
    ----------
    config : Path or None, optional
        Document to read; when ``None`` (default) the built-in configuration
        is shown.
    """
    print(dumps_site_config(_resolve_config(config)), end="")


@app.command(help="Validate the site configuration.")
def check(*, config: ConfigOption = None) -> None:
    """Validate the selected configuration and report its title.

    Raises
    ------
    ValidationError
        If a field breaks a configuration rule; the message names the field
        and the rule.
    """
    site = _resolve_config(config)
    print(f"ok: {site.title}")


@app.command(help="List the contact links shown in the sidebar.")
def contacts(*, config: ConfigOption = None) -> None:
    """Print one ``platform: href`` line for each visible contact."""
    for link in contact_links(_resolve_config(config)):
        print(f"{link.platform}: {link.href}")


@app.command(help="Write the built-in site configuration to a YAML file.")
def export(
    *,
    output: typ.Annotated[
        Path, Parameter(help="Destination YAML file", env_var="INPUT_OUTPUT")
    ] = DEFAULT_EXPORT_PATH,
) -> None:
    """Export the built-in configuration for the site renderer.

    Parameters
    ----------
    output : Path, optional
        Where to write the document; parent directories are created.
    """
    written = dump_site_config(load(), output)
    print(f"wrote {_format_path(written)}")


def main() -> None:
    """Invoke the Cyclopts application that powers the `pages` console command.

    Examples
    --------
    >>> main()  # doctest: +SKIP
    """
    app()


if __name__ == "__main__":  # pragma: no cover - manual invocation helper
    main()
