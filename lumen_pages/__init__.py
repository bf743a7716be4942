"""Site configuration for the benjlindsay.com blog.

The package exposes the validated configuration the site renderer consumes,
and the ``pages`` CLI used to inspect, check and export it.

Exports
-------
- ``app``: Cyclopts application entry for subcommands.
- ``main``: Convenience function that invokes the Cyclopts app.

Examples
--------
>>> from lumen_pages import main
>>> main()  # doctest: +SKIP
>>> from lumen_pages import app
>>> app(["check"])  # doctest: +SKIP
ok: Ben Lindsay
"""

from __future__ import annotations

from .cli import app, main

__all__ = ["app", "main"]
