"""Generate compile-time-safe Dart references for bundled assets.

This package exposes the CLI entry points used by the ``spider`` console
script to validate a project's ``spider.yaml`` and render one reference class
per asset group, plus optional export and test files.

Exports
-------
- ``app``: Cyclopts application entry for subcommands.
- ``main``: Convenience function that invokes the Cyclopts app.

Examples
--------
>>> from asset_spider import main
>>> main()  # doctest: +SKIP
>>> from asset_spider import app
>>> isinstance(app.name[0], str)
True
"""

from __future__ import annotations

from .cli import app, main

__all__ = ["app", "main"]
