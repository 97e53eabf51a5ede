"""Generate static documentation artifacts from a Doxygen-style object model.

This package exposes the CLI entry points used by ``doxywiki generate`` to
render per-entity pages, category indexes, raw JSON dumps, the manifest and a
spliced summary, all sharing one set of wiki-safe filenames.

Exports
-------
- ``app``: Cyclopts application entry for subcommands.
- ``main``: Convenience function that invokes the Cyclopts app.

Examples
--------
>>> from doxywiki import app
>>> app.name
('doxywiki',)
"""

from __future__ import annotations

from .cli import app, main

__all__ = ["app", "main"]
