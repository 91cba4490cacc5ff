"""Compile declarative website projects into static HTML bundles.

This package exposes the compiler used by the ``pagesmith`` console script:
each page of a :class:`~pagesmith.config.WebsiteProject` becomes a standalone
HTML document, and ``robots.txt`` plus ``sitemap.xml`` are derived from the
same snapshot.

Exports
-------
- ``app``: Cyclopts application entry for subcommands.
- ``main``: Convenience function that invokes the Cyclopts app.
- ``compile_site``: Return the generated files for a project snapshot.
- ``SiteBuilder``: Compile and optionally write a project to disk.
- ``SnapshotHistory``: Record refined snapshots and roll back to earlier ones.
- ``ProjectRefiner``: Protocol for collaborators that rewrite a whole project.
- ``SnapshotHistoryError``: Raised when no earlier snapshot exists.

Examples
--------
>>> from pagesmith import compile_site
>>> files = compile_site(project)  # doctest: +SKIP
>>> files[-1].name  # doctest: +SKIP
'sitemap.xml'
"""

from __future__ import annotations

from .cli import app, main
from .site_builder import SiteBuilder, compile_site
from .snapshots import ProjectRefiner, SnapshotHistory, SnapshotHistoryError

__all__ = [
    "ProjectRefiner",
    "SiteBuilder",
    "SnapshotHistory",
    "SnapshotHistoryError",
    "app",
    "compile_site",
    "main",
]
