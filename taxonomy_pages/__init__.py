"""Categorize content items into a taxonomy and paginate each category.

This package turns a host build's file map (source path to item metadata)
into linked category pages: items are filed under every prefix of their
dot-delimited ``category`` tag, sorted per category, grouped into pages with
interpolated output paths and previous/next links, and attached to a
category tree. It also exposes the CLI entry points used by ``taxonomy``.

Exports
-------
- ``CategoryPaginator``: Runs one pagination pass over a file map.
- ``paginate_files``: Convenience wrapper that merges pages into the file map.
- ``app``: Cyclopts application entry for subcommands.
- ``main``: Convenience function that invokes the Cyclopts app.

Examples
--------
>>> from taxonomy_pages import CategoryPaginator
>>> from taxonomy_pages.config import build_taxonomy_config
>>> paginator = CategoryPaginator(build_taxonomy_config({}))
>>> paginator.run({}).output_paths
[]
"""

from __future__ import annotations

from .cli import app, main
from .pipeline import CategoryPaginator, TaxonomyBuild, paginate_files

__all__ = ["CategoryPaginator", "TaxonomyBuild", "app", "main", "paginate_files"]
