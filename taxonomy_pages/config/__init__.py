"""Load and validate category pagination configuration.

This subpackage parses the project's ``taxonomy.yaml`` file, merges builtin
and global defaults with per-category overrides field by field, and produces
strongly typed dataclasses (:class:`TaxonomyConfig`, :class:`PageConfig`)
that the indexer and paginator consume. The primary entry points are
:func:`load_taxonomy_config` for files and :func:`build_taxonomy_config` for
in-memory mappings.

Examples
--------
>>> from taxonomy_pages.config import build_taxonomy_config
>>> config = build_taxonomy_config({"categories": {"news": {"perPage": 5}}})
>>> config.resolve("news").per_page
5
>>> config.is_configured("sport")
False
"""

from .loader import build_taxonomy_config, load_taxonomy_config
from .models import (
    ByComparator,
    ByField,
    IndexPolicy,
    Item,
    PageConfig,
    SortSpec,
    TaxonomyConfig,
    TaxonomyConfigError,
)

__all__ = [
    "ByComparator",
    "ByField",
    "IndexPolicy",
    "Item",
    "PageConfig",
    "SortSpec",
    "TaxonomyConfig",
    "TaxonomyConfigError",
    "build_taxonomy_config",
    "load_taxonomy_config",
]
