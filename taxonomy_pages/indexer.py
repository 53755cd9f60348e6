"""Build the flat category index from per-item category tags.

Each item's ``category`` tag (for example ``news.world``) files the item under
every ancestor prefix (``news`` and ``news.world``) and under the all-items
``default`` bucket. Which prefixes receive a record depends on the configured
:class:`~taxonomy_pages.config.IndexPolicy`.
"""

from __future__ import annotations

import collections.abc as cabc
import logging
import typing as typ

from ._constants import (
    CATEGORY_DELIMITER,
    DEFAULT_CATEGORY,
    DEFAULT_CATEGORY_PATH,
    SYNTHETIC_SOURCE_PREFIXES,
)
from .config import IndexPolicy
from .models import CategoryRecord

if typ.TYPE_CHECKING:
    from .config import TaxonomyConfig

logger = logging.getLogger(__name__)


def normalize_source_path(path: str) -> str:
    """Return ``path`` with forward-slash separators."""
    return path.replace("\\", "/")


def is_synthetic_source(path: str) -> bool:
    """Return whether ``path`` is a category or metadata option source."""
    return normalize_source_path(path).startswith(SYNTHETIC_SOURCE_PREFIXES)


def strip_synthetic_sources(files: cabc.MutableMapping[str, typ.Any]) -> list[str]:
    """Remove category/metadata option sources from the host file map.

    Returns the removed keys in the order they were found.
    """
    removed = [path for path in files if is_synthetic_source(path)]
    for path in removed:
        del files[path]
        logger.debug("removed synthetic source %s", path)
    return removed


def category_path_for(key: str) -> str:
    """Map a category key to its output directory."""
    if key == DEFAULT_CATEGORY:
        return DEFAULT_CATEGORY_PATH
    return key.replace(CATEGORY_DELIMITER, "/")


def split_category(value: object) -> list[str]:
    """Split a category tag into its non-empty segments."""
    if value is None:
        return []
    return [
        segment
        for segment in (part.strip() for part in str(value).split(CATEGORY_DELIMITER))
        if segment
    ]


def _new_record(key: str, config: TaxonomyConfig) -> CategoryRecord:
    return CategoryRecord(
        key=key,
        config=config.resolve(key),
        configured=config.is_configured(key),
        category_path=category_path_for(key),
    )


def index_categories(
    files: cabc.Mapping[str, typ.Any], config: TaxonomyConfig
) -> dict[str, CategoryRecord]:
    """Group categorized items by every ancestor prefix of their category key.

    Parameters
    ----------
    files : Mapping[str, Any]
        Host file map of source path to item metadata. Items are visited in
        sorted path order so repeated builds index identically. Values that
        are not mappings, such as pages registered by an earlier pass, are
        skipped.
    config : TaxonomyConfig
        Resolved configuration; its policy decides whether unconfigured
        prefixes get a record.

    Returns
    -------
    dict[str, CategoryRecord]
        Records keyed by category, starting with the ``default`` bucket and
        then in first-seen order.

    Notes
    -----
    Items without a ``category`` are skipped. Categorized items gain a
    ``path`` field holding their forward-slash source path. Option sources
    under ``category/`` and ``metadata/`` are never indexed.
    """
    records: dict[str, CategoryRecord] = {
        DEFAULT_CATEGORY: _new_record(DEFAULT_CATEGORY, config)
    }
    configured_only = config.policy is IndexPolicy.CONFIGURED_ONLY

    for source in sorted(files):
        path = normalize_source_path(source)
        if is_synthetic_source(path):
            continue
        item = files[source]
        if not isinstance(item, cabc.Mapping):
            continue
        segments = split_category(item.get("category"))
        if not segments:
            continue

        item["path"] = path
        records[DEFAULT_CATEGORY].files.append(item)
        for depth in range(1, len(segments) + 1):
            key = CATEGORY_DELIMITER.join(segments[:depth])
            record = records.get(key)
            if record is None:
                if configured_only and not config.is_configured(key):
                    continue
                record = records[key] = _new_record(key, config)
            record.files.append(item)

    logger.debug("indexed %d categories", len(records))
    return records


__all__ = [
    "category_path_for",
    "index_categories",
    "is_synthetic_source",
    "normalize_source_path",
    "split_category",
    "strip_synthetic_sources",
]
