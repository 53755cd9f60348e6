"""Link flat category records into a parent/child taxonomy tree."""

from __future__ import annotations

import typing as typ

from ._constants import (
    CATEGORY_DELIMITER,
    DEFAULT_CATEGORY,
    ROOT_CATEGORY,
    ROOT_CATEGORY_PATH,
)
from .interpolate import interpolate, trim_permalink
from .models import CategoryRecord

if typ.TYPE_CHECKING:
    import collections.abc as cabc

    from .config import PageConfig


def category_href(record: CategoryRecord) -> str:
    """Return the clean link to a category's first page.

    The ``first`` template is preferred; categories without one fall back to
    the numbered ``path`` template evaluated for page one.
    """
    template = record.config.first or record.config.path
    if not template:
        return ""
    return trim_permalink(interpolate(template, record.tokens()))


def _find_parent(root: CategoryRecord, record: CategoryRecord) -> CategoryRecord:
    """Walk down from ``root`` along the record's key prefixes.

    Prefixes without an attached node are passed over, so a record whose
    immediate parent was never indexed attaches to its nearest ancestor.
    """
    segments = record.segments
    parent = root
    for depth in range(1, len(segments)):
        prefix = CATEGORY_DELIMITER.join(segments[:depth])
        node = parent.child(prefix)
        if node is not None:
            parent = node
    return parent


def assemble_tree(
    records: cabc.Mapping[str, CategoryRecord], *, defaults: PageConfig
) -> CategoryRecord:
    """Attach every category below a synthetic ``root`` node.

    Parameters
    ----------
    records : Mapping[str, CategoryRecord]
        Indexed categories, typically from
        :func:`taxonomy_pages.indexer.index_categories`.
    defaults : PageConfig
        Options carried by the synthetic root.

    Returns
    -------
    CategoryRecord
        The root node. It holds every categorized item as ``files``; the
        all-items ``default`` bucket is not attached as a child.

    Notes
    -----
    Records are attached shallowest first so ancestors exist before their
    descendants look them up; records at the same depth keep index order.
    Every record, the root, and every page gain a ``tree`` reference to the
    root, and every record gains its ``href``.
    """
    root = CategoryRecord(
        key=ROOT_CATEGORY,
        config=defaults,
        configured=False,
        category_path=ROOT_CATEGORY_PATH,
    )
    bucket = records.get(DEFAULT_CATEGORY)
    if bucket is not None:
        root.files = list(bucket.files)

    nodes = [record for key, record in records.items() if key != DEFAULT_CATEGORY]
    for record in sorted(nodes, key=lambda node: len(node.segments)):
        parent = _find_parent(root, record)
        record.parent = parent
        record.children = []
        parent.children.append(record)

    for record in records.values():
        record.tree = root
        record.href = category_href(record)
        for page in record.pages:
            page.tree = root
    root.tree = root
    return root


__all__ = ["assemble_tree", "category_href"]
