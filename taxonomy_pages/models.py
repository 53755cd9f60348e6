"""Records produced while categorizing and paginating items.

Categories, pages, and pagination descriptors reference each other (a page
points at its siblings, a category at its parent and children, everything at
the tree root). These back-references are excluded from ``repr`` and records
compare by identity so the cycles never recurse.
"""

from __future__ import annotations

import dataclasses as dc
import typing as typ

from ._constants import CATEGORY_DELIMITER
from .interpolate import trim_permalink
from .windowing import window_pages

if typ.TYPE_CHECKING:
    from .config import Item, PageConfig


@dc.dataclass(slots=True, eq=False)
class CategoryRecord:
    """Items, options, pages, and tree links for one category key.

    Attributes
    ----------
    key : str
        Dot-delimited category key, ``"default"`` for the all-items bucket or
        ``"root"`` for the synthetic tree root.
    config : PageConfig
        Resolved options (the category's own entry or the defaults).
    configured : bool
        Whether the key has an explicit configuration entry; only configured
        categories are paginated.
    category_path : str
        Output directory derived from the key.
    files : list[Item]
        Items in the category, ordered by the sorter.
    pages : list[PageRecord]
        Pages built for the category, in page order.
    parent, children
        Tree links populated by :func:`taxonomy_pages.tree.assemble_tree`.
    href : str
        Clean link to the category's first page.
    tree : CategoryRecord or None
        The synthetic root of the whole taxonomy.
    """

    key: str
    config: PageConfig
    configured: bool
    category_path: str
    files: list[Item] = dc.field(default_factory=list, repr=False)
    pages: list[PageRecord] = dc.field(default_factory=list, repr=False)
    parent: CategoryRecord | None = dc.field(default=None, repr=False)
    children: list[CategoryRecord] = dc.field(default_factory=list, repr=False)
    href: str = ""
    tree: CategoryRecord | None = dc.field(default=None, repr=False)

    @property
    def segments(self) -> list[str]:
        """Return the key split on the category delimiter."""
        return self.key.split(CATEGORY_DELIMITER)

    @property
    def display_name(self) -> str:
        """Return the configured label or the key's last segment."""
        return self.config.display_name or self.segments[-1]

    def child(self, key: str) -> CategoryRecord | None:
        """Return the direct child with ``key``, if attached."""
        return next((node for node in self.children if node.key == key), None)

    def walk(self) -> typ.Iterator[CategoryRecord]:
        """Yield this record and every descendant, depth first."""
        yield self
        for node in self.children:
            yield from node.walk()

    def tokens(self) -> dict[str, typ.Any]:
        """Return the fields available to path templates for this category."""
        return {
            "name": self.key,
            "category": self.key,
            "categoryDisplayName": self.display_name,
            "category_display_name": self.display_name,
            "displayName": self.display_name,
            "display_name": self.display_name,
            "categoryPath": self.category_path,
            "category_path": self.category_path,
            "index": 0,
            "num": 1,
        }


@dc.dataclass(slots=True, eq=False)
class PaginationDescriptor:
    """Position and navigation links of one page within its category."""

    name: str
    category: str
    category_display_name: str
    category_path: str
    index: int
    pages: list[PageRecord] = dc.field(repr=False)
    files: list[Item] = dc.field(default_factory=list, repr=False)
    first: PageRecord | None = dc.field(default=None, repr=False)
    last: PageRecord | None = dc.field(default=None, repr=False)
    previous: PageRecord | None = dc.field(default=None, repr=False)
    next: PageRecord | None = dc.field(default=None, repr=False)

    @property
    def num(self) -> int:
        """Return the one-based page number."""
        return self.index + 1

    def get_pages(self, number: int) -> list[PageRecord]:
        """Return a window of ``number`` sibling pages around this page."""
        return window_pages(self.pages, self.index, number)

    def tokens(self) -> dict[str, typ.Any]:
        """Return the fields available to path templates for this page."""
        return {
            "name": self.name,
            "category": self.category,
            "categoryDisplayName": self.category_display_name,
            "category_display_name": self.category_display_name,
            "categoryPath": self.category_path,
            "category_path": self.category_path,
            "index": self.index,
            "num": self.num,
        }


@dc.dataclass(slots=True, eq=False)
class PageRecord:
    """One generated page of one category, keyed by its output path."""

    path: str
    template: str | None
    layout: str | None
    contents: bytes
    metadata: dict[str, typ.Any]
    pagination: PaginationDescriptor = dc.field(repr=False)
    extra: dict[str, typ.Any] = dc.field(default_factory=dict)
    category: CategoryRecord | None = dc.field(default=None, repr=False)
    tree: CategoryRecord | None = dc.field(default=None, repr=False)

    @property
    def href(self) -> str:
        """Return the output path without a trailing ``/index.html``."""
        return trim_permalink(self.path)


__all__ = ["CategoryRecord", "PageRecord", "PaginationDescriptor"]
