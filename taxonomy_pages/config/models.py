"""Typed dataclasses describing category pagination configuration."""

from __future__ import annotations

import dataclasses as dc
import enum
import typing as typ

from taxonomy_pages._constants import (
    DEFAULT_FIRST_TEMPLATE,
    DEFAULT_LAYOUT,
    DEFAULT_PATH_TEMPLATE,
    DEFAULT_PER_PAGE,
    DEFAULT_SORT_FIELD,
)

Item = dict[str, typ.Any]
Comparator = typ.Callable[[Item, Item], int]
GroupBy = typ.Callable[[Item, int, "PageConfig"], typ.Any]
ItemFilter = typ.Callable[[Item], bool]


class TaxonomyConfigError(ValueError):
    """Raised when the taxonomy configuration is invalid or incomplete."""


class IndexPolicy(enum.StrEnum):
    """Control which ancestor prefixes of a category key get a record."""

    UNRESTRICTED = "unrestricted"
    CONFIGURED_ONLY = "configured-only"


@dc.dataclass(frozen=True, slots=True)
class ByField:
    """Order items by a named metadata field, missing values first."""

    name: str


@dc.dataclass(frozen=True, slots=True)
class ByComparator:
    """Order items with a two-argument comparator returning -1, 0, or 1."""

    compare: Comparator


SortSpec = ByField | ByComparator


@dc.dataclass(slots=True)
class PageConfig:
    """A fully resolved set of pagination options for one category.

    Attributes
    ----------
    sort_by : SortSpec
        Field or comparator used to order the category's items.
    reverse : bool
        Flip the sorted sequence after the primary (stable) sort.
    group_by : GroupBy or None
        Maps ``(item, index, config)`` to a page key; ``None`` selects fixed
        ``per_page`` chunks.
    filter : ItemFilter or None
        Predicate restricting which sorted items are paginated.
    template, layout : str or None
        Rendering target; exactly one must be set for pagination to run.
    path : str or None
        Output path template for every page.
    first : str or None
        Output path template for the first page.
    no_page_one : bool
        Suppress page one under ``path``; requires ``first``.
    per_page : int
        Chunk size for the default grouping.
    page_contents : bytes
        Body payload copied onto every generated page.
    metadata : dict
        Extra data attached to every generated page.
    display_name : str or None
        Human label for the category.
    page_metadata : dict
        Extra top-level fields merged into every page record.
    """

    sort_by: SortSpec = ByField(DEFAULT_SORT_FIELD)
    reverse: bool = False
    group_by: GroupBy | None = None
    filter: ItemFilter | None = None
    template: str | None = None
    layout: str | None = DEFAULT_LAYOUT
    path: str | None = DEFAULT_PATH_TEMPLATE
    first: str | None = DEFAULT_FIRST_TEMPLATE
    no_page_one: bool = True
    per_page: int = DEFAULT_PER_PAGE
    page_contents: bytes = b""
    metadata: dict[str, typ.Any] = dc.field(default_factory=dict)
    display_name: str | None = None
    page_metadata: dict[str, typ.Any] = dc.field(default_factory=dict)


@dc.dataclass(slots=True)
class TaxonomyConfig:
    """Default options alongside explicitly configured categories."""

    defaults: PageConfig = dc.field(default_factory=PageConfig)
    categories: dict[str, PageConfig] = dc.field(default_factory=dict)
    policy: IndexPolicy = IndexPolicy.UNRESTRICTED

    def is_configured(self, key: str) -> bool:
        """Return whether ``key`` has its own configuration entry."""
        return key in self.categories

    def resolve(self, key: str) -> PageConfig:
        """Return the category's config or fall back to the defaults."""
        return self.categories.get(key, self.defaults)


__all__ = [
    "ByComparator",
    "ByField",
    "Comparator",
    "GroupBy",
    "IndexPolicy",
    "Item",
    "ItemFilter",
    "PageConfig",
    "SortSpec",
    "TaxonomyConfig",
    "TaxonomyConfigError",
]
