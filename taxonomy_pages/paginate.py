"""Partition sorted category items into linked pages.

Grouping runs in a single left-to-right pass over a category's (optionally
filtered) items. The first item that yields a new group key opens a page;
later items with the same key join it. Pages therefore follow the first-seen
order of their group keys, which keeps custom groupings such as "by year"
in the order the sorter produced.
"""

from __future__ import annotations

import dataclasses as dc
import logging
import math
import typing as typ

from .errors import (
    ConflictingRenderTargetError,
    InvalidPaginationConfigError,
    MissingCollectionError,
    MissingPathError,
)
from .interpolate import interpolate
from .models import PageRecord, PaginationDescriptor

if typ.TYPE_CHECKING:
    import collections.abc as cabc

    from .config import Item, PageConfig
    from .models import CategoryRecord

logger = logging.getLogger(__name__)

Registration = tuple[str, PageRecord]


def group_by_pagination(item: Item, index: int, config: PageConfig) -> int:
    """Return the one-based page number for the item at ``index``."""
    return math.ceil((index + 1) / config.per_page)


def validate_page_config(category: str, config: PageConfig) -> None:
    """Reject option combinations that cannot produce pages.

    Raises
    ------
    ConflictingRenderTargetError
        If neither or both of ``template`` and ``layout`` are set.
    MissingPathError
        If no ``path`` template is set.
    InvalidPaginationConfigError
        If ``noPageOne`` is set without a ``first`` template, or the default
        grouping would divide by a non-positive ``perPage``.
    """
    if not config.template and not config.layout:
        msg = "A template or layout is required"
        raise ConflictingRenderTargetError(msg, category=category)
    if config.template and config.layout:
        msg = "Template and layout can not be used simultaneously"
        raise ConflictingRenderTargetError(msg, category=category)
    if not config.path:
        msg = "The path is required"
        raise MissingPathError(msg, category=category)
    if config.no_page_one and not config.first:
        msg = "When `noPageOne` is enabled, a first page must be set"
        raise InvalidPaginationConfigError(msg, category=category)
    if config.group_by is None and config.per_page < 1:
        msg = f"perPage must be a positive integer, got {config.per_page!r}"
        raise InvalidPaginationConfigError(msg, category=category)


def _build_page(
    record: CategoryRecord, name: str
) -> tuple[PageRecord, list[Registration]]:
    """Create the next page of ``record`` and link it to its predecessor."""
    config = record.config
    pages = record.pages
    length = len(pages)
    pagination = PaginationDescriptor(
        name=name,
        category=record.key,
        category_display_name=record.display_name,
        category_path=record.category_path,
        index=length,
        pages=pages,
    )
    tokens = pagination.tokens()
    page = PageRecord(
        path=interpolate(typ.cast("str", config.path), tokens),
        template=config.template,
        layout=config.layout,
        contents=config.page_contents,
        metadata=dict(config.metadata),
        pagination=pagination,
        extra=dict(config.page_metadata),
        category=record,
    )

    registrations: list[Registration] = []
    if length == 0:
        if not config.no_page_one:
            registrations.append((page.path, page))
        if config.first:
            # The first-page alias shares the pagination descriptor.
            page = dc.replace(page, path=interpolate(config.first, tokens))
            registrations.append((page.path, page))
    else:
        registrations.append((page.path, page))
        pagination.previous = pages[-1]
        pages[-1].pagination.next = page

    pages.append(page)
    return page, registrations


def paginate_category(record: CategoryRecord) -> list[Registration]:
    """Build the pages of one category.

    Parameters
    ----------
    record : CategoryRecord
        A sorted category; its ``pages`` list is replaced.

    Returns
    -------
    list[tuple[str, PageRecord]]
        Output registrations in creation order. When two registrations share
        a path, the later one is meant to win.

    Raises
    ------
    PaginationError
        If the category's options fail :func:`validate_page_config`.
    """
    config = record.config
    validate_page_config(record.key, config)

    items: list[Item] = record.files
    if config.filter is not None:
        items = [item for item in items if config.filter(item)]
    group_by = config.group_by or group_by_pagination

    record.pages = []
    descriptors: dict[str, PaginationDescriptor] = {}
    registrations: list[Registration] = []
    for index, item in enumerate(items):
        name = str(group_by(item, index, config))
        pagination = descriptors.get(name)
        if pagination is None:
            page, created = _build_page(record, name)
            registrations.extend(created)
            pagination = descriptors[name] = page.pagination
        pagination.files.append(item)

    pages = record.pages
    for page in pages:
        page.pagination.first = pages[0]
        page.pagination.last = pages[-1]

    logger.debug("category %s: %d pages", record.key, len(pages))
    return registrations


def paginate_categories(
    records: cabc.Mapping[str, CategoryRecord],
    keys: cabc.Iterable[str] | None = None,
) -> list[Registration]:
    """Paginate every configured category, failing on the first invalid one.

    ``keys`` restricts (and orders) the categories to paginate; a key with no
    indexed record raises :class:`MissingCollectionError`. Categories without
    their own configuration entry are skipped.
    """
    registrations: list[Registration] = []
    for key in records if keys is None else keys:
        record = records.get(key)
        if record is None:
            msg = "Collection not found"
            raise MissingCollectionError(msg, category=key)
        if not record.configured:
            logger.info("skipping category %s: no configuration", key)
            continue
        registrations.extend(paginate_category(record))
    return registrations


__all__ = [
    "Registration",
    "group_by_pagination",
    "paginate_categories",
    "paginate_category",
    "validate_page_config",
]
