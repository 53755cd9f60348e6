"""Order a category's items by field or comparator."""

from __future__ import annotations

import functools
import typing as typ

from .config import ByComparator, ByField

if typ.TYPE_CHECKING:
    from .config import Comparator, Item, PageConfig, SortSpec
    from .models import CategoryRecord


def compare_field(name: str) -> Comparator:
    """Build a comparator over ``item[name]`` with missing values first.

    Missing and falsy values compare equal to each other and sort before any
    present value; present values use their natural ordering.
    """

    def compare(a: Item, b: Item) -> int:
        left = a.get(name)
        right = b.get(name)
        if not left and not right:
            return 0
        if not left:
            return -1
        if not right:
            return 1
        if left < right:
            return -1
        if left > right:
            return 1
        return 0

    return compare


def resolve_comparator(spec: SortSpec) -> Comparator:
    """Return the comparator a :data:`SortSpec` describes."""
    match spec:
        case ByField(name=name):
            return compare_field(name)
        case ByComparator(compare=compare):
            return compare
        case _:  # pragma: no cover - exhaustive over SortSpec
            msg = f"Unsupported sort spec: {spec!r}"
            raise TypeError(msg)


def sort_items(items: list[Item], config: PageConfig) -> None:
    """Sort ``items`` in place, then reverse them when configured.

    ``list.sort`` is stable, so ties keep their relative order before the
    optional reversal flips the whole sequence.
    """
    items.sort(key=functools.cmp_to_key(resolve_comparator(config.sort_by)))
    if config.reverse:
        items.reverse()


def sort_categories(records: typ.Iterable[CategoryRecord]) -> None:
    """Sort every category's items using its resolved options."""
    for record in records:
        sort_items(record.files, record.config)


__all__ = ["compare_field", "resolve_comparator", "sort_categories", "sort_items"]
