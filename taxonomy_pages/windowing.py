"""Sibling windowing for page navigation strips."""

from __future__ import annotations

import typing as typ

T = typ.TypeVar("T")


def window_pages(pages: typ.Sequence[T], index: int, number: int) -> list[T]:
    """Return up to ``number`` contiguous pages centred on ``pages[index]``.

    The window is derived from the sequence as it is at call time, so it stays
    correct while a category's page list is still growing. Near the end of the
    sequence the window is pinned to the trailing ``number`` pages.

    Examples
    --------
    >>> window_pages(list("abcdefg"), 3, 3)
    ['c', 'd', 'e']
    >>> window_pages(list("abcdefg"), 6, 4)
    ['d', 'e', 'f', 'g']
    >>> window_pages(list("ab"), 0, 5)
    ['a', 'b']
    """
    number = max(number, 0)
    total = len(pages)
    offset = number // 2
    if index + offset >= total:
        start = max(0, total - number)
        end = total
    else:
        start = max(0, index - offset)
        end = min(start + number, total)
    return list(pages[start:end])


__all__ = ["window_pages"]
