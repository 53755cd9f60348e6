"""Unit tests for grouping category items into linked pages."""

from __future__ import annotations

import typing as typ

import pytest

from taxonomy_pages import paginate as paginate_module
from taxonomy_pages.config import PageConfig, build_taxonomy_config
from taxonomy_pages.errors import (
    ConflictingRenderTargetError,
    InvalidPaginationConfigError,
    MissingCollectionError,
    MissingPathError,
    PaginationError,
)
from taxonomy_pages.indexer import index_categories
from taxonomy_pages.models import CategoryRecord
from taxonomy_pages.paginate import (
    paginate_categories,
    paginate_category,
    validate_page_config,
)
from taxonomy_pages.sorting import sort_categories

if typ.TYPE_CHECKING:
    from pytest_mock import MockerFixture


def _record(
    items: list[dict[str, typ.Any]], config: PageConfig, key: str = "blog"
) -> CategoryRecord:
    return CategoryRecord(
        key=key,
        config=config,
        configured=True,
        category_path=key.replace(".", "/"),
        files=list(items),
    )


def _items(count: int) -> list[dict[str, typ.Any]]:
    return [{"path": f"posts/{n}.md", "n": n} for n in range(1, count + 1)]


def test_default_grouping_chunks_by_per_page() -> None:
    record = _record(_items(5), PageConfig(per_page=2, no_page_one=False, first=None))
    registrations = paginate_category(record)

    pages = record.pages
    assert [[item["n"] for item in page.pagination.files] for page in pages] == [
        [1, 2],
        [3, 4],
        [5],
    ], "expected fixed chunks of perPage items"
    assert [path for path, _ in registrations] == [
        "blog/page/1/index.html",
        "blog/page/2/index.html",
        "blog/page/3/index.html",
    ]
    assert [page.pagination.name for page in pages] == ["1", "2", "3"]


def test_pagination_links_are_consistent() -> None:
    record = _record(_items(7), PageConfig(per_page=2))
    paginate_category(record)
    pages = record.pages

    for index, page in enumerate(pages):
        pagination = page.pagination
        assert pagination.index == index
        assert pagination.num == index + 1, (
            f"expected num {index + 1} for page {index}, got {pagination.num}"
        )
        assert pagination.first is pages[0]
        assert pagination.last is pages[-1]
        assert pagination.pages is pages
    for current, following in zip(pages, pages[1:], strict=False):
        assert current.pagination.next is following, "next link broken"
        assert following.pagination.previous is current, "previous link broken"
    assert pages[0].pagination.previous is None
    assert pages[-1].pagination.next is None


def test_get_pages_windows_over_siblings() -> None:
    record = _record(_items(10), PageConfig(per_page=1))
    paginate_category(record)
    window = record.pages[5].pagination.get_pages(3)
    assert [page.pagination.num for page in window] == [5, 6, 7]


def test_no_page_one_registers_only_the_first_template_path() -> None:
    config = PageConfig(per_page=3, no_page_one=True, first=":categoryPath")
    record = _record(_items(4), config)
    registrations = paginate_category(record)

    paths = [path for path, _ in registrations]
    assert paths == ["blog", "blog/page/2/index.html"], (
        f"expected page one only under the first template, got {paths!r}"
    )
    assert record.pages[0].path == "blog"
    assert record.pages[0].href == "blog"


def test_first_alias_is_registered_after_numbered_page_one() -> None:
    """Page one is registered under both paths; the alias comes last."""
    config = PageConfig(per_page=3, no_page_one=False, first=":categoryPath/index.html")
    record = _record(_items(2), config)
    registrations = paginate_category(record)

    assert [path for path, _ in registrations] == [
        "blog/page/1/index.html",
        "blog/index.html",
    ]
    numbered, alias = (page for _, page in registrations)
    assert numbered is not alias
    assert numbered.pagination is alias.pagination, (
        "the alias should share the pagination descriptor"
    )
    assert record.pages[0] is alias


def test_custom_group_by_keeps_first_seen_order() -> None:
    items = [
        {"path": "a.md", "year": 2024},
        {"path": "b.md", "year": 2022},
        {"path": "c.md", "year": 2024},
        {"path": "d.md", "year": 2023},
    ]
    config = PageConfig(
        group_by=lambda item, index, config: item["year"],
        path=":categoryPath/:name/index.html",
        no_page_one=False,
        first=None,
    )
    record = _record(items, config)
    registrations = paginate_category(record)

    assert [page.pagination.name for page in record.pages] == ["2024", "2022", "2023"]
    assert [item["path"] for item in record.pages[0].pagination.files] == [
        "a.md",
        "c.md",
    ]
    assert registrations[0][0] == "blog/2024/index.html"


def test_filter_restricts_paginated_items() -> None:
    items = [{"path": f"{n}.md", "draft": n % 2 == 0} for n in range(1, 6)]
    config = PageConfig(per_page=10, filter=lambda item: not item["draft"])
    record = _record(items, config)
    paginate_category(record)
    assert [item["path"] for item in record.pages[0].pagination.files] == [
        "1.md",
        "3.md",
        "5.md",
    ]
    assert len(record.files) == 5, "filtering must not drop items from the category"


def test_pages_copy_static_options() -> None:
    config = PageConfig(
        template="list.html",
        layout=None,
        page_contents=b"body",
        metadata={"section": "blog"},
        page_metadata={"robots": "noindex"},
        display_name="Blog",
    )
    record = _record(_items(1), config)
    paginate_category(record)
    page = record.pages[0]
    assert page.template == "list.html"
    assert page.layout is None
    assert page.contents == b"body"
    assert page.metadata == {"section": "blog"}
    assert page.extra == {"robots": "noindex"}
    assert page.pagination.category_display_name == "Blog"
    assert page.category is record


def test_empty_category_produces_no_pages() -> None:
    record = _record([], PageConfig())
    assert paginate_category(record) == []
    assert record.pages == []


@pytest.mark.parametrize(
    ("config", "error"),
    [
        (PageConfig(template="t.html", layout="l.html"), ConflictingRenderTargetError),
        (PageConfig(template=None, layout=None), ConflictingRenderTargetError),
        (PageConfig(path=None), MissingPathError),
        (PageConfig(no_page_one=True, first=None), InvalidPaginationConfigError),
        (PageConfig(per_page=0), InvalidPaginationConfigError),
    ],
)
def test_validation_errors_name_the_category(
    config: PageConfig, error: type[PaginationError]
) -> None:
    with pytest.raises(error) as excinfo:
        validate_page_config("x", config)
    assert excinfo.value.category == "x"
    assert str(excinfo.value).endswith("(x)"), (
        f"expected the message to reference the category, got {excinfo.value}"
    )


def test_unconfigured_categories_are_skipped() -> None:
    config = build_taxonomy_config({"categories": {"news.world": {}}})
    records = index_categories(
        {"a.md": {"category": "news.world", "date": 1}}, config
    )
    sort_categories(records.values())
    registrations = paginate_categories(records)
    assert [path for path, _ in registrations] == ["news/world/index.html"]
    assert records["news"].pages == [], "unconfigured categories get no pages"
    assert len(records["news"].files) == 1, "unconfigured categories stay indexed"


def test_unknown_category_key_raises_missing_collection() -> None:
    with pytest.raises(MissingCollectionError, match="Collection not found"):
        paginate_categories({}, keys=["ghost"])


def test_first_failure_stops_later_categories(mocker: MockerFixture) -> None:
    config = build_taxonomy_config(
        {
            "categories": {
                "a": {"template": "t.html", "layout": "l.html"},
                "b": {},
            }
        }
    )
    records = index_categories(
        {"a.md": {"category": "a"}, "b.md": {"category": "b"}}, config
    )
    spy = mocker.spy(paginate_module, "paginate_category")
    with pytest.raises(ConflictingRenderTargetError):
        paginate_categories(records)
    assert spy.call_count == 1, "pagination should stop at the first invalid category"
    assert records["b"].pages == []
