"""Unit tests for building the flat category index."""

from __future__ import annotations

import typing as typ

from taxonomy_pages.config import build_taxonomy_config
from taxonomy_pages.indexer import (
    category_path_for,
    index_categories,
    split_category,
    strip_synthetic_sources,
)


def _files() -> dict[str, dict[str, typ.Any]]:
    return {
        "posts\\b.md": {"title": "b", "category": "news.world"},
        "posts/a.md": {"title": "a", "category": "news"},
        "posts/c.md": {"title": "c", "category": "sport.football.uk"},
        "about.md": {"title": "about"},
        "category/news.yaml": {"category": "news"},
        "metadata/site.yaml": {"category": "news"},
    }


def test_items_are_filed_under_every_prefix() -> None:
    records = index_categories(_files(), build_taxonomy_config({}))
    assert list(records) == [
        "default",
        "news",
        "sport",
        "sport.football",
        "sport.football.uk",
        "news.world",
    ], f"unexpected category keys {list(records)!r}"
    assert [item["title"] for item in records["news"].files] == ["a", "b"]
    assert [item["title"] for item in records["news.world"].files] == ["b"]
    assert [item["title"] for item in records["default"].files] == ["a", "c", "b"], (
        "expected the default bucket to hold every categorized item"
    )


def test_uncategorized_and_synthetic_sources_are_excluded() -> None:
    files = _files()
    records = index_categories(files, build_taxonomy_config({}))
    titles = {item.get("title") for item in records["default"].files}
    assert "about" not in titles
    assert "path" not in files["about.md"], "uncategorized items are not annotated"
    assert all(item.get("title") for item in records["news"].files), (
        "option sources under category/ and metadata/ must not be indexed"
    )


def test_indexed_items_gain_forward_slash_paths() -> None:
    files = _files()
    index_categories(files, build_taxonomy_config({}))
    assert files["posts\\b.md"]["path"] == "posts/b.md"
    assert files["posts/a.md"]["path"] == "posts/a.md"


def test_configured_only_policy_skips_unconfigured_prefixes() -> None:
    config = build_taxonomy_config(
        {
            "policy": "configured-only",
            "categories": {"sport": {}, "sport.football.uk": {}},
        }
    )
    records = index_categories(_files(), config)
    assert list(records) == ["default", "sport", "sport.football.uk"], (
        f"expected only configured prefixes, got {list(records)!r}"
    )
    assert records["sport"].configured
    assert not records["default"].configured


def test_records_carry_resolved_config_and_paths() -> None:
    config = build_taxonomy_config({"categories": {"news": {"perPage": 3}}})
    records = index_categories(_files(), config)
    assert records["news"].config.per_page == 3
    assert records["news.world"].config is config.defaults
    assert records["news.world"].category_path == "news/world"
    assert records["default"].category_path == "page"


def test_split_category_drops_empty_segments() -> None:
    assert split_category(" news..world ") == ["news", "world"]
    assert split_category("") == []
    assert split_category(None) == []
    assert category_path_for("a.b.c") == "a/b/c"


def test_strip_synthetic_sources_removes_option_files() -> None:
    files = _files()
    removed = strip_synthetic_sources(files)
    assert removed == ["category/news.yaml", "metadata/site.yaml"]
    assert "about.md" in files and "posts/a.md" in files
