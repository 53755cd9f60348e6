"""Summarize a pagination build as JSON for downstream tooling."""

from __future__ import annotations

import typing as typ

import msgspec.json as msgspec_json

if typ.TYPE_CHECKING:
    from .models import CategoryRecord, PageRecord
    from .pipeline import TaxonomyBuild


def _href(page: PageRecord | None) -> str | None:
    return page.href if page is not None else None


def _page_entry(path: str, page: PageRecord) -> dict[str, typ.Any]:
    pagination = page.pagination
    return {
        "path": path,
        "href": page.href,
        "category": pagination.category,
        "name": pagination.name,
        "num": pagination.num,
        "total": len(pagination.pages),
        "template": page.template,
        "layout": page.layout,
        "files": [item.get("path") for item in pagination.files],
        "first": _href(pagination.first),
        "last": _href(pagination.last),
        "previous": _href(pagination.previous),
        "next": _href(pagination.next),
    }


def _tree_entry(node: CategoryRecord) -> dict[str, typ.Any]:
    return {
        "category": node.key,
        "displayName": node.display_name,
        "href": node.href,
        "items": len(node.files),
        "pages": len(node.pages),
        "children": [_tree_entry(child) for child in node.children],
    }


def build_manifest(build: TaxonomyBuild) -> dict[str, typ.Any]:
    """Return a JSON-ready description of every output page and the tree."""
    return {
        "pages": [_page_entry(path, page) for path, page in build.outputs.items()],
        "tree": _tree_entry(build.tree),
    }


def encode_manifest(manifest: dict[str, typ.Any]) -> bytes:
    """Encode ``manifest`` as indented UTF-8 JSON with a trailing newline."""
    return msgspec_json.format(msgspec_json.encode(manifest), indent=2) + b"\n"


__all__ = ["build_manifest", "encode_manifest"]
