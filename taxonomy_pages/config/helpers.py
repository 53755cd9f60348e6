"""Utility helpers shared by the taxonomy configuration loader."""

from __future__ import annotations

import collections.abc as cabc
import dataclasses as dc
import logging
import typing as typ

from .models import (
    ByComparator,
    ByField,
    IndexPolicy,
    PageConfig,
    SortSpec,
    TaxonomyConfigError,
)

if typ.TYPE_CHECKING:
    from .models import GroupBy, Item, ItemFilter

logger = logging.getLogger(__name__)

OPTION_ALIASES: dict[str, str] = {
    "sortBy": "sort_by",
    "groupBy": "group_by",
    "noPageOne": "no_page_one",
    "perPage": "per_page",
    "pageContents": "page_contents",
    "displayName": "display_name",
    "pageMetadata": "page_metadata",
}
PAGE_CONFIG_FIELDS = frozenset(field.name for field in dc.fields(PageConfig))


def _normalize_options(
    key: str, payload: typ.Mapping[str, typ.Any]
) -> dict[str, typ.Any]:
    """Return ``payload`` keyed by PageConfig field names, dropping unknowns."""
    normalized: dict[str, typ.Any] = {}
    for name, value in payload.items():
        field = OPTION_ALIASES.get(name, name)
        if field not in PAGE_CONFIG_FIELDS:
            logger.warning("ignoring unknown option %r for category %r", name, key)
            continue
        normalized[field] = value
    return normalized


def _coerce_sort_spec(key: str, value: object) -> SortSpec:
    """Turn a field name or comparator into a :data:`SortSpec`."""
    match value:
        case ByField() | ByComparator():
            return value
        case str() if value:
            return ByField(value)
        case _ if callable(value):
            return ByComparator(value)
        case _:
            msg = f"Category '{key}' has an invalid 'sortBy' value: {value!r}"
            raise TaxonomyConfigError(msg)


def _field_group_by(field: str) -> GroupBy:
    """Group items by the value of ``field``."""

    def group_by(item: Item, index: int, config: PageConfig) -> typ.Any:
        return item.get(field)

    return group_by


def _field_filter(expression: str) -> ItemFilter:
    """Keep items whose field is truthy, or falsy when prefixed with ``!``."""
    negate = expression.startswith("!")
    field = expression.lstrip("!")

    def item_filter(item: Item) -> bool:
        return bool(item.get(field)) != negate

    return item_filter


def _coerce_callable(
    key: str, option: str, value: object, factory: typ.Callable[[str], typ.Any]
) -> typ.Any:
    """Accept ``None``, a callable, or a field expression for ``option``."""
    if value is None or callable(value):
        return value
    if isinstance(value, str) and value:
        return factory(value)
    msg = f"Category '{key}' has an invalid '{option}' value: {value!r}"
    raise TaxonomyConfigError(msg)


def _coerce_bool(key: str, option: str, value: object) -> bool:
    if isinstance(value, bool):
        return value
    msg = f"Category '{key}' option '{option}' must be a boolean, got {value!r}"
    raise TaxonomyConfigError(msg)


def _coerce_per_page(key: str, value: object) -> int:
    if isinstance(value, bool) or not isinstance(value, int) or value < 1:
        msg = f"Category '{key}' option 'perPage' must be a positive integer, got {value!r}"
        raise TaxonomyConfigError(msg)
    return value


def _coerce_contents(key: str, value: object) -> bytes:
    match value:
        case None:
            return b""
        case bytes():
            return value
        case str():
            return value.encode("utf-8")
        case _:
            msg = (
                f"Category '{key}' option 'pageContents' must be text or bytes, "
                f"got {value!r}"
            )
            raise TaxonomyConfigError(msg)


def _coerce_mapping(key: str, option: str, value: object) -> dict[str, typ.Any]:
    if value is None:
        return {}
    if isinstance(value, cabc.Mapping):
        return dict(value)
    msg = f"Category '{key}' option '{option}' must be a mapping, got {value!r}"
    raise TaxonomyConfigError(msg)


def _optional_str(value: object | None) -> str | None:
    """Return a stripped string value or None when empty."""
    if value is None:
        return None
    text = str(value).strip()
    return text or None


def _coerce_option(key: str, field: str, value: typ.Any) -> typ.Any:
    """Validate a single normalized option value."""
    match field:
        case "sort_by":
            return _coerce_sort_spec(key, value)
        case "group_by":
            return _coerce_callable(key, "groupBy", value, _field_group_by)
        case "filter":
            return _coerce_callable(key, "filter", value, _field_filter)
        case "reverse" | "no_page_one":
            return _coerce_bool(key, field, value)
        case "per_page":
            return _coerce_per_page(key, value)
        case "page_contents":
            return _coerce_contents(key, value)
        case "metadata" | "page_metadata":
            return _coerce_mapping(key, field, value)
        case _:
            return _optional_str(value)


def _merge_page_config(
    base: PageConfig, key: str, payload: typ.Mapping[str, typ.Any] | None
) -> PageConfig:
    """Overlay an option fragment onto ``base`` field by field.

    A present key overrides the inherited value, including an explicit
    ``None``. Switching render target therefore means clearing the other one.
    """
    if not payload:
        return dc.replace(base)
    if not isinstance(payload, cabc.Mapping):
        msg = f"Category '{key}' options must be a mapping, got {payload!r}"
        raise TaxonomyConfigError(msg)
    options = _normalize_options(key, payload)
    overrides = {
        field: _coerce_option(key, field, value) for field, value in options.items()
    }
    return dc.replace(base, **overrides)


def _parse_policy(value: object) -> IndexPolicy:
    if value is None:
        return IndexPolicy.UNRESTRICTED
    if isinstance(value, IndexPolicy):
        return value
    try:
        return IndexPolicy(str(value).strip().lower().replace("_", "-"))
    except ValueError as exc:
        known = ", ".join(policy.value for policy in IndexPolicy)
        msg = f"Unknown index policy {value!r}. Known policies: {known}"
        raise TaxonomyConfigError(msg) from exc


__all__ = [
    "OPTION_ALIASES",
    "PAGE_CONFIG_FIELDS",
    "_coerce_sort_spec",
    "_field_filter",
    "_field_group_by",
    "_merge_page_config",
    "_optional_str",
    "_parse_policy",
]
