"""Load taxonomy configuration YAML into typed dataclasses."""

from __future__ import annotations

import collections.abc as cabc
import typing as typ

from ruamel.yaml import YAML

from .helpers import _merge_page_config, _parse_policy
from .models import PageConfig, TaxonomyConfig, TaxonomyConfigError

if typ.TYPE_CHECKING:
    from pathlib import Path


def load_taxonomy_config(path: Path) -> TaxonomyConfig:
    """Load the YAML file describing default and per-category page options.

    Parameters
    ----------
    path : Path
        Filesystem path to the YAML configuration (for example,
        ``taxonomy.yaml``).

    Returns
    -------
    TaxonomyConfig
        Resolved defaults, one :class:`PageConfig` per configured category,
        and the indexing policy.

    Raises
    ------
    FileNotFoundError
        If the configuration file does not exist at ``path``.
    TypeError
        If the top-level YAML structure is not a mapping.
    TaxonomyConfigError
        If an option value cannot be coerced (for example, a negative
        ``perPage``) or the policy is unknown.

    Examples
    --------
    >>> from pathlib import Path
    >>> config = load_taxonomy_config(Path("taxonomy.yaml"))  # doctest: +SKIP
    >>> config.resolve("news").per_page  # doctest: +SKIP
    10
    """
    if not path.exists():
        msg = f"Configuration file '{path}' not found."
        raise FileNotFoundError(msg)

    loader = YAML(typ="safe")
    loader.version = (1, 2)
    with path.open("r", encoding="utf-8") as handle:
        loaded = loader.load(handle) or {}
    if not isinstance(loaded, dict):
        msg = "Top-level YAML structure must be a mapping."
        raise TypeError(msg)
    return build_taxonomy_config(loaded)


def build_taxonomy_config(raw: cabc.Mapping[str, typ.Any]) -> TaxonomyConfig:
    """Resolve an in-memory configuration mapping.

    ``raw`` follows the YAML layout: an optional ``policy`` string, an optional
    ``defaults`` option fragment, and a ``categories`` mapping of category key
    to option fragment. Fragments may carry Python callables for ``sortBy``,
    ``groupBy`` and ``filter``.
    """
    defaults = _merge_page_config(PageConfig(), "defaults", raw.get("defaults"))
    categories_raw = raw.get("categories") or {}
    if not isinstance(categories_raw, cabc.Mapping):
        msg = "The 'categories' section must be a mapping of category keys."
        raise TaxonomyConfigError(msg)

    categories: dict[str, PageConfig] = {}
    for key, payload in categories_raw.items():
        name = str(key).strip()
        if not name:
            msg = "Category keys must be non-empty strings."
            raise TaxonomyConfigError(msg)
        categories[name] = _merge_page_config(defaults, name, payload)

    return TaxonomyConfig(
        defaults=defaults,
        categories=categories,
        policy=_parse_policy(raw.get("policy")),
    )


__all__ = ["build_taxonomy_config", "load_taxonomy_config"]
