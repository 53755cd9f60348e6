"""High-level orchestration for category pagination.

This module runs the whole categorize, sort, paginate, and tree-assemble pass
for one build. :class:`CategoryPaginator` consumes a
:class:`~taxonomy_pages.config.TaxonomyConfig` and the host's file map (source
path to item metadata) and returns a :class:`TaxonomyBuild` describing every
category record, the taxonomy tree, and the page registrations in order.
:meth:`CategoryPaginator.apply` additionally merges those pages into the host
map, touching it only after every category has been paginated so a
validation failure leaves the map exactly as it was.

Example
-------
>>> from taxonomy_pages.config import build_taxonomy_config
>>> from taxonomy_pages.pipeline import CategoryPaginator
>>> config = build_taxonomy_config({"categories": {"news": {"perPage": 2}}})
>>> files = {"a.md": {"category": "news", "date": 1}}
>>> build = CategoryPaginator(config).apply(files)
>>> sorted(files)
['a.md', 'news/index.html']
"""

from __future__ import annotations

import dataclasses as dc
import logging
import typing as typ

from .indexer import index_categories, strip_synthetic_sources
from .paginate import paginate_categories
from .sorting import sort_categories
from .tree import assemble_tree

if typ.TYPE_CHECKING:
    import collections.abc as cabc

    from .config import Item, TaxonomyConfig
    from .models import CategoryRecord, PageRecord
    from .paginate import Registration

logger = logging.getLogger(__name__)


@dc.dataclass(slots=True)
class TaxonomyBuild:
    """Everything produced by one pagination pass."""

    categories: dict[str, CategoryRecord]
    tree: CategoryRecord
    registrations: list[Registration]

    @property
    def outputs(self) -> dict[str, PageRecord]:
        """Return pages by output path; later registrations win."""
        return dict(self.registrations)

    @property
    def output_paths(self) -> list[str]:
        """Return the distinct output paths in first-registration order."""
        return list(self.outputs)


class CategoryPaginator:
    """Categorize items and emit linked category pages."""

    def __init__(self, config: TaxonomyConfig) -> None:
        """Initialize the paginator.

        Parameters
        ----------
        config : TaxonomyConfig
            Resolved defaults, per-category options, and indexing policy.
        """
        self.config = config

    def run(self, files: cabc.Mapping[str, Item]) -> TaxonomyBuild:
        """Index, sort, paginate, and link categories without touching ``files``.

        Raises
        ------
        PaginationError
            Raised for the first category whose options cannot be paginated.
        """
        records = index_categories(files, self.config)
        sort_categories(records.values())
        registrations = paginate_categories(records)
        root = assemble_tree(records, defaults=self.config.defaults)
        for _, page in registrations:
            page.tree = root
        logger.debug(
            "paginated %d categories into %d outputs",
            len(records),
            len(registrations),
        )
        return TaxonomyBuild(
            categories=records, tree=root, registrations=registrations
        )

    def apply(self, files: cabc.MutableMapping[str, typ.Any]) -> TaxonomyBuild:
        """Run the pass and merge the generated pages into ``files``.

        Category and metadata option sources are removed from ``files`` and
        each page is stored under its output path.
        """
        build = self.run(files)
        strip_synthetic_sources(files)
        files.update(build.outputs)
        return build


def paginate_files(
    files: cabc.MutableMapping[str, typ.Any], config: TaxonomyConfig
) -> TaxonomyBuild:
    """Convenience wrapper around :meth:`CategoryPaginator.apply`."""
    return CategoryPaginator(config).apply(files)


__all__ = ["CategoryPaginator", "TaxonomyBuild", "paginate_files"]
