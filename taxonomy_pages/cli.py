"""Cyclopts CLI entrypoint for paginating categorized content.

The ``taxonomy`` console script defined here loads a ``taxonomy.yaml``
configuration and an item manifest (a YAML or JSON mapping of source path to
item metadata), runs the category paginator, and reports the generated pages
either as a JSON manifest or as an indented category tree. Typical usage is
``taxonomy build`` in CI to check which output paths a content change
produces.

Examples
--------
Write the page manifest for the default configuration:

>>> from taxonomy_pages.cli import main
>>> main()  # doctest: +SKIP

Print the category tree for a custom item manifest:

>>> from taxonomy_pages.cli import app
>>> app(["tree", "--items", "content/items.yaml"])  # doctest: +SKIP
"""

from __future__ import annotations

import logging
import sys
import typing as typ
from pathlib import Path

import cyclopts
from cyclopts import App, Parameter
from ruamel.yaml import YAML

from .config import load_taxonomy_config
from .manifest import build_manifest, encode_manifest
from .pipeline import CategoryPaginator

if typ.TYPE_CHECKING:
    from .config import Item
    from .models import CategoryRecord

DEFAULT_CONFIG = Path("config/taxonomy.yaml")
DEFAULT_ITEMS = Path("content/items.yaml")
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

app = App(name="taxonomy", config=cyclopts.config.Env("INPUT_", command=False))  # type: ignore[unknown-argument]


def _format_path(path: Path) -> str:
    """Return a cwd-relative path when possible, otherwise the absolute path."""
    if path.is_absolute():
        try:
            return str(path.relative_to(Path.cwd()))
        except ValueError:  # pragma: no cover - fallback for different roots
            return str(path)
    return str(path)


def _configure_logging(level: str) -> None:
    logging.basicConfig(level=level.upper(), format=LOG_FORMAT, stream=sys.stderr)


def load_items(path: Path) -> dict[str, Item]:
    """Load a YAML or JSON mapping of source path to item metadata.

    Raises
    ------
    FileNotFoundError
        If the manifest does not exist at ``path``.
    TypeError
        If the manifest or any of its entries is not a mapping.
    """
    if not path.exists():
        msg = f"Item manifest '{path}' not found."
        raise FileNotFoundError(msg)

    loader = YAML(typ="safe")
    loader.version = (1, 2)
    with path.open("r", encoding="utf-8") as handle:
        loaded = loader.load(handle) or {}
    if not isinstance(loaded, dict):
        msg = "Item manifest must map source paths to metadata."
        raise TypeError(msg)

    items: dict[str, Item] = {}
    for source, payload in loaded.items():
        if not isinstance(payload, dict):
            msg = f"Item '{source}' must be a mapping, got {type(payload).__name__}."
            raise TypeError(msg)
        items[str(source)] = dict(payload)
    return items


def _tree_lines(node: CategoryRecord, depth: int = 0) -> typ.Iterator[str]:
    label = f"{node.key} ({len(node.files)} items, {len(node.pages)} pages)"
    if node.href:
        label = f"{label} -> {node.href}"
    yield f"{'  ' * depth}{label}"
    for child in node.children:
        yield from _tree_lines(child, depth + 1)


@app.command(help="Paginate categorized items and emit a JSON page manifest.")
def build(
    *,
    config: typ.Annotated[
        Path, Parameter(help="Path to taxonomy config", env_var="INPUT_CONFIG")
    ] = DEFAULT_CONFIG,
    items: typ.Annotated[
        Path, Parameter(help="Path to item manifest", env_var="INPUT_ITEMS")
    ] = DEFAULT_ITEMS,
    output: typ.Annotated[
        Path | None,
        Parameter(help="Write the manifest here instead of stdout"),
    ] = None,
    log_level: typ.Annotated[
        str, Parameter(help="Logging level", env_var="INPUT_LOG_LEVEL")
    ] = "WARNING",
) -> None:
    """Paginate the item manifest and report every generated page.

    Parameters
    ----------
    config : Path, optional
        Path to the ``taxonomy.yaml`` configuration file (overridable via
        ``INPUT_CONFIG``).
    items : Path, optional
        YAML or JSON mapping of source path to item metadata.
    output : Path or None, optional
        Destination for the manifest; when ``None`` the manifest is written to
        stdout.
    log_level : str, optional
        Threshold for log records emitted to stderr.

    Raises
    ------
    PaginationError
        If any configured category cannot be paginated. Nothing is written.
    """
    _configure_logging(log_level)
    taxonomy = load_taxonomy_config(config)
    files = load_items(items)
    result = CategoryPaginator(taxonomy).apply(files)
    payload = encode_manifest(build_manifest(result))
    if output is None:
        sys.stdout.write(payload.decode("utf-8"))
        return
    output.parent.mkdir(parents=True, exist_ok=True)
    output.write_bytes(payload)
    print(f"wrote {_format_path(output)}")


@app.command(help="Print the category tree with item and page counts.")
def tree(
    *,
    config: typ.Annotated[
        Path, Parameter(help="Path to taxonomy config", env_var="INPUT_CONFIG")
    ] = DEFAULT_CONFIG,
    items: typ.Annotated[
        Path, Parameter(help="Path to item manifest", env_var="INPUT_ITEMS")
    ] = DEFAULT_ITEMS,
    log_level: typ.Annotated[
        str, Parameter(help="Logging level", env_var="INPUT_LOG_LEVEL")
    ] = "WARNING",
) -> None:
    """Print the assembled taxonomy, one indented line per category."""
    _configure_logging(log_level)
    taxonomy = load_taxonomy_config(config)
    result = CategoryPaginator(taxonomy).run(load_items(items))
    for line in _tree_lines(result.tree):
        print(line)


def main() -> None:
    """Invoke the Cyclopts application that powers the `taxonomy` command.

    Examples
    --------
    >>> main()  # doctest: +SKIP
    """
    app()


if __name__ == "__main__":  # pragma: no cover - manual invocation helper
    main()
