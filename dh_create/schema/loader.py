"""Schema loading and flattening.

``load_schema`` builds a view and merges imports; ``flatten_schema`` then
embeds every class's induced attributes into its own ``attributes`` map so
the exported JSON is usable without inheritance resolution.
"""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path
from typing import Any

from .view import LinkMLSchemaView, SchemaView

ViewFactory = Callable[[Path], SchemaView]


def load_schema(
    path: str | Path,
    view_factory: ViewFactory = LinkMLSchemaView,
) -> SchemaView:
    """Load the schema at *path* with all of its imports merged in.

    Errors raised by the schema library are not caught.
    """
    view = view_factory(Path(path).resolve())
    view.merge_imports()
    return view


def flatten_schema(view: SchemaView) -> SchemaView:
    """Write each class's induced attributes into its ``attributes`` map.

    Attributes are keyed by name, so re-flattening an already flattened
    view leaves every map with the same keys.  Induced sets are computed
    for all classes before the first class is modified.
    """
    induced: dict[str, list[Any]] = {
        name: view.induced_attributes(name) for name in view.class_names()
    }
    for class_name, attrs in induced.items():
        if not attrs:
            continue
        target = view.attributes(class_name)
        for attr in attrs:
            target[attr.name] = attr
    return view
