"""Schema view capability set and its LinkML implementation.

The scaffolder never inspects a schema library's own data structures.  It
talks to a :class:`SchemaView`, which exposes only what project generation
needs: import resolution, class listing, ancestry, induced attributes, a
mutable attribute map per class, and a JSON-ready export.
"""

from __future__ import annotations

import json
from collections.abc import MutableMapping
from pathlib import Path
from typing import Any, Protocol, runtime_checkable

from linkml_runtime.dumpers import json_dumper
from linkml_runtime.utils.schemaview import SchemaView as _LinkMLView


@runtime_checkable
class SchemaView(Protocol):
    """What the loader, flattener, selector and materializer rely on."""

    def merge_imports(self) -> None:
        """Merge every imported schema into this one."""
        ...

    def class_names(self) -> list[str]:
        """All class names, in schema order."""
        ...

    def class_ancestors(self, class_name: str) -> list[str]:
        """Ancestor names of *class_name*, including itself."""
        ...

    def induced_attributes(self, class_name: str) -> list[Any]:
        """Own and inherited attributes; each item has a ``name``."""
        ...

    def attributes(self, class_name: str) -> MutableMapping[str, Any]:
        """The class's own attribute map, created if absent."""
        ...

    def to_dict(self) -> dict[str, Any]:
        """The full schema as JSON-serialisable data."""
        ...


class LinkMLSchemaView:
    """``SchemaView`` backed by ``linkml_runtime``'s SchemaView."""

    def __init__(self, path: str | Path) -> None:
        self.path = Path(path)
        self._view = _LinkMLView(str(self.path))

    def merge_imports(self) -> None:
        self._view.merge_imports()

    def class_names(self) -> list[str]:
        return [str(name) for name in self._view.all_classes()]

    def class_ancestors(self, class_name: str) -> list[str]:
        return [str(name) for name in self._view.class_ancestors(class_name)]

    def induced_attributes(self, class_name: str) -> list[Any]:
        return list(self._view.class_induced_slots(class_name))

    def attributes(self, class_name: str) -> MutableMapping[str, Any]:
        class_def = self._view.get_class(class_name, strict=True)
        if class_def.attributes is None:
            class_def.attributes = {}
        return class_def.attributes

    def to_dict(self) -> dict[str, Any]:
        return json.loads(json_dumper.dumps(self._view.schema, inject_type=False))
