"""Shared pytest fixtures for the dh-create test suite.

Provides reusable fixtures for:
- An in-memory ``SchemaView`` with a small class hierarchy
- A LinkML schema file on disk
- A throwaway project template directory
- A ``Config`` pointing at temporary directories
"""

from __future__ import annotations

import copy
import sys
import textwrap
from collections.abc import MutableMapping
from dataclasses import asdict, dataclass, field
from pathlib import Path
from typing import Any

import pytest

from dh_create.config import Config


# ---------------------------------------------------------------------------
# In-memory schema view
# ---------------------------------------------------------------------------

@dataclass
class FakeAttribute:
    name: str
    range: str = "string"
    description: str = ""


@dataclass
class FakeClass:
    is_a: str | None = None
    mixins: list[str] = field(default_factory=list)
    attributes: dict[str, FakeAttribute] | None = None


class FakeSchemaView:
    """Dictionary-backed ``SchemaView`` with is_a and mixin inheritance."""

    def __init__(self, classes: dict[str, FakeClass], name: str = "fake") -> None:
        self.name = name
        self.classes = copy.deepcopy(classes)
        self.merge_calls = 0

    def merge_imports(self) -> None:
        self.merge_calls += 1

    def class_names(self) -> list[str]:
        return list(self.classes)

    def class_ancestors(self, class_name: str) -> list[str]:
        seen: list[str] = []
        pending = [class_name]
        while pending:
            current = pending.pop(0)
            if current in seen:
                continue
            seen.append(current)
            cls = self.classes[current]
            if cls.is_a:
                pending.append(cls.is_a)
            pending.extend(cls.mixins)
        return seen

    def induced_attributes(self, class_name: str) -> list[FakeAttribute]:
        induced: dict[str, FakeAttribute] = {}
        for ancestor in reversed(self.class_ancestors(class_name)):
            for attr in (self.classes[ancestor].attributes or {}).values():
                induced[attr.name] = copy.copy(attr)
        return list(induced.values())

    def attributes(self, class_name: str) -> MutableMapping[str, Any]:
        cls = self.classes[class_name]
        if cls.attributes is None:
            cls.attributes = {}
        return cls.attributes

    def to_dict(self) -> dict[str, Any]:
        classes: dict[str, Any] = {}
        for name, cls in self.classes.items():
            entry: dict[str, Any] = {"name": name}
            if cls.is_a:
                entry["is_a"] = cls.is_a
            if cls.mixins:
                entry["mixins"] = list(cls.mixins)
            if cls.attributes is not None:
                entry["attributes"] = {k: asdict(v) for k, v in cls.attributes.items()}
            classes[name] = entry
        return {"name": self.name, "classes": classes}


def _attrs(*names: str, **overrides: str) -> dict[str, FakeAttribute]:
    attrs = {n: FakeAttribute(name=n) for n in names}
    for n, description in overrides.items():
        attrs[n] = FakeAttribute(name=n, description=description)
    return attrs


@pytest.fixture
def fake_view_cls() -> type[FakeSchemaView]:
    """The in-memory view class, for tests that build their own hierarchy."""
    return FakeSchemaView


@pytest.fixture
def fake_class_cls() -> type[FakeClass]:
    return FakeClass


@pytest.fixture
def fake_attr_cls() -> type[FakeAttribute]:
    return FakeAttribute


@pytest.fixture
def abc_classes() -> dict[str, FakeClass]:
    """A (x), B is_a A (y), dh_interface, C is_a dh_interface (z)."""
    return {
        "A": FakeClass(attributes=_attrs("x")),
        "B": FakeClass(is_a="A", attributes=_attrs("y")),
        "dh_interface": FakeClass(),
        "C": FakeClass(is_a="dh_interface", attributes=_attrs("z")),
    }


@pytest.fixture
def abc_view(abc_classes: dict[str, FakeClass]) -> FakeSchemaView:
    return FakeSchemaView(abc_classes, name="example")


# ---------------------------------------------------------------------------
# LinkML schema on disk
# ---------------------------------------------------------------------------

ABC_SCHEMA_YAML = textwrap.dedent(
    """\
    id: https://example.org/example
    name: example
    prefixes:
      ex: https://example.org/example/
    default_prefix: ex
    classes:
      A:
        attributes:
          x:
            description: attribute declared on A
      B:
        is_a: A
        attributes:
          y:
            description: attribute declared on B
      dh_interface:
        description: Marker for DataHarmonizer templates
      C:
        is_a: dh_interface
        attributes:
          z:
            description: attribute declared on C
    """
)


@pytest.fixture
def linkml_schema_file(tmp_path: Path) -> Path:
    """The A/B/C/dh_interface hierarchy as a LinkML YAML file."""
    schema_dir = tmp_path / "schema-src"
    schema_dir.mkdir()
    path = schema_dir / "example.yaml"
    path.write_text(ABC_SCHEMA_YAML, encoding="utf-8")
    return path


# ---------------------------------------------------------------------------
# Template & config
# ---------------------------------------------------------------------------

@pytest.fixture
def template_dir(tmp_path: Path) -> Path:
    """A flat template directory including the ``_gitignore`` placeholder."""
    root = tmp_path / "template"
    root.mkdir()
    (root / "index.html").write_text("<!DOCTYPE html>\n<html></html>\n", encoding="utf-8")
    (root / "main.js").write_text("console.log('dh')\n", encoding="utf-8")
    (root / "_gitignore").write_text("node_modules\ndist\n", encoding="utf-8")
    (root / "logo.bin").write_bytes(bytes(range(256)))
    return root


@pytest.fixture
def output_dir(tmp_path: Path) -> Path:
    out = tmp_path / "out"
    out.mkdir()
    return out


@pytest.fixture
def config(template_dir: Path, output_dir: Path) -> Config:
    """Config writing into ``output_dir`` and "installing" with the Python interpreter."""
    return Config(
        template_dir=template_dir,
        output_dir=output_dir,
        package_manager=sys.executable,
        install_args=["-c", "print('installed')"],
    )
