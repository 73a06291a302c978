"""dh-create configuration.

Typed configuration for the scaffolding run. All settings use Pydantic v2
models so they are validated at construction time and can be overridden
from environment variables without boiler-plate.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

_DEFAULT_TEMPLATE_DIR = Path(__file__).parent / "scaffolder" / "template"


class PackageManifest(BaseModel):
    """The ``package.json`` written into every generated project.

    The manifest ``name`` is a fixed literal and does not follow the
    project name chosen at the prompt.
    """

    model_config = ConfigDict(populate_by_name=True)

    name: str = Field(default="dh-testing-web")
    version: str = Field(default="0.0.0")
    type: str = Field(default="module")
    scripts: dict[str, str] = Field(
        default_factory=lambda: {
            "dev": "vite",
            "build": "vite build",
            "preview": "vite preview",
        }
    )
    private: bool = Field(default=True)
    dev_dependencies: dict[str, str] = Field(
        default_factory=lambda: {"vite": "3.0.4"},
        alias="devDependencies",
    )
    dependencies: dict[str, str] = Field(
        default_factory=lambda: {
            "bootstrap": "4.3.1",
            "data-harmonizer": "1.3.5",
            "jquery": "3.5.1",
            "popper.js": "1.16.1",
        }
    )

    def as_json(self) -> dict[str, Any]:
        """Return the manifest with npm's key names (``devDependencies``)."""
        return self.model_dump(by_alias=True)


class Config(BaseModel):
    """Global dh-create configuration.

    Created once by the CLI entry point and passed to every component.
    """

    marker_class: str = Field(
        default="dh_interface",
        min_length=1,
        description="Interface class whose descendants are pre-selected",
    )
    package_manager: str = Field(default="npm", min_length=1)
    install_args: list[str] = Field(default_factory=lambda: ["install"])
    template_dir: Path = Field(default=_DEFAULT_TEMPLATE_DIR)
    output_dir: Path = Field(
        default_factory=Path.cwd,
        description="Directory the project folder is created in",
    )
    menu_status: str = Field(default="published")
    menu_display: bool = Field(default=True)
    manifest: PackageManifest = Field(default_factory=PackageManifest)

    # ------------------------------------------------------------------
    # Derived paths
    # ------------------------------------------------------------------

    def project_path(self, project_name: str) -> Path:
        """Destination directory for a project called *project_name*.

        Leading separators are dropped so an absolute-looking name still
        lands under ``output_dir``.
        """
        return self.output_dir / project_name.lstrip("/\\")

    # ------------------------------------------------------------------
    # Environment overrides
    # ------------------------------------------------------------------

    @classmethod
    def from_env(cls) -> "Config":
        """Build a ``Config`` from environment variables.

        Recognised variables (all optional):
            DH_CREATE_MARKER_CLASS, DH_CREATE_PACKAGE_MANAGER,
            DH_CREATE_TEMPLATE_DIR, DH_CREATE_OUTPUT_DIR.
        """
        kwargs: dict[str, Any] = {}
        if os.environ.get("DH_CREATE_MARKER_CLASS"):
            kwargs["marker_class"] = os.environ["DH_CREATE_MARKER_CLASS"]
        if os.environ.get("DH_CREATE_PACKAGE_MANAGER"):
            kwargs["package_manager"] = os.environ["DH_CREATE_PACKAGE_MANAGER"]
        if os.environ.get("DH_CREATE_TEMPLATE_DIR"):
            kwargs["template_dir"] = Path(os.environ["DH_CREATE_TEMPLATE_DIR"])
        if os.environ.get("DH_CREATE_OUTPUT_DIR"):
            kwargs["output_dir"] = Path(os.environ["DH_CREATE_OUTPUT_DIR"])
        return cls(**kwargs)
