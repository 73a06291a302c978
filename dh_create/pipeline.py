"""dh-create pipeline orchestrator.

Runs the four steps strictly in order:

1. LOAD        -- probe the package manager, load and flatten the schema.
2. SELECT      -- ask for a project name and the classes to publish.
3. MATERIALIZE -- write the project directory.
4. INSTALL     -- install dependencies with the package manager.

Any step failure raises a ``DhCreateError``; ``main`` reports it and exits
with status 1.  Nothing is rolled back.

Usage::

    dh-create schema.yaml
    python -m dh_create schema.yaml
"""

from __future__ import annotations

import asyncio
import sys
from collections.abc import Callable
from pathlib import Path

from rich.markup import escape

from dh_create import __version__
from dh_create.config import Config
from dh_create.errors import DhCreateError
from dh_create.installer import DependencyInstaller
from dh_create.scaffolder import ProjectMaterializer
from dh_create.schema import (
    LinkMLSchemaView,
    SchemaView,
    ViewFactory,
    flatten_schema,
    load_schema,
)
from dh_create.selector import SelectionAnswers, prompt_selection
from dh_create.utils import console, print_error, print_success

Selector = Callable[[SchemaView, str], SelectionAnswers]


class CreateProjectPipeline:
    """Drives one scaffolding run.

    Attributes:
        config: Run configuration.
        view_factory: Builds a ``SchemaView`` from a schema path.
        selector: Blocking interactive prompt returning the answers.
        materializer: Writes the project directory.
        installer: Probes for and runs the package manager.
    """

    def __init__(
        self,
        config: Config,
        view_factory: ViewFactory = LinkMLSchemaView,
        selector: Selector = prompt_selection,
        installer: DependencyInstaller | None = None,
    ) -> None:
        self.config = config
        self.view_factory = view_factory
        self.selector = selector
        self.materializer = ProjectMaterializer(config)
        self.installer = installer or DependencyInstaller(config)

    def _load(self, schema_path: Path) -> SchemaView:
        return flatten_schema(load_schema(schema_path, self.view_factory))

    async def run(self, schema_path: str | Path) -> Path:
        """Run every step and return the generated project directory."""
        await self.installer.check_available()

        schema_path = Path(schema_path).resolve()
        console.print(f"Reading schema file [green]{escape(str(schema_path))}[/green]\n")
        view = await asyncio.to_thread(self._load, schema_path)

        answers = await asyncio.to_thread(
            self.selector, view, self.config.marker_class
        )

        dest = self.config.project_path(answers.project_name)
        console.print(
            f"\nCreating new data-harmonizer project in [green]{escape(str(dest))}[/green]\n"
        )
        await self.materializer.materialize(answers, view, schema_path)

        console.print("Installing dependencies")
        await self.installer.install(dest)

        console.print()
        print_success(f"Success! Created project at {dest}")
        console.print(self.installer.next_steps(escape(answers.project_name)))
        return dest


# ---------------------------------------------------------------------------
# CLI entry point
# ---------------------------------------------------------------------------


def main(argv: list[str] | None = None) -> None:
    """CLI entry point for ``dh-create`` and ``python -m dh_create``."""
    import argparse

    parser = argparse.ArgumentParser(
        prog="dh-create",
        description="Create a new DataHarmonizer project from a LinkML schema",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=(
            "Environment:\n"
            "  DH_CREATE_PACKAGE_MANAGER  package manager to install with (default: npm)\n"
            "  DH_CREATE_MARKER_CLASS     interface class of pre-selected templates\n"
            "  DH_CREATE_TEMPLATE_DIR     alternative project template directory\n"
            "  DH_CREATE_OUTPUT_DIR       where the project folder is created (default: cwd)\n"
        ),
    )
    parser.add_argument("schema", help="Path to the LinkML schema file")
    parser.add_argument(
        "--version", action="version", version=f"%(prog)s {__version__}"
    )

    args = parser.parse_args(argv)

    config = Config.from_env()
    pipeline = CreateProjectPipeline(config)
    try:
        asyncio.run(pipeline.run(args.schema))
    except DhCreateError as exc:
        print_error(exc.message)
        sys.exit(1)


if __name__ == "__main__":
    main()
