"""Project materialization.

Takes the selection answers and the flattened schema and produces a new
DataHarmonizer project directory: the static template, ``package.json``,
the exported schema under ``schemas/`` and ``menu.json``.
"""

from __future__ import annotations

import asyncio
import shutil
from pathlib import Path
from typing import Any

from ..config import Config
from ..errors import MaterializeError
from ..schema import SchemaView
from ..selector import SelectionAnswers
from ..utils import save_json

# Template files that cannot be shipped under their real name.
RENAMED_TEMPLATE_FILES: dict[str, str] = {
    "_gitignore": ".gitignore",
}


def build_menu(
    schema_stem: str,
    classes: list[str],
    status: str = "published",
    display: bool = True,
) -> dict[str, dict[str, dict[str, Any]]]:
    """Build the ``menu.json`` payload for the selected classes.

    E.g. ``build_menu("example", ["B"])`` ->
    ``{"example": {"B": {"name": "B", "status": "published", "display": True}}}``.
    """
    return {
        schema_stem: {
            name: {"name": name, "status": status, "display": display}
            for name in classes
        }
    }


class ProjectMaterializer:
    """Writes a project directory from a fixed template.

    Each step fails with a :class:`MaterializeError` naming the path it
    was working on.  Earlier steps are not rolled back.
    """

    def __init__(self, config: Config) -> None:
        self.config = config

    # -- Public API --------------------------------------------------------

    async def materialize(
        self,
        answers: SelectionAnswers,
        view: SchemaView,
        schema_path: str | Path,
    ) -> Path:
        """Generate the project and return its root directory."""
        dest = self.config.project_path(answers.project_name)
        schema_stem = Path(schema_path).stem

        # 1. Project root
        await self._mkdir(dest, f"Could not create directory {dest}")

        # 2. Static template
        await self._copy_template(dest)

        # 3. package.json
        await self._write_json(
            self.config.manifest.as_json(),
            dest / "package.json",
            f"Could not write package.json to {dest}",
        )

        # 4. schemas/
        schemas_dir = dest / "schemas"
        await self._mkdir(schemas_dir, f"Could not create directory: {schemas_dir}")

        # 5. Flattened schema export
        schema_json = schemas_dir / f"{schema_stem}.json"
        await self._write_json(
            view.to_dict(),
            schema_json,
            f"Could not export schema to {schema_json}",
        )

        # 6. menu.json
        menu = build_menu(
            schema_stem,
            answers.classes,
            status=self.config.menu_status,
            display=self.config.menu_display,
        )
        await self._write_json(
            menu, dest / "menu.json", f"Could not write menu.json to {dest}"
        )

        return dest

    # -- Steps -------------------------------------------------------------

    async def _mkdir(self, path: Path, message: str) -> None:
        try:
            await asyncio.to_thread(path.mkdir, parents=True, exist_ok=True)
        except OSError as exc:
            raise MaterializeError(message, path) from exc

    async def _copy_template(self, dest: Path) -> None:
        """Copy the top level of the template directory into *dest*."""
        template_dir = self.config.template_dir
        try:
            entries = await asyncio.to_thread(sorted, template_dir.iterdir())
            for src in entries:
                target = dest / RENAMED_TEMPLATE_FILES.get(src.name, src.name)
                await asyncio.to_thread(shutil.copyfile, src, target)
        except OSError as exc:
            raise MaterializeError(
                f"Could not copy template files to {dest}", dest
            ) from exc

    async def _write_json(self, data: Any, path: Path, message: str) -> None:
        try:
            await save_json(data, path)
        except OSError as exc:
            raise MaterializeError(message, path) from exc
