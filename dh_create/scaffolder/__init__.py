"""dh-create scaffolder -- writes new DataHarmonizer project directories.

Quick usage::

    from dh_create.config import Config
    from dh_create.scaffolder import ProjectMaterializer

    materializer = ProjectMaterializer(Config(output_dir=Path("/tmp/output")))
    project_path = await materializer.materialize(answers, view, "schema.yaml")
"""

from dh_create.scaffolder.generator import (
    RENAMED_TEMPLATE_FILES,
    ProjectMaterializer,
    build_menu,
)

__all__ = [
    "RENAMED_TEMPLATE_FILES",
    "ProjectMaterializer",
    "build_menu",
]
