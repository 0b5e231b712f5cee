"""create-loom scaffolder -- template catalogue and project materialisation.

Quick usage::

    from create_loom.scaffolder import ProjectGenerator
    from create_loom.workflow import ResolvedTarget

    target = ResolvedTarget(
        root=Path("/tmp/demo"),
        target_dir="demo",
        template="html-css",
        package_name="demo",
    )
    project_path = ProjectGenerator().generate(target)
"""

from create_loom.scaffolder.catalog import LAYOUTS, TEMPLATES, Color, Layout, Variant
from create_loom.scaffolder.generator import (
    MANIFEST,
    RENAME_FILES,
    ProjectGenerator,
    next_steps,
)

__all__ = [
    "LAYOUTS",
    "MANIFEST",
    "RENAME_FILES",
    "TEMPLATES",
    "Color",
    "Layout",
    "ProjectGenerator",
    "Variant",
    "next_steps",
]
