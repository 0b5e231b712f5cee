"""Project materialisation.

Takes a :class:`~create_loom.workflow.ResolvedTarget` and writes the chosen
template to disk: every file of ``packages/template-<id>/`` is copied as is
(reserved names are renamed on the way) and ``package.json`` is rewritten with
the project's package name.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import TYPE_CHECKING

from create_loom.config import Config
from create_loom.utils import copy, empty_dir, ensure_dir, load_json, write_json

if TYPE_CHECKING:
    from create_loom.workflow import ResolvedTarget

# ---------------------------------------------------------------------------
# Template conventions
# ---------------------------------------------------------------------------

MANIFEST = "package.json"

# Files that cannot ship under their real name (npm drops ``.gitignore`` from
# published tarballs).  Only the destination name changes.
RENAME_FILES: dict[str, str] = {
    "_gitignore": ".gitignore",
}


# ---------------------------------------------------------------------------
# Main generator
# ---------------------------------------------------------------------------


class ProjectGenerator:
    """Copies a template into the target root and rewrites its manifest."""

    def __init__(self, config: Config | None = None) -> None:
        self.config = config or Config()

    # -- Public API --------------------------------------------------------

    def generate(self, target: ResolvedTarget) -> Path:
        """Materialise *target* on disk.

        The root is emptied first when the user agreed to overwrite it (its
        ``.git`` directory survives), or created when missing.

        Returns:
            Path to the generated project root.

        Raises:
            FileNotFoundError: If the template directory does not exist.
            json.JSONDecodeError: If the template manifest is malformed.
        """
        root = target.root
        if target.overwrite:
            empty_dir(root)
        elif not root.exists():
            ensure_dir(root)

        template_dir = self.config.template_dir(target.template)
        if not template_dir.is_dir():
            raise FileNotFoundError(f"Template directory not found: {template_dir}")

        for entry in sorted(template_dir.iterdir()):
            if entry.name == MANIFEST:
                continue
            copy(entry, root / RENAME_FILES.get(entry.name, entry.name))

        self._write_manifest(template_dir / MANIFEST, root / MANIFEST, target.package_name)
        return root

    # -- Manifest ----------------------------------------------------------

    def _write_manifest(self, source: Path, destination: Path, package_name: str) -> None:
        manifest = load_json(source)
        manifest["name"] = package_name
        write_json(manifest, destination)


# ---------------------------------------------------------------------------
# Follow-up instructions
# ---------------------------------------------------------------------------


def next_steps(root: str | Path, cwd: str | Path, package_manager: str) -> list[str]:
    """Commands the user should run after scaffolding, one per line.

    Examples::

        next_steps("/work/demo", "/work", "npm")
            -> ["cd demo", "npm install", "npm run dev"]
    """
    root_path = os.path.abspath(root)
    cwd_path = os.path.abspath(cwd)

    lines: list[str] = []
    if root_path != cwd_path:
        relative = os.path.relpath(root_path, cwd_path)
        lines.append(f'cd "{relative}"' if " " in relative else f"cd {relative}")

    if package_manager == "yarn":
        lines.extend(["yarn", "yarn dev"])
    else:
        lines.extend([f"{package_manager} install", f"{package_manager} run dev"])
    return lines
