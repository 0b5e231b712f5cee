"""Shared utility functions for create-loom.

Provides target-path and package-name helpers, the file-system primitives the
scaffolder is built on (recursive copy, emptiness checks, clearing a directory
while keeping its ``.git`` metadata), JSON I/O for package manifests and
Rich-based console output.  Everything except the output helpers is free of
printing so it can be exercised directly from tests.
"""

from __future__ import annotations

import json
import os
import re
import shutil
from pathlib import Path
from typing import Any

from rich.console import Console

console = Console()

# Directory kept intact by ``is_empty_dir`` and ``empty_dir``.
VCS_DIR = ".git"

# ---------------------------------------------------------------------------
# Target path / package name helpers
# ---------------------------------------------------------------------------

_TRAILING_SEPARATORS = re.compile(r"[\s/]+$")

_VALID_PACKAGE_NAME = re.compile(
    r"(?:@[a-z0-9\-*~][a-z0-9\-*._~]*/)?[a-z0-9\-~][a-z0-9\-._~]*"
)


def format_target_dir(value: str | None) -> str | None:
    """Normalise a user supplied target directory.

    Surrounding whitespace and every trailing ``/`` are removed.  ``None`` and
    the empty string are returned unchanged.

    Examples::

        format_target_dir("  my-app/ ")  -> "my-app"
        format_target_dir("foo///")      -> "foo"
        format_target_dir("./")          -> "."
    """
    if not value:
        return value
    return _TRAILING_SEPARATORS.sub("", value.strip())


def is_valid_package_name(name: str) -> bool:
    """Return ``True`` if *name* is usable as a ``package.json`` name.

    An optional ``@scope/`` prefix is followed by the package segment.  Both
    are lowercase and limited to letters, digits, ``-``, ``.``, ``_`` and
    ``~``; the first character may not be ``.`` or ``_``.
    """
    return _VALID_PACKAGE_NAME.fullmatch(name) is not None


def to_valid_package_name(name: str) -> str:
    """Best-effort conversion of an arbitrary string to a package name.

    Examples::

        to_valid_package_name("My Cool App!!") -> "my-cool-app-"
        to_valid_package_name(".hidden")       -> "hidden"
    """
    result = name.strip().lower()
    result = re.sub(r"\s+", "-", result)
    result = re.sub(r"^[._]", "", result)
    return re.sub(r"[^a-z0-9\-~]+", "-", result)


def get_project_name(target_dir: str, cwd: str | Path) -> str:
    """Return the name a project in *target_dir* should carry.

    ``"."`` stands for the invocation directory, whose basename is used.
    """
    if target_dir == ".":
        return Path(os.path.abspath(cwd)).name
    return target_dir


# ---------------------------------------------------------------------------
# File-system helpers
# ---------------------------------------------------------------------------


def ensure_dir(path: str | Path) -> Path:
    """Create a directory (and parents) if it does not exist.

    Args:
        path: Directory path.

    Returns:
        The resolved ``Path`` object.
    """
    dir_path = Path(path)
    dir_path.mkdir(parents=True, exist_ok=True)
    return dir_path.resolve()


def copy(src: str | Path, dest: str | Path) -> None:
    """Copy a file or a whole directory tree from *src* to *dest*.

    Files are copied byte for byte.  Directories are recreated at *dest* with
    the same relative structure.

    Raises:
        FileNotFoundError: If *src* does not exist.
        OSError: If *dest* cannot be written.
    """
    src_path = Path(src)
    if src_path.is_dir():
        copy_dir(src_path, dest)
    else:
        shutil.copyfile(src_path, dest)


def copy_dir(src_dir: str | Path, dest_dir: str | Path) -> None:
    """Recursively copy the contents of *src_dir* into *dest_dir*."""
    dest_path = ensure_dir(dest_dir)
    for entry in sorted(Path(src_dir).iterdir()):
        copy(entry, dest_path / entry.name)


def is_empty_dir(path: str | Path) -> bool:
    """Return ``True`` if *path* holds nothing but (at most) a ``.git`` directory.

    *path* must be an existing directory.
    """
    entries = os.listdir(path)
    return len(entries) == 0 or entries == [VCS_DIR]


def empty_dir(path: str | Path) -> None:
    """Remove everything inside *path* except the ``.git`` directory.

    Does nothing when *path* does not exist.  Entries removed by someone else
    while this runs are skipped.
    """
    dir_path = Path(path)
    if not dir_path.exists():
        return

    for entry in list(dir_path.iterdir()):
        if entry.name == VCS_DIR:
            continue
        if entry.is_dir() and not entry.is_symlink():
            try:
                shutil.rmtree(entry)
            except FileNotFoundError:
                continue
        else:
            entry.unlink(missing_ok=True)


# ---------------------------------------------------------------------------
# JSON I/O
# ---------------------------------------------------------------------------


def load_json(path: str | Path) -> dict[str, Any]:
    """Load and parse a JSON file that holds a top-level object.

    Args:
        path: Path to the JSON file.

    Returns:
        Parsed dictionary, keys in file order.

    Raises:
        FileNotFoundError: If the file does not exist.
        json.JSONDecodeError: If the file is not valid JSON.
        ValueError: If the document is not a JSON object.
    """
    file_path = Path(path)
    raw = file_path.read_text(encoding="utf-8")
    data = json.loads(raw)
    if not isinstance(data, dict):
        raise ValueError(f"{file_path} must contain a JSON object")
    return data


def write_json(data: dict[str, Any], path: str | Path) -> Path:
    """Write *data* as 2-space indented JSON with a trailing newline."""
    file_path = Path(path)
    content = json.dumps(data, indent=2, ensure_ascii=False) + "\n"
    file_path.write_text(content, encoding="utf-8")
    return file_path


# ---------------------------------------------------------------------------
# Rich output helpers
# ---------------------------------------------------------------------------


def print_line(message: str = "") -> None:
    """Print *message* literally: no markup, no highlighting, no wrapping."""
    console.print(message, markup=False, highlight=False, soft_wrap=True)


def print_success(message: str) -> None:
    """Print a green success message."""
    console.print(f"[bold green]{message}[/bold green]")


def print_error(message: str) -> None:
    """Print a red error message."""
    console.print(f"[bold red]{message}[/bold red]")


def print_warning(message: str) -> None:
    """Print a yellow warning message."""
    console.print(f"[bold yellow]{message}[/bold yellow]")
