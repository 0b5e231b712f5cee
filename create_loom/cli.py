"""create-loom command line entry point.

Asks the questions, scaffolds the chosen template and prints what to run next.

Usage::

    create-loom
    create-loom my-site
    create-loom my-site --template html-scss
    python -m create_loom . -t pug-css
"""

from __future__ import annotations

import argparse
import asyncio
import sys
from pathlib import Path
from typing import Sequence

from create_loom import __version__
from create_loom.config import Config
from create_loom.scaffolder.catalog import TEMPLATES
from create_loom.scaffolder.generator import ProjectGenerator, next_steps
from create_loom.utils import console, print_error, print_line, print_success
from create_loom.workflow import OperationCancelled, Prompter, RichPrompter, Workflow


async def init(
    target_dir: str | None = None,
    template: str | None = None,
    *,
    config: Config,
    prompter: Prompter,
    cwd: str | Path,
) -> Path | None:
    """Run the question flow, then scaffold the project.

    Returns:
        The project root, or ``None`` when the user cancelled.  A cancelled
        run prints a single line and leaves the file system untouched.
    """
    workflow = Workflow(
        prompter,
        cwd=cwd,
        target_dir=target_dir,
        template=template,
        default_target_dir=config.default_target_dir,
    )
    try:
        target = await workflow.run()
    except OperationCancelled as exc:
        print_error(str(exc))
        return None

    print_line(f"\nScaffolding project in {target.root}...")
    root = ProjectGenerator(config).generate(target)

    print_success("\nDone. Now run:\n")
    for line in next_steps(root, cwd, config.package_manager):
        print_line(f"  {line}")

    return root


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="create-loom",
        description="Scaffold a new Loom project from a template",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=(
            "Templates:\n"
            + "".join(f"  {template}\n" for template in TEMPLATES)
            + "\nExamples:\n"
            "  create-loom my-site\n"
            "  create-loom my-site --template html-scss\n"
        ),
    )
    parser.add_argument(
        "target_dir",
        nargs="?",
        default=None,
        help="Directory to create the project in (asked for when omitted)",
    )
    parser.add_argument(
        "--template", "-t",
        default=None,
        help="Template to use; an unknown value falls back to the interactive choice",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def main(argv: Sequence[str] | None = None) -> None:
    """CLI entry point for ``create-loom`` and ``python -m create_loom``."""
    args = build_parser().parse_args(argv)

    # Not asyncio.run(): it replaces the SIGINT handler, and the prompts block
    # in input(), so Ctrl+C has to arrive there as KeyboardInterrupt.
    loop = asyncio.new_event_loop()
    try:
        config = Config.from_env()
        loop.run_until_complete(
            init(
                args.target_dir,
                args.template,
                config=config,
                prompter=RichPrompter(),
                cwd=Path.cwd(),
            )
        )
    except Exception:
        console.print_exception()
        sys.exit(1)
    finally:
        loop.close()


if __name__ == "__main__":
    main()
