"""create-loom configuration.

Typed runtime settings for the scaffolder.  All settings use a Pydantic v2
model so they are validated at construction time and can be built from
environment variables without boiler-plate.
"""

from __future__ import annotations

import os
from pathlib import Path

from pydantic import BaseModel, Field

from create_loom.package_manager import (
    DEFAULT_PACKAGE_MANAGER,
    USER_AGENT_ENV,
    detect_package_manager,
)

# Template trees shipped next to the package: ``packages/template-<id>/``.
_DEFAULT_TEMPLATES_DIR = Path(__file__).parent / "packages"

TEMPLATES_DIR_ENV = "CREATE_LOOM_TEMPLATES_DIR"

DEFAULT_TARGET_DIR = "loom-project"


class Config(BaseModel):
    """Global create-loom configuration.

    Instances are created once by the CLI entry point and passed to the
    workflow and the generator.
    """

    default_target_dir: str = Field(
        default=DEFAULT_TARGET_DIR,
        min_length=1,
        description="Directory used when the user gives no project name",
    )
    templates_dir: Path = Field(
        default=_DEFAULT_TEMPLATES_DIR,
        description="Root holding one template-<id> directory per template",
    )
    user_agent: str | None = Field(
        default=None,
        description="Invocation signature of the calling package manager",
    )
    default_package_manager: str = Field(default=DEFAULT_PACKAGE_MANAGER, min_length=1)

    # ------------------------------------------------------------------
    # Derived values
    # ------------------------------------------------------------------

    @property
    def package_manager(self) -> str:
        """Package manager named by ``user_agent``, or the default one."""
        return detect_package_manager(self.user_agent, self.default_package_manager)

    def template_dir(self, template: str) -> Path:
        """Directory holding the files of *template*."""
        return self.templates_dir / f"template-{template}"

    @classmethod
    def from_env(cls) -> "Config":
        """Build a ``Config`` from environment variables.

        Recognised variables (all optional):
            npm_config_user_agent, CREATE_LOOM_TEMPLATES_DIR.
        """
        kwargs: dict[str, object] = {"user_agent": os.environ.get(USER_AGENT_ENV) or None}
        if os.environ.get(TEMPLATES_DIR_ENV):
            kwargs["templates_dir"] = Path(os.environ[TEMPLATES_DIR_ENV])
        return cls(**kwargs)
