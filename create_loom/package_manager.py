"""Package manager detection from the ``npm_config_user_agent`` signature.

npm, yarn, pnpm and bun all export a user agent of the form
``<name>/<version> <runtime>/<version> ...`` to the scripts they launch.  The
detected name only changes the follow-up commands printed after scaffolding.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict

USER_AGENT_ENV = "npm_config_user_agent"

DEFAULT_PACKAGE_MANAGER = "npm"


class PackageInfo(BaseModel):
    """Name and version of the package manager that launched the tool."""

    model_config = ConfigDict(frozen=True)

    name: str
    version: str | None = None


def pkg_from_user_agent(user_agent: str | None) -> PackageInfo | None:
    """Parse a user agent string into a ``PackageInfo``.

    Examples::

        pkg_from_user_agent("pnpm/8.6.0 npm/? node/v18.16.0 linux x64")
            -> PackageInfo(name="pnpm", version="8.6.0")
        pkg_from_user_agent("") -> None
    """
    if not user_agent:
        return None

    pkg_spec = user_agent.split(" ")[0]
    parts = pkg_spec.split("/")
    version = parts[1] if len(parts) > 1 else None
    return PackageInfo(name=parts[0], version=version)


def detect_package_manager(
    user_agent: str | None,
    default: str = DEFAULT_PACKAGE_MANAGER,
) -> str:
    """Return the package manager name, falling back to *default*."""
    info = pkg_from_user_agent(user_agent)
    if info is None or not info.name:
        return default
    return info.name
