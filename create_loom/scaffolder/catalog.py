"""Catalogue of the project templates create-loom can scaffold.

Templates are grouped by *layout* (the markup approach) and, inside a layout,
by *variant* (the stylesheet flavour).  The identifiers of the variants are the
template ids: each one names a ``template-<id>`` directory on disk.
"""

from __future__ import annotations

from collections.abc import Sequence
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class Color(str, Enum):
    """Display colours, valid as Rich style names."""

    RED = "red"
    GREEN = "green"
    MAGENTA = "magenta"
    CYAN = "cyan"


class Variant(BaseModel):
    """A styling sub-choice inside a layout."""

    model_config = ConfigDict(frozen=True)

    name: str = Field(..., description="Template id, e.g. ``html-css``")
    display: str = Field(default="", description="Label shown in prompts")
    color: Color = Color.CYAN

    @property
    def title(self) -> str:
        """Coloured Rich markup for the prompt choice."""
        return f"[{self.color.value}]{self.display or self.name}[/{self.color.value}]"


class Layout(BaseModel):
    """A top-level template family and the variants it offers."""

    model_config = ConfigDict(frozen=True)

    name: str
    display: str = ""
    color: Color = Color.GREEN
    variants: tuple[Variant, ...] = ()

    @property
    def title(self) -> str:
        """Coloured Rich markup for the prompt choice."""
        return f"[{self.color.value}]{self.display or self.name}[/{self.color.value}]"

    def template_ids(self) -> list[str]:
        """Template ids reachable through this layout.

        A layout without variants is itself a template.
        """
        if not self.variants:
            return [self.name]
        return [variant.name for variant in self.variants]


LAYOUTS: tuple[Layout, ...] = (
    Layout(
        name="pug",
        display="Pug",
        color=Color.RED,
        variants=(
            Variant(name="pug-scss", display="Pug scss", color=Color.MAGENTA),
            Variant(name="pug-css", display="Pug CSS", color=Color.CYAN),
        ),
    ),
    Layout(
        name="html",
        display="HTML",
        color=Color.GREEN,
        variants=(
            Variant(name="html-scss", display="HTML Scss", color=Color.MAGENTA),
            Variant(name="html-css", display="HTML CSS", color=Color.CYAN),
        ),
    ),
)


def template_ids(layouts: Sequence[Layout] = LAYOUTS) -> tuple[str, ...]:
    """Flatten *layouts* into template ids, layout order then variant order."""
    return tuple(template for layout in layouts for template in layout.template_ids())


TEMPLATES: tuple[str, ...] = template_ids(LAYOUTS)
