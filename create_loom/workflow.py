"""Interactive question flow that decides what to scaffold and where.

The flow is an ordered tuple of *steps*.  Each step is a plain function that
looks at the :class:`WorkflowState` accumulated so far and returns either the
:class:`Question` to ask next or ``None`` to skip.  :class:`Workflow` walks the
steps, awaits the prompter for every question that is asked, records the
answer and finally resolves everything into a :class:`ResolvedTarget`.

Nothing here touches the file system beyond reading it, so a cancelled flow
leaves the disk exactly as it was.
"""

from __future__ import annotations

import os
from collections.abc import Callable, Sequence
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Literal, Protocol

from pydantic import BaseModel, ConfigDict
from rich.console import Console
from rich.markup import escape
from rich.prompt import Confirm, IntPrompt, Prompt

from create_loom.config import DEFAULT_TARGET_DIR
from create_loom.scaffolder.catalog import LAYOUTS, Layout, template_ids
from create_loom.utils import (
    console,
    format_target_dir,
    get_project_name,
    is_empty_dir,
    is_valid_package_name,
    print_warning,
    to_valid_package_name,
)

CANCELLED_MESSAGE = "✖ Operation cancelled!"

INVALID_PACKAGE_NAME = "Invalid package.json name"

# ---------------------------------------------------------------------------
# Exceptions
# ---------------------------------------------------------------------------


class OperationCancelled(Exception):
    """Raised when the user aborts the flow or declines to overwrite."""

    def __init__(self, message: str = CANCELLED_MESSAGE) -> None:
        super().__init__(message)


# ---------------------------------------------------------------------------
# Questions and answers
# ---------------------------------------------------------------------------

QuestionKind = Literal["text", "confirm", "select"]


@dataclass(frozen=True)
class Choice:
    """One entry of a ``select`` question."""

    title: str
    value: Any


@dataclass(frozen=True)
class Question:
    """A single prompt, described independently of how it is rendered.

    ``validate`` returns an error message for a rejected answer and ``None``
    for an accepted one.
    """

    name: str
    kind: QuestionKind
    message: str
    default: str | bool | None = None
    choices: tuple[Choice, ...] = ()
    validate: Callable[[Any], str | None] | None = None


@dataclass
class WorkflowAnswers:
    """Answers collected so far.  ``None`` means "not asked"."""

    project_name: str | None = None
    overwrite: bool | None = None
    package_name: str | None = None
    layout: Layout | None = None
    variant: str | None = None


class ResolvedTarget(BaseModel):
    """Everything the generator needs once all questions are answered."""

    model_config = ConfigDict(frozen=True)

    root: Path
    target_dir: str
    template: str
    package_name: str
    overwrite: bool = False


@dataclass
class WorkflowState:
    """Accumulator threaded through the steps."""

    cwd: Path
    target_dir: str
    arg_target_dir: str | None = None
    arg_template: str | None = None
    default_target_dir: str = DEFAULT_TARGET_DIR
    layouts: tuple[Layout, ...] = LAYOUTS
    answers: WorkflowAnswers = field(default_factory=WorkflowAnswers)

    @property
    def templates(self) -> tuple[str, ...]:
        return template_ids(self.layouts)

    @property
    def target_path(self) -> Path:
        return self.cwd / self.target_dir

    @property
    def project_name(self) -> str:
        return get_project_name(self.target_dir, self.cwd)

    def record(self, name: str, value: Any) -> None:
        """Store the answer to question *name*."""
        if name == "project_name":
            self.target_dir = format_target_dir(value) or self.default_target_dir
        setattr(self.answers, name, value)

    def resolve(self) -> ResolvedTarget:
        """Combine the CLI arguments and the answers into a ``ResolvedTarget``.

        Raises:
            ValueError: If the resulting template is not in the catalogue.
        """
        answers = self.answers
        if answers.variant:
            template = answers.variant
        elif answers.layout is not None:
            template = answers.layout.template_ids()[0]
        else:
            template = self.arg_template or ""

        if template not in self.templates:
            raise ValueError(f"Unknown template: {template!r}")

        return ResolvedTarget(
            root=Path(os.path.abspath(os.path.join(self.cwd, self.target_dir))),
            target_dir=self.target_dir,
            template=template,
            package_name=answers.package_name or self.project_name,
            overwrite=bool(answers.overwrite),
        )


# ---------------------------------------------------------------------------
# Steps
# ---------------------------------------------------------------------------

Step = Callable[[WorkflowState], "Question | None"]


def ask_project_name(state: WorkflowState) -> Question | None:
    if state.arg_target_dir:
        return None
    return Question(
        name="project_name",
        kind="text",
        message="Project name:",
        default=state.default_target_dir,
    )


def ask_overwrite(state: WorkflowState) -> Question | None:
    target = state.target_path
    if not target.exists() or is_empty_dir(target):
        return None

    if state.target_dir == ".":
        subject = "Current directory"
    else:
        subject = f'Target directory "{escape(state.target_dir)}"'
    return Question(
        name="overwrite",
        kind="confirm",
        message=f"{subject} is not empty. Remove existing files and continue?",
        default=False,
    )


def check_overwrite(state: WorkflowState) -> Question | None:
    # Not a question: stops the flow once the user declined to overwrite.
    if state.answers.overwrite is False:
        raise OperationCancelled()
    return None


def _validate_package_name(value: Any) -> str | None:
    if isinstance(value, str) and is_valid_package_name(value):
        return None
    return INVALID_PACKAGE_NAME


def ask_package_name(state: WorkflowState) -> Question | None:
    project_name = state.project_name
    if is_valid_package_name(project_name):
        return None
    return Question(
        name="package_name",
        kind="text",
        message="Package name:",
        default=to_valid_package_name(project_name),
        validate=_validate_package_name,
    )


def ask_layout(state: WorkflowState) -> Question | None:
    template = state.arg_template
    if template and template in state.templates:
        return None

    if template is not None:
        message = f'"{escape(template)}" isn\'t a valid template. Please choose from below: '
    else:
        message = "Select a framework: "
    return Question(
        name="layout",
        kind="select",
        message=message,
        choices=tuple(Choice(title=layout.title, value=layout) for layout in state.layouts),
    )


def ask_variant(state: WorkflowState) -> Question | None:
    layout = state.answers.layout
    if layout is None or len(layout.variants) < 2:
        return None
    return Question(
        name="variant",
        kind="select",
        message="Select a variant: ",
        choices=tuple(Choice(title=variant.title, value=variant.name) for variant in layout.variants),
    )


STEPS: tuple[Step, ...] = (
    ask_project_name,
    ask_overwrite,
    check_overwrite,
    ask_package_name,
    ask_layout,
    ask_variant,
)


# ---------------------------------------------------------------------------
# Prompting
# ---------------------------------------------------------------------------


class Prompter(Protocol):
    """Asks one question and returns the typed answer.

    ``text`` questions answer with a ``str``, ``confirm`` with a ``bool`` and
    ``select`` with the ``value`` of the picked :class:`Choice`.  Aborting
    raises ``KeyboardInterrupt`` or ``EOFError``.
    """

    async def ask(self, question: Question) -> Any: ...


class RichPrompter:
    """Terminal prompter built on ``rich.prompt``."""

    def __init__(self, prompt_console: Console | None = None) -> None:
        self.console = prompt_console if prompt_console is not None else console

    async def ask(self, question: Question) -> Any:
        if question.kind == "confirm":
            return Confirm.ask(
                question.message,
                default=bool(question.default),
                console=self.console,
            )
        if question.kind == "select":
            return self._select(question)

        if question.default is None:
            return Prompt.ask(question.message, console=self.console)
        return Prompt.ask(question.message, default=str(question.default), console=self.console)

    def _select(self, question: Question) -> Any:
        self.console.print(question.message)
        for index, choice in enumerate(question.choices, start=1):
            self.console.print(f"  {index}. {choice.title}")
        picked = IntPrompt.ask(
            "Choice",
            choices=[str(index) for index in range(1, len(question.choices) + 1)],
            default=1,
            console=self.console,
        )
        return question.choices[picked - 1].value


# ---------------------------------------------------------------------------
# Driver
# ---------------------------------------------------------------------------


class Workflow:
    """Runs the question steps in order against a prompter.

    Attributes:
        prompter: Source of answers.
        state: Accumulated CLI arguments and answers.
        steps: Step functions, evaluated in order.
    """

    def __init__(
        self,
        prompter: Prompter,
        *,
        cwd: str | Path,
        target_dir: str | None = None,
        template: str | None = None,
        default_target_dir: str = DEFAULT_TARGET_DIR,
        layouts: Sequence[Layout] = LAYOUTS,
        steps: Sequence[Step] = STEPS,
    ) -> None:
        self.prompter = prompter
        arg_target_dir = format_target_dir(target_dir)
        self.state = WorkflowState(
            cwd=Path(cwd),
            target_dir=arg_target_dir or default_target_dir,
            arg_target_dir=arg_target_dir,
            arg_template=template,
            default_target_dir=default_target_dir,
            layouts=tuple(layouts),
        )
        self.steps = tuple(steps)

    async def run(self) -> ResolvedTarget:
        """Ask every question that applies and resolve the answers.

        Raises:
            OperationCancelled: If the user aborts a prompt or declines to
                overwrite a non-empty target directory.
        """
        try:
            for step in self.steps:
                question = step(self.state)
                if question is None:
                    continue
                self.state.record(question.name, await self._ask(question))
        except (KeyboardInterrupt, EOFError) as exc:
            raise OperationCancelled() from exc

        return self.state.resolve()

    async def _ask(self, question: Question) -> Any:
        while True:
            answer = await self.prompter.ask(question)
            if question.validate is None:
                return answer
            error = question.validate(answer)
            if error is None:
                return answer
            print_warning(error)
