"""Shared pytest fixtures for the create-loom test suite.

Provides reusable fixtures for:
- A scratch working directory standing in for the invocation ``cwd``
- Fake ``template-<id>`` trees covering every catalogue template
- A ``Config`` pointing at those trees
- A scripted prompter that replays canned answers
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import pytest

from create_loom.config import Config
from create_loom.scaffolder.catalog import TEMPLATES
from create_loom.workflow import Question


# ---------------------------------------------------------------------------
# Scripted prompter
# ---------------------------------------------------------------------------


class ScriptedPrompter:
    """Prompter answering from a fixed script.

    Every asked question is recorded in ``questions``.  A script entry that is
    an exception (class or instance) is raised instead of returned, which is
    how tests simulate Ctrl+C / Ctrl+D.
    """

    def __init__(self, *answers: Any) -> None:
        self.answers = list(answers)
        self.questions: list[Question] = []

    async def ask(self, question: Question) -> Any:
        self.questions.append(question)
        if not self.answers:
            raise AssertionError(f"unexpected question: {question.name}")
        answer = self.answers.pop(0)
        if isinstance(answer, BaseException) or (
            isinstance(answer, type) and issubclass(answer, BaseException)
        ):
            raise answer
        return answer

    @property
    def asked(self) -> list[str]:
        return [question.name for question in self.questions]


@pytest.fixture
def scripted():
    """Factory building a ``ScriptedPrompter`` from answers."""
    return ScriptedPrompter


# ---------------------------------------------------------------------------
# Paths & Directories
# ---------------------------------------------------------------------------


@pytest.fixture
def workspace(tmp_path: Path) -> Path:
    """Directory used as the invocation ``cwd``."""
    cwd = tmp_path / "workspace"
    cwd.mkdir()
    return cwd


SAMPLE_MANIFEST: dict[str, Any] = {
    "name": "template-placeholder",
    "private": True,
    "version": "0.0.0",
    "description": "Démo – ünïcode stays as is",
    "type": "module",
    "scripts": {"dev": "vite", "build": "vite build"},
    "devDependencies": {"vite": "^5.4.0"},
}


def write_template(root: Path, template: str, manifest: dict[str, Any] | None = None) -> Path:
    """Create a small ``template-<template>`` tree under *root*."""
    template_dir = root / f"template-{template}"
    (template_dir / "src" / "styles").mkdir(parents=True)
    (template_dir / "_gitignore").write_text("node_modules\ndist\n", encoding="utf-8")
    (template_dir / "index.html").write_text(f"<h1>{template}</h1>\n", encoding="utf-8")
    (template_dir / "src" / "main.js").write_text("console.log('hi')\n", encoding="utf-8")
    (template_dir / "src" / "styles" / "main.css").write_bytes(b"body{margin:0}\r\n")
    data = dict(manifest or SAMPLE_MANIFEST)
    (template_dir / "package.json").write_text(
        json.dumps(data, indent=2, ensure_ascii=False) + "\n", encoding="utf-8"
    )
    return template_dir


@pytest.fixture
def make_template():
    """Expose ``write_template`` to tests that need custom manifests."""
    return write_template


@pytest.fixture
def template_root(tmp_path: Path) -> Path:
    """Template root with one fake tree per catalogue template."""
    root = tmp_path / "packages"
    root.mkdir()
    for template in TEMPLATES:
        write_template(root, template)
    return root


@pytest.fixture
def config(template_root: Path) -> Config:
    """Configuration pointing at the fake templates, no user agent."""
    return Config(templates_dir=template_root)
