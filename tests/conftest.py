"""Shared fixtures for the template-cli test suite."""

from __future__ import annotations

from pathlib import Path

import pytest

from template_cli.catalog import TemplateEntry
from template_cli.errors import VersionControlError


class FakeVersionControl:
    """
    In-process stand-in for git.

    ``clone`` writes ``files`` (relative path -> content) into the destination,
    plus a ``.git`` directory unless ``with_metadata`` is False.
    """

    def __init__(
        self,
        files: dict[str, str] | None = None,
        *,
        with_metadata: bool = True,
        fail_clone: bool = False,
        fail_init: bool = False,
        partial_clone: bool = False,
    ) -> None:
        self.files = {"README.md": "# template\n", "src/index.js": "console.log(1)\n"}
        if files is not None:
            self.files = files
        self.with_metadata = with_metadata
        self.fail_clone = fail_clone
        self.fail_init = fail_init
        self.partial_clone = partial_clone
        self.calls: list[tuple[str, ...]] = []

    def clone(self, repo: str, destination: Path) -> None:
        self.calls.append(("clone", repo, str(destination)))
        if self.fail_clone:
            if self.partial_clone:
                destination.mkdir(parents=True)
                (destination / "partial.txt").write_text("half")
            raise VersionControlError(["git", "clone", repo, str(destination)], 128)

        destination.mkdir(parents=True)
        for name, content in self.files.items():
            path = destination / name
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_text(content)
        if self.with_metadata:
            (destination / ".git" / "objects").mkdir(parents=True)
            (destination / ".git" / "HEAD").write_text("ref: refs/heads/main\n")

    def init(self, destination: Path) -> None:
        self.calls.append(("init", str(destination)))
        if self.fail_init:
            raise VersionControlError(["git", "init"], 1)
        (destination / ".git").mkdir()
        (destination / ".git" / "fresh").write_text("")

    @property
    def operations(self) -> list[str]:
        return [call[0] for call in self.calls]


@pytest.fixture
def entry() -> TemplateEntry:
    return TemplateEntry(
        key="demo",
        name="Demo Template",
        repo="https://example.com/demo-template.git",
    )


@pytest.fixture
def fake_vcs() -> FakeVersionControl:
    return FakeVersionControl()


@pytest.fixture
def workdir(tmp_path: Path) -> Path:
    root = tmp_path / "work"
    root.mkdir()
    return root


@pytest.fixture
def make_vcs() -> type[FakeVersionControl]:
    return FakeVersionControl
