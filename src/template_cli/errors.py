"""Exception hierarchy for destination validation and project materialization."""

from __future__ import annotations

from collections.abc import Sequence
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from template_cli.core.materializer import MaterializeState


class TemplateCliError(Exception):
    """Base class for every error raised by template-cli."""


class UnknownTemplateError(TemplateCliError, KeyError):
    """Raised when a template key is not part of the catalog."""

    def __init__(self, key: str, available: Sequence[str]) -> None:
        self.key = key
        self.available = tuple(available)
        super().__init__(key)

    def __str__(self) -> str:
        valid = ", ".join(f"'{k}'" for k in self.available)
        return f"{self.key!r} is not a valid template. Valid values: {valid}"


# ---------------------------------------------------------------------------
# Destination validation
# ---------------------------------------------------------------------------


class DestinationError(TemplateCliError, ValueError):
    """Raised when the requested project destination is not acceptable."""

    def __init__(self, message: str, value: str) -> None:
        self.value = value
        super().__init__(message)


class EmptyNameError(DestinationError):
    def __init__(self, value: str = "") -> None:
        super().__init__("Project name cannot be empty", value)


class PathExistsError(DestinationError):
    def __init__(self, value: str) -> None:
        super().__init__(f"Directory '{value}' already exists!", value)


class InvalidCharacterError(DestinationError):
    def __init__(self, value: str, invalid: str) -> None:
        self.invalid = invalid
        super().__init__(f"Project name contains invalid characters: {invalid!r}", value)


# ---------------------------------------------------------------------------
# External operations
# ---------------------------------------------------------------------------


class VersionControlError(TemplateCliError):
    """Raised by a version-control client when a command does not succeed."""

    def __init__(self, command: Sequence[str], returncode: int | None, reason: str = "") -> None:
        self.command = tuple(command)
        self.returncode = returncode
        self.reason = reason
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        cmd = " ".join(self.command)
        if self.returncode is None:
            return f"`{cmd}` could not be run: {self.reason}"
        return f"`{cmd}` exited with status {self.returncode}"


class MaterializeError(TemplateCliError):
    """
    Raised when one step of project materialization fails.

    Attributes:
        stage: State the materializer was in when the step failed.
        path: Filesystem path the failing step operated on.
    """

    step = "materialize"

    def __init__(self, message: str, *, stage: MaterializeState, path: str) -> None:
        self.stage = stage
        self.path = path
        super().__init__(message)


class CloneError(MaterializeError):
    step = "clone"


class MoveError(MaterializeError):
    step = "move"


class StripError(MaterializeError):
    step = "strip history"


class ReinitError(MaterializeError):
    step = "reinitialize"
