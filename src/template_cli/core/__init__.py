"""Destination resolution and project materialization."""

from template_cli.core.config import Settings
from template_cli.core.destination import (
    CurrentDirectory,
    NamedDirectory,
    ResolvedDestination,
    passes_safety_gate,
    resolve_destination,
    visible_entries,
)
from template_cli.core.materializer import (
    MaterializeState,
    Outcome,
    OutcomeStatus,
    ProjectMaterializer,
)
from template_cli.core.vcs import FileSystem, GitClient, LocalFileSystem, VersionControl
from template_cli.core.workflow import ProjectRequest, create_project
from template_cli.errors import (
    CloneError,
    DestinationError,
    EmptyNameError,
    InvalidCharacterError,
    MaterializeError,
    MoveError,
    PathExistsError,
    ReinitError,
    StripError,
    TemplateCliError,
    UnknownTemplateError,
    VersionControlError,
)

__all__ = [
    "CloneError",
    "CurrentDirectory",
    "DestinationError",
    "EmptyNameError",
    "FileSystem",
    "GitClient",
    "InvalidCharacterError",
    "LocalFileSystem",
    "MaterializeError",
    "MaterializeState",
    "MoveError",
    "NamedDirectory",
    "Outcome",
    "OutcomeStatus",
    "PathExistsError",
    "ProjectMaterializer",
    "ProjectRequest",
    "ReinitError",
    "ResolvedDestination",
    "Settings",
    "StripError",
    "TemplateCliError",
    "UnknownTemplateError",
    "VersionControl",
    "VersionControlError",
    "create_project",
    "passes_safety_gate",
    "resolve_destination",
    "visible_entries",
]
