"""Clone a template, strip its history and initialize a fresh repository."""

from __future__ import annotations

import logging
import time
from collections.abc import Callable
from dataclasses import dataclass
from enum import Enum
from pathlib import Path

from template_cli.catalog import TemplateEntry
from template_cli.core.config import Settings
from template_cli.core.destination import CurrentDirectory, ResolvedDestination
from template_cli.core.vcs import FileSystem, LocalFileSystem, VersionControl
from template_cli.errors import (
    CloneError,
    MaterializeError,
    MoveError,
    ReinitError,
    StripError,
    TemplateCliError,
    VersionControlError,
)

logger = logging.getLogger(__name__)


class MaterializeState(str, Enum):
    """Stages a single materialization goes through."""

    IDLE = "idle"
    CLONING = "cloning"
    POST_PROCESSING = "post-processing"
    HISTORY_STRIPPED = "history-stripped"
    REINITIALIZED = "reinitialized"
    DONE = "done"
    FAILED = "failed"


_TRANSITIONS: dict[MaterializeState, frozenset[MaterializeState]] = {
    MaterializeState.IDLE: frozenset({MaterializeState.CLONING}),
    MaterializeState.CLONING: frozenset(
        {
            MaterializeState.POST_PROCESSING,
            MaterializeState.HISTORY_STRIPPED,
            MaterializeState.FAILED,
        }
    ),
    MaterializeState.POST_PROCESSING: frozenset(
        {MaterializeState.HISTORY_STRIPPED, MaterializeState.FAILED}
    ),
    # DONE straight from HISTORY_STRIPPED means the reinit failed
    MaterializeState.HISTORY_STRIPPED: frozenset(
        {MaterializeState.REINITIALIZED, MaterializeState.DONE}
    ),
    MaterializeState.REINITIALIZED: frozenset({MaterializeState.DONE}),
    MaterializeState.DONE: frozenset(),
    MaterializeState.FAILED: frozenset(),
}


class OutcomeStatus(str, Enum):
    CREATED = "created"
    CREATED_WITHOUT_REPOSITORY = "created-without-repository"
    CANCELLED = "cancelled"
    FAILED = "failed"


@dataclass(frozen=True, kw_only=True)
class Outcome:
    """
    Result of one ``create`` run.

    Attributes:
        status: What happened.
        destination: Where the project was (or would have been) created.
        path: Absolute path of the project root, when known.
        error: The failure behind ``FAILED`` and ``CREATED_WITHOUT_REPOSITORY``.
    """

    status: OutcomeStatus
    destination: ResolvedDestination | None = None
    path: Path | None = None
    error: TemplateCliError | None = None

    @property
    def ok(self) -> bool:
        return self.status in (OutcomeStatus.CREATED, OutcomeStatus.CREATED_WITHOUT_REPOSITORY)

    @property
    def is_current_directory(self) -> bool:
        return isinstance(self.destination, CurrentDirectory)

    @classmethod
    def cancelled(cls, destination: ResolvedDestination | None = None) -> Outcome:
        return cls(status=OutcomeStatus.CANCELLED, destination=destination)


class ProjectMaterializer:
    """
    Single-use state machine turning a template into a project on disk.

    ``IDLE -> CLONING -> [POST_PROCESSING] -> HISTORY_STRIPPED -> REINITIALIZED -> DONE``,
    with ``FAILED`` reachable from ``CLONING`` and ``POST_PROCESSING``.
    A named directory left behind by a failed clone is not removed; the
    temporary directory used for the current directory always is.
    """

    def __init__(
        self,
        vcs: VersionControl,
        fs: FileSystem | None = None,
        *,
        settings: Settings | None = None,
        clock: Callable[[], int] = time.time_ns,
    ) -> None:
        self.vcs = vcs
        self.fs = fs or LocalFileSystem()
        self.settings = settings or Settings()
        self._clock = clock
        self.state = MaterializeState.IDLE
        self.history: list[MaterializeState] = [MaterializeState.IDLE]

    def _advance(self, state: MaterializeState) -> None:
        if state not in _TRANSITIONS[self.state]:
            raise RuntimeError(f"Illegal transition {self.state.value} -> {state.value}.")
        logger.debug("materializer: %s -> %s", self.state.value, state.value)
        self.state = state
        self.history.append(state)

    def materialize(
        self,
        entry: TemplateEntry,
        destination: ResolvedDestination,
        root: Path | None = None,
    ) -> Outcome:
        """Run every step for ``entry`` into ``destination`` and report the outcome."""
        if self.state is not MaterializeState.IDLE:
            raise RuntimeError("A ProjectMaterializer can only be used once.")

        base = Path.cwd() if root is None else root
        target = destination.path(base)

        try:
            self._advance(MaterializeState.CLONING)
            if isinstance(destination, CurrentDirectory):
                self._clone_via_temp_dir(entry, base)
            else:
                self._clone(entry, target)
            self._strip_history(target)
        except MaterializeError as exc:
            self._advance(MaterializeState.FAILED)
            logger.debug("materialization failed during %s: %s", exc.stage.value, exc)
            return Outcome(
                status=OutcomeStatus.FAILED, destination=destination, path=target, error=exc
            )

        try:
            self._reinit(target)
        except ReinitError as exc:
            self._advance(MaterializeState.DONE)
            return Outcome(
                status=OutcomeStatus.CREATED_WITHOUT_REPOSITORY,
                destination=destination,
                path=target,
                error=exc,
            )

        self._advance(MaterializeState.DONE)
        return Outcome(status=OutcomeStatus.CREATED, destination=destination, path=target)

    # ------------------------------------------------------------------
    # Steps
    # ------------------------------------------------------------------

    def _clone(self, entry: TemplateEntry, path: Path) -> None:
        try:
            self.vcs.clone(entry.repo, path)
        except VersionControlError as exc:
            raise CloneError(
                f"Could not clone {entry.repo} into {path}",
                stage=self.state,
                path=str(path),
            ) from exc

    def _clone_via_temp_dir(self, entry: TemplateEntry, root: Path) -> None:
        temp_dir = self._temp_dir(root)
        try:
            self._clone(entry, temp_dir)
        except CloneError as exc:
            self._discard(temp_dir, exc)
            raise

        self._advance(MaterializeState.POST_PROCESSING)
        try:
            self._move_entries(temp_dir, root)
        except MoveError as exc:
            self._discard(temp_dir, exc)
            raise

    def _move_entries(self, source: Path, root: Path) -> None:
        try:
            names = self.fs.list_names(source)
        except OSError as exc:
            raise MoveError(
                f"Could not list {source}: {exc}", stage=self.state, path=str(source)
            ) from exc

        for name in names:
            try:
                self.fs.move(source / name, root / name)
            except OSError as exc:
                raise MoveError(
                    f"Could not move {name} into {root}: {exc}",
                    stage=self.state,
                    path=str(source / name),
                ) from exc

        try:
            self.fs.remove_tree(source)
        except OSError as exc:
            raise MoveError(
                f"Could not remove temporary directory {source}: {exc}",
                stage=self.state,
                path=str(source),
            ) from exc

    def _strip_history(self, target: Path) -> None:
        metadata = target / self.settings.metadata_dir
        if self.fs.exists(metadata):
            logger.debug("removing %s", metadata)
            try:
                self.fs.remove_tree(metadata)
            except OSError as exc:
                raise StripError(
                    f"Could not remove {metadata}: {exc}", stage=self.state, path=str(metadata)
                ) from exc
        self._advance(MaterializeState.HISTORY_STRIPPED)

    def _reinit(self, target: Path) -> None:
        try:
            self.vcs.init(target)
        except VersionControlError as exc:
            raise ReinitError(
                f"Could not initialize a repository in {target}",
                stage=self.state,
                path=str(target),
            ) from exc
        self._advance(MaterializeState.REINITIALIZED)

    # ------------------------------------------------------------------
    # Temporary directory
    # ------------------------------------------------------------------

    def _temp_dir(self, root: Path) -> Path:
        base = f"{self.settings.temp_prefix}{self._clock()}"
        candidate = root / base
        suffix = 0
        while self.fs.exists(candidate):
            suffix += 1
            candidate = root / f"{base}-{suffix}"
        return candidate

    def _discard(self, temp_dir: Path, error: MaterializeError) -> None:
        if not self.fs.exists(temp_dir):
            return
        try:
            self.fs.remove_tree(temp_dir)
        except OSError as exc:
            logger.warning("could not remove temporary directory %s: %s", temp_dir, exc)
            error.add_note(f"Temporary directory {temp_dir} was left behind: {exc}")
