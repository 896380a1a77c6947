"""Version-control and filesystem collaborators used by the materializer."""

from __future__ import annotations

import logging
import os
import shutil
import subprocess
from pathlib import Path
from typing import Protocol

from template_cli.errors import VersionControlError

logger = logging.getLogger(__name__)


class VersionControl(Protocol):
    """Clones template repositories and initializes fresh ones."""

    def clone(self, repo: str, destination: Path) -> None: ...

    def init(self, destination: Path) -> None: ...


class FileSystem(Protocol):
    """The handful of filesystem operations the materializer performs."""

    def exists(self, path: Path) -> bool: ...

    def list_names(self, path: Path) -> list[str]: ...

    def move(self, source: Path, target: Path) -> None: ...

    def remove_tree(self, path: Path) -> None: ...


class GitClient:
    """Runs the ``git`` executable. Output goes straight to the terminal."""

    def __init__(self, executable: str = "git", clone_depth: int | None = None) -> None:
        self.executable = executable
        self.clone_depth = clone_depth

    def clone(self, repo: str, destination: Path) -> None:
        cmd = [self.executable, "clone"]
        if self.clone_depth is not None:
            cmd += ["--depth", str(self.clone_depth)]
        cmd += [repo, str(destination)]
        self._run(cmd)

    def init(self, destination: Path) -> None:
        self._run([self.executable, "init"], cwd=destination)

    def _run(self, cmd: list[str], cwd: Path | None = None) -> None:
        logger.debug("running %s (cwd=%s)", " ".join(cmd), cwd)
        try:
            subprocess.run(cmd, cwd=cwd, check=True)
        except subprocess.CalledProcessError as exc:
            raise VersionControlError(cmd, exc.returncode) from exc
        except OSError as exc:
            raise VersionControlError(cmd, None, str(exc)) from exc


class LocalFileSystem:
    """``FileSystem`` backed by the real disk."""

    def exists(self, path: Path) -> bool:
        return os.path.lexists(path)

    def list_names(self, path: Path) -> list[str]:
        return sorted(os.listdir(path))

    def move(self, source: Path, target: Path) -> None:
        """Move ``source`` to ``target``, replacing whatever ``target`` holds."""
        if os.path.lexists(target):
            self.remove_tree(target)
        shutil.move(source, target)

    def remove_tree(self, path: Path) -> None:
        if path.is_dir() and not path.is_symlink():
            shutil.rmtree(path)
        else:
            path.unlink()
