"""Runtime settings for the materializer and the git client."""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass

GIT_ENV = "TEMPLATE_CLI_GIT"
CLONE_DEPTH_ENV = "TEMPLATE_CLI_CLONE_DEPTH"


def _is_plain_name(value: str) -> bool:
    """A single path component: no separators, not empty, not `.` or `..`."""
    if value in ("", ".", ".."):
        return False
    separators = {"/", os.sep} | ({os.altsep} if os.altsep else set())
    return not any(sep in value for sep in separators)


@dataclass(frozen=True, kw_only=True)
class Settings:
    """
    Settings shared by one ``create`` invocation.

    Attributes:
        git_executable: Name or path of the git binary.
        clone_depth: Optional ``--depth`` for shallow clones. ``None`` clones full history.
        metadata_dir: Version-control metadata directory stripped after cloning.
        temp_prefix: Prefix of the temporary clone directory used for the current directory.
    """

    git_executable: str = "git"
    clone_depth: int | None = None
    metadata_dir: str = ".git"
    temp_prefix: str = "temp-"

    def __post_init__(self) -> None:
        if not self.git_executable:
            raise ValueError("git_executable must not be empty.")
        if self.clone_depth is not None and self.clone_depth <= 0:
            raise ValueError(f"clone_depth must be positive, got {self.clone_depth}.")
        if not self.metadata_dir:
            raise ValueError("metadata_dir must not be empty.")
        if not _is_plain_name(self.metadata_dir):
            raise ValueError(f"metadata_dir must be a plain name, got {self.metadata_dir!r}.")
        if not _is_plain_name(self.temp_prefix):
            raise ValueError(f"temp_prefix must be a plain name, got {self.temp_prefix!r}.")

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> Settings:
        """Build settings from ``TEMPLATE_CLI_*`` environment variables."""
        env = os.environ if environ is None else environ

        depth: int | None = None
        raw_depth = env.get(CLONE_DEPTH_ENV, "").strip()
        if raw_depth:
            try:
                depth = int(raw_depth)
            except ValueError:
                raise ValueError(
                    f"{CLONE_DEPTH_ENV} must be an integer, got {raw_depth!r}."
                ) from None

        return cls(
            git_executable=env.get(GIT_ENV, "").strip() or "git",
            clone_depth=depth,
        )
