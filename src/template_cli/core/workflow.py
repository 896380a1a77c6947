"""The ``create`` flow: lookup, resolve, confirm, materialize."""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass
from pathlib import Path

from template_cli.catalog import TEMPLATES, TemplateCatalog, TemplateEntry, get_template
from template_cli.core.destination import (
    ResolvedDestination,
    passes_safety_gate,
    resolve_destination,
)
from template_cli.core.materializer import Outcome, ProjectMaterializer

logger = logging.getLogger(__name__)

ConfirmNonEmpty = Callable[[list[str]], bool]
ConfirmCreate = Callable[[TemplateEntry, ResolvedDestination], bool]


@dataclass(frozen=True)
class ProjectRequest:
    selected_key: str
    raw_destination: str


def _always(*_: object) -> bool:
    return True


def create_project(
    request: ProjectRequest,
    *,
    materializer: ProjectMaterializer,
    root: Path | None = None,
    confirm_non_empty: ConfirmNonEmpty = _always,
    confirm_create: ConfirmCreate = _always,
    catalog: TemplateCatalog = TEMPLATES,
) -> Outcome:
    """
    Create one project from ``request``.

    Validation errors (unknown template, bad destination) are raised.
    A declined confirmation returns a cancelled outcome before anything
    touches the filesystem. Everything after that is reported by the
    materializer's outcome.
    """
    base = Path.cwd() if root is None else root

    entry = get_template(request.selected_key, catalog)
    destination = resolve_destination(request.raw_destination, base)

    if not passes_safety_gate(destination, base, confirm_non_empty):
        logger.debug("safety gate declined for %s", base)
        return Outcome.cancelled(destination)

    if not confirm_create(entry, destination):
        return Outcome.cancelled(destination)

    logger.debug("creating %s from %s", destination.label, entry.repo)
    return materializer.materialize(entry, destination, base)
