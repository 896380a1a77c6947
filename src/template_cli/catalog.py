"""Built-in catalog of project templates."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from types import MappingProxyType

from template_cli.errors import UnknownTemplateError


@dataclass(frozen=True, kw_only=True)
class TemplateEntry:
    """
    A remote repository that can seed a new project.

    Attributes:
        key: Short identifier used on the command line.
        name: Human readable label shown in menus.
        repo: Location passed to the version-control client's clone.
    """

    key: str
    name: str
    repo: str


TemplateCatalog = Mapping[str, TemplateEntry]


def _catalog(*entries: TemplateEntry) -> TemplateCatalog:
    table: dict[str, TemplateEntry] = {}
    for entry in entries:
        if entry.key in table:
            raise ValueError(f"Duplicate template key {entry.key!r}.")
        table[entry.key] = entry
    return MappingProxyType(table)


TEMPLATES: TemplateCatalog = _catalog(
    TemplateEntry(
        key="pern-stack",
        name="PERN Stack (PostgreSQL, Express, React, Node.js)",
        repo="https://github.com/GioMjds/pern-stack-template.git",
    ),
    TemplateEntry(
        key="react-flask",
        name="React + Flask",
        repo="https://github.com/GioMjds/react-flask-template.git",
    ),
    TemplateEntry(
        key="react-tanstack-router-django",
        name="React (TanStack Router) + Django",
        repo="https://github.com/GioMjds/react-django-template.git",
    ),
    TemplateEntry(
        key="react-tanstack-router-fastapi",
        name="React (TanStack Router) + FastAPI",
        repo="https://github.com/GioMjds/react-fastapi-template.git",
    ),
    TemplateEntry(
        key="nextjs",
        name="Next.js 15 App Router + API Routes",
        repo="https://github.com/GioMjds/nextjs-project-template.git",
    ),
)


def get_template(key: str, catalog: TemplateCatalog = TEMPLATES) -> TemplateEntry:
    """Return the entry registered under ``key``, raising ``UnknownTemplateError`` otherwise."""
    try:
        return catalog[key]
    except KeyError:
        raise UnknownTemplateError(key, list(catalog)) from None
