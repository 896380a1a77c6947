"""Clack-style interactive prompts using Rich + simple-term-menu."""

from __future__ import annotations

import sys
from pathlib import Path
from typing import TypeVar

from rich.console import Console
from rich.markup import escape
from simple_term_menu import TerminalMenu

from template_cli.catalog import TEMPLATES, TemplateCatalog, TemplateEntry
from template_cli.core.destination import ResolvedDestination, resolve_destination
from template_cli.errors import DestinationError

_console = Console()

T = TypeVar("T")

DEFAULT_PROJECT_NAME = "my-app"
NON_EMPTY_PREVIEW = 5


def _print_bar() -> None:
    _console.print("[dim]│[/]")


def _clear_lines(n: int) -> None:
    """Move cursor up *n* lines and clear to end of screen."""
    sys.stdout.write(f"\033[{n}A\033[J")
    sys.stdout.flush()


def _select(question: str, options: list[T], labels: list[str]) -> T:
    """Display a clack-style selection prompt and return the chosen option."""
    _console.print(f"[bold cyan]◆[/]  {question}")
    _print_bar()

    menu = TerminalMenu(
        labels,
        menu_cursor="│  ● ",
        menu_cursor_style=("fg_cyan", "bold"),
        menu_highlight_style=("fg_cyan",),
    )
    raw_index = menu.show()

    if raw_index is None:
        raise SystemExit(1)

    index: int = int(raw_index)
    selected = options[index]

    # Overwrite the ◆ question + │ bar that stayed on screen
    _clear_lines(2)

    _console.print(f"[bold green]◇[/]  {question}")
    for i, lbl in enumerate(labels):
        if i == index:
            _console.print(f"[dim]│[/]  [bold green]●[/] {escape(lbl)}")
        else:
            _console.print(f"[dim]│[/]    [dim s]{escape(lbl)}[/]")
    _print_bar()

    return selected


def _confirm(question: str, default: bool = True, details: list[str] | None = None) -> bool:
    """Display a clack-style yes/no prompt, with optional dimmed lines under the question."""
    details = details or []
    _console.print(f"[bold cyan]◆[/]  {question}")
    for line in details:
        _console.print(f"[dim]│  {escape(line)}[/]")
    _print_bar()

    suffix = " [Y/n] " if default else " [y/N] "
    _console.print("[dim]│[/]  ", end="")
    answer = input(suffix).strip().lower()

    result = default if answer == "" else answer in ("y", "yes")

    display = "Yes" if result else "No"

    # Overwrite the ◆ question + detail lines + │ bar + │ [Y/n] input line
    _clear_lines(3 + len(details))

    _console.print(f"[bold green]◇[/]  {question}")
    _console.print(f"[dim]│[/]  {display}")
    _print_bar()

    return result


def prompt_template(catalog: TemplateCatalog = TEMPLATES) -> TemplateEntry:
    """Prompt user to choose a project template."""
    entries = list(catalog.values())
    labels = [e.name for e in entries]
    return _select("What template would you like to use?", entries, labels)


def prompt_project_name(root: Path, default: str = DEFAULT_PROJECT_NAME) -> str:
    """Ask for the project name until it resolves to a usable destination.

    Returns the trimmed answer; ``.`` or ``./`` selects the current directory.
    """
    question = "What is your project named?"
    _console.print(f"[bold cyan]◆[/]  {question}")
    _print_bar()

    errors = 0
    while True:
        _console.print("[dim]│[/]  ", end="")
        answer = input(f" ({default}) ")
        raw = answer if answer.strip() else default
        try:
            resolve_destination(raw, root)
        except DestinationError as exc:
            _console.print(f"[dim]│[/]  [bold red]{escape(str(exc))}[/]")
            errors += 1
            continue
        break

    # Overwrite the question, the bar and every answer/error line
    _clear_lines(3 + 2 * errors)

    _console.print(f"[bold green]◇[/]  {question}")
    _console.print(f"[dim]│[/]  {escape(raw.strip())}")
    _print_bar()

    return raw.strip()


def confirm_non_empty(entries: list[str]) -> bool:
    """Ask whether to continue although the current directory has files in it."""
    shown = entries[:NON_EMPTY_PREVIEW]
    if len(entries) > len(shown):
        shown = [*shown, f"... and {len(entries) - len(shown)} more"]
    return _confirm(
        "Current directory is not empty. Continue anyway?", default=False, details=shown
    )


def confirm_create(entry: TemplateEntry, destination: ResolvedDestination) -> bool:
    """Final go/no-go before anything is cloned."""
    return _confirm(f"Create project in {escape(destination.label)} with {escape(entry.name)}?")
