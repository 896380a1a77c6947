"""Typer CLI application for template-cli."""

from __future__ import annotations

from pathlib import Path
from typing import Annotated

from rich.console import Console
from rich.markup import escape
from typer import Argument, Exit, Option, Typer

import template_cli
from template_cli.catalog import TEMPLATES, TemplateEntry, get_template
from template_cli.cli import _prompts
from template_cli.cli._logging import configure_logging
from template_cli.core.config import Settings
from template_cli.core.destination import ResolvedDestination, resolve_destination
from template_cli.core.materializer import Outcome, OutcomeStatus, ProjectMaterializer
from template_cli.core.vcs import GitClient
from template_cli.core.workflow import ProjectRequest, create_project
from template_cli.errors import DestinationError, TemplateCliError, UnknownTemplateError

app = Typer(add_completion=False, context_settings={"help_option_names": ["-h", "--help"]})
_console = Console()


def _version_callback(value: bool) -> None:
    if value:
        _console.print(f"template-cli {template_cli.__version__}")
        raise Exit()


@app.callback()
def main(
    verbose: Annotated[
        bool, Option("--verbose", "-v", help="Log every step to stderr.")
    ] = False,
    version: Annotated[
        bool,
        Option(
            "--version",
            help="Show the version and exit.",
            callback=_version_callback,
            is_eager=True,
            expose_value=False,
        ),
    ] = False,
) -> None:
    """template-cli: create projects from predefined repository templates."""
    configure_logging(verbose)


def _print_templates() -> None:
    _console.print()
    _console.print("[bold cyan]◆[/]  Available project templates")
    _console.print("[dim]│[/]")
    for entry in TEMPLATES.values():
        _console.print(f"[dim]│[/]  [bold cyan]● {entry.key}[/]")
        _console.print(f"[dim]│[/]    [bold]{escape(entry.name)}[/]")
        _console.print(f"[dim]│[/]    [dim]Repository: {entry.repo}[/]")
        _console.print("[dim]│[/]")
    _console.print()


def _list_templates_callback(value: bool) -> None:
    if value:
        _print_templates()
        raise Exit()


def _yes(*_: object) -> bool:
    return True


def _build_materializer(settings: Settings) -> ProjectMaterializer:
    vcs = GitClient(settings.git_executable, clone_depth=settings.clone_depth)
    return ProjectMaterializer(vcs, settings=settings)


def _print_next_steps(outcome: Outcome, project_name: str) -> None:
    _console.print("[dim]│[/]")
    _console.print("[bold cyan]◆[/]  Next steps:")
    if not outcome.is_current_directory:
        _console.print(f"[dim]│[/]  cd {escape(project_name)}")
    _console.print("[dim]│[/]  Check the README.md for setup instructions")
    _console.print()


def _render_outcome(outcome: Outcome, project_name: str) -> None:
    """Print the result of a run and exit non-zero when nothing usable was created."""
    if outcome.status is OutcomeStatus.CANCELLED:
        _console.print("[bold yellow]■[/]  Project creation cancelled.")
        _console.print()
        return

    error = outcome.error

    if outcome.status is OutcomeStatus.FAILED:
        step = getattr(error, "step", "create")
        _console.print(f"[bold red]Error:[/] Could not create project ({step} failed).")
        _console.print(f"[dim]│[/]  {escape(str(error))}")
        if error.__cause__ is not None:
            _console.print(f"[dim]│[/]  [dim]{escape(str(error.__cause__))}[/]")
        for note in getattr(error, "__notes__", ()):
            _console.print(f"[dim]│[/]  [yellow]{escape(note)}[/]")
        partial = outcome.path
        if not outcome.is_current_directory and partial is not None and partial.exists():
            _console.print(f"[dim]│[/]  Partial contents were left in {escape(str(partial))}.")
        _console.print()
        raise Exit(code=1)

    if outcome.status is OutcomeStatus.CREATED_WITHOUT_REPOSITORY:
        _console.print("[bold yellow]▲[/]  Project files are in place, but git init failed.")
        if error is not None:
            _console.print(f"[dim]│[/]  {escape(str(error))}")
        _console.print("[dim]│[/]  Run `git init` yourself once the problem is fixed.")
    else:
        _console.print("[bold green]●[/]  Project created successfully!")

    _print_next_steps(outcome, project_name)


@app.command()
def create(
    project_name: Annotated[
        str | None,
        Argument(
            help="Directory for the new project, or '.' for the current directory.",
            show_default=False,
        ),
    ] = None,
    template_key: Annotated[
        str | None,
        Option(
            "--template",
            "-t",
            help="Template key. Run with --list-templates / -l to see all options.",
            show_default=False,
        ),
    ] = None,
    yes: Annotated[
        bool, Option("--yes", "-y", help="Answer yes to every confirmation.")
    ] = False,
    list_templates: Annotated[
        bool,
        Option(
            "--list-templates",
            "-l",
            help="List all available templates and exit.",
            callback=_list_templates_callback,
            is_eager=True,
            expose_value=False,
        ),
    ] = False,
) -> None:
    """Create a new project from available project templates."""
    root = Path.cwd()

    try:
        settings = Settings.from_env()
    except ValueError as exc:
        _console.print(f"[bold red]Error:[/] {escape(str(exc))}")
        raise Exit(code=2) from None

    entry: TemplateEntry | None = None
    if template_key is not None:
        try:
            entry = get_template(template_key)
        except UnknownTemplateError:
            valid = ", ".join(f"'{k}'" for k in TEMPLATES)
            _console.print()
            _console.print(
                f"[bold red]Error:[/] [bold]{escape(repr(template_key))}[/] is not a valid template."
            )
            _console.print(f"[dim]Valid values:[/] {valid}")
            _print_templates()
            raise Exit(code=2) from None

    if project_name is not None:
        try:
            resolve_destination(project_name, root)
        except DestinationError as exc:
            _console.print(f"[bold red]Error:[/] {escape(str(exc))}")
            raise Exit(code=1) from None

    # Header
    _console.print()
    _console.print(f"[bold cyan]●[/]  template-cli v{template_cli.__version__}")
    _console.print("[dim]│[/]")

    # Interactive prompts for missing arguments
    if entry is None:
        entry = _prompts.prompt_template()
    else:
        _console.print("[bold green]◇[/]  What template would you like to use?")
        _console.print(f"[dim]│[/]  {escape(entry.name)}")
        _console.print("[dim]│[/]")

    if project_name is None:
        project_name = _prompts.prompt_project_name(root)
    else:
        project_name = project_name.strip()
        _console.print("[bold green]◇[/]  What is your project named?")
        _console.print(f"[dim]│[/]  {escape(project_name)}")
        _console.print("[dim]│[/]")

    def confirm_create(template: TemplateEntry, destination: ResolvedDestination) -> bool:
        confirmed = yes or _prompts.confirm_create(template, destination)
        if confirmed:
            _console.print(f"[bold green]◇[/]  Cloning {escape(template.name)}...")
        return confirmed

    try:
        outcome = create_project(
            ProjectRequest(entry.key, project_name),
            materializer=_build_materializer(settings),
            root=root,
            confirm_non_empty=_yes if yes else _prompts.confirm_non_empty,
            confirm_create=confirm_create,
        )
    except TemplateCliError as exc:
        _console.print(f"[bold red]Error:[/] {escape(str(exc))}")
        raise Exit(code=1) from None

    _render_outcome(outcome, project_name)


@app.command("list")
def list_() -> None:
    """List available project templates."""
    _print_templates()
