"""Command line interface for template-cli."""

from template_cli.cli.app import app

__all__ = ["app"]
