"""Unit tests for interactive prompt functions."""

from __future__ import annotations

from pathlib import Path
from unittest.mock import MagicMock, patch

import pytest

from template_cli.catalog import TEMPLATES
from template_cli.cli._prompts import (
    confirm_create,
    confirm_non_empty,
    prompt_project_name,
    prompt_template,
)
from template_cli.core.destination import CurrentDirectory, NamedDirectory


class TestPromptTemplate:
    @patch("template_cli.cli._prompts.TerminalMenu")
    def test_returns_selected_template(self, mock_menu_cls: MagicMock) -> None:
        mock_menu_cls.return_value.show.return_value = 0

        result = prompt_template()
        assert result is TEMPLATES["pern-stack"]

    @patch("template_cli.cli._prompts.TerminalMenu")
    def test_returns_last_template(self, mock_menu_cls: MagicMock) -> None:
        mock_menu_cls.return_value.show.return_value = 4

        result = prompt_template()
        assert result is TEMPLATES["nextjs"]

    @patch("template_cli.cli._prompts.TerminalMenu")
    def test_menu_shows_display_names(self, mock_menu_cls: MagicMock) -> None:
        mock_menu_cls.return_value.show.return_value = 1

        prompt_template()

        labels = mock_menu_cls.call_args.args[0]
        assert labels == [e.name for e in TEMPLATES.values()]

    @patch("template_cli.cli._prompts.TerminalMenu")
    def test_exit_on_none(self, mock_menu_cls: MagicMock) -> None:
        mock_menu_cls.return_value.show.return_value = None

        with pytest.raises(SystemExit):
            prompt_template()


class TestPromptProjectName:
    @patch("builtins.input", return_value="")
    def test_default_name(self, mock_input: MagicMock, tmp_path: Path) -> None:
        assert prompt_project_name(tmp_path) == "my-app"
        mock_input.assert_called_once()

    @patch("builtins.input", return_value="  shop  ")
    def test_answer_is_trimmed(self, mock_input: MagicMock, tmp_path: Path) -> None:
        assert prompt_project_name(tmp_path) == "shop"

    @patch("builtins.input", return_value=".")
    def test_current_directory(self, mock_input: MagicMock, tmp_path: Path) -> None:
        (tmp_path / "index.js").write_text("")
        assert prompt_project_name(tmp_path) == "."

    @patch("builtins.input", side_effect=["bad name", "my-app", "shop"])
    def test_reprompts_until_valid(self, mock_input: MagicMock, tmp_path: Path) -> None:
        (tmp_path / "my-app").mkdir()

        assert prompt_project_name(tmp_path) == "shop"
        assert mock_input.call_count == 3


class TestConfirmNonEmpty:
    @patch("builtins.input", return_value="")
    def test_default_no(self, mock_input: MagicMock) -> None:
        assert confirm_non_empty(["index.js"]) is False

    @patch("builtins.input", return_value="y")
    def test_explicit_yes(self, mock_input: MagicMock) -> None:
        assert confirm_non_empty(["index.js"]) is True

    @patch("builtins.input", return_value="n")
    def test_lists_entries_under_question(
        self, mock_input: MagicMock, capsys: pytest.CaptureFixture[str]
    ) -> None:
        confirm_non_empty(["index.js", "src"])
        out = capsys.readouterr().out
        assert "index.js" in out
        assert "src" in out
        assert "more" not in out

    @patch("builtins.input", return_value="n")
    def test_long_listing_is_truncated(
        self, mock_input: MagicMock, capsys: pytest.CaptureFixture[str]
    ) -> None:
        confirm_non_empty([f"file{i}.txt" for i in range(8)])
        out = capsys.readouterr().out
        assert "file4.txt" in out
        assert "file5.txt" not in out
        assert "... and 3 more" in out


class TestConfirmCreate:
    @patch("builtins.input", return_value="")
    def test_default_yes(self, mock_input: MagicMock) -> None:
        result = confirm_create(TEMPLATES["nextjs"], NamedDirectory("app"))
        assert result is True
        mock_input.assert_called_once()

    @patch("builtins.input", return_value="n")
    def test_explicit_no(self, mock_input: MagicMock) -> None:
        assert confirm_create(TEMPLATES["nextjs"], CurrentDirectory()) is False

    @patch("builtins.input", return_value="yes")
    def test_explicit_yes(self, mock_input: MagicMock) -> None:
        assert confirm_create(TEMPLATES["react-flask"], CurrentDirectory()) is True
