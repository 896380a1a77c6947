"""Tests for template_cli.core.config: the Settings dataclass."""

import pytest

from template_cli.core.config import CLONE_DEPTH_ENV, GIT_ENV, Settings


class TestSettings:
    def test_defaults(self):
        s = Settings()
        assert s.git_executable == "git"
        assert s.clone_depth is None
        assert s.metadata_dir == ".git"
        assert s.temp_prefix == "temp-"

    def test_custom(self):
        s = Settings(git_executable="/usr/local/bin/git", clone_depth=1)
        assert s.git_executable == "/usr/local/bin/git"
        assert s.clone_depth == 1

    def test_empty_git_executable_rejected(self):
        with pytest.raises(ValueError, match="git_executable"):
            Settings(git_executable="")

    @pytest.mark.parametrize("depth", [0, -3])
    def test_non_positive_depth_rejected(self, depth):
        with pytest.raises(ValueError, match="clone_depth"):
            Settings(clone_depth=depth)

    def test_empty_metadata_dir_rejected(self):
        with pytest.raises(ValueError, match="metadata_dir"):
            Settings(metadata_dir="")

    @pytest.mark.parametrize("name", ["../precious", "/etc", "a/b", ".", ".."])
    def test_bad_metadata_dir_rejected(self, name):
        # stripping this directory must never reach outside the project
        with pytest.raises(ValueError, match="metadata_dir"):
            Settings(metadata_dir=name)

    def test_custom_metadata_dir(self):
        assert Settings(metadata_dir=".hg").metadata_dir == ".hg"

    @pytest.mark.parametrize("prefix", ["", "tmp/", "a/b"])
    def test_bad_temp_prefix_rejected(self, prefix):
        with pytest.raises(ValueError, match="temp_prefix"):
            Settings(temp_prefix=prefix)


class TestFromEnv:
    def test_empty_environment(self):
        assert Settings.from_env({}) == Settings()

    def test_reads_variables(self):
        s = Settings.from_env({GIT_ENV: "/opt/git", CLONE_DEPTH_ENV: "5"})
        assert s.git_executable == "/opt/git"
        assert s.clone_depth == 5

    def test_blank_values_fall_back(self):
        s = Settings.from_env({GIT_ENV: "  ", CLONE_DEPTH_ENV: ""})
        assert s == Settings()

    def test_invalid_depth(self):
        with pytest.raises(ValueError, match=CLONE_DEPTH_ENV):
            Settings.from_env({CLONE_DEPTH_ENV: "shallow"})

    def test_defaults_to_os_environ(self, monkeypatch):
        monkeypatch.setenv(GIT_ENV, "git2")
        monkeypatch.delenv(CLONE_DEPTH_ENV, raising=False)
        assert Settings.from_env().git_executable == "git2"
