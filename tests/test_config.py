import os
from importlib import metadata
from unittest.mock import Mock, patch

import pytest

import config
from errors import ConfigurationError, TerminalSizeError


def test_user_from_environment_wins(monkeypatch):
    monkeypatch.setenv("HOSHI_USER", " octocat ")

    with patch("config.subprocess.run") as mock_run:
        assert config.get_github_user() == "octocat"

    assert not mock_run.called


@patch("config.subprocess.run")
def test_user_from_git_config(mock_run):
    mock_run.return_value = Mock(returncode=0, stdout="octocat\n")

    assert config.get_github_user() == "octocat"
    args, _ = mock_run.call_args
    assert args[0] == ["git", "config", "--get", "github.user"]


@patch("config.subprocess.run")
def test_missing_git_user_is_a_configuration_error(mock_run):
    mock_run.return_value = Mock(returncode=1, stdout="")

    with pytest.raises(ConfigurationError, match="github.user"):
        config.get_github_user()


@patch("config.subprocess.run", side_effect=FileNotFoundError("git"))
def test_missing_git_binary_is_a_configuration_error(mock_run):
    with pytest.raises(ConfigurationError):
        config.get_github_user()


@pytest.mark.parametrize("value, expected", [
    (None, None),
    ("", None),
    ("None", None),
    ("ghp_abc", "ghp_abc"),
])
def test_github_token(monkeypatch, value, expected):
    if value is not None:
        monkeypatch.setenv("GITHUB_TOKEN", value)

    assert config.get_github_token() == expected


def test_api_url_default_and_override(monkeypatch):
    assert config.get_api_url() == "https://api.github.com"

    monkeypatch.setenv("GITHUB_API_URL", "https://ghe.local/api/v3/")
    assert config.get_api_url() == "https://ghe.local/api/v3"


def test_http_timeout(monkeypatch):
    assert config.get_http_timeout() is None

    monkeypatch.setenv("HOSHI_HTTP_TIMEOUT", "7.5")
    assert config.get_http_timeout() == 7.5

    monkeypatch.setenv("HOSHI_HTTP_TIMEOUT", "soon")
    with pytest.raises(ConfigurationError):
        config.get_http_timeout()


@patch("config.sys.stdout")
@patch("config.os.get_terminal_size")
def test_terminal_width(mock_size, mock_stdout):
    mock_stdout.fileno.return_value = 1
    mock_size.return_value = os.terminal_size((132, 40))

    assert config.get_terminal_width() == 132


@patch("config.sys.stdout")
@patch("config.os.get_terminal_size", side_effect=OSError("not a tty"))
def test_terminal_width_unavailable(mock_size, mock_stdout):
    mock_stdout.fileno.return_value = 1

    with pytest.raises(TerminalSizeError):
        config.get_terminal_width()


def test_terminal_size_error_exit_code():
    assert TerminalSizeError.exit_code == 1
    assert issubclass(TerminalSizeError, ConfigurationError)


@patch("config.metadata.version", side_effect=metadata.PackageNotFoundError("hoshi"))
def test_version_unset_without_distribution(mock_version):
    assert config.get_version() == "unset"


@patch("config.metadata.version", return_value="0.3.0")
def test_version_from_distribution(mock_version):
    assert config.get_version() == "0.3.0"
    mock_version.assert_called_with("hoshi")


def test_only_live_getters_are_exposed():
    assert not hasattr(config, "get_data_dir")
    assert config.DATA_DIR.name == ".hoshi"
