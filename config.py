"""
Configuration module for hoshi.
Handles environment variable loading, user discovery, terminal size and logging.
"""

import pathlib
import os
import subprocess
from importlib import metadata
from dotenv import load_dotenv
import logging
import sys

from errors import ConfigurationError, TerminalSizeError

# Log to stderr so the interactive screen on stdout stays clean
logging.basicConfig(
    level=os.getenv("HOSHI_LOG_LEVEL", "WARNING").upper(),
    handlers=[logging.StreamHandler(sys.stderr)],
    format="%(asctime)s [hoshi] %(message)s"
)

logger = logging.getLogger(__name__)

# Per-user settings directory (only a .env file is read from here)
DATA_DIR = pathlib.Path.home() / ".hoshi"

# Load environment variables (.env files)
# Strategy: 1. Project-level .env, then 2. Per-user .env
script_dir = pathlib.Path(__file__).parent
load_dotenv(script_dir / ".env")
load_dotenv(DATA_DIR / ".env")

DEFAULT_API_URL = "https://api.github.com"

# Rows shown at once by the selector
PAGE_SIZE = 10

# Columns reserved for the row decorations around a description
DESCRIPTION_MARGIN = 22

DIST_NAME = "hoshi"


def get_github_user():
    """
    Returns the GitHub login whose stars are browsed.

    HOSHI_USER wins; otherwise `git config github.user` is consulted.
    """
    user = os.getenv("HOSHI_USER", "").strip()
    if user:
        return user

    try:
        result = subprocess.run(
            ["git", "config", "--get", "github.user"],
            capture_output=True,
            text=True,
        )
    except OSError as e:
        raise ConfigurationError(f"Cannot run git to read github.user: {e}") from e

    user = result.stdout.strip()
    if result.returncode != 0 or not user:
        raise ConfigurationError(
            "GitHub user is not configured. Run 'git config --global github.user <login>' "
            "or set HOSHI_USER."
        )
    return user


def get_github_token():
    """Returns the optional GitHub token, or None."""
    token = os.getenv("GITHUB_TOKEN")
    if token and token.strip().lower() not in ("none", ""):
        return token.strip()
    return None


def get_api_url():
    """Returns the API root without a trailing slash."""
    return os.getenv("GITHUB_API_URL", DEFAULT_API_URL).rstrip("/")


def get_http_timeout():
    """Returns the request timeout in seconds, or None to wait indefinitely."""
    raw = os.getenv("HOSHI_HTTP_TIMEOUT", "").strip()
    if not raw:
        return None
    try:
        timeout = float(raw)
    except ValueError as e:
        raise ConfigurationError(f"HOSHI_HTTP_TIMEOUT must be a number, got {raw!r}") from e
    return timeout if timeout > 0 else None


def get_terminal_width():
    """Returns the current terminal width in columns."""
    try:
        columns = os.get_terminal_size(sys.stdout.fileno()).columns
    except (OSError, ValueError) as e:
        raise TerminalSizeError(f"Cannot determine terminal width: {e}") from e
    if columns <= 0:
        raise TerminalSizeError(f"Invalid terminal width: {columns}")
    return columns


def get_version():
    """Returns the installed package version, or 'unset' for a source checkout."""
    try:
        return metadata.version(DIST_NAME)
    except metadata.PackageNotFoundError:
        return "unset"
