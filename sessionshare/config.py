"""Persistent config for sessionshare — stored at ~/.sessionshare/config.json"""

import json
import os
import sys
from pathlib import Path
from typing import TypedDict

CONFIG_DIR = Path.home() / ".sessionshare"
CONFIG_FILE = CONFIG_DIR / "config.json"


class SessionShareConfig(TypedDict, total=False):
    """Expected shape of the config dict."""

    github_token: str | None  # overridden by $GITHUB_TOKEN
    gists_url: str
    gists_per_page: int
    user_agent: str
    html_result_limit: int
    markdown_result_limit: int
    server_host: str
    server_port: int


DEFAULT_CONFIG: SessionShareConfig = {
    "github_token": None,
    "gists_url": "https://api.github.com/gists",
    "gists_per_page": 100,
    "user_agent": "sessionshare",
    "html_result_limit": 3000,
    "markdown_result_limit": 2000,
    "server_host": "127.0.0.1",
    "server_port": 8787,
}


def load_config() -> SessionShareConfig:
    if CONFIG_FILE.exists():
        try:
            with open(CONFIG_FILE) as f:
                stored = json.load(f)
            return {**DEFAULT_CONFIG, **stored}
        except (json.JSONDecodeError, OSError) as e:
            print(f"Warning: could not read {CONFIG_FILE}: {e}", file=sys.stderr)
    return dict(DEFAULT_CONFIG)


def save_config(config: SessionShareConfig) -> None:
    try:
        CONFIG_DIR.mkdir(parents=True, exist_ok=True)
        with open(CONFIG_FILE, "w") as f:
            json.dump(config, f, indent=2)
        CONFIG_FILE.chmod(0o600)
    except OSError as e:
        print(f"Warning: could not save {CONFIG_FILE}: {e}", file=sys.stderr)


def resolve_github_token(config: SessionShareConfig) -> str | None:
    """$GITHUB_TOKEN wins over the stored token."""
    return os.environ.get("GITHUB_TOKEN") or config.get("github_token") or None
