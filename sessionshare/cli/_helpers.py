"""Shared constants and file helpers for the sessionshare CLI."""

import json
import sys
from pathlib import Path

from ..jsonl import read_lines
from ..parser import load_session

SCRUB_NOTE = "Note: Secrets have been scrubbed (API keys, tokens, passwords, etc.)"


def default_output_path(input_path: Path, suffix: str) -> Path:
    """session.jsonl -> session<suffix>; other names get the suffix appended."""
    if input_path.suffix == ".jsonl":
        return input_path.with_suffix(suffix)
    return input_path.with_name(input_path.name + suffix)


def load_session_or_exit(input_path: Path) -> dict:
    try:
        return load_session(input_path)
    except OSError as e:
        print(f"Error: cannot read {input_path}: {e}", file=sys.stderr)
        sys.exit(1)
    except json.JSONDecodeError as e:
        print(f"Error: {input_path} is not valid JSONL: {e}", file=sys.stderr)
        sys.exit(1)


def read_lines_or_exit(input_path: Path) -> list[str]:
    try:
        return read_lines(input_path)
    except (OSError, UnicodeDecodeError) as e:
        print(f"Error: cannot read {input_path}: {e}", file=sys.stderr)
        sys.exit(1)


def write_text_or_exit(output_path: Path, content: str) -> None:
    try:
        output_path.parent.mkdir(parents=True, exist_ok=True)
        output_path.write_text(content, encoding="utf-8")
    except OSError as e:
        print(f"Error: cannot write to {output_path}: {e}", file=sys.stderr)
        sys.exit(1)


def _mask_secret(value: str | None) -> str | None:
    if not value:
        return value
    if len(value) <= 8:
        return "***"
    return f"{value[:4]}...{value[-4:]}"


def _mask_config_for_display(config: dict) -> dict:
    masked = dict(config)
    if masked.get("github_token"):
        masked["github_token"] = _mask_secret(masked["github_token"])
    return masked
