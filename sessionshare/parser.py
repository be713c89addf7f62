"""Parse recorded session JSONL logs into scrubbed, display-ready turns."""

import json
from datetime import datetime
from pathlib import Path
from typing import Any

from .redactor import scrub

DEFAULT_TITLE = "Droid Session"
SYSTEM_REMINDER_OPEN = "<system-reminder>"
SYSTEM_REMINDER_CLOSE = "</system-reminder>"
TRUNCATION_NOTICE = "\n... (truncated)"


def read_events(path: Path) -> list[dict]:
    """Read one JSON event per non-blank line. Malformed lines raise json.JSONDecodeError."""
    events: list[dict] = []
    with open(path, encoding="utf-8") as f:
        for line in f:
            line = line.strip()
            if not line:
                continue
            events.append(json.loads(line))
    return events


def load_session(path: Path) -> dict:
    return parse_session(read_events(path))


def parse_session(events: list[Any]) -> dict:
    """Build a session dict from raw events.

    Output format:
    {
      "id": "...",
      "title": "...",          # scrubbed
      "cwd": "..." | None,     # scrubbed
      "turns": [
        {"role": "user" | "assistant", "timestamp": ..., "parts": [...]}
      ]
    }
    """
    events = [e for e in events if isinstance(e, dict)]
    start = next((e for e in events if e.get("type") == "session_start"), {})
    messages = [e for e in events if e.get("type") == "message"]
    tool_results = collect_tool_results(messages)

    cwd = start.get("cwd")
    return {
        "id": str(start.get("id") or "unknown"),
        "title": scrub(str(start.get("title") or DEFAULT_TITLE)),
        "cwd": scrub(str(cwd)) if cwd else None,
        "turns": consolidate_turns(messages, tool_results),
    }


def _message(event: dict) -> dict:
    msg = event.get("message")
    return msg if isinstance(msg, dict) else {}


def _tool_result_text(content: Any) -> str:
    if isinstance(content, str):
        return content
    return json.dumps(content, indent=2, ensure_ascii=False)


def collect_tool_results(messages: list[dict]) -> dict[str, str]:
    """Map tool_use_id -> scrubbed tool output, taken from user messages."""
    results: dict[str, str] = {}
    for event in messages:
        msg = _message(event)
        content = msg.get("content")
        if msg.get("role") != "user" or not isinstance(content, list):
            continue
        for block in content:
            if isinstance(block, dict) and block.get("type") == "tool_result":
                results[str(block.get("tool_use_id", ""))] = scrub(_tool_result_text(block.get("content")))
    return results


def is_tool_result_message(content: Any) -> bool:
    """True for user messages that only carry tool output."""
    if not isinstance(content, list) or not content:
        return False
    return all(isinstance(b, dict) and b.get("type") == "tool_result" for b in content)


def clean_user_text(text: str) -> str:
    """Drop injected <system-reminder> preambles, keeping what follows the last one."""
    if SYSTEM_REMINDER_OPEN in text:
        return text.split(SYSTEM_REMINDER_CLOSE)[-1].strip()
    return text


def content_parts(content: Any, tool_results: dict[str, str]) -> list[dict]:
    """Turn message content (a string or a list of blocks) into scrubbed parts."""
    if isinstance(content, str):
        return [{"type": "text", "text": scrub(content)}] if content else []
    if not isinstance(content, list):
        return []

    parts: list[dict] = []
    for block in content:
        if not isinstance(block, dict):
            continue
        block_type = block.get("type")
        if block_type == "text":
            text = scrub(block.get("text") or "")
            if text:
                parts.append({"type": "text", "text": text})
        elif block_type == "thinking":
            thinking = scrub(block.get("thinking") or "")
            if thinking:
                parts.append({"type": "thinking", "text": thinking})
        elif block_type == "tool_use":
            tool_id = str(block.get("id", ""))
            parts.append({
                "type": "tool_use",
                "id": tool_id,
                "name": str(block.get("name", "")),
                "input": scrub(json.dumps(block.get("input", {}), indent=2, ensure_ascii=False)),
                "result": tool_results.get(tool_id),
            })
        elif block_type == "image":
            parts.append({"type": "image"})
        # tool_result blocks are rendered alongside their tool_use
    return parts


def _user_parts(content: Any, tool_results: dict[str, str]) -> list[dict]:
    parts = []
    for part in content_parts(content, tool_results):
        if part["type"] == "text":
            text = clean_user_text(part["text"])
            if not text:
                continue
            part = {**part, "text": text}
        parts.append(part)
    return parts


def consolidate_turns(messages: list[dict], tool_results: dict[str, str]) -> list[dict]:
    """Group message events into turns.

    Each user message is its own turn; consecutive assistant messages merge
    into one turn that keeps the first message's timestamp.
    """
    turns: list[dict] = []
    current: dict | None = None

    def _flush() -> None:
        if current and current["parts"]:
            turns.append(current)

    for event in messages:
        msg = _message(event)
        role = msg.get("role")
        content = msg.get("content")

        if role == "user":
            if is_tool_result_message(content):
                continue
            _flush()
            current = None
            parts = _user_parts(content, tool_results)
            if parts:
                turns.append({"role": "user", "timestamp": event.get("timestamp"), "parts": parts})
        elif role == "assistant":
            if current is None:
                current = {"role": "assistant", "timestamp": event.get("timestamp"), "parts": []}
            current["parts"].extend(content_parts(content, tool_results))

    _flush()
    return turns


def format_timestamp(timestamp: Any) -> str:
    """Render an ISO-8601 or epoch timestamp as local 'YYYY-MM-DD HH:MM:SS'."""
    if timestamp is None or timestamp == "":
        return ""
    try:
        if isinstance(timestamp, (int, float)):
            # Epoch milliseconds are far larger than any epoch-seconds value in use.
            seconds = timestamp / 1000 if timestamp > 1e11 else timestamp
            parsed = datetime.fromtimestamp(seconds)
        else:
            parsed = datetime.fromisoformat(str(timestamp).replace("Z", "+00:00"))
            if parsed.tzinfo is not None:
                parsed = parsed.astimezone()
    except (ValueError, OverflowError, OSError):
        return str(timestamp)
    return parsed.strftime("%Y-%m-%d %H:%M:%S")


def truncate(text: str, limit: int) -> str:
    if limit > 0 and len(text) > limit:
        return text[:limit] + TRUNCATION_NOTICE
    return text
