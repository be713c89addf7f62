"""Trim session JSONL according to a short free-text instruction.

Supported instructions:
- "ignore the last 4 user and assistant messages" (also remove/skip/drop/exclude)
- "only include first 10 messages"
"""

import json
import re
from dataclasses import dataclass, field
from typing import Any

_LAST_N_RE = re.compile(
    r"(?:ignore|remove|skip|drop|exclude)\s+(?:the\s+)?last\s+(\d+)\s+"
    r"(?:user\s+and\s+assistant\s+)?messages?",
    re.IGNORECASE,
)
_FIRST_N_RE = re.compile(r"(?:only\s+)?(?:include\s+)?first\s+(\d+)\s+messages?", re.IGNORECASE)

MESSAGE_ROLES = ("user", "assistant")


@dataclass
class FilterResult:
    lines: list[str]
    notes: list[str] = field(default_factory=list)


def _parse(line: str) -> Any:
    try:
        return json.loads(line)
    except json.JSONDecodeError:
        return None


def is_message_event(event: Any) -> bool:
    if not isinstance(event, dict):
        return False
    role = event.get("role")
    if role is None and event.get("type") == "message":
        message = event.get("message")
        role = message.get("role") if isinstance(message, dict) else None
    return role in MESSAGE_ROLES


def drop_last_messages(events: list[tuple[str, Any]], n: int) -> tuple[list[tuple[str, Any]], int]:
    """Remove the last n user/assistant message events. Returns (kept, removed count)."""
    if n <= 0:
        return events, 0
    message_indices = [i for i, (_, event) in enumerate(events) if is_message_event(event)]
    to_remove = set(message_indices[-n:])
    kept = [item for i, item in enumerate(events) if i not in to_remove]
    return kept, len(to_remove)


def keep_first_messages(events: list[tuple[str, Any]], n: int) -> list[tuple[str, Any]]:
    """Keep the first n message events and everything before the next message."""
    kept = []
    seen = 0
    for line, event in events:
        if is_message_event(event):
            seen += 1
            if seen > n:
                break
        kept.append((line, event))
    return kept


def filter_events(lines: list[str], instruction: str = "") -> FilterResult:
    """Apply an instruction to raw JSONL lines. Lines are returned unmodified."""
    events = [(line, _parse(line)) for line in lines if line.strip()]
    notes: list[str] = []

    if instruction:
        last_match = _LAST_N_RE.search(instruction)
        if last_match:
            n = int(last_match.group(1))
            events, removed = drop_last_messages(events, n)
            notes.append(f"Removed last {n} user/assistant messages ({removed} events)")

        first_match = _FIRST_N_RE.search(instruction)
        if first_match:
            n = int(first_match.group(1))
            events = keep_first_messages(events, n)
            notes.append(f"Kept first {n} messages")

    return FilterResult(lines=[line for line, _ in events], notes=notes)
