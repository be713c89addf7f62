"""Render parsed sessions as a single self-contained HTML viewer."""

import markdown
from jinja2 import Environment, PackageLoader
from markupsafe import Markup

from .parser import format_timestamp, truncate

HTML_RESULT_LIMIT = 3000
SIDEBAR_PREVIEW_CHARS = 60

_jinja_env = Environment(
    loader=PackageLoader("sessionshare", "templates"),
    autoescape=True,
)

_ROLE_LABELS = {
    "user": "👤 User",
    "assistant": "🤖 Assistant",
}


def render_markdown_text(text: str) -> Markup:
    if not text:
        return Markup("")
    return Markup(markdown.markdown(text, extensions=["fenced_code", "tables"]))


def _render_part(part: dict, result_limit: int) -> dict:
    part_type = part.get("type")
    if part_type == "text":
        return {"type": "text", "html": render_markdown_text(part["text"])}
    if part_type == "tool_use":
        result = part.get("result")
        return {
            "type": "tool_use",
            "name": part["name"],
            "input": part["input"],
            "result": truncate(result, result_limit) if result else None,
        }
    return dict(part)


def _preview(turn: dict) -> str:
    for part in turn["parts"]:
        if part.get("type") == "text":
            text = " ".join(part["text"].split())
            if len(text) > SIDEBAR_PREVIEW_CHARS:
                text = text[:SIDEBAR_PREVIEW_CHARS].rstrip() + "…"
            return text
    return "(no text)"


def build_view(session: dict, result_limit: int = HTML_RESULT_LIMIT) -> dict:
    """Shape a parsed session into the context the page template expects."""
    turns = []
    for number, turn in enumerate(session.get("turns", []), start=1):
        turns.append({
            "anchor": f"turn-{number}",
            "role": turn["role"],
            "label": _ROLE_LABELS.get(turn["role"], turn["role"]),
            "timestamp": format_timestamp(turn.get("timestamp")),
            "parts": [_render_part(p, result_limit) for p in turn["parts"]],
            "preview": _preview(turn),
        })
    return {
        "title": session.get("title", ""),
        "session_id": session.get("id", "unknown"),
        "cwd": session.get("cwd"),
        "turns": turns,
        "nav": [t for t in turns if t["role"] == "user"],
    }


def render_html(session: dict, result_limit: int = HTML_RESULT_LIMIT) -> str:
    template = _jinja_env.get_template("session.html")
    return template.render(**build_view(session, result_limit))
