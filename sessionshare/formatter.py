"""Render parsed sessions as Markdown documents for sessionshare."""

from .parser import format_timestamp, truncate

MARKDOWN_RESULT_LIMIT = 2000

_ROLE_HEADINGS = {
    "user": "👤 User",
    "assistant": "🤖 Assistant",
}


def _details(summary: str, body: str) -> str:
    return f"<details>\n<summary>{summary}</summary>\n\n{body}\n\n</details>"


def format_part(part: dict, result_limit: int = MARKDOWN_RESULT_LIMIT) -> str:
    """Render one turn part. Unknown part types render as an empty string."""
    part_type = part.get("type")
    if part_type == "text":
        return part["text"]
    if part_type == "thinking":
        return _details("💭 Thinking", part["text"])
    if part_type == "tool_use":
        md = _details(f"🔧 Tool: {part['name']}", f"```json\n{part['input']}\n```")
        if part.get("result"):
            result = truncate(part["result"], result_limit)
            md += "\n\n" + _details("📤 Result", f"```\n{result}\n```")
        return md
    if part_type == "image":
        return "*[Image attached]*"
    return ""


def format_turn(turn: dict, result_limit: int = MARKDOWN_RESULT_LIMIT) -> str:
    heading = _ROLE_HEADINGS.get(turn["role"], turn["role"])
    md = f"## {heading}\n"
    timestamp = format_timestamp(turn.get("timestamp"))
    if timestamp:
        md += f"*{timestamp}*\n\n"
    body = "\n\n".join(filter(None, (format_part(p, result_limit) for p in turn["parts"])))
    md += f"{body}\n\n---\n\n"
    return md


def format_markdown(session: dict, result_limit: int = MARKDOWN_RESULT_LIMIT) -> str:
    """Convert a parsed session into a Markdown document.

    Layout:
        # <title>
        > session id / directory / turn count
        ---
        ## 👤 User | ## 🤖 Assistant   (one section per turn, each closed by ---)
    """
    turns = session.get("turns", [])
    md = (
        f"# {session.get('title', '')}\n\n"
        f"> **Session ID:** {session.get('id', 'unknown')}  \n"
        f"> **Directory:** {session.get('cwd') or 'N/A'}  \n"
        f"> **Messages:** {len(turns)} turns\n\n"
        "---\n\n"
    )
    return md + "".join(format_turn(turn, result_limit) for turn in turns)
