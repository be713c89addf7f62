"""Tests for sessionshare.formatter — Markdown export."""

from sessionshare.formatter import format_markdown, format_part, format_turn
from sessionshare.parser import parse_session


class TestFormatMarkdown:
    def test_header(self, sample_events):
        md = format_markdown(parse_session(sample_events))
        assert md.startswith("# Fix login bug\n\n")
        assert "> **Session ID:** sess-123  \n" in md
        assert "> **Directory:** /home/dev/app  \n" in md
        assert "> **Messages:** 3 turns\n\n---\n\n" in md

    def test_turn_sections(self, sample_events):
        md = format_markdown(parse_session(sample_events))
        assert md.count("## 👤 User") == 2
        assert md.count("## 🤖 Assistant") == 1
        assert "*2026-02-25 10:00:00*" in md
        assert "Please fix the login bug" in md
        assert "be nice" not in md

    def test_parts(self, sample_events):
        md = format_markdown(parse_session(sample_events))
        assert "<summary>💭 Thinking</summary>\n\nLook at auth.py" in md
        assert "<summary>🔧 Tool: Read</summary>" in md
        assert '```json\n{\n  "path": "auth.py"\n}\n```' in md
        assert "<summary>📤 Result</summary>\n\n```\nAPI_KEY=[REDACTED]\n```" in md
        assert "*[Image attached]*" in md

    def test_no_secret_leaks(self, sample_events):
        assert "sk-ant" not in format_markdown(parse_session(sample_events))

    def test_missing_cwd(self):
        md = format_markdown({"id": "x", "title": "T", "cwd": None, "turns": []})
        assert "> **Directory:** N/A  \n" in md
        assert "> **Messages:** 0 turns" in md


class TestFormatPart:
    def test_result_truncated(self):
        part = {"type": "tool_use", "name": "Bash", "input": "{}", "result": "x" * 50}
        md = format_part(part, result_limit=10)
        assert "x" * 10 + "\n... (truncated)" in md
        assert "x" * 11 not in md

    def test_no_result_block_without_result(self):
        part = {"type": "tool_use", "name": "Bash", "input": "{}", "result": None}
        assert "📤 Result" not in format_part(part)

    def test_unknown_part_empty(self):
        assert format_part({"type": "audio"}) == ""


class TestFormatTurn:
    def test_turn_without_timestamp(self):
        md = format_turn({"role": "user", "timestamp": None, "parts": [{"type": "text", "text": "hi"}]})
        assert md == "## 👤 User\nhi\n\n---\n\n"
