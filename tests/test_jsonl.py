"""Tests for sessionshare.jsonl — line-by-line re-scrubbing."""

import json

from sessionshare.jsonl import read_lines, scrub_line, scrub_lines, write_lines


class TestScrubLine:
    def test_string_values_scrubbed(self):
        line = '{"a":"token=' + "y" * 20 + '","n":1}'
        assert scrub_line(line) == ('{"a":"token=[REDACTED]","n":1}', 1)

    def test_keys_untouched(self):
        key = "sk-ant-" + "k" * 30
        line = json.dumps({key: "ok"})
        scrubbed, count = scrub_line(line)
        assert json.loads(scrubbed) == {key: "ok"}
        assert count == 0

    def test_nested_values(self):
        line = json.dumps({"message": {"content": [{"type": "text", "text": "ghp_" + "b" * 36}]}})
        scrubbed, count = scrub_line(line)
        assert json.loads(scrubbed)["message"]["content"][0]["text"] == "[REDACTED]"
        assert count == 1

    def test_unicode_preserved(self):
        scrubbed, _ = scrub_line(json.dumps({"text": "héllo ✓"}))
        assert "héllo ✓" in scrubbed

    def test_malformed_line_scrubbed_as_text(self):
        line = '{"broken": "sk-ant-' + "x" * 30
        assert scrub_line(line) == ('{"broken": "[REDACTED]', 1)


class TestScrubLines:
    def test_blank_lines_skipped(self):
        lines, total = scrub_lines(['{"a":1}', "", "   ", '{"b":"token=' + "z" * 20 + '"}'])
        assert lines == ['{"a":1}', '{"b":"token=[REDACTED]"}']
        assert total == 1


class TestFiles:
    def test_read_lines(self, tmp_path):
        path = tmp_path / "in.jsonl"
        path.write_text('{"a":1}\r\n\n{"b":2}\n')
        assert read_lines(path) == ['{"a":1}', '{"b":2}']

    def test_write_lines_trailing_newline(self, tmp_path):
        path = tmp_path / "out" / "s.jsonl"
        assert write_lines(["{}", "{}"], path) == 2
        assert path.read_text() == "{}\n{}\n"
