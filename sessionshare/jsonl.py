"""Re-scrub session JSONL files line by line."""

import json
import logging
from pathlib import Path

from .redactor import redact_text, redact_value

logger = logging.getLogger(__name__)


def read_lines(path: Path) -> list[str]:
    """Return the non-blank lines of a file, without line endings."""
    with open(path, encoding="utf-8") as f:
        return [line.rstrip("\r\n") for line in f if line.strip()]


def scrub_line(line: str) -> tuple[str, int]:
    """Scrub every string in one JSON event; unparseable lines are scrubbed as plain text.

    Returns:
        Tuple of (scrubbed line, redaction count).
    """
    try:
        event = json.loads(line)
    except json.JSONDecodeError:
        logger.debug("Line is not valid JSON, scrubbing it as raw text")
        return redact_text(line)
    scrubbed, count = redact_value(event)
    return json.dumps(scrubbed, ensure_ascii=False, separators=(",", ":")), count


def scrub_lines(lines: list[str]) -> tuple[list[str], int]:
    """Scrub a batch of JSONL lines, skipping blank ones."""
    scrubbed: list[str] = []
    total = 0
    for line in lines:
        if not line.strip():
            continue
        line, count = scrub_line(line)
        scrubbed.append(line)
        total += count
    return scrubbed, total


def write_lines(lines: list[str], output_path: Path) -> int:
    """Write lines as a newline-terminated JSONL file. Returns the number written."""
    output_path.parent.mkdir(parents=True, exist_ok=True)
    with open(output_path, "w", encoding="utf-8") as f:
        f.write("\n".join(lines) + "\n")
    return len(lines)
