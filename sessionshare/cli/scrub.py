"""scrub and filter subcommands — JSONL in, scrubbed JSONL out."""

import sys
from pathlib import Path

from ..jsonl import scrub_lines, write_lines
from ..session_filter import filter_events
from ._helpers import SCRUB_NOTE, read_lines_or_exit


def _write_or_exit(lines: list[str], output_path: Path) -> None:
    try:
        write_lines(lines, output_path)
    except OSError as e:
        print(f"Error: cannot write to {output_path}: {e}", file=sys.stderr)
        sys.exit(1)


def handle_scrub(args) -> None:
    output_path = Path(args.output)
    lines = read_lines_or_exit(Path(args.input))
    scrubbed, redactions = scrub_lines(lines)
    _write_or_exit(scrubbed, output_path)
    print(f"Scrubbed {len(lines)} lines to: {output_path}")
    print(f"Redactions: {redactions}")
    print(SCRUB_NOTE)


def handle_filter(args) -> None:
    output_path = Path(args.output)
    instruction = " ".join(args.instruction or [])
    lines = read_lines_or_exit(Path(args.input))
    result = filter_events(lines, instruction)
    for note in result.notes:
        print(note)
    scrubbed, _ = scrub_lines(result.lines)
    _write_or_exit(scrubbed, output_path)
    print(f"Wrote {len(scrubbed)} events to: {output_path}")
    print(SCRUB_NOTE)
