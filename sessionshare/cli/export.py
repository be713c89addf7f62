"""export-html and export-md subcommands."""

from pathlib import Path

from ..config import load_config
from ..formatter import MARKDOWN_RESULT_LIMIT, format_markdown
from ..html_export import HTML_RESULT_LIMIT, render_html
from ._helpers import SCRUB_NOTE, default_output_path, load_session_or_exit, write_text_or_exit


def _export(args, suffix: str, render) -> Path:
    input_path = Path(args.input)
    output_path = Path(args.output) if args.output else default_output_path(input_path, suffix)
    session = load_session_or_exit(input_path)
    write_text_or_exit(output_path, render(session))
    print(f"Exported to: {output_path}")
    print(SCRUB_NOTE)
    return output_path


def handle_export_html(args) -> None:
    limit = load_config().get("html_result_limit", HTML_RESULT_LIMIT)
    _export(args, ".html", lambda session: render_html(session, result_limit=limit))


def handle_export_md(args) -> None:
    limit = load_config().get("markdown_result_limit", MARKDOWN_RESULT_LIMIT)
    _export(args, ".md", lambda session: format_markdown(session, result_limit=limit))
