"""sessionshare command line entry point."""

import argparse
import sys

from .config import handle_config
from .export import handle_export_html, handle_export_md
from .scrub import handle_filter, handle_scrub
from .serve import handle_serve


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="sessionshare",
        description="Turn recorded assistant sessions into shareable, secret-scrubbed HTML, Markdown and JSONL.",
    )
    sub = parser.add_subparsers(dest="command")

    html = sub.add_parser("export-html", help="Export a session JSONL to a standalone HTML page")
    html.add_argument("input", help="Session .jsonl file")
    html.add_argument("output", nargs="?", help="Output .html file (default: next to the input)")
    html.set_defaults(func=handle_export_html)

    md = sub.add_parser("export-md", help="Export a session JSONL to Markdown")
    md.add_argument("input", help="Session .jsonl file")
    md.add_argument("output", nargs="?", help="Output .md file (default: next to the input)")
    md.set_defaults(func=handle_export_md)

    scrub = sub.add_parser("scrub", help="Write a copy of a session JSONL with secrets scrubbed")
    scrub.add_argument("input", help="Session .jsonl file")
    scrub.add_argument("output", help="Output .jsonl file")
    scrub.set_defaults(func=handle_scrub)

    filt = sub.add_parser("filter", help="Drop messages from a session JSONL by instruction")
    filt.add_argument("input", help="Session .jsonl file")
    filt.add_argument("output", help="Output .jsonl file")
    filt.add_argument("instruction", nargs="*", help='e.g. "ignore the last 4 user and assistant messages"')
    filt.set_defaults(func=handle_filter)

    serve = sub.add_parser("serve", help="Serve the gist-listing endpoint (GET /api/gists)")
    serve.add_argument("--host", help="Bind address (default from config)")
    serve.add_argument("--port", type=int, help="Port (default from config)")
    serve.set_defaults(func=handle_serve)

    config = sub.add_parser("config", help="Show config, or store a GitHub token")
    config.add_argument("--github-token", help="Token used to list gists")
    config.set_defaults(func=handle_config)

    return parser


def main(argv: list[str] | None = None) -> None:
    parser = build_parser()
    args = parser.parse_args(argv)
    if not getattr(args, "func", None):
        parser.print_usage(sys.stderr)
        sys.exit(1)
    args.func(args)


if __name__ == "__main__":
    main()
