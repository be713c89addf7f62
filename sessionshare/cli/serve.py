"""serve subcommand for the gist-listing endpoint."""

import logging

from ..config import load_config


def handle_serve(args) -> None:
    from ..server import serve as _serve

    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    config = load_config()
    host = args.host or config.get("server_host", "127.0.0.1")
    port = args.port or config.get("server_port", 8787)
    _serve(host, port)
