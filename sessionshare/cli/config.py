"""config subcommand: store the GitHub token and show current settings."""

import json

from ..config import load_config, save_config
from ._helpers import _mask_config_for_display


def handle_config(args) -> None:
    config = load_config()
    if args.github_token:
        config["github_token"] = args.github_token.strip()
        save_config(config)
    print(json.dumps(_mask_config_for_display(config), indent=2))
