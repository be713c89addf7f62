"""List shared session gists from the GitHub API."""

import logging

import requests

logger = logging.getLogger(__name__)

GISTS_URL = "https://api.github.com/gists"
DEFAULT_USER_AGENT = "sessionshare"
REQUEST_TIMEOUT_SECONDS = 15


class GistListError(Exception):
    """The GitHub API answered with a non-success status."""


def is_session_gist(gist: dict) -> bool:
    """A session gist holds both an exported .html page and its .jsonl log."""
    names = list((gist.get("files") or {}).keys())
    return any(n.endswith(".html") for n in names) and any(n.endswith(".jsonl") for n in names)


def summarize_gist(gist: dict) -> dict:
    return {
        "id": gist.get("id"),
        "description": gist.get("description") or "Untitled Session",
        "created_at": gist.get("created_at"),
        "files": len(gist.get("files") or {}),
    }


def list_session_gists(
    token: str,
    url: str = GISTS_URL,
    per_page: int = 100,
    user_agent: str = DEFAULT_USER_AGENT,
) -> list[dict]:
    """Fetch the token owner's gists and keep the session ones.

    Raises:
        GistListError: GitHub returned a non-2xx status.
        requests.RequestException: the request itself failed.
    """
    response = requests.get(
        url,
        params={"per_page": per_page},
        headers={
            "Authorization": f"token {token}",
            "User-Agent": user_agent,
            "Accept": "application/vnd.github.v3+json",
        },
        timeout=REQUEST_TIMEOUT_SECONDS,
    )
    if not response.ok:
        raise GistListError(f"GitHub API error: {response.status_code}")

    gists = response.json()
    sessions = [summarize_gist(g) for g in gists if is_session_gist(g)]
    logger.info("Found %d session gists out of %d", len(sessions), len(gists))
    return sessions
