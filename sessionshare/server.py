"""HTTP endpoint listing shared session gists.

Run with: sessionshare serve

Routes:
- GET /api/gists
"""

from __future__ import annotations

import logging

from fastapi import FastAPI
from fastapi.responses import JSONResponse

from .config import SessionShareConfig, load_config, resolve_github_token
from .gists import DEFAULT_USER_AGENT, GISTS_URL, list_session_gists

logger = logging.getLogger(__name__)

CORS_HEADERS = {"Access-Control-Allow-Origin": "*"}


def _error_response(message: str) -> JSONResponse:
    return JSONResponse({"error": message}, status_code=500, headers=CORS_HEADERS)


def create_app(config: SessionShareConfig | None = None) -> FastAPI:
    """Build the app. Config is re-read per request unless one is given."""
    app = FastAPI(title="sessionshare")

    @app.get("/api/gists")
    def gists() -> JSONResponse:
        cfg = config if config is not None else load_config()
        token = resolve_github_token(cfg)
        if not token:
            return _error_response("GITHUB_TOKEN not configured")

        try:
            sessions = list_session_gists(
                token,
                url=cfg.get("gists_url", GISTS_URL),
                per_page=cfg.get("gists_per_page", 100),
                user_agent=cfg.get("user_agent", DEFAULT_USER_AGENT),
            )
        except Exception as e:
            logger.warning("Listing gists failed: %s", e)
            return _error_response(str(e))
        return JSONResponse(sessions, headers=CORS_HEADERS)

    return app


def serve(host: str, port: int) -> None:
    import uvicorn

    uvicorn.run(create_app(), host=host, port=port)
