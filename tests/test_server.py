"""Tests for sessionshare.server — the /api/gists endpoint."""

from unittest.mock import patch

import pytest
from fastapi.testclient import TestClient

from sessionshare.config import DEFAULT_CONFIG
from sessionshare.gists import GistListError
from sessionshare.server import create_app


@pytest.fixture
def no_env_token(monkeypatch):
    monkeypatch.delenv("GITHUB_TOKEN", raising=False)


def _client(**overrides):
    return TestClient(create_app(config={**DEFAULT_CONFIG, **overrides}))


class TestGistsEndpoint:
    def test_missing_token(self, no_env_token):
        response = _client().get("/api/gists")
        assert response.status_code == 500
        assert response.json() == {"error": "GITHUB_TOKEN not configured"}
        assert response.headers["access-control-allow-origin"] == "*"

    def test_success(self, no_env_token):
        sessions = [{"id": "g1", "description": "x", "created_at": None, "files": 2}]
        with patch("sessionshare.server.list_session_gists", return_value=sessions) as mock_list:
            response = _client(github_token="stored").get("/api/gists")
        assert response.status_code == 200
        assert response.json() == sessions
        assert response.headers["access-control-allow-origin"] == "*"
        assert mock_list.call_args.args == ("stored",)
        assert mock_list.call_args.kwargs["per_page"] == 100

    def test_upstream_error(self, no_env_token):
        with patch("sessionshare.server.list_session_gists", side_effect=GistListError("GitHub API error: 401")):
            response = _client(github_token="stored").get("/api/gists")
        assert response.status_code == 500
        assert response.json() == {"error": "GitHub API error: 401"}
        assert response.headers["access-control-allow-origin"] == "*"

    def test_env_token_wins(self, monkeypatch):
        monkeypatch.setenv("GITHUB_TOKEN", "from-env")
        with patch("sessionshare.server.list_session_gists", return_value=[]) as mock_list:
            response = _client(github_token="stored").get("/api/gists")
        assert response.status_code == 200
        assert mock_list.call_args.args == ("from-env",)

    def test_config_read_per_request(self, no_env_token):
        client = TestClient(create_app())
        with patch("sessionshare.server.load_config", return_value=dict(DEFAULT_CONFIG)) as mock_load:
            client.get("/api/gists")
            client.get("/api/gists")
        assert mock_load.call_count == 2
