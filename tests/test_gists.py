"""Tests for sessionshare.gists — GitHub gist listing."""

from unittest.mock import MagicMock, patch

import pytest

from sessionshare.gists import GistListError, is_session_gist, list_session_gists, summarize_gist

SESSION_GIST = {
    "id": "g1",
    "description": "Fix login bug",
    "created_at": "2026-02-25T10:00:00Z",
    "files": {"session.html": {}, "session.jsonl": {}, "session.md": {}},
}
OTHER_GIST = {
    "id": "g2",
    "description": "dotfiles",
    "created_at": "2026-01-01T00:00:00Z",
    "files": {"vimrc": {}},
}


def _response(status=200, payload=None):
    response = MagicMock()
    response.ok = 200 <= status < 300
    response.status_code = status
    response.json.return_value = payload if payload is not None else []
    return response


class TestListSessionGists:
    def test_request_shape(self):
        with patch("sessionshare.gists.requests.get", return_value=_response()) as mock_get:
            list_session_gists("tok123", per_page=50, user_agent="tester")
        args, kwargs = mock_get.call_args
        assert args[0] == "https://api.github.com/gists"
        assert kwargs["params"] == {"per_page": 50}
        assert kwargs["headers"]["Authorization"] == "token tok123"
        assert kwargs["headers"]["User-Agent"] == "tester"
        assert kwargs["headers"]["Accept"] == "application/vnd.github.v3+json"
        assert kwargs["timeout"] > 0

    def test_filters_and_summarizes(self):
        payload = [SESSION_GIST, OTHER_GIST]
        with patch("sessionshare.gists.requests.get", return_value=_response(payload=payload)):
            sessions = list_session_gists("tok")
        assert sessions == [{
            "id": "g1",
            "description": "Fix login bug",
            "created_at": "2026-02-25T10:00:00Z",
            "files": 3,
        }]

    def test_error_status(self):
        with patch("sessionshare.gists.requests.get", return_value=_response(status=401)):
            with pytest.raises(GistListError, match="GitHub API error: 401"):
                list_session_gists("bad")


class TestGistHelpers:
    def test_needs_html_and_jsonl(self):
        assert is_session_gist(SESSION_GIST)
        assert not is_session_gist({"files": {"a.html": {}}})
        assert not is_session_gist({"files": {"a.jsonl": {}}})
        assert not is_session_gist({"files": None})

    def test_untitled_default(self):
        summary = summarize_gist({"id": "g3", "description": "", "files": {"a.html": {}, "a.jsonl": {}}})
        assert summary["description"] == "Untitled Session"
        assert summary["files"] == 2
