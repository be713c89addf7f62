import json

import pytest

import sessionshare.config as config_module


def _message(role, content, timestamp=None):
    event = {"type": "message", "message": {"role": role, "content": content}}
    if timestamp:
        event["timestamp"] = timestamp
    return event


@pytest.fixture
def sample_events():
    return [
        {"type": "session_start", "id": "sess-123", "title": "Fix login bug", "cwd": "/home/dev/app"},
        _message(
            "user",
            "<system-reminder>be nice</system-reminder>\nPlease fix the login bug",
            "2026-02-25T10:00:00",
        ),
        _message(
            "assistant",
            [
                {"type": "thinking", "thinking": "Look at auth.py"},
                {"type": "text", "text": "Let me look."},
                {"type": "tool_use", "id": "tu_1", "name": "Read", "input": {"path": "auth.py"}},
            ],
            "2026-02-25T10:00:05",
        ),
        _message(
            "user",
            [{"type": "tool_result", "tool_use_id": "tu_1", "content": "API_KEY=sk-ant-REDACTED"}],
            "2026-02-25T10:00:06",
        ),
        _message(
            "assistant",
            [{"type": "text", "text": "Found it. The key was hardcoded."}],
            "2026-02-25T10:00:10",
        ),
        _message(
            "user",
            [{"type": "text", "text": "Thanks!"}, {"type": "image", "source": {}}],
            "2026-02-25T10:01:00",
        ),
    ]


@pytest.fixture
def session_file(tmp_path, sample_events):
    path = tmp_path / "session.jsonl"
    path.write_text("\n".join(json.dumps(e) for e in sample_events) + "\n")
    return path


@pytest.fixture
def isolated_config(tmp_path, monkeypatch):
    """Point the config module at a throwaway directory."""
    config_dir = tmp_path / "config"
    monkeypatch.setattr(config_module, "CONFIG_DIR", config_dir)
    monkeypatch.setattr(config_module, "CONFIG_FILE", config_dir / "config.json")
    monkeypatch.delenv("GITHUB_TOKEN", raising=False)
    return config_dir / "config.json"
