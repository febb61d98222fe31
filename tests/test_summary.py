from datetime import datetime, timezone
from pathlib import Path

from rolloutlist.models import ConversationItem
from rolloutlist.summary import summarize_item

SID = "0199a213-81c0-7800-8aa1-bbab2a035a53"
PATH = Path(f"/s/2025/01/03/rollout-2025-01-03T12-00-00-{SID}.jsonl")


def test_summarize_wrapped_records():
    head = [
        {
            "type": "session_meta",
            "payload": {
                "id": SID,
                "timestamp": "2025-01-03T12:00:00.123Z",
                "cwd": "/work/repo",
                "originator": "codex_cli_rs",
                "cli_version": "0.30.0",
                "git": {"repository_url": "git@example.com:repo.git", "branch": "main"},
            },
        },
        {
            "type": "response_item",
            "payload": {
                "type": "message",
                "role": "user",
                "content": [{"type": "input_text", "text": "<environment_context>cwd</environment_context>"}],
            },
        },
        {
            "type": "response_item",
            "payload": {
                "type": "message",
                "role": "user",
                "content": [{"type": "input_text", "text": "  fix the\nflaky   test "}],
            },
        },
    ]
    summary = summarize_item(ConversationItem(path=PATH, head=head))
    assert summary.session_id == SID
    assert summary.started_at == datetime(2025, 1, 3, 12, 0, 0, 123000, tzinfo=timezone.utc)
    assert summary.cwd == "/work/repo"
    assert summary.repo_url == "git@example.com:repo.git"
    assert summary.branch == "main"
    assert summary.cli_version == "0.30.0"
    assert summary.preview == "fix the flaky test"


def test_summarize_bare_records():
    head = [
        {"id": SID, "timestamp": "2025-01-03T12:00:00Z", "instructions": None},
        {"type": "message", "role": "user", "content": [{"type": "input_text", "text": "hello"}]},
    ]
    summary = summarize_item(ConversationItem(path=PATH, head=head))
    assert summary.session_id == SID
    assert summary.preview == "hello"


def test_summarize_empty_head_falls_back_to_filename():
    summary = summarize_item(ConversationItem(path=PATH, head=[]))
    assert summary.session_id == SID
    assert summary.started_at == datetime(2025, 1, 3, 12, 0, 0)
    assert summary.preview is None
    assert summary.cwd is None
