from __future__ import annotations

from typing import Any

from .models import ConversationItem, SessionSummary
from .naming import parse_rollout_filename
from .utils import coerce_text, is_context_message, make_preview, parse_timestamp


def _unwrap_payload(payload: Any) -> Any:
    if isinstance(payload, dict) and "type" not in payload and "payload" in payload:
        nested = payload.get("payload")
        if isinstance(nested, dict):
            return nested
    return payload


def _normalize_content_blocks(content: Any) -> str | None:
    if content is None:
        return None
    if isinstance(content, str):
        return content
    if isinstance(content, dict):
        return coerce_text(content.get("text"))
    if isinstance(content, list):
        parts: list[str] = []
        for block in content:
            if isinstance(block, str):
                parts.append(block)
            elif isinstance(block, dict) and block.get("text") is not None:
                parts.append(str(block["text"]))
        if parts:
            return "".join(parts)
    return None


def _split_record(record: dict[str, Any]) -> tuple[str | None, Any]:
    """Return (record type, payload) for both wrapped and bare records."""
    record_type = record.get("type")
    if "payload" in record:
        return record_type, _unwrap_payload(record.get("payload"))
    if record_type is None and "id" in record and "timestamp" in record:
        # Early rollouts wrote the session meta as a bare first line.
        return "session_meta", record
    if record_type == "message":
        return "response_item", record
    return record_type, record


def summarize_item(item: ConversationItem) -> SessionSummary:
    summary = SessionSummary(
        path=item.path,
        key=parse_rollout_filename(item.path.name),
        session_id=None,
        started_at=None,
        cwd=None,
        originator=None,
        cli_version=None,
        repo_url=None,
        branch=None,
        preview=None,
    )

    for record in item.head:
        if not isinstance(record, dict):
            continue
        record_type, payload = _split_record(record)
        if not isinstance(payload, dict):
            continue
        if record_type == "session_meta" and summary.session_id is None:
            summary.session_id = coerce_text(payload.get("id"))
            summary.started_at = parse_timestamp(payload.get("timestamp"))
            summary.cwd = coerce_text(payload.get("cwd"))
            summary.originator = coerce_text(payload.get("originator"))
            summary.cli_version = coerce_text(payload.get("cli_version"))
            git = payload.get("git")
            if isinstance(git, dict):
                summary.repo_url = coerce_text(git.get("repository_url"))
                summary.branch = coerce_text(git.get("branch"))
        elif record_type == "turn_context":
            if summary.cwd is None:
                summary.cwd = coerce_text(payload.get("cwd"))
        elif record_type == "response_item" and summary.preview is None:
            if payload.get("type") == "message" and payload.get("role") == "user":
                text = _normalize_content_blocks(payload.get("content"))
                if text and not is_context_message(text):
                    summary.preview = make_preview(text)

    if summary.started_at is None and summary.key is not None:
        summary.started_at = summary.key.timestamp
    if summary.session_id is None and summary.key is not None:
        summary.session_id = str(summary.key.id)
    return summary
