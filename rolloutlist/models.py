from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from pathlib import Path
from typing import Any
import uuid


@dataclass(frozen=True, order=True)
class RolloutKey:
    """Identity and ordering of a rollout file.

    Keys compare by timestamp, then id. Listings run in descending key
    order, so the newest file comes first.
    """

    timestamp: datetime
    id: uuid.UUID


@dataclass(frozen=True)
class ConversationItem:
    path: Path
    # First up to 5 JSONL records parsed as JSON (includes meta line).
    head: list[Any] = field(default_factory=list)


@dataclass
class ConversationsPage:
    # Ordered newest first.
    items: list[ConversationItem]
    # Opaque token to resume after the last item, or None at the end.
    next_cursor: str | None
    # Files whose names decoded while scanning this request.
    scanned_files: int
    reached_scan_cap: bool


@dataclass
class SessionSummary:
    path: Path
    key: RolloutKey | None
    session_id: str | None
    started_at: datetime | None
    cwd: str | None
    originator: str | None
    cli_version: str | None
    repo_url: str | None
    branch: str | None
    preview: str | None
