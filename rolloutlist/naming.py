"""Canonical rollout file names: ``rollout-YYYY-MM-DDThh-mm-ss-<uuid>.jsonl``."""

from __future__ import annotations

from datetime import datetime
from pathlib import Path
import re
import uuid

from .models import RolloutKey

FILENAME_PREFIX = "rollout-"
FILENAME_SUFFIX = ".jsonl"
FILE_TIMESTAMP_FORMAT = "%Y-%m-%dT%H-%M-%S"

_UUID_RE = re.compile(r"[0-9a-fA-F]{8}-[0-9a-fA-F]{4}-[0-9a-fA-F]{4}-[0-9a-fA-F]{4}-[0-9a-fA-F]{12}")


def format_file_timestamp(value: datetime) -> str:
    return value.strftime(FILE_TIMESTAMP_FORMAT)


def parse_file_timestamp(text: str) -> datetime | None:
    try:
        value = datetime.strptime(text, FILE_TIMESTAMP_FORMAT)
    except ValueError:
        return None
    # strptime tolerates unpadded fields; the file format does not.
    if format_file_timestamp(value) != text:
        return None
    return value


def parse_uuid(text: str) -> uuid.UUID | None:
    # uuid.UUID alone drops stray hyphens and takes int() syntax.
    if _UUID_RE.fullmatch(text) is None:
        return None
    try:
        return uuid.UUID(text)
    except ValueError:
        return None


def parse_rollout_filename(name: str) -> RolloutKey | None:
    if not name.startswith(FILENAME_PREFIX) or not name.endswith(FILENAME_SUFFIX):
        return None
    core = name[len(FILENAME_PREFIX) : -len(FILENAME_SUFFIX)]

    # The timestamp contains hyphens too, so scan from the right for the
    # split whose suffix parses as a UUID.
    idx = core.rfind("-")
    while idx != -1:
        session_id = parse_uuid(core[idx + 1 :])
        if session_id is not None:
            timestamp = parse_file_timestamp(core[:idx])
            # Only the rightmost id split is tried; a bad timestamp rejects the name.
            if timestamp is None:
                return None
            return RolloutKey(timestamp=timestamp, id=session_id)
        idx = core.rfind("-", 0, idx)
    return None


def format_rollout_filename(key: RolloutKey) -> str:
    return f"{FILENAME_PREFIX}{format_file_timestamp(key.timestamp)}-{key.id}{FILENAME_SUFFIX}"


def rollout_day_dir(sessions_root: Path, timestamp: datetime) -> Path:
    return sessions_root / f"{timestamp.year:04d}" / f"{timestamp.month:02d}" / f"{timestamp.day:02d}"
