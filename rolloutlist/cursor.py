"""Pagination cursor tokens.

A cursor is ``<file_ts>|<uuid>`` where ``file_ts`` uses the same
``YYYY-MM-DDThh-mm-ss`` format as rollout file names. It marks the last item
served; the next page resumes strictly after it.
"""

from __future__ import annotations

from .config import configure_logging
from .models import ConversationItem, RolloutKey
from .naming import format_file_timestamp, parse_file_timestamp, parse_rollout_filename, parse_uuid

CURSOR_SEPARATOR = "|"

logger = configure_logging()


def encode_cursor(key: RolloutKey) -> str:
    return f"{format_file_timestamp(key.timestamp)}{CURSOR_SEPARATOR}{key.id}"


def decode_cursor(token: str) -> RolloutKey | None:
    """Return the anchor key for ``token``, or None if it does not decode.

    A malformed token restarts pagination from the newest file instead of
    raising.
    """
    file_ts, sep, id_text = token.partition(CURSOR_SEPARATOR)
    if not sep:
        logger.debug("cursor without separator ignored: %r", token)
        return None
    session_id = parse_uuid(id_text)
    if session_id is None:
        logger.debug("cursor with invalid id ignored: %r", token)
        return None
    timestamp = parse_file_timestamp(file_ts)
    if timestamp is None:
        logger.debug("cursor with invalid timestamp ignored: %r", token)
        return None
    return RolloutKey(timestamp=timestamp, id=session_id)


def cursor_for_item(item: ConversationItem) -> str | None:
    key = parse_rollout_filename(item.path.name)
    if key is None:
        return None
    return encode_cursor(key)
