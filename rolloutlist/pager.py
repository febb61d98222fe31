"""Newest-first, cursor-paginated listing of recorded rollout files."""

from __future__ import annotations

import asyncio
from pathlib import Path

from .config import HEAD_RECORD_LIMIT, MAX_SCAN_FILES, configure_logging, get_sessions_root
from .cursor import cursor_for_item, decode_cursor
from .head import read_head
from .models import ConversationItem, ConversationsPage, RolloutKey
from .walker import collect_dirs_desc, collect_rollout_files

logger = configure_logging()


def _empty_page() -> ConversationsPage:
    return ConversationsPage(items=[], next_cursor=None, scanned_files=0, reached_scan_cap=False)


def traverse_directories_for_paths(
    root: Path,
    page_size: int,
    anchor: RolloutKey | None,
    max_scan_files: int = MAX_SCAN_FILES,
) -> ConversationsPage:
    """Walk ``root/YYYY/MM/DD`` newest first and build one page.

    Files at or newer than ``anchor`` are skipped. The scan cap is checked
    before entering each shard, so a request may scan past the cap by at
    most the remainder of the day directory it is in.
    """
    items: list[ConversationItem] = []
    scanned_files = 0
    anchor_passed = anchor is None

    def scan() -> None:
        nonlocal scanned_files, anchor_passed
        for _year, year_path in collect_dirs_desc(root):
            if scanned_files >= max_scan_files:
                return
            for _month, month_path in collect_dirs_desc(year_path):
                if scanned_files >= max_scan_files:
                    return
                for _day, day_path in collect_dirs_desc(month_path):
                    if scanned_files >= max_scan_files:
                        return
                    for key, path in collect_rollout_files(day_path):
                        scanned_files += 1
                        if scanned_files >= max_scan_files and len(items) >= page_size:
                            return
                        if not anchor_passed:
                            if key < anchor:
                                anchor_passed = True
                            else:
                                continue
                        if len(items) >= page_size:
                            return
                        head = read_head(path, HEAD_RECORD_LIMIT)
                        items.append(ConversationItem(path=path, head=head))

    scan()
    next_cursor = cursor_for_item(items[-1]) if items else None
    return ConversationsPage(
        items=items,
        next_cursor=next_cursor,
        scanned_files=scanned_files,
        reached_scan_cap=scanned_files >= max_scan_files,
    )


def _prepare(codex_home: Path, page_size: int, cursor: str | None) -> tuple[Path, RolloutKey | None] | None:
    root = get_sessions_root(codex_home)
    if page_size <= 0:
        return None
    if not root.exists():
        logger.info("sessions root not found: %s", root)
        return None
    anchor = decode_cursor(cursor) if cursor is not None else None
    if cursor is not None and anchor is None:
        logger.info("ignoring malformed cursor; listing from the newest session")
    return root, anchor


def list_conversations(
    codex_home: Path,
    page_size: int,
    cursor: str | None = None,
    *,
    max_scan_files: int = MAX_SCAN_FILES,
) -> ConversationsPage:
    """List one page of rollout files under ``codex_home/sessions``.

    Pass the returned ``next_cursor`` back in to continue after the last
    item. Ordering is timestamp desc, then UUID desc, so pages stay stable
    while new sessions are being written.
    """
    prepared = _prepare(codex_home, page_size, cursor)
    if prepared is None:
        return _empty_page()
    root, anchor = prepared
    return traverse_directories_for_paths(root, page_size, anchor, max_scan_files)


async def get_conversations(
    codex_home: Path,
    page_size: int,
    cursor: str | None = None,
    *,
    max_scan_files: int = MAX_SCAN_FILES,
) -> ConversationsPage:
    """Async variant of :func:`list_conversations`; the walk runs on a worker thread."""
    prepared = _prepare(codex_home, page_size, cursor)
    if prepared is None:
        return _empty_page()
    root, anchor = prepared
    try:
        return await asyncio.to_thread(traverse_directories_for_paths, root, page_size, anchor, max_scan_files)
    except OSError:
        raise
    except Exception as exc:
        logger.exception("session listing worker failed")
        raise OSError(f"join error: {exc}") from exc


def read_conversation(path: Path) -> str:
    try:
        with path.open("r", encoding="utf-8") as handle:
            return handle.read()
    except UnicodeDecodeError as exc:
        raise OSError(f"{path} is not valid UTF-8: {exc}") from exc


async def get_conversation(path: Path) -> str:
    """Load the full contents of one rollout file."""
    return await asyncio.to_thread(read_conversation, path)
