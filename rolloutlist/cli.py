from __future__ import annotations

import argparse
import json
from pathlib import Path
import sys

from .config import Settings, configure_logging
from .models import ConversationsPage, SessionSummary
from .pager import list_conversations, read_conversation
from .summary import summarize_item
from .tui import run_tui
from .utils import format_timestamp, shorten_text

logger = configure_logging()


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(prog="rolloutlist", description="List recorded Codex sessions")
    parser.add_argument("--codex-home", type=str, help="Codex home directory (default: $CODEX_HOME or ~/.codex)")
    subparsers = parser.add_subparsers(dest="command")

    settings = Settings()
    list_parser = subparsers.add_parser("list", help="List one page of sessions, newest first")
    list_parser.add_argument("--page-size", type=int, default=settings.page_size, help="Sessions per page")
    list_parser.add_argument("--cursor", type=str, help="Resume after the cursor printed by a previous page")
    list_parser.add_argument("--json", action="store_true", help="Print the page as JSON")

    show_parser = subparsers.add_parser("show", help="Print a rollout file in full")
    show_parser.add_argument("path", type=str, help="Path to rollout JSONL")

    subparsers.add_parser("tui", help="Browse sessions interactively")

    args = parser.parse_args(argv)
    if args.codex_home:
        settings.codex_home = Path(args.codex_home).expanduser()

    if args.command in (None, "tui"):
        return run_tui(settings)
    if args.command == "list":
        if args.page_size < 0:
            parser.error("--page-size must not be negative")
        settings.page_size = args.page_size
        return _list_cmd(args, settings)
    if args.command == "show":
        return _show_cmd(args)

    parser.print_help()
    return 0


def _list_cmd(args: argparse.Namespace, settings: Settings) -> int:
    try:
        page = list_conversations(
            settings.resolve_codex_home(),
            settings.page_size,
            args.cursor,
            max_scan_files=settings.max_scan_files,
        )
    except OSError as exc:
        logger.error("listing sessions failed: %s", exc)
        print(f"Failed to list sessions: {exc}", file=sys.stderr)
        return 1

    if args.json:
        print(json.dumps(page_to_dict(page), indent=2, ensure_ascii=False))
        return 0

    if not page.items:
        print("No sessions found.")
    for item in page.items:
        print(format_summary_line(summarize_item(item)))
    print("")
    print(f"scanned: {page.scanned_files}" + (" (scan cap reached)" if page.reached_scan_cap else ""))
    if page.next_cursor:
        print(f"next cursor: {page.next_cursor}")
    return 0


def _show_cmd(args: argparse.Namespace) -> int:
    path = Path(args.path).expanduser()
    try:
        content = read_conversation(path)
    except OSError as exc:
        print(f"Failed to read {path}: {exc}", file=sys.stderr)
        return 1
    sys.stdout.write(content)
    return 0


def page_to_dict(page: ConversationsPage) -> dict:
    return {
        "items": [{"path": str(item.path), "head": item.head} for item in page.items],
        "next_cursor": page.next_cursor,
        "scanned_files": page.scanned_files,
        "reached_scan_cap": page.reached_scan_cap,
    }


def format_summary_line(summary: SessionSummary) -> str:
    timestamp = format_timestamp(summary.started_at) or "unknown"
    label = summary.session_id or summary.path.name
    cwd = shorten_text(summary.cwd or "unknown", 60)
    preview = summary.preview or ""
    return f"{timestamp} | {label} | {cwd} | {preview}"


if __name__ == "__main__":
    raise SystemExit(main())
