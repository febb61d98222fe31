from __future__ import annotations

from dataclasses import dataclass, field
import pydoc

from prompt_toolkit.application import Application
from prompt_toolkit.key_binding import KeyBindings
from prompt_toolkit.layout import Layout
from prompt_toolkit.layout.containers import HSplit
from prompt_toolkit.widgets import Label, RadioList

from .config import Settings, configure_logging
from .models import SessionSummary
from .pager import list_conversations, read_conversation
from .summary import summarize_item
from .utils import format_timestamp, shorten_text

logger = configure_logging()

LOAD_MORE = "load_more"


@dataclass
class TuiState:
    settings: Settings
    sessions: list[SessionSummary] = field(default_factory=list)
    next_cursor: str | None = None
    scanned_files: int = 0
    reached_scan_cap: bool = False


def load_next_page(state: TuiState) -> int:
    """Append the next page of sessions to ``state``; returns how many were added."""
    page = list_conversations(
        state.settings.resolve_codex_home(),
        state.settings.page_size,
        state.next_cursor,
        max_scan_files=state.settings.max_scan_files,
    )
    state.sessions.extend(summarize_item(item) for item in page.items)
    state.next_cursor = page.next_cursor
    state.scanned_files = page.scanned_files
    state.reached_scan_cap = page.reached_scan_cap
    return len(page.items)


def run_tui(settings: Settings | None = None) -> int:
    state = TuiState(settings=settings or Settings())
    try:
        load_next_page(state)
    except OSError as exc:
        logger.error("listing sessions failed: %s", exc)
        print(f"Failed to list sessions: {exc}")
        return 1

    while True:
        try:
            result = _session_list_menu(state)
        except OSError as exc:
            logger.warning("session browser I/O error: %s", exc)
            _show_message("Sessions", f"I/O error: {exc}")
            continue
        if result == "quit":
            return 0


def _session_list_menu(state: TuiState) -> str:
    while True:
        if not state.sessions:
            _show_message("Sessions", "No sessions found.")
            return "quit"
        options: list[tuple[object, str]] = [
            (idx, _format_session_line(session)) for idx, session in enumerate(state.sessions)
        ]
        if state.next_cursor is not None:
            options.append((LOAD_MORE, "Load more..."))
        header = f"Sessions loaded: {len(state.sessions)} (scanned {state.scanned_files} files)"
        if state.reached_scan_cap:
            header += " - scan cap reached, load more to continue"
        choice = _prompt_choice("Sessions", options, header)
        if choice == "quit":
            return "quit"
        if choice == LOAD_MORE:
            if load_next_page(state) == 0:
                _show_message("Sessions", "No older sessions.")
            continue
        selected = state.sessions[choice]
        _show_session(selected)


def _show_session(session: SessionSummary) -> None:
    content = read_conversation(session.path)
    _clear_screen()
    print(str(session.path))
    print("")
    pydoc.pager(content)


def _clear_screen() -> None:
    print("\033[2J\033[H", end="")


def _show_message(title: str, message: str) -> None:
    _clear_screen()
    print(title)
    print("")
    print(message)
    input("Press Enter to continue...")


def _prompt_choice(title: str, options: list[tuple[object, str]], header: str) -> object:
    """Run a full-screen radio list; returns the picked value or ``"quit"``."""
    radio = RadioList(options)
    kb = KeyBindings()

    @kb.add("enter", eager=True)
    def _select(event) -> None:
        radio._handle_enter()
        event.app.exit(result=radio.current_value)

    @kb.add("q", eager=True)
    @kb.add("c-c", eager=True)
    def _go_quit(event) -> None:
        event.app.exit(result="quit")

    rows = [Label(title), Label(header), Label(""), radio, Label(""), Label("q = quit")]
    app = Application(layout=Layout(HSplit(rows)), key_bindings=kb, full_screen=True)
    return app.run()


def _format_session_line(session: SessionSummary) -> str:
    timestamp = format_timestamp(session.started_at) or "unknown"
    cwd = shorten_text(session.cwd or "unknown", 60)
    preview = session.preview or ""
    return f"{timestamp} | {cwd} | {preview}"
