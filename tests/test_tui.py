from rolloutlist.config import Settings
from rolloutlist.tui import TuiState, load_next_page


def _id(n: int) -> str:
    return f"00000000-0000-0000-0000-{n:012x}"


def test_load_next_page_accumulates(codex_home, write_rollout):
    for day in range(1, 4):
        write_rollout(f"2024-01-0{day}T10-00-00", _id(day))
    state = TuiState(settings=Settings(page_size=2, codex_home=codex_home))

    assert load_next_page(state) == 2
    assert state.next_cursor is not None
    assert load_next_page(state) == 1
    assert [s.session_id for s in state.sessions] == [_id(3), _id(2), _id(1)]
    assert load_next_page(state) == 0
    assert state.next_cursor is None


def test_session_list_menu_loads_more_then_quits(codex_home, write_rollout, monkeypatch):
    from rolloutlist import tui

    for day in range(1, 4):
        write_rollout(f"2024-01-0{day}T10-00-00", _id(day))
    state = TuiState(settings=Settings(page_size=2, codex_home=codex_home))
    load_next_page(state)

    offered = []
    answers = iter([tui.LOAD_MORE, "quit"])

    def fake_choice(title, options, header):
        offered.append([value for value, _ in options])
        return next(answers)

    monkeypatch.setattr(tui, "_prompt_choice", fake_choice)
    assert tui._session_list_menu(state) == "quit"
    assert offered == [[0, 1, tui.LOAD_MORE], [0, 1, 2, tui.LOAD_MORE]]
    assert len(state.sessions) == 3
