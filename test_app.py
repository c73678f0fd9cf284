import curses
import time
from types import SimpleNamespace

import pytest

import ri.app as app_module
from ri.app import Application
from ri.config import Config
from ri.errors import IoError, TerminalError
from ri.modes import Mode
from ri.ui import screen

REAL_APPLY_THEME = screen.apply_theme


class DummyWindow:
    def __init__(self, pending=(), rows=24, cols=80):
        self.pending = list(pending)
        self.rows = rows
        self.cols = cols
        self.writes = []

    def get_wch(self):
        if not self.pending:
            raise curses.error("no input")
        return self.pending.pop(0)

    def getmaxyx(self):
        return self.rows, self.cols

    def erase(self):
        self.writes = []

    def addstr(self, y, x, text, attr=0):
        self.writes.append((y, x, text))

    def attrset(self, attr):
        pass

    def noutrefresh(self):
        pass


class DummySession:
    def __init__(self, window):
        self.window = window
        self.entered = 0
        self.exits = []

    def __enter__(self):
        self.entered += 1
        return self.window

    def __exit__(self, exc_type, exc, tb):
        self.exits.append(exc_type)
        return False


@pytest.fixture(autouse=True)
def quiet_terminal(monkeypatch):
    monkeypatch.setattr(screen.curses, "doupdate", lambda: None)
    monkeypatch.setattr(screen, "apply_theme", lambda stdscr, theme: screen.Palette())
    monkeypatch.setattr(app_module, "time", SimpleNamespace(monotonic=time.monotonic, sleep=lambda seconds: None))


def _app(pending=(), rows=24, cols=80):
    window = DummyWindow(pending, rows, cols)
    session = DummySession(window)
    app = Application(Config(), session=session)
    app.stdscr = window
    return app, session


def test_one_key_per_tick():
    app, _ = _app([":", "a", "b"])
    app.tick()
    assert app.editor.mode is Mode.COMMAND
    assert app.stdscr.pending == ["a", "b"]
    app.tick()
    assert app.editor.cmd_buf == "a"


def test_tick_without_input_still_renders():
    app, _ = _app([], rows=30, cols=100)
    app.tick()
    assert (app.rows, app.cols) == (30, 100)
    assert any(y == 28 for y, _, _ in app.stdscr.writes)


def test_ctrl_c_quits_from_command_mode_without_submitting():
    app, _ = _app([":", "w", "q", "\x03"])
    for _ in range(4):
        app.tick()
    assert app.quit
    assert app.editor.mode is Mode.COMMAND
    assert app.editor.cmd_buf == "wq"


@pytest.mark.parametrize("mode", list(Mode))
def test_ctrl_c_quits_from_every_mode(mode):
    app, _ = _app(["\x03"])
    app.editor.mode = mode
    app.poll_events()
    assert app.quit
    assert app.editor.mode is mode


def test_resize_moves_status_bar():
    app, _ = _app([], rows=24, cols=80)
    app.tick()
    assert any(y == 22 and text == "NOR" for y, _, text in app.stdscr.writes)

    app.stdscr.rows, app.stdscr.cols = 10, 40
    app.stdscr.pending.append(curses.KEY_RESIZE)
    app.tick()
    assert (app.rows, app.cols) == (10, 40)
    assert any(y == 8 and text == "NOR" for y, _, text in app.stdscr.writes)
    assert app.editor.mode is Mode.NORMAL


def test_tick_sleeps_only_the_remaining_budget(monkeypatch):
    clock = iter([10.0, 10.004])
    slept = []
    monkeypatch.setattr(app_module, "time", SimpleNamespace(monotonic=lambda: next(clock), sleep=slept.append))
    app, _ = _app()
    app.frame_budget = 0.01
    app.tick()
    assert slept == [pytest.approx(0.006)]


def test_slow_tick_does_not_sleep(monkeypatch):
    clock = iter([10.0, 10.5])
    slept = []
    monkeypatch.setattr(app_module, "time", SimpleNamespace(monotonic=lambda: next(clock), sleep=slept.append))
    app, _ = _app()
    app.tick()
    assert slept == []


def test_run_scenario_and_restore():
    app, session = _app([":", "q", "\x1b", "\x03"])
    app.run()
    assert app.quit
    assert app.editor.mode is Mode.NORMAL
    assert app.editor.cmd_buf == "q"
    assert session.entered == 1
    assert session.exits == [None]
    assert app.stdscr is None


def test_run_restores_terminal_on_fatal_error(monkeypatch):
    def broken():
        raise curses.error("terminal went away")

    monkeypatch.setattr(screen.curses, "doupdate", broken)
    app, session = _app([":"])
    with pytest.raises(IoError):
        app.run()
    assert session.exits == [IoError]


def test_run_restores_terminal_when_colors_fail(monkeypatch):
    def refuse():
        raise curses.error("start_color() returned ERR")

    monkeypatch.setattr(screen, "apply_theme", REAL_APPLY_THEME)
    monkeypatch.setattr(screen.curses, "has_colors", lambda: True)
    monkeypatch.setattr(screen.curses, "start_color", refuse)
    app, session = _app([":"])
    with pytest.raises(TerminalError, match="cannot set up theme colors"):
        app.run()
    assert session.exits == [TerminalError]
