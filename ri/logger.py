"""
Debug log for Ri.

Nothing is written until configure() names a file (from --log-file or
RI_LOG_FILE). After that each log() call appends one "[timestamp] message"
line. safe_addstr() is the single place the renderer hands text to curses;
a failed draw is recorded here instead of ending the session.
"""
import curses
import datetime

# None until configure() is called with a path
LOG_FILE_PATH = None


def configure(path) -> None:
    """Send log lines to path, or switch logging off when path is empty."""
    global LOG_FILE_PATH
    LOG_FILE_PATH = str(path) if path else None


def log(message: str) -> None:
    """Append message to the log file, if one is configured."""
    if LOG_FILE_PATH is None:
        return
    try:
        with open(LOG_FILE_PATH, 'a', encoding='utf-8') as f:
            timestamp = datetime.datetime.now().strftime("%Y-%m-%d %H:%M:%S")
            f.write(f"[{timestamp}] {message}\n")
    except OSError:
        # An unwritable log file must not end the editing session.
        pass


def safe_addstr(window, y: int, x: int, text: str, attr: int = 0) -> None:
    """Draw already-clipped text; a curses.error is logged with its position."""
    try:
        window.addstr(y, x, text, attr)
    except curses.error:
        log(f"draw failed at row {y}, col {x}: {text!r}")
