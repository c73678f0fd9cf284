"""
Terminal session handling for the Ri editor.

TerminalSession puts the terminal into application mode (alternate screen,
no automatic margins, hidden cursor, raw input) and takes it back out. Each
step that succeeds records how to undo itself, so leaving always reverses
exactly what was done, in reverse order.
"""
import curses
import os

from ri import logger
from ri.errors import TerminalError


def _put_capability(name: str) -> bool:
    """Emit the terminfo string capability `name`. Returns False if the terminal lacks it."""
    seq = curses.tigetstr(name)
    if not seq:
        return False
    curses.putp(seq)
    return True


class TerminalSession:
    """
    Context manager owning the terminal for the lifetime of the editor.

        with TerminalSession() as stdscr:
            ...
    """

    def __init__(self):
        self.stdscr = None
        self._undo = []

    @property
    def active(self) -> bool:
        return self.stdscr is not None

    def enter(self):
        """Switch the terminal into application mode and return the curses screen."""
        if self.active:
            return self.stdscr

        # Make ESC snappy
        os.environ.setdefault("ESCDELAY", "25")

        try:
            # initscr switches to the alternate screen
            self.stdscr = curses.initscr()
            self._undo.append(("alternate screen", curses.endwin))

            if _put_capability("rmam"):
                self._undo.append(("line wrap", lambda: _put_capability("smam")))
            else:
                logger.log("terminal has no rmam capability; line wrap left as is")

            previous = curses.curs_set(0)
            self._undo.append(("cursor", lambda: curses.curs_set(previous)))

            curses.noecho()
            self._undo.append(("echo", curses.echo))
            curses.raw()
            self._undo.append(("raw mode", curses.noraw))
            stdscr = self.stdscr
            stdscr.keypad(True)
            self._undo.append(("keypad", lambda: stdscr.keypad(False)))
            stdscr.nodelay(True)
        except curses.error as e:
            failed = str(e)
            try:
                self.leave()
            except TerminalError as restore_error:
                logger.log(f"terminal restore after failed enter: {restore_error}")
            raise TerminalError(f"cannot enter terminal application mode: {failed}") from e

        logger.log("terminal session entered")
        return self.stdscr

    def leave(self) -> None:
        """Undo everything enter() did, most recent first.

        Every step is attempted even if an earlier one fails; failures are
        reported together afterwards.
        """
        failures = []
        while self._undo:
            name, undo = self._undo.pop()
            try:
                undo()
            except curses.error as e:
                failures.append(f"{name}: {e}")
        self.stdscr = None
        if failures:
            raise TerminalError("cannot restore terminal: " + "; ".join(failures))
        logger.log("terminal session left")

    def __enter__(self):
        return self.enter()

    def __exit__(self, exc_type, exc, tb):
        try:
            self.leave()
        except TerminalError as e:
            if exc_type is None:
                raise
            # Don't hide the error that ended the session
            logger.log(str(e))
        return False
