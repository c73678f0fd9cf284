"""
Key events for the Ri editor.

curses reports input either as a str (a typed character, including control
characters when the terminal is in raw mode) or as an int keycode for
special keys. read_key() turns both into KeyEvent values so the editor never
has to look at raw curses input.
"""
import curses
from dataclasses import dataclass
from enum import Enum
from typing import Optional

ESC = "\x1b"
DEL = "\x7f"


class KeyCode(Enum):
    CHAR = "char"
    ENTER = "enter"
    ESC = "esc"
    BACKSPACE = "backspace"
    TAB = "tab"
    RESIZE = "resize"
    OTHER = "other"


@dataclass(frozen=True)
class KeyEvent:
    """A single key press."""
    code: KeyCode
    char: str = ""
    ctrl: bool = False
    # Original curses value, kept for keys Ri does not name
    raw: object = None

    def is_char(self, ch: str) -> bool:
        """True for an unmodified press of the character ch."""
        return self.code is KeyCode.CHAR and not self.ctrl and self.char == ch

    @property
    def is_printable(self) -> bool:
        return self.code is KeyCode.CHAR and not self.ctrl and self.char.isprintable()

    @property
    def is_quit_chord(self) -> bool:
        """Ctrl+C."""
        return self.code is KeyCode.CHAR and self.ctrl and self.char == "c"

    @classmethod
    def char_key(cls, ch: str, ctrl: bool = False) -> "KeyEvent":
        return cls(KeyCode.CHAR, ch, ctrl)


def translate(wch) -> KeyEvent:
    """Convert a value returned by window.get_wch() into a KeyEvent."""
    if isinstance(wch, int):
        if wch == curses.KEY_BACKSPACE:
            return KeyEvent(KeyCode.BACKSPACE, raw=wch)
        if wch == curses.KEY_ENTER:
            return KeyEvent(KeyCode.ENTER, raw=wch)
        if wch == curses.KEY_RESIZE:
            return KeyEvent(KeyCode.RESIZE, raw=wch)
        return KeyEvent(KeyCode.OTHER, raw=wch)

    if wch == ESC:
        return KeyEvent(KeyCode.ESC, raw=wch)
    if wch in (DEL, "\b"):
        return KeyEvent(KeyCode.BACKSPACE, raw=wch)
    if wch in ("\n", "\r"):
        return KeyEvent(KeyCode.ENTER, raw=wch)
    if wch == "\t":
        return KeyEvent(KeyCode.TAB, raw=wch)

    code = ord(wch)
    if code < 32:
        # Ctrl+A .. Ctrl+Z arrive as 1 .. 26 in raw mode
        return KeyEvent(KeyCode.CHAR, chr(code + 64).lower(), ctrl=True, raw=wch)
    return KeyEvent(KeyCode.CHAR, wch, raw=wch)


def read_key(window) -> Optional[KeyEvent]:
    """
    Return the next pending key press, or None when no input is waiting.
    The window must be in nodelay mode so this never blocks.
    """
    try:
        wch = window.get_wch()
    except curses.error:
        # nodelay get_wch signals "no input" with curses.error
        return None
    return translate(wch)
