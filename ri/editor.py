"""
Editor state for Ri.

The Editor holds the current mode, the theme, the status message and the
command line. Key presses are dispatched on the current mode to the
handlers in ri.ui.input.
"""
from typing import Optional

from ri.extensions import Buffer, CommandExecutor
from ri.modes import Mode
from ri.themes import Theme
from ri.ui import input as key_input


class Editor:
    """
    Modal editor state machine. handle_key_event() is the only way keys
    change it.
    """

    def __init__(self, theme: Optional[Theme] = None,
                 buffer: Optional[Buffer] = None,
                 command_executor: Optional[CommandExecutor] = None):
        # Current editing mode
        self.mode = Mode.NORMAL
        self.theme = theme if theme is not None else Theme()

        # Shown after the mode label; None means nothing to show
        self.status_msg: Optional[str] = None

        # Text typed after ':'. Only meaningful in command mode.
        self.cmd_buf = ""

        self.buffer = buffer
        self.command_executor = command_executor

    def handle_key_event(self, event) -> None:
        """Apply one key press according to the current mode."""
        handler = key_input.MODE_HANDLERS[self.mode]
        handler(self, event)

    def set_status(self, msg: str) -> None:
        self.status_msg = msg

    def clear_status(self) -> None:
        self.status_msg = None

    def __repr__(self):
        return (f"Editor(mode={self.mode!s}, status_msg={self.status_msg!r}, "
                f"cmd_buf={self.cmd_buf!r})")
