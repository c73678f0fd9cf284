"""
Application driver for the Ri editor.

Owns the terminal session and the editor and runs the fixed-rate loop:
poll one key (never blocking), dispatch it, redraw, sleep out the frame.
"""
import time

from ri import keys, logger
from ri.config import Config
from ri.editor import Editor
from ri.keys import KeyCode
from ri.terminal import TerminalSession
from ri.themes import get_theme
from ri.ui import screen


class Application:
    def __init__(self, config=None, session=None, editor=None):
        config = config if config is not None else Config()
        self.config = config
        self.session = session if session is not None else TerminalSession()
        self.editor = editor if editor is not None else Editor(theme=get_theme(config.theme))

        # Terminal size, re-sampled before every frame
        self.rows = 0
        self.cols = 0

        self.stdscr = None
        self.palette = screen.Palette()
        self.frame_budget = config.frame_budget

        # Should we quit in the next loop iteration?
        self.quit = False

    def run(self):
        """Take over the terminal and loop until quit. The terminal is restored on every exit path."""
        with self.session as stdscr:
            self.stdscr = stdscr
            self.palette = screen.apply_theme(stdscr, self.editor.theme)
            while not self.quit:
                self.tick()
        self.stdscr = None
        logger.log("editor exited")

    def tick(self):
        """One iteration: input, dispatch, render, then sleep for what is left of the frame."""
        started = time.monotonic()
        self.poll_events()
        self.refresh()
        remaining = self.frame_budget - (time.monotonic() - started)
        if remaining > 0:
            time.sleep(remaining)

    def poll_events(self):
        """Consume at most one pending key press."""
        event = keys.read_key(self.stdscr)
        if event is None:
            return
        if event.is_quit_chord:
            logger.log("ctrl+c: quit")
            self.quit = True
            return
        if event.code is KeyCode.RESIZE:
            # Not a key press; the next refresh picks up the new size
            return
        self.editor.handle_key_event(event)

    def refresh(self):
        """Sample the terminal size and draw a frame."""
        self.rows, self.cols = self.stdscr.getmaxyx()
        screen.render(self)
