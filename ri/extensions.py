"""
Extension points for collaborators the editor core drives but does not own.

A Buffer receives the keystrokes of Insert and Select mode; a
CommandExecutor receives the command line when it is submitted with Enter.
Neither is attached by default.
"""
from abc import ABC, abstractmethod
from typing import Optional

from ri.keys import KeyEvent


class Buffer(ABC):
    """Text storage edited through Insert and Select mode."""

    @abstractmethod
    def insert_key(self, event: KeyEvent) -> None:
        """Handle a key press while the editor is in Insert mode."""

    @abstractmethod
    def select_key(self, event: KeyEvent) -> None:
        """Handle a key press while the editor is in Select mode."""


class CommandExecutor(ABC):
    """Runs commands typed on the ':' command line."""

    @abstractmethod
    def execute(self, command: str, editor) -> Optional[str]:
        """
        Run command against the editor.

        Return a message for the status bar, or None to leave it as is.
        Raise ri.errors.CommandError for a failure the user should see.
        """
