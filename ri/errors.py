"""
Error types for the Ri editor.

Everything the editor raises on purpose derives from EditorError, so the
entry point can report it and exit with a failure status.
"""


class EditorError(Exception):
    """Base class for Ri errors."""


class TerminalError(EditorError):
    """The terminal could not be put into, or taken out of, application mode."""


class IoError(EditorError):
    """Writing a frame to the terminal failed."""


class ConfigError(EditorError):
    """A configuration value is invalid."""


class CommandError(EditorError):
    """Raised by a command executor when a submitted command fails.

    The message is shown to the user in the status bar.
    """
