"""
Editing modes for the Ri editor.
"""
from enum import Enum


class Mode(Enum):
    """The editor's keystroke-interpretation context.

    The value is the three-letter label shown in the status bar.
    """
    NORMAL = "NOR"
    INSERT = "INS"
    SELECT = "SEL"
    COMMAND = "CMD"

    def __str__(self):
        return self.value
