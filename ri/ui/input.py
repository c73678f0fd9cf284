"""
Input handling for the Ri editor.

One handler per mode. Each takes the editor and a KeyEvent and updates the
editor accordingly; none of them can fail on unexpected input.
"""
from ri import logger
from ri.errors import CommandError
from ri.keys import KeyCode
from ri.modes import Mode


def set_mode(editor, mode: Mode):
    """Switch mode and log the transition."""
    if editor.mode is not mode:
        logger.log(f"mode: {editor.mode} -> {mode}")
    editor.mode = mode


def handle_normal_mode(editor, event):
    """Handle a key press in normal mode."""
    if event.is_char(":"):
        editor.cmd_buf = ""
        set_mode(editor, Mode.COMMAND)
        return
    # Other keys are reserved for editing commands


def handle_insert_mode(editor, event):
    """Handle a key press in insert mode."""
    if editor.buffer is not None:
        editor.buffer.insert_key(event)


def handle_select_mode(editor, event):
    """Handle a key press in select mode."""
    if editor.buffer is not None:
        editor.buffer.select_key(event)


def handle_command_mode(editor, event):
    """Handle a key press in command (:) mode."""
    if event.code is KeyCode.ESC:
        # Leave the command line as typed; it is not submitted
        set_mode(editor, Mode.NORMAL)
        return
    if event.code is KeyCode.BACKSPACE:
        editor.cmd_buf = editor.cmd_buf[:-1]
        return
    if event.code is KeyCode.ENTER:
        submit_command(editor)
        return
    if event.is_printable:
        editor.cmd_buf += event.char


def submit_command(editor):
    """
    Hand the command line to the attached executor and return to normal mode.
    Without an executor, Enter does nothing.
    """
    executor = editor.command_executor
    if executor is None:
        return
    cmd = editor.cmd_buf
    set_mode(editor, Mode.NORMAL)
    logger.log(f"command: {cmd}")
    try:
        result = executor.execute(cmd, editor)
    except CommandError as e:
        logger.log(f"command failed: {e}")
        editor.set_status(str(e))
        return
    if result is not None:
        editor.set_status(result)


MODE_HANDLERS = {
    Mode.NORMAL: handle_normal_mode,
    Mode.INSERT: handle_insert_mode,
    Mode.SELECT: handle_select_mode,
    Mode.COMMAND: handle_command_mode,
}
