"""
ri/ui/screen.py

Implements all drawing for the Ri editor: turning the editor theme into curses
colors, the centered welcome placeholder, the status bar and the command line.
Each tick the whole frame is drawn off-screen and pushed to the terminal in one
update.
"""

import curses
from dataclasses import dataclass
from wcwidth import wcswidth, wcwidth

from ri import logger
from ri.errors import IoError, TerminalError
from ri.modes import Mode

TITLE = "Ri - modern editor"
QUIT_HINT = "Press CTRL + c to quit."
CMD_PROMPT = ":"
CMD_CURSOR = "█"

# Gap between the mode label and the status message
STATUS_GAP = 3

# Free color slots for the theme colors
COLOR_DEFAULT_BG = 16
COLOR_STATUS_BG = 17
COLOR_TITLE_FG = 18
COLOR_TEXT_FG = 19

PAIR_DEFAULT = 1
PAIR_TITLE = 2
PAIR_TEXT = 3
PAIR_STATUS = 4

BASIC_COLORS = {
    curses.COLOR_BLACK: (0, 0, 0),
    curses.COLOR_RED: (205, 0, 0),
    curses.COLOR_GREEN: (0, 205, 0),
    curses.COLOR_YELLOW: (205, 205, 0),
    curses.COLOR_BLUE: (0, 0, 238),
    curses.COLOR_MAGENTA: (205, 0, 205),
    curses.COLOR_CYAN: (0, 205, 205),
    curses.COLOR_WHITE: (229, 229, 229),
}


@dataclass(frozen=True)
class Palette:
    """curses attributes for each thing the renderer paints."""
    default: int = 0
    title: int = 0
    text: int = 0
    status: int = 0


###############################################################################
# THEME
###############################################################################

def nearest_basic_color(rgb) -> int:
    """Pick the closest of the 8 basic curses colors to an (r, g, b) tuple."""
    def distance(item):
        _, (r, g, b) = item
        return (r - rgb[0]) ** 2 + (g - rgb[1]) ** 2 + (b - rgb[2]) ** 2
    color, _ = min(BASIC_COLORS.items(), key=distance)
    return color


def apply_theme(stdscr, theme) -> Palette:
    """
    Set up curses color pairs for the theme and return the matching Palette.
    A terminal that refuses the color setup ends the session with TerminalError.
    """
    try:
        return _init_theme_colors(stdscr, theme)
    except curses.error as e:
        raise TerminalError(f"cannot set up theme colors: {e}") from e


def _init_theme_colors(stdscr, theme) -> Palette:
    """
    With extended color support the exact RGB values are defined in free color
    slots. Otherwise each theme color falls back to the nearest basic color.
    """
    if not curses.has_colors():
        return Palette()
    curses.start_color()

    if curses.can_change_color() and curses.COLORS >= 256:
        def to_curses(rgb):
            return int(rgb[0]/255*1000), int(rgb[1]/255*1000), int(rgb[2]/255*1000)

        try:
            curses.init_color(COLOR_DEFAULT_BG, *to_curses(theme.default_bg))
            curses.init_color(COLOR_STATUS_BG, *to_curses(theme.status_bar_bg))
            curses.init_color(COLOR_TITLE_FG, *to_curses(theme.title_fg))
            curses.init_color(COLOR_TEXT_FG, *to_curses(theme.text_fg))
        except curses.error:
            logger.log("curses.error defining theme colors")
        default_bg, status_bg = COLOR_DEFAULT_BG, COLOR_STATUS_BG
        title_fg, text_fg = COLOR_TITLE_FG, COLOR_TEXT_FG
    else:
        default_bg = nearest_basic_color(theme.default_bg)
        status_bg = nearest_basic_color(theme.status_bar_bg)
        title_fg = nearest_basic_color(theme.title_fg)
        text_fg = nearest_basic_color(theme.text_fg)

    curses.init_pair(PAIR_DEFAULT, text_fg, default_bg)
    curses.init_pair(PAIR_TITLE, title_fg, default_bg)
    curses.init_pair(PAIR_TEXT, text_fg, default_bg)
    curses.init_pair(PAIR_STATUS, text_fg, status_bg)

    palette = Palette(
        default=curses.color_pair(PAIR_DEFAULT),
        title=curses.color_pair(PAIR_TITLE),
        text=curses.color_pair(PAIR_TEXT),
        status=curses.color_pair(PAIR_STATUS),
    )
    stdscr.bkgd(" ", palette.default)
    logger.log(f"theme applied: {theme}")
    return palette


###############################################################################
# TEXT HELPERS
###############################################################################

def text_width(text: str) -> int:
    """Number of terminal columns text occupies."""
    width = wcswidth(text)
    return width if width >= 0 else len(text)


def clip(text: str, columns: int) -> str:
    """Cut text so it fits in the given number of columns."""
    if columns <= 0:
        return ""
    used = 0
    for i, ch in enumerate(text):
        w = max(wcwidth(ch), 0)
        if used + w > columns:
            return text[:i]
        used += w
    return text


def printable(text: str) -> str:
    """Replace characters curses would interpret (newlines, NUL, escapes) with '?'."""
    return "".join(ch if ch.isprintable() else "?" for ch in text)


def centered_x(cols: int, text: str) -> int:
    """Column that centers text on a row of cols columns, never below 0."""
    return max(0, cols // 2 - text_width(text) // 2)


def put(app, y: int, x: int, text: str, attr: int = 0):
    """
    Draw text at (y, x), clipped to the viewport.
    The bottom-right cell is left alone; curses cannot write it without error.
    """
    if y < 0 or y >= app.rows or x < 0 or x >= app.cols:
        return
    room = app.cols - x
    if y == app.rows - 1:
        room -= 1
    text = clip(printable(text), room)
    if text:
        logger.safe_addstr(app.stdscr, y, x, text, attr)


###############################################################################
# FRAME
###############################################################################

def draw_welcome(app):
    """Draw the two centered placeholder lines."""
    row = app.rows // 2
    put(app, row, centered_x(app.cols, TITLE), TITLE, app.palette.title)
    put(app, row + 1, centered_x(app.cols, QUIT_HINT), QUIT_HINT, app.palette.text)


def draw_status_bar(app):
    """
    Draw the status bar on the second-to-last row: a full-width colored bar with the
    mode label and status message. In command mode the last row shows the command line.
    """
    if app.rows < 2:
        return
    editor = app.editor
    status_y = app.rows - 2
    label = str(editor.mode)

    put(app, status_y, 0, " " * app.cols, app.palette.status)
    put(app, status_y, 1, label, app.palette.status)
    if editor.status_msg:
        # Only the first line fits on the bar
        msg = editor.status_msg.splitlines()[0]
        put(app, status_y, 1 + len(label) + STATUS_GAP, msg, app.palette.status)

    # Back to the default background for everything drawn afterwards
    app.stdscr.attrset(app.palette.default)

    if editor.mode is Mode.COMMAND:
        draw_command_line(app)


def draw_command_line(app):
    """Draw ':' followed by the command buffer and a block cursor on the last row."""
    put(app, app.rows - 1, 0, CMD_PROMPT + app.editor.cmd_buf + CMD_CURSOR,
        app.palette.default)


def render(app):
    """
    Re-draw the entire screen. The viewport must already be sampled into
    app.rows / app.cols.
    """
    app.stdscr.erase()
    draw_welcome(app)
    draw_status_bar(app)
    try:
        app.stdscr.noutrefresh()
        curses.doupdate()
    except curses.error as e:
        raise IoError(f"cannot write frame to terminal: {e}") from e
