"""
themes.py

Holds the Theme record and the built-in Ri themes. Colors are (r, g, b)
tuples in the 0..255 range; ui/screen.py turns them into curses color pairs.
"""
from dataclasses import dataclass

from ri.errors import ConfigError


@dataclass(frozen=True)
class Theme:
    """Named colors used by the renderer."""
    default_bg: tuple = (0, 0, 0)
    status_bar_bg: tuple = (0x14, 0x14, 0x16)
    title_fg: tuple = (87, 130, 247)
    text_fg: tuple = (255, 255, 255)


def get_builtin_themes():
    """
    Returns a dict mapping built-in theme names to Theme instances.
    """
    return {
        "default": Theme(),
        "boring": Theme(
            default_bg=(40, 42, 54),
            status_bar_bg=(68, 71, 90),
            title_fg=(98, 114, 164),
            text_fg=(248, 248, 242),
        ),
        "coral": Theme(
            default_bg=(30, 30, 30),
            status_bar_bg=(80, 60, 50),
            title_fg=(255, 165, 125),
            text_fg=(250, 240, 230),
        ),
        "catpuccin": Theme(
            default_bg=(30, 30, 46),
            status_bar_bg=(24, 24, 37),
            title_fg=(137, 180, 250),
            text_fg=(205, 214, 244),
        ),
    }


def get_theme(name: str) -> Theme:
    """Look up a built-in theme by name."""
    themes = get_builtin_themes()
    try:
        return themes[name]
    except KeyError:
        known = ", ".join(sorted(themes))
        raise ConfigError(f"unknown theme '{name}' (available: {known})") from None
