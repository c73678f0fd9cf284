"""
Runtime configuration for the Ri editor.

Settings come from, in increasing order of precedence: the defaults below,
RI_* environment variables, and command-line flags.
"""
import os
from dataclasses import dataclass, replace
from typing import Optional

from ri.errors import ConfigError
from ri.themes import get_theme

ENV_THEME = "RI_THEME"
ENV_FPS = "RI_FPS"
ENV_LOG_FILE = "RI_LOG_FILE"

DEFAULT_THEME = "default"
DEFAULT_FPS = 60


def parse_fps(value) -> int:
    """Validate a frame rate given as a string or int."""
    try:
        fps = int(value)
    except (TypeError, ValueError):
        raise ConfigError(f"fps must be an integer, got {value!r}") from None
    if fps <= 0:
        raise ConfigError(f"fps must be positive, got {fps}")
    return fps


@dataclass(frozen=True)
class Config:
    theme: str = DEFAULT_THEME
    fps: int = DEFAULT_FPS
    log_file: Optional[str] = None

    @classmethod
    def from_env(cls, environ=None) -> "Config":
        """
        Read RI_* environment variables. Values are kept as given; they are
        checked by validated() once flags have had a chance to replace them.
        """
        env = os.environ if environ is None else environ
        return cls(
            theme=env.get(ENV_THEME) or DEFAULT_THEME,
            fps=env.get(ENV_FPS) or DEFAULT_FPS,
            log_file=env.get(ENV_LOG_FILE) or None,
        )

    @classmethod
    def load(cls, args=None, environ=None) -> "Config":
        """Defaults, then the environment, then command-line flags; validated."""
        return cls.from_env(environ).with_args(args)

    def with_args(self, args) -> "Config":
        """Return a validated copy with any flags given on the command line applied."""
        changes = {}
        if getattr(args, "theme", None):
            changes["theme"] = args.theme
        if getattr(args, "fps", None) is not None:
            changes["fps"] = args.fps
        if getattr(args, "log_file", None):
            changes["log_file"] = str(args.log_file)
        return replace(self, **changes).validated()

    def validated(self) -> "Config":
        """Check the theme name and turn fps into a positive int."""
        get_theme(self.theme)
        return replace(self, fps=parse_fps(self.fps))

    @property
    def frame_budget(self) -> float:
        """Seconds available to one tick of the event loop."""
        return 1.0 / self.fps
