"""
Main entry point for the Ri editor.
"""
import argparse
import sys
from importlib.metadata import PackageNotFoundError, version

from ri import logger
from ri.app import Application
from ri.config import Config
from ri.errors import EditorError
from ri.themes import get_builtin_themes


def get_version() -> str:
    try:
        return version("ri")
    except PackageNotFoundError:
        return "0.0.0"


def parse_args(argv=None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="ri",
        description="Ri - modal terminal text editor",
    )
    parser.add_argument(
        "--theme",
        choices=sorted(get_builtin_themes()),
        help="Color theme (default: $RI_THEME or 'default')",
    )
    parser.add_argument(
        "--fps",
        type=int,
        help="Frames drawn per second (default: $RI_FPS or 60)",
    )
    parser.add_argument(
        "--log-file",
        help="Append debug log lines to this file (default: $RI_LOG_FILE, off when unset)",
    )
    parser.add_argument(
        "-v", "--version",
        action="version",
        version=f"%(prog)s {get_version()}",
    )
    return parser.parse_args(argv)


def main(argv=None) -> int:
    """Run the editor. Returns the process exit status."""
    args = parse_args(argv)
    try:
        config = Config.load(args)
        logger.configure(config.log_file)
        Application(config).run()
    except (EditorError, OSError) as e:
        # The session has already restored the terminal at this point
        logger.log(f"fatal: {e}")
        print(f"ri: {e}", file=sys.stderr)
        return 1
    return 0


def run():
    """Console script entry point."""
    sys.exit(main())


if __name__ == "__main__":
    run()
