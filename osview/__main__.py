"""Entry point: python -m osview"""

import argparse
import curses
import locale
import logging
import sys

from .app import App
from .config import APP_NAME, LOG_FORMAT, Settings, load_settings
from .ui.draw import init_colors


def parse_args(argv=None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog=APP_NAME, description="Browse OpenStack servers in the terminal")
    parser.add_argument("--compute-url", type=str,
                        help="Compute endpoint to list servers from "
                             "(default: taken from the service catalog)")
    parser.add_argument("--log-level", type=str,
                        help="Log level for the log file (default: WARNING)")
    return parser.parse_args(argv)


def setup_logging(settings: Settings) -> None:
    """Log to a file; the terminal belongs to curses."""
    log_path = settings.log_path
    log_path.parent.mkdir(parents=True, exist_ok=True)
    logging.basicConfig(
        filename=str(log_path),
        level=getattr(logging, settings.log_level, logging.WARNING),
        format=LOG_FORMAT,
    )


def run(stdscr, settings: Settings) -> None:
    stdscr.encoding = 'utf-8'
    init_colors()
    App(stdscr, settings).run()


def main(argv=None) -> int:
    args = parse_args(argv)
    logger = logging.getLogger(APP_NAME)

    try:
        settings = load_settings(compute_url=args.compute_url, log_level=args.log_level)
        setup_logging(settings)
        locale.setlocale(locale.LC_ALL, '')
        curses.wrapper(run, settings)
    except KeyboardInterrupt:
        pass
    except Exception:
        logger.exception("osview crashed")
        print(f"{APP_NAME} error: Something went wrong", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
