"""Entry point for ttytemp: python -m ttytemp."""

import argparse
import asyncio
import logging
import sys
from pathlib import Path
from typing import Optional, Sequence

from . import __version__
from .app import TtyTempApp
from .config import ConfigError, load_config
from .i18n import SUPPORTED_LANGUAGES, init_lang, t
from .models import DEFAULT_INTERVAL_SECONDS
from .sensors import SensorReadError


def setup_logging(verbose: bool, log_file: Optional[Path] = None) -> None:
    """Configure logging."""
    if log_file is None:
        # The chart owns the terminal: suppress all log output to avoid
        # corrupting the display
        logging.basicConfig(level=logging.CRITICAL + 1)
        return

    level = logging.DEBUG if verbose else logging.INFO
    format_str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

    logging.basicConfig(
        level=level,
        format=format_str,
        handlers=[logging.FileHandler(log_file, encoding="utf-8")],
    )

    # Reduce noise from libraries
    logging.getLogger("asyncio").setLevel(logging.WARNING)


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        prog="ttytemp",
        description="Live terminal chart of hardware temperature sensors",
        epilog="(Note: use q, Esc or ctrl-C to quit)",
    )

    parser.add_argument(
        "-v", "--version",
        action="version",
        version=f"%(prog)s version {__version__}",
        help="Show version info, then exit",
    )

    parser.add_argument(
        "-m", "--monochrome",
        action="store_true",
        default=None,
        help="Monochrome mode (no color escapes)",
    )

    parser.add_argument(
        "-c", "--cols",
        type=int,
        default=None,
        metavar="COLS",
        help="How wide is the screen? (overrides auto-detect)",
    )

    parser.add_argument(
        "-r", "--rows",
        type=int,
        default=None,
        metavar="ROWS",
        help="And how high? (overrides auto-detect)",
    )

    parser.add_argument(
        "-i", "--interval",
        type=int,
        default=None,
        metavar="SECS",
        help=(
            "Seconds between refreshes. "
            f"The default is {DEFAULT_INTERVAL_SECONDS}, and the minimum is 1, "
            "which is silently clamped."
        ),
    )

    parser.add_argument(
        "-C", "--config",
        type=Path,
        default=None,
        help="Path to an optional YAML configuration file",
    )

    parser.add_argument(
        "--thermal-dir",
        type=Path,
        default=None,
        metavar="DIR",
        help="Directory holding thermal_zone* entries (default: /sys/class/thermal)",
    )

    parser.add_argument(
        "--lang",
        choices=list(SUPPORTED_LANGUAGES),
        default=None,
        help="UI language: en (English, default) or fi (Finnish)",
    )

    parser.add_argument(
        "--demo",
        action="store_true",
        help="Chart synthetic demo data (no sensors needed)",
    )

    parser.add_argument(
        "--log-file",
        type=Path,
        default=None,
        metavar="PATH",
        help="Write log messages to this file (nothing is logged otherwise)",
    )

    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Enable verbose logging (with --log-file)",
    )

    return parser.parse_args(argv)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Main entry point."""
    args = parse_args(argv)
    setup_logging(args.verbose, args.log_file)

    logger = logging.getLogger(__name__)

    init_lang(args.lang or "en")
    try:
        config = load_config(args.config)
    except ConfigError as e:
        print(e, file=sys.stderr)
        return 1

    # CLI overrides the config file
    if args.lang is None and config.language != "en":
        init_lang(config.language)
    if args.monochrome:
        config.monochrome = True
    if args.rows is not None:
        config.rows = args.rows
    if args.cols is not None:
        config.columns = args.cols
    if args.interval is not None:
        config.interval = max(1, args.interval)
    if args.thermal_dir is not None:
        config.thermal_dir = args.thermal_dir

    try:
        app = TtyTempApp(config, demo=args.demo)
    except (ConfigError, SensorReadError) as e:
        logger.error("%s", e)
        print(e, file=sys.stderr)
        return 1

    try:
        asyncio.run(app.run())
        return 0
    except KeyboardInterrupt:
        logger.info("Interrupted by user")
        return 0
    except SensorReadError as e:
        logger.error("%s", e)
        print(t("err_sensor_failed", error=e), file=sys.stderr)
        return 1
    except Exception as e:
        logger.exception("Fatal error: %s", e)
        print(t("err_fatal", error=e), file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
