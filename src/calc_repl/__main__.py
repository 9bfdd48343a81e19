"""Main entry point for the interactive calculator."""

import argparse
from datetime import datetime, timezone
import glob
import logging
from logging.handlers import RotatingFileHandler
import os
import sys
from types import TracebackType
from typing import List

from calc import Calc, CalcError

from calc_repl.calc_repl import CalcRepl, format_result
from calc_repl.calc_repl_settings import LOG_LEVELS, CalcReplSettings


DEFAULT_SETTINGS_PATH = "~/.calc/settings.json"


def setup_logging(settings: CalcReplSettings) -> RotatingFileHandler:
    """
    Configure application logging with timestamped files and rotation.

    The file handler is attached to the root logger alongside any handlers
    already present.

    Args:
        settings: Settings providing the log directory, level and file limit

    Returns:
        The file handler that was installed
    """
    log_dir = os.path.expanduser(settings.log_dir)
    os.makedirs(log_dir, exist_ok=True)

    # Generate timestamp for log filename
    timestamp = datetime.now(timezone.utc).strftime("%Y-%m-%d-%H-%M-%S-%f")[:23]
    log_file = os.path.join(log_dir, f"{timestamp}.log")

    # Configure rotating file handler, max 1MB each
    handler = RotatingFileHandler(
        log_file,
        maxBytes=1024*1024,  # 1MB
        backupCount=settings.max_log_files - 1,
        encoding='utf-8'
    )

    handler.setFormatter(logging.Formatter('%(asctime)s - %(name)s - %(levelname)s - %(message)s'))

    root_logger = logging.getLogger()
    root_logger.setLevel(settings.numeric_log_level())
    root_logger.addHandler(handler)

    # Clean up old logs if we have too many
    cleanup_old_logs(log_dir, max_logs=settings.max_log_files)
    return handler


def cleanup_old_logs(log_dir: str, max_logs: int) -> None:
    """Remove oldest log files if we exceed maximum count."""
    log_files = glob.glob(os.path.join(log_dir, "*.log*"))
    log_files.sort(key=os.path.getctime)  # Sort by creation time

    # Remove oldest files if we have too many
    while len(log_files) > max_logs:
        try:
            os.remove(log_files.pop(0))  # Remove oldest file

        except OSError:
            pass  # Ignore errors removing old logs


def install_global_exception_handler() -> None:
    """Install a global exception handler for uncaught exceptions."""
    logger = logging.getLogger('GlobalExceptionHandler')

    def handle_exception(exc_type: type[BaseException], exc_value: BaseException, exc_traceback: TracebackType | None) -> None:
        """Handle uncaught exceptions and log them."""
        if issubclass(exc_type, KeyboardInterrupt):
            # Don't log keyboard interrupt
            sys.__excepthook__(exc_type, exc_value, exc_traceback)
            return

        logger.critical(
            "Uncaught exception",
            exc_info=(exc_type, exc_value, exc_traceback),
            stack_info=True
        )

    sys.excepthook = handle_exception


def load_settings(path: str) -> CalcReplSettings:
    """
    Load settings, falling back to defaults.

    A missing file at the default location is not an error. An explicitly
    requested file that cannot be read is reported and defaults are used.

    Args:
        path: Path to the settings file

    Returns:
        Loaded or default settings
    """
    settings_path = os.path.expanduser(path)
    if not os.path.exists(settings_path):
        if path != DEFAULT_SETTINGS_PATH:
            print(f"Settings file not found: {path}", file=sys.stderr)

        return CalcReplSettings.create_default()

    try:
        return CalcReplSettings.load(settings_path)

    except (OSError, ValueError) as e:
        print(f"Failed to load settings from {path}: {e}", file=sys.stderr)
        return CalcReplSettings.create_default()


def build_parser() -> argparse.ArgumentParser:
    """Build the command-line parser."""
    parser = argparse.ArgumentParser(
        prog="calc",
        description="Interactive arithmetic expression evaluator",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s                          # Start the interactive session
  %(prog)s -e "2 + 3 * (4 - 1) ^ 2"   # Evaluate one expression
        """
    )

    parser.add_argument('--expression', '-e', help='Evaluate one expression and exit')
    parser.add_argument('--settings', default=DEFAULT_SETTINGS_PATH,
                        help='Settings file path')
    parser.add_argument('--log-level', choices=LOG_LEVELS, help='Override the configured log level')
    parser.add_argument('--no-banner', action='store_true', help='Do not show help on start')
    return parser


def main(argv: List[str] | None = None) -> int:
    """Main function to run the calculator."""
    args = build_parser().parse_args(argv)

    settings = load_settings(args.settings)
    if args.log_level:
        settings.log_level = args.log_level

    if args.no_banner:
        settings.show_banner = False

    setup_logging(settings)
    install_global_exception_handler()

    if args.expression is not None:
        try:
            result = Calc().evaluate(args.expression)

        except CalcError as e:
            print(f"Error: {e.message}")
            return 1

        print(format_result(result, settings.integer_tolerance))
        return 0

    CalcRepl(settings).run()
    return 0


if __name__ == "__main__":
    sys.exit(main())
