"""CLI entry point for autohide — I/O boundary only."""

from __future__ import annotations

import argparse
import logging
import sys

from autohide import AutohideError, WatchError, __version__
from autohide.matcher import MatchFilters
from autohide.runner import Config, build_config, run_immediate, run_watch

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    """Build and return the CLI argument parser.

    Returns:
        argparse.ArgumentParser: Configured parser for the ``autohide`` command.
    """
    parser = argparse.ArgumentParser(
        prog="autohide",
        description="Hide files and directories by name or extension, once or as they appear",
    )
    parser.add_argument(
        "directories",
        nargs="+",
        help='Directories to watch (e.g. "C:\\Users\\user\\Documents" or "test/test")',
    )
    parser.add_argument(
        "-n",
        "--file-names",
        nargs="+",
        action="extend",
        default=[],
        dest="file_names",
        help='File and directory names to hide (e.g. "file.txt" or "file")',
    )
    parser.add_argument(
        "-x",
        "--file-extensions",
        nargs="+",
        action="extend",
        default=[],
        dest="file_extensions",
        help='File extensions to hide (e.g. "txt" or ".txt")',
    )
    parser.add_argument(
        "-r",
        "--recursive",
        action="store_true",
        help="Include all subdirectories",
    )
    parser.add_argument(
        "-c",
        "--case-sensitive",
        action="store_true",
        dest="case_sensitive",
        help="Compare names and extensions case-sensitively",
    )
    parser.add_argument(
        "--dry-run",
        "--test",
        action="store_true",
        dest="dry_run",
        help="Print the paths that would be hidden instead of hiding them",
    )
    parser.add_argument(
        "-w",
        "--watch",
        action="store_true",
        help="Watch for new and renamed entries and hide them as they appear",
    )
    parser.add_argument(
        "-i",
        "--immediate",
        action="store_true",
        help="Hide every matching entry that already exists",
    )
    parser.add_argument(
        "-t",
        "--file-types",
        nargs="+",
        choices=["file", "directory"],
        default=["file", "directory"],
        dest="file_types",
        help="Kinds of entries to hide (default: file directory)",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="count",
        default=0,
        help="Log hidden entries (-v) and skipped entries (-vv)",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    return parser


def _build_config(args: argparse.Namespace) -> Config:
    """Turn parsed arguments into a validated configuration.

    Raises:
        AutohideError: On invalid directories or when no mode is enabled.
    """
    filters = MatchFilters.build(
        names=args.file_names,
        extensions=args.file_extensions,
        case_sensitive=args.case_sensitive,
        hide_files="file" in args.file_types,
        hide_directories="directory" in args.file_types,
    )
    return build_config(
        args.directories,
        filters,
        recursive=args.recursive,
        dry_run=args.dry_run,
        watch=args.watch,
        immediate=args.immediate,
    )


def _run_with_args(args: argparse.Namespace) -> None:
    config = _build_config(args)

    if config.dry_run:
        sys.stdout.write("Test mode enabled. No files will be hidden.\n")

    if config.immediate:
        if config.dry_run:
            sys.stdout.write("Running immediate mode...\n")
        failures = run_immediate(config)
        if failures:
            logger.warning("Immediate mode finished with %d errors", failures)

    if config.watch:
        if config.dry_run:
            sys.stdout.write("Running watch mode...\n")
        run_watch(config)


def run_autohide(argv: list[str] | None = None) -> None:
    """Run autohide with provided CLI args.

    Args:
        argv: Command-line argument list without program name. If ``None``,
            uses process arguments via ``argparse`` defaults.

    Raises:
        AutohideError: On configuration errors, before anything is touched.
        WatchError: When the watch loop fails.
    """
    parser = build_parser()
    args = parser.parse_args(argv)
    _run_with_args(args)


def _configure_logging(verbosity: int) -> None:
    level = logging.WARNING
    if verbosity == 1:
        level = logging.INFO
    elif verbosity > 1:
        level = logging.DEBUG
    logging.basicConfig(
        level=level,
        format="autohide: %(levelname)s: %(message)s",
        stream=sys.stderr,
    )


def main() -> None:
    """Run the CLI entry point with process arguments.

    Exits with code 1 on configuration errors and fatal watch errors,
    and with code 0 when interrupted.
    """
    parser = build_parser()
    args = parser.parse_args()  # single parse
    _configure_logging(args.verbose)

    try:
        _run_with_args(args)
    except (AutohideError, WatchError) as exc:
        sys.stderr.write(f"autohide: {exc}\n")
        sys.exit(1)
    except KeyboardInterrupt:
        sys.exit(0)
