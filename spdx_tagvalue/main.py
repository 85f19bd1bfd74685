"""Main CLI entry point for spdx-tagvalue.

Provides commands: verify, convert
"""

import argparse
import logging
import sys
from typing import List, Optional

from rich.console import Console
from rich.logging import RichHandler

from spdx_tagvalue import __version__
from spdx_tagvalue.cli.convert import convert_command
from spdx_tagvalue.cli.verify import verify_command

logger = logging.getLogger("spdx_tagvalue.cli")


def setup_logging(verbose: bool = False, console: Optional[Console] = None) -> logging.Logger:
    """Route ``spdx_tagvalue`` log records to a Rich handler on stderr.

    Only the package logger is configured, so ``convert -o -`` can write the
    document to stdout while warnings and diagnostics go to stderr. Calling
    this again replaces the previous handler.

    Args:
        verbose: Log debug records instead of warnings and errors only.
        console: Console to render into; defaults to one bound to stderr.

    Returns:
        logging.Logger: The configured package logger.
    """
    package_logger = logging.getLogger("spdx_tagvalue")
    for existing in list(package_logger.handlers):
        if isinstance(existing, RichHandler):
            package_logger.removeHandler(existing)

    handler = RichHandler(
        console=console or Console(stderr=True),
        show_time=verbose,
        show_path=False,
        markup=False,
        rich_tracebacks=True,
        tracebacks_show_locals=verbose,
        log_time_format="[%H:%M:%S]",
    )
    handler.setFormatter(logging.Formatter("[%(name)s] %(message)s"))

    package_logger.addHandler(handler)
    package_logger.setLevel(logging.DEBUG if verbose else logging.WARNING)
    package_logger.propagate = False
    return package_logger


def _add_common_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "input",
        help="Tag-value document to read",
    )
    parser.add_argument(
        "-c",
        "--config",
        help="Configuration file (.toml or .json) or inline TOML/JSON string",
    )
    parser.add_argument(
        "--ignore-missing-license-text",
        action="store_true",
        help="Do not warn about extracted licenses without license text",
    )


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser."""
    parser = argparse.ArgumentParser(
        prog="spdx-tagvalue",
        description="spdx-tagvalue - SPDX tag-value reader and canonical writer",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable verbose logging",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # Verify command
    verify_parser = subparsers.add_parser(
        "verify",
        help="Parse a document and report warnings",
    )
    _add_common_arguments(verify_parser)
    verify_parser.add_argument(
        "--fail-on-warning",
        action="store_true",
        help="Exit with a non-zero code when any warning is reported",
    )

    # Convert command
    convert_parser = subparsers.add_parser(
        "convert",
        help="Parse a document and write it as canonical tag-value text",
    )
    _add_common_arguments(convert_parser)
    convert_parser.add_argument(
        "-o",
        "--output",
        required=True,
        help="Output file path, or - for stdout",
    )
    convert_parser.add_argument(
        "--no-headers",
        action="store_true",
        help="Omit ## section header comments",
    )

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Main CLI entry point.

    Args:
        argv: Arguments to parse instead of ``sys.argv[1:]``.

    Returns:
        int: Exit code.
    """
    parser = build_parser()
    args = parser.parse_args(argv)

    setup_logging(args.verbose)

    if args.command == "verify":
        return verify_command(args)
    elif args.command == "convert":
        return convert_command(args)
    else:
        parser.print_help()
        return 1


if __name__ == "__main__":
    sys.exit(main())
