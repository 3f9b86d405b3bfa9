"""Main entry point for the DDR Autoblob input C file generator."""

import argparse
import sys
from collections.abc import Sequence
from pathlib import Path
from typing import NoReturn, Optional, TextIO

from .domain.models import ConfigurationError, load_configuration
from .generators import CFileGenerator
from .infrastructure.config import Config
from .infrastructure.logging import LoggerSetup, get_logger, log_timing

PROGRAM_NAME = "ddr-autoblob-cfile"
EXPECTED_NUMBER_OF_ARGUMENTS = 2
USAGE = f"{PROGRAM_NAME} <config file> <output file>"


class UsageError(Exception):
    """Raised for a malformed command line."""


class _ArgumentParser(argparse.ArgumentParser):
    """Argument parser that reports problems instead of exiting."""

    def error(self, message: str) -> NoReturn:
        raise UsageError(message)


def create_arg_parser() -> argparse.ArgumentParser:
    """Build the command line parser."""
    parser = _ArgumentParser(
        prog=PROGRAM_NAME,
        usage=USAGE,
        description="Generate the C file containing the header includes to be pre-processed.",
        epilog="""
Examples:
  # Generate the input file for the headers listed in j9.properties
  ddr-autoblob-cfile config/j9.properties build/autoblob.c

  # Apply platform overrides and keep a debug log
  ddr-autoblob-cfile config/j9.properties build/autoblob.c \\
      --override config/linux_x86.properties --log-dir logs -v
        """,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "paths",
        nargs="*",
        metavar="FILE",
        help="<config file> <output file>",
    )
    parser.add_argument(
        "--override",
        type=Path,
        metavar="FILE",
        help="Configuration whose keys replace those of the config file",
    )
    parser.add_argument(
        "--log-dir",
        type=Path,
        metavar="DIR",
        help="Also write a debug log file into this directory",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable verbose output with debug logs",
    )
    return parser


def _usage(err: TextIO) -> None:
    print(file=err)
    print(USAGE, file=err)


@log_timing
def main(argv: Optional[Sequence[str]] = None, err: Optional[TextIO] = None) -> int:
    """
    Run the generator.

    Args:
        argv: Command line arguments, excluding the program name
        err: Sink for diagnostics (defaults to sys.stderr)

    Returns:
        Process exit status
    """
    if err is None:
        err = sys.stderr

    parser = create_arg_parser()
    try:
        args = parser.parse_intermixed_args(argv)
    except UsageError as e:
        print(f"Error: {e}", file=err)
        _usage(err)
        return 1

    config = Config.from_args(
        override_file=args.override,
        verbose=args.verbose or None,
        log_dir=args.log_dir,
    )

    LoggerSetup.initialize(config.log_dir, verbose=config.verbose)
    logger = get_logger(__name__)
    logger.info("J9DDR Autoblob GenerateInputCFile")

    if len(args.paths) != EXPECTED_NUMBER_OF_ARGUMENTS:
        print(
            f"Unexpected number of arguments. Expected {EXPECTED_NUMBER_OF_ARGUMENTS}, "
            f"actually got {len(args.paths)}",
            file=err,
        )
        _usage(err)
        return 1

    config.config_file, config.output_file = (Path(p) for p in args.paths)

    try:
        config.validate()
    except ValueError as e:
        print(e, file=err)
        return 1

    logger.debug(f"Config file: {config.config_file}")
    logger.debug(f"Output file: {config.output_file}")

    try:
        configuration = load_configuration(config.config_file, config.override_file)
    except ConfigurationError as e:
        print(f"Configuration error: {e}", file=err)
        return 1

    try:
        CFileGenerator().generate(config.output_file, configuration)
    except OSError as e:
        print(f"Error writing {config.output_file.absolute()}: {e}", file=err)
        return 1

    return 0


def cli() -> NoReturn:
    """Console script entry point."""
    sys.exit(main())


if __name__ == "__main__":
    cli()
