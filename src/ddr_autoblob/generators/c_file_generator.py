#!/usr/bin/env python3

"""Generation of the C file that includes every configured header.

The generated file is later run through the C preprocessor so structure
layouts can be extracted from the expanded headers.
"""

from collections.abc import Iterable
from pathlib import Path
from typing import TextIO

from ..domain.models import IncludeConfiguration
from ..infrastructure.logging import get_logger, log_timing

TOOL_NAME = "J9DDR AUTOBLOB GenerateInputCFile"
BANNER = f"/* GENERATED BY {TOOL_NAME}. DO NOT EDIT */"


class CFileGenerator:
    """Writes the preprocessor input file for an include configuration."""

    def __init__(self, banner: str = BANNER):
        self.banner = banner
        self.logger = get_logger(__name__)

    @log_timing
    def generate(self, output_path: Path, configuration: IncludeConfiguration) -> None:
        """
        Write the generated C file, replacing any existing content.

        Args:
            output_path: Destination file; its parent directory must exist
            configuration: Source of include paths, emitted in its order

        Raises:
            OSError: If the file cannot be opened, written or closed
        """
        output_path = Path(output_path)
        self.logger.info(f"Writing C file: {output_path.absolute()}")

        try:
            with open(output_path, "w", encoding="utf-8", newline="\n") as writer:
                self.write(writer, configuration)
        except OSError:
            self.logger.error("Error during write")
            raise

        self.logger.info("C file written")

    def write(self, writer: TextIO, configuration: IncludeConfiguration) -> None:
        """Write the banner and include directives to an open text stream."""
        writer.write(f"{self.banner}\n")
        writer.write("\n")
        writer.write("\n")
        write_c_includes(writer, configuration.iter_include_paths())

    def render(self, configuration: IncludeConfiguration) -> str:
        """Return the exact text generate() would write."""
        lines = [self.banner, "", ""]
        lines.extend(format_include(path) for path in configuration.iter_include_paths())
        return "\n".join(lines) + "\n"


def format_include(path: str) -> str:
    """Format a single quoted include directive."""
    return f'#include "{path}"'


def write_c_includes(writer: TextIO, include_paths: Iterable[str]) -> int:
    """
    Write one include directive per path.

    Returns:
        Number of directives written
    """
    count = 0
    for path in include_paths:
        writer.write(format_include(path) + "\n")
        count += 1
    return count
