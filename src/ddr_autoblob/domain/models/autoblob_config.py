#!/usr/bin/env python3

"""Autoblob configuration: the list of headers fed to the preprocessor.

The configuration resource is a properties-style text file::

    # Headers pulled into the generated C file, in order
    headers = j9.h, j9comp.h \\
              j9port.h

Lines starting with ``#`` or ``!`` are comments, a trailing backslash joins
the next line, and keys may be separated from values by ``=`` or ``:``.
"""

import re
from collections.abc import Iterator, Mapping
from dataclasses import dataclass, field
from pathlib import Path
from types import MappingProxyType
from typing import Optional, Protocol

from ...infrastructure.logging import get_logger

logger = get_logger(__name__)

HEADERS_KEY = "headers"

_SEPARATOR = re.compile(r"\s*[=:]\s*")
_ENTRY_SPLITTER = re.compile(r"[,\s]+")


class ConfigurationError(ValueError):
    """Raised when a configuration resource cannot be read or parsed."""


class IncludeConfiguration(Protocol):
    """Anything able to enumerate include paths in a stable order."""

    def iter_include_paths(self) -> Iterator[str]: ...


@dataclass(frozen=True)
class Configuration:
    """Loaded autoblob configuration.

    Attributes:
        source: File the configuration was loaded from
        headers: Header entries in configuration order
        properties: Every key/value pair read, after overrides
    """

    source: Path
    headers: tuple[str, ...] = ()
    properties: Mapping[str, str] = field(default_factory=dict)

    def iter_include_paths(self) -> Iterator[str]:
        """Yield header entries in configuration order."""
        yield from self.headers

    def __len__(self) -> int:
        return len(self.headers)


def _logical_lines(text: str) -> Iterator[tuple[int, str]]:
    """Yield (line number, line) pairs with continuations joined and comments dropped."""
    pending: list[str] = []
    start_line = 0

    for line_number, raw_line in enumerate(text.splitlines(), 1):
        line = raw_line.strip() if not pending else raw_line.lstrip()

        if not pending:
            if not line or line[0] in "#!":
                continue
            start_line = line_number

        # An odd number of trailing backslashes continues the line
        trailing = len(line) - len(line.rstrip("\\"))
        if trailing % 2 == 1:
            pending.append(line[:-1])
            continue

        pending.append(line)
        yield start_line, "".join(pending).strip()
        pending = []

    if pending:
        yield start_line, "".join(pending).strip()


def parse_properties(text: str, source: Path) -> dict[str, str]:
    """
    Parse properties-style text into an ordered dictionary.

    Args:
        text: Raw file contents
        source: File name used in error messages

    Returns:
        Mapping of key to value; later keys replace earlier ones

    Raises:
        ConfigurationError: If an entry has an empty key
    """
    properties: dict[str, str] = {}

    for line_number, line in _logical_lines(text):
        match = _SEPARATOR.search(line)
        if match is None:
            key, value = line, ""
        else:
            key, value = line[: match.start()], line[match.end():]

        key = key.strip()
        if not key:
            raise ConfigurationError(f"{source}:{line_number}: entry has no key: {line!r}")

        properties[key] = value.strip()

    return properties


def _read_properties(path: Path) -> dict[str, str]:
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as e:
        raise ConfigurationError(f"Cannot read configuration file {path}: {e}") from e
    except UnicodeDecodeError as e:
        raise ConfigurationError(f"Configuration file {path} is not valid UTF-8: {e}") from e

    return parse_properties(text, path)


def split_entries(value: str) -> tuple[str, ...]:
    """Split a header list on commas and whitespace, dropping empty entries."""
    return tuple(entry for entry in _ENTRY_SPLITTER.split(value) if entry)


def load_configuration(config_file: Path, override_file: Optional[Path] = None) -> Configuration:
    """
    Load an autoblob configuration.

    Args:
        config_file: Primary configuration resource
        override_file: Optional secondary resource whose keys replace the primary's

    Returns:
        Configuration listing the headers to include

    Raises:
        ConfigurationError: If either file cannot be read or parsed
    """
    config_file = Path(config_file)
    logger.debug(f"Loading configuration from {config_file}")
    properties = _read_properties(config_file)

    if override_file is not None:
        override_file = Path(override_file)
        overrides = _read_properties(override_file)
        logger.debug(f"Applying {len(overrides)} override(s) from {override_file}")
        properties.update(overrides)

    headers = split_entries(properties.get(HEADERS_KEY, ""))
    if not headers:
        logger.warning(f"No '{HEADERS_KEY}' entries in {config_file}")
    else:
        logger.debug(f"Configuration lists {len(headers)} header(s)")

    return Configuration(
        source=config_file,
        headers=headers,
        properties=MappingProxyType(properties),
    )
