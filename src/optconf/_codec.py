"""Read and write ``key: value`` configuration files."""

from __future__ import annotations

import logging
import os
import time
from typing import IO, Dict, Iterable, List, Mapping, Optional, Union

from ._errors import (
    ConfigFileError,
    DuplicateOptionError,
    MalformedArgumentError,
    UnknownOptionError,
)
from ._registry import OptionRegistry

logger = logging.getLogger(__name__)

PathLike = Union[str, "os.PathLike[str]"]

COMMENT_PREFIX = "#"
KEY_SEPARATOR = ":"
HEADER = "# Created automatically by optconf"


def _open(path: PathLike, mode: str) -> IO[str]:
    try:
        return open(path, mode, encoding="utf-8")
    except (OSError, ValueError) as e:
        raise ConfigFileError(
            f"opening file '{os.fspath(path)}' failed, "
            "it either doesn't exist or is not accessible.",
            path=os.fspath(path),
        ) from e


# --- Reading ---


def _strip_whitespace(line: str) -> str:
    return "".join(line.split())


def loads_lines(lines: Iterable[str], registry: OptionRegistry) -> Dict[str, str]:
    """Parse configuration lines into a name -> raw value mapping.

    All whitespace is removed from each line before it is interpreted, so
    values cannot contain spaces.
    """
    values: Dict[str, str] = {}

    for line in lines:
        line = _strip_whitespace(line)
        if not line or line.startswith(COMMENT_PREFIX):
            continue

        key, separator, value = line.partition(KEY_SEPARATOR)
        if not separator:
            raise MalformedArgumentError(
                f"expected 'key: value' in the configuration file, got: {line}", option=key
            )

        if key not in registry:
            raise UnknownOptionError(
                f"read an unexpected option from the configuration file: {key}", option=key
            )
        if key in values:
            raise DuplicateOptionError(
                f"duplicate option found in the configuration file: {key}", option=key
            )
        values[key] = value

    return values


def loads(text: str, registry: OptionRegistry) -> Dict[str, str]:
    """Parse configuration text."""
    return loads_lines(text.splitlines(), registry)


def load(path: PathLike, registry: OptionRegistry) -> Dict[str, str]:
    """Read a configuration file.

    Raises:
        ConfigFileError: If the file cannot be opened or is not UTF-8 text
    """
    with _open(path, "r") as config:
        try:
            values = loads_lines(config, registry)
        except UnicodeDecodeError as e:
            raise ConfigFileError(
                f"reading file '{os.fspath(path)}' failed, it is not UTF-8 text: {e.reason}",
                path=os.fspath(path),
            ) from e

    logger.debug("Loaded %d option(s) from %s", len(values), os.fspath(path))
    return values


# --- Writing ---


def _timestamp() -> Optional[str]:
    """Locale formatted current time, or None if it cannot be produced."""
    try:
        return time.strftime("%c", time.localtime()) or None
    except (ValueError, OverflowError, OSError):
        return None


def _entries(registry: OptionRegistry, values: Mapping[str, str]) -> List[str]:
    lines = []
    for option in registry:
        if option.name in values:
            lines.append(f"{option.name}: {values[option.name]}")
        elif option.is_user_defined and option.default:
            lines.append(f"{option.name}: {option.default}")
    return lines


def dumps(
    registry: OptionRegistry,
    values: Mapping[str, str],
    *,
    timestamp: Optional[str] = None,
) -> str:
    """Render stored values and user defaults as configuration text.

    Args:
        registry: Options to write, in registry order
        values: Stored raw values, taking precedence over defaults
        timestamp: Text for the header comment; omitted from it when None
    """
    header = f"{HEADER} on {timestamp}" if timestamp else HEADER
    body = "".join(f"{line}\n" for line in _entries(registry, values))
    return f"\n{header}\n\n{body}\n"


def dump(path: PathLike, registry: OptionRegistry, values: Mapping[str, str]) -> None:
    """Append stored values and user defaults to a configuration file.

    Existing file content is kept.

    Raises:
        ConfigFileError: If the file cannot be opened
    """
    with _open(path, "a") as config:
        config.write(dumps(registry, values, timestamp=_timestamp()))

    logger.debug("Dumped options to %s", os.fspath(path))
