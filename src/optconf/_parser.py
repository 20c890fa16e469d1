"""Command-line parsing with configuration file merge."""

from __future__ import annotations

import logging
import sys
from types import MappingProxyType
from typing import Any, Dict, List, Mapping, Optional, Sequence, Tuple, Union

from rich.console import Console

from . import _codec
from ._errors import (
    DuplicateOptionError,
    InsufficientArgumentsError,
    MalformedArgumentError,
    MissingArgumentError,
    OptionError,
    UnknownOptionError,
)
from ._registry import BUILTIN_NAMES, HELP, LOAD, OptionRegistry
from ._usage import render_usage
from ._values import join_fields, retrieve_value
from .models import Option, ParseResult, ParseStatus, Polarity

logger = logging.getLogger(__name__)


class OptionParser:
    """Declare options, parse a command line and read typed values back.

    Usage:
        parser = OptionParser()
        parser.insert_option("count", 1, "How many", default="1")
        parser.insert_option_boolean("verbose", Polarity.STORE_TRUE)

        result = parser.parse(["prog", "--count", "5", "--verbose"])
        if result.ok:
            count = parser.retrieve("count", int)
    """

    def __init__(self, *, console: Optional[Console] = None) -> None:
        self.registry = OptionRegistry()
        self.prog = ""
        self._values: Dict[str, str] = {}
        self._console = console

    # --- Registration ---

    def insert_option(
        self, name: str, arity: int = 1, description: str = "", default: str = ""
    ) -> Option:
        return self.registry.insert_option(name, arity, description, default)

    def insert_option_boolean(
        self, name: str, polarity: Union[Polarity, str], description: str = ""
    ) -> Option:
        return self.registry.insert_option_boolean(name, polarity, description)

    # --- Parsing ---

    @property
    def values(self) -> Mapping[str, str]:
        """Raw values stored by the last successful parse."""
        return MappingProxyType(self._values)

    def parse(self, argv: Optional[Sequence[str]] = None) -> ParseResult:
        """Parse ``argv`` (``sys.argv`` by default), first token being the program.

        Errors never propagate: they are reported with the usage listing
        and returned as a ``ParseStatus.ERROR`` result.
        """
        if argv is None:
            argv = sys.argv
        argv = list(argv)

        self.prog = argv[0] if argv else ""
        self._values = {}

        try:
            values = self._parse_tokens(argv[1:])
            if values is None:
                return ParseResult(self.usage())
            self._merge_config(values)
            self._check_required(values)
        except OptionError as e:
            logger.debug("Parse of %s failed: %s", argv, e)
            return ParseResult(self.usage(str(e)), message=str(e), error=e)
        except Exception as e:
            logger.debug("Parse of %s failed unexpectedly", argv, exc_info=True)
            error = OptionError(f"{type(e).__name__}: {e}")
            error.__cause__ = e
            return ParseResult(self.usage(str(error)), message=str(error), error=error)

        self._values = values
        return ParseResult(ParseStatus.SUCCESS)

    def _parse_tokens(self, tokens: List[str]) -> Optional[Dict[str, str]]:
        """Collect command-line values; None when ``--help`` was given."""
        values: Dict[str, str] = {}
        i = 0

        while i < len(tokens):
            token = tokens[i]
            key = token.lstrip("-")
            if len(key) == len(token):
                raise MalformedArgumentError(
                    f"argument options must start with a single/double dash: {token}"
                )

            if key == HELP:
                return None

            option = self.registry.get(key)
            if option is None:
                raise UnknownOptionError(f"unknown argument: {key}", option=key)

            if option.is_flag:
                value = "1" if option.default == "0" else "0"
            else:
                fields = tokens[i + 1 : i + 1 + option.arity]
                if len(fields) < option.arity:
                    raise InsufficientArgumentsError(
                        f"insufficient number of argument values for '{key}': "
                        f"expected {option.arity}, got {len(fields)}",
                        option=key,
                    )
                value = join_fields(fields)
                i += option.arity

            if key in values:
                raise DuplicateOptionError(
                    f"duplicate option passed by command line: {key}", option=key
                )
            values[key] = value
            i += 1

        return values

    def _merge_config(self, values: Dict[str, str]) -> None:
        """Fill unset options from the ``--load`` file; command line wins."""
        path = values.get(LOAD)
        if path is None:
            return

        loaded = _codec.load(path, self.registry)
        for key, value in loaded.items():
            values.setdefault(key, value)
        values.pop(LOAD, None)
        logger.debug("Merged %d option(s) from %s", len(loaded), path)

    def _check_required(self, values: Mapping[str, str]) -> None:
        for option in self.registry:
            if option.name in BUILTIN_NAMES:
                continue
            if option.name not in values and not option.default:
                raise MissingArgumentError(
                    f"missing argument(s), e.g., {option.name}", option=option.name
                )

    # --- Retrieval ---

    def retrieve(self, name: str, type_: Any = str, index: int = 0) -> Any:
        """Return field ``index`` of option ``name`` converted to ``type_``.

        Raises:
            MissingArgumentError: If the option has no value and no default
            ConversionError: If the field is missing or does not parse
        """
        return retrieve_value(name, self.registry, self._values, type_, index)

    def retrieve_pair(self, name: str, first: Any = str, second: Any = str) -> Tuple[Any, Any]:
        """Return the first two fields of option ``name``."""
        return self.retrieve(name, first, 0), self.retrieve(name, second, 1)

    # --- Output ---

    def dump(self, path: _codec.PathLike) -> None:
        """Append stored values and user defaults to the file at ``path``."""
        _codec.dump(path, self.registry, self._values)

    def usage(self, message: str = "") -> ParseStatus:
        """Print the usage listing, and ``message`` as an error if given."""
        return render_usage(self.prog, self.registry, message, console=self._console)
