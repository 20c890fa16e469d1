"""Ordered registry of declared options."""

from __future__ import annotations

from typing import Dict, Iterator, List, Optional, Union

from ._errors import DuplicateOptionError
from .models import Option, Polarity, Provenance

HELP = "help"
LOAD = "load"

BUILTIN_NAMES = (HELP, LOAD)

# Characters the config file format gives meaning to
_RESERVED_CHARACTERS = frozenset(":,#")


def _check_name(name: str) -> None:
    if not name:
        raise ValueError("option name must not be empty")
    if name.startswith("-"):
        raise ValueError(f"option name must not start with a dash: {name!r}")
    if any(c.isspace() or c in _RESERVED_CHARACTERS for c in name):
        raise ValueError(f"option name must not contain whitespace, ':', ',' or '#': {name!r}")


class OptionRegistry:
    """Options keyed by name, iterated in registration order.

    A new registry already holds the built-in ``help`` and ``load`` options.
    """

    def __init__(self) -> None:
        self._options: Dict[str, Option] = {}
        self._insert(
            Option(HELP, arity=0, description="Print this message", provenance=Provenance.BUILTIN)
        )
        self._insert(
            Option(
                LOAD,
                arity=1,
                description="Load settings from configuration file",
                provenance=Provenance.BUILTIN,
            )
        )

    def insert_option(
        self, name: str, arity: int = 1, description: str = "", default: str = ""
    ) -> Option:
        """Register a user option taking ``arity`` values.

        Raises:
            DuplicateOptionError: If ``name`` is already registered
            ValueError: If ``arity`` is negative or ``name`` cannot be
                written on a command line or in a configuration file
        """
        if arity < 0:
            raise ValueError(f"arity must be non-negative, got {arity}")
        _check_name(name)
        return self._insert(Option(name, arity=arity, default=default, description=description))

    def insert_option_boolean(
        self, name: str, polarity: Union[Polarity, str], description: str = ""
    ) -> Option:
        """Register a user flag.

        ``store_true`` flags read false until given, ``store_false`` flags
        read true until given.
        """
        polarity = Polarity.from_string(polarity)
        return self.insert_option(name, 0, description, polarity.default)

    def _insert(self, option: Option) -> Option:
        if option.name in self._options:
            raise DuplicateOptionError(
                f"option already exists: {option.name}", option=option.name
            )
        self._options[option.name] = option
        return option

    def get(self, name: str) -> Optional[Option]:
        return self._options.get(name)

    def __getitem__(self, name: str) -> Option:
        return self._options[name]

    def __contains__(self, name: object) -> bool:
        return name in self._options

    def __iter__(self) -> Iterator[Option]:
        return iter(list(self._options.values()))

    def __len__(self) -> int:
        return len(self._options)

    def builtin_options(self) -> List[Option]:
        return [o for o in self._options.values() if o.provenance is Provenance.BUILTIN]

    def user_options(self) -> List[Option]:
        return [o for o in self._options.values() if o.provenance is Provenance.USER]
