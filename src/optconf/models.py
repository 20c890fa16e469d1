"""Data models for option registration and parse results."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, IntEnum
from typing import Optional, Union

from ._errors import OptionError


class Provenance(str, Enum):
    """Where an option was declared.

    Inherits from str for better type inference and direct string comparison.
    """

    BUILTIN = "builtin"
    USER = "user"


class Polarity(str, Enum):
    """Boolean flag behaviour when the flag is present on the command line."""

    STORE_TRUE = "store_true"
    STORE_FALSE = "store_false"

    @classmethod
    def from_string(cls, value: Union[str, "Polarity"]) -> "Polarity":
        """Convert string to Polarity, rejecting anything else."""
        try:
            return cls(value)
        except ValueError:
            raise ValueError(
                f"polarity must be 'store_true' or 'store_false', got {value!r}"
            ) from None

    @property
    def default(self) -> str:
        """Raw default encoded for a flag with this polarity."""
        return "0" if self is Polarity.STORE_TRUE else "1"


class ParseStatus(IntEnum):
    """Outcome of :meth:`OptionParser.parse`, valued as the exit code."""

    SUCCESS = 0
    HELP = 1
    ERROR = -1


@dataclass(frozen=True)
class Option:
    """A registered option."""

    name: str
    arity: int = 1
    default: str = ""
    description: str = ""
    provenance: Provenance = Provenance.USER

    @property
    def is_user_defined(self) -> bool:
        """Whether the host program registered this option."""
        return self.provenance is Provenance.USER

    @property
    def is_flag(self) -> bool:
        """Whether this option takes no values."""
        return self.arity == 0


@dataclass(frozen=True)
class ParseResult:
    """Result of parsing a command line."""

    status: ParseStatus
    message: str = ""
    error: Optional[OptionError] = None

    @property
    def exit_code(self) -> int:
        return int(self.status)

    @property
    def ok(self) -> bool:
        return self.status is ParseStatus.SUCCESS
