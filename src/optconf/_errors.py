"""Exception hierarchy for optconf.

Every failure the library can report maps to a subclass of
:class:`OptionError`, so :meth:`OptionParser.parse` can catch a single base
class and turn it into a usage report.

Hierarchy
---------
OptionError
├── DuplicateOptionError
├── UnknownOptionError
├── MalformedArgumentError
├── InsufficientArgumentsError
├── MissingArgumentError
├── ConversionError
└── ConfigFileError
"""

from __future__ import annotations

from typing import Optional


class OptionError(Exception):
    """Base exception for all optconf errors."""

    def __init__(self, message: str, *, option: Optional[str] = None) -> None:
        super().__init__(message)
        self.option: Optional[str] = option
        """Name of the offending option, when there is one."""


class DuplicateOptionError(OptionError):
    """Raised when an option is registered or supplied twice."""


class UnknownOptionError(OptionError):
    """Raised when a name does not match any registered option."""


class MalformedArgumentError(OptionError):
    """Raised when a command-line token or config line has no option form."""


class InsufficientArgumentsError(OptionError):
    """Raised when fewer values follow an option than its arity requires."""


class MissingArgumentError(OptionError):
    """Raised when an option has neither a value nor a default."""


class ConversionError(OptionError):
    """Raised when a stored field cannot be converted to the requested type."""

    def __init__(
        self,
        message: str,
        *,
        option: Optional[str] = None,
        text: Optional[str] = None,
        type_name: Optional[str] = None,
    ) -> None:
        super().__init__(message, option=option)
        self.text = text
        self.type_name = type_name


class ConfigFileError(OptionError):
    """Raised when a configuration file cannot be opened."""

    def __init__(self, message: str, *, path: str) -> None:
        super().__init__(message)
        self.path = path
