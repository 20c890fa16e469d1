"""
optconf - Command-line options with configuration file support.

Usage:
    import optconf

    parser = optconf.OptionParser()
    parser.insert_option("range", 2, "Lower and upper bound", default="1,10")
    parser.insert_option_boolean("verbose", optconf.Polarity.STORE_TRUE, "Talk more")

    result = parser.parse()          # reads sys.argv; --load <file> merges a config file
    if result.exit_code != 0:
        raise SystemExit(result.exit_code)

    low, high = parser.retrieve_pair("range", int, int)
    verbose = parser.retrieve("verbose", bool)

    parser.dump("settings.cfg")      # append current values for next time
"""

import logging

from ._codec import dump, dumps, load, loads
from ._errors import (
    ConfigFileError,
    ConversionError,
    DuplicateOptionError,
    InsufficientArgumentsError,
    MalformedArgumentError,
    MissingArgumentError,
    OptionError,
    UnknownOptionError,
)
from ._parser import OptionParser
from ._registry import OptionRegistry
from ._values import split_field

# Models (for type hints if needed)
from .models import (
    Option,
    ParseResult,
    ParseStatus,
    Polarity,
    Provenance,
)

__version__ = "0.1.0"

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    # Primary API
    "OptionParser",
    "OptionRegistry",
    "dump",
    "dumps",
    "load",
    "loads",
    "split_field",
    # Exceptions
    "OptionError",
    "DuplicateOptionError",
    "UnknownOptionError",
    "MalformedArgumentError",
    "InsufficientArgumentsError",
    "MissingArgumentError",
    "ConversionError",
    "ConfigFileError",
    # Models
    "Option",
    "ParseResult",
    "ParseStatus",
    "Polarity",
    "Provenance",
]
