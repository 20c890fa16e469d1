"""Typed retrieval of stored option values."""

from __future__ import annotations

from typing import Any, Mapping, Tuple

from ._errors import ConversionError, MissingArgumentError
from ._registry import OptionRegistry
from ._types import convert
from .models import Option

FIELD_SEPARATOR = ","
JOINED_SEPARATOR = ", "


def join_fields(fields: Any) -> str:
    """Encode several values as one raw string."""
    return JOINED_SEPARATOR.join(fields)


def split_field(raw: str, index: int) -> str:
    """Return field ``index`` of a comma-separated raw value.

    Surrounding whitespace is dropped from the field.

    Raises:
        IndexError: If the raw value has no such field
    """
    fields = raw.split(FIELD_SEPARATOR)
    if index < 0 or index >= len(fields):
        raise IndexError(f"field {index} out of range for {raw!r}")
    return fields[index].strip()


def resolve_raw(
    name: str, registry: OptionRegistry, values: Mapping[str, str]
) -> Tuple[Option, str]:
    """Find the raw value for ``name``: stored value first, then default.

    Raises:
        MissingArgumentError: If there is neither
    """
    option = registry.get(name)
    if name in values and option is not None:
        return option, values[name]
    if option is not None and option.default:
        return option, option.default
    raise MissingArgumentError(f"no argument has been passed to option: {name}", option=name)


def retrieve_value(
    name: str,
    registry: OptionRegistry,
    values: Mapping[str, str],
    type_: Any = str,
    index: int = 0,
) -> Any:
    """Retrieve field ``index`` of option ``name`` converted to ``type_``."""
    option, raw = resolve_raw(name, registry, values)

    if option.is_flag:
        text = "1" if raw != "0" else "0"
    else:
        try:
            text = split_field(raw, index)
        except IndexError as e:
            raise ConversionError(
                f"option '{name}' has no field {index}: '{raw}'", option=name, text=raw
            ) from e

    return convert(text, type_, option=name)
