"""Text-to-value converters for typed retrieval."""

from __future__ import annotations

from typing import Any, Callable, Dict, Optional

from ._errors import ConversionError

# Type converter callable signature (permissive to accommodate builtins)
TypeConverter = Callable[[str], Any]

_TRUE_STRINGS = frozenset({"1", "true"})
_FALSE_STRINGS = frozenset({"0", "false"})


def parse_bool(text: str) -> bool:
    """Parse ``0``/``1`` (or ``false``/``true``, any case) into a bool."""
    lowered = text.lower()
    if lowered in _TRUE_STRINGS:
        return True
    if lowered in _FALSE_STRINGS:
        return False
    raise ValueError(f"not a boolean: {text!r}")


def parse_str(text: str) -> str:
    """Accept any field except an empty one."""
    if not text:
        raise ValueError("empty field")
    return text


# Builtin types with a dedicated converter; other callables are applied as-is
_BUILTIN_CONVERTERS: Dict[Any, TypeConverter] = {
    int: int,
    float: float,
    complex: complex,
    str: parse_str,
    bool: parse_bool,
}


def type_name(type_: Any) -> str:
    """Human-readable name for a target type."""
    return getattr(type_, "__name__", None) or repr(type_)


def get_converter(type_: Any) -> TypeConverter:
    """Return the converter used for ``type_``.

    Raises:
        TypeError: If ``type_`` has no converter and is not callable
    """
    if type_ in _BUILTIN_CONVERTERS:
        return _BUILTIN_CONVERTERS[type_]
    if callable(type_):
        result: TypeConverter = type_
        return result
    raise TypeError(f"cannot convert option values to {type_!r}")


def convert(text: str, type_: Any, *, option: Optional[str] = None) -> Any:
    """Convert one field of text to ``type_``.

    Raises:
        ConversionError: If the whole of ``text`` does not parse as ``type_``
    """
    converter = get_converter(type_)
    try:
        return converter(text)
    except (TypeError, ValueError, ArithmeticError) as e:
        raise ConversionError(
            f"invalid conversion of the argument '{text}' to type {type_name(type_)}",
            option=option,
            text=text,
            type_name=type_name(type_),
        ) from e
