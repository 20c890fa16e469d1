"""Usage listing and error banner."""

from __future__ import annotations

from typing import List, Optional

from rich.console import Console
from rich.markup import escape

from ._registry import OptionRegistry
from .models import Option, ParseStatus

NAME_WIDTH = 16
DESCRIPTION_COLUMN = 18
ARG_WIDTH = 6
ARG_PLACEHOLDER = " <arg>"
NO_DESCRIPTION = "*** description unavailable ***"


def get_console() -> Console:
    """Create a Rich console instance targeting stderr."""
    return Console(stderr=True, highlight=False)


def format_option(option: Option) -> str:
    """One usage line: right-aligned name, placeholders, description."""
    name = f"--{option.name}".rjust(NAME_WIDTH)
    args = ARG_PLACEHOLDER * option.arity
    padding = " ".rjust(DESCRIPTION_COLUMN - ARG_WIDTH * option.arity)
    return f"{name}{args}{padding}{option.description or NO_DESCRIPTION}"


def format_usage(prog: str, registry: OptionRegistry) -> str:
    """Render the usage listing, built-in options before user options."""
    lines: List[str] = [f"Usage: {prog} [OPTIONS]", "", "Where OPTIONS are:"]
    lines.extend(format_option(option) for option in registry.builtin_options())
    lines.extend(format_option(option) for option in registry.user_options())
    return "\n".join(lines) + "\n"


def render_usage(
    prog: str,
    registry: OptionRegistry,
    message: str = "",
    *,
    console: Optional[Console] = None,
) -> ParseStatus:
    """Print usage, plus ``message`` as a fatal error when one is given.

    Returns:
        ParseStatus.ERROR with a message, ParseStatus.HELP without
    """
    if console is None:
        console = get_console()
    console.print(format_usage(prog, registry), markup=False, emoji=False, soft_wrap=True)

    if message:
        console.print(
            f"[bold red]error:[/bold red] {escape(message)}", emoji=False, soft_wrap=True
        )
        return ParseStatus.ERROR
    return ParseStatus.HELP
