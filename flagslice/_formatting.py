"""Helptext and error formatting. Uses `rich` for error output."""

from __future__ import annotations

import sys
from typing import TYPE_CHECKING, Iterable, NoReturn

from rich.console import Console, Group, RenderableType
from rich.panel import Panel
from rich.rule import Rule
from rich.style import Style
from rich.text import Text

from . import _errors
from ._values import SliceValueProtocol

if TYPE_CHECKING:
    from ._flagset import Flag


def format_flag_usages(flags: Iterable[Flag]) -> str:
    """One line per flag, for example:

      -b, --bs boolSlice   Comma-separated list! (default [true,false])
    """
    rows: list[tuple[str, str]] = []
    for flag in flags:
        if flag.shorthand is not None:
            left = f"  -{flag.shorthand}, --{flag.name}"
        else:
            left = f"      --{flag.name}"
        left += f" {flag.value.type()}"

        right = flag.usage
        if flag.default_text != "":
            default = flag.default_text
            if isinstance(flag.value, SliceValueProtocol):
                default = f"[{default}]"
            right += f" (default {default})"
        rows.append((left, right))

    if len(rows) == 0:
        return ""
    width = max(len(left) for left, _ in rows)
    return "\n".join(f"{left.ljust(width)}   {right}".rstrip() for left, right in rows)


def _title_from_error(error: _errors.FlagError) -> str:
    if isinstance(error, _errors.UnknownFlagError):
        return "Unrecognized options"
    elif isinstance(error, _errors.MissingFlagValueError):
        return "Missing value"
    elif isinstance(error, _errors.ParseError):
        return "Parsing error"
    else:
        return "Flag error"


def error_and_exit(
    prog: str,
    error: _errors.FlagError,
    usages: str,
    console_outputs: bool,
) -> NoReturn:
    if console_outputs:
        console = Console(stderr=True)
        parts: list[RenderableType] = [Text(str(error))]
        if usages != "":
            parts.append(Rule(style=Style(color="red", dim=True)))
            parts.append(Text("Usage of " + prog + ":", style=Style(bold=True)))
            parts.append(Text(usages))
        console.print(
            Panel(
                Group(*parts),
                title=Text(_title_from_error(error), style=Style(bold=True)),
                title_align="left",
                border_style=Style(color="red"),
            )
        )
    sys.exit(2)
