"""Package-wide defaults for flagslice.

Values are read once from the environment at import time, and can be changed at
runtime by mutating `options`."""

from __future__ import annotations

import os
from typing import Literal, Sequence

from typing_extensions import TypedDict

from . import _codecs


class OptionsDict(TypedDict):
    """Defaults for flag sets.

    Attributes:
        error_handling: Error handling mode for flag sets that don't specify one.
        console_outputs: Print errors before exiting in "exit" mode.
    """

    error_handling: Literal["continue", "exit", "panic"]
    console_outputs: bool


def read_choice(str_name: str, choices: Sequence[str], default: str) -> str:
    if str_name in os.environ:
        value = os.environ[str_name].strip().lower()
        assert value in choices, f"{str_name}={value} not in choices {choices}"
        return value
    return default


def read_bool(str_name: str, default: bool) -> bool:
    if str_name in os.environ:
        return _codecs.BOOL.decode(os.environ[str_name].strip())
    return default


options: OptionsDict = {
    "error_handling": read_choice(  # type: ignore
        "PYTHON_FLAGSLICE_ERROR_HANDLING", ("continue", "exit", "panic"), "continue"
    ),
    "console_outputs": read_bool("PYTHON_FLAGSLICE_CONSOLE_OUTPUTS", True),
}
