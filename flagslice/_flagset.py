"""Flag sets: registration, lookup and parsing of command-line flags."""

from __future__ import annotations

import dataclasses
import difflib
import enum
import warnings
from collections import deque
from typing import Callable, Iterable, Sequence, TypeVar

from typing_extensions import assert_never

from . import _codecs, _errors, _formatting, _settings
from ._values import SliceValue, SliceValueProtocol, Value
from ._warnings import FlagSliceDeprecationWarning

T = TypeVar("T")


class ErrorHandling(enum.Enum):
    """How `FlagSet.parse()` behaves when it encounters an error."""

    CONTINUE_ON_ERROR = "continue"
    """Raise the `FlagError` to the caller."""
    EXIT_ON_ERROR = "exit"
    """Print the error and flag usages to stderr, then exit with status 2."""
    PANIC_ON_ERROR = "panic"
    """Raise a `RuntimeError` chained from the `FlagError`."""


@dataclasses.dataclass
class Flag:
    """A registered flag."""

    name: str
    usage: str
    value: Value
    default_text: str
    """Rendered default, captured at registration."""
    shorthand: str | None = None
    deprecated: str | None = None
    """If set, using the flag emits a warning with this message."""
    changed: bool = False
    """True once the flag has been set via `FlagSet.set()` or `FlagSet.parse()`."""


class FlagSet:
    """A named set of flags.

    Example:

    .. code-block:: python

        fs = FlagSet("prog")
        bs = fs.bool_slice("bs", [False, True], "Comma-separated list!")
        fs.parse(["--bs=1,F", "--bs", "true"])
        assert bs == [True, False, True]
    """

    def __init__(self, name: str, error_handling: ErrorHandling | None = None) -> None:
        self.name = name
        self.error_handling = (
            ErrorHandling(_settings.options["error_handling"])
            if error_handling is None
            else error_handling
        )
        self._flag_from_name: dict[str, Flag] = {}
        self._flag_from_shorthand: dict[str, Flag] = {}
        self._args: list[str] = []
        self._parsed = False

    # Registration.

    def var(
        self, value: Value, name: str, usage: str, shorthand: str | None = None
    ) -> Flag:
        """Register a flag backed by any `Value` implementation."""
        if name == "" or name.startswith("-") or "=" in name:
            raise ValueError(f"{self.name}: invalid flag name {name!r}")
        if name in self._flag_from_name:
            raise _errors.FlagRedefinedError(f"{self.name} flag redefined: {name}")
        if shorthand is not None:
            if len(shorthand) != 1 or shorthand in ("-", "="):
                raise ValueError(
                    f"{self.name}: shorthand for {name} must be a single character,"
                    f" got {shorthand!r}"
                )
            if shorthand in self._flag_from_shorthand:
                raise _errors.FlagRedefinedError(
                    f"{self.name}: unable to redefine {shorthand!r} shorthand for"
                    f" {name}: already used for"
                    f" {self._flag_from_shorthand[shorthand].name}"
                )

        flag = Flag(
            name=name,
            usage=usage,
            value=value,
            default_text=str(value),
            shorthand=shorthand,
        )
        self._flag_from_name[name] = flag
        if shorthand is not None:
            self._flag_from_shorthand[shorthand] = flag
        return flag

    def _slice_var(
        self,
        codec: _codecs.ElementCodec[T],
        target: list[T],
        name: str,
        default: Iterable[T],
        usage: str,
        shorthand: str | None,
    ) -> list[T]:
        self.var(SliceValue(codec, target, default), name, usage, shorthand)
        return target

    def bool_slice_var(
        self,
        target: list[bool],
        name: str,
        default: Iterable[bool],
        usage: str,
        shorthand: str | None = None,
    ) -> None:
        """Define a flag that stores a list of booleans into `target`."""
        self._slice_var(_codecs.BOOL, target, name, default, usage, shorthand)

    def bool_slice(
        self,
        name: str,
        default: Iterable[bool],
        usage: str,
        shorthand: str | None = None,
    ) -> list[bool]:
        """Define a flag that stores a list of booleans. Returns the list."""
        return self._slice_var(_codecs.BOOL, [], name, default, usage, shorthand)

    def int_slice_var(
        self,
        target: list[int],
        name: str,
        default: Iterable[int],
        usage: str,
        shorthand: str | None = None,
    ) -> None:
        self._slice_var(_codecs.INT, target, name, default, usage, shorthand)

    def int_slice(
        self,
        name: str,
        default: Iterable[int],
        usage: str,
        shorthand: str | None = None,
    ) -> list[int]:
        return self._slice_var(_codecs.INT, [], name, default, usage, shorthand)

    def float_slice_var(
        self,
        target: list[float],
        name: str,
        default: Iterable[float],
        usage: str,
        shorthand: str | None = None,
    ) -> None:
        self._slice_var(_codecs.FLOAT, target, name, default, usage, shorthand)

    def float_slice(
        self,
        name: str,
        default: Iterable[float],
        usage: str,
        shorthand: str | None = None,
    ) -> list[float]:
        return self._slice_var(_codecs.FLOAT, [], name, default, usage, shorthand)

    def string_slice_var(
        self,
        target: list[str],
        name: str,
        default: Iterable[str],
        usage: str,
        shorthand: str | None = None,
    ) -> None:
        self._slice_var(_codecs.STRING, target, name, default, usage, shorthand)

    def string_slice(
        self,
        name: str,
        default: Iterable[str],
        usage: str,
        shorthand: str | None = None,
    ) -> list[str]:
        return self._slice_var(_codecs.STRING, [], name, default, usage, shorthand)

    def mark_deprecated(self, name: str, message: str) -> None:
        """Hide a flag from usages and warn whenever it's used."""
        flag = self._flag_from_name.get(name)
        if flag is None:
            raise _errors.FlagNotFoundError(name)
        if message == "":
            raise ValueError(f"deprecated message for flag {name!r} must be set")
        flag.deprecated = message

    # Lookup.

    def lookup(self, name: str) -> Flag | None:
        return self._flag_from_name.get(name, None)

    def changed(self, name: str) -> bool:
        flag = self._flag_from_name.get(name, None)
        return flag is not None and flag.changed

    def _get_slice(self, name: str, codec: _codecs.ElementCodec[T]) -> list[T]:
        flag = self._flag_from_name.get(name, None)
        if flag is None:
            raise _errors.FlagNotFoundError(name)
        value = flag.value
        if value.type() != codec.slice_type or not isinstance(
            value, SliceValueProtocol
        ):
            raise _errors.FlagTypeError(name, codec.slice_type, value.type())
        return [codec.decode(token) for token in value.get_slice()]

    def get_bool_slice(self, name: str) -> list[bool]:
        return self._get_slice(name, _codecs.BOOL)

    def get_int_slice(self, name: str) -> list[int]:
        return self._get_slice(name, _codecs.INT)

    def get_float_slice(self, name: str) -> list[float]:
        return self._get_slice(name, _codecs.FLOAT)

    def get_string_slice(self, name: str) -> list[str]:
        return self._get_slice(name, _codecs.STRING)

    def visit_all(self, fn: Callable[[Flag], None]) -> None:
        """Call `fn` for each flag, in lexicographical order."""
        for name in sorted(self._flag_from_name.keys()):
            fn(self._flag_from_name[name])

    def visit(self, fn: Callable[[Flag], None]) -> None:
        """Call `fn` for each flag that has been set, in lexicographical order."""
        for name in sorted(self._flag_from_name.keys()):
            flag = self._flag_from_name[name]
            if flag.changed:
                fn(flag)

    def flag_usages(self) -> str:
        flags: list[Flag] = []
        self.visit_all(lambda flag: flags.append(flag))
        return _formatting.format_flag_usages(
            flag for flag in flags if flag.deprecated is None
        )

    # Parsing.

    def set(self, name: str, raw: str) -> None:
        """Apply one occurrence of a flag, as if `--name=raw` was passed."""
        self._set(name, raw, stacklevel=3)

    def _set(self, name: str, raw: str, stacklevel: int) -> None:
        # `stacklevel` is relative to this method, and should point deprecation
        # warnings at the caller of the public entry point.
        flag = self._flag_from_name.get(name, None)
        if flag is None:
            raise _errors.FlagNotFoundError(name)
        try:
            flag.value.set(raw)
        except _errors.ParseError as e:
            e.flag_name = name
            raise
        except ValueError as e:
            raise _errors.InvalidValueError(raw, str(e), flag_name=name) from e
        flag.changed = True

        if flag.deprecated is not None:
            warnings.warn(
                f"Flag --{name} has been deprecated, {flag.deprecated}",
                category=FlagSliceDeprecationWarning,
                stacklevel=stacklevel,
            )

    def parse(self, args: Sequence[str]) -> None:
        """Parse flags from an argument list, which should not include the
        program name. Errors are handled according to `self.error_handling`."""
        self._parsed = True
        try:
            self._parse_args(args)
        except _errors.FlagError as e:
            if self.error_handling is ErrorHandling.CONTINUE_ON_ERROR:
                raise
            elif self.error_handling is ErrorHandling.EXIT_ON_ERROR:
                _formatting.error_and_exit(
                    self.name,
                    e,
                    self.flag_usages(),
                    console_outputs=_settings.options["console_outputs"],
                )
            elif self.error_handling is ErrorHandling.PANIC_ON_ERROR:
                raise RuntimeError(f"{self.name}: {e}") from e
            else:
                assert_never(self.error_handling)

    def parsed(self) -> bool:
        return self._parsed

    def args(self) -> list[str]:
        """Arguments remaining after flags have been parsed."""
        return list(self._args)

    def _parse_args(self, args: Sequence[str]) -> None:
        self._args = []
        args_deque: deque[str] = deque(args)
        while len(args_deque) > 0:
            arg = args_deque.popleft()
            if arg == "--":
                self._args.extend(args_deque)
                break
            elif len(arg) < 2 or not arg.startswith("-"):
                self._args.append(arg)
            elif arg.startswith("--"):
                self._parse_long_arg(arg, args_deque)
            else:
                self._parse_short_arg(arg, args_deque)

    def _parse_long_arg(self, arg: str, args_deque: deque[str]) -> None:
        name, eq, raw = arg[2:].partition("=")
        flag = self._flag_from_name.get(name, None)
        if flag is None:
            raise _errors.UnknownFlagError(
                arg,
                [
                    "--" + match
                    for match in difflib.get_close_matches(
                        name, self._flag_from_name.keys(), n=3
                    )
                ],
            )
        if eq == "":
            if len(args_deque) == 0:
                raise _errors.MissingFlagValueError(arg)
            raw = args_deque.popleft()
        self._set(flag.name, raw, stacklevel=5)

    def _parse_short_arg(self, arg: str, args_deque: deque[str]) -> None:
        shorthand, raw = arg[1], arg[2:]
        flag = self._flag_from_shorthand.get(shorthand, None)
        if flag is None:
            raise _errors.UnknownFlagError(arg)
        if raw.startswith("="):
            raw = raw[1:]
        elif raw == "":
            if len(args_deque) == 0:
                raise _errors.MissingFlagValueError(arg)
            raw = args_deque.popleft()
        self._set(flag.name, raw, stacklevel=5)
