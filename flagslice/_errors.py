"""Exception types raised by flagslice."""

from __future__ import annotations

from typing import Sequence


class FlagError(Exception):
    """Base class for all errors raised while defining or parsing flags."""


class ParseError(FlagError, ValueError):
    """Raised when a raw argument cannot be turned into flag values.

    The owning flag's name is often unknown where the error is raised (element
    codecs don't know which flag they belong to), so the flag set fills in
    `flag_name` before propagating the error further."""

    def __init__(self, token: str, flag_name: str | None = None) -> None:
        super().__init__(token)
        self.token = token
        self.flag_name = flag_name

    def _describe(self) -> str:
        return f"invalid token {self.token!r}"

    def __str__(self) -> str:
        if self.flag_name is None:
            return self._describe()
        return f"{self._describe()} for flag --{self.flag_name}"


class TokenDecodeError(ParseError):
    """A token does not match any accepted spelling of the element type."""

    def __init__(
        self, token: str, type_name: str, flag_name: str | None = None
    ) -> None:
        super().__init__(token, flag_name=flag_name)
        self.type_name = type_name

    def _describe(self) -> str:
        return f"invalid {self.type_name} value {self.token!r}"


class UnbalancedQuoteError(ParseError):
    """A quoted span was opened but never closed."""

    def _describe(self) -> str:
        return f"unterminated quote in {self.token!r}"


class InvalidValueError(ParseError):
    """A flag value rejected an argument with an error of its own."""

    def __init__(self, token: str, reason: str, flag_name: str | None = None) -> None:
        super().__init__(token, flag_name=flag_name)
        self.reason = reason

    def _describe(self) -> str:
        return f"invalid argument {self.token!r}: {self.reason}"


class FlagLookupError(FlagError, LookupError):
    """Raised when a flag can't be retrieved by name."""

    def __init__(self, name: str) -> None:
        super().__init__(name)
        self.name = name


class FlagNotFoundError(FlagLookupError):
    def __str__(self) -> str:
        return f"flag accessed but not defined: {self.name}"


class FlagTypeError(FlagLookupError):
    def __init__(self, name: str, expected: str, actual: str) -> None:
        super().__init__(name)
        self.expected = expected
        self.actual = actual

    def __str__(self) -> str:
        return (
            f"trying to get {self.expected} value of flag of type {self.actual}:"
            f" {self.name}"
        )


class FlagRedefinedError(FlagError):
    """Two flags were registered under the same name or shorthand."""


class UnknownFlagError(FlagError):
    def __init__(self, arg: str, suggestions: Sequence[str] = ()) -> None:
        super().__init__(arg)
        self.arg = arg
        self.suggestions = tuple(suggestions)

    def __str__(self) -> str:
        out = f"unknown flag: {self.arg}"
        if len(self.suggestions) > 0:
            out += f" (did you mean {', '.join(self.suggestions)}?)"
        return out


class MissingFlagValueError(FlagError):
    def __init__(self, arg: str) -> None:
        super().__init__(arg)
        self.arg = arg

    def __str__(self) -> str:
        return f"flag needs an argument: {self.arg}"
