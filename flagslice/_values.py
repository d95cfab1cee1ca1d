"""Flag value containers.

A flag's value is anything implementing the `Value` protocol. Slice-valued
flags additionally implement `SliceValueProtocol`, which external code can check
for (`isinstance(flag.value, SliceValueProtocol)`) when it wants to overwrite a
list wholesale after parsing."""

from __future__ import annotations

from typing import Generic, Iterable, Sequence, TypeVar

from typing_extensions import Protocol, runtime_checkable

from . import _codecs, _strings

T = TypeVar("T")


@runtime_checkable
class Value(Protocol):
    """Interface shared by all flag values."""

    def set(self, raw: str) -> None: ...

    def __str__(self) -> str: ...

    def type(self) -> str: ...


@runtime_checkable
class SliceValueProtocol(Value, Protocol):
    """Interface for values that hold a list of elements."""

    def replace(self, tokens: Sequence[str]) -> None: ...

    def append(self, token: str) -> None: ...

    def get_slice(self) -> list[str]: ...


class SliceValue(Generic[T]):
    """List of typed elements that is populated from comma-separated arguments.

    The first call to `set()` discards the default, and each later call appends.
    This lets a flag be passed several times: `--bs=true,false --bs=true`
    results in `[True, False, True]`.

    Args:
        codec: Converts between tokens and elements.
        target: List to write parsed elements into. It is mutated in place, so
            references held by the caller stay current. A new list is created
            when omitted.
        default: Initial contents of the list.
    """

    def __init__(
        self,
        codec: _codecs.ElementCodec[T],
        target: list[T] | None = None,
        default: Iterable[T] = (),
    ) -> None:
        default = list(default)
        for element in default:
            if not codec.is_instance(element):
                raise TypeError(
                    f"Default {element!r} is not a valid {codec.metavar} element."
                )

        self._codec = codec
        self._value: list[T] = target if target is not None else []
        self._value[:] = default
        self._changed = False

    @property
    def changed(self) -> bool:
        """Whether the value has been explicitly set since construction."""
        return self._changed

    def _decode_all(self, tokens: Iterable[str]) -> list[T]:
        # Everything is decoded before the list is touched, so a bad token
        # leaves the current contents intact.
        return [self._codec.decode(token) for token in tokens]

    def set(self, raw: str) -> None:
        """Parse one occurrence of the flag."""
        candidate = self._decode_all(
            _strings.split_tokens(raw, unwrap_quoted=self._codec.unwrap_quoted)
        )
        if self._changed:
            self._value.extend(candidate)
        else:
            self._value[:] = candidate
        self._changed = True

    def replace(self, tokens: Sequence[str]) -> None:
        """Overwrite the list with already-split tokens, regardless of how many
        times the flag has been set."""
        self._value[:] = self._decode_all(tokens)
        self._changed = True

    def append(self, token: str) -> None:
        """Append a single element. Unlike `set()`, this never discards the
        default."""
        self._value.append(self._codec.decode(token))
        self._changed = True

    def get_slice(self) -> list[str]:
        return [self._codec.encode(element) for element in self._value]

    def values(self) -> list[T]:
        """Copy of the current elements."""
        return list(self._value)

    def type(self) -> str:
        return self._codec.slice_type

    def __str__(self) -> str:
        return _strings.join_tokens(self.get_slice())

    def __repr__(self) -> str:
        return f"SliceValue({self.type()}, {self._value!r})"


def bool_slice_value(
    target: list[bool] | None = None, default: Iterable[bool] = ()
) -> SliceValue[bool]:
    return SliceValue(_codecs.BOOL, target, default)


def int_slice_value(
    target: list[int] | None = None, default: Iterable[int] = ()
) -> SliceValue[int]:
    return SliceValue(_codecs.INT, target, default)


def float_slice_value(
    target: list[float] | None = None, default: Iterable[float] = ()
) -> SliceValue[float]:
    return SliceValue(_codecs.FLOAT, target, default)


def string_slice_value(
    target: list[str] | None = None, default: Iterable[str] = ()
) -> SliceValue[str]:
    return SliceValue(_codecs.STRING, target, default)
