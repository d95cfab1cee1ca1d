"""Element codecs: conversions between a single token and a typed element."""

from __future__ import annotations

import dataclasses
from typing import Any, Callable, Generic, TypeVar

from ._errors import TokenDecodeError

T = TypeVar("T")


@dataclasses.dataclass(frozen=True)
class ElementCodec(Generic[T]):
    """Specification for converting one element of a slice flag to and from a
    string."""

    metavar: str
    """Name of the element type, used in error messages."""
    slice_type: str
    """Type tag reported by slice values built from this codec."""
    instance_from_str: Callable[[str], T]
    """Given one trimmed token, construct an element. Should raise ValueError
    for malformed tokens."""
    str_from_instance: Callable[[T], str]
    """Convert an element to a token that `instance_from_str` accepts."""
    is_instance: Callable[[Any], bool]
    """Does an object match this element type? Used to validate defaults."""
    unwrap_quoted: bool = True
    """Split the contents of quoted tokens again. Only safe when no valid
    spelling contains the delimiter."""

    def decode(self, token: str) -> T:
        try:
            return self.instance_from_str(token)
        except ValueError:
            raise TokenDecodeError(token, self.metavar) from None

    def encode(self, instance: T) -> str:
        return self.str_from_instance(instance)


# Exact spelling set; this is a compatibility contract, so we don't defer to a
# generic boolean parser.
_bool_from_spelling = {
    "1": True,
    "t": True,
    "T": True,
    "TRUE": True,
    "true": True,
    "True": True,
    "0": False,
    "f": False,
    "F": False,
    "FALSE": False,
    "false": False,
    "False": False,
}


def _bool_from_str(token: str) -> bool:
    if token not in _bool_from_spelling:
        raise ValueError(token)
    return _bool_from_spelling[token]


def _int_from_str(token: str) -> int:
    # int() also accepts digit-group underscores and non-ASCII digits.
    if "_" in token or not token.isascii():
        raise ValueError(token)
    return int(token, 10)


def _float_from_str(token: str) -> float:
    if "_" in token or not token.isascii():
        raise ValueError(token)
    return float(token)


BOOL: ElementCodec[bool] = ElementCodec(
    metavar="bool",
    slice_type="boolSlice",
    instance_from_str=_bool_from_str,
    str_from_instance=lambda instance: "true" if instance else "false",
    is_instance=lambda x: isinstance(x, bool),
)

INT: ElementCodec[int] = ElementCodec(
    metavar="int",
    slice_type="intSlice",
    instance_from_str=_int_from_str,
    str_from_instance=str,
    is_instance=lambda x: isinstance(x, int) and not isinstance(x, bool),
)

FLOAT: ElementCodec[float] = ElementCodec(
    metavar="float64",
    slice_type="float64Slice",
    instance_from_str=_float_from_str,
    str_from_instance=repr,
    # Ints are accepted, following the numeric tower.
    is_instance=lambda x: isinstance(x, (int, float)) and not isinstance(x, bool),
)

STRING: ElementCodec[str] = ElementCodec(
    metavar="string",
    slice_type="stringSlice",
    instance_from_str=lambda token: token,
    str_from_instance=lambda instance: instance,
    is_instance=lambda x: isinstance(x, str),
    unwrap_quoted=False,
)
