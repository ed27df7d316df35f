"""Parsing flags values from text and formatting them as text.

The text form is a bar-separated list of flag names and hex numbers::

    A | B | 0x0c

Whitespace around each part is ignored. Names are case-sensitive. A hex
number starts with ``0x`` and is followed by hex digits in either case.
"""

from __future__ import annotations

import re
from enum import Enum
from typing import TypeVar

from .flags import Flags

__all__ = [
    "ParseError",
    "to_string",
    "from_str",
    "to_string_truncate",
    "from_str_truncate",
    "to_string_strict",
    "from_str_strict",
]

_F = TypeVar("_F", bound=Flags)

_HEX_DIGITS = re.compile(r"\+?[0-9a-fA-F]+")
_SEPARATOR = " | "


class _ErrorKind(Enum):
    EMPTY_FLAG = "encountered empty flag"
    INVALID_NAMED_FLAG = "unrecognized named flag"
    INVALID_HEX_FLAG = "invalid hex flag"


class ParseError(ValueError):
    """Raised when text cannot be parsed as a flags value."""

    def __init__(self, kind: _ErrorKind, got: str | None = None) -> None:
        self.kind = kind
        self.got = got
        message = kind.value if got is None else f"{kind.value} `{got}`"
        super().__init__(message)

    @classmethod
    def invalid_hex_flag(cls, flag) -> ParseError:
        """An invalid hex flag was encountered."""
        return cls(_ErrorKind.INVALID_HEX_FLAG, str(flag))

    @classmethod
    def invalid_named_flag(cls, flag) -> ParseError:
        """A name that matches no flag of the type was encountered."""
        return cls(_ErrorKind.INVALID_NAMED_FLAG, str(flag))

    @classmethod
    def empty_flag(cls) -> ParseError:
        """Nothing was found between two separators."""
        return cls(_ErrorKind.EMPTY_FLAG)


def _names_and_remaining(flags: Flags) -> tuple[list[str], int]:
    names = []
    remaining = flags.bits()
    for name, value in flags.iter_names():
        names.append(name)
        remaining &= ~value.bits()
    return names, remaining


def to_string(flags: Flags) -> str:
    """Format a flags value as text.

    Bits that are not part of a contained named flag are written as one
    trailing hex number.
    """
    names, remaining = _names_and_remaining(flags)
    parts = list(names)
    if remaining:
        parts.append(f"{remaining:#x}")
    return _SEPARATOR.join(parts)


def to_string_truncate(flags: Flags) -> str:
    """Format a flags value as text, ignoring unknown bits."""
    return to_string(type(flags).from_bits_truncate(flags.bits()))


def to_string_strict(flags: Flags) -> str:
    """Format only the contained named flags of a value as text."""
    names, _ = _names_and_remaining(flags)
    return _SEPARATOR.join(names)


def _parts(text: str):
    """Yield each stripped part of the text, raising on empty parts."""
    if not text.strip():
        return
    for part in text.split("|"):
        part = part.strip()
        if not part:
            raise ParseError.empty_flag()
        yield part


def _parse_hex(flags_type: type[_F], digits: str) -> _F:
    if not _HEX_DIGITS.fullmatch(digits):
        raise ParseError.invalid_hex_flag(digits)
    try:
        return flags_type.from_bits_retain(int(digits, 16))
    except ValueError:
        raise ParseError.invalid_hex_flag(digits) from None


def _parse_name(flags_type: type[_F], name: str) -> _F:
    parsed = flags_type.from_name(name)
    if parsed is None:
        raise ParseError.invalid_named_flag(name)
    return parsed


def from_str(flags_type: type[_F], text: str) -> _F:
    """Parse a flags value from text.

    Unknown names raise :class:`ParseError`; unknown bits given in hex are
    retained.
    """
    parsed = flags_type.empty()
    for part in _parts(text):
        if part.startswith("0x"):
            parsed.insert(_parse_hex(flags_type, part[2:]))
        else:
            parsed.insert(_parse_name(flags_type, part))
    return parsed


def from_str_truncate(flags_type: type[_F], text: str) -> _F:
    """Parse a flags value from text, dropping unknown bits."""
    return flags_type.from_bits_truncate(from_str(flags_type, text).bits())


def from_str_strict(flags_type: type[_F], text: str) -> _F:
    """Parse a flags value from named flags only; hex numbers are rejected."""
    parsed = flags_type.empty()
    for part in _parts(text):
        if part.startswith("0x"):
            raise ParseError.invalid_hex_flag("unsupported hex flag value")
        parsed.insert(_parse_name(flags_type, part))
    return parsed