"""Core behaviour shared by every flags type.

A flags type is declared by subclassing :class:`FlagsCore` and listing its
flags as integer class attributes::

    class Permissions(FlagsCore, width=8):
        READ = 1
        WRITE = 1 << 1
        EXEC = 1 << 2
        ALL = READ | WRITE | EXEC
        _ = ~0          # an unnamed flag: every bit counts as known

Every public integer attribute declared in the class body becomes a named
flag, in declaration order. An attribute named ``_`` declares an unnamed
flag. Declared values are masked to the type's bit width, so ``~0`` stands
for "all bits".
"""

from __future__ import annotations

from dataclasses import dataclass
from functools import reduce
from operator import or_
from typing import TypeVar

__all__ = ["Flag", "FlagsCore"]

_F = TypeVar("_F", bound="FlagsCore")

_DEFAULT_WIDTH = 32


@dataclass(frozen=True)
class Flag:
    """A defined flag: a name (empty when unnamed) and its bits."""

    name: str
    value: int

    def is_named(self) -> bool:
        """Whether the flag has a non-empty name."""
        return bool(self.name)

    def is_unnamed(self) -> bool:
        """Whether the flag's name is empty."""
        return not self.name


class _FlagConstant:
    """Class attribute that yields a fresh flags value on every access."""

    __slots__ = ("bits",)

    def __init__(self, bits: int) -> None:
        self.bits = bits

    def __get__(self, instance, owner):
        return owner.from_bits_retain(self.bits)


def _is_plain_int(value) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


class FlagsCore:
    """A set of defined flags stored in an unsigned integer of fixed width."""

    __slots__ = ("_bits",)

    _width: int = _DEFAULT_WIDTH
    _flags: tuple[Flag, ...] = ()
    _all_bits: int = 0

    def __init_subclass__(cls, width: int | None = None, **kwargs) -> None:
        super().__init_subclass__(**kwargs)
        if width is not None:
            if not _is_plain_int(width) or width <= 0:
                raise ValueError(f"flag width must be a positive integer, got {width!r}")
            cls._width = width
        mask = cls._mask()

        flags = []
        for name, value in list(vars(cls).items()):
            if not _is_plain_int(value):
                continue
            if name == "_":
                flags.append(Flag("", value & mask))
                delattr(cls, name)
            elif not name.startswith("_"):
                flags.append(Flag(name, value & mask))
                setattr(cls, name, _FlagConstant(value & mask))

        cls._flags = tuple(flags)
        cls._all_bits = reduce(or_, (flag.value for flag in flags), 0)

    def __init__(self, bits: int = 0) -> None:
        self._bits = self._check_bits(bits)

    @classmethod
    def _mask(cls) -> int:
        return (1 << cls._width) - 1

    @classmethod
    def _check_bits(cls, bits) -> int:
        if not _is_plain_int(bits):
            raise TypeError(f"bits must be an int, got {type(bits).__name__}")
        if not 0 <= bits <= cls._mask():
            raise ValueError(f"bits {bits!r} do not fit in {cls._width} unsigned bits")
        return bits

    def _check_other(self: _F, other) -> _F:
        if type(other) is not type(self):
            raise TypeError(
                f"expected {type(self).__name__}, got {type(other).__name__}"
            )
        return other

    # Construction

    @classmethod
    def defined(cls) -> tuple[Flag, ...]:
        """The defined flags, named and unnamed, in declaration order."""
        return cls._flags

    @classmethod
    def empty(cls: type[_F]) -> _F:
        """A flags value with all bits unset."""
        return cls(0)

    @classmethod
    def all(cls: type[_F]) -> _F:
        """A flags value with all known bits set."""
        return cls(cls._all_bits)

    def bits(self) -> int:
        """Exactly the bits set in this flags value."""
        return self._bits

    @classmethod
    def from_bits(cls: type[_F], bits: int) -> _F | None:
        """Convert from bits, or return None if any unknown bits are set."""
        truncated = cls.from_bits_truncate(bits)
        return truncated if truncated.bits() == bits else None

    @classmethod
    def from_bits_truncate(cls: type[_F], bits: int) -> _F:
        """Convert from bits, unsetting any unknown bits."""
        return cls(cls._check_bits(bits) & cls._all_bits)

    @classmethod
    def from_bits_retain(cls: type[_F], bits: int) -> _F:
        """Convert from bits exactly."""
        return cls(bits)

    @classmethod
    def from_name(cls: type[_F], name: str) -> _F | None:
        """The value of the named flag, or None if no flag has that name."""
        if not name:
            return None
        for flag in cls._flags:
            if flag.name == name:
                return cls(flag.value)
        return None

    # Queries

    def contains_unknown_bits(self) -> bool:
        """Whether any bits outside the defined flags are set."""
        return self._all_bits & self._bits != self._bits

    def is_empty(self) -> bool:
        """Whether all bits are unset."""
        return self._bits == 0

    def is_all(self) -> bool:
        """Whether all known bits are set."""
        return self._all_bits | self._bits == self._bits

    def intersects(self: _F, other: _F) -> bool:
        """Whether any bit set in ``other`` is also set here."""
        return self._bits & self._check_other(other)._bits != 0

    def contains(self: _F, other: _F) -> bool:
        """Whether every bit set in ``other`` is also set here."""
        other_bits = self._check_other(other)._bits
        return self._bits & other_bits == other_bits

    # In-place updates

    def insert(self: _F, other: _F) -> None:
        """Set the bits of ``other``."""
        self._bits = self.union(other)._bits

    def remove(self: _F, other: _F) -> None:
        """Unset the bits of ``other``, keeping unknown bits of ``other`` untruncated."""
        self._bits = self.difference(other)._bits

    def toggle(self: _F, other: _F) -> None:
        """Flip the bits of ``other``."""
        self._bits = self.symmetric_difference(other)._bits

    def set(self: _F, other: _F, value: bool) -> None:
        """Insert ``other`` when ``value`` is true, otherwise remove it."""
        if value:
            self.insert(other)
        else:
            self.remove(other)

    # New values

    def intersection(self: _F, other: _F) -> _F:
        """The bitwise and of both values."""
        return type(self)(self._bits & self._check_other(other)._bits)

    def union(self: _F, other: _F) -> _F:
        """The bitwise or of both values."""
        return type(self)(self._bits | self._check_other(other)._bits)

    def difference(self: _F, other: _F) -> _F:
        """The bits set here but not in ``other``; ``other`` is not truncated."""
        return type(self)(self._bits & ~self._check_other(other)._bits)

    def symmetric_difference(self: _F, other: _F) -> _F:
        """The bitwise exclusive-or of both values."""
        return type(self)(self._bits ^ self._check_other(other)._bits)

    def complement(self: _F) -> _F:
        """The negation of the bits, truncated to the known bits."""
        return type(self).from_bits_truncate(~self._bits & self._mask())

    # Python protocol

    def __eq__(self, other) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self._bits == other._bits

    __hash__ = None  # values are mutable

    def __copy__(self: _F) -> _F:
        return type(self)(self._bits)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._bits:#x})"