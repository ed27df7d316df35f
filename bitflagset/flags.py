"""The user-facing flags type: iteration, operators and formatting."""

from __future__ import annotations

from functools import total_ordering
from typing import Iterable, Iterator, TypeVar

from .base import FlagsCore

__all__ = ["Flags"]

_F = TypeVar("_F", bound="Flags")


@total_ordering
class Flags(FlagsCore):
    """A flags type with set operators, iteration and readable formatting.

    Subclass it and declare flags as integer class attributes::

        class Mode(Flags, width=8):
            A = 1
            B = 1 << 1
    """

    __slots__ = ()

    # Iteration

    @classmethod
    def _named_bits(cls, source: int) -> Iterator[tuple[str, int]]:
        remaining = source
        for flag in cls._flags:
            if not remaining:
                return
            if flag.is_unnamed():
                continue
            bits = flag.value
            if source & bits == bits and remaining & bits:
                remaining &= ~bits
                yield flag.name, bits

    def _parts(self) -> tuple[list[tuple[str, int]], int]:
        named = list(self._named_bits(self._bits))
        remaining = self._bits
        for _, bits in named:
            remaining &= ~bits
        return named, remaining

    def iter_names(self: _F) -> Iterator[tuple[str, _F]]:
        """Yield ``(name, value)`` for each contained named flag.

        Unknown bits, and bits not covered by a contained named flag, are
        not yielded.
        """
        cls = type(self)
        return ((name, cls(bits)) for name, bits in self._named_bits(self._bits))

    def iter(self: _F) -> Iterator[_F]:
        """Yield each contained named flag, then any remaining bits together."""
        named, remaining = self._parts()
        cls = type(self)

        def generate() -> Iterator[_F]:
            for _, bits in named:
                yield cls(bits)
            if remaining:
                yield cls(remaining)

        return generate()

    def __iter__(self: _F) -> Iterator[_F]:
        return self.iter()

    def extend(self: _F, items: Iterable[_F]) -> None:
        """Insert every flags value from ``items``."""
        for item in items:
            self.insert(item)

    @classmethod
    def collect(cls: type[_F], items: Iterable[_F]) -> _F:
        """The union of every flags value in ``items``."""
        result = cls.empty()
        result.extend(items)
        return result

    # Operators

    def _same(self, other) -> bool:
        return type(other) is type(self)

    def __or__(self, other):
        if not self._same(other):
            return NotImplemented
        return self.union(other)

    def __ior__(self, other):
        if not self._same(other):
            return NotImplemented
        self.insert(other)
        return self

    def __and__(self, other):
        if not self._same(other):
            return NotImplemented
        return self.intersection(other)

    def __iand__(self, other):
        if not self._same(other):
            return NotImplemented
        self._bits = self.intersection(other)._bits
        return self

    def __xor__(self, other):
        if not self._same(other):
            return NotImplemented
        return self.symmetric_difference(other)

    def __ixor__(self, other):
        if not self._same(other):
            return NotImplemented
        self.toggle(other)
        return self

    def __sub__(self, other):
        if not self._same(other):
            return NotImplemented
        return self.difference(other)

    def __isub__(self, other):
        if not self._same(other):
            return NotImplemented
        self.remove(other)
        return self

    def __invert__(self: _F) -> _F:
        return self.complement()

    def __contains__(self, other) -> bool:
        return self._same(other) and self.contains(other)

    def __bool__(self) -> bool:
        return not self.is_empty()

    def __lt__(self, other) -> bool:
        if not self._same(other):
            return NotImplemented
        return self._bits < other._bits

    # Formatting

    def __repr__(self) -> str:
        name = type(self).__name__
        if not self._bits:
            return f"{name}(0x0)"
        named, remaining = self._parts()
        parts = [flag_name for flag_name, _ in named]
        if remaining:
            parts.append(f"{remaining:#x}")
        return f"{name}({' | '.join(parts)})"

    def __format__(self, spec: str) -> str:
        if not spec:
            return str(self)
        return format(self._bits, spec)