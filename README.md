# bitflagset

Sets of named bit flags stored in a fixed-width unsigned integer. Each flags
type declares its flags as integer class attributes and, optionally, its bit
width. Values keep any unknown bits unless you ask for them to be dropped. A
short text format writes values out and reads them back.

## Installing

```
pip install bitflagset
```

## Declaring a flags type

Subclass `bitflagset.flags.Flags` and list the flags in the class body:

```python
from bitflagset.flags import Flags
from bitflagset.parser import from_str, to_string


class Perm(Flags, width=8):
    READ = 1
    WRITE = 1 << 1
    EXEC = 1 << 2
    ALL = READ | WRITE | EXEC


p = Perm.READ | Perm.WRITE
repr(p)                      # 'Perm(READ | WRITE)'
to_string(p)                 # 'READ | WRITE'
repr(~p)                     # 'Perm(EXEC)'
repr(from_str(Perm, "READ | 0x8"))   # 'Perm(READ | 0x8)'
format(p, "08b")             # '00000011'
```

Rules for the class body:

- Every public integer attribute becomes a named flag, in declaration order.
- An attribute named `_` declares an unnamed flag. Its bits count as known,
  but it never shows up by name. `_ = ~0` makes every bit known.
- Other attributes starting with `_` are left alone.
- Declared values are masked to the bit width, which defaults to 32. Pass
  `width=` in the class statement to change it.

Reading a flag attribute such as `Perm.READ` gives a fresh value each time,
so changing that value in place does not change the declaration.

Values are checked when they are built. Bits that are not an `int` raise
`TypeError`. Bits that do not fit in the width raise `ValueError`. Combining
values of two different flags types raises `TypeError`.

Flags values are mutable and so are not hashable.

## Core operations

`bitflagset.base.FlagsCore` is the base class. It gives every flags type
these operations:

- Constructors: `empty()`, `all()`, `from_bits(bits)`,
  `from_bits_truncate(bits)`, `from_bits_retain(bits)` and `from_name(name)`.
  `from_bits` returns `None` if any unknown bits are set. `from_name` returns
  `None` for an empty or unknown name.
- Queries: `bits()`, `is_empty()`, `is_all()`, `intersects(other)`,
  `contains(other)` and `contains_unknown_bits()`.
- In-place changes: `insert`, `remove`, `toggle` and `set(other, value)`.
- New values: `union`, `intersection`, `difference`, `symmetric_difference`
  and `complement`. `complement` drops unknown bits. `difference` does not
  truncate `other`.

`defined()` returns the declared `Flag` entries in declaration order. Each
entry has a `name` and a `value`, and answers `is_named()` and
`is_unnamed()`.

Two values are equal when they have the same type and the same bits.

## The `Flags` class

`bitflagset.flags.Flags` builds on `FlagsCore`:

- The operators `|`, `&`, `^`, `-` and `~`, along with `|=`, `&=`, `^=` and
  `-=`. The `~` operator drops unknown bits.
- `other in value` tests `contains`. A value is true when it has any bits set.
- Values of one type are ordered by their bits.
- `repr()` lists the contained named flags and then any leftover bits in
  hex, for example `Perm(READ | 0x8)`. An empty value prints as `Perm(0x0)`.
- `format(value, spec)` with a non-empty spec formats the bits as an
  integer, so `x`, `X`, `o` and `b` all work.

Iteration is provided by two methods:

- `iter()`, also used by `for flag in value`, yields each contained named
  flag. Any bits that no yielded flag covers come last, as one extra value.
- `iter_names()` yields `(name, value)` pairs for the named flags only.

A named flag is yielded only if all of its bits are set and it adds bits not
already yielded. Unnamed flags are never yielded by name.

`extend(items)` ORs each value from an iterable into a value in place.
`Perm.collect(items)` builds a new value from an iterable the same way.

## Text format

`bitflagset.parser` reads and writes values as flag names joined by `|`, with
any leftover bits as a trailing hex number:

```
A | B | 0x8
```

- `to_string(flags)` writes a value in this format. An empty value is
  written as an empty string.
- `from_str(FlagsType, text)` reads one back. Whitespace around each part is
  ignored and names are case-sensitive. Hex numbers start with `0x` and are
  followed by hex digits in either case. Unknown bits given in hex are kept.
- `to_string_truncate` and `from_str_truncate` drop unknown bits.
- `to_string_strict` writes only the contained named flags.
  `from_str_strict` accepts names only and rejects any `0x` part.

Malformed input raises `ParseError`, which is a subclass of `ValueError`.
Its message starts with one of:

- `unrecognized named flag`: the name matches no flag of the type.
- `invalid hex flag`: the digits are not hex, the number does not fit the
  width, or a hex part was given to `from_str_strict`.
- `encountered empty flag`: nothing was found between two separators.

Where one applies, the offending text follows in backquotes.

## Scope

This is a library only. It has no command-line tool.

## Running the tests

```
pip install -e ".[test]"
pytest
```