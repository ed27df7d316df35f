import pytest

from bitflagset.flags import Flags
from bitflagset.parser import (
    ParseError,
    from_str,
    from_str_strict,
    from_str_truncate,
    to_string,
    to_string_strict,
    to_string_truncate,
)


class Basic(Flags, width=8):
    A = 1
    B = 1 << 1
    C = 1 << 2
    ABC = A | B | C


class Inverted(Flags, width=8):
    ABC = 1 | 1 << 1 | 1 << 2
    A = 1
    B = 1 << 1
    C = 1 << 2


class Zero(Flags, width=8):
    ZERO = 0


class ZeroOne(Flags, width=8):
    ZERO = 0
    ONE = 1


class Unicode(Flags, width=8):
    一 = 1
    二 = 1 << 1


class Overlapping(Flags, width=8):
    AB = 1 | 1 << 1
    BC = 1 << 1 | 1 << 2


class OverlappingFull(Flags, width=8):
    A = 1
    B = 1
    C = 1
    D = 1 << 1


class External(Flags, width=8):
    A = 1
    B = 1 << 1
    C = 1 << 2
    ABC = A | B | C
    _ = ~0


class ExternalFull(Flags, width=8):
    _ = ~0


class Flags10(Flags, width=32):
    A = 1 << 0
    B = 1 << 1
    C = 1 << 2
    D = 1 << 3
    E = 1 << 4
    F = 1 << 5
    G = 1 << 6
    H = 1 << 7
    I = 1 << 8
    J = 1 << 9


# Round trips


def test_roundtrip():
    for bits in range(256):
        value = Basic.from_bits_retain(bits)
        assert from_str(Basic, to_string(value)) == value


def test_roundtrip_truncate():
    for bits in range(256):
        value = Basic.from_bits_retain(bits)
        text = to_string_truncate(value)
        assert from_str_truncate(Basic, text) == Basic.from_bits_truncate(bits)


def test_roundtrip_strict():
    for bits in range(256):
        value = Basic.from_bits_retain(bits)
        text = to_string_strict(value)
        expected = Basic.collect(flag for _, flag in value.iter_names())
        assert from_str_strict(Basic, text) == expected


# from_str


@pytest.mark.parametrize(
    "text, expected",
    [
        ("", 0),
        ("A", 1),
        (" A ", 1),
        ("A | B | C", 1 | 1 << 1 | 1 << 2),
        ("A\n|\tB\r\n|   C ", 1 | 1 << 1 | 1 << 2),
        ("A|B|C", 1 | 1 << 1 | 1 << 2),
        ("0x8", 1 << 3),
        ("A | 0x8", 1 | 1 << 3),
        ("0x1 | 0x8 | B", 1 | 1 << 1 | 1 << 3),
    ],
)
def test_from_str_valid(text, expected):
    assert from_str(Basic, text).bits() == expected


def test_from_str_unicode():
    assert from_str(Unicode, "一 | 二").bits() == 1 | 1 << 1


@pytest.mark.parametrize(
    "text, prefix",
    [
        ("a", "unrecognized named flag"),
        ("A & B", "unrecognized named flag"),
        ("0xg", "invalid hex flag"),
        ("0xffffffffffff", "invalid hex flag"),
    ],
)
def test_from_str_invalid(text, prefix):
    with pytest.raises(ParseError) as info:
        from_str(Basic, text)
    assert str(info.value).startswith(prefix)


def test_from_str_error_messages_name_the_input():
    with pytest.raises(ParseError) as info:
        from_str(Basic, "a")
    assert str(info.value) == "unrecognized named flag `a`"
    with pytest.raises(ParseError) as info:
        from_str(Basic, "0xg")
    assert str(info.value) == "invalid hex flag `g`"


@pytest.mark.parametrize("text", ["A | | B", "A |", "|"])
def test_from_str_empty_flag(text):
    with pytest.raises(ParseError) as info:
        from_str(Basic, text)
    assert str(info.value) == "encountered empty flag"


def test_parse_error_is_value_error():
    with pytest.raises(ValueError):
        from_str(Basic, "nope")


# to_string


@pytest.mark.parametrize(
    "value, expected",
    [
        (Basic.empty(), ""),
        (Basic.A, "A"),
        (Basic.all(), "A | B | C"),
        (Basic.from_bits_retain(1 << 3), "0x8"),
        (Basic.A | Basic.from_bits_retain(1 << 3), "A | 0x8"),
        (Zero.ZERO, ""),
        (Inverted.all(), "ABC"),
        (Overlapping.from_bits_retain(1), "0x1"),
        (OverlappingFull.C, "A"),
        (OverlappingFull.C | OverlappingFull.D, "A | D"),
    ],
)
def test_to_string(value, expected):
    assert to_string(value) == expected


@pytest.mark.parametrize(
    "value, expected",
    [
        (ZeroOne.ONE, "ONE"),
        (Zero.ZERO | Zero.from_bits_retain(1), "0x1"),
        (Overlapping.from_bits_retain(1 << 1), "0x2"),
        (External.from_bits_retain(1 | 1 << 1 | 1 << 3), "A | B | 0x8"),
        (External.all(), "A | B | C | 0xf8"),
        (ExternalFull.all(), "0xff"),
    ],
)
def test_to_string_formats_like_debug_body(value, expected):
    assert to_string(value) == expected


# from_str_truncate


@pytest.mark.parametrize(
    "text, expected",
    [
        ("", 0),
        ("A", 1),
        (" A ", 1),
        ("A | B | C", 1 | 1 << 1 | 1 << 2),
        ("A\n|\tB\r\n|   C ", 1 | 1 << 1 | 1 << 2),
        ("A|B|C", 1 | 1 << 1 | 1 << 2),
        ("0x8", 0),
        ("A | 0x8", 1),
        ("0x1 | 0x8 | B", 1 | 1 << 1),
    ],
)
def test_from_str_truncate_valid(text, expected):
    assert from_str_truncate(Basic, text).bits() == expected


def test_from_str_truncate_unicode():
    assert from_str_truncate(Unicode, "一 | 二").bits() == 1 | 1 << 1


def test_from_str_truncate_propagates_errors():
    with pytest.raises(ParseError) as info:
        from_str_truncate(Basic, "a")
    assert str(info.value).startswith("unrecognized named flag")


# to_string_truncate


@pytest.mark.parametrize(
    "value, expected",
    [
        (Basic.empty(), ""),
        (Basic.A, "A"),
        (Basic.all(), "A | B | C"),
        (Basic.from_bits_retain(1 << 3), ""),
        (Basic.A | Basic.from_bits_retain(1 << 3), "A"),
        (Zero.ZERO, ""),
        (Inverted.all(), "ABC"),
        (Overlapping.from_bits_retain(1), "0x1"),
        (OverlappingFull.C, "A"),
        (OverlappingFull.C | OverlappingFull.D, "A | D"),
    ],
)
def test_to_string_truncate(value, expected):
    assert to_string_truncate(value) == expected


# from_str_strict


@pytest.mark.parametrize(
    "text, expected",
    [
        ("", 0),
        ("A", 1),
        (" A ", 1),
        ("A | B | C", 1 | 1 << 1 | 1 << 2),
        ("A\n|\tB\r\n|   C ", 1 | 1 << 1 | 1 << 2),
        ("A|B|C", 1 | 1 << 1 | 1 << 2),
    ],
)
def test_from_str_strict_valid(text, expected):
    assert from_str_strict(Basic, text).bits() == expected


def test_from_str_strict_unicode():
    assert from_str_strict(Unicode, "一 | 二").bits() == 1 | 1 << 1


@pytest.mark.parametrize(
    "text, prefix",
    [
        ("a", "unrecognized named flag"),
        ("A & B", "unrecognized named flag"),
        ("0x1", "invalid hex flag"),
        ("0xg", "invalid hex flag"),
        ("0xffffffffffff", "invalid hex flag"),
    ],
)
def test_from_str_strict_invalid(text, prefix):
    with pytest.raises(ParseError) as info:
        from_str_strict(Basic, text)
    assert str(info.value).startswith(prefix)


def test_from_str_strict_hex_message():
    with pytest.raises(ParseError) as info:
        from_str_strict(Basic, "A | 0x1")
    assert str(info.value) == "invalid hex flag `unsupported hex flag value`"


# to_string_strict


@pytest.mark.parametrize(
    "value, expected",
    [
        (Basic.empty(), ""),
        (Basic.A, "A"),
        (Basic.all(), "A | B | C"),
        (Basic.from_bits_retain(1 << 3), ""),
        (Basic.A | Basic.from_bits_retain(1 << 3), "A"),
        (Zero.ZERO, ""),
        (Inverted.all(), "ABC"),
        (Overlapping.from_bits_retain(1), ""),
        (OverlappingFull.C, "A"),
        (OverlappingFull.C | OverlappingFull.D, "A | D"),
    ],
)
def test_to_string_strict(value, expected):
    assert to_string_strict(value) == expected


# ParseError constructors


def test_parse_error_constructors():
    assert str(ParseError.empty_flag()) == "encountered empty flag"
    assert str(ParseError.invalid_named_flag("X")) == "unrecognized named flag `X`"
    assert str(ParseError.invalid_hex_flag("zz")) == "invalid hex flag `zz`"


# Larger flags type


def test_format_flags10():
    assert to_string(Flags10.J) == "J"
    five = Flags10.F | Flags10.G | Flags10.H | Flags10.I | Flags10.J
    assert to_string(five) == "F | G | H | I | J"
    assert to_string(Flags10.all()) == "A | B | C | D | E | F | G | H | I | J"


@pytest.mark.parametrize(
    "text, expected",
    [
        ("J", 1 << 9),
        ("F | G | H | I | J", 0b11_1110_0000),
        ("A | B | C | D | E | F | G | H | I | J", 0b11_1111_1111),
        ("0xFF", 0xFF),
    ],
)
def test_parse_flags10(text, expected):
    assert from_str(Flags10, text).bits() == expected


def test_hex_beyond_width_rejected_for_wider_type():
    with pytest.raises(ParseError) as info:
        from_str(Flags10, "0x1ffffffff")
    assert str(info.value).startswith("invalid hex flag")