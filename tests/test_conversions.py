import pytest

from ftformat.conversions import (
    HEX_LOWER,
    HEX_UPPER,
    apply_hashtag,
    apply_sign,
    apply_zero_pad,
    check_base,
    null_string,
    numeric_precision,
    pad_width,
    pointer_repr,
    to_base,
    truncate_precision,
    utoa,
)


def test_check_base_returns_radix():
    assert check_base("01") == 2
    assert check_base(HEX_LOWER) == len(HEX_LOWER)


@pytest.mark.parametrize("base", ["", "0", "0120", "aa"])
def test_check_base_rejects_bad_bases(base):
    with pytest.raises(ValueError):
        check_base(base)


@pytest.mark.parametrize("value", [0, 1, 15, 16, 255, 4096, 2**40 + 7])
def test_to_base_round_trips_hex(value):
    assert int(to_base(value, HEX_LOWER), 16) == value
    assert to_base(value, HEX_UPPER) == to_base(value, HEX_LOWER).upper()


@pytest.mark.parametrize("value", [0, 5, 1023])
def test_to_base_round_trips_binary(value):
    assert int(to_base(value, "01"), 2) == value


def test_to_base_zero_is_first_digit():
    assert to_base(0, HEX_LOWER) == HEX_LOWER[0]


def test_to_base_rejects_negative():
    with pytest.raises(ValueError):
        to_base(-1, HEX_LOWER)


def test_pointer_repr_null():
    assert pointer_repr(0) == "(nil)"


@pytest.mark.parametrize("value", [1, 0xDEAD, 2**63])
def test_pointer_repr_round_trips(value):
    text = pointer_repr(value)
    assert text.startswith("0x")
    assert int(text[2:], 16) == value


def test_pointer_repr_wraps_negative_to_64_bits():
    assert int(pointer_repr(-1)[2:], 16) == 2**64 - 1


def test_utoa():
    assert utoa(42) == str(42)
    assert int(utoa(-1)) == 2**32 - 1


def test_truncate_precision_cuts():
    assert truncate_precision("%.3s", 1, "s", "abcdef") == "abc"


def test_truncate_precision_without_dot_keeps_text():
    assert truncate_precision("%5s", 1, "s", "abcdef") == "abcdef"
    assert truncate_precision("%.10s", 1, "s", "abc") == "abc"


def test_numeric_precision_zero_value_zero_precision():
    assert numeric_precision("%.0d", 1, "d", "0") == ""


def test_numeric_precision_pads_digits():
    result = numeric_precision("%.5d", 1, "d", "42")
    assert len(result) == 5
    assert int(result) == 42


def test_numeric_precision_keeps_sign_in_front():
    result = numeric_precision("%.5d", 1, "d", "-42")
    assert result.startswith("-")
    assert len(result) == 6
    assert int(result) == -42


def test_numeric_precision_no_dot():
    assert numeric_precision("%5d", 1, "d", "7") == "7"


def test_null_string():
    assert null_string("%s", 1) == "(null)"
    assert null_string("%.3s", 1) == ""
    assert null_string("%.6s", 1) == "(null)"


@pytest.mark.parametrize("conv", ["x", "X"])
def test_apply_hashtag(conv):
    result = apply_hashtag("%#" + conv, 1, conv, "ff")
    assert result == "0" + conv + "ff"


def test_apply_hashtag_without_flag():
    assert apply_hashtag("%x", 1, "x", "ff") == "ff"


def test_apply_sign():
    assert apply_sign("%+d", 1, "d", "5") == "+5"
    assert apply_sign("% d", 1, "d", "5") == " 5"
    assert apply_sign("%+d", 1, "d", "-5") == "-5"
    assert apply_sign("%d", 1, "d", "5") == "5"


def test_apply_zero_pad_positive():
    result = apply_zero_pad("%05d", 1, "d", "42", 0)
    assert len(result) == 5
    assert int(result) == 42
    assert result.endswith("42")


def test_apply_zero_pad_negative_keeps_sign():
    result = apply_zero_pad("%05d", 1, "d", "-42", 0)
    assert len(result) == 5
    assert result.startswith("-")
    assert int(result) == -42


def test_apply_zero_pad_with_precision_uses_spaces():
    result = apply_zero_pad("%08.3d", 1, "d", "042", 0)
    assert len(result) == 8
    assert result.strip() == "042"


def test_apply_zero_pad_leaves_room_for_prefix():
    padded = apply_zero_pad("%#06x", 1, "x", "2a", 2)
    result = apply_hashtag("%#06x", 1, "x", padded)
    assert len(result) == 6
    assert int(result, 16) == 0x2A


def test_apply_zero_pad_not_flagged():
    assert apply_zero_pad("%10d", 1, "d", "42", 0) == "42"
    assert apply_zero_pad("%05d", 1, "", "42", 0) == "42"


def test_pad_width_right_justifies():
    result = pad_width("%6d", 1, "42")
    assert len(result) == 6
    assert result.lstrip(" ") == "42"


def test_pad_width_left_justifies():
    result = pad_width("%-6d", 1, "42")
    assert len(result) == 6
    assert result.rstrip(" ") == "42"


def test_pad_width_repeated_minus():
    assert pad_width("%--4s", 1, "ab") == pad_width("%-4s", 1, "ab")


def test_pad_width_narrower_than_text():
    assert pad_width("%2s", 1, "abcdef") == "abcdef"
    assert pad_width("%s", 1, "abc") == "abc"