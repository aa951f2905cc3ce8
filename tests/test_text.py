import pytest

from radixtool.codec import InvalidArgument, InvalidDigit, OutOfRange
from radixtool.text import (
    base_to_char,
    base_to_text,
    char_to_base,
    convert_groups,
    numbers_to_base,
    pad_width,
    split_groups,
    text_to_base,
)


@pytest.mark.parametrize(
    "base, width",
    [(1, 0), (2, 8), (3, 6), (8, 3), (10, 3), (15, 3), (16, 2), (64, 2)],
)
def test_pad_width(base, width):
    assert pad_width(base) == width


def test_text_to_base_pads_each_character():
    assert text_to_base("Hi", 2) == ["01001000", "01101001"]
    assert text_to_base("Hi", 16) == ["48", "69"]
    assert text_to_base("\n", 10) == ["010"]


def test_text_to_base_without_padding():
    assert text_to_base("Hi", 2, pad=False) == ["1001000", "1101001"]


def test_text_to_base_unary():
    assert text_to_base("A", 1) == ["0" * 65]


def test_text_to_base_empty_input():
    with pytest.raises(InvalidArgument):
        text_to_base("", 16)


def test_char_to_base():
    assert char_to_base("A", 16) == "41"
    assert char_to_base("A", 16, width=4) == "0041"
    # wider than the pad width is never truncated
    assert char_to_base("€", 16, width=2) == "20AC"
    with pytest.raises(InvalidArgument):
        char_to_base("ab", 16)


def test_base_to_text():
    assert base_to_text(["48", "69"], 16) == "Hi"
    assert base_to_text(["6a"], 16) == "j"
    assert base_to_text(["01001000", "01101001"], 2) == "Hi"


def test_base_to_char_out_of_range():
    assert base_to_char("10FFFF", 16) == chr(0x10FFFF)
    with pytest.raises(OutOfRange) as exc:
        base_to_char("110000", 16)
    assert exc.value.value == 0x110000
    with pytest.raises(OutOfRange):
        base_to_char("4110000", 16)


def test_numbers_to_base():
    assert numbers_to_base(["255", "10"], 16) == ["FF", "A"]
    assert numbers_to_base(["0"], 2) == ["0"]
    assert numbers_to_base(["3"], 1) == ["000"]


def test_numbers_to_base_rejects_non_decimal():
    with pytest.raises(InvalidDigit) as exc:
        numbers_to_base(["12a"], 16)
    assert exc.value.char == "a"
    assert exc.value.position == 2

    with pytest.raises(InvalidDigit) as exc:
        numbers_to_base(["-5"], 16)
    assert exc.value.char == "-"


def test_convert_groups():
    assert convert_groups(["FF"], 16, 8) == ["377"]
    assert convert_groups(["ff", "10"], 16, 2) == ["11111111", "10000"]
    assert convert_groups(["11"], 64, 10) == ["65"]
    assert convert_groups(["000"], 1, 10) == ["3"]


def test_convert_groups_invalid_digit():
    with pytest.raises(InvalidDigit):
        convert_groups(["8"], 8, 10)


def test_split_groups():
    assert split_groups("  48   69 ") == ["48", "69"]
    with pytest.raises(InvalidArgument):
        split_groups("   ")


def test_numbers_to_base_very_long_token():
    token = "9" * 5000
    assert numbers_to_base([token], 16) == [format(10**5000 - 1, "X")]


def test_unary_zero_group_is_rejected():
    """Zero is the empty string in Base 1 and would vanish between separators."""
    with pytest.raises(InvalidArgument):
        text_to_base("a\x00", 1)
    with pytest.raises(InvalidArgument):
        numbers_to_base(["3", "0"], 1)
    with pytest.raises(InvalidArgument):
        convert_groups(["0"], 16, 1)
