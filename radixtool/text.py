from radixtool.codec import (
    ALPHABET,
    InvalidArgument,
    OutOfRange,
    check_base,
    decode,
    encode,
)


MAX_CODE_POINT = 0x10FFFF
BYTE_VALUES = 256


def pad_width(base: int) -> int:
    """Digits needed to write any byte value (0-255) in ``base``."""
    check_base(base)
    if base == 1:
        return 0
    width = 1
    while base ** width < BYTE_VALUES:
        width += 1
    return width


def char_to_base(char: str, base: int, width: int = 0) -> str:
    if not isinstance(char, str) or len(char) != 1:
        raise InvalidArgument(f"Expected a single character, got {char!r}.")
    return encode(ord(char), base).rjust(width, ALPHABET[0])


def base_to_char(digits: str, base: int, case_insensitive: bool = False) -> str:
    value = decode(digits, base, case_insensitive=case_insensitive)
    if value > MAX_CODE_POINT:
        raise OutOfRange(value, MAX_CODE_POINT)
    return chr(value)


def split_groups(raw: str) -> list[str]:
    groups = raw.split()
    if not groups:
        raise InvalidArgument("Input is empty.")
    return groups


def _group(value: int, base: int, width: int = 0) -> str:
    # Unary zero is the empty string, which cannot survive as a space-separated group
    if base == 1 and value == 0:
        raise InvalidArgument("Zero has no Base 1 group; it would be lost between separators.")
    return encode(value, base).rjust(width, ALPHABET[0])


def text_to_base(text: str, base: int, pad: bool = True) -> list[str]:
    if not text:
        raise InvalidArgument("Input is empty.")
    width = pad_width(base) if pad else 0
    return [_group(ord(char), base, width) for char in text]


def base_to_text(groups: list[str], base: int) -> str:
    case_insensitive = base <= 36
    return "".join(base_to_char(group, base, case_insensitive) for group in groups)


def numbers_to_base(tokens: list[str], base: int) -> list[str]:
    """Encode space-separated decimal numbers into ``base``."""
    check_base(base)
    return [_group(decode(token, 10), base) for token in tokens]


def convert_groups(groups: list[str], from_base: int, to_base: int) -> list[str]:
    """Convert each group from ``from_base`` into ``to_base``."""
    check_base(to_base)
    case_insensitive = check_base(from_base) <= 36
    return [
        _group(decode(group, from_base, case_insensitive), to_base)
        for group in groups
    ]
