import re


ALPHABET = "0123456789ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz+/"
MIN_BASE = 1
MAX_BASE = len(ALPHABET)

_DIGIT_VALUES = {symbol: index for index, symbol in enumerate(ALPHABET)}


class CodecError(ValueError):
    pass


class InvalidArgument(CodecError):
    pass


class InvalidDigit(CodecError):
    def __init__(self, char: str, position: int, base: int):
        self.char = char
        self.position = position
        self.base = base
        super().__init__(
            f"'{char}' at position {position} is not a valid digit in base {base}."
        )


class OutOfRange(CodecError):
    def __init__(self, value: int, limit: int):
        self.value = value
        self.limit = limit
        super().__init__(f"{value} is out of range (maximum is {limit}).")


def _is_int(value) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def check_base(base: int) -> int:
    if not _is_int(base):
        raise InvalidArgument("Base must be an integer.")
    if not MIN_BASE <= base <= MAX_BASE:
        raise InvalidArgument(
            f"Base must be between {MIN_BASE} and {MAX_BASE}, got {base}."
        )
    return base


def parse_base(value: str) -> int:
    """Parse a base given as "16" or "Base 16"."""
    text = value.strip()
    if text.lower().startswith("base"):
        text = text[4:].strip()
    try:
        base = int(text)
    except ValueError:
        raise InvalidArgument(f"Base must be an integer, got '{value}'.")
    return check_base(base)


def encode(value: int, base: int) -> str:
    """Encode a non-negative integer as a digit string in ``base``.

    Base 1 is unary: the zero symbol repeated ``value`` times, so zero
    encodes to the empty string. For every other base zero encodes to a
    single zero symbol.
    """
    check_base(base)
    if not _is_int(value):
        raise InvalidArgument("Value must be an integer.")
    if value < 0:
        raise InvalidArgument(f"Value must be non-negative, got {value}.")

    if base == 1:
        return ALPHABET[0] * value

    if value == 0:
        return ALPHABET[0]

    digits = []
    while value:
        value, remainder = divmod(value, base)
        digits.append(ALPHABET[remainder])
    return "".join(reversed(digits))


def decode(digits: str, base: int, case_insensitive: bool = False) -> int:
    """Decode a digit string in ``base`` back into an integer.

    ``case_insensitive`` folds lowercase letters to uppercase before lookup
    and is only meaningful up to base 36, where letters of both cases would
    otherwise name different digits.
    """
    check_base(base)
    if not isinstance(digits, str):
        raise InvalidArgument("Digits must be a string.")
    if case_insensitive:
        if base > 36:
            raise InvalidArgument(
                f"Case-insensitive decoding is only defined up to base 36, got {base}."
            )
        digits = digits.upper()

    if base == 1:
        for position, char in enumerate(digits):
            if char != ALPHABET[0]:
                raise InvalidDigit(char, position, base)
        return len(digits)

    if not digits:
        raise InvalidArgument(f"Cannot decode an empty string in base {base}.")

    value = 0
    for position, char in enumerate(digits):
        digit = _DIGIT_VALUES.get(char)
        if digit is None or digit >= base:
            raise InvalidDigit(char, position, base)
        value = value * base + digit
    return value


def digit_pattern(base: int) -> re.Pattern:
    """Regex that accepts a whole group of digits valid in ``base``."""
    check_base(base)
    if base == 1:
        return re.compile(f"^{re.escape(ALPHABET[0])}*$")
    symbols = re.escape(ALPHABET[:base])
    flags = re.IGNORECASE if base <= 36 else 0
    return re.compile(f"^[{symbols}]+$", flags)


def convert_number(num_str: str, from_base: int, to_base: int) -> str:
    value = decode(num_str.strip(), from_base, case_insensitive=from_base <= 36)
    return encode(value, to_base)
