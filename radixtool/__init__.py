from radixtool.codec import (
    ALPHABET,
    CodecError,
    InvalidArgument,
    InvalidDigit,
    OutOfRange,
    decode,
    encode,
)

__version__ = "1.0.0"
