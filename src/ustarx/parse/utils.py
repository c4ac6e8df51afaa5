import sys
from typing import Union

from ..errors import TarInvalidHeaderError, TarNumericValueTooBigError

BytesLike = Union[bytes, bytearray, memoryview]

# the largest value a platform integer (ssize_t) can hold
OCTAL_MAX = sys.maxsize

_ZERO = ord("0")
_SEVEN = ord("7")
_SPACE = ord(" ")


def zterm(buf: BytesLike) -> str:
    """Return a string from a NUL-padded buffer.

    The field is cut at the first NUL character. Fields which use their full
    width have no terminator, and are returned whole. Names are decoded as
    UTF-8, undecodable bytes are kept as surrogates so they survive a round
    trip through the filesystem APIs.
    """
    raw = bytes(buf)
    null_index = raw.find(b"\0")
    if null_index > -1:
        raw = raw[:null_index]
    return raw.decode("utf-8", "surrogateescape")


def parse_octal(buf: BytesLike, location: int = 0) -> int:
    """Return the value of an ASCII octal field.

    Leading blanks are skipped. The digits end at the first NUL or blank, or
    at the end of the field.

    :raises TarInvalidHeaderError: If a byte other than an octal digit is
        found before the terminator.
    :raises TarNumericValueTooBigError: If the value does not fit into
        ``OCTAL_MAX``.
    """
    result = 0
    started = False
    for i, byte in enumerate(buf):
        if byte == _SPACE and not started:
            continue
        if byte in (0, _SPACE):
            break
        if byte < _ZERO or byte > _SEVEN:
            raise TarInvalidHeaderError(
                f"octal field: {bytes(buf)!r} has non-octal byte 0x{byte:02X} (at {location + i})"
            )
        started = True
        digit = byte - _ZERO
        if result > (OCTAL_MAX - digit) // 8:
            raise TarNumericValueTooBigError(
                f"octal field: {bytes(buf)!r} exceeds {OCTAL_MAX} (at {location})"
            )
        result = result * 8 + digit
    return result
