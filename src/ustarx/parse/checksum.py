import logging

from ..errors import (
    TarChecksumError,
    TarInvalidHeaderError,
    TarNumericValueTooBigError,
    assert_eq,
)
from .header import CHKSUM, TarHeader
from .utils import BytesLike

# the checksum field is summed as if it held eight blanks
CHKSUM_BLANKS = ord(" ") * CHKSUM[1]

LOG = logging.getLogger(__name__)


def compute_checksum(block: BytesLike) -> int:
    """Return the unsigned byte sum of a header block.

    The bytes of the checksum field itself are counted as ASCII spaces.
    """
    start, length = CHKSUM
    total = sum(block) - sum(block[start : start + length])
    return total + CHKSUM_BLANKS


def _stored_checksum(header: TarHeader) -> int:
    start, length = CHKSUM
    raw = bytes(header.block[start : start + length])
    location = header.offset + start
    try:
        stored = header.checksum
    except (TarInvalidHeaderError, TarNumericValueTooBigError) as e:
        raise TarChecksumError(
            f"header checksum: {raw!r} is not octal (at {location})"
        ) from e
    # only terminators may follow the digits
    trailing = raw.lstrip(b" ").lstrip(b"01234567")
    if trailing.strip(b"\0 "):
        raise TarChecksumError(
            f"header checksum: {raw!r} has data after the terminator (at {location})"
        )
    return stored


def validate_checksum(header: TarHeader) -> None:
    computed = compute_checksum(header.block)
    stored = _stored_checksum(header)
    LOG.debug("Header checksum %d, computed %d at %d", stored, computed, header.offset)
    assert_eq("header checksum", computed, stored, header.offset, TarChecksumError)
