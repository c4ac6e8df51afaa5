import pytest

from archives import pack_archive, pack_header
from ustarx import FeatureFlags, extract_all
from ustarx.errors import TarChecksumError
from ustarx.parse.checksum import compute_checksum, validate_checksum
from ustarx.parse.header import TarHeader

CHKSUM_START = 148


def test_compute_checksum_matches_stored(tree_archive):
    block = tree_archive[:512]
    stored = int(block[CHKSUM_START : CHKSUM_START + 6], 8)
    assert compute_checksum(block) == stored


def test_compute_checksum_ignores_field():
    block = bytearray(pack_header("x"))
    before = compute_checksum(block)
    block[CHKSUM_START : CHKSUM_START + 8] = b"\xff" * 8
    assert compute_checksum(block) == before


def test_validate_checksum():
    validate_checksum(TarHeader(memoryview(pack_header("x"))))


def test_validate_checksum_empty_field():
    block = bytearray(pack_header("x"))
    block[CHKSUM_START : CHKSUM_START + 8] = bytes(8)
    with pytest.raises(TarChecksumError):
        validate_checksum(TarHeader(memoryview(block)))


def _flipped(index: int) -> bytes:
    header = bytearray(pack_header("f.txt", size=5))
    header[CHKSUM_START + index] ^= 0xFF
    return pack_archive((bytes(header), b"hello"))


@pytest.mark.parametrize("index", range(8))
def test_flipped_checksum_byte(index, dest):
    with pytest.raises(TarChecksumError):
        extract_all(_flipped(index), dest)
    assert not (dest / "f.txt").exists()


@pytest.mark.parametrize("index", range(8))
def test_flipped_checksum_byte_skipped(index, dest):
    extract_all(_flipped(index), dest, FeatureFlags(skip_checksum_validation=True))
    assert (dest / "f.txt").read_bytes() == b"hello"


def test_changed_content_byte(dest):
    header = bytearray(pack_header("f.txt", size=5))
    header[0] = ord("g")
    with pytest.raises(TarChecksumError, match="header checksum"):
        extract_all(pack_archive((bytes(header), b"hello")), dest)
