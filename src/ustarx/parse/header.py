"""Decode ustar header blocks.

A header is a 512 byte block with fields at fixed offsets. :class:`TarHeader`
is a read-only view over the block: the raw fields are ``memoryview`` slices
of the archive buffer, and text and numeric values are only decoded when they
are accessed.
"""
from __future__ import annotations

import logging
from enum import Enum
from typing import Dict, Tuple

from ..errors import TarUnexpectedEOFError, assert_eq
from .utils import BytesLike, parse_octal, zterm

BLOCK_SIZE = 512
ZERO_BLOCK = bytes(BLOCK_SIZE)

# offset, length
NAME = (0, 100)
MODE = (100, 8)
UID = (108, 8)
GID = (116, 8)
SIZE = (124, 12)
MTIME = (136, 12)
CHKSUM = (148, 8)
TYPEFLAG = (156, 1)
LINKNAME = (157, 100)
MAGIC = (257, 6)
VERSION = (263, 2)
UNAME = (265, 32)
GNAME = (297, 32)
DEVMAJOR = (329, 8)
DEVMINOR = (337, 8)
PREFIX = (345, 155)
PADDING = (500, 12)
assert sum(PADDING) == BLOCK_SIZE, sum(PADDING)

USTAR_MAGIC = b"ustar\0"
GNU_MAGIC = b"ustar "

LOG = logging.getLogger(__name__)


class EntryType(Enum):
    File = 0
    Directory = 1
    Other = 2


TYPEFLAG_NAMES: Dict[bytes, str] = {
    b"0": "regular file",
    b"\0": "regular file",
    b"1": "hard link",
    b"2": "symbolic link",
    b"3": "character device",
    b"4": "block device",
    b"5": "directory",
    b"6": "FIFO",
    b"7": "contiguous file",
    b"g": "PAX global header",
    b"x": "PAX extended header",
    b"L": "GNU long name",
    b"K": "GNU long link",
    b"S": "GNU sparse file",
}


class TarHeader:
    """A view of one header block.

    The view is only valid while the underlying buffer is; callers which need
    the values for longer should copy them out (see
    :meth:`ustarx.models.TarEntryInfo.from_header`).
    """

    def __init__(self, block: memoryview, offset: int = 0):
        assert_eq("header length", BLOCK_SIZE, len(block), offset, TarUnexpectedEOFError)
        self.block = block
        self.offset = offset

    def _field(self, field: Tuple[int, int]) -> memoryview:
        start, length = field
        return self.block[start : start + length]

    def _octal(self, field: Tuple[int, int]) -> int:
        return parse_octal(self._field(field), self.offset + field[0])

    @property
    def name(self) -> str:
        return zterm(self._field(NAME))

    @property
    def linkname(self) -> str:
        return zterm(self._field(LINKNAME))

    @property
    def prefix(self) -> str:
        return zterm(self._field(PREFIX))

    @property
    def uname(self) -> str:
        return zterm(self._field(UNAME))

    @property
    def gname(self) -> str:
        return zterm(self._field(GNAME))

    @property
    def magic(self) -> bytes:
        return bytes(self._field(MAGIC))

    @property
    def version(self) -> bytes:
        return bytes(self._field(VERSION))

    @property
    def mode(self) -> int:
        return self._octal(MODE)

    @property
    def uid(self) -> int:
        return self._octal(UID)

    @property
    def gid(self) -> int:
        return self._octal(GID)

    @property
    def size(self) -> int:
        return self._octal(SIZE)

    @property
    def mtime(self) -> int:
        return self._octal(MTIME)

    @property
    def checksum(self) -> int:
        return self._octal(CHKSUM)

    @property
    def devmajor(self) -> int:
        return self._octal(DEVMAJOR)

    @property
    def devminor(self) -> int:
        return self._octal(DEVMINOR)

    @property
    def typeflag(self) -> bytes:
        return bytes(self._field(TYPEFLAG))

    @property
    def type(self) -> EntryType:
        typeflag = self.typeflag
        if typeflag in (b"0", b"\0"):
            return EntryType.File
        if typeflag == b"5":
            return EntryType.Directory
        return EntryType.Other

    @property
    def type_name(self) -> str:
        typeflag = self.typeflag
        return TYPEFLAG_NAMES.get(typeflag, f"unknown type {typeflag!r}")

    @property
    def path(self) -> str:
        """The logical path, with a non-empty prefix joined to the name."""
        prefix = self.prefix
        name = self.name
        if prefix:
            return f"{prefix}/{name}"
        return name

    @property
    def data_offset(self) -> int:
        return self.offset + BLOCK_SIZE

    def __repr__(self) -> str:
        return f"TarHeader(path={self.path!r}, typeflag={self.typeflag!r}, offset={self.offset})"


def is_zero_block(block: BytesLike) -> bool:
    return block == ZERO_BLOCK


def is_ustar(data: BytesLike) -> bool:
    """Returns true if the first block carries a POSIX or GNU ustar magic."""
    if len(data) < BLOCK_SIZE:
        return False
    start, length = MAGIC
    magic = bytes(data[start : start + length])
    LOG.debug("Archive magic %r", magic)
    return magic in (USTAR_MAGIC, GNU_MAGIC)
