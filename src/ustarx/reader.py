"""Walk the blocks of a tar archive held in memory.

The reader is a small state machine::

    Start -> HasHeader -> (extract or skip) -> HasHeader -> ... -> End
                 any error -> Failed

:func:`next_entry` decodes the header at the cursor. The cursor only moves
past the entry's data once the entry has been extracted (see
:func:`ustarx.extract.extract_entry`) or skipped (see :func:`skip_entry`).
"""
from __future__ import annotations

import logging
from enum import Enum
from typing import Optional

from .errors import (
    TarError,
    TarInvalidHeaderError,
    TarReaderStateError,
    TarUnexpectedEOFError,
    assert_all_zero,
    assert_le,
)
from .flags import DEFAULT_FLAGS, FeatureFlags
from .parse.checksum import validate_checksum
from .parse.header import BLOCK_SIZE, NAME, TarHeader, is_zero_block
from .parse.utils import BytesLike

LOG = logging.getLogger(__name__)


class ReaderState(Enum):
    Start = 0
    HasHeader = 1
    End = 2
    Failed = 3


class TarReader:
    def __init__(self, data: BytesLike):
        self.data = memoryview(data).cast("B").toreadonly()
        self.offset = 0
        self.state = ReaderState.Start
        self.header: Optional[TarHeader] = None
        self.error: Optional[Exception] = None

    def __len__(self) -> int:
        return len(self.data)

    def read_block(self) -> memoryview:
        end = self.offset + BLOCK_SIZE
        assert_le("block end", len(self.data), end, self.offset, TarUnexpectedEOFError)
        block = self.data[self.offset : end]
        self.offset = end
        return block

    def advance(self, size: int) -> None:
        """Move the cursor past ``size`` bytes of data, rounded up to whole blocks."""
        blocks = -(-size // BLOCK_SIZE)
        end = self.offset + blocks * BLOCK_SIZE
        assert_le("data end", len(self.data), end, self.offset, TarUnexpectedEOFError)
        self.offset = end

    def fail(self, error: Exception) -> None:
        self.state = ReaderState.Failed
        self.header = None
        self.error = error

    def pending(self) -> TarHeader:
        if self.state != ReaderState.HasHeader or self.header is None:
            raise TarReaderStateError(f"No pending entry (state {self.state.name})")
        return self.header


def init_reader(data: BytesLike) -> TarReader:
    return TarReader(data)


def _read_end(reader: TarReader, first: memoryview) -> None:
    location = reader.offset - BLOCK_SIZE
    if not is_zero_block(first):
        assert_all_zero("end marker", first, location, TarInvalidHeaderError)
    LOG.debug("First end marker block at %d", location)
    second = reader.read_block()
    assert_all_zero("end marker", second, reader.offset - BLOCK_SIZE, TarInvalidHeaderError)
    LOG.debug("Second end marker block at %d", reader.offset - BLOCK_SIZE)


def next_entry(
    reader: TarReader, flags: FeatureFlags = DEFAULT_FLAGS
) -> Optional[TarHeader]:
    """Decode the next header.

    Returns ``None`` once the end-of-archive marker has been read.

    :raises TarReaderStateError: If the previous entry is still pending.
    """
    if reader.state == ReaderState.End:
        return None
    if reader.state == ReaderState.Failed:
        assert reader.error is not None
        raise reader.error
    if reader.state == ReaderState.HasHeader and reader.header is not None:
        raise TarReaderStateError(
            f"Entry at {reader.offset - BLOCK_SIZE} must be extracted or skipped first"
        )

    try:
        block = reader.read_block()
        offset = reader.offset - BLOCK_SIZE
        if block[NAME[0]] == 0:
            _read_end(reader, block)
            reader.state = ReaderState.End
            reader.header = None
            LOG.debug("End of archive at %d", reader.offset)
            return None

        header = TarHeader(block, offset)
        if not flags.skip_checksum_validation:
            validate_checksum(header)
    except TarError as e:
        reader.fail(e)
        raise

    LOG.debug("Header '%s' (%s) at %d", header.path, header.type_name, offset)
    reader.header = header
    reader.state = ReaderState.HasHeader
    return header


def finish_entry(reader: TarReader, size: int) -> None:
    """Advance past the pending entry's data and wait for the next header."""
    try:
        reader.advance(size)
    except TarError as e:
        reader.fail(e)
        raise
    reader.header = None


def skip_entry(reader: TarReader) -> None:
    """Advance past the pending entry without touching the filesystem."""
    header = reader.pending()
    try:
        size = header.size
    except TarError as e:
        reader.fail(e)
        raise
    LOG.debug("Skipping '%s', %d bytes at %d", header.path, size, header.data_offset)
    finish_entry(reader, size)
