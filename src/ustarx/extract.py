"""Write the entries of a tar archive to a destination directory.

Only regular files and directories are created. Every other entry type stops
the extraction. Files written before an error are left in place.
"""
from __future__ import annotations

import logging
from contextlib import ExitStack
from pathlib import Path
from typing import Optional

from .errors import (
    TarError,
    TarShortWriteError,
    TarUnexpectedEOFError,
    TarUnsupportedHeaderError,
    assert_le,
)
from .flags import DEFAULT_FLAGS, FeatureFlags
from .parse.header import EntryType, TarHeader
from .parse.utils import BytesLike
from .paths import StrPath, check_containment, validate_path
from .reader import TarReader, finish_entry, init_reader, next_entry
from .scratch import PathScratch

LOG = logging.getLogger(__name__)


def _write_file(reader: TarReader, header: TarHeader, target: Path, size: int) -> None:
    start = header.data_offset
    end = start + size
    assert_le("file data end", len(reader), end, start, TarUnexpectedEOFError)

    target.parent.mkdir(parents=True, exist_ok=True)
    try:
        f = target.open("wb")
    except OSError as e:
        LOG.warning("Skipping '%s', could not open '%s': %s", header.path, target, e)
        return

    with f:
        try:
            written = f.write(reader.data[start:end])
        except OSError as e:
            raise TarShortWriteError(
                f"file data: could not write '{target}' (at {start})"
            ) from e
    if written != size:
        raise TarShortWriteError(
            f"file data: {written!r} == {size!r} bytes written to '{target}' (at {start})"
        )
    LOG.debug("Wrote '%s', %d bytes from %d", target, size, start)


def _extract_pending(
    reader: TarReader,
    header: TarHeader,
    dest_dir: StrPath,
    flags: FeatureFlags,
    scratch: PathScratch,
) -> None:
    path = scratch.keep(header.path)
    validate_path(path, flags)
    target = Path(scratch.keep(check_containment(dest_dir, path)))

    entry_type = header.type
    if entry_type == EntryType.Other:
        raise TarUnsupportedHeaderError(
            f"entry type: {header.typeflag!r} ({header.type_name}) is not supported "
            f"for '{path}' (at {header.offset})"
        )

    size = header.size
    if entry_type == EntryType.Directory:
        LOG.debug("Creating directory '%s'", target)
        target.mkdir(parents=True, exist_ok=True)
    else:
        _write_file(reader, header, target, size)

    finish_entry(reader, size)


def extract_entry(
    reader: TarReader,
    dest_dir: StrPath,
    flags: FeatureFlags = DEFAULT_FLAGS,
    scratch: Optional[PathScratch] = None,
) -> None:
    """Materialize the pending entry of ``reader`` below ``dest_dir``.

    The reader is advanced past the entry's data on success. On error the
    reader is failed and the error is raised.
    """
    header = reader.pending()
    with ExitStack() as stack:
        if scratch is None or not scratch.active:
            scratch = stack.enter_context(PathScratch())
        try:
            _extract_pending(reader, header, dest_dir, flags, scratch)
        except (TarError, OSError) as e:
            reader.fail(e)
            raise


def extract_all(
    data: BytesLike, dest_dir: StrPath, flags: FeatureFlags = DEFAULT_FLAGS
) -> None:
    """Extract every entry of an in-memory tar archive below ``dest_dir``.

    Stops at the first error. Entries written before it are kept.
    """
    reader = init_reader(data)
    LOG.debug("Extracting %d bytes to '%s'", len(reader), dest_dir)
    count = 0
    with PathScratch() as scratch:
        while next_entry(reader, flags) is not None:
            extract_entry(reader, dest_dir, flags, scratch)
            count += 1
    LOG.debug("Extracted %d entries", count)
