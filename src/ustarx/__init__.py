"""Extract ustar archives held in memory, refusing unsafe entries."""
from .errors import (
    TarChecksumError,
    TarError,
    TarInvalidHeaderError,
    TarNoMemoryError,
    TarNumericValueTooBigError,
    TarParseError,
    TarPathError,
    TarPathOutsideRootError,
    TarReaderStateError,
    TarShortWriteError,
    TarUnexpectedEOFError,
    TarUnsafePathError,
    TarUnsupportedHeaderError,
)
from .extract import extract_all, extract_entry
from .flags import DEFAULT_FLAGS, FeatureFlags
from .listing import iter_entries, list_entries
from .models import TarEntryInfo
from .parse.header import EntryType, TarHeader, is_ustar
from .paths import check_containment, validate_path
from .reader import ReaderState, TarReader, init_reader, next_entry, skip_entry
from .scratch import PathScratch

__version__ = "0.1.0"

__all__ = [
    "DEFAULT_FLAGS",
    "EntryType",
    "FeatureFlags",
    "PathScratch",
    "ReaderState",
    "TarChecksumError",
    "TarEntryInfo",
    "TarError",
    "TarHeader",
    "TarInvalidHeaderError",
    "TarNoMemoryError",
    "TarNumericValueTooBigError",
    "TarParseError",
    "TarPathError",
    "TarPathOutsideRootError",
    "TarReader",
    "TarReaderStateError",
    "TarShortWriteError",
    "TarUnexpectedEOFError",
    "TarUnsafePathError",
    "TarUnsupportedHeaderError",
    "check_containment",
    "extract_all",
    "extract_entry",
    "init_reader",
    "is_ustar",
    "iter_entries",
    "list_entries",
    "next_entry",
    "skip_entry",
    "validate_path",
]
