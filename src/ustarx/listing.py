"""List the entries of a tar archive without extracting anything.

Entry types which cannot be extracted are listed too, since nothing is
written. Paths are not validated for the same reason.
"""
import logging
from typing import Iterator, List

from .flags import DEFAULT_FLAGS, FeatureFlags
from .models import TarEntryInfo
from .parse.utils import BytesLike
from .reader import init_reader, next_entry, skip_entry

LOG = logging.getLogger(__name__)


def iter_entries(
    data: BytesLike, flags: FeatureFlags = DEFAULT_FLAGS
) -> Iterator[TarEntryInfo]:
    reader = init_reader(data)
    LOG.debug("Listing archive data...")
    while True:
        header = next_entry(reader, flags)
        if header is None:
            break
        info = TarEntryInfo.from_header(header)
        skip_entry(reader)
        yield info
    LOG.debug("Listed archive data")


def list_entries(data: BytesLike, flags: FeatureFlags = DEFAULT_FLAGS) -> List[TarEntryInfo]:
    return list(iter_entries(data, flags))
