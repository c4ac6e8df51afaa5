"""Reject entry paths which could write outside the destination.

There are two independent checks. :func:`validate_path` works on the entry
path alone, before any filesystem call. :func:`check_containment` joins the
path to the destination and compares the normalized results, which also
catches whatever the string check can't (and absolute paths when they are
allowed by the flags).
"""
import logging
import os
from typing import Union

from .errors import (
    TarPathOutsideRootError,
    TarUnsafePathError,
    assert_eq,
    assert_not_in,
)
from .flags import DEFAULT_FLAGS, FeatureFlags

PARENT_DIR = ".."

StrPath = Union[str, "os.PathLike[str]"]

LOG = logging.getLogger(__name__)


def is_absolute(path: str) -> bool:
    drive, _ = os.path.splitdrive(path)
    return bool(drive) or os.path.isabs(path) or path.startswith(("/", os.sep))


def validate_path(path: str, flags: FeatureFlags = DEFAULT_FLAGS) -> None:
    """Check an entry path before it is joined to the destination.

    :raises TarUnsafePathError: If the path is empty, contains a NUL, or is
        absolute and absolute paths are not allowed.
    :raises TarPathOutsideRootError: If any component is ``..``.
    """
    if not path:
        raise TarUnsafePathError("entry path: empty")
    assert_not_in("entry path", path, "\0", repr(path), TarUnsafePathError)
    if not flags.allow_absolute_paths and is_absolute(path):
        raise TarUnsafePathError(f"entry path: {path!r} is absolute")

    remaining = path
    while True:
        head, tail = os.path.split(remaining)
        if tail == PARENT_DIR:
            raise TarPathOutsideRootError(f"entry path: {path!r} has a '..' component")
        if not head or head == remaining:
            break
        remaining = head


def check_containment(dest_dir: StrPath, path: str) -> str:
    """Join an entry path to the destination and return the normalized target.

    The target must be the destination itself, or lie below it.

    :raises TarPathOutsideRootError: If the normalized target escapes the
        normalized destination.
    """
    root = os.path.abspath(dest_dir)
    target = os.path.abspath(os.path.join(dest_dir, path))
    LOG.debug("Entry '%s' resolves to '%s' (root '%s')", path, target, root)
    if target == root:
        return target
    root_prefix = root if root.endswith(os.sep) else root + os.sep
    assert_eq(
        "destination prefix",
        root_prefix,
        target[: len(root_prefix)],
        repr(path),
        TarPathOutsideRootError,
    )
    return target
