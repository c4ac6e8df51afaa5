"""Scope the temporary path strings of one extraction.

Joined and normalized paths are registered with a :class:`PathScratch` while
an extraction runs. They are all released together when the scratch region
exits, on success and on every error path, rather than one by one per entry.
"""
from __future__ import annotations

import logging
from types import TracebackType
from typing import List, Optional, Type

from .errors import TarNoMemoryError

LOG = logging.getLogger(__name__)


class PathScratch:
    def __init__(self) -> None:
        self._paths: Optional[List[str]] = None

    @property
    def active(self) -> bool:
        return self._paths is not None

    def __len__(self) -> int:
        return len(self._paths or ())

    def __enter__(self) -> PathScratch:
        try:
            self._paths = []
        except MemoryError as e:  # pragma: no cover
            raise TarNoMemoryError("Could not set up path scratch region") from e
        return self

    def __exit__(
        self,
        exc_type: Optional[Type[BaseException]],
        exc_value: Optional[BaseException],
        traceback: Optional[TracebackType],
    ) -> None:
        self.release()

    def keep(self, path: str) -> str:
        if self._paths is None:
            raise TarNoMemoryError("Path scratch region is not active")
        self._paths.append(path)
        return path

    def release(self) -> None:
        if self._paths is not None:
            LOG.debug("Releasing %d scratch paths", len(self._paths))
        self._paths = None
