from __future__ import annotations

from pydantic import BaseModel

from .parse.header import BLOCK_SIZE, EntryType, TarHeader


class TarEntryInfo(BaseModel):
    """A copy of the header values, which outlives the archive buffer."""

    path: str
    type: EntryType
    typeflag: bytes
    size: int
    mode: int
    uid: int
    gid: int
    mtime: int
    linkname: str = ""
    uname: str = ""
    gname: str = ""
    offset: int

    @classmethod
    def from_header(cls, header: TarHeader) -> TarEntryInfo:
        return cls(
            path=header.path,
            type=header.type,
            typeflag=header.typeflag,
            size=header.size,
            mode=header.mode,
            uid=header.uid,
            gid=header.gid,
            mtime=header.mtime,
            linkname=header.linkname,
            uname=header.uname,
            gname=header.gname,
            offset=header.offset,
        )

    @property
    def data_offset(self) -> int:
        return self.offset + BLOCK_SIZE
