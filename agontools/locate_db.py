"""On-disk layout of the file database shared by updatedb and locate."""

from __future__ import annotations

import struct
from dataclasses import dataclass
from datetime import datetime

MAGIC = 0x4C4F4341
VERSION = 0x00010000
DB_PATH = "/locate.db"

ROOT_PATH_SIZE = 256
NAME_SIZE = 13

AM_RDO = 0x01
AM_HID = 0x02
AM_SYS = 0x04
AM_DIR = 0x10
AM_ARC = 0x20

_HEADER = struct.Struct(f"<5I{ROOT_PATH_SIZE}s")
_ENTRY = struct.Struct(f"<IIHHB{NAME_SIZE}s")

HEADER_SIZE = _HEADER.size
ENTRY_SIZE = _ENTRY.size

_FAT_EPOCH_YEAR = 1980
_FAT_LAST_YEAR = 2107


def _encode_fixed(text: str, size: int) -> bytes:
    return text.encode("utf-8", "surrogateescape")[: size - 1]


def _decode_c_string(raw: bytes) -> str:
    return raw.split(b"\0", 1)[0].decode("utf-8", "surrogateescape")


@dataclass
class DbHeader:
    """The fixed-size header at the start of the database."""

    magic: int = MAGIC
    version: int = VERSION
    file_count: int = 0
    data_offset: int = HEADER_SIZE
    timestamp: int = 0
    root_path: str = ""

    def pack(self) -> bytes:
        """Encode the header as it is stored on disk."""
        try:
            return _HEADER.pack(
                self.magic,
                self.version,
                self.file_count,
                self.data_offset,
                self.timestamp,
                _encode_fixed(self.root_path, ROOT_PATH_SIZE),
            )
        except struct.error as exc:
            raise ValueError(f"cannot encode header: {exc}") from exc

    @classmethod
    def unpack(cls, data: bytes) -> DbHeader:
        """Decode a header from the first bytes of ``data``."""
        if len(data) < HEADER_SIZE:
            raise ValueError(f"header needs {HEADER_SIZE} bytes, got {len(data)}")
        magic, version, count, offset, stamp, root = _HEADER.unpack(data[:HEADER_SIZE])
        return cls(magic, version, count, offset, stamp, _decode_c_string(root))


@dataclass
class DbEntry:
    """A fixed-size record describing one indexed file."""

    path_offset: int
    size: int
    date: int
    time: int
    attrib: int
    name: str

    def pack(self) -> bytes:
        """Encode the entry as it is stored on disk."""
        try:
            return _ENTRY.pack(
                self.path_offset,
                self.size,
                self.date,
                self.time,
                self.attrib,
                _encode_fixed(self.name, NAME_SIZE),
            )
        except struct.error as exc:
            raise ValueError(f"cannot encode entry: {exc}") from exc

    @classmethod
    def unpack(cls, data: bytes) -> DbEntry:
        """Decode an entry from the first bytes of ``data``."""
        if len(data) < ENTRY_SIZE:
            raise ValueError(f"entry needs {ENTRY_SIZE} bytes, got {len(data)}")
        offset, size, date, time, attrib, name = _ENTRY.unpack(data[:ENTRY_SIZE])
        return cls(offset, size, date, time, attrib, _decode_c_string(name))


def _as_datetime(timestamp: float | datetime) -> datetime:
    if isinstance(timestamp, datetime):
        return timestamp
    return datetime.fromtimestamp(timestamp)


def fat_date(timestamp: float | datetime) -> int:
    """Return the FAT date word for a POSIX timestamp or a datetime."""
    moment = _as_datetime(timestamp)
    if moment.year < _FAT_EPOCH_YEAR:
        return (1 << 5) | 1
    year = min(moment.year, _FAT_LAST_YEAR) - _FAT_EPOCH_YEAR
    return (year << 9) | (moment.month << 5) | moment.day


def fat_time(timestamp: float | datetime) -> int:
    """Return the FAT time word (two-second resolution) for a timestamp."""
    moment = _as_datetime(timestamp)
    if moment.year < _FAT_EPOCH_YEAR:
        return 0
    return (moment.hour << 11) | (moment.minute << 5) | (moment.second // 2)