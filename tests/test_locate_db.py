import struct
from datetime import datetime

import pytest

from agontools.locate_db import (
    ENTRY_SIZE,
    HEADER_SIZE,
    MAGIC,
    VERSION,
    DbEntry,
    DbHeader,
    fat_date,
    fat_time,
)


def test_header_size_matches_reader_skip():
    assert HEADER_SIZE == 276
    assert len(DbHeader().pack()) == HEADER_SIZE


def test_header_starts_with_magic_and_version():
    packed = DbHeader(root_path="/").pack()
    assert struct.unpack_from("<II", packed) == (MAGIC, VERSION)


def test_header_round_trip():
    header = DbHeader(file_count=42, timestamp=7, root_path="games/bbc")
    assert DbHeader.unpack(header.pack()) == header


def test_header_default_data_offset_is_header_size():
    assert DbHeader.unpack(DbHeader().pack()).data_offset == HEADER_SIZE


def test_header_root_path_truncated():
    header = DbHeader(root_path="x" * 400)
    assert DbHeader.unpack(header.pack()).root_path == "x" * 255


def test_header_unpack_short_data():
    with pytest.raises(ValueError):
        DbHeader.unpack(b"\0" * (HEADER_SIZE - 1))


def test_entry_size():
    entry = DbEntry(300, 10, 0, 0, 0, "a.txt")
    assert len(entry.pack()) == ENTRY_SIZE == 26


def test_entry_round_trip():
    entry = DbEntry(300, 1234, 0x5873, 0x6B8F, 0x10, "docs")
    assert DbEntry.unpack(entry.pack()) == entry


def test_entry_name_truncated_to_twelve():
    entry = DbEntry(0, 0, 0, 0, 0, "averylongfilename.txt")
    assert DbEntry.unpack(entry.pack()).name == "averylongfilename.txt"[:12]


def test_entry_out_of_range_value():
    with pytest.raises(ValueError):
        DbEntry(0, 2**32, 0, 0, 0, "x").pack()


def test_entry_unpack_short_data():
    with pytest.raises(ValueError):
        DbEntry.unpack(b"\0" * 5)


def test_fat_date_fields():
    value = fat_date(datetime(2024, 3, 15, 12, 0, 0))
    assert (value >> 9) + 1980 == 2024
    assert (value >> 5) & 0x0F == 3
    assert value & 0x1F == 15


def test_fat_time_fields():
    value = fat_time(datetime(2024, 3, 15, 13, 45, 31))
    assert value >> 11 == 13
    assert (value >> 5) & 0x3F == 45
    assert (value & 0x1F) * 2 == 30


def test_fat_accepts_timestamps():
    stamp = 1_700_000_000.0
    moment = datetime.fromtimestamp(stamp)
    assert fat_date(stamp) == fat_date(moment)
    assert fat_time(stamp) == fat_time(moment)


def test_fat_date_before_epoch_clamped():
    value = fat_date(datetime(1970, 6, 1))
    assert value >> 9 == 0
    assert (value >> 5) & 0x0F == 1
    assert value & 0x1F == 1
    assert fat_time(datetime(1970, 6, 1, 10, 0, 0)) == 0