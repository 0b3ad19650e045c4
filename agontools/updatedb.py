"""Create or update the file database used by locate."""

from __future__ import annotations

import os
import stat
import sys
from dataclasses import dataclass, replace
from pathlib import Path
from typing import BinaryIO, Callable, Iterator, Sequence

from agontools.locate_db import (
    AM_DIR,
    AM_RDO,
    DB_PATH,
    DbEntry,
    DbHeader,
    fat_date,
    fat_time,
)

MAX_PATH = 256
_PROGRESS_EVERY = 100

_HELP = f"""\
Usage: updatedb [options] [root_path]

Options:
  -h, --help      Show this help message
  -v, --verbose   Verbose output

Description:
  Recursively scans the filesystem and creates a database
  at {DB_PATH} for fast searching with 'locate'

Note: No file limit (streaming write to disk)"""


@dataclass(frozen=True)
class IndexedFile:
    """One file or directory found while scanning."""

    path: str
    size: int
    date: int
    time: int
    attrib: int

    @property
    def is_dir(self) -> bool:
        return bool(self.attrib & AM_DIR)


def _byte_len(text: str) -> int:
    return len(text.encode("utf-8", "surrogateescape"))


def _attributes(info: os.stat_result, is_dir: bool) -> int:
    attrib = AM_DIR if is_dir else 0
    if not info.st_mode & stat.S_IWUSR:
        attrib |= AM_RDO
    return attrib


def _walk(stored: str, location: str) -> Iterator[IndexedFile]:
    try:
        with os.scandir(location) as iterator:
            entries = sorted(iterator, key=lambda entry: entry.name)
    except OSError:
        return
    for entry in entries:
        if entry.name in (".", ".."):
            continue
        if _byte_len(stored) + _byte_len(entry.name) + 2 >= MAX_PATH:
            continue
        path = entry.name if stored in (".", "/") else f"{stored}/{entry.name}"
        try:
            is_dir = entry.is_dir(follow_symlinks=False)
            info = entry.stat(follow_symlinks=False)
        except OSError:
            continue
        yield IndexedFile(
            path=path,
            size=0 if is_dir else info.st_size & 0xFFFFFFFF,
            date=fat_date(info.st_mtime),
            time=fat_time(info.st_mtime),
            attrib=_attributes(info, is_dir),
        )
        if is_dir:
            yield from _walk(path, entry.path)


def scan_directory(root: str) -> Iterator[IndexedFile]:
    """Yield every file and directory below ``root``, depth first."""
    yield from _walk(root, root)


def _short_name(path: str) -> str:
    return path.rsplit("/", 1)[-1]


def _write_to(
    out: BinaryIO,
    root: str,
    on_progress: Callable[[int, int], None] | None = None,
) -> tuple[int, int]:
    header = DbHeader(root_path=root)
    out.write(header.pack())
    offset = header.data_offset
    count = 0
    for item in scan_directory(root):
        raw_path = item.path.encode("utf-8", "surrogateescape") + b"\0"
        entry = DbEntry(
            path_offset=offset,
            size=item.size,
            date=item.date,
            time=item.time,
            attrib=item.attrib,
            name=_short_name(item.path),
        )
        out.write(entry.pack())
        out.write(raw_path)
        offset += len(raw_path)
        count += 1
        if on_progress is not None and count % _PROGRESS_EVERY == 0:
            on_progress(count, offset)
    out.seek(0)
    out.write(replace(header, file_count=count).pack())
    return count, offset


def build_database(db_path: str | Path, root: str) -> tuple[int, int]:
    """Index ``root`` into ``db_path``; return (files indexed, final data offset)."""
    with open(db_path, "wb") as out:
        return _write_to(out, root)


def _print_progress(count: int, offset: int) -> None:
    print(f"Processed: {count} files (DB: {offset // 1024} KB)", end="\r", flush=True)


def main(argv: Sequence[str] | None = None) -> int:
    """Run the updatedb command; returns the exit status."""
    args = list(sys.argv[1:] if argv is None else argv)
    root = "."
    for arg in args:
        if arg.startswith("-"):
            if arg in ("-h", "--help"):
                print(_HELP)
                return 0
        else:
            root = arg

    print("=== updatedb for Agon Light ===")
    print(f"Indexing from: {root}")
    print("Mode: Streaming write (no file limit)\n")

    try:
        out = open(DB_PATH, "wb")
    except OSError:
        print("Error: Could not create database")
        return 1

    print("Scanning...")
    with out:
        try:
            count, offset = _write_to(out, root, _print_progress)
        except OSError:
            print("\nError: Could not finalize database")
            return 1

    print(f"\n\nDatabase created: {count} files indexed")
    print(f"Size: {offset} bytes ({offset / 1024.0:.2f} KB)")
    return 0