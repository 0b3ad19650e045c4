"""Fast file search using the database built by updatedb."""

from __future__ import annotations

import re
import sys
from pathlib import Path
from typing import Callable, Iterator, Sequence

from agontools.locate_db import DB_PATH, HEADER_SIZE

BUFFER_SIZE = 4096
_MAX_STRING = 511
_MIN_STRING = 4
_PROGRESS_EVERY = 5000
_PRINTABLE_RUN = re.compile(rb"[\x20-\x7e]+")

_HELP = """\
Usage: locate [options] <pattern>

Options:
  -h, --help      Show this help message
  -p, --paths     Show full paths (default)
  -n, --names     Show only filenames
  -c, --count     Show only the number of matches
  -i, --ignore-case Case-insensitive search

Wildcards:
  *  - Any sequence of characters
  ?  - Any single character

Examples:
  locate "*.bin"           - Find all .bin files (case-sensitive)
  locate -i "*.BIN"        - Find .bin, .BIN, .Bin (case-insensitive)
  locate -n "test*"        - Show filenames starting with 'test'
  locate -c "*.c"          - Count .c files
  locate "*"               - List all files"""


def _fold(ch: str, case_insensitive: bool) -> str:
    if case_insensitive and "A" <= ch <= "Z":
        return ch.lower()
    return ch


def match_pattern(pattern: str, name: str, case_insensitive: bool = False) -> bool:
    """Match ``name`` against a pattern with ``*`` and ``?`` wildcards."""
    p, f = pattern, name
    while p and f:
        head = p[0]
        if head == "*":
            rest = p[1:]
            if not rest:
                return True
            return any(
                match_pattern(rest, f[start:], case_insensitive)
                for start in range(len(f))
            )
        if head != "?" and _fold(head, case_insensitive) != _fold(f[0], case_insensitive):
            return False
        p, f = p[1:], f[1:]
    if p.startswith("*"):
        p = p[1:]
    return not p and not f


def extract_paths(data: bytes) -> Iterator[str]:
    """Yield the path-like printable strings stored after the database header."""
    body = data[HEADER_SIZE:]
    for offset in range(0, len(body), BUFFER_SIZE):
        block = body[offset : offset + BUFFER_SIZE]
        limit = len(block) - 4
        for match in _PRINTABLE_RUN.finditer(block):
            if match.start() >= limit:
                break
            text = match.group()
            if len(text) < _MIN_STRING:
                continue
            text = text[:_MAX_STRING]
            if b"." in text or b"/" in text:
                yield text.decode("ascii")


def _base_name(path: str) -> str:
    return path.rsplit("/", 1)[-1]


def _search(
    db_path: str | Path,
    pattern: str,
    case_insensitive: bool,
    on_progress: Callable[[int], None] | None = None,
) -> list[str]:
    data = Path(db_path).read_bytes()
    matches = []
    for processed, path in enumerate(extract_paths(data), 1):
        if on_progress is not None and processed % _PROGRESS_EVERY == 0:
            on_progress(processed)
        if match_pattern(pattern, _base_name(path), case_insensitive):
            matches.append(path)
    return matches


def search_database(
    db_path: str | Path, pattern: str, case_insensitive: bool = False
) -> list[str]:
    """Return the stored paths whose file name matches ``pattern``."""
    return _search(db_path, pattern, case_insensitive)


def _print_progress(processed: int) -> None:
    print(f"Processing: {processed} files", end="\r", flush=True)


def main(argv: Sequence[str] | None = None) -> int:
    """Run the locate command; returns the exit status."""
    args = list(sys.argv[1:] if argv is None else argv)
    pattern: str | None = None
    show_paths = True
    count_only = False
    case_insensitive = False

    for arg in args:
        if arg.startswith("-"):
            if arg in ("-h", "--help"):
                print(_HELP)
                return 0
            if arg in ("-p", "--paths"):
                show_paths = True
            elif arg in ("-n", "--names"):
                show_paths = False
            elif arg in ("-c", "--count"):
                count_only = True
            elif arg in ("-i", "--ignore-case"):
                case_insensitive = True
        else:
            pattern = arg

    if pattern is None:
        print("Error: You must specify a search pattern")
        print(_HELP)
        return 1

    print(f"Searching: {pattern}{' (case-insensitive)' if case_insensitive else ''}")
    if not count_only and show_paths:
        print("-" * 40)

    progress = None if count_only else _print_progress
    try:
        matches = _search(DB_PATH, pattern, case_insensitive, progress)
    except OSError:
        print(f"Error: Could not open database {DB_PATH}")
        print("Run 'updatedb' first to create the database")
        return 0

    if count_only:
        print(len(matches))
        return 0

    for path in matches:
        print(path if show_paths else _base_name(path))
    print()
    if not matches:
        mode = " (case-insensitive)" if case_insensitive else " (case-sensitive)"
        print(f"No files found matching '{pattern}'{mode}")
    else:
        print(f"\nTotal: {len(matches)} file(s) found")
    return 0