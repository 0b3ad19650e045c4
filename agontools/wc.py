"""Word, line, character, and byte count."""

from __future__ import annotations

import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Sequence

VERSION = "1.0"

_C_WHITESPACE = frozenset(b" \t\n\v\f\r")
_NEWLINE = ord("\n")

_HELP = f"""\
wc v{VERSION} - Word, line, character, and byte count
Usage: wc [options] [file...]

Options:
  -l              Count lines
  -w              Count words
  -c              Count bytes
  -m              Count characters (same as -c for ASCII)
  -L              Print the length of the longest line
  -h, --help      Show this help

If no option is given, -l -w -c is assumed

Examples:
  wc file.txt
  wc -l file.txt
  wc -l -w file1.txt file2.txt
  wc -L archivo.txt"""


@dataclass(frozen=True)
class Counts:
    """Line, word and byte counts and the longest line length."""

    lines: int = 0
    words: int = 0
    bytes: int = 0
    max_line: int = 0

    def __add__(self, other: Counts) -> Counts:
        if not isinstance(other, Counts):
            return NotImplemented
        return Counts(
            self.lines + other.lines,
            self.words + other.words,
            self.bytes + other.bytes,
            max(self.max_line, other.max_line),
        )


def count_data(data: bytes) -> Counts:
    """Count the contents of ``data``."""
    lines = words = max_line = line_len = 0
    in_word = False
    for byte in data:
        if byte == _NEWLINE:
            lines += 1
            max_line = max(max_line, line_len)
            line_len = 0
        else:
            line_len += 1
        if byte in _C_WHITESPACE:
            in_word = False
        elif not in_word:
            in_word = True
            words += 1
    max_line = max(max_line, line_len)
    if data and line_len > 0 and lines == 0:
        lines = 1
    return Counts(lines, words, len(data), max_line)


def format_counts(
    counts: Counts,
    label: str,
    show_lines: bool,
    show_words: bool,
    show_bytes: bool,
    show_max_line: bool,
) -> str:
    """Format the selected counts followed by ``label``."""
    fields = [
        value
        for value, shown in (
            (counts.lines, show_lines),
            (counts.words, show_words),
            (counts.bytes, show_bytes),
            (counts.max_line, show_max_line),
        )
        if shown
    ]
    return "".join(f"{value:8d} " for value in fields) + label


def main(argv: Sequence[str] | None = None) -> int:
    """Run the wc command; returns the exit status."""
    args = list(sys.argv[1:] if argv is None else argv)
    show_lines = show_words = show_bytes = show_max = False
    files: list[str] = []

    for arg in args:
        if arg in ("-h", "--help"):
            print(_HELP)
            return 0
        if arg == "-l":
            show_lines = True
        elif arg == "-w":
            show_words = True
        elif arg in ("-c", "-m"):
            show_bytes = True
        elif arg == "-L":
            show_max = True
        elif arg.startswith("-"):
            print(f"wc: unknown option '{arg}'", file=sys.stderr)
            print("Try 'wc -h' for help", file=sys.stderr)
            return 1
        else:
            files.append(arg)

    if not (show_lines or show_words or show_bytes or show_max):
        show_lines = show_words = show_bytes = True

    if not files:
        print("wc: reading from stdin not supported yet", file=sys.stderr)
        print("Please specify a file", file=sys.stderr)
        return 1

    flags = (show_lines, show_words, show_bytes, show_max)
    total = Counts()
    error = 0
    for name in files:
        try:
            data = Path(name).read_bytes()
        except OSError:
            print(f"wc: cannot open '{name}' for reading", file=sys.stderr)
            error = 1
            continue
        counts = count_data(data)
        print(format_counts(counts, name, *flags))
        total += counts

    if len(files) > 1:
        print(format_counts(total, "total", *flags))
    return error