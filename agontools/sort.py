"""Sort lines of text files."""

from __future__ import annotations

import functools
import itertools
import re
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Iterator, Sequence

VERSION = "1.0"
MAX_LINE_LEN = 1024

_C_WHITESPACE = " \t\n\v\f\r"
_INT_RE = re.compile(r"[ \t\n\v\f\r]*([+-]?[0-9]+)")
_NUMBER_RE = re.compile(
    r"[ \t\n\v\f\r]*([+-]?)"
    r"(0[xX][0-9a-fA-F]+|(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?"
    r"|inf(?:inity)?|nan)",
    re.IGNORECASE,
)

_HELP = f"""\
sort v{VERSION} - Sort lines of text files
Usage: sort [options] file...

Options:
  -r              Reverse the result of comparisons
  -n              Compare according to numeric value
  -u              Output only the first of an equal run
  -o <file>       Write result to file instead of stdout
  -k <pos1[,pos2]> Sort by key starting at pos1 and ending at pos2
  -t <char>       Use char as field separator (default: whitespace)
  -h, --help      Show this help

Note: At least one file must be specified

Examples:
  sort file.txt
  sort -r file.txt
  sort -n numbers.txt
  sort -u file.txt
  sort -o output.txt file.txt
  sort -t: -k2 /etc/passwd"""


@dataclass
class SortOptions:
    """Settings that control how lines are compared and written."""

    reverse: bool = False
    numeric: bool = False
    unique: bool = False
    key: bool = False
    key_start: int = 1
    key_end: int = 0
    separator: str | None = None
    output: str | None = None


def parse_key_spec(spec: str) -> tuple[int, int]:
    """Parse a ``pos1[,pos2]`` key specification; pos2 is 0 when absent."""
    match = _INT_RE.match(spec)
    if match is None:
        raise ValueError(f"invalid key specification: {spec!r}")
    start = int(match.group(1))
    end = 0
    if spec[match.end():].startswith(","):
        end_match = _INT_RE.match(spec, match.end() + 1)
        if end_match is not None:
            end = int(end_match.group(1))
    return start, end


def extract_key(line: str, options: SortOptions) -> str:
    """Return the part of ``line`` that is compared under ``options``."""
    if not options.key:
        return line[: MAX_LINE_LEN - 1]

    sep = options.separator

    def is_sep(ch: str) -> bool:
        return ch == sep if sep else ch in _C_WHITESPACE

    length = len(line)
    pos = 0
    field = 1
    while pos < length and field < options.key_start:
        if not sep and is_sep(line[pos]):
            while pos < length and is_sep(line[pos]):
                pos += 1
            field += 1
            continue
        if sep and line[pos] == sep:
            field += 1
        pos += 1

    while pos < length and is_sep(line[pos]):
        pos += 1

    start = pos
    if options.key_end and field >= options.key_end:
        return ""
    end = start
    while end < length and not is_sep(line[end]):
        end += 1
    return line[start:end][: MAX_LINE_LEN - 1]


def _atof(text: str) -> float:
    match = _NUMBER_RE.match(text)
    if match is None:
        return 0.0
    sign, body = match.groups()
    value = float(int(body, 16)) if body[:2].lower() == "0x" else float(body)
    return -value if sign == "-" else value


def compare_lines(a: str, b: str, options: SortOptions) -> int:
    """Compare two lines, returning -1, 0 or 1 (ignores ``reverse``)."""
    key_a = extract_key(a, options) if options.key else a
    key_b = extract_key(b, options) if options.key else b
    if options.numeric:
        num_a, num_b = _atof(key_a), _atof(key_b)
        return (num_a > num_b) - (num_a < num_b)
    return (key_a > key_b) - (key_a < key_b)


def sort_lines(lines: Sequence[str], options: SortOptions) -> list[str]:
    """Sort ``lines`` and, with ``unique``, drop lines equal to their predecessor."""

    def ordering(a: str, b: str) -> int:
        result = compare_lines(a, b, options)
        return -result if options.reverse else result

    ordered = sorted(lines, key=functools.cmp_to_key(ordering))
    if not options.unique or not ordered:
        return ordered
    return [ordered[0]] + [
        current
        for previous, current in itertools.pairwise(ordered)
        if compare_lines(current, previous, options) != 0
    ]


def _fgets_chunks(text: str, size: int = MAX_LINE_LEN - 1) -> Iterator[str]:
    pos = 0
    while pos < len(text):
        newline = text.find("\n", pos, pos + size)
        end = newline + 1 if newline != -1 else min(pos + size, len(text))
        yield text[pos:end]
        pos = end


def read_lines(path: str | Path) -> list[str]:
    """Read the lines of a file without their trailing newlines."""
    text = Path(path).read_bytes().decode("latin-1")
    lines = []
    for chunk in _fgets_chunks(text):
        chunk = chunk.split("\0", 1)[0]
        lines.append(chunk[:-1] if chunk.endswith("\n") else chunk)
    return lines


def _write_stdout(data: bytes) -> None:
    stream = sys.stdout
    buffer = getattr(stream, "buffer", None)
    if buffer is None:
        stream.write(data.decode("latin-1"))
        return
    stream.flush()
    buffer.write(data)
    buffer.flush()


def _unknown_option(arg: str) -> int:
    print(f"sort: unknown option '{arg}'", file=sys.stderr)
    print("Try 'sort -h' for help", file=sys.stderr)
    return 1


def main(argv: Sequence[str] | None = None) -> int:
    """Run the sort command; returns the exit status."""
    args = list(sys.argv[1:] if argv is None else argv)
    options = SortOptions()
    files: list[str] = []

    arguments = iter(args)
    for arg in arguments:
        if arg in ("-h", "--help"):
            print(_HELP)
            return 0
        if arg == "-r":
            options.reverse = True
        elif arg == "-n":
            options.numeric = True
        elif arg == "-u":
            options.unique = True
        elif arg in ("-o", "-k", "-t"):
            value = next(arguments, None)
            if value is None:
                return _unknown_option(arg)
            if arg == "-o":
                options.output = value
            elif arg == "-k":
                try:
                    options.key_start, options.key_end = parse_key_spec(value)
                except ValueError:
                    print("sort: invalid key specification", file=sys.stderr)
                    return 1
                options.key = True
            else:
                options.separator = value[0] if value else None
        elif arg.startswith("-"):
            return _unknown_option(arg)
        else:
            files.append(arg)

    if not files:
        print("sort: missing file operand", file=sys.stderr)
        print("Try 'sort -h' for help", file=sys.stderr)
        return 1

    lines: list[str] = []
    for name in files:
        try:
            lines.extend(read_lines(name))
        except OSError:
            print(f"sort: cannot open '{name}' for reading", file=sys.stderr)
            return 1

    if not lines:
        return 0

    data = "".join(f"{line}\n" for line in sort_lines(lines, options)).encode("latin-1")
    if options.output is not None:
        try:
            with open(options.output, "wb") as out:
                out.write(data)
        except OSError:
            print(f"sort: cannot open '{options.output}' for writing", file=sys.stderr)
    else:
        _write_stdout(data)
    return 0