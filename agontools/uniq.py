"""Report or omit repeated lines."""

from __future__ import annotations

import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, Iterator, Sequence

VERSION = "1.0"
MAX_LINE_LEN = 4096

_ASCII_LOWER = str.maketrans(
    "ABCDEFGHIJKLMNOPQRSTUVWXYZ", "abcdefghijklmnopqrstuvwxyz"
)

_HELP = f"""\
uniq v{VERSION} - Report or omit repeated lines
Usage: uniq [options] input [output]

Options:
  -c              Prefix lines by the number of occurrences
  -d              Only print duplicate lines, one for each group
  -u              Only print unique lines
  -i              Ignore case when comparing
  -h, --help      Show this help

Note: Input file must be sorted for correct results.
Use 'sort' first: sort input.txt > sorted.txt, then uniq sorted.txt

Examples:
  uniq file.txt
  uniq -c file.txt
  uniq -d file.txt
  uniq -i file.txt
  uniq sorted.txt output.txt"""


@dataclass
class UniqOptions:
    """Settings that select which groups are written and how."""

    count: bool = False
    duplicates: bool = False
    unique: bool = False
    ignore_case: bool = False


def lines_equal(a: str, b: str, ignore_case: bool = False) -> bool:
    """Tell whether two lines are equal, optionally ignoring ASCII case."""
    if ignore_case:
        return a.translate(_ASCII_LOWER) == b.translate(_ASCII_LOWER)
    return a == b


def _groups(lines: Iterable[str], ignore_case: bool) -> Iterator[tuple[str, int]]:
    current: str | None = None
    count = 0
    for line in lines:
        if current is not None and lines_equal(current, line, ignore_case):
            count += 1
            continue
        if current is not None:
            yield current, count
        current, count = line, 1
    if current is not None:
        yield current, count


def uniq_lines(lines: Iterable[str], options: UniqOptions) -> list[str]:
    """Collapse runs of equal adjacent lines and return the lines to output."""
    result = []
    for line, count in _groups(lines, options.ignore_case):
        if options.duplicates and count == 1:
            continue
        if options.unique and count != 1:
            continue
        result.append(f"{count:7d} {line}" if options.count else line)
    return result


def _read_lines(path: str | Path) -> list[str]:
    text = Path(path).read_bytes().decode("latin-1")
    size = MAX_LINE_LEN - 1
    lines = []
    pos = 0
    while pos < len(text):
        newline = text.find("\n", pos, pos + size)
        end = newline + 1 if newline != -1 else min(pos + size, len(text))
        chunk = text[pos:end]
        lines.append(chunk.split("\0", 1)[0].split("\n", 1)[0])
        pos = end
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


def main(argv: Sequence[str] | None = None) -> int:
    """Run the uniq command; returns the exit status."""
    args = list(sys.argv[1:] if argv is None else argv)
    options = UniqOptions()
    input_file: str | None = None
    output_file: str | None = None

    for arg in args:
        if arg in ("-h", "--help"):
            print(_HELP)
            return 0
        if arg == "-c":
            options.count = True
        elif arg == "-d":
            options.duplicates = True
        elif arg == "-u":
            options.unique = True
        elif arg == "-i":
            options.ignore_case = True
        elif arg.startswith("-"):
            print(f"uniq: unknown option '{arg}'", file=sys.stderr)
            print("Try 'uniq -h' for help", file=sys.stderr)
            return 1
        elif input_file is None:
            input_file = arg
        elif output_file is None:
            output_file = arg
        else:
            print(f"uniq: extra operand '{arg}'", file=sys.stderr)
            return 1

    if input_file is None:
        print("uniq: missing file operand", file=sys.stderr)
        print("Try 'uniq -h' for help", file=sys.stderr)
        return 1

    if options.duplicates and options.unique:
        print("uniq: cannot specify both -d and -u", file=sys.stderr)
        return 1

    try:
        lines = _read_lines(input_file)
    except OSError:
        print(f"uniq: cannot open '{input_file}' for reading", file=sys.stderr)
        return 1

    data = "".join(f"{line}\n" for line in uniq_lines(lines, options)).encode("latin-1")
    if output_file is not None:
        try:
            with open(output_file, "wb") as out:
                out.write(data)
        except OSError:
            print(f"uniq: cannot open '{output_file}' for writing", file=sys.stderr)
            return 1
    else:
        _write_stdout(data)
    return 0