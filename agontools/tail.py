"""Output the last part of files."""

from __future__ import annotations

import re
import sys
from pathlib import Path
from typing import Sequence

VERSION = "1.0"
DEFAULT_LINES = 10

_INT_RE = re.compile(r"[ \t\n\v\f\r]*([+-]?[0-9]+)")

_HELP = f"""\
tail v{VERSION} - Output the last part of files
Usage: tail [options] [file...]

Options:
  -n <lines>       Output the last NUM lines (default: 10)
  -c <bytes>       Output the last NUM bytes
  -q, --quiet      Never print headers
  -v, --verbose    Always print headers
  -h, --help       Show this help

Examples:
  tail file.txt
  tail -n 20 file.txt
  tail -c 100 file.txt
  tail -n 5 file1.txt file2.txt

Notes:
  - If multiple files are given, a header is printed before each
  - Use -q to suppress headers, -v to force them"""


def tail_bytes(data: bytes, count: int) -> bytes:
    """Return the last ``count`` bytes of ``data``."""
    if count < 0:
        raise ValueError("byte count must not be negative")
    return data[max(len(data) - count, 0):]


def tail_lines(data: bytes, count: int) -> bytes:
    """Return the last ``count`` newline-terminated lines of ``data``."""
    if count < 0:
        raise ValueError("line count must not be negative")
    if count == 0 or not data:
        return b""
    parts = data.split(b"\n")
    lines = [part + b"\n" for part in parts[:-1]]
    if parts[-1]:
        lines.append(parts[-1])
    return b"".join(lines[-count:])


def format_header(filename: str, first_file: bool) -> str:
    """Return the header printed before a file's output."""
    prefix = "" if first_file else "\n"
    return f"{prefix}==> {filename} <==\n"


def _atoi(text: str) -> int:
    match = _INT_RE.match(text)
    return int(match.group(1)) if match else 0


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
    print(f"tail: unknown option '{arg}'", file=sys.stderr)
    print("Try 'tail -h' for help", file=sys.stderr)
    return 1


def main(argv: Sequence[str] | None = None) -> int:
    """Run the tail command; returns the exit status."""
    args = list(sys.argv[1:] if argv is None else argv)
    line_count = DEFAULT_LINES
    byte_count = 0
    quiet = False
    verbose = False
    files: list[str] = []

    arguments = iter(args)
    for arg in arguments:
        if arg in ("-h", "--help"):
            print(_HELP)
            return 0
        if arg in ("-q", "--quiet"):
            quiet = True
        elif arg in ("-v", "--verbose"):
            verbose = True
        elif arg in ("-n", "-c"):
            value = next(arguments, None)
            if value is None:
                return _unknown_option(arg)
            if arg == "-n":
                line_count = _atoi(value)
                if line_count <= 0:
                    line_count = DEFAULT_LINES
                byte_count = 0
            else:
                byte_count = max(_atoi(value), 0)
                line_count = 0
        elif arg.startswith("-"):
            return _unknown_option(arg)
        else:
            files.append(arg)

    if not files:
        print("tail: missing file operand", file=sys.stderr)
        print("Try 'tail -h' for help", file=sys.stderr)
        return 1

    show_headers = not quiet and (verbose or len(files) > 1)
    error = 0
    for index, name in enumerate(files):
        if show_headers:
            _write_stdout(format_header(name, index == 0).encode("utf-8", "surrogateescape"))
        try:
            data = Path(name).read_bytes()
        except OSError:
            print(f"tail: cannot open '{name}' for reading", file=sys.stderr)
            error = 1
            continue
        if byte_count > 0:
            _write_stdout(tail_bytes(data, byte_count))
        else:
            _write_stdout(tail_lines(data, line_count))
    return error