"""Create empty files."""

from __future__ import annotations

import sys
from pathlib import Path
from typing import Sequence

VERSION = "1.0"

_HELP = f"""\
touch v{VERSION} - Create empty file or update timestamp
Usage: touch [options] file1 [file2 ...]

Options:
  -c, --no-create    Do not create file if it doesn't exist
  -h, --help         Show this help

Examples:
  touch file.txt              # Create empty file.txt
  touch docs/readme.txt config.ini  # Create multiple files
  touch -c existing.txt       # Update timestamp (if exists)

Notes:
  - Creates empty files (0 bytes)
  - If file exists, does not modify content
  - Creates parent directories automatically
  - Multiple files supported (processed in order)"""


def create_parent_dirs(path: str | Path) -> None:
    """Create the directory part of ``path`` if it is not already a directory."""
    text = str(path)
    if "/" not in text:
        return
    directory = Path(text.rsplit("/", 1)[0] or "/")
    if directory.is_dir():
        return
    try:
        directory.mkdir(parents=True, exist_ok=True)
    except OSError:
        pass


def touch(path: str | Path, no_create: bool = False) -> bool:
    """Ensure ``path`` exists as a file; return True if it was created.

    Raises OSError when the file cannot be created.
    """
    try:
        with open(path, "rb"):
            return False
    except OSError:
        pass
    if no_create:
        return False
    create_parent_dirs(path)
    with open(path, "wb"):
        pass
    return True


def main(argv: Sequence[str] | None = None) -> int:
    """Run the touch command; returns the exit status."""
    args = list(sys.argv[1:] if argv is None else argv)
    no_create = False
    file_count = 0
    errors = 0

    for arg in args:
        if arg in ("-h", "--help"):
            print(_HELP)
            return 0
        if arg in ("-c", "--no-create"):
            no_create = True
        elif arg.startswith("-"):
            print(f"touch: unknown option '{arg}'")
            print("Try 'touch -h' for help")
            return 1
        else:
            try:
                touch(arg, no_create)
            except OSError:
                print(f"touch: cannot create '{arg}'")
                errors += 1
            file_count += 1

    if file_count == 0:
        print("touch: missing file operand")
        print("Try 'touch -h' for help")
        return 1

    return 1 if errors else 0