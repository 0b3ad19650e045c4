"""Change the screen resolution."""

from __future__ import annotations

import re
import sys
from dataclasses import dataclass
from typing import Sequence

DOUBLE_BUFFER_OFFSET = 128
_TELETEXT = 7
_VDU_MODE = 22
_VDU_CLS = 12

_INT_RE = re.compile(r"[ \t\n\v\f\r]*([+-]?[0-9]+)")


@dataclass(frozen=True)
class ScreenMode:
    """A display mode: its number, resolution and number of colours."""

    mode: int
    width: int
    height: int
    colors: int
    desc: str

    @property
    def resolution(self) -> str:
        if self.mode == _TELETEXT:
            return "Teletext"
        return f"{self.width}x{self.height}"


MODES = (
    ScreenMode(0, 640, 480, 16, "640x480"),
    ScreenMode(1, 640, 480, 4, "640x480"),
    ScreenMode(2, 640, 480, 2, "640x480"),
    ScreenMode(3, 640, 240, 64, "640x240"),
    ScreenMode(4, 640, 240, 16, "640x240"),
    ScreenMode(5, 640, 240, 4, "640x240"),
    ScreenMode(6, 640, 240, 2, "640x240"),
    ScreenMode(7, 0, 0, 16, "Teletext"),
    ScreenMode(8, 320, 240, 64, "320x240"),
    ScreenMode(9, 320, 240, 16, "320x240"),
    ScreenMode(10, 320, 240, 4, "320x240"),
    ScreenMode(11, 320, 240, 2, "320x240"),
    ScreenMode(12, 320, 200, 64, "320x200"),
    ScreenMode(13, 320, 200, 16, "320x200"),
    ScreenMode(14, 320, 200, 4, "320x200"),
    ScreenMode(15, 320, 200, 2, "320x200"),
    ScreenMode(16, 800, 600, 4, "800x600"),
    ScreenMode(17, 800, 600, 2, "800x600"),
    ScreenMode(18, 1024, 768, 2, "1024x768"),
    ScreenMode(19, 1024, 768, 4, "1024x768"),
    ScreenMode(20, 512, 384, 64, "512x384"),
    ScreenMode(21, 512, 384, 16, "512x384"),
    ScreenMode(22, 512, 384, 4, "512x384"),
    ScreenMode(23, 512, 384, 2, "512x384"),
    ScreenMode(24, 640, 512, 16, "640x512"),
    ScreenMode(25, 640, 512, 4, "640x512"),
    ScreenMode(26, 640, 512, 2, "640x512"),
    ScreenMode(27, 640, 256, 64, "640x256"),
    ScreenMode(28, 640, 256, 16, "640x256"),
    ScreenMode(29, 640, 256, 4, "640x256"),
    ScreenMode(30, 640, 256, 2, "640x256"),
)

_HELP = """\
setmode - Change the Agon Light screen resolution
Usage: setmode [mode] | setmode -l | setmode -h

Options:
  -l, --list     List all available screen modes
  -h, --help     Show this help

Modes with +128 (129-158) enable double-buffering
Example: setmode 129 (double-buffered version of mode 1)"""

_EMPTY_CELL = "|      |            |         |"


def find_mode(mode: int) -> ScreenMode | None:
    """Return the mode a number selects, counting double-buffered numbers."""
    return next(
        (m for m in MODES if mode in (m.mode, m.mode + DOUBLE_BUFFER_OFFSET)),
        None,
    )


def is_valid_mode(mode: int) -> bool:
    """Tell whether ``mode`` is 0-30 or 129-158."""
    return 0 <= mode <= 30 or 129 <= mode <= 158


def mode_command(mode: int) -> str:
    """Return the VDU command that switches to ``mode``."""
    if not is_valid_mode(mode):
        raise ValueError(f"invalid mode '{mode}'. Valid modes are 0-30 and 129-158.")
    return f"VDU {_VDU_MODE} {mode}"


def describe_mode(mode: int) -> str:
    """Return the message reported after switching to ``mode``."""
    found = find_mode(mode) if is_valid_mode(mode) else None
    if found is None:
        raise ValueError(f"invalid mode '{mode}'")
    return f"Screen mode changed to {mode}: {found.resolution}, {found.colors} colours"


def _cell(mode: ScreenMode) -> str:
    return f"|  {mode.mode:2d}  | {mode.resolution:>9}  |   {mode.colors:2d}    |"


def list_modes_table() -> str:
    """Return the two-column table of all screen modes."""
    half = (len(MODES) + 1) // 2
    left, right = MODES[:half], MODES[half:]
    rows = [
        f"{_cell(mode)}   {_cell(right[index]) if index < len(right) else _EMPTY_CELL}"
        for index, mode in enumerate(left)
    ]
    lines = [
        "",
        "| Mode | Resolution | Colours |   | Mode | Resolution | Colours |",
        "|------|------------|---------|   |------|------------|---------|",
        *rows,
        "",
        "Note: Double-buffered modes = mode + 128 (129 to 158)",
    ]
    return "\n".join(lines) + "\n"


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


def main(argv: Sequence[str] | None = None) -> int:
    """Run the setmode command; returns the exit status."""
    args = list(sys.argv[1:] if argv is None else argv)
    if not args:
        print("setmode: missing mode. Try 'setmode -h'.", file=sys.stderr)
        return 1

    first = args[0]
    if first in ("-h", "--help"):
        print(_HELP)
        return 0
    if first in ("-l", "--list"):
        print(list_modes_table(), end="")
        return 0

    mode = _atoi(first)
    if not is_valid_mode(mode):
        print(
            f"setmode: invalid mode '{mode}'. Valid modes are 0-30 and 129-158.",
            file=sys.stderr,
        )
        print("Use 'setmode -l' to list all modes.", file=sys.stderr)
        return 1

    _write_stdout(bytes([_VDU_MODE, mode, _VDU_CLS]))
    print(describe_mode(mode))
    return 0