"""Change the text and background colour of the console."""

from __future__ import annotations

import sys
from typing import Sequence

CLEAR_SCREEN = "CLS"

_TEXT_COLOURS = {
    "black": 0,
    "red": 1,
    "green": 2,
    "yellow": 3,
    "blue": 4,
    "magenta": 5,
    "cyan": 6,
    "white": 7,
}

_BACKGROUND_COLOURS = {
    "black": (0, 0, 0),
    "red": (255, 0, 0),
    "green": (0, 255, 0),
    "yellow": (255, 255, 0),
    "blue": (0, 0, 255),
    "magenta": (255, 0, 255),
    "cyan": (0, 255, 255),
    "white": (255, 255, 255),
    "orange": (255, 128, 0),
}

_VDU_CLS = 12

_HELP = """\
setcolor - Change text and background colour
Usage: setcolor [text_colour] [on background_colour]

Text colours:
  black, red, green, yellow, blue, magenta, cyan, white

Background colours:
  black, red, green, yellow, blue, magenta, cyan, white, orange

Examples:
  setcolor green
  setcolor white on blue
  setcolor cyan on black
  setcolor white on orange
  setcolor -r               (reset to default)"""


def colour_code(name: str) -> int:
    """Return the palette number of a text colour name."""
    try:
        return _TEXT_COLOURS[name]
    except KeyError:
        raise ValueError(f"invalid colour '{name}'") from None


def background_rgb(name: str) -> tuple[int, int, int]:
    """Return the RGB triple of a background colour name."""
    try:
        return _BACKGROUND_COLOURS[name]
    except KeyError:
        raise ValueError(f"invalid background colour '{name}'") from None


def text_colour_command(code: int) -> str:
    """Return the VDU command that selects text colour ``code``."""
    return f"VDU 17 {code}"


def background_command(name: str) -> str:
    """Return the VDU command that redefines the background colour."""
    r, g, b = background_rgb(name)
    return f"VDU 19 0 -1 {r} {g} {b}"


def vdu_bytes(command: str) -> bytes:
    """Encode a ``VDU`` or ``CLS`` command as the bytes sent to the display.

    Numbers become single bytes; a number ending in ``;`` becomes a
    little-endian 16-bit word.
    """
    words = command.replace(",", " ").split()
    if not words:
        raise ValueError("empty command")
    verb = words[0].upper()
    if verb == CLEAR_SCREEN and len(words) == 1:
        return bytes([_VDU_CLS])
    if verb != "VDU":
        raise ValueError(f"unsupported command: {command!r}")
    out = bytearray()
    for word in words[1:]:
        wide = word.endswith(";")
        text = word[:-1] if wide else word
        try:
            value = int(text, 0)
        except ValueError:
            raise ValueError(f"invalid VDU value: {word!r}") from None
        out += (value & 0xFFFF).to_bytes(2, "little") if wide else bytes([value & 0xFF])
    return bytes(out)


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
    """Run the setcolor command; returns the exit status."""
    args = list(sys.argv[1:] if argv is None else argv)
    if not args:
        print("setcolor: missing colour. Try 'setcolor -h'.", file=sys.stderr)
        return 1

    first = args[0]
    if first in ("-h", "--help"):
        print(_HELP)
        return 0

    if first in ("-r", "--reset"):
        _write_stdout(
            vdu_bytes(background_command("black"))
            + vdu_bytes(text_colour_command(_TEXT_COLOURS["white"]))
            + vdu_bytes(CLEAR_SCREEN)
        )
        return 0

    try:
        code = colour_code(first)
    except ValueError:
        print(f"setcolor: invalid colour '{first}'.", file=sys.stderr)
        return 1

    out = bytearray()
    if len(args) > 2 and args[1] == "on":
        try:
            out += vdu_bytes(background_command(args[2]))
        except ValueError:
            print(f"setcolor: invalid background colour '{args[2]}'.", file=sys.stderr)

    out += vdu_bytes(text_colour_command(code))
    out += vdu_bytes(CLEAR_SCREEN)
    _write_stdout(bytes(out))
    return 0