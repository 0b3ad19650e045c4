# agontools

A set of small, dependency-free command-line utilities for text files, file
indexing and display control.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Commands

| Command          | What it does                                              |
|------------------|-----------------------------------------------------------|
| `agon-sort`      | Sort lines of text files                                  |
| `agon-tail`      | Print the last lines or bytes of files                    |
| `agon-uniq`      | Report or omit repeated adjacent lines                    |
| `agon-wc`        | Count lines, words and bytes; longest line length         |
| `agon-touch`     | Create empty files, making parent directories as needed   |
| `agon-updatedb`  | Build a file database for fast searching                  |
| `agon-locate`    | Search the file database with `*` and `?` wildcards       |
| `agon-setcolor`  | Write VDU bytes that set text and background colours      |
| `agon-setmode`   | Write VDU bytes that switch screen mode; list the modes   |

Every command accepts `-h` or `--help`, and each returns a non-zero exit
status on error.

### sort

```
agon-sort [-r] [-n] [-u] [-o FILE] [-k POS1[,POS2]] [-t CHAR] FILE...
```

- `-r` reverse the order, `-n` compare numerically, `-u` drop lines equal to
  the one before
- `-k` sort on a key field, `-t` set the field separator (default: whitespace)
- `-o` write to a file instead of standard output

At least one file must be given.

```
agon-sort -t: -k2 accounts.txt
```

### tail

```
agon-tail [-n LINES | -c BYTES] [-q | -v] FILE...
```

Ten lines are shown by default. With several files a `==> name <==`
header precedes each one; `-q` hides headers, `-v` always shows them.

### uniq

```
agon-uniq [-c] [-d | -u] [-i] INPUT [OUTPUT]
```

The input should already be sorted. `-c` prefixes counts, `-d` shows only
repeated lines, `-u` only unique lines, `-i` ignores ASCII case. `-d` and
`-u` cannot be combined.

### wc

```
agon-wc [-l] [-w] [-c | -m] [-L] FILE...
```

Without options, lines, words and bytes are printed. `-L` adds the length of
the longest line. A `total` line follows when more than one file is given.

### touch

```
agon-touch [-c] FILE...
```

Creates each missing file as an empty file, creating its parent directory
first if needed. Existing files are left untouched. `-c` never creates
anything.

### updatedb and locate

```
agon-updatedb [ROOT]
agon-locate [-p | -n] [-c] [-i] PATTERN
```

`agon-updatedb` walks `ROOT` (default: the current directory) and writes the
database to `/locate.db`; `agon-locate` searches that file, matching the
pattern against each stored file name. `-p` shows full paths (the default),
`-n` only file names, `-c` only the number of matches, `-i` matches
case-insensitively.

```
agon-locate -i "*.BIN"
```

### setcolor and setmode

```
agon-setcolor white on blue
agon-setcolor -r
agon-setmode 8
agon-setmode -l
```

`agon-setcolor` writes the VDU byte sequences for the chosen background and
text colour followed by a clear-screen code to standard output; `-r` resets to
white on black. Text colours are black, red, green, yellow, blue, magenta,
cyan and white; backgrounds may also be orange.

`agon-setmode` writes the mode-change and clear-screen codes, then prints the
new mode's resolution and colour count. Valid modes are 0–30, and 129–158 for
double-buffered variants. `-l` prints the table of modes.

## Library use

Each command's logic is available as plain functions:

```python
from agontools.sort import SortOptions, sort_lines
from agontools.uniq import UniqOptions, uniq_lines
from agontools.wc import count_data, format_counts
from agontools.tail import tail_lines, tail_bytes
from agontools.locate import match_pattern, search_database
from agontools.updatedb import build_database, scan_directory
from agontools.setmode import find_mode, list_modes_table
from agontools.setcolor import vdu_bytes, background_command

sort_lines(["b", "a", "a"], SortOptions(unique=True))  # ['a', 'b']
match_pattern("*.BIN", "game.bin", case_insensitive=True)  # True
vdu_bytes("VDU 17 7")  # b'\x11\x07'
```

`agontools.locate_db` describes the database layout: `DbHeader` and
`DbEntry` pack to and unpack from their fixed-size records, and `fat_date`
and `fat_time` convert timestamps to FAT date and time words.

## What is not included

There is no serial terminal and no file-transfer protocol support in this
package. `agon-wc` does not read standard input; files must be named.