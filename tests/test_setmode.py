import pytest

from agontools.setmode import (
    MODES,
    describe_mode,
    find_mode,
    is_valid_mode,
    list_modes_table,
    main,
    mode_command,
)


def test_find_mode_plain():
    found = find_mode(3)
    assert (found.mode, found.width, found.height, found.colors) == (3, 640, 240, 64)


def test_find_mode_double_buffered():
    assert find_mode(129) == find_mode(1)
    assert find_mode(129).mode == 1


def test_find_mode_unknown():
    assert find_mode(31) is None


@pytest.mark.parametrize(
    "mode, valid",
    [(0, True), (30, True), (31, False), (128, False), (129, True), (158, True), (159, False), (-1, False)],
)
def test_is_valid_mode(mode, valid):
    assert is_valid_mode(mode) is valid


def test_every_valid_mode_is_found():
    for mode in [*range(0, 31), *range(129, 159)]:
        assert find_mode(mode).mode == mode % 128


def test_mode_command():
    assert mode_command(3) == "VDU 22 3"
    assert mode_command(129) == "VDU 22 129"


def test_mode_command_invalid():
    with pytest.raises(ValueError):
        mode_command(31)


def test_describe_teletext():
    assert describe_mode(7) == "Screen mode changed to 7: Teletext, 16 colours"


def test_describe_double_buffered():
    assert describe_mode(136) == "Screen mode changed to 136: 320x240, 64 colours"


def test_describe_invalid():
    with pytest.raises(ValueError):
        describe_mode(200)


def test_table_rows_are_aligned():
    lines = list_modes_table().splitlines()
    header = "| Mode | Resolution | Colours |   | Mode | Resolution | Colours |"
    assert lines[1] == header
    rows = lines[3 : 3 + (len(MODES) + 1) // 2]
    assert all(len(row) == len(header) for row in rows)
    assert lines[-1] == "Note: Double-buffered modes = mode + 128 (129 to 158)"


def test_table_lists_every_mode_once():
    text = list_modes_table()
    for mode in MODES:
        assert f"|  {mode.mode:2d}  |" in text
    assert "Teletext" in text


def test_main_changes_mode(capsysbinary):
    assert main(["5"]) == 0
    out = capsysbinary.readouterr().out
    assert out.startswith(bytes([22, 5, 12]))
    assert describe_mode(5).encode() in out


def test_main_invalid(capsys):
    assert main(["200"]) == 1
    assert "invalid mode '200'" in capsys.readouterr().err


def test_main_missing(capsys):
    assert main([]) == 1
    assert "missing mode" in capsys.readouterr().err


def test_main_list(capsys):
    assert main(["-l"]) == 0
    assert capsys.readouterr().out == list_modes_table()