import pytest

from agontools.tail import format_header, main, tail_bytes, tail_lines


def test_tail_bytes_takes_end():
    assert tail_bytes(b"hello world", 5) == b"world"


def test_tail_bytes_larger_than_data():
    data = b"short"
    assert tail_bytes(data, len(data) + 10) == data


def test_tail_bytes_zero():
    assert tail_bytes(b"abc", 0) == b""


def test_tail_bytes_negative():
    with pytest.raises(ValueError):
        tail_bytes(b"abc", -1)


def test_tail_lines_last_two():
    assert tail_lines(b"a\nb\nc\n", 2) == b"b\nc\n"


def test_tail_lines_without_final_newline():
    assert tail_lines(b"a\nb\nc", 2) == b"b\nc"


def test_tail_lines_more_than_available():
    data = b"one\ntwo\n"
    assert tail_lines(data, 100) == data


def test_tail_lines_empty_data():
    assert tail_lines(b"", 5) == b""


def test_tail_lines_zero():
    assert tail_lines(b"x\ny\n", 0) == b""


def test_tail_lines_keeps_blank_lines():
    assert tail_lines(b"a\n\nb\n", 2) == b"\nb\n"


def test_tail_lines_negative():
    with pytest.raises(ValueError):
        tail_lines(b"a\n", -2)


def test_format_header_first():
    assert format_header("f.txt", True) == "==> f.txt <==\n"


def test_format_header_later():
    assert format_header("f.txt", False) == "\n==> f.txt <==\n"


@pytest.fixture
def numbered(tmp_path):
    lines = [f"line {number}\n".encode() for number in range(1, 16)]
    path = tmp_path / "numbers.txt"
    path.write_bytes(b"".join(lines))
    return str(path), lines


def test_main_default_ten_lines(numbered, capsysbinary):
    path, lines = numbered
    assert main([path]) == 0
    assert capsysbinary.readouterr().out == b"".join(lines[-10:])


def test_main_line_option(numbered, capsysbinary):
    path, lines = numbered
    assert main(["-n", "3", path]) == 0
    assert capsysbinary.readouterr().out == b"".join(lines[-3:])


def test_main_nonpositive_lines_falls_back_to_default(numbered, capsysbinary):
    path, lines = numbered
    assert main(["-n", "0", path]) == 0
    assert capsysbinary.readouterr().out == b"".join(lines[-10:])


def test_main_byte_option(numbered, capsysbinary):
    path, lines = numbered
    assert main(["-c", "4", path]) == 0
    assert capsysbinary.readouterr().out == b"".join(lines)[-4:]


def test_main_zero_bytes_outputs_nothing(numbered, capsysbinary):
    path, _ = numbered
    assert main(["-c", "0", path]) == 0
    assert capsysbinary.readouterr().out == b""


def test_main_headers_for_multiple_files(tmp_path, capsysbinary):
    first = tmp_path / "a.txt"
    second = tmp_path / "b.txt"
    first.write_bytes(b"alpha\n")
    second.write_bytes(b"beta\n")
    assert main([str(first), str(second)]) == 0
    expected = (
        f"==> {first} <==\n".encode() + b"alpha\n"
        + f"\n==> {second} <==\n".encode() + b"beta\n"
    )
    assert capsysbinary.readouterr().out == expected


def test_main_quiet_suppresses_headers(tmp_path, capsysbinary):
    first = tmp_path / "a.txt"
    second = tmp_path / "b.txt"
    first.write_bytes(b"alpha\n")
    second.write_bytes(b"beta\n")
    assert main(["-q", str(first), str(second)]) == 0
    assert capsysbinary.readouterr().out == b"alpha\nbeta\n"


def test_main_verbose_single_file(tmp_path, capsysbinary):
    path = tmp_path / "a.txt"
    path.write_bytes(b"alpha\n")
    assert main(["-v", str(path)]) == 0
    assert capsysbinary.readouterr().out == f"==> {path} <==\n".encode() + b"alpha\n"


def test_main_missing_file_reports_error(tmp_path, capsys):
    missing = str(tmp_path / "missing.txt")
    assert main([missing]) == 1
    assert f"cannot open '{missing}' for reading" in capsys.readouterr().err


def test_main_missing_operand(capsys):
    assert main([]) == 1
    assert "missing file operand" in capsys.readouterr().err


def test_main_unknown_option(capsys):
    assert main(["-x", "file"]) == 1
    assert "unknown option '-x'" in capsys.readouterr().err


def test_main_option_without_value(capsys):
    assert main(["file", "-n"]) == 1
    assert "unknown option '-n'" in capsys.readouterr().err


def test_main_help(capsys):
    assert main(["-h"]) == 0
    assert capsys.readouterr().out.startswith("tail v1.0 - Output the last part of files")