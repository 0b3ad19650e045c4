import pytest

from agontools.locate_db import AM_DIR, HEADER_SIZE, ENTRY_SIZE, DbEntry, DbHeader
from agontools.updatedb import build_database, main, scan_directory


@pytest.fixture
def tree(tmp_path):
    root = tmp_path / "tree"
    (root / "sub").mkdir(parents=True)
    (root / "a.txt").write_bytes(b"hello")
    (root / "sub" / "b.txt").write_bytes(b"abc")
    return root


def test_scan_lists_depth_first(tree):
    paths = [item.path for item in scan_directory(str(tree))]
    assert paths == [f"{tree}/a.txt", f"{tree}/sub", f"{tree}/sub/b.txt"]


def test_scan_records_sizes_and_directories(tree):
    items = {item.path: item for item in scan_directory(str(tree))}
    assert items[f"{tree}/a.txt"].size == 5
    assert items[f"{tree}/sub/b.txt"].size == 3
    assert items[f"{tree}/sub"].attrib & AM_DIR
    assert items[f"{tree}/sub"].is_dir
    assert not items[f"{tree}/a.txt"].is_dir


def test_scan_dot_root_gives_relative_paths(tree, monkeypatch):
    monkeypatch.chdir(tree)
    paths = [item.path for item in scan_directory(".")]
    assert paths == ["a.txt", "sub", "sub/b.txt"]


def test_scan_missing_directory_yields_nothing(tmp_path):
    assert list(scan_directory(str(tmp_path / "absent"))) == []


def test_scan_skips_overlong_paths(tmp_path):
    root = tmp_path / "long"
    root.mkdir()
    (root / "ok.txt").write_bytes(b"")
    (root / ("n" * 250)).write_bytes(b"")
    paths = [item.path for item in scan_directory(str(root))]
    assert paths == [f"{root}/ok.txt"]


def test_build_database_header(tree, tmp_path):
    db = tmp_path / "locate.db"
    count, _ = build_database(db, str(tree))
    header = DbHeader.unpack(db.read_bytes())
    assert count == 3
    assert header.file_count == 3
    assert header.data_offset == HEADER_SIZE
    assert header.root_path == str(tree)


def test_build_database_entries_and_offset(tree, tmp_path):
    db = tmp_path / "locate.db"
    _, offset = build_database(db, str(tree))
    data = db.read_bytes()
    paths = [item.path for item in scan_directory(str(tree))]
    assert offset == HEADER_SIZE + sum(len(p) + 1 for p in paths)

    first = DbEntry.unpack(data[HEADER_SIZE:])
    assert first.path_offset == HEADER_SIZE
    assert first.name == "a.txt"
    assert first.size == 5
    stored = data[HEADER_SIZE + ENTRY_SIZE:].split(b"\0", 1)[0].decode()
    assert stored == paths[0]
    assert len(data) == HEADER_SIZE + len(paths) * ENTRY_SIZE + sum(
        len(p) + 1 for p in paths
    )


def test_build_database_unwritable_path(tree, tmp_path):
    with pytest.raises(OSError):
        build_database(tmp_path / "missing" / "locate.db", str(tree))


def test_main_help(capsys):
    assert main(["-h"]) == 0
    assert "Usage: updatedb [options] [root_path]" in capsys.readouterr().out