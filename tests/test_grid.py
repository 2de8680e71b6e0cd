import pytest

from pipekit.grid import MapError, print_map, read_map


def _write(tmp_path, text, name="map.txt"):
    path = tmp_path / name
    path.write_text(text, encoding="utf-8")
    return path


def test_read_rectangular_map(tmp_path):
    path = _write(tmp_path, "111\n1P1\n111\n")
    assert read_map(path) == ["111", "1P1", "111"]


def test_last_row_without_newline(tmp_path):
    path = _write(tmp_path, "ab\ncd")
    assert read_map(path) == ["ab", "cd"]


def test_all_rows_share_the_first_rows_width(tmp_path):
    path = _write(tmp_path, "xyz\nabc\nqrs\nmno\n")
    rows = read_map(path)
    assert len(rows) == 4
    assert {len(row) for row in rows} == {len(rows[0])}


def test_non_rectangular_map_raises(tmp_path):
    path = _write(tmp_path, "111\n11\n111\n")
    with pytest.raises(MapError, match="not a rect"):
        read_map(path)


def test_empty_file_raises(tmp_path):
    path = _write(tmp_path, "")
    with pytest.raises(MapError, match="empty file"):
        read_map(path)


def test_missing_file_raises(tmp_path):
    with pytest.raises(MapError, match="Error opening file"):
        read_map(tmp_path / "absent.txt")


def test_print_map_writes_rows_with_newlines(capsys):
    print_map(["ab", "cd"])
    assert capsys.readouterr().out == "ab\ncd\n"


def test_print_map_none_prints_nothing(capsys):
    print_map(None)
    assert capsys.readouterr().out == ""


def test_read_then_print_round_trip(tmp_path, capsys):
    text = "1111\n1CE1\n1111\n"
    path = _write(tmp_path, text)
    print_map(read_map(path))
    assert capsys.readouterr().out == text