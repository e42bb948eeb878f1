import pytest

from pagefinder.dir_scanner import scan_dir


def test_lists_files_and_directories(tmp_path):
    names = ["b.xml", "a.xml", "sub"]
    (tmp_path / "b.xml").write_text("x")
    (tmp_path / "a.xml").write_text("y")
    (tmp_path / "sub").mkdir()
    result = scan_dir(tmp_path)
    assert set(result) == {f"{tmp_path}/{name}" for name in names}
    assert result == sorted(result)


def test_accepts_string_path(tmp_path):
    (tmp_path / "one.txt").write_text("x")
    assert scan_dir(str(tmp_path)) == [f"{tmp_path}/one.txt"]


def test_empty_directory(tmp_path):
    assert scan_dir(tmp_path) == []


def test_missing_directory_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        scan_dir(tmp_path / "absent")