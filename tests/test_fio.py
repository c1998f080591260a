import pytest

from trialkit import fio


def write(path, content):
    path.write_text(content, encoding="utf-8")
    return str(path)


def test_open_writer_truncates(tmp_path):
    target = tmp_path / "out.txt"
    target.write_text("old content that is long", encoding="utf-8")
    with fio.open_writer(str(target)) as writer:
        writer.write("new")
    assert target.read_text(encoding="utf-8") == "new"


def test_load_list_keeps_order_and_skips_empty(tmp_path):
    fname = write(tmp_path / "list.txt", "b\tx\n\n  a \t y\r\n\tz\nb\n")
    assert fio.load_list(fname, "\t") == ["b", "a", "b"]


def test_load_list_missing_file_is_empty(tmp_path):
    assert fio.load_list(str(tmp_path / "missing.txt"), "\t") == []


def test_load_set_dedupes(tmp_path):
    fname = write(tmp_path / "set.txt", "b|1\na|2\nb|3\n|4\n")
    assert sorted(fio.load_set(fname, "|")) == ["a", "b"]


def test_load_map(tmp_path):
    fname = write(tmp_path / "map.txt", "k1 = v1\nk2=v2\n")
    assert fio.load_map(fname, "=") == {"k1": "v1", "k2": "v2"}


def test_load_map_without_delimiter_raises(tmp_path):
    fname = write(tmp_path / "map.txt", "k1=v1\nbroken\n")
    with pytest.raises(ValueError):
        fio.load_map(fname, "=")


def test_load_tuples(tmp_path):
    fname = write(tmp_path / "tuples.txt", "a\tb\tc\n c \t d \n")
    assert fio.load_tuples(fname, "\t") == [("a", "b"), ("c", "d")]


def test_load_tuples_without_delimiter_raises(tmp_path):
    fname = write(tmp_path / "tuples.txt", "lonely\n")
    with pytest.raises(ValueError):
        fio.load_tuples(fname, "\t")


def test_files_expands_semicolon_list():
    assert fio.files("dir/sub/a.txt; b.txt ;c.txt") == [
        "dir/sub/a.txt",
        "dir/sub/b.txt",
        "dir/sub/c.txt",
    ]


def test_files_without_directory():
    assert fio.files("a;b") == ["a", "b"]


def test_read_fnames_semicolon_list():
    assert fio.read_fnames("d/x; y") == fio.files("d/x; y")


def test_read_fnames_single_file(tmp_path):
    fname = write(tmp_path / "one.txt", "x\n")
    assert fio.read_fnames(fname) == [fname]


def test_read_fnames_directory_skips_hidden_and_subdirs(tmp_path):
    write(tmp_path / "b.txt", "")
    write(tmp_path / "a.txt", "")
    write(tmp_path / ".hidden", "")
    (tmp_path / "sub").mkdir()
    assert fio.read_fnames(str(tmp_path)) == [
        str(tmp_path) + "/a.txt",
        str(tmp_path) + "/b.txt",
    ]


def test_read_fnames_missing_path_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        fio.read_fnames(str(tmp_path / "missing"))