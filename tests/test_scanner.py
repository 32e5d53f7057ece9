import os

import pytest

from doppel.config import FilterConfig
from doppel.scanner import get_directories, group_files_by_size
from doppel.stats import Stats


@pytest.fixture
def tree(tmp_path):
    dir1 = tmp_path / "dir1"
    dir2 = tmp_path / "dir2"
    skip_dir = tmp_path / "skip_dir"
    for directory in (dir1, dir2, skip_dir):
        directory.mkdir()
    return tmp_path, dir1, dir2, skip_dir


def _populate(dir1, dir2, skip_dir):
    files = {
        dir1 / "file1.txt": 100,
        dir1 / "file2.txt": 200,
        dir2 / "file3.txt": 100,
        dir2 / "file4.txt": 300,
        skip_dir / "skipfile.txt": 400,
        dir1 / "skip.log": 500,
    }
    for path, size in files.items():
        path.write_bytes(bytes(size))


def test_empty_tree_gives_no_groups(tree):
    root = tree[0]
    assert group_files_by_size([str(root)], FilterConfig(), Stats(), False) == {}


def test_group_files_by_size_with_filters(tree):
    root, dir1, dir2, skip_dir = tree
    _populate(dir1, dir2, skip_dir)
    config = FilterConfig(exclude_dirs=["skip_dir"], exclude_files=["*.log"])
    stats = Stats()

    groups = group_files_by_size([str(root)], config, stats, False)

    assert sorted(groups) == [100, 200, 300]
    assert sorted(groups[100]) == sorted(
        [str(dir1 / "file1.txt"), str(dir2 / "file3.txt")]
    )
    assert groups[200] == [str(dir1 / "file2.txt")]
    assert groups[300] == [str(dir2 / "file4.txt")]
    names = {os.path.basename(p) for files in groups.values() for p in files}
    assert "skipfile.txt" not in names
    assert "skip.log" not in names
    assert stats.total_files == 4
    assert stats.skipped_dirs == 1
    assert stats.skipped_files == 1
    assert stats.error_count == 0


def test_all_files_skipped_by_size(tree):
    root, dir1, dir2, skip_dir = tree
    _populate(dir1, dir2, skip_dir)
    stats = Stats()
    groups = group_files_by_size([str(root)], FilterConfig(min_size=1000), stats, False)
    assert groups == {}
    assert stats.skipped_files == 6


def test_paths_come_in_lexical_order(tmp_path):
    for name in ("c.txt", "a.txt", "b.txt"):
        (tmp_path / name).write_bytes(b"xy")
    groups = group_files_by_size([str(tmp_path)], FilterConfig(), Stats(), False)
    assert [os.path.basename(p) for p in groups[2]] == ["a.txt", "b.txt", "c.txt"]


def test_several_directories_are_combined(tree):
    _, dir1, dir2, _ = tree
    (dir1 / "x").write_bytes(b"12345")
    (dir2 / "y").write_bytes(b"abcde")
    stats = Stats()
    groups = group_files_by_size([str(dir1), str(dir2)], FilterConfig(), stats, False)
    assert groups == {5: [str(dir1 / "x"), str(dir2 / "y")]}
    assert stats.total_files == 2


def test_file_given_as_root_is_included(tmp_path):
    path = tmp_path / "single.bin"
    path.write_bytes(b"abc")
    groups = group_files_by_size([str(path)], FilterConfig(), Stats(), False)
    assert groups == {3: [str(path)]}


def test_missing_directory_counts_error(tmp_path):
    stats = Stats()
    groups = group_files_by_size(
        [str(tmp_path / "missing")], FilterConfig(), stats, False
    )
    assert groups == {}
    assert stats.error_count == 1


def test_excluded_root_is_skipped(tree):
    root, dir1, dir2, skip_dir = tree
    _populate(dir1, dir2, skip_dir)
    stats = Stats()
    groups = group_files_by_size(
        [str(skip_dir)], FilterConfig(exclude_dirs=["skip_dir"]), stats, False
    )
    assert groups == {}
    assert stats.skipped_dirs == 1


def test_verbose_reports_skips(tree, capsys):
    root, dir1, dir2, skip_dir = tree
    _populate(dir1, dir2, skip_dir)
    config = FilterConfig(exclude_dirs=["skip_dir"], exclude_files=["*.log"])
    group_files_by_size([str(root)], config, Stats(), True)
    captured = capsys.readouterr()
    assert "Skipped 1 directories and 1 files due to filters" in captured.out
    assert "Skipping directory:" in captured.err
    assert "Skipping file:" in captured.err


def test_get_directories_defaults_to_current():
    assert get_directories([]) == ["."]
    assert get_directories(None) == ["."]


def test_get_directories_keeps_arguments():
    assert get_directories(("a", "b")) == ["a", "b"]