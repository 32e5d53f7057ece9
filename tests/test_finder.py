import pytest

from doppel.b3 import blake3_digest
from doppel.finder import find_duplicates_by_hash
from doppel.stats import Stats

CONTENT1 = b"This is test content for duplicate files"
CONTENT2 = b"This is different content"
UNIQUE = b"Unique content"


@pytest.fixture
def files(tmp_path):
    paths = {name: str(tmp_path / f"{name}.txt") for name in
             ("file1", "file2", "file3", "file4", "file5", "file6")}
    for name in ("file1", "file2", "file3"):
        (tmp_path / f"{name}.txt").write_bytes(CONTENT1)
    for name in ("file4", "file5"):
        (tmp_path / f"{name}.txt").write_bytes(CONTENT2)
    (tmp_path / "file6.txt").write_bytes(UNIQUE)
    return paths


def test_finds_both_duplicate_groups(files):
    size_groups = {
        len(CONTENT1): [files["file1"], files["file2"], files["file3"]],
        len(CONTENT2): [files["file4"], files["file5"]],
        len(UNIQUE): [files["file6"]],
    }
    stats = Stats()

    duplicates = find_duplicates_by_hash(size_groups, 2, stats, False)

    assert len(duplicates) == 2
    assert sorted(duplicates[blake3_digest(CONTENT1)]) == sorted(
        [files["file1"], files["file2"], files["file3"]]
    )
    assert sorted(duplicates[blake3_digest(CONTENT2)]) == sorted(
        [files["file4"], files["file5"]]
    )
    assert stats.processed_files == 5
    assert stats.duplicate_groups == 2
    assert stats.duplicate_files == 5
    assert stats.error_count == 0


def test_single_file_groups_give_nothing(files):
    stats = Stats()
    size_groups = {len(CONTENT1): [files["file1"]], len(CONTENT2): [files["file4"]]}
    assert find_duplicates_by_hash(size_groups, 2, stats, False) == {}
    assert stats.processed_files == 0


def test_all_files_duplicate(files):
    size_groups = {len(CONTENT1): [files["file1"], files["file2"], files["file3"]]}
    duplicates = find_duplicates_by_hash(size_groups, 2, Stats(), False)
    assert list(duplicates) == [blake3_digest(CONTENT1)]


def test_only_one_file_in_input(files):
    assert find_duplicates_by_hash({len(CONTENT1): [files["file1"]]}, 2, Stats(), False) == {}


def test_empty_input():
    assert find_duplicates_by_hash({}, 2, Stats(), False) == {}


def test_same_size_different_content_is_not_duplicate(tmp_path):
    first = tmp_path / "a"
    second = tmp_path / "b"
    first.write_bytes(b"aaaa")
    second.write_bytes(b"bbbb")
    stats = Stats()
    result = find_duplicates_by_hash({4: [str(first), str(second)]}, 3, stats, False)
    assert result == {}
    assert stats.processed_files == 2
    assert stats.duplicate_groups == 0


def test_missing_file_counts_error(files, tmp_path):
    missing = str(tmp_path / "gone.txt")
    size_groups = {len(CONTENT1): [files["file1"], files["file2"], missing]}
    stats = Stats()
    duplicates = find_duplicates_by_hash(size_groups, 2, stats, False)
    assert duplicates == {blake3_digest(CONTENT1): [files["file1"], files["file2"]]}
    assert stats.error_count == 1
    assert stats.processed_files == 2


def test_no_workers_hashes_nothing(files):
    stats = Stats()
    size_groups = {len(CONTENT1): [files["file1"], files["file2"]]}
    assert find_duplicates_by_hash(size_groups, 0, stats, False) == {}
    assert stats.processed_files == 0


def test_verbose_announces_hashing(files, capsys):
    size_groups = {len(CONTENT2): [files["file4"], files["file5"]]}
    find_duplicates_by_hash(size_groups, 4, Stats(), True)
    assert "Hashing 2 candidate files with 4 workers" in capsys.readouterr().out