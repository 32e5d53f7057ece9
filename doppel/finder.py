"""Finding identical files among those of equal size."""

from __future__ import annotations

import os
import sys
from collections.abc import Mapping, Sequence
from concurrent.futures import ThreadPoolExecutor

from .hasher import FileInfo, hash_file
from .stats import Stats


def _log(message: str) -> None:
    print(message, file=sys.stderr)


def find_duplicates_by_hash(
    size_groups: Mapping[int, Sequence[str]],
    num_workers: int,
    stats: Stats,
    verbose: bool = False,
) -> dict[bytes, list[str]]:
    """Hash every file whose size is shared and group identical ones.

    Returns a mapping from content hash to the paths with that hash, holding
    only hashes shared by more than one file. With fewer than one worker
    nothing is hashed.
    """
    candidates = [path for files in size_groups.values() if len(files) > 1 for path in files]
    if not candidates:
        return {}

    if verbose:
        print(f"\n🔐 Hashing {len(candidates)} candidate files with {num_workers} workers\n")
    if num_workers < 1:
        return {}

    def examine(path: str) -> FileInfo | None:
        try:
            digest = hash_file(path)
        except OSError as exc:
            if verbose:
                _log(f"❌ Error hashing {path}: {exc}")
            stats.increment_error_count()
            return None
        try:
            size = os.stat(path).st_size
        except OSError as exc:
            if verbose:
                _log(f"❌ Error stating {path}: {exc}")
            stats.increment_error_count()
            return None
        return FileInfo(path=path, size=size, hash=digest)

    hash_groups: dict[bytes, list[str]] = {}
    with ThreadPoolExecutor(max_workers=num_workers) as pool:
        for info in pool.map(examine, candidates):
            if info is None:
                continue
            hash_groups.setdefault(info.hash, []).append(info.path)
            stats.increment_processed_files()

    duplicates = {digest: files for digest, files in hash_groups.items() if len(files) > 1}
    for files in duplicates.values():
        stats.increment_duplicate_groups()
        stats.add_duplicate_files(len(files))
    return duplicates