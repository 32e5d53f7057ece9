"""Directory walking that groups candidate files by size."""

from __future__ import annotations

import os
import stat as stat_mode
import sys
from collections.abc import Callable, Iterable, Iterator, Sequence

from .config import FilterConfig
from .stats import Stats


def _log(message: str) -> None:
    print(message, file=sys.stderr)


def _file(path: str, size_of: Callable[[], int], fc: FilterConfig,
          stats: Stats, verbose: bool) -> Iterator[tuple[str, int]]:
    try:
        size = size_of()
    except OSError as exc:
        if verbose:
            _log(f"❌ Error getting info for {path}: {exc}")
        stats.error_count += 1
        return
    if fc.should_exclude_file(path, size):
        if verbose:
            _log(f"⏭️  Skipping file: {path}")
        stats.skipped_files += 1
        return
    yield path, size


def _walk_dir(path: str, fc: FilterConfig, stats: Stats,
              verbose: bool) -> Iterator[tuple[str, int]]:
    if fc.should_exclude_dir(path):
        if verbose:
            _log(f"⏭️  Skipping directory: {path}")
        stats.skipped_dirs += 1
        return
    try:
        with os.scandir(path) as listing:
            entries = sorted(listing, key=lambda entry: entry.name)
    except OSError as exc:
        if verbose:
            _log(f"❌ Error accessing {path}: {exc}")
        stats.error_count += 1
        return
    for entry in entries:
        child = os.path.normpath(os.path.join(path, entry.name))
        if entry.is_dir(follow_symlinks=False):
            yield from _walk_dir(child, fc, stats, verbose)
        elif entry.is_file(follow_symlinks=False):
            size_of = lambda e=entry: e.stat(follow_symlinks=False).st_size  # noqa: E731
            yield from _file(child, size_of, fc, stats, verbose)


def _scan(root: str, fc: FilterConfig, stats: Stats,
          verbose: bool) -> Iterator[tuple[str, int]]:
    """Yield ``(path, size)`` for kept regular files, depth first in lexical order."""
    try:
        root_stat = os.lstat(root)
    except OSError as exc:
        if verbose:
            _log(f"❌ Error accessing {root}: {exc}")
        stats.error_count += 1
        return
    if stat_mode.S_ISDIR(root_stat.st_mode):
        yield from _walk_dir(root, fc, stats, verbose)
    elif stat_mode.S_ISREG(root_stat.st_mode):
        yield from _file(root, lambda: root_stat.st_size, fc, stats, verbose)


def group_files_by_size(
    directories: Iterable[str],
    filter_config: FilterConfig,
    stats: Stats,
    verbose: bool = False,
) -> dict[int, list[str]]:
    """Walk ``directories`` and map each file size to the paths of that size."""
    size_groups: dict[int, list[str]] = {}
    for directory in directories:
        for path, size in _scan(directory, filter_config, stats, verbose):
            size_groups.setdefault(size, []).append(path)
            stats.total_files += 1

    if verbose and (stats.skipped_dirs > 0 or stats.skipped_files > 0):
        print(
            f"\n⏭️  Skipped {stats.skipped_dirs} directories and "
            f"{stats.skipped_files} files due to filters"
        )
    return size_groups


def get_directories(args: Sequence[str] | None) -> list[str]:
    """The directories named on the command line, or the current one."""
    return list(args) if args else ["."]