"""Counters collected while searching for duplicate files."""

from __future__ import annotations

import threading
import time
from dataclasses import dataclass, field

_UNIT = 1024
_PREFIXES = "KMGTPE"


@dataclass
class Stats:
    """Running totals for one duplicate search.

    ``start_time`` is a reading of :func:`time.monotonic`.
    """

    total_files: int = 0
    processed_files: int = 0
    skipped_dirs: int = 0
    skipped_files: int = 0
    error_count: int = 0
    duplicate_groups: int = 0
    duplicate_files: int = 0
    start_time: float = field(default_factory=time.monotonic)
    _lock: threading.Lock = field(
        default_factory=threading.Lock, init=False, repr=False, compare=False
    )

    def increment_error_count(self) -> None:
        """Count one more file that could not be read."""
        with self._lock:
            self.error_count += 1

    def increment_processed_files(self) -> None:
        """Count one more hashed file."""
        with self._lock:
            self.processed_files += 1

    def increment_duplicate_groups(self) -> None:
        """Count one more group of identical files."""
        with self._lock:
            self.duplicate_groups += 1

    def add_duplicate_files(self, count: int) -> None:
        """Add ``count`` files to the number of duplicates found."""
        with self._lock:
            self.duplicate_files += count


def format_bytes(num_bytes: int) -> str:
    """Render a byte count with binary prefixes, e.g. ``1.5 KB``."""
    if num_bytes < _UNIT:
        return f"{num_bytes} B"
    divisor = _UNIT
    exponent = 0
    remaining = num_bytes // _UNIT
    while remaining >= _UNIT:
        divisor *= _UNIT
        exponent += 1
        remaining //= _UNIT
    return f"{num_bytes / divisor:.1f} {_PREFIXES[exponent]}B"