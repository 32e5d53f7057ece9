"""Printing of search results and statistics."""

from __future__ import annotations

import os
import time
from collections.abc import Mapping, Sequence

from .stats import Stats, format_bytes


def _format_duration(seconds: float) -> str:
    """Render a duration rounded to milliseconds, e.g. ``250ms`` or ``1m2.5s``."""
    sign = "-" if seconds < 0 else ""
    ms = int(abs(seconds) * 1000 + 0.5)
    if ms < 1000:
        return f"{sign}{ms}ms" if ms else "0s"
    minutes, ms = divmod(ms, 60_000)
    hours, minutes = divmod(minutes, 60)
    prefix = f"{hours}h{minutes}m" if hours else (f"{minutes}m" if minutes else "")
    whole, fraction = divmod(ms, 1000)
    frac = f".{fraction:03d}".rstrip("0") if fraction else ""
    return f"{sign}{prefix}{whole}{frac}s"


def show_results(
    duplicates: Mapping[object, Sequence[str]], stats: Stats, show_stats: bool
) -> None:
    """Print each duplicate group, a summary, and optionally detailed statistics."""
    total_wasted = 0
    for number, files in enumerate(duplicates.values(), start=1):
        print(f"\n🔗 Duplicate group {number} ({len(files)} files):")
        if files:
            try:
                group_size = os.stat(files[0]).st_size
            except OSError:
                pass
            else:
                wasted = group_size * (len(files) - 1)
                total_wasted += wasted
                print(
                    f"   Size: {format_bytes(group_size)} each, "
                    f"{format_bytes(wasted)} wasted space"
                )
        for path in files:
            print(f"   📄 {path}")

    print("\n📊 Summary:")
    if stats.duplicate_files > 0:
        print(
            f"   🔗 Duplicate files found: {stats.duplicate_files} "
            f"(in {stats.duplicate_groups} groups)"
        )
        print(f"   💾 Total wasted space: {format_bytes(total_wasted)}")
    else:
        print("   ✅ No duplicate files found")

    if show_stats:
        elapsed = time.monotonic() - stats.start_time
        print("\n📈 Detailed Statistics:")
        print(f"   📁 Total files scanned: {stats.total_files}")
        print(f"   🔐 Files processed for hashing: {stats.processed_files}")
        print(f"   ⏭️  Directories skipped: {stats.skipped_dirs}")
        print(f"   ⏭️  Files skipped: {stats.skipped_files}")
        print(f"   ❌ Files with errors: {stats.error_count}")
        print(f"   ⏱️  Processing time: {_format_duration(elapsed)}")
        if stats.processed_files > 0 and elapsed > 0:
            print(f"   🚀 Processing rate: {stats.processed_files / elapsed:.1f} files/second")
    elif stats.error_count > 0:
        print(f"   ❌ Files with errors: {stats.error_count}")