"""Command-line interface for finding duplicate files."""

from __future__ import annotations

import argparse
import os
import sys
from collections.abc import Sequence

from .config import (
    PRESET_NAMES,
    FilterConfig,
    FilterConfigError,
    build_filter_config,
    display_filter_config,
    get_preset_config,
)
from .display import show_results
from .finder import find_duplicates_by_hash
from .scanner import get_directories, group_files_by_size
from .stats import Stats

VERSION = "0.1.0"
PROG = "doppel"
DEFAULT_COMMAND = "find"
PRESET_WORKERS = 4

_COMMANDS = frozenset({"find", "f", "preset", "p"})
_ROOT_OPTIONS = frozenset({"-h", "--help", "--version"})

_DESCRIPTION = (
    "A fast, concurrent duplicate file finder with advanced filtering "
    "capabilities.\n\n"
    "This tool scans directories for duplicate files by comparing file sizes "
    "first, then computing Blake3 hashes for files of the same size. It "
    "supports parallel processing and extensive filtering options to skip "
    "unwanted files and directories."
)

_PRESET_USAGE = {
    "dev": "Development preset - skip build dirs, temp files, version control",
    "media": "Media preset - focus on images/videos, skip small files",
    "docs": "Documents preset - focus on document files",
    "clean": "Clean preset - skip temporary and cache files",
}

_PRESET_DESCRIPTION = (
    "Apply common filter presets for different scenarios:\n"
    "- dev: Skip development directories and files\n"
    "- media: Focus on media files, skip small files\n"
    "- docs: Focus on document files\n"
    "- clean: Skip temporary and cache files"
)


def _add_find_parser(commands: argparse._SubParsersAction) -> None:
    find = commands.add_parser(
        "find",
        aliases=["f"],
        help="Find duplicate files in specified directories",
        description=(
            "Scan directories for duplicate files. If no directories are "
            "specified, the current directory is used. Files are compared "
            "using Blake3 hashes after initial size-based filtering."
        ),
    )
    find.add_argument("directories", nargs="*", metavar="DIRECTORY")
    find.add_argument(
        "-w", "--workers", type=int, default=os.cpu_count() or 1,
        help="Number of worker threads for parallel hashing",
    )
    find.add_argument(
        "-v", "--verbose", action="store_true",
        help="Enable verbose output with detailed progress information",
    )
    find.add_argument(
        "--exclude-dirs", default="",
        help="Comma-separated list of directory patterns to exclude (glob patterns)",
    )
    find.add_argument(
        "--exclude-files", default="",
        help="Comma-separated list of file patterns to exclude (glob patterns)",
    )
    find.add_argument(
        "--exclude-dir-regex", default="",
        help="Comma-separated list of regex patterns for directories to exclude",
    )
    find.add_argument(
        "--exclude-file-regex", default="",
        help="Comma-separated list of regex patterns for files to exclude",
    )
    find.add_argument(
        "--min-size", type=int, default=0,
        help="Minimum file size in bytes (0 = no limit)",
    )
    find.add_argument(
        "--max-size", type=int, default=0,
        help="Maximum file size in bytes (0 = no limit)",
    )
    find.add_argument(
        "--show-filters", action="store_true",
        help="Show active filters and exit without scanning",
    )
    find.add_argument(
        "--stats", action="store_true",
        help="Show detailed statistics at the end",
    )
    find.set_defaults(command="find")


def _add_common_preset_flags(parser: argparse.ArgumentParser, suppress: bool) -> None:
    workers_default = argparse.SUPPRESS if suppress else PRESET_WORKERS
    flag_default = argparse.SUPPRESS if suppress else False
    parser.add_argument(
        "-w", "--workers", type=int, default=workers_default,
        help="Number of worker threads for parallel hashing",
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true", default=flag_default,
        help="Enable verbose output",
    )
    parser.add_argument(
        "--stats", action="store_true", default=flag_default,
        help="Show detailed statistics",
    )


def _add_preset_parser(commands: argparse._SubParsersAction) -> None:
    preset = commands.add_parser(
        "preset",
        aliases=["p"],
        help="Use predefined filter presets",
        description=_PRESET_DESCRIPTION,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    _add_common_preset_flags(preset, suppress=False)
    preset.set_defaults(command="preset", preset=None, directories=[])
    preset.set_defaults(preset_parser=preset)
    presets = preset.add_subparsers(dest="preset_name", metavar="PRESET")
    for name in PRESET_NAMES:
        sub = presets.add_parser(name, help=_PRESET_USAGE.get(name, ""))
        sub.add_argument("directories", nargs="*", metavar="DIRECTORY")
        _add_common_preset_flags(sub, suppress=True)
        sub.set_defaults(preset=name)


def build_parser() -> argparse.ArgumentParser:
    """The argument parser for all commands."""
    parser = argparse.ArgumentParser(
        prog=PROG,
        description="Find duplicate files across directories",
        epilog=_DESCRIPTION,
    )
    parser.add_argument("--version", action="version", version=f"{PROG} version {VERSION}")
    commands = parser.add_subparsers(dest="command_name", metavar="COMMAND")
    _add_find_parser(commands)
    _add_preset_parser(commands)
    return parser


def find_duplicates(
    directories: Sequence[str] | None,
    filter_config: FilterConfig,
    workers: int,
    verbose: bool = False,
    show_stats: bool = False,
    show_filters: bool = False,
) -> None:
    """Scan ``directories`` with the given filters and print the duplicates."""
    roots = get_directories(directories)

    if show_filters:
        display_filter_config(filter_config)
        return

    if verbose:
        print(f"🔍 Scanning directories: [{' '.join(roots)}]")
        display_filter_config(filter_config)

    stats = Stats()
    size_groups = group_files_by_size(roots, filter_config, stats, verbose)
    if verbose:
        print(f"📊 Found {stats.total_files} files, {len(size_groups)} size groups")

    duplicates = find_duplicates_by_hash(size_groups, workers, stats, verbose)
    show_results(duplicates, stats, show_stats or verbose)


def _with_default_command(argv: list[str]) -> list[str]:
    if not argv:
        return [DEFAULT_COMMAND]
    if argv[0] in _COMMANDS or argv[0] in _ROOT_OPTIONS:
        return argv
    return [DEFAULT_COMMAND, *argv]


def main(argv: Sequence[str] | None = None) -> int:
    """Run the command line; returns the process exit status."""
    args_list = list(sys.argv[1:] if argv is None else argv)
    args = build_parser().parse_args(_with_default_command(args_list))

    if args.command == "preset":
        if args.preset is None:
            args.preset_parser.print_help()
            return 0
        filter_config = get_preset_config(args.preset)
        show_filters = False
    else:
        try:
            filter_config = build_filter_config(
                args.exclude_dirs,
                args.exclude_files,
                args.exclude_dir_regex,
                args.exclude_file_regex,
                args.min_size,
                args.max_size,
            )
        except FilterConfigError as exc:
            print(f"{PROG}: error building filter configuration: {exc}", file=sys.stderr)
            return 1
        show_filters = args.show_filters

    find_duplicates(
        args.directories,
        filter_config,
        args.workers,
        verbose=args.verbose,
        show_stats=args.stats,
        show_filters=show_filters,
    )
    return 0


if __name__ == "__main__":
    sys.exit(main())