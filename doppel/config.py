"""Filters that decide which files and directories take part in a scan."""

from __future__ import annotations

import os
import re
from dataclasses import dataclass, field
from functools import lru_cache

from .stats import format_bytes

_SEPARATORS = os.sep + (os.altsep or "")
_ESCAPES_ALLOWED = os.sep != "\\"


class FilterConfigError(ValueError):
    """Raised when filter options are malformed or contradict each other."""


class _BadPattern(Exception):
    pass


def _base_name(path: str) -> str:
    """Last element of ``path``, ignoring trailing separators."""
    if not path:
        return "."
    stripped = path.rstrip(_SEPARATORS)
    if not stripped:
        return os.sep
    for sep in _SEPARATORS:
        stripped = stripped.rsplit(sep, 1)[-1]
    return stripped


def _class_char(pattern: str, pos: int) -> tuple[str, int]:
    if pos >= len(pattern) or pattern[pos] in "-]":
        raise _BadPattern
    if pattern[pos] == "\\" and _ESCAPES_ALLOWED:
        pos += 1
        if pos >= len(pattern):
            raise _BadPattern
    char = pattern[pos]
    pos += 1
    if pos >= len(pattern):
        raise _BadPattern
    return char, pos


def _translate_class(pattern: str, pos: int) -> tuple[str, int]:
    negated = pos < len(pattern) and pattern[pos] == "^"
    if negated:
        pos += 1
    ranges: list[tuple[str, str]] = []
    while True:
        if pos >= len(pattern):
            raise _BadPattern
        if pattern[pos] == "]" and ranges:
            pos += 1
            break
        low, pos = _class_char(pattern, pos)
        high = low
        if pattern[pos] == "-":
            high, pos = _class_char(pattern, pos + 1)
        ranges.append((low, high))
    body = "".join(
        re.escape(low) if low == high else f"{re.escape(low)}-{re.escape(high)}"
        for low, high in ranges
        if low <= high
    )
    if not body:
        return ("(?s:.)" if negated else "(?!)"), pos
    return f"[{'^' if negated else ''}{body}]", pos


@lru_cache(maxsize=512)
def _compile_glob(pattern: str) -> re.Pattern[str] | None:
    """Compile a shell pattern; ``None`` when the pattern is malformed."""
    not_sep = f"[^{re.escape(_SEPARATORS)}]"
    parts: list[str] = []
    pos = 0
    try:
        while pos < len(pattern):
            char = pattern[pos]
            if char == "*":
                parts.append(not_sep + "*")
                pos += 1
            elif char == "?":
                parts.append(not_sep)
                pos += 1
            elif char == "[":
                translated, pos = _translate_class(pattern, pos + 1)
                parts.append(translated)
            elif char == "\\" and _ESCAPES_ALLOWED:
                pos += 1
                if pos >= len(pattern):
                    raise _BadPattern
                parts.append(re.escape(pattern[pos]))
                pos += 1
            else:
                parts.append(re.escape(char))
                pos += 1
    except _BadPattern:
        return None
    return re.compile("".join(parts), re.DOTALL)


def _glob_match(pattern: str, name: str) -> bool:
    compiled = _compile_glob(pattern)
    return compiled is not None and compiled.fullmatch(name) is not None


@dataclass
class FilterConfig:
    """Criteria for leaving files and directories out of a scan.

    A size limit of zero or less means no limit.
    """

    exclude_dirs: list[str] = field(default_factory=list)
    exclude_files: list[str] = field(default_factory=list)
    exclude_dir_regex: list[re.Pattern[str]] = field(default_factory=list)
    exclude_file_regex: list[re.Pattern[str]] = field(default_factory=list)
    min_size: int = 0
    max_size: int = 0

    def should_exclude_dir(self, dir_path: str) -> bool:
        """Whether the directory at ``dir_path`` is to be skipped."""
        name = _base_name(dir_path)
        if any(
            _glob_match(pattern, name) or _glob_match(pattern, dir_path)
            for pattern in self.exclude_dirs
        ):
            return True
        return any(
            regex.search(name) or regex.search(dir_path)
            for regex in self.exclude_dir_regex
        )

    def should_exclude_file(self, file_path: str, size: int) -> bool:
        """Whether the file at ``file_path`` of ``size`` bytes is to be skipped."""
        min_size, max_size = self.min_size, self.max_size
        if min_size > 0 and max_size > 0 and min_size > max_size:
            return True
        if min_size > 0 and size < min_size:
            return True
        if max_size > 0 and size > max_size:
            return True
        if min_size > 0 and min_size == max_size and size != min_size:
            return True

        name = _base_name(file_path)
        if any(
            _glob_match(pattern, name) or _glob_match(pattern, file_path)
            for pattern in self.exclude_files
        ):
            return True
        return any(
            regex.search(name) or regex.search(file_path)
            for regex in self.exclude_file_regex
        )


def parse_comma_separated(text: str) -> list[str]:
    """Split on commas, trim whitespace and drop empty items."""
    return [item for item in (part.strip() for part in text.split(",")) if item]


def _compile_regexes(text: str, kind: str) -> list[re.Pattern[str]]:
    compiled = []
    for pattern in parse_comma_separated(text):
        try:
            compiled.append(re.compile(pattern))
        except re.error as exc:
            raise FilterConfigError(
                f"invalid {kind} regex pattern '{pattern}': {exc}"
            ) from exc
    return compiled


def build_filter_config(
    exclude_dirs: str = "",
    exclude_files: str = "",
    exclude_dir_regex: str = "",
    exclude_file_regex: str = "",
    min_size: int = 0,
    max_size: int = 0,
) -> FilterConfig:
    """Build a :class:`FilterConfig` from comma-separated option strings.

    Negative sizes are treated as zero. Raises :class:`FilterConfigError`
    when the minimum exceeds the maximum or a regular expression is invalid.
    """
    min_size = max(min_size, 0)
    max_size = max(max_size, 0)
    if min_size > 0 and max_size > 0 and min_size > max_size:
        raise FilterConfigError(
            f"minimum size ({min_size}) cannot be greater than "
            f"maximum size ({max_size})"
        )
    return FilterConfig(
        exclude_dirs=parse_comma_separated(exclude_dirs),
        exclude_files=parse_comma_separated(exclude_files),
        exclude_dir_regex=_compile_regexes(exclude_dir_regex, "directory"),
        exclude_file_regex=_compile_regexes(exclude_file_regex, "file"),
        min_size=min_size,
        max_size=max_size,
    )


def display_filter_config(config: FilterConfig) -> None:
    """Print the active filters."""
    print("🔧 Active filters:")
    if config.exclude_dirs:
        print(f"  📁 Exclude directories: {', '.join(config.exclude_dirs)}")
    if config.exclude_files:
        print(f"  📄 Exclude files: {', '.join(config.exclude_files)}")
    if config.exclude_dir_regex:
        patterns = ", ".join(regex.pattern for regex in config.exclude_dir_regex)
        print(f"  📁 Exclude directory regex: {patterns}")
    if config.exclude_file_regex:
        patterns = ", ".join(regex.pattern for regex in config.exclude_file_regex)
        print(f"  📄 Exclude file regex: {patterns}")
    if config.min_size > 0:
        print(f"  📏 Minimum file size: {format_bytes(config.min_size)}")
    if config.max_size > 0:
        print(f"  📏 Maximum file size: {format_bytes(config.max_size)}")
    if not (
        config.exclude_dirs
        or config.exclude_files
        or config.exclude_dir_regex
        or config.exclude_file_regex
        or config.min_size
        or config.max_size
    ):
        print("  ✅ No filters active")
    print()


_PRESETS: dict[str, tuple[tuple[str, ...], tuple[str, ...], int]] = {
    "dev": (
        ("node_modules", ".git", "build", "dist", "target", "__pycache__",
         ".vscode", ".idea", "vendor"),
        ("*.tmp", "*.log", "*.swp", "*.swo", "*~", ".DS_Store", "Thumbs.db",
         "*.pyc", "*.pyo"),
        100,
    ),
    "media": ((".git", "__pycache__", "node_modules"), (), 10240),
    "docs": (
        (".git", "__pycache__", "node_modules", "build", "dist"),
        ("*.tmp", "*.log", "*.swp", "*~"),
        1024,
    ),
    "clean": (
        (".git", "__pycache__", "node_modules", ".cache", "tmp", "temp"),
        ("*.tmp", "*.log", "*.cache", "*.swp", "*~", ".DS_Store", "Thumbs.db"),
        0,
    ),
}

PRESET_NAMES = tuple(_PRESETS)


def get_preset_config(preset: str) -> FilterConfig:
    """A fresh :class:`FilterConfig` for a named preset; empty if unknown."""
    if preset not in _PRESETS:
        return FilterConfig()
    dirs, files, min_size = _PRESETS[preset]
    return FilterConfig(
        exclude_dirs=list(dirs), exclude_files=list(files), min_size=min_size
    )