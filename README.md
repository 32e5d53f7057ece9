# doppel

A duplicate file finder with filtering.

doppel walks one or more directories and sorts the regular files it finds into groups by size. Files whose size no other file shares are dropped. The rest are hashed with BLAKE3 by a pool of worker threads. Files with the same hash are reported as duplicates, together with the disk space taken up by the extra copies.

Symbolic links are not followed. Directories are walked depth first, with entries in name order. A path that cannot be read is counted as an error and the scan goes on.

The BLAKE3 implementation (`doppel.b3`) is written in pure Python and needs no other packages. It is correct, but slow on large files.

## Installation

```
pip install .
```

For running the tests:

```
pip install .[test]
pytest
```

## Usage

Scan the current directory. With no command, `find` is used:

```
doppel
```

Scan specific directories:

```
doppel find ~/Pictures ~/Backups
```

`f` is short for `find`. `doppel --version` prints the version.

### `find` options

| Option | Meaning |
| --- | --- |
| `-w`, `--workers N` | Number of hashing threads (default: CPU count) |
| `-v`, `--verbose` | Print detailed progress; skipped paths and errors go to standard error |
| `--exclude-dirs LIST` | Comma-separated glob patterns for directories to skip |
| `--exclude-files LIST` | Comma-separated glob patterns for files to skip |
| `--exclude-dir-regex LIST` | Comma-separated regular expressions for directories to skip |
| `--exclude-file-regex LIST` | Comma-separated regular expressions for files to skip |
| `--min-size BYTES` | Skip files smaller than this (0 = no limit) |
| `--max-size BYTES` | Skip files larger than this (0 = no limit) |
| `--show-filters` | Print the active filters and exit without scanning |
| `--stats` | Print detailed statistics at the end |

Each glob pattern and each regular expression is tested against the base name and against the full path. In a glob, `*` and `?` do not match a path separator. A regular expression may match anywhere in the name. Negative sizes count as 0. If `--min-size` is greater than `--max-size`, or a regular expression does not compile, doppel prints an error and exits with status 1.

Example:

```
doppel find --exclude-dirs "node_modules,.git" --exclude-files "*.log" --min-size 1024 .
```

### Presets

`preset` (short form `p`) applies a ready-made filter set:

- `dev`: skips `node_modules`, `.git`, `build`, `dist`, `target`, `__pycache__`, `.vscode`, `.idea` and `vendor`; skips temporary, log, swap, editor-backup and compiled Python files, `.DS_Store` and `Thumbs.db`; skips files under 100 bytes.
- `media`: skips `.git`, `__pycache__` and `node_modules`, and files under 10 KB.
- `docs`: skips `.git`, `__pycache__`, `node_modules`, `build` and `dist`; skips temporary, log, swap and backup files; skips files under 1 KB.
- `clean`: skips `.git`, `__pycache__`, `node_modules`, `.cache`, `tmp` and `temp`; skips temporary, log, cache, swap and backup files, `.DS_Store` and `Thumbs.db`.

`preset` takes `-w`/`--workers` (default 4), `-v`/`--verbose` and `--stats`. They may come before or after the preset name. Without a preset name, `preset` prints its help.

```
doppel preset dev ~/projects
doppel preset --stats media ~/Pictures
```

## Library use

```python
from doppel.config import build_filter_config
from doppel.stats import Stats
from doppel.scanner import group_files_by_size
from doppel.finder import find_duplicates_by_hash
from doppel.display import show_results

config = build_filter_config("", "*.tmp", "", "", 0, 0)
stats = Stats()
groups = group_files_by_size(["."], config, stats, False)
duplicates = find_duplicates_by_hash(groups, 4, stats, False)
show_results(duplicates, stats, True)
```

The modules:

- `doppel.config`: `FilterConfig`, `build_filter_config`, `parse_comma_separated`, `get_preset_config`, `display_filter_config`. `FilterConfigError` (a `ValueError`) is raised for bad options.
- `doppel.scanner`: `group_files_by_size` maps each size to a list of paths. `get_directories` falls back to `["."]`.
- `doppel.finder`: `find_duplicates_by_hash` maps each shared 32-byte digest to the paths that have it.
- `doppel.hasher`: `hash_file` returns a file's 32-byte BLAKE3 digest. `FileInfo` holds a path, its size and its hash.
- `doppel.b3`: `Blake3`, an incremental hasher with `update`, `digest` and `hexdigest`, and `blake3_digest` for a single call.
- `doppel.stats`: the `Stats` counters, and `format_bytes`, which gives readable sizes such as `1.5 KB`.
- `doppel.display`: `show_results` prints groups, a summary and, if asked, statistics.
- `doppel.cli`: `main`, `build_parser` and `find_duplicates`.

## What doppel does not do

doppel only reports duplicates. It never deletes, moves or links files, and it keeps no record between runs. Output is plain text only; there is no machine-readable format.