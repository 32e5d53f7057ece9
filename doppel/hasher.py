"""Content hashing of whole files."""

from __future__ import annotations

import os
from dataclasses import dataclass

from .b3 import Blake3


@dataclass(frozen=True)
class FileInfo:
    """A file together with its size and content hash."""

    path: str
    size: int
    hash: bytes


def hash_file(file_path: str | os.PathLike[str]) -> bytes:
    """Return the 32-byte BLAKE3 digest of the file; raises OSError on failure."""
    hasher = Blake3()
    with open(file_path, "rb") as handle:
        for chunk in iter(lambda: handle.read(64 * 1024), b""):
            hasher.update(chunk)
    return hasher.digest()