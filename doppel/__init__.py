"""Find duplicate files across directories by size and BLAKE3 hash."""

__version__ = "0.1.0"