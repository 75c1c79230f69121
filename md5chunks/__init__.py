"""Chunked MD5 hashing in pure Python, with a command-line file hasher."""

__version__ = "0.1.0"
__all__ = ["cli", "sequential", "utils"]