"""SHA3-256 digests of files."""

from __future__ import annotations

import hashlib
import os

_CHUNK_SIZE = 4096


def sha3_256_of_file(path: str | os.PathLike[str]) -> str:
    """Return the lowercase hex SHA3-256 digest of the file at ``path``."""
    hasher = hashlib.sha3_256()
    with open(path, "rb") as stream:
        for chunk in iter(lambda: stream.read(_CHUNK_SIZE), b""):
            hasher.update(chunk)
    return hasher.hexdigest()