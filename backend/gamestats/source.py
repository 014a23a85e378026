"""Week files on disk, laid out as <root>/<year>/<week>.json.

Keys are POSIX relative paths ("2024/1.json") so they stay stable no matter
where the data directory is mounted.
"""

from __future__ import annotations

import os
from pathlib import Path, PurePosixPath


class DirectorySource:
    def __init__(self, root: str | os.PathLike, suffix: str = ".json"):
        self.root = Path(root)
        self.suffix = suffix

    def key(self, year, week) -> str:
        return f"{year}/{week}{self.suffix}"

    def list_partitions(self, parent: str | None = None) -> list[str]:
        """
        parent=None -> year directory names under the root.
        parent=<year> -> week keys in that year, sorted by file name.
        Raises OSError when the directory can't be listed.
        """
        if parent is None:
            with os.scandir(self.root) as it:
                return sorted(e.name for e in it if e.is_dir())

        path = self._path(parent)
        if path is None:
            raise FileNotFoundError(parent)
        with os.scandir(path) as it:
            names = sorted(
                e.name for e in it
                if not e.is_dir() and e.name.endswith(self.suffix)
            )
        return [f"{parent}/{name}" for name in names]

    def exists(self, key: str) -> bool:
        path = self._path(key)
        return path is not None and path.is_file()

    def read(self, key: str) -> bytes:
        path = self._path(key)
        if path is None:
            raise FileNotFoundError(key)
        return path.read_bytes()

    def _path(self, key: str) -> Path | None:
        # anything absolute or climbing out of the root is treated as missing
        rel = PurePosixPath(key)
        if rel.is_absolute() or ".." in rel.parts:
            return None
        return self.root.joinpath(*rel.parts)
