"""In-memory store of parsed week files.

One RecordStore lives for the life of the app (see main.create_app). Entries
are never replaced or evicted: once a key is stored its tuple of games is
what every later request sees, even if the file on disk changes or goes away.

Locking is "optimistic read, pessimistic write": hits take the shared side of
a reader-writer lock, and a miss is filled by the caller outside any lock
before put() takes the exclusive side. Two threads missing the same key at
once will both read and parse the file; the first put() wins and the second
gets the stored value back.
"""

from __future__ import annotations

from contextlib import contextmanager
from threading import Condition, Lock
from typing import Iterator

from .models import GameRecord

Games = tuple[GameRecord, ...]


class ReadWriteLock:
    """Many readers or one writer. Writers are not prioritised."""

    def __init__(self):
        self._cond = Condition(Lock())
        self._readers = 0
        self._writing = False

    @contextmanager
    def read(self) -> Iterator[None]:
        with self._cond:
            while self._writing:
                self._cond.wait()
            self._readers += 1
        try:
            yield
        finally:
            with self._cond:
                self._readers -= 1
                if self._readers == 0:
                    self._cond.notify_all()

    @contextmanager
    def write(self) -> Iterator[None]:
        with self._cond:
            while self._writing or self._readers:
                self._cond.wait()
            self._writing = True
        try:
            yield
        finally:
            with self._cond:
                self._writing = False
                self._cond.notify_all()


class RecordStore:
    def __init__(self):
        self._lock = ReadWriteLock()
        self._entries: dict[str, Games] = {}

    def get(self, key: str) -> Games | None:
        with self._lock.read():
            return self._entries.get(key)

    def put(self, key: str, games) -> Games:
        """Store games under key unless already present; return the stored value."""
        games = tuple(games)
        with self._lock.write():
            return self._entries.setdefault(key, games)

    def clear(self) -> None:
        with self._lock.write():
            self._entries.clear()

    def keys(self) -> list[str]:
        with self._lock.read():
            return list(self._entries)

    def __len__(self) -> int:
        with self._lock.read():
            return len(self._entries)

    def __contains__(self, key: str) -> bool:
        with self._lock.read():
            return key in self._entries
