from __future__ import annotations

import logging

from pydantic import TypeAdapter, ValidationError

from .errors import PartitionNotFound, PartitionParseError, PartitionReadError
from .models import GameRecord
from .source import DirectorySource
from .store import Games, RecordStore

logger = logging.getLogger(__name__)

_week_file = TypeAdapter(list[GameRecord])


def parse_games(key: str, raw: bytes) -> Games:
    """Parse a week file (a JSON array of games) keeping file order."""
    try:
        return tuple(_week_file.validate_json(raw))
    except ValidationError as e:
        raise PartitionParseError(key, f"{key}: {e.error_count()} validation error(s)") from e


class GameRepo:
    """Read-through access to week files, backed by a RecordStore."""

    def __init__(self, store: RecordStore, source: DirectorySource):
        self.store = store
        self.source = source

    def load(self, key: str) -> Games:
        cached = self.store.get(key)
        if cached is not None:
            return cached

        # Miss: file I/O and parsing run without holding the store lock.
        if not self.source.exists(key):
            raise PartitionNotFound(key)
        try:
            raw = self.source.read(key)
        except FileNotFoundError as e:
            # removed between exists() and read()
            raise PartitionNotFound(key) from e
        except OSError as e:
            raise PartitionReadError(key, f"{key}: {e}") from e

        games = parse_games(key, raw)
        logger.debug("Loaded %s (%d games)", key, len(games))
        return self.store.put(key, games)

    def load_week(self, year, week) -> Games:
        return self.load(self.source.key(year, week))
