from __future__ import annotations

import logging

from .errors import GameDataError
from .repo import GameRepo

logger = logging.getLogger(__name__)


def preload(repo: GameRepo) -> int:
    """
    Load every <year>/<week>.json under the data root into the store.
    Best-effort: unreadable or malformed files are skipped. Returns the
    number of files now cached.
    """
    source = repo.source
    try:
        years = source.list_partitions()
    except OSError as e:
        logger.warning("Could not read data directory %s: %s", source.root, e)
        return 0

    count = 0
    for year in years:
        try:
            keys = source.list_partitions(year)
        except OSError:
            continue

        for key in keys:
            try:
                repo.load(key)
            except GameDataError as e:
                logger.debug("Skipping %s: %s", key, e)
                continue
            except Exception:
                logger.exception("Unexpected error preloading %s", key)
                continue
            count += 1

    logger.info("Preloaded %d data files into cache", count)
    return count
