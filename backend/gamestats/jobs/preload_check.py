import logging
import sys

from gamestats import settings
from gamestats.preload import preload
from gamestats.repo import GameRepo
from gamestats.source import DirectorySource
from gamestats.store import RecordStore


def main(argv=None):
    argv = sys.argv[1:] if argv is None else argv
    logging.basicConfig(level=settings.LOG_LEVEL, format="[preload] %(levelname)s %(message)s")

    data_dir = argv[0] if argv else settings.DATA_DIR
    repo = GameRepo(RecordStore(), DirectorySource(data_dir))

    count = preload(repo)
    store = repo.store
    games = sum(len(store.get(k) or ()) for k in store.keys())
    print(f"[preload] {count} week files, {games} games from {data_dir}")

    if count == 0:
        sys.exit(1)


if __name__ == "__main__":
    main()
