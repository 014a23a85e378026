from __future__ import annotations

import logging

from .errors import GameDataError, PartitionNotFound
from .models import GameRecord, RankedGame
from .ratings import rank_game
from .repo import GameRepo

logger = logging.getLogger(__name__)


def week_rankings(repo: GameRepo, year, week) -> list[RankedGame]:
    """
    Rate every game of one week, best offense first.
    Ties keep file order. Load errors propagate to the caller.
    """
    ranked = [rank_game(g) for g in repo.load_week(year, week)]
    ranked.sort(key=lambda r: r.offensive_rating, reverse=True)
    return ranked


def season_games(repo: GameRepo, year, max_weeks: int = 18) -> list[GameRecord]:
    """
    Raw games for weeks 1..max_weeks, in week order.
    Weeks are assumed contiguous: the first missing week ends the scan.
    A week that exists but can't be read or parsed is skipped.
    """
    out: list[GameRecord] = []
    for week in range(1, max_weeks + 1):
        try:
            games = repo.load_week(year, week)
        except PartitionNotFound:
            break
        except GameDataError as e:
            logger.warning("Skipping %s week %s: %s", year, week, e)
            continue
        out.extend(games)
    return out
