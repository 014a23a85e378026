from .models import GameRecord, RankedGame


def offensive_rating(g: GameRecord) -> float:
    o = g.offense
    # No plays means no meaningful sample (and nothing to divide by)
    if o.total_plays == 0:
        return 0.0

    rating = 0.0

    # NOTE: rates are fractions of total plays, so the > 3 and > 10 bonuses
    # almost never trigger on real data.
    explosive_rate = o.offensive_explosive_plays / o.total_plays
    big_play_rate = o.offensive_big_plays / o.total_plays
    if explosive_rate > 3:
        rating += 1
    if big_play_rate > 10:
        rating += 1

    if o.total_points > 75:
        rating += 3
    elif o.total_points > 60:
        rating += 2
    elif o.total_points > 50:
        rating += 1

    if o.total_yards > 1000:
        rating += 2
    elif o.total_yards > 800:
        rating += 1

    if o.total_yards_per_attempt >= 6:
        rating += 3
    elif o.total_yards_per_attempt >= 5:
        rating += 1

    rating += _qbr_bonus(o.home_qbr)
    rating += _qbr_bonus(o.away_qbr)

    return rating


def _qbr_bonus(qbr: float) -> float:
    if qbr > 120:
        return 1.0
    if qbr > 100:
        return 0.5
    return 0.0


def defensive_big_plays(g: GameRecord) -> float:
    d = g.defense
    return (
        d.defensive_tds * 3
        + d.fumble_recs
        + d.special_teams_td * 3
        + d.interceptions
        + d.blocked_kicks
        + d.safeties
        + d.goal_line_stands
    )


def total_rating(g: GameRecord) -> float:
    # scenarioRating is precomputed upstream and used as-is
    return offensive_rating(g) + defensive_big_plays(g) + g.scenario.scenario_rating


def rank_game(g: GameRecord) -> RankedGame:
    off = offensive_rating(g)
    defense = defensive_big_plays(g)
    scenario = g.scenario.scenario_rating
    return RankedGame(
        id=g.id,
        full_name=g.full_name,
        short_name=g.short_name,
        matchup_quality=g.matchup_quality,
        offensive_rating=off,
        defensive_big_plays=defense,
        scenario_rating=scenario,
        total_rating=off + defense + scenario,
    )
