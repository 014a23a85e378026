from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator
from pydantic.alias_generators import to_camel


class _Stats(BaseModel):
    # JSON uses camelCase; absent or null fields fall back to the defaults.
    # Strict: "100" or true is not a number.
    model_config = ConfigDict(
        frozen=True,
        strict=True,
        extra="ignore",
        alias_generator=to_camel,
        populate_by_name=True,
    )

    @model_validator(mode="before")
    @classmethod
    def _drop_nulls(cls, data):
        if isinstance(data, dict):
            return {k: v for k, v in data.items() if v is not None}
        return data


class Efficiency(_Stats):
    home_team_efficiency: float = 0.0
    away_team_efficiency: float = 0.0
    home_team_offensive_efficiency: float = 0.0
    home_team_defensive_efficiency: float = 0.0
    away_team_offensive_efficiency: float = 0.0
    away_team_defensive_efficiency: float = 0.0
    home_team_performance: float = 0.0
    away_team_performance: float = 0.0


class ScenarioData(_Stats):
    max_win_probability: float = 0.0
    min_win_probability: float = 0.0
    inversion_of_lead: float = 0.0
    share_of_lead: float = 0.0
    max_4th: float = Field(default=0.0, alias="max_4th")
    min_4th: float = Field(default=0.0, alias="min_4th")
    inv_4th: float = Field(default=0.0, alias="inv_4th")
    share_4th: float = Field(default=0.0, alias="share_4th")


class Scenario(_Stats):
    margin_of_victory: float = 0.0
    fourth_quarter_leadership_change: float = 0.0
    leadership_change: float = 0.0
    scenario_rating: float = 0.0
    scenario_data: ScenarioData = Field(default_factory=ScenarioData)


class Offense(_Stats):
    offensive_big_plays: float = 0.0
    offensive_explosive_plays: float = 0.0
    explosive_rate: float = 0.0
    total_plays: float = 0.0
    total_points: float = 0.0
    total_yards: float = 0.0
    total_yards_per_attempt: float = 0.0
    total_pass_yards: float = 0.0
    total_pass_yards_per_attempt: float = 0.0
    total_rush_yards: float = 0.0
    total_rush_yards_per_attempt: float = 0.0
    home_qbr: float = Field(default=0.0, alias="homeQBR")
    away_qbr: float = Field(default=0.0, alias="awayQBR")


class Defense(_Stats):
    punts: float = 0.0
    sacks: float = 0.0
    interceptions: float = 0.0
    defensive_tds: float = 0.0
    fumble_recs: float = 0.0
    blocked_kicks: float = 0.0
    safeties: float = 0.0
    special_teams_td: float = 0.0
    goal_line_stands: float = 0.0


class GameRecord(_Stats):
    """One completed game as stored in a week file."""

    id: str = ""
    week: int | None = None  # only some files carry it
    full_name: str = ""
    short_name: str = ""
    matchup_quality: str = ""
    efficiency: Efficiency = Field(default_factory=Efficiency)
    scenario: Scenario = Field(default_factory=Scenario)
    offense: Offense = Field(default_factory=Offense)
    defense: Defense = Field(default_factory=Defense)

    @field_validator("week")
    @classmethod
    def _zero_week_is_absent(cls, v):
        return v or None


class RankedGame(_Stats):
    """Per-game ratings returned by the week view. Built per request."""

    id: str
    full_name: str
    short_name: str
    matchup_quality: str
    offensive_rating: float
    defensive_big_plays: float
    scenario_rating: float
    total_rating: float
