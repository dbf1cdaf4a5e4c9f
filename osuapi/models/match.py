from typing import List, Optional

from pydantic import Field

from osuapi.models.base import Count, EnumCode, Flag, ModsField, OsuModel
from osuapi.models.enums import PlayMode, ScoringType, TeamType
from osuapi.models.score import HitCounts


class MatchScore(HitCounts):
    """A single player's result in one game of a multiplayer match."""
    slot: Count
    team: Count
    user_id: Count
    score: Count
    max_combo: Count = Field(alias="maxcombo")
    # not used by the api, always 0
    rank: Count
    perfect: Flag
    pass_: Flag = Field(alias="pass")


class Game(OsuModel):
    game_id: Count
    start_time: str
    end_time: Optional[str] = None
    beatmap_id: Count
    play_mode: EnumCode(PlayMode)
    match_type: Count
    scoring_type: EnumCode(ScoringType)
    team_type: EnumCode(TeamType)
    mods: ModsField
    scores: List[MatchScore] = []


class Match(OsuModel):
    """A multiplayer match together with the games played in it."""
    match_id: Count
    name: str
    start_time: str
    end_time: Optional[str] = None
    games: List[Game] = []
