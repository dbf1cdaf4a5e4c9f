from typing import Optional

from pydantic import Field

from osuapi.models.base import Count, Flag, ModsField, OsuModel


class HitCounts(OsuModel):
    count_300: Count = Field(alias="count300")
    count_100: Count = Field(alias="count100")
    count_50: Count = Field(alias="count50")
    count_geki: Count = Field(alias="countgeki")
    count_katu: Count = Field(alias="countkatu")
    count_miss: Count = Field(alias="countmiss")

    @property
    def total_hits(self) -> int:
        return self.count_300 + self.count_100 + self.count_50 + self.count_miss


class GameScore(HitCounts):
    """A top score on a beatmap, from ``get_scores``."""
    score_id: Optional[Count] = None
    score: Count
    username: str
    max_combo: Count = Field(alias="maxcombo")
    perfect: Flag
    enabled_mods: ModsField
    user_id: Count
    date: str
    rank: str
    # null on beatmaps that don't award pp
    pp: Optional[float] = None
    replay_available: Optional[Flag] = None


class Performance(HitCounts):
    """One of a user's best plays, from ``get_user_best``."""
    beatmap_id: Count
    score_id: Optional[Count] = None
    score: Count
    max_combo: Count = Field(alias="maxcombo")
    perfect: Flag
    enabled_mods: ModsField
    user_id: Count
    date: str
    rank: str
    pp: float
    replay_available: Optional[Flag] = None


class RecentPlay(HitCounts):
    """A play from the last 24 hours, from ``get_user_recent``."""
    beatmap_id: Count
    score: Count
    max_combo: Count = Field(alias="maxcombo")
    perfect: Flag
    enabled_mods: ModsField
    user_id: Count
    date: str
    rank: str
