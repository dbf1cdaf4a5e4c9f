from typing import List, Optional

from pydantic import Field

from osuapi.models.base import Count, OsuModel


class UserEvent(OsuModel):
    display_html: str
    beatmap_id: Optional[Count] = None
    beatmapset_id: Optional[Count] = None
    date: str
    epic_factor: Count = Field(alias="epicfactor")


class User(OsuModel):
    """
    A player profile from ``get_user``.

    Statistics are null for players that never played the requested mode,
    so they are optional here.
    """
    id: Count = Field(alias="user_id")
    username: str
    join_date: Optional[str] = None
    count_300: Optional[Count] = Field(None, alias="count300")
    count_100: Optional[Count] = Field(None, alias="count100")
    count_50: Optional[Count] = Field(None, alias="count50")
    play_count: Optional[Count] = Field(None, alias="playcount")
    ranked_score: Optional[Count] = None
    total_score: Optional[Count] = None
    pp_rank: Optional[Count] = None
    level: Optional[float] = None
    pp_raw: Optional[float] = None
    accuracy: Optional[float] = None
    count_rank_ss: Optional[Count] = None
    count_rank_ssh: Optional[Count] = None
    count_rank_s: Optional[Count] = None
    count_rank_sh: Optional[Count] = None
    count_rank_a: Optional[Count] = None
    country: str
    total_seconds_played: Optional[Count] = None
    pp_country_rank: Optional[Count] = None
    events: List[UserEvent] = []
