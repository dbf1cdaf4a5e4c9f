from typing import List, Optional

from pydantic import Field

from osuapi.models.base import Count, EnumCode, OsuModel
from osuapi.models.enums import Approval, Genre, Language, PlayMode


class Beatmap(OsuModel):
    """A single difficulty as returned by ``get_beatmaps``."""
    approved: EnumCode(Approval)
    approved_date: Optional[str] = None
    artist: str
    beatmap_id: Count
    beatmapset_id: Count
    bpm: float
    creator: str
    difficulty_rating: float = Field(alias="difficultyrating")
    diff_approach: float
    diff_drain: float
    diff_overall: float
    diff_size: float
    favourite_count: Count
    file_md5: str
    genre_id: EnumCode(Genre)
    hit_length: Count
    language_id: EnumCode(Language)
    last_update: str
    max_combo: Optional[Count] = None
    mode: EnumCode(PlayMode)
    pass_count: Count = Field(alias="passcount")
    play_count: Count = Field(alias="playcount")
    source: str
    tags: str
    title: str
    total_length: Count
    version: str

    @property
    def tag_list(self) -> List[str]:
        return self.tags.split()
