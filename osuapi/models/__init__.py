from osuapi.models.beatmap import Beatmap
from osuapi.models.enums import Approval, Genre, Language, PlayMode, ScoringType, TeamType
from osuapi.models.match import Game, Match, MatchScore
from osuapi.models.mods import Mods
from osuapi.models.score import GameScore, Performance, RecentPlay
from osuapi.models.user import User, UserEvent

__all__ = [
    "Approval",
    "Beatmap",
    "Game",
    "GameScore",
    "Genre",
    "Language",
    "Match",
    "MatchScore",
    "Mods",
    "Performance",
    "PlayMode",
    "RecentPlay",
    "ScoringType",
    "TeamType",
    "User",
    "UserEvent",
]
