import logging

from osuapi.builders import (BeatmapsRequest, ScoresRequest, UserBestRequest, UserLookup, UserRecentRequest,
                             UserRequest)
from osuapi.clients import AsyncOsuApi, OsuApi
from osuapi.config import API_URL
from osuapi.errors import DecodeError, InvalidEnumCodeError, InvalidUriError, OsuApiError, TransportError
from osuapi.models import (Approval, Beatmap, Game, GameScore, Genre, Language, Match, MatchScore, Mods,
                           Performance, PlayMode, RecentPlay, ScoringType, TeamType, User, UserEvent)
from osuapi.transports import AiohttpTransport, AsyncTransport, RequestsTransport, Transport
from osuapi.utils.logger import setup_logger

logging.getLogger("osuapi").addHandler(logging.NullHandler())

__version__ = "0.1.0"
