import logging
from typing import Any, Callable, NamedTuple, Optional, TypeVar

from osuapi import decoder
from osuapi.builders import (BeatmapsRequest, RequestBuilder, ScoresRequest, UserBestRequest, UserLookup,
                             UserRecentRequest, UserRequest)
from osuapi.config import API_URL
from osuapi.models import Beatmap, GameScore, Performance, RecentPlay
from osuapi.uri import build_uri

logger = logging.getLogger("osuapi")

Builder = TypeVar("Builder", bound=RequestBuilder)
Customize = Optional[Callable[[Builder], Optional[Builder]]]


class PreparedRequest(NamedTuple):
    endpoint: str
    uri: str
    decode: Callable[[bytes], Any]


def apply_customization(builder: Builder, customize: Customize) -> Builder:
    """Runs the caller's customization on a fresh builder. It may return the builder or edit it in place."""
    if customize is None:
        return builder
    result = customize(builder)
    return builder if result is None else result


class BaseOsuApi:
    """
    Builds the request for each osu! api v1 endpoint and knows how to decode its answer.
    Subclasses only decide how the request is sent.
    """

    def __init__(self, api_url: str = API_URL):
        self._api_url = api_url

    def _prepare(self, endpoint: str, key: str, decode, required=(), builder: Optional[RequestBuilder] = None):
        params = builder.build() if builder is not None else None
        uri = build_uri(endpoint, key, required=required, params=params, api_url=self._api_url)
        return PreparedRequest(endpoint, uri, decode)

    def _prepare_beatmaps(self, key: str, customize: Customize = None) -> PreparedRequest:
        logger.debug("Requesting beatmaps")
        builder = apply_customization(BeatmapsRequest(), customize)
        return self._prepare("get_beatmaps", key, lambda body: decoder.decode_list(body, Beatmap),
                             builder=builder)

    def _prepare_match(self, key: str, match_id: int) -> PreparedRequest:
        logger.debug(f"Requesting match information for id: {match_id}")
        return self._prepare("get_match", key, decoder.decode_match, required=[("mp", int(match_id))])

    def _prepare_scores(self, key: str, beatmap_id: int, customize: Customize = None) -> PreparedRequest:
        logger.debug(f"Requesting scores for beatmap id: {beatmap_id}")
        builder = apply_customization(ScoresRequest(), customize)
        return self._prepare("get_scores", key, lambda body: decoder.decode_list(body, GameScore),
                             required=[("b", int(beatmap_id))], builder=builder)

    def _prepare_user(self, key: str, user: UserLookup, customize: Customize = None) -> PreparedRequest:
        logger.debug(f"Requesting user information for user: {user}")
        builder = apply_customization(UserRequest(), customize).user(user)
        return self._prepare("get_user", key, decoder.decode_user, builder=builder)

    def _prepare_user_best(self, key: str, user: UserLookup, customize: Customize = None) -> PreparedRequest:
        logger.debug(f"Requesting best performances for user: {user}")
        builder = apply_customization(UserBestRequest(), customize).user(user)
        return self._prepare("get_user_best", key, lambda body: decoder.decode_list(body, Performance),
                             builder=builder)

    def _prepare_user_recent(self, key: str, user: UserLookup, customize: Customize = None) -> PreparedRequest:
        logger.debug(f"Requesting recent plays for user: {user}")
        builder = apply_customization(UserRecentRequest(), customize).user(user)
        return self._prepare("get_user_recent", key, lambda body: decoder.decode_list(body, RecentPlay),
                             builder=builder)
