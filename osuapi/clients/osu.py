from typing import List, Optional

from osuapi.builders import (BeatmapsRequest, ScoresRequest, UserBestRequest, UserLookup, UserRecentRequest,
                             UserRequest)
from osuapi.clients.base import BaseOsuApi, Customize, PreparedRequest
from osuapi.config import API_URL
from osuapi.models import Beatmap, GameScore, Match, Performance, RecentPlay, User
from osuapi.transports import AiohttpTransport, AsyncTransport, RequestsTransport, Transport


class OsuApi(BaseOsuApi):
    """Blocking wrapper for osu! api v1. Every call blocks until the response is decoded."""

    def __init__(self, transport: Optional[Transport] = None, api_url: str = API_URL):
        super().__init__(api_url)
        self._transport = transport if transport is not None else RequestsTransport()

    def _get_endpoint(self, request: PreparedRequest):
        body = self._transport.fetch(request.uri)
        return request.decode(body)

    def get_beatmaps(self, key: str, customize: Customize[BeatmapsRequest] = None) -> List[Beatmap]:
        """
        Gets beatmaps, filtered by the options set on the builder.
        :param key: osu! api key.
        :param customize: Receives a BeatmapsRequest to set optional parameters on.
        :return: Returns a list of Beatmap objects, empty if nothing matched.
        """
        return self._get_endpoint(self._prepare_beatmaps(key, customize))

    def get_match(self, key: str, match_id: int) -> Optional[Match]:
        """
        Gets a multiplayer match together with its games.
        :return: Returns a Match, or None if the match doesn't exist.
        """
        return self._get_endpoint(self._prepare_match(key, match_id))

    def get_scores(self, key: str, beatmap_id: int, customize: Customize[ScoresRequest] = None) -> List[GameScore]:
        """Gets the top scores of a beatmap."""
        return self._get_endpoint(self._prepare_scores(key, beatmap_id, customize))

    def get_user(self, key: str, user: UserLookup, customize: Customize[UserRequest] = None) -> Optional[User]:
        """
        Gets a user's profile.
        :param user: ID (int) or username (str) of the user.
        :return: Returns a User, or None if the user is not found.
        """
        return self._get_endpoint(self._prepare_user(key, user, customize))

    def get_user_best(self, key: str, user: UserLookup,
                      customize: Customize[UserBestRequest] = None) -> List[Performance]:
        return self._get_endpoint(self._prepare_user_best(key, user, customize))

    def get_user_recent(self, key: str, user: UserLookup,
                        customize: Customize[UserRecentRequest] = None) -> List[RecentPlay]:
        return self._get_endpoint(self._prepare_user_recent(key, user, customize))

    def close(self):
        self._transport.close()

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()


class AsyncOsuApi(BaseOsuApi):
    """Async wrapper for osu! api v1. Safe to share between concurrent tasks."""

    def __init__(self, transport: Optional[AsyncTransport] = None, api_url: str = API_URL):
        super().__init__(api_url)
        self._transport = transport if transport is not None else AiohttpTransport()

    async def _get_endpoint(self, request: PreparedRequest):
        body = await self._transport.fetch(request.uri)
        return request.decode(body)

    async def get_beatmaps(self, key: str, customize: Customize[BeatmapsRequest] = None) -> List[Beatmap]:
        """
        Gets beatmaps, filtered by the options set on the builder.
        :param key: osu! api key.
        :param customize: Receives a BeatmapsRequest to set optional parameters on.
        :return: Returns a list of Beatmap objects, empty if nothing matched.
        """
        return await self._get_endpoint(self._prepare_beatmaps(key, customize))

    async def get_match(self, key: str, match_id: int) -> Optional[Match]:
        return await self._get_endpoint(self._prepare_match(key, match_id))

    async def get_scores(self, key: str, beatmap_id: int,
                         customize: Customize[ScoresRequest] = None) -> List[GameScore]:
        return await self._get_endpoint(self._prepare_scores(key, beatmap_id, customize))

    async def get_user(self, key: str, user: UserLookup,
                       customize: Customize[UserRequest] = None) -> Optional[User]:
        """
        Gets a user's profile.
        :param user: ID (int) or username (str) of the user.
        :return: Returns a User, or None if the user is not found.
        """
        return await self._get_endpoint(self._prepare_user(key, user, customize))

    async def get_user_best(self, key: str, user: UserLookup,
                            customize: Customize[UserBestRequest] = None) -> List[Performance]:
        return await self._get_endpoint(self._prepare_user_best(key, user, customize))

    async def get_user_recent(self, key: str, user: UserLookup,
                              customize: Customize[UserRecentRequest] = None) -> List[RecentPlay]:
        return await self._get_endpoint(self._prepare_user_recent(key, user, customize))

    async def close(self):
        await self._transport.close()

    async def __aenter__(self):
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        await self.close()
