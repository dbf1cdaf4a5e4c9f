from osuapi.clients.base import BaseOsuApi
from osuapi.clients.osu import AsyncOsuApi, OsuApi

__all__ = ["AsyncOsuApi", "BaseOsuApi", "OsuApi"]
