"""
Optional query parameters for each endpoint.

A builder starts empty and every setter writes (or overwrites) its query key
and returns the builder, so calls can be chained::

    api.get_beatmaps(key, lambda r: r.beatmap_set_id(1621894).mode(PlayMode.MANIA).limit(10))
"""
from typing import Dict, Union

from osuapi.models.enums import PlayMode
from osuapi.models.mods import Mods

# A user can be looked up either by id or by username
UserLookup = Union[int, str]


def user_params(user: UserLookup) -> Dict[str, str]:
    """Returns the ``u`` parameter together with the ``type`` that tells the api how to read it."""
    if isinstance(user, bool):
        raise TypeError("user must be an id or a username, not a bool")
    if isinstance(user, int):
        return {"u": str(user), "type": "id"}
    if isinstance(user, str):
        return {"u": user, "type": "string"}
    raise TypeError(f"user must be an id or a username, got {type(user).__name__}")


class RequestBuilder:

    def __init__(self):
        self.params: Dict[str, str] = {}

    def _set(self, key: str, value) -> "RequestBuilder":
        self.params[key] = str(value)
        return self

    def build(self) -> Dict[str, str]:
        """The final parameter set, keyed in lexicographic order."""
        return dict(sorted(self.params.items()))

    def __eq__(self, other):
        return type(self) is type(other) and self.params == other.params

    def __repr__(self):
        return f"{self.__class__.__name__}({self.build()!r})"


class _UserFilter(RequestBuilder):

    def user(self, user: UserLookup):
        """
        Filters by user. An int is sent as a user id, a str as a username.

        Names are sent without percent-encoding, so a name containing a space is rejected
        with InvalidUriError when the request is sent. Pass it with underscores in place of
        spaces (the api treats them the same) or look the user up by id.
        """
        self.params.update(user_params(user))
        return self


class _ModeFilter(RequestBuilder):

    def mode(self, mode: PlayMode):
        return self._set("m", PlayMode(mode).value)


class _LimitFilter(RequestBuilder):

    def limit(self, limit: int):
        """Amount of results to return. The api defaults to and caps at 500 for most endpoints."""
        return self._set("limit", int(limit))


class BeatmapsRequest(_UserFilter, _ModeFilter, _LimitFilter):

    def beatmap_id(self, beatmap_id: int):
        return self._set("b", int(beatmap_id))

    def beatmap_set_id(self, beatmap_set_id: int):
        return self._set("s", int(beatmap_set_id))

    def hash(self, beatmap_hash: str):
        return self._set("h", beatmap_hash)

    def include_converted(self, include_converted: bool):
        """Only has an effect together with a mode other than standard."""
        return self._set("a", 1 if include_converted else 0)

    def since(self, since: str):
        """Beatmaps ranked or loved since the given MySQL date, e.g. ``2021-01-01``."""
        return self._set("since", since)


class ScoresRequest(_UserFilter, _ModeFilter, _LimitFilter):

    def mods(self, mods: Mods):
        return self._set("mods", int(mods))


class UserRequest(_UserFilter, _ModeFilter):

    def event_days(self, event_days: int):
        """Max number of days between now and the last event, from 1 to 31."""
        return self._set("event_days", int(event_days))


class UserBestRequest(_UserFilter, _ModeFilter, _LimitFilter):
    pass


class UserRecentRequest(_UserFilter, _ModeFilter, _LimitFilter):
    pass
