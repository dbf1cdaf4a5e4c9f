"""
Turns raw response bodies into typed records.

Every pydantic validation failure is translated into the client's error types,
so a caller never sees a partially decoded result.
"""
import json
import logging
from typing import Any, List, Optional, Type, TypeVar, Union

from pydantic import ValidationError

from osuapi.errors import DecodeError, InvalidEnumCodeError
from osuapi.models import Match, User
from osuapi.models.base import OsuModel

logger = logging.getLogger("osuapi")

Model = TypeVar("Model", bound=OsuModel)


def parse_json(body: Union[bytes, str]) -> Any:
    try:
        return json.loads(body)
    except (ValueError, UnicodeDecodeError) as e:
        raise DecodeError(f"Response body is not valid JSON: {e}") from e


def _field_name(loc) -> Optional[str]:
    return ".".join(str(part) for part in loc) or None


def _translate(error: ValidationError, model: Type[OsuModel]):
    first = error.errors()[0]
    field = _field_name(first["loc"])
    value = None if first["type"] == "missing" else first.get("input")
    if first["type"] == "invalid_enum_code":
        return InvalidEnumCodeError(field, value)
    return DecodeError(f"Failed to decode {model.__name__}, {field}: {first['msg']}", field=field, value=value)


def decode_model(data: Any, model: Type[Model]) -> Model:
    if not isinstance(data, dict):
        raise DecodeError(f"Expected a JSON object for {model.__name__}, got {type(data).__name__}", value=data)
    try:
        return model.model_validate(data)
    except ValidationError as e:
        raise _translate(e, model) from e


def decode_one(body: Union[bytes, str], model: Type[Model]) -> Model:
    return decode_model(parse_json(body), model)


def decode_list(body: Union[bytes, str], model: Type[Model]) -> List[Model]:
    """Decodes a JSON array, failing on the first element that doesn't decode."""
    data = parse_json(body)
    if not isinstance(data, list):
        raise DecodeError(f"Expected a JSON array of {model.__name__}, got {type(data).__name__}", value=data)

    records = []
    for index, item in enumerate(data):
        try:
            records.append(decode_model(item, model))
        except (DecodeError, InvalidEnumCodeError) as e:
            logger.debug(f"Element {index} of {model.__name__} list failed to decode: {e}")
            raise
    return records


def decode_match(body: Union[bytes, str]) -> Optional[Match]:
    """
    ``get_match`` answers ``{"match": {...}, "games": [...]}``.
    When the match doesn't exist the api sends ``{"match": 0, "games": []}``, which decodes to None.
    """
    data = parse_json(body)
    if not isinstance(data, dict) or "match" not in data:
        raise DecodeError("Expected a JSON object with a 'match' key", field="match", value=data)

    match_info = data["match"]
    if not match_info:
        return None
    if not isinstance(match_info, dict):
        raise DecodeError("'match' is not a JSON object", field="match", value=match_info)

    return decode_model({**match_info, "games": data.get("games") or []}, Match)


def decode_user(body: Union[bytes, str]) -> Optional[User]:
    """``get_user`` answers an array holding at most one user; a bare object is accepted too."""
    data = parse_json(body)
    if isinstance(data, list):
        if not data:
            return None
        return decode_model(data[0], User)
    return decode_model(data, User)
