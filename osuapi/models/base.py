from typing import Annotated, Any, Type

from pydantic import BaseModel, ConfigDict, PlainValidator
from pydantic_core import PydanticCustomError

from osuapi.models.mods import Mods, parse_mods


class OsuModel(BaseModel):
    """Immutable record decoded from an osu! api response."""
    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="ignore", allow_inf_nan=False)


def _enum_code_validator(enum_cls: Type):
    def validate(value: Any):
        if isinstance(value, enum_cls):
            return value
        if isinstance(value, int) and not isinstance(value, bool):
            value = str(value)
        if isinstance(value, str):
            try:
                return enum_cls(value.strip())
            except ValueError:
                pass
        raise PydanticCustomError(
            "invalid_enum_code",
            "'{value}' is not a valid {enum} code",
            {"enum": enum_cls.__name__, "value": value},
        )

    return PlainValidator(validate)


def EnumCode(enum_cls: Type):
    """Annotated type for fields carrying one of ``enum_cls``'s numeric-string codes."""
    return Annotated[enum_cls, _enum_code_validator(enum_cls)]


def _parse_flag(value: Any) -> bool:
    if isinstance(value, bool):
        return value
    if isinstance(value, (int, str)) and str(value).strip() in ("0", "1"):
        return str(value).strip() == "1"
    raise ValueError(f"expected 0 or 1, got {value!r}")


def _parse_int(value: Any) -> int:
    if isinstance(value, int) and not isinstance(value, bool):
        return value
    if isinstance(value, str):
        digits = value.strip()
        if digits[:1] in ("-", "+"):
            digits = digits[1:]
        if digits.isdecimal():
            return int(value)
    raise ValueError(f"expected an integer, got {value!r}")


Count = Annotated[int, PlainValidator(_parse_int)]
Flag = Annotated[bool, PlainValidator(_parse_flag)]
ModsField = Annotated[Mods, PlainValidator(parse_mods)]
