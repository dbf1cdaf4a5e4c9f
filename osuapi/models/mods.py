import enum
from typing import Union


class Mods(enum.IntFlag):
    """Gameplay modifiers, as the ``enabled_mods``/``mods`` bit-set of the api."""
    NONE = 0
    NO_FAIL = 1
    EASY = 1 << 1
    TOUCH_DEVICE = 1 << 2  # used to be NoVideo
    HIDDEN = 1 << 3
    HARD_ROCK = 1 << 4
    SUDDEN_DEATH = 1 << 5
    DOUBLE_TIME = 1 << 6
    RELAX = 1 << 7
    HALF_TIME = 1 << 8
    NIGHTCORE = 1 << 9  # always sent together with DOUBLE_TIME
    FLASHLIGHT = 1 << 10
    AUTOPLAY = 1 << 11
    SPUN_OUT = 1 << 12
    AUTOPILOT = 1 << 13
    PERFECT = 1 << 14  # always sent together with SUDDEN_DEATH
    KEY4 = 1 << 15
    KEY5 = 1 << 16
    KEY6 = 1 << 17
    KEY7 = 1 << 18
    KEY8 = 1 << 19
    FADE_IN = 1 << 20
    RANDOM = 1 << 21
    CINEMA = 1 << 22
    KEY9 = 1 << 24
    KEY10 = 1 << 25
    KEY1 = 1 << 26
    KEY2 = 1 << 27
    KEY3 = 1 << 28

    KEY_MOD = KEY4 | KEY5 | KEY6 | KEY7 | KEY8
    FREE_MOD_ALLOWED = 2069691

    @classmethod
    def from_bits(cls, bits: int) -> "Mods":
        """Builds a Mods value from raw bits, dropping every bit that isn't a known modifier."""
        return cls(bits & KNOWN_BITS)

    @classmethod
    def from_acronyms(cls, text: str) -> "Mods":
        """
        Parses a mod string like ``HDDT`` or ``+hrhd``.
        Acronyms that aren't recognized are skipped.
        """
        text = text.strip("-+~| ").upper()
        mods = cls.NONE
        for i in range(0, len(text), 2):
            mod = _ACRONYM_TO_MOD.get(text[i:i + 2])
            if mod is not None:
                mods |= mod
        return mods

    @property
    def acronyms(self) -> str:
        """Display form of the set, e.g. ``HDNC``. Implied mods (DT under NC, SD under PF) are omitted."""
        implied = Mods.NONE
        if Mods.NIGHTCORE in self:
            implied |= Mods.DOUBLE_TIME
        if Mods.PERFECT in self:
            implied |= Mods.SUDDEN_DEATH

        return "".join(acronym for acronym, mod in _ACRONYM_TO_MOD.items()
                       if mod in self and mod not in implied)


KNOWN_BITS = 0
for _mod in Mods:
    KNOWN_BITS |= _mod.value

_ACRONYM_TO_MOD = {
    "NF": Mods.NO_FAIL,
    "EZ": Mods.EASY,
    "TD": Mods.TOUCH_DEVICE,
    "HD": Mods.HIDDEN,
    "HR": Mods.HARD_ROCK,
    "SD": Mods.SUDDEN_DEATH,
    "DT": Mods.DOUBLE_TIME,
    "RX": Mods.RELAX,
    "HT": Mods.HALF_TIME,
    "NC": Mods.NIGHTCORE,
    "FL": Mods.FLASHLIGHT,
    "AT": Mods.AUTOPLAY,
    "SO": Mods.SPUN_OUT,
    "AP": Mods.AUTOPILOT,
    "PF": Mods.PERFECT,
    "FI": Mods.FADE_IN,
    "RD": Mods.RANDOM,
    "CN": Mods.CINEMA,
    "1K": Mods.KEY1,
    "2K": Mods.KEY2,
    "3K": Mods.KEY3,
    "4K": Mods.KEY4,
    "5K": Mods.KEY5,
    "6K": Mods.KEY6,
    "7K": Mods.KEY7,
    "8K": Mods.KEY8,
    "9K": Mods.KEY9,
}


def parse_mods(value: Union[int, str]) -> Mods:
    """
    Decodes a mods value sent either as a json integer or as a numeric string.
    Unknown bits are dropped, any other type (float, bool, object) is rejected.
    """
    if isinstance(value, bool) or not isinstance(value, (int, str)):
        raise ValueError(f"mods must be an integer or a numeric string, got {type(value).__name__}")
    if isinstance(value, str):
        value = value.strip()
        if not value.isdigit():
            raise ValueError(f"mods string is not a non-negative integer: {value!r}")
        value = int(value)
    if value < 0:
        raise ValueError(f"mods can't be negative: {value}")
    return Mods.from_bits(value)
