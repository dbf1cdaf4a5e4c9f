import os
from typing import Final, Optional

API_URL: Final[str] = "https://osu.ppy.sh/api"

DEFAULT_LOG_LEVEL: Final[str] = os.getenv("LOG_LEVEL", "INFO").upper()


def api_key_from_env() -> Optional[str]:
    """Returns the osu! api key stored in ``OSU_API_KEY``, or None if it isn't set."""
    return os.getenv("OSU_API_KEY") or None
