import os
from typing import List

from dotenv import load_dotenv

load_dotenv()

# Settings present in the environment but unusable (e.g. non-numeric)
INVALID_SETTINGS: List[str] = []


def _positive_int_env(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        value = int(raw)
    except ValueError:
        INVALID_SETTINGS.append(name)
        return default
    if value < 1:
        INVALID_SETTINGS.append(name)
        return default
    return value


# Spotify credentials (REQUIRED)
SPOTIFY_CLIENT_ID = os.getenv("SPOTIFY_CLIENT_ID")
SPOTIFY_CLIENT_SECRET = os.getenv("SPOTIFY_CLIENT_SECRET")
SPOTIFY_REFRESH_TOKEN = os.getenv("SPOTIFY_REFRESH_TOKEN")

# SoundStat credentials (REQUIRED)
SOUNDSTAT_API_KEY = os.getenv("SOUNDSTAT_API_KEY")

# Spotify API constants
SPOTIFY_TOKEN_URL = "https://accounts.spotify.com/api/token"
SPOTIFY_API_BASE = "https://api.spotify.com/v1"

# SoundStat API constants
SOUNDSTAT_API_BASE = "https://soundstat.info/api/v1"

# Listening history window
RECENTLY_PLAYED_LIMIT = 50
HISTORY_WINDOW_HOURS = 24

# Concurrency cap for SoundStat lookups; 1 keeps requests strictly sequential
SOUNDSTAT_MAX_WORKERS = _positive_int_env("SOUNDSTAT_MAX_WORKERS", 1)

# Output artifact, fully overwritten on each run
MOOD_OUTPUT_FILE = os.getenv("MOOD_OUTPUT_FILE", "current_mood.json")

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

# Values copied from .env.example without being filled in
PLACEHOLDER_MARKER = "YOUR_"

REQUIRED_CREDENTIALS = [
    "SPOTIFY_CLIENT_ID",
    "SPOTIFY_CLIENT_SECRET",
    "SPOTIFY_REFRESH_TOKEN",
    "SOUNDSTAT_API_KEY",
]


class ConfigError(Exception):
    """Raised when credentials are missing or settings cannot be parsed."""

    def __init__(self, missing: List[str], invalid: List[str] | None = None):
        self.missing = missing
        self.invalid = list(invalid or [])
        parts = []
        if missing:
            parts.append(f"missing credentials: {', '.join(missing)}")
        if self.invalid:
            parts.append(f"invalid settings: {', '.join(self.invalid)}")
        super().__init__("; ".join(parts))


def missing_credentials() -> List[str]:
    """
    Return the names of required credentials that are unset, empty, or still
    contain the placeholder marker.
    """
    missing: List[str] = []
    for name in REQUIRED_CREDENTIALS:
        value = globals().get(name)
        if not value or PLACEHOLDER_MARKER in value:
            missing.append(name)
    return missing


def require_valid_config() -> None:
    """Raise ConfigError unless every credential is set and every setting parsed."""
    missing = missing_credentials()
    if missing or INVALID_SETTINGS:
        raise ConfigError(missing, INVALID_SETTINGS)
