"""Public façade for the daily_mood.spotify package.

This module exposes the Spotify Web API integration used by the pipeline:
access-token refresh and listening history retrieval. Callers should import
these symbols from this façade instead of the internal auth or history
modules.
"""

from .auth import SpotifyAuthError, refresh_access_token, spotify_headers
from .history import get_recently_played

__all__ = [
    "SpotifyAuthError",
    "refresh_access_token",
    "spotify_headers",
    "get_recently_played",
]
