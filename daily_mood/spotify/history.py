"""Listening history retrieval.

The recently-played endpoint is queried once with a server-side cursor
(`after`) set to the start of the history window. Failures never propagate:
an unreachable or misbehaving endpoint is reported as "nothing played".
"""

from datetime import datetime, timedelta, timezone
from typing import Dict, List, Optional

import requests

from daily_mood.config import (
    HISTORY_WINDOW_HOURS,
    RECENTLY_PLAYED_LIMIT,
    SPOTIFY_API_BASE,
)
from daily_mood.core import Track, log_step, log_success, log_warning

from .auth import spotify_headers


def _window_start_millis(now: datetime, window_hours: int) -> int:
    start = now - timedelta(hours=window_hours)
    return int(start.timestamp() * 1000)


def _parse_recently_played(data: Dict) -> List[Track]:
    tracks: List[Track] = []
    for item in data["items"]:
        if not isinstance(item, dict):
            continue
        t = item.get("track")
        if not isinstance(t, dict):
            continue
        tracks.append(
            Track(
                id=t["id"],
                name=t["name"],
                artists=[a["name"] for a in t.get("artists", [])],
                played_at=item["played_at"],
            )
        )
    return tracks


def get_recently_played(
    token_info: Dict,
    limit: int = RECENTLY_PLAYED_LIMIT,
    window_hours: int = HISTORY_WINDOW_HOURS,
    now: Optional[datetime] = None,
) -> List[Track]:
    """
    Fetch the tracks played during the last `window_hours`, most recent first
    (server order is kept as-is).

    Returns an empty list if the request or the payload fails.
    """
    if now is None:
        now = datetime.now(timezone.utc)

    log_step(f"Fetching tracks played in the last {window_hours} hours...")

    url = f"{SPOTIFY_API_BASE}/me/player/recently-played"
    params = {
        "limit": limit,
        "after": _window_start_millis(now, window_hours),
    }

    try:
        r = requests.get(url, headers=spotify_headers(token_info), params=params)
        r.raise_for_status()
        tracks = _parse_recently_played(r.json())
    except requests.RequestException as e:
        log_warning(f"Failed to fetch recently played: {e}")
        return []
    except (ValueError, KeyError, TypeError) as e:
        log_warning(f"Recently played payload is malformed: {e!r}")
        return []

    log_success(f"Fetched {len(tracks)} tracks from the last {window_hours} hours")
    return tracks
