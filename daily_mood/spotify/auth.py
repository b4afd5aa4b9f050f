import time
from typing import Dict

import requests

from daily_mood.config import SPOTIFY_TOKEN_URL
from daily_mood.core import log_error, log_success


class SpotifyAuthError(Exception):
    """The token endpoint did not issue an access token."""


def refresh_access_token(
    client_id: str,
    client_secret: str,
    refresh_token: str,
) -> Dict:
    """
    Exchange a long-lived refresh token for a short-lived access token.

    Failure is fatal for the run: no retry, no refresh-token rotation.
    """
    token_data = {
        "grant_type": "refresh_token",
        "refresh_token": refresh_token,
        "client_id": client_id,
        "client_secret": client_secret,
    }

    try:
        r = requests.post(SPOTIFY_TOKEN_URL, data=token_data)
    except requests.RequestException as e:
        log_error(f"Failed to get access token: {e}")
        raise SpotifyAuthError(f"Failed to get access token: {e}") from e

    if not r.ok:
        log_error(f"Failed to get access token: {r.status_code} {r.reason}")
        raise SpotifyAuthError(
            f"Failed to get access token: {r.status_code} {r.reason}"
        )

    try:
        token_info = r.json()
    except ValueError as e:
        log_error("Failed to get access token: response is not JSON")
        raise SpotifyAuthError("Token response is not JSON") from e

    if not isinstance(token_info, dict) or not token_info.get("access_token"):
        log_error("Failed to get access token: no access_token in response")
        raise SpotifyAuthError("Token response has no access_token")

    token_info["timestamp"] = int(time.time())
    log_success("Access token obtained")
    return token_info


def spotify_headers(token_info: Dict) -> Dict:
    return {"Authorization": f"Bearer {token_info['access_token']}"}
