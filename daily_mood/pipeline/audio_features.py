"""Audio feature enrichment for played tracks.

Each unique track is looked up on SoundStat, which returns acoustic metrics
keyed by Spotify track id. The enrichment tolerates partial failure:

  - a lookup that fails (HTTP error, transport error, malformed payload) is
    logged and skipped
  - a lookup that succeeds without a `features` object means "no data"
  - only successful lookups end up in the returned mapping

Lookups run through a bounded thread pool. The default cap of one worker keeps
requests strictly sequential; raise SOUNDSTAT_MAX_WORKERS only if the SoundStat
quota allows it.
"""

from concurrent.futures import ThreadPoolExecutor, as_completed
from typing import Dict, List, Optional

import requests

from daily_mood.config import SOUNDSTAT_API_BASE, SOUNDSTAT_MAX_WORKERS
from daily_mood.core import (
    AudioFeatures,
    Track,
    log_info,
    log_progress,
    log_step,
    log_warning,
)

# Longest slice of an error body echoed into the logs
ERROR_BODY_PREVIEW = 200


class SoundStatError(Exception):
    """SoundStat answered, but not with a usable features document."""

    def __init__(self, status_code: int, message: str):
        self.status_code = status_code
        super().__init__(message)


def unique_tracks(tracks: List[Track]) -> List[Track]:
    """
    Deduplicate tracks by id. The first occurrence wins and order is kept.
    """
    seen: Dict[str, Track] = {}
    for track in tracks:
        if track.id not in seen:
            seen[track.id] = track
    return list(seen.values())


def _soundstat_headers(api_key: str) -> Dict[str, str]:
    return {
        "x-api-key": api_key,
        "Content-Type": "application/json",
    }


def fetch_track_audio_features(track: Track, api_key: str) -> Optional[AudioFeatures]:
    """
    Fetch SoundStat features for a single track.

    Returns None when SoundStat has no analysis for the track. Raises
    SoundStatError on a non-success status or an unexpected document,
    pydantic.ValidationError when the features are incomplete, and
    requests.RequestException on transport errors.
    """
    url = f"{SOUNDSTAT_API_BASE}/track/{track.id}"
    r = requests.get(url, headers=_soundstat_headers(api_key))

    if not r.ok:
        body = (r.text or "")[:ERROR_BODY_PREVIEW]
        raise SoundStatError(r.status_code, f"HTTP {r.status_code} for {url}: {body}")

    data = r.json()
    if not isinstance(data, dict):
        raise SoundStatError(r.status_code, f"Unexpected document for {url}")

    features = data.get("features")
    if not features:
        return None
    if not isinstance(features, dict):
        raise SoundStatError(r.status_code, f"Malformed features object for {url}")

    return AudioFeatures(
        id=track.id,
        valence=features.get("valence"),
        energy=features.get("energy"),
        acousticness=features.get("acousticness"),
        danceability=features.get("danceability"),
        tempo=features.get("tempo"),
    )


def enrich_tracks_with_audio_features(
    tracks: List[Track],
    api_key: str,
    max_workers: int = SOUNDSTAT_MAX_WORKERS,
) -> Dict[str, AudioFeatures]:
    """
    Resolve audio features for every unique track.

    Returns:
      - features: dict[track_id] -> AudioFeatures, successful lookups only

    Tracks missing from the mapping are the ones SoundStat could not analyze;
    that count is never raised as an error.
    """
    to_process = unique_tracks(tracks)
    total = len(to_process)
    features: Dict[str, AudioFeatures] = {}

    if total == 0:
        return features

    log_step(f"Analyzing {total} tracks with SoundStat...")

    processed = 0
    with ThreadPoolExecutor(max_workers=max(1, max_workers)) as executor:
        future_to_track = {
            executor.submit(fetch_track_audio_features, track, api_key): track
            for track in to_process
        }

        for future in as_completed(future_to_track):
            track = future_to_track[future]
            processed += 1

            try:
                entry = future.result()
            except SoundStatError as e:
                log_warning(f'Skip: "{track.name}" ({e.status_code}) {e}')
                continue
            except requests.RequestException as e:
                log_warning(f'Skip: "{track.name}" (request failed: {e})')
                continue
            except ValueError as e:
                # Invalid JSON or features that fail validation
                log_warning(f'Skip: "{track.name}" (malformed payload: {e})')
                continue

            if entry is None:
                log_info(f'No audio features for "{track.name}"')
                continue

            features[track.id] = entry
            log_progress(processed, total, label=track.name)

    log_info(f"Audio features available for {len(features)}/{total} unique tracks.")
    return features
