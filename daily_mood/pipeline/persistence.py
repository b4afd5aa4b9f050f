from pathlib import Path
from typing import Any, Dict, Optional

from daily_mood.core import ElementResult, Track, log_warning, read_json, write_json


def _track_to_dict(track: Track) -> Dict[str, Any]:
    return {
        "id": track.id,
        "name": track.name,
        "artists": list(track.artists),
        "playedAt": track.played_at,
    }


def element_result_to_dict(result: ElementResult) -> Dict[str, Any]:
    """
    Serialise an ElementResult to the published JSON shape.

    Structure:
      {
        "name": "AIR",
        "gradient": "...",
        "description": "...",
        "mood": {"avgValence": ..., "avgEnergy": ..., "avgAcousticness": ...,
                 "trackCount": ..., "analyzedCount": ...},
        "date": "2026-01-01T00:00:00.000Z",
        "tracks": [{"id": ..., "name": ..., "artists": [...], "playedAt": ...}]
      }
    """
    mood = result.mood
    return {
        "name": result.element.value,
        "gradient": result.gradient,
        "description": result.description,
        "mood": {
            "avgValence": mood.avg_valence,
            "avgEnergy": mood.avg_energy,
            "avgAcousticness": mood.avg_acousticness,
            "trackCount": mood.track_count,
            "analyzedCount": mood.analyzed_count,
        },
        "date": result.date,
        "tracks": [_track_to_dict(t) for t in result.tracks],
    }


def write_element_result(result: ElementResult, path: str | Path) -> str:
    """
    Overwrite `path` with the serialised result. Returns the path written.
    """
    write_json(path, element_result_to_dict(result))
    return str(path)


def load_element_result(path: str | Path) -> Optional[Dict[str, Any]]:
    """
    Read the last persisted result as a plain dict.
    Returns None if the file is missing or not a valid JSON object.
    """

    def _on_error(e: Exception) -> None:
        log_warning(f"Mood file {path} is corrupted; ignoring it.")

    data = read_json(path, default=None, on_error=_on_error)
    if data is not None and not isinstance(data, dict):
        log_warning(f"Mood file {path} has invalid structure; ignoring it.")
        return None
    return data
