from typing import Dict, List, Optional

from daily_mood.core import AudioFeatures, MoodSummary, Track


def _mean(values: List[float]) -> float:
    return sum(values) / len(values)


def calculate_mood_summary(
    tracks: List[Track],
    features: Dict[str, AudioFeatures],
) -> Optional[MoodSummary]:
    """
    Average valence, energy and acousticness over every play that has
    features.

    `tracks` is the history as fetched (repeat plays included), so a track
    played twice weighs twice. Returns None when there is nothing to average.
    """
    if not tracks:
        return None

    valences: List[float] = []
    energies: List[float] = []
    acousticnesses: List[float] = []

    for track in tracks:
        entry = features.get(track.id)
        if entry is None:
            continue
        valences.append(entry.valence)
        energies.append(entry.energy)
        acousticnesses.append(entry.acousticness)

    if not valences:
        return None

    return MoodSummary(
        avg_valence=_mean(valences),
        avg_energy=_mean(energies),
        avg_acousticness=_mean(acousticnesses),
        track_count=len(tracks),
        analyzed_count=len(valences),
    )
