from dataclasses import dataclass
from enum import Enum
from typing import List

from pydantic import BaseModel


@dataclass(frozen=True)
class Track:
    """A play from the listening history, as returned by Spotify."""

    id: str
    name: str
    artists: List[str]
    played_at: str


class AudioFeatures(BaseModel):
    """
    Acoustic metrics for one track, from the SoundStat `features` object.

    - valence, energy, acousticness, danceability : conventionally in [0, 1]
    - tempo                                        : beats per minute
    """

    id: str
    valence: float
    energy: float
    acousticness: float
    danceability: float
    tempo: float


@dataclass
class MoodSummary:
    avg_valence: float
    avg_energy: float
    avg_acousticness: float
    track_count: int
    analyzed_count: int


class Element(str, Enum):
    FIRE = "FIRE"
    WATER = "WATER"
    AIR = "AIR"
    EARTH = "EARTH"
    AETHER = "AETHER"


@dataclass
class ElementResult:
    """
    Classified daily mood.

    - element     : matched category
    - gradient    : CSS gradient used to display the element
    - description : one-line label for the element
    - mood        : summary the element was derived from
    - date        : capture time (ISO-8601, UTC)
    - tracks      : plays the summary was computed over
    """

    element: Element
    gradient: str
    description: str
    mood: MoodSummary
    date: str
    tracks: List[Track]
