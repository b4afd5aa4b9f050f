from typing import List, Optional

from pydantic import BaseModel

from daily_mood.core import Element


class MoodPayload(BaseModel):
    avgValence: float
    avgEnergy: float
    avgAcousticness: float
    trackCount: int
    analyzedCount: int


class TrackPayload(BaseModel):
    id: str
    name: str
    artists: List[str]
    playedAt: str


class ElementPayload(BaseModel):
    name: Element
    gradient: str
    description: str
    mood: MoodPayload
    date: str
    tracks: List[TrackPayload]


class RunResponse(BaseModel):
    # "done" when a mood was classified and saved, "no_data" otherwise
    status: str
    element: Optional[ElementPayload] = None
