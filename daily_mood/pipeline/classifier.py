"""Rule-based element classification of a daily mood summary.

The rules form an ordered table evaluated top to bottom; the first predicate
that holds decides the element. Ranges overlap, so the order is part of the
rules. The last entry matches unconditionally, which makes classify_mood()
total: any summary not caught by FIRE, WATER, AIR or AETHER is EARTH, even
the ones that do not look "grounded" (high energy with low valence, for
example).

This module has no I/O.
"""

from datetime import datetime, timezone
from typing import Callable, List, NamedTuple, Optional

from daily_mood.core import Element, ElementResult, MoodSummary, Track


class ElementRule(NamedTuple):
    predicate: Callable[[MoodSummary], bool]
    element: Element
    gradient: str
    description: str


ELEMENT_RULES: List[ElementRule] = [
    # High energy + high valence
    ElementRule(
        predicate=lambda m: m.avg_energy > 0.7 and m.avg_valence > 0.6,
        element=Element.FIRE,
        gradient="linear-gradient(135deg, #ff6b00 0%, #ff0000 50%, #ffaa00 100%)",
        description="Euphoric & Intense",
    ),
    # Low energy + low valence
    ElementRule(
        predicate=lambda m: m.avg_energy < 0.5 and m.avg_valence < 0.6,
        element=Element.WATER,
        gradient="linear-gradient(135deg, #000814 0%, #003566 50%, #001d3d 100%)",
        description="Flowing & Emotional",
    ),
    # High valence + moderate energy
    ElementRule(
        predicate=lambda m: m.avg_valence > 0.6 and 0.4 <= m.avg_energy <= 0.7,
        element=Element.AIR,
        gradient="linear-gradient(135deg, #e0f7ff 0%, #87ceeb 50%, #b8d4e6 100%)",
        description="Light & Uplifting",
    ),
    # High acousticness + low energy
    ElementRule(
        predicate=lambda m: m.avg_acousticness > 0.5 and m.avg_energy < 0.5,
        element=Element.AETHER,
        gradient="linear-gradient(135deg, #0a0014 0%, #1a0033 50%, #2d1b47 100%)",
        description="Ethereal & Transcendent",
    ),
    # Everything else
    ElementRule(
        predicate=lambda m: True,
        element=Element.EARTH,
        gradient="linear-gradient(135deg, #0d1b0d 0%, #1a3319 50%, #0f2511 100%)",
        description="Grounded & Melancholic",
    ),
]


def format_timestamp(moment: datetime) -> str:
    """ISO-8601 in UTC with millisecond precision and a trailing Z."""
    moment = moment.astimezone(timezone.utc)
    return moment.isoformat(timespec="milliseconds").replace("+00:00", "Z")


def match_element_rule(summary: MoodSummary) -> ElementRule:
    for rule in ELEMENT_RULES:
        if rule.predicate(summary):
            return rule
    # Unreachable while the table ends with an unconditional entry
    raise RuntimeError("ELEMENT_RULES has no fallback entry")


def classify_mood(
    summary: MoodSummary,
    tracks: List[Track],
    now: Optional[datetime] = None,
) -> ElementResult:
    """
    Map a mood summary to its element.

    `tracks` is carried into the result unchanged. `now` fixes the capture
    timestamp (defaults to the current UTC time).
    """
    if now is None:
        now = datetime.now(timezone.utc)

    rule = match_element_rule(summary)
    return ElementResult(
        element=rule.element,
        gradient=rule.gradient,
        description=rule.description,
        mood=summary,
        date=format_timestamp(now),
        tracks=list(tracks),
    )
