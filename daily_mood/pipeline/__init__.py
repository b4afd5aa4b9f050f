"""Public façade for the daily_mood.pipeline package.

This module exposes the pipeline stages (audio feature enrichment, mood
aggregation, element classification, result persistence) and the
run_daily_mood() orchestration entrypoint. Other packages should import
pipeline behaviour from this façade instead of the internal submodules.
"""

from .aggregation import calculate_mood_summary
from .audio_features import (
    SoundStatError,
    enrich_tracks_with_audio_features,
    fetch_track_audio_features,
    unique_tracks,
)
from .classifier import ELEMENT_RULES, ElementRule, classify_mood, match_element_rule
from .orchestration import PipelineOptions, run_daily_mood
from .persistence import (
    element_result_to_dict,
    load_element_result,
    write_element_result,
)

__all__ = [
    "PipelineOptions",
    "run_daily_mood",
    "unique_tracks",
    "fetch_track_audio_features",
    "enrich_tracks_with_audio_features",
    "SoundStatError",
    "calculate_mood_summary",
    "ElementRule",
    "ELEMENT_RULES",
    "match_element_rule",
    "classify_mood",
    "element_result_to_dict",
    "write_element_result",
    "load_element_result",
]
