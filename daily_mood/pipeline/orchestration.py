"""Orchestration of the daily mood pipeline.

run_daily_mood() wires the stages together in their fixed order:

  authenticate → fetch history → enrich → aggregate → classify → persist

It is shared by the CLI entrypoint and the HTTP API. Each stage runs once per
call. Error policies by stage:

  - authentication failure raises SpotifyAuthError (fatal for the caller)
  - an empty or failed history fetch ends the run with no result
  - per-track enrichment failures are skipped; if nothing could be analyzed
    the run ends with no result
"""

from dataclasses import dataclass, field
from typing import Optional

from daily_mood import config
from daily_mood.core import (
    ElementResult,
    MoodSummary,
    log_info,
    log_section,
    log_step,
    log_success,
    log_warning,
)
from daily_mood.spotify import get_recently_played, refresh_access_token

from .aggregation import calculate_mood_summary
from .audio_features import enrich_tracks_with_audio_features
from .classifier import classify_mood
from .persistence import write_element_result


@dataclass
class PipelineOptions:
    output_path: str = field(default_factory=lambda: config.MOOD_OUTPUT_FILE)
    max_workers: int = field(default_factory=lambda: config.SOUNDSTAT_MAX_WORKERS)
    # write_output:
    #   - True  => overwrite output_path with the result
    #   - False => compute and log only
    write_output: bool = True


def _log_mood_report(result: ElementResult, mood: MoodSummary) -> None:
    log_success("Daily mood analysis complete!")
    log_info(f"Element: {result.element.value}")
    log_info(f"Description: {result.description}")
    log_info(f"Valence: {mood.avg_valence * 100:.1f}%")
    log_info(f"Energy: {mood.avg_energy * 100:.1f}%")
    log_info(f"Acousticness: {mood.avg_acousticness * 100:.1f}%")
    log_info(f"Tracks analyzed: {mood.analyzed_count}/{mood.track_count}")


def run_daily_mood(opts: Optional[PipelineOptions] = None) -> Optional[ElementResult]:
    """
    Run the whole pipeline once.

    Returns the ElementResult, or None when there was nothing to classify
    (no plays in the window, or no play could be analyzed). The output file
    is only written when a result exists and opts.write_output is set.
    """
    if opts is None:
        opts = PipelineOptions()

    log_section("Daily mood analysis")

    log_step("Refreshing Spotify access token...")
    token_info = refresh_access_token(
        client_id=config.SPOTIFY_CLIENT_ID,
        client_secret=config.SPOTIFY_CLIENT_SECRET,
        refresh_token=config.SPOTIFY_REFRESH_TOKEN,
    )

    tracks = get_recently_played(token_info)
    if not tracks:
        log_info(f"No tracks played in the last {config.HISTORY_WINDOW_HOURS} hours")
        return None

    features = enrich_tracks_with_audio_features(
        tracks,
        api_key=config.SOUNDSTAT_API_KEY,
        max_workers=opts.max_workers,
    )

    mood = calculate_mood_summary(tracks, features)
    if mood is None:
        log_warning("Could not calculate mood")
        return None

    result = classify_mood(mood, tracks)
    _log_mood_report(result, mood)

    if opts.write_output:
        path = write_element_result(result, opts.output_path)
        log_success(f"Saved to {path}")

    return result
