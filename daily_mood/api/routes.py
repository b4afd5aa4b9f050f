from fastapi import APIRouter, HTTPException
from pydantic import ValidationError

from daily_mood import config
from daily_mood.core import log_error, log_step, log_warning
from daily_mood.pipeline import (
    PipelineOptions,
    element_result_to_dict,
    load_element_result,
    run_daily_mood,
)
from daily_mood.spotify import SpotifyAuthError

from .schemas import ElementPayload, RunResponse

router = APIRouter()


@router.get("/health")
def health() -> dict:
    return {"status": "ok"}


@router.get("/mood/current", response_model=ElementPayload)
def get_current_mood() -> ElementPayload:
    """
    Last persisted daily mood, as written by the pipeline.

    A missing file and a file that does not match the published shape both
    answer 404.
    """
    data = load_element_result(config.MOOD_OUTPUT_FILE)
    if data is not None:
        try:
            return ElementPayload.model_validate(data)
        except ValidationError:
            log_warning(
                f"Mood file {config.MOOD_OUTPUT_FILE} does not match the "
                "published shape; ignoring it."
            )

    raise HTTPException(
        status_code=404,
        detail="No mood has been computed yet. Run POST /mood/run first.",
    )


@router.post("/mood/run", response_model=RunResponse)
def run_mood() -> RunResponse:
    """
    Run the pipeline once and persist the result.

    - 500 if credentials are missing or settings are invalid
    - 502 if Spotify refuses the refresh token
    - status "no_data" when nothing was played or nothing could be analyzed
    """
    try:
        config.require_valid_config()
    except config.ConfigError as e:
        raise HTTPException(
            status_code=500,
            detail={"status": "misconfigured", "missing": e.missing, "invalid": e.invalid},
        )

    log_step("Daily mood run requested via API...")

    try:
        result = run_daily_mood(PipelineOptions())
    except SpotifyAuthError as e:
        log_error(f"Daily mood run aborted: {e}")
        raise HTTPException(status_code=502, detail=str(e))

    if result is None:
        return RunResponse(status="no_data", element=None)

    return RunResponse(
        status="done",
        element=ElementPayload(**element_result_to_dict(result)),
    )
