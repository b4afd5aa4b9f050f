from typing import Dict, List

import pytest
import requests

from daily_mood.pipeline import (
    SoundStatError,
    enrich_tracks_with_audio_features,
    fetch_track_audio_features,
    unique_tracks,
)

FEATURES = {
    "valence": 0.7,
    "energy": 0.5,
    "acousticness": 0.2,
    "danceability": 0.6,
    "tempo": 118.0,
}


def _install_fake_soundstat(monkeypatch, make_response, responses: Dict) -> List[str]:
    """
    Route SoundStat GETs to canned responses keyed by track id. A value that
    is an exception instance is raised instead of returned.
    """
    calls: List[str] = []

    def fake_get(url, headers=None, **kwargs):
        track_id = url.rsplit("/", 1)[-1]
        calls.append(track_id)
        assert headers["x-api-key"] == "test-key"
        outcome = responses[track_id]
        if isinstance(outcome, Exception):
            raise outcome
        return outcome

    monkeypatch.setattr(
        "daily_mood.pipeline.audio_features.requests.get",
        fake_get,
        raising=True,
    )
    return calls


def test_unique_tracks_first_occurrence_wins(make_track) -> None:
    first = make_track("t1", name="First name")
    tracks = [first, make_track("t2"), make_track("t1", name="Later name")]

    result = unique_tracks(tracks)

    assert [t.id for t in result] == ["t1", "t2"]
    assert result[0] is first


def test_fetch_track_audio_features_parses_payload(monkeypatch, make_response, make_track) -> None:
    _install_fake_soundstat(
        monkeypatch,
        make_response,
        {"t1": make_response(200, {"id": "t1", "features": FEATURES})},
    )

    features = fetch_track_audio_features(make_track("t1"), "test-key")

    assert features is not None
    assert features.id == "t1"
    assert features.valence == 0.7
    assert features.tempo == 118.0


def test_fetch_track_audio_features_without_features_is_no_data(
    monkeypatch, make_response, make_track
) -> None:
    _install_fake_soundstat(
        monkeypatch,
        make_response,
        {"t1": make_response(200, {"id": "t1", "status": "processing"})},
    )

    assert fetch_track_audio_features(make_track("t1"), "test-key") is None


def test_fetch_track_audio_features_raises_on_http_error(
    monkeypatch, make_response, make_track
) -> None:
    _install_fake_soundstat(
        monkeypatch,
        make_response,
        {"t1": make_response(404, text='{"detail": "Track not found"}')},
    )

    with pytest.raises(SoundStatError) as excinfo:
        fetch_track_audio_features(make_track("t1"), "test-key")

    assert excinfo.value.status_code == 404
    assert "Track not found" in str(excinfo.value)


def test_enrichment_skips_failures_without_raising(monkeypatch, make_response, make_track) -> None:
    responses = {
        "ok": make_response(200, {"features": FEATURES}),
        "not_found": make_response(404, text="not found"),
        "no_data": make_response(200, {"features": None}),
        "incomplete": make_response(200, {"features": {"valence": 0.5}}),
        "not_json": make_response(200, None, text="<html>"),
        "wrong_shape": make_response(200, ["unexpected"]),
        "offline": requests.ConnectionError("connection refused"),
    }
    calls = _install_fake_soundstat(monkeypatch, make_response, responses)
    tracks = [make_track(track_id) for track_id in responses]

    result = enrich_tracks_with_audio_features(tracks, "test-key", max_workers=1)

    assert set(result.keys()) == {"ok"}
    assert result["ok"].energy == 0.5
    assert sorted(calls) == sorted(responses.keys())


def test_enrichment_requests_each_unique_track_once_in_order(
    monkeypatch, make_response, make_track
) -> None:
    responses = {
        "t1": make_response(200, {"features": FEATURES}),
        "t2": make_response(200, {"features": FEATURES}),
    }
    calls = _install_fake_soundstat(monkeypatch, make_response, responses)
    tracks = [make_track("t1"), make_track("t2"), make_track("t1")]

    result = enrich_tracks_with_audio_features(tracks, "test-key", max_workers=1)

    assert calls == ["t1", "t2"]
    assert set(result.keys()) == {"t1", "t2"}


def test_enrichment_with_larger_pool_gives_same_mapping(
    monkeypatch, make_response, make_track
) -> None:
    responses = {
        f"t{i}": make_response(200, {"features": FEATURES}) for i in range(6)
    }
    responses["t3"] = make_response(500, text="boom")
    _install_fake_soundstat(monkeypatch, make_response, responses)
    tracks = [make_track(track_id) for track_id in responses]

    result = enrich_tracks_with_audio_features(tracks, "test-key", max_workers=4)

    assert set(result.keys()) == {"t0", "t1", "t2", "t4", "t5"}


def test_enrichment_of_no_tracks_makes_no_requests(monkeypatch, make_response) -> None:
    calls = _install_fake_soundstat(monkeypatch, make_response, {})

    assert enrich_tracks_with_audio_features([], "test-key") == {}
    assert calls == []
