from typing import Any, Optional

import pytest
import requests

from daily_mood.core import Track


class FakeResponse:
    """Minimal stand-in for requests.Response."""

    def __init__(
        self,
        status_code: int = 200,
        payload: Any = None,
        text: Optional[str] = None,
        reason: str = "",
    ) -> None:
        self.status_code = status_code
        self._payload = payload
        self.text = text if text is not None else ""
        self.reason = reason

    @property
    def ok(self) -> bool:
        return self.status_code < 400

    def json(self) -> Any:
        if self._payload is None:
            raise ValueError("No JSON body")
        return self._payload

    def raise_for_status(self) -> None:
        if not self.ok:
            raise requests.HTTPError(f"{self.status_code} {self.reason}")


@pytest.fixture
def make_response():
    return FakeResponse


@pytest.fixture
def make_track():
    def _make_track(track_id: str, name: Optional[str] = None) -> Track:
        return Track(
            id=track_id,
            name=name or f"Track {track_id}",
            artists=["Test Artist"],
            played_at="2026-10-18T08:00:00.000Z",
        )

    return _make_track
