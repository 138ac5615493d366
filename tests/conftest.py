"""Shared fixtures for media-feed tests.

The HTTP boundary is replaced with `httpx.MockTransport`; no test touches
the network.
"""

from __future__ import annotations

import copy
from typing import Any, Callable

import httpx
import pytest

from core.config import AppSettings

TEST_BASE_URL = "https://cms.test/api"

SAMPLE_LIST_PAYLOAD: dict[str, Any] = {
    "data": [
        {
            "id": 1,
            "documentId": "img-sunset",
            "type": "image",
            "title": "Sunset",
            "desc": "Golden hour over the bay",
            "author": {"id": 7, "name": "Ana", "avatar": {"url": "/uploads/ana.png"}},
            "like": 12,
            "cover": {"url": "/uploads/sunset.jpg", "width": 800, "height": 600},
            "video": None,
            "categories": [{"name": "Nature"}],
            "publishedAt": "2024-05-01T10:00:00.000Z",
        },
        {
            "id": 2,
            "documentId": "vid-trail",
            "type": "video",
            "title": "Trail run",
            "desc": "Morning run",
            "author": {"id": 8, "name": "Luis", "avatar": {"url": "/uploads/luis.png"}},
            "like": 3,
            "cover": {"url": "/uploads/trail.jpg", "width": 1280, "height": 720},
            "video": {"url": "/uploads/trail.mp4"},
            "categories": [{"name": "Travel"}, {"name": "Sport"}],
        },
    ],
    "meta": {"pagination": {"page": 1, "pageSize": 3, "pageCount": 2, "total": 5}},
}


class RecordingHandler:
    """Callable for `httpx.MockTransport` that records every request."""

    def __init__(
        self,
        *,
        status_code: int = 200,
        payload: Any = None,
        error: Callable[[httpx.Request], Exception] | None = None,
    ) -> None:
        self.status_code = status_code
        self.payload = copy.deepcopy(SAMPLE_LIST_PAYLOAD) if payload is None else payload
        self.error = error
        self.requests: list[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.error is not None:
            raise self.error(request)
        return httpx.Response(self.status_code, json=self.payload)

    @property
    def last_params(self) -> dict[str, str]:
        return dict(self.requests[-1].url.params)


@pytest.fixture
def settings() -> AppSettings:
    return AppSettings(_env_file=None, api_base_url=TEST_BASE_URL)


@pytest.fixture
def sample_payload() -> dict[str, Any]:
    return copy.deepcopy(SAMPLE_LIST_PAYLOAD)


@pytest.fixture
def handler() -> RecordingHandler:
    return RecordingHandler()


@pytest.fixture
def transport(handler: RecordingHandler) -> httpx.MockTransport:
    return httpx.MockTransport(handler)
