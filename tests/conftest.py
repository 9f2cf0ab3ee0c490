"""
Shared pytest fixtures for all test modules.

IMPORTANT: the detector settings must be in the environment before the app
is imported and before the lifespan calls get_settings().
"""

import os

os.environ["DETECTOR_API_URL"] = "https://detector.test/v1/analyze"
os.environ["DETECTOR_API_KEY"] = "test-key"
os.environ.pop("AI_PERCENTAGE_THRESHOLD", None)

from contextlib import asynccontextmanager
from unittest.mock import AsyncMock, MagicMock, patch

import pytest
from fastapi.testclient import TestClient

from detector_relay.config import Settings, get_settings
from detector_relay.core.dependencies import get_app_settings

# App import happens AFTER the environment is prepared above.
from detector_relay.main import app  # noqa: E402

DETECTOR_URL = os.environ["DETECTOR_API_URL"]
DETECTOR_KEY = os.environ["DETECTOR_API_KEY"]


# ---------------------------------------------------------------------------
# Core infrastructure fixtures
# ---------------------------------------------------------------------------


@pytest.fixture
def client():
    """FastAPI TestClient with the lifespan (settings + HTTP session) running."""
    get_settings.cache_clear()
    with TestClient(app, raise_server_exceptions=False) as c:
        yield c
    app.dependency_overrides.clear()
    get_settings.cache_clear()


@pytest.fixture
def override_settings():
    """Swap the Settings seen by routes for the duration of one test."""

    def _override(**kwargs) -> Settings:
        values = {"detector_api_url": DETECTOR_URL, "detector_api_key": DETECTOR_KEY, **kwargs}
        custom = Settings(**values)
        app.dependency_overrides[get_app_settings] = lambda: custom
        return custom

    yield _override
    app.dependency_overrides.pop(get_app_settings, None)


# ---------------------------------------------------------------------------
# Detector HTTP mocks
# ---------------------------------------------------------------------------


def make_detector_session(
    status=200, json_body=None, text="", json_error=None, post_error=None, raw_body=None
):
    """
    Build a mock aiohttp session whose .post() returns a context-manager response.

    With raw_body, .json() decodes that text through the `loads` callable the
    client passes in, like aiohttp does.
    """
    mock_resp = MagicMock()
    mock_resp.__aenter__ = AsyncMock(return_value=mock_resp)
    mock_resp.__aexit__ = AsyncMock(return_value=None)
    mock_resp.status = status
    mock_resp.text = AsyncMock(return_value=text)
    if raw_body is not None:
        mock_resp.json = AsyncMock(side_effect=lambda **kwargs: kwargs["loads"](raw_body))
    elif json_error is not None:
        mock_resp.json = AsyncMock(side_effect=json_error)
    else:
        mock_resp.json = AsyncMock(return_value=json_body)

    mock_session = MagicMock()
    if post_error is not None:
        mock_session.post = MagicMock(side_effect=post_error)
    else:
        mock_session.post = MagicMock(return_value=mock_resp)
    return mock_session


def patch_session(mock_session):
    """
    Patch http_client.request_session to yield mock_session directly,
    bypassing aiohttp.ClientSession construction entirely.
    """
    @asynccontextmanager
    async def _fake_request_session():
        yield mock_session

    return patch(
        "detector_relay.integrations.http_client.request_session",
        side_effect=_fake_request_session,
    )
