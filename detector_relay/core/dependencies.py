"""
FastAPI dependencies exposing the objects built during the lifespan.

Routes never call get_settings() themselves: they receive the instance stored
on app.state, which tests can replace through app.dependency_overrides.
"""

from fastapi import Request

from detector_relay.config import Settings
from detector_relay.integrations.detector import DetectorClient


def get_app_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_detector_client(request: Request) -> DetectorClient:
    return request.app.state.detector_client
