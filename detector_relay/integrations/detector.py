"""
Client for the external AI-content detector.

One POST per analysis, no retries. The shared session (see http_client) is
looked up at call time so tests can patch `http_client.request_session`.
"""

import asyncio
import functools
import json
import logging
from typing import Any

import aiohttp

from detector_relay.config import Settings
from detector_relay.core.errors import (
    DetectorHttpError,
    DetectorResponseError,
    DetectorUnreachableError,
)
from detector_relay.integrations import http_client as http_module
from detector_relay.schemas.analysis import AnalysisRequest

logger = logging.getLogger(__name__)


def _reject_constant(token: str):
    raise ValueError(f"non-standard JSON constant {token}")


# NaN / Infinity are not JSON; accepting them would alter the echoed detector response
_strict_loads = functools.partial(json.loads, parse_constant=_reject_constant)


class DetectorClient:
    def __init__(self, settings: Settings):
        self._url = settings.detector_api_url
        self._headers = {
            "Content-Type": "application/json",
            "Authorization": f"Bearer {settings.detector_api_key}",
        }

    async def analyze(self, request: AnalysisRequest) -> Any:
        """
        Send the media reference to the detector and return its parsed JSON body.

        Raises DetectorHttpError on a non-2xx status, DetectorUnreachableError on
        connection failures or timeout, DetectorResponseError on a non-JSON body.
        """
        payload = request.to_detector_payload()
        source = "url" if request.url else "base64"
        logger.info(f"[DETECTOR] POST {self._url} (media_type={request.media_type}, source={source})")

        try:
            async with http_module.request_session() as session:
                async with session.post(self._url, json=payload, headers=self._headers) as response:
                    if not 200 <= response.status < 300:
                        body = await response.text()
                        logger.warning(f"[DETECTOR] HTTP {response.status}: {body[:500]}")
                        raise DetectorHttpError(response.status, body)
                    try:
                        return await response.json(loads=_strict_loads, content_type=None)
                    except ValueError as e:
                        logger.warning(f"[DETECTOR] Non-JSON body with HTTP {response.status}: {e}")
                        raise DetectorResponseError("La respuesta del detector no es JSON válido.") from e
        except (aiohttp.ClientError, asyncio.TimeoutError) as e:
            logger.error(f"[DETECTOR] Unreachable: {e!r}")
            raise DetectorUnreachableError(e) from e
