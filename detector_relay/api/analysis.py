"""
Analysis route: /api/analyze

Accepts a JSON body { "mediaType": "image" | "video", "url"?: str, "base64"?: str },
forwards it to the detector and answers with the verdict plus the raw
detector response.

400 → invalid body, 413 → body too large, 502 → detector or scoring failure.
"""

import json
import logging

from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse

from detector_relay.config import Settings
from detector_relay.core.dependencies import get_app_settings, get_detector_client
from detector_relay.core.errors import RelayError
from detector_relay.core.request_validator import invalid_body, validate_analysis_request
from detector_relay.integrations.detector import DetectorClient
from detector_relay.schemas.analysis import AnalysisResponse
from detector_relay.services.analysis_service import analyze_media

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["Analysis"])

UNEXPECTED_ERROR_MESSAGE = "Error inesperado"


def _too_large(limit_mb: int) -> JSONResponse:
    return JSONResponse(
        status_code=413,
        content={"error": f"El cuerpo de la solicitud supera el límite de {limit_mb}MB."},
    )


@router.post("/analyze", response_model=AnalysisResponse)
async def analyze(
    request: Request,
    settings: Settings = Depends(get_app_settings),
    client: DetectorClient = Depends(get_detector_client),
):
    """
    Classify an image or video as AI-generated or not.
    """
    declared = request.headers.get("content-length")
    if declared and declared.isdigit() and int(declared) > settings.max_body_bytes:
        return _too_large(settings.max_body_mb)

    raw = await request.body()
    if len(raw) > settings.max_body_bytes:
        return _too_large(settings.max_body_mb)

    try:
        payload = json.loads(raw)
    except ValueError:
        result = invalid_body("El cuerpo de la solicitud no es JSON válido.")
    else:
        result = validate_analysis_request(payload)

    if not result.ok:
        logger.info(f"[ANALYZE] Rejected request: {[f'{i.path}: {i.message}' for i in result.issues]}")
        return JSONResponse(
            status_code=400,
            content={"error": "Solicitud inválida.", "details": result.flatten()},
        )

    try:
        return await analyze_media(result.request, client, settings.ai_percentage_threshold)
    except RelayError as e:
        logger.warning(f"[ANALYZE] Failed: {e.message}")
        return JSONResponse(status_code=502, content={"error": e.message})
    except Exception:
        logger.exception("[ANALYZE] Unexpected error")
        return JSONResponse(status_code=502, content={"error": UNEXPECTED_ERROR_MESSAGE})
