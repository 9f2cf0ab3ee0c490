"""
Analysis flow: detector call → score extraction → verdict.

Errors from the detector client and the scorer (RelayError subclasses)
propagate unchanged; the route maps them to HTTP 502.
"""

import logging
import time

from detector_relay.core.scoring import extract_ai_percentage
from detector_relay.core.verdict import decide
from detector_relay.integrations.detector import DetectorClient
from detector_relay.schemas.analysis import AnalysisRequest, AnalysisResponse

logger = logging.getLogger(__name__)


async def analyze_media(
    request: AnalysisRequest,
    client: DetectorClient,
    threshold: float,
) -> AnalysisResponse:
    start_time = time.time()
    detector_response = await client.analyze(request)
    ai_percentage = extract_ai_percentage(detector_response)
    verdict = decide(ai_percentage, threshold)

    duration = time.time() - start_time
    logger.info(
        f"[ANALYZE] {request.media_type}: {verdict.label} "
        f"(threshold {threshold}) in {duration:.2f}s"
    )

    return AnalysisResponse(
        verdict=verdict.label,
        ai_percentage=verdict.ai_percentage,
        threshold=verdict.threshold,
        detector_response=detector_response,
    )
