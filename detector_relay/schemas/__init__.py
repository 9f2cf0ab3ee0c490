from detector_relay.schemas.analysis import AnalysisRequest, AnalysisResponse, HealthResponse

__all__ = [
    "AnalysisRequest",
    "AnalysisResponse",
    "HealthResponse",
]
