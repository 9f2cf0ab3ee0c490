"""
System / health routes.
"""

from fastapi import APIRouter

from detector_relay.schemas.analysis import HealthResponse

router = APIRouter(prefix="/api", tags=["System"])


@router.get("/health", response_model=HealthResponse)
async def health():
    return {"ok": True, "message": "API funcionando 🚀"}
