import logging
from contextlib import asynccontextmanager

from dotenv import load_dotenv
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

# Load environment variables at the very beginning
load_dotenv()

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

from detector_relay.api import analysis, system  # noqa: E402
from detector_relay.config import get_settings  # noqa: E402
from detector_relay.integrations import http_client  # noqa: E402
from detector_relay.integrations.detector import DetectorClient  # noqa: E402


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup and shutdown events."""
    # Raises pydantic.ValidationError when DETECTOR_API_URL / DETECTOR_API_KEY
    # are missing, which aborts startup before any traffic is served.
    settings = get_settings()
    logging.getLogger().setLevel(settings.log_level.upper())

    await http_client.initialize(settings.detector_timeout_sec)
    app.state.settings = settings
    app.state.detector_client = DetectorClient(settings)
    logger.info(
        f"[STARTUP] Relaying to {settings.detector_api_url} "
        f"(threshold {settings.ai_percentage_threshold}%)"
    )

    yield

    await http_client.close()
    logger.info("[SHUTDOWN] Detector relay stopped")


app = FastAPI(title="AI Detector Relay", lifespan=lifespan)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=False,
    allow_methods=["*"],
    allow_headers=["*"],
)


# ---- Error rendering ----
# Every error leaving the app is a JSON body with an "error" field.
@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    logger.info(f"[ERROR HANDLER] {exc.status_code} on {request.url.path}: {exc.detail}")
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": exc.detail},
        headers=getattr(exc, "headers", None),
    )


@app.exception_handler(Exception)
async def unhandled_exception_handler(request: Request, exc: Exception):
    logger.exception(f"[ERROR HANDLER] Unhandled error on {request.url.path}")
    return JSONResponse(status_code=500, content={"error": "Error inesperado"})


app.include_router(system.router)
app.include_router(analysis.router)


def run() -> None:
    """Console entry point: serve the app with uvicorn on HOST:PORT."""
    import uvicorn

    settings = get_settings()
    uvicorn.run(
        "detector_relay.main:app",
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
    )
