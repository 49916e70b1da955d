import logging
import os
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from genscan.config import settings

logging.basicConfig(level=settings.log_level.upper())
logger = logging.getLogger(__name__)

from genscan.api import detection, system  # noqa: E402
from genscan.core.errors import DetectionError, ProviderError  # noqa: E402
from genscan.core.file_validator import sanitize_log_message  # noqa: E402
from genscan.detection.audio_detector import drain_feedback_tasks  # noqa: E402
from genscan.integrations import http_client  # noqa: E402


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup and shutdown events."""
    await http_client.initialize()
    logger.info(f"[STARTUP] Detection mode: {'demo' if settings.demo_mode else 'live'}")
    yield
    await drain_feedback_tasks()
    await http_client.close()


app = FastAPI(title="GenScan AI Content Detection API", lifespan=lifespan)


@app.exception_handler(DetectionError)
async def detection_error_handler(request: Request, exc: DetectionError):
    body = {"detail": exc.message, "error": type(exc).__name__}
    if isinstance(exc, ProviderError):
        body["provider"] = exc.provider
        if exc.status is not None:
            body["provider_status"] = exc.status

    logger.warning(
        sanitize_log_message(f"[ERROR HANDLER] {exc.status_code} {type(exc).__name__}: {exc.message}")
    )
    return JSONResponse(status_code=exc.status_code, content=body)


app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(system.router)
app.include_router(detection.router)


if __name__ == "__main__":
    import uvicorn

    port = int(os.getenv("PORT", "8000"))
    uvicorn.run("genscan.main:app", host="0.0.0.0", port=port, log_level="info")
