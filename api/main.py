import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from pathlib import Path

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import FileResponse, JSONResponse, Response

from api.deps import ProviderUnavailableError, get_config, get_curriculum_store
from api.routes.plan import router as plan_router
from infrastructure.metrics import get_metrics_response, record_plan_request
from ingestion.generation import PLAN_MODEL

logger = logging.getLogger(__name__)

STATIC_DIR = Path(__file__).resolve().parent.parent / "static"


@asynccontextmanager
async def lifespan(_: FastAPI) -> AsyncIterator[None]:
    """Load the curriculum once before serving requests."""
    config = get_config()
    curriculum = get_curriculum_store()
    logger.info("Curriculum loaded: %d songs", len(curriculum))
    logger.info("Plan model: %s (max_tokens=%d)", PLAN_MODEL, config.max_tokens)
    yield


app = FastAPI(title="Guitar Practice Planner", lifespan=lifespan)

# The landing page may be served from another origin during development
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(plan_router)


@app.exception_handler(ProviderUnavailableError)
def provider_unavailable(_: Request, exc: ProviderUnavailableError) -> JSONResponse:
    """Report an unconfigured LLM provider in the plan endpoint's error shape."""
    logger.error("Generation provider unavailable: %s", exc)
    record_plan_request(status="error")
    return JSONResponse(status_code=500, content={"error": str(exc)})


@app.get("/health")
def health() -> dict[str, str]:
    """Return a simple liveness check."""
    return {"status": "ok"}


@app.get("/metrics")
def metrics() -> Response:
    """Prometheus metrics endpoint.

    Returns metrics in Prometheus text exposition format.
    """
    body, content_type = get_metrics_response()
    return Response(content=body, media_type=content_type)


@app.get("/", include_in_schema=False)
def index() -> FileResponse:
    """Serve the assessment landing page."""
    return FileResponse(STATIC_DIR / "index.html")
