"""FastAPI entrypoint wiring the question store and REST endpoints."""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import Any

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from starlette.responses import JSONResponse

from . import config

# Configure logging to show LOG_LEVEL and above
logging.basicConfig(
    level=getattr(logging, config.LOG_LEVEL, logging.INFO),
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
    force=True  # Force reconfiguration even if logging was already configured
)

from .data.question_store import QuestionStore
from .routers import quiz
from .services.quiz_service import QuizService

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup: load the question banks once before serving traffic."""
    store = QuestionStore.from_sources(config.DATA_DIR, config.TOPIC_SOURCES)
    if store.load_errors:
        logger.error(f"Question store loaded with {len(store.load_errors)} source error(s)")
    app.state.quiz_service = QuizService(store)
    yield
    app.state.quiz_service = None


app = FastAPI(title=config.APP_NAME, version=config.APP_VERSION, lifespan=lifespan)

app.add_middleware(
    CORSMiddleware,
    allow_origins=config.CORS_ORIGINS,
    allow_credentials="*" not in config.CORS_ORIGINS,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(quiz.router)


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Malformed path parameters are client errors, reported as 400."""
    logger.warning(f"Invalid request for {request.url.path}: {exc.errors()}")
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"detail": "Invalid request parameters"},
    )


@app.get("/health")
async def health_check(request: Request) -> JSONResponse:
    """Health check endpoint, degraded when any question bank failed to load."""
    service: QuizService | None = getattr(request.app.state, "quiz_service", None)
    if service is None:
        return JSONResponse(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            content={"status": "starting"},
        )

    body: dict[str, Any] = {"status": "ok", "topics": service.store.get_stats()}
    errors = service.store.load_errors
    if errors:
        body["status"] = "degraded"
        body["errors"] = errors
        return JSONResponse(status_code=status.HTTP_503_SERVICE_UNAVAILABLE, content=body)
    return JSONResponse(body)
