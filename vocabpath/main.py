"""Main FastAPI application."""

from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

import structlog
from fastapi import FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from vocabpath.config import configure_logging, get_settings
from vocabpath.database import dispose_engine, initialize_database
from vocabpath.domain.common.exceptions import DomainError
from vocabpath.exceptions import AccessDeniedError, MalformedSubmissionError, VocabPathError
from vocabpath.infrastructure.access.routers import access
from vocabpath.infrastructure.curriculum.routers import areas, learning_path
from vocabpath.infrastructure.progression.routers import attempts

settings = get_settings()
configure_logging(settings.ENVIRONMENT, settings.LOG_LEVEL)
logger = structlog.get_logger(__name__)


@asynccontextmanager
async def lifespan(_app: FastAPI) -> AsyncGenerator[None, None]:
    """Initialize the database engine on startup and dispose it on shutdown."""
    initialize_database(settings)
    logger.info("application_started", environment=settings.ENVIRONMENT, version=settings.VERSION)
    yield
    dispose_engine()
    logger.info("application_stopped")


app = FastAPI(
    title=settings.PROJECT_NAME,
    version=settings.VERSION,
    description="Learner progression, assessment and access engine",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(VocabPathError)
async def vocabpath_error_handler(_request: Request, exc: VocabPathError) -> JSONResponse:
    """Render application errors with their status code."""
    content: dict[str, object] = {"detail": exc.message}
    if isinstance(exc, AccessDeniedError):
        content["reason"] = exc.reason
    if isinstance(exc, MalformedSubmissionError) and exc.question_id is not None:
        content["question_id"] = exc.question_id
    if exc.status_code >= status.HTTP_500_INTERNAL_SERVER_ERROR:
        logger.error("request_failed", error=exc.message, error_type=type(exc).__name__)
    return JSONResponse(status_code=exc.status_code, content=content)


@app.exception_handler(DomainError)
async def domain_error_handler(_request: Request, exc: DomainError) -> JSONResponse:
    """Render invariant violations as bad requests."""
    return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content={"detail": exc.message})


app.include_router(learning_path.router, prefix=settings.API_V1_PREFIX)
app.include_router(areas.router, prefix=settings.API_V1_PREFIX)
app.include_router(attempts.router, prefix=settings.API_V1_PREFIX)
app.include_router(access.router, prefix=settings.API_V1_PREFIX)


@app.get("/")
async def root() -> dict[str, str]:
    """Root endpoint."""
    return {"message": f"{settings.PROJECT_NAME} is running", "version": settings.VERSION}


@app.get("/health")
async def health() -> dict[str, str]:
    """Health check endpoint."""
    return {"status": "healthy"}
