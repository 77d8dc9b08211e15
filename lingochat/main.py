"""FastAPI application entrypoint.

All routes prefixed /v1. Auto-generated OpenAPI docs at /docs.

One httpx.AsyncClient, one ErrorBanner and one ConversationOrchestrator are
created during the lifespan and stored on app.state for injection via
Depends(). The conversation lives for the process lifetime only.
"""

from contextlib import asynccontextmanager
import logging
from typing import AsyncGenerator

import httpx
import structlog
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from lingochat import __version__
from lingochat.api.v1.chat import router as chat_router
from lingochat.api.v1.health import router as health_router
from lingochat.api.v1.languages import router as languages_router
from lingochat.core.config import Settings, settings
from lingochat.core.environment import EnvironmentValidator
from lingochat.core.exceptions import LingoChatError
from lingochat.services.conversation.orchestrator import ConversationOrchestrator
from lingochat.services.conversation.state import ConversationState
from lingochat.services.http.errors import ErrorBanner
from lingochat.services.http.executor import TimedRequestExecutor
from lingochat.services.language.google_translate import GoogleTranslateAdapter
from lingochat.services.llm.summarizer import ChatCompletionSummarizer


def _configure_logging() -> None:
    level = getattr(logging, settings.log_level.upper(), logging.INFO)
    structlog.configure(
        wrapper_class=structlog.make_filtering_bound_logger(level),
        cache_logger_on_first_use=True,
    )
    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)


_configure_logging()

logger = structlog.get_logger(__name__)


def build_orchestrator(
    app_settings: Settings,
    client: httpx.AsyncClient,
) -> tuple[ConversationOrchestrator, TimedRequestExecutor]:
    """Wire the executor, adapters and state into an orchestrator."""
    validator = EnvironmentValidator(app_settings)
    banner = ErrorBanner()
    executor = TimedRequestExecutor(
        client=client,
        validator=validator,
        default_timeout_ms=app_settings.request_timeout_ms,
    )
    orchestrator = ConversationOrchestrator(
        language=GoogleTranslateAdapter(executor, banner, app_settings),
        summarizer=ChatCompletionSummarizer(executor, banner, app_settings),
        validator=validator,
        banner=banner,
        state=ConversationState(
            summarize_min_length=app_settings.summarize_min_length,
        ),
    )
    return orchestrator, executor


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application startup and shutdown lifecycle.

    Missing credentials are only logged here; every request path fails
    fast on them through the EnvironmentValidator.
    """
    # --- Startup ---
    logger.info("app_startup", env=settings.app_env)

    missing = EnvironmentValidator(settings).missing_keys()
    if missing:
        logger.warning("app_credentials_missing", missing_keys=sorted(missing))

    orchestrator, executor = build_orchestrator(settings, httpx.AsyncClient())
    app.state.orchestrator = orchestrator

    logger.info("app_services_ready")
    yield

    # --- Shutdown ---
    logger.info("app_shutdown")
    await executor.aclose()


app = FastAPI(
    title="LingoChat API",
    description="Chat transcript with language detection, summaries and translation.",
    version=__version__,
    lifespan=lifespan,
)

# CORS: permissive for development only
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"] if not settings.is_production else [],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(LingoChatError)
async def lingochat_error_handler(request: Request, exc: LingoChatError) -> JSONResponse:
    """Structured error response for all LingoChat exceptions."""
    return JSONResponse(
        status_code=exc.status_code,
        content=exc.to_dict(),
    )


# Mount all v1 routers
app.include_router(health_router, prefix="/v1")
app.include_router(languages_router, prefix="/v1")
app.include_router(chat_router, prefix="/v1")


def run() -> None:
    """Console entrypoint: serve the API with uvicorn."""
    import uvicorn

    uvicorn.run(
        "lingochat.main:app",
        host="0.0.0.0",
        port=8000,
        log_level=settings.log_level.lower(),
    )
