import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from vetportal.config import get_settings
from vetportal.infrastructure.database import engine, initialize_database
from vetportal.infrastructure.http import BackendUnavailableError
from vetportal.interfaces.api.routes import register_routes
from vetportal.logging_config import configure_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Create the key-value table on startup and release connections on shutdown."""

    initialize_database()
    yield
    engine.dispose()


async def backend_unavailable_handler(request: Request, exc: BackendUnavailableError) -> JSONResponse:
    logger.error("Backend request failed while serving %s: %s", request.url.path, exc)
    return JSONResponse(
        status_code=status.HTTP_502_BAD_GATEWAY,
        content={"detail": "The clinic backend is unavailable"},
    )


def create_app() -> FastAPI:
    """Create and configure the portal FastAPI application."""

    settings = get_settings()
    configure_logging(settings.log_level)

    app = FastAPI(title="Vet Portal", lifespan=lifespan)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.add_exception_handler(BackendUnavailableError, backend_unavailable_handler)

    register_routes(app)
    return app


app = create_app()
