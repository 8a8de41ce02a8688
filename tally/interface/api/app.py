"""FastAPI application."""

from contextlib import asynccontextmanager

from dishka import AsyncContainer
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from tally import __version__
from tally.config import Settings
from tally.interface.api.errors import register_error_handlers
from tally.interface.api.routes import health, ratings, votes
from tally.util.di.container import create_container, setup_di
from tally.util.observability import instrument_fastapi, instrument_httpx


@asynccontextmanager
async def lifespan(app: FastAPI):
    yield
    # Closes the document store (and the GitHub HTTP client, if any)
    await app.state.dishka_container.close()


def create_app(container: AsyncContainer | None = None) -> FastAPI:
    """Create FastAPI application.

    Note: Logfire should be configured before calling this function.
    In production, start_app.py handles this.

    Args:
        container: DI container to use; defaults to the production container
    """
    settings = Settings()

    instrument_httpx()

    app_instance = FastAPI(
        title="Tally API",
        description="Item ratings from +1/-1 votes with a per-voter cooldown",
        version=__version__,
        lifespan=lifespan,
    )

    instrument_fastapi(app_instance)

    # Allow credentials only with an explicit origin list
    allow_all = "*" in settings.cors.allow_origins
    app_instance.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors.allow_origins,
        allow_credentials=not allow_all,
        allow_methods=["GET", "POST", "OPTIONS"],
        allow_headers=["*"],
        max_age=600,  # Cache preflight requests for 10 minutes
    )

    setup_di(app_instance, container or create_container())

    register_error_handlers(app_instance)

    app_instance.include_router(health.router)
    app_instance.include_router(ratings.router)
    app_instance.include_router(votes.router)

    return app_instance


# Create app instance for uvicorn
# Note: Logfire must be configured before this module is imported
app = create_app()
