"""FastAPI application."""

from dishka import AsyncContainer
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from watchearn.config import Settings
from watchearn.interface.api.errors import register_error_handlers
from watchearn.interface.api.routes import auth, balance, health, videos, withdrawals
from watchearn.util.di.container import create_container, setup_di
from watchearn.util.observability import instrument_fastapi


def create_app(container: AsyncContainer | None = None) -> FastAPI:
    """Create FastAPI application.

    Logfire should be configured before calling this function:
    start_app.py does it in production, conftest.py in tests.

    Args:
        container: DI container to use; the production container if omitted
    """
    settings = Settings()

    app_instance = FastAPI(
        title="WatchEarn API",
        description="Backend API for WatchEarn - vote on videos, earn rewards, withdraw your balance",
        version="0.1.0",
    )

    instrument_fastapi(app_instance)

    app_instance.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["GET", "POST", "OPTIONS"],
        allow_headers=["Authorization", "Content-Type", "Accept", "Origin"],
        max_age=600,
    )

    setup_di(app_instance, container or create_container())

    app_instance.include_router(health.router)
    app_instance.include_router(auth.router)
    app_instance.include_router(videos.router)
    app_instance.include_router(balance.router)
    app_instance.include_router(withdrawals.router)

    register_error_handlers(app_instance)

    return app_instance


# Module-level app for uvicorn; Logfire must be configured before import
app = create_app()
