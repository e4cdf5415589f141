from __future__ import annotations

from contextlib import asynccontextmanager

import httpx
from fastapi import FastAPI
from fastapi.middleware.gzip import GZipMiddleware

from lobo_irl.api.router import api_router
from lobo_irl.client import LoboClient
from lobo_irl.core.config import Settings, load_settings
from lobo_irl.logging_config import configure_logging


def create_app(
    settings: Settings | None = None,
    *,
    transport: httpx.AsyncBaseTransport | None = None,
) -> FastAPI:
    settings = settings or load_settings()
    configure_logging(settings.log_level)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        app.state.settings = settings
        app.state.lobo_client = LoboClient.from_settings(settings, transport=transport)
        yield
        await app.state.lobo_client.aclose()

    docs_enabled = settings.docs_enabled and not settings.is_production
    app = FastAPI(
        title="LOBO Indian River Lagoon API",
        version="0.1.0",
        debug=settings.debug,
        docs_url="/docs" if docs_enabled else None,
        redoc_url=None,
        openapi_url="/openapi.json" if docs_enabled else None,
        lifespan=lifespan,
    )
    app.state.settings = settings

    app.add_middleware(GZipMiddleware, minimum_size=1024)

    @app.get("/", tags=["meta"])
    def root():
        return {"name": "lobo-irl", "status": "ok"}

    app.include_router(api_router)
    return app
