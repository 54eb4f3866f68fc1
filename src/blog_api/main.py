"""
Application factory and entrypoint.

    uvicorn blog_api.main:app          # or: blog-api (console script)

`create_app()` wires the process-level concerns in order: logging first (so every
later step can log), then the request-id middleware, the routers and the exception
handlers. The engine is created lazily on first use and disposed on shutdown.
"""

import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI

from blog_api.api.v1 import api_router
from blog_api.api.v1.error_handlers import register_exception_handlers
from blog_api.config import Settings, get_settings
from blog_api.core.logging import RequestIDMiddleware, setup_logging
from blog_api.database.base import Base
from blog_api.database.session import dispose_engine, get_engine
import blog_api.models  # noqa: F401  (registers tables on Base.metadata)

logger = logging.getLogger(__name__)


def create_app(settings: Settings | None = None) -> FastAPI:
    settings = settings or get_settings()
    setup_logging(settings)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        if settings.DB_CREATE_TABLES:
            async with get_engine().begin() as conn:
                await conn.run_sync(Base.metadata.create_all)
            logger.info("app.startup.tables_created")
        logger.info("app.startup", extra={"env": settings.ENV})
        yield
        await dispose_engine()
        logger.info("app.shutdown")

    app = FastAPI(title="blog-api", lifespan=lifespan)
    app.add_middleware(RequestIDMiddleware)
    app.include_router(api_router)
    register_exception_handlers(app)
    return app


app = create_app()


def run() -> None:
    settings = get_settings()
    # log_config=None: keep the dictConfig installed by setup_logging
    uvicorn.run("blog_api.main:app", host=settings.HOST, port=settings.PORT, log_config=None)
