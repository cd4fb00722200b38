"""
Application factory.

    uvicorn techhub.main:app

create_app() wires, in order: logging, the framework store (one per app,
process lifetime), the request-id middleware, the exception handlers and the
routers.
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI

from techhub.api.v1 import frameworks_router, register_exception_handlers, root_router
from techhub.config.settings import Settings, get_settings
from techhub.core.logging import RequestIDMiddleware, setup_logging, stop_queue_logging
from techhub.repositories.framework_repository import FrameworkRepository
from techhub.utils.project import get_project_version

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info(
        "app.startup",
        extra={"app_env": app.state.settings.ENV, "uniqueness_key": app.state.settings.UNIQUENESS_KEY},
    )
    yield
    logger.info("app.shutdown")
    stop_queue_logging()


def create_app(settings: Settings | None = None, *, configure_logging: bool = True) -> FastAPI:
    settings = settings or get_settings()
    if configure_logging:
        setup_logging(settings)

    app = FastAPI(
        title=settings.APP_NAME,
        version=get_project_version(),
        description="Manage technology frameworks: name, current version and descriptive metadata.",
        lifespan=lifespan,
    )
    app.state.settings = settings
    app.state.framework_repository = FrameworkRepository(policy=settings.UNIQUENESS_KEY)

    app.add_middleware(RequestIDMiddleware)
    register_exception_handlers(app)

    app.include_router(root_router)
    app.include_router(frameworks_router)
    return app


app = create_app()
