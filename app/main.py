# app/main.py

import logging
import sys
import time
from contextlib import asynccontextmanager
from typing import Optional

import uvicorn
from fastapi import FastAPI, Request
from fastapi.concurrency import run_in_threadpool
from fastapi.middleware.cors import CORSMiddleware
from sqlalchemy.exc import SQLAlchemyError

from app.core.config import Settings, get_settings, settings as default_settings
from app.core.errors import register_exception_handlers
from app.api.v1.api import api_router
from app.db.init_db import check_connection, init_db
from app.db.session import (
    SQLALCHEMY_DATABASE_URL,
    build_engine,
    engine as default_engine,
    get_db,
    make_session_dependency,
    make_session_factory,
)

logger = logging.getLogger(__name__)


def configure_logging(settings: Settings) -> None:
    logging.basicConfig(
        level=logging.DEBUG if settings.debug else logging.INFO,
        format="%(asctime)s  %(levelname)-8s  %(name)s - %(message)s",
        stream=sys.stdout,
    )


@asynccontextmanager
async def lifespan(app: FastAPI):
    engine = app.state.engine
    try:
        await run_in_threadpool(check_connection, engine)
        await run_in_threadpool(init_db, engine)
    except SQLAlchemyError:
        logger.exception("Unable to connect to the database")
        raise
    logger.info("Application ready to accept requests.")
    yield
    if engine is not default_engine:
        engine.dispose()


def create_application(settings: Optional[Settings] = None) -> FastAPI:
    settings = settings or default_settings

    app = FastAPI(
        title=settings.PROJECT_NAME,
        version=settings.VERSION,
        lifespan=lifespan,
    )

    # Everything request-scoped reads these settings, not the module default.
    app.dependency_overrides[get_settings] = lambda: settings
    if settings.sqlalchemy_database_url == SQLALCHEMY_DATABASE_URL:
        app.state.engine = default_engine
    else:
        app.state.engine = build_engine(settings.sqlalchemy_database_url)
        app.dependency_overrides[get_db] = make_session_dependency(
            make_session_factory(app.state.engine)
        )

    # ---------- CORS ----------
    origins = settings.backend_cors_origins or [
        "http://localhost:5173",
        "http://127.0.0.1:5173",
    ]

    app.add_middleware(
        CORSMiddleware,
        allow_origins=origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.middleware("http")
    async def log_requests(request: Request, call_next):
        start = time.perf_counter()
        response = await call_next(request)
        elapsed = time.perf_counter() - start
        logger.debug(
            "%s %s -> %s in %.3fs",
            request.method,
            request.url.path,
            response.status_code,
            elapsed,
        )
        return response

    # ---------- ERRORS ----------
    register_exception_handlers(app)

    # ---------- ROUTERS ----------
    @app.get("/healthz", tags=["health"])
    def healthz():
        return {"status": "ok"}

    app.include_router(api_router, prefix=settings.api_prefix)

    return app


app = create_application()


def run() -> None:
    configure_logging(default_settings)
    uvicorn.run(
        app,
        host=default_settings.host,
        port=default_settings.port,
        log_level="debug" if default_settings.debug else "info",
    )


if __name__ == "__main__":
    run()
