"""Three FastAPI applications sharing one code base.

    uvicorn movies_api.main:movie_info_app --port 8080
    uvicorn movies_api.main:reviews_app --port 8081
    uvicorn movies_api.main:movies_app --port 8082
"""
import logging

from fastapi import APIRouter, FastAPI

from contextlib import asynccontextmanager
from movies_api.db.mongo import ping, close_client
from movies_api.clients.http import get_http_client, close_http_client

from movies_api.core.logger import setup_json_logging, shutdown_logging
from movies_api.core.sentry import init_sentry
from movies_api.core.config import settings
from movies_api.core.middleware import RequestContextMiddleware

from movies_api.api.http_utils import register_error_handlers
from movies_api.api.v1.movie_infos import router as movie_infos_router
from movies_api.api.v1.reviews import router as reviews_router
from movies_api.api.v1.movies import router as movies_router
from movies_api.api.v1.debug import include_debug_routes


def _observability(service: str) -> None:
    # логи до всего
    setup_json_logging(service=service)
    init_sentry(settings.sentry_dsn, environment=settings.env,
                server_name=service)


def mongo_lifespan(service: str):
    @asynccontextmanager
    async def lifespan(app: FastAPI):
        _observability(service)
        # прогреваем коннект, но не падаем, если Mongo ещё не поднялась
        await ping()
        try:
            yield
        finally:
            await close_client()
            shutdown_logging()
    return lifespan


def http_lifespan(service: str):
    @asynccontextmanager
    async def lifespan(app: FastAPI):
        _observability(service)
        await get_http_client()
        try:
            yield
        finally:
            await close_http_client()
            shutdown_logging()
    return lifespan


def create_app(title: str, router: APIRouter, lifespan) -> FastAPI:
    app = FastAPI(title=title, lifespan=lifespan)

    # наш trace_id + access JSON
    app.add_middleware(RequestContextMiddleware)
    register_error_handlers(app)
    include_debug_routes(app)

    @app.get("/health")
    def health():
        return {"status": "ok", "service": title}

    app.include_router(router)
    return app


# приглушим штатный uvicorn-access, чтобы не было дублей
logging.getLogger("uvicorn.access").setLevel("WARNING")

movie_info_app = create_app("Movies Info Service", movie_infos_router,
                            mongo_lifespan("movies_info_service"))
reviews_app = create_app("Movies Review Service", reviews_router,
                         mongo_lifespan("movies_review_service"))
movies_app = create_app("Movies Service", movies_router,
                        http_lifespan("movies_service"))
