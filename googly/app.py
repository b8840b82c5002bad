"""FastAPI 앱 팩토리

uvicorn googly.app:app
"""
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from googly.api import health_router, search_router
from googly.core.config import settings
from googly.core.logging import logger
from googly.crawlers.http_client import shutdown_shared_http_client
from googly.engines import engine_names


@asynccontextmanager
async def lifespan(app: FastAPI):
    """공유 HTTP 세션은 첫 요청 때 열리고 종료 시 닫힙니다."""
    logger.info(
        f"[APP] Serving engines={engine_names()} "
        f"(engine deadline {settings.crawler_engine_timeout_s}s, page cap {settings.crawler_max_pages})"
    )
    yield
    logger.info("[APP] Closing shared HTTP client")
    await shutdown_shared_http_client()


def create_app() -> FastAPI:
    app = FastAPI(
        title=settings.api_title,
        description=settings.api_description,
        version=settings.api_version,
        lifespan=lifespan,
    )

    # 검색 API는 읽기 전용이라 GET/POST만 허용
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.api_cors_origin_list,
        allow_methods=["GET", "POST"],
        allow_headers=["*"],
    )

    app.include_router(health_router)
    app.include_router(search_router)
    return app


app = create_app()
