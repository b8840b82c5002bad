"""헬스 체크 엔드포인트"""
from datetime import datetime

from fastapi import APIRouter

from googly import __version__
from googly.engines import engine_names
from googly.schemas.search_schema import HealthResponse

router = APIRouter(tags=["health"])


@router.get("/health", response_model=HealthResponse)
async def health_check():
    """
    헬스 체크 엔드포인트

    - 서버 상태
    - 등록된 엔진 목록
    """
    return HealthResponse(
        status="ok",
        timestamp=datetime.now(),
        version=__version__,
        engines=engine_names(),
    )


@router.get("/")
async def root():
    """루트 엔드포인트"""
    return {
        "service": "googly",
        "version": __version__,
        "docs": "/docs"
    }
