"""Search Routes (Engine Layer)

HTTP Layer는 요청을 SearchOptions로 바꿔 SearchOrchestrator에 위임하는
단순한 Translator 역할만 수행합니다.
"""

from typing import Optional

from fastapi import APIRouter, Depends

from googly.core.exceptions import GooglyException
from googly.core.logging import logger, sanitize_for_log
from googly.engine import SearchOptions, SearchOrchestrator, SearchResponse
from googly.engines import ENGINES
from googly.schemas.search_schema import (
    EngineInfo,
    EngineReport,
    ResultItem,
    SearchData,
    SearchRequest,
    SearchResponseModel,
)

router = APIRouter(prefix="/api/v1", tags=["search"])

# 싱글톤 오케스트레이터
_orchestrator: Optional[SearchOrchestrator] = None


def get_orchestrator() -> SearchOrchestrator:
    """SearchOrchestrator 싱글톤"""
    global _orchestrator
    if _orchestrator is None:
        _orchestrator = SearchOrchestrator()
    return _orchestrator


def to_response_model(response: SearchResponse) -> SearchResponseModel:
    if response.all_failed:
        status = "error"
        message = "모든 엔진의 요청이 실패했습니다."
    elif response.failed_engines:
        status = "partial"
        message = f"{len(response.failed_engines)}개 엔진이 실패했습니다."
    else:
        status = "success"
        message = f"{len(response.results)}건을 찾았습니다."

    return SearchResponseModel(
        status=status,
        data=SearchData(
            query=response.query,
            results=[
                ResultItem(title=r.title, link=r.link, description=r.description)
                for r in response.results
            ],
            engines=[
                EngineReport(
                    engine=o.engine,
                    status=o.status.value,
                    result_count=len(o.results),
                    pages_fetched=o.pages_fetched,
                    status_code=o.status_code,
                    error_message=o.error_message,
                    elapsed_ms=o.elapsed_ms,
                )
                for o in response.outcomes
            ],
        ),
        message=message,
        error_code="ALL_ENGINES_FAILED" if status == "error" else None,
    )


@router.post("/search", response_model=SearchResponseModel)
async def search(
    request: SearchRequest,
    orchestrator: SearchOrchestrator = Depends(get_orchestrator),
):
    """멀티 엔진 검색 API

    Flow:
        1. 요청 검증 (pydantic)
        2. SearchOptions 생성
        3. Engine에 위임 (엔진별 크롤 동시 실행 → 병합)
        4. 결과를 HTTP Response로 변환
    """
    logger.info(f"[API] Search request: query='{sanitize_for_log(request.query)}', engines={request.engines}")

    try:
        options = SearchOptions(
            lang=request.lang,
            pages=request.pages,
            date_from=request.date_from,
            date_to=request.date_to,
            timerange=request.timerange,
            user_agent=request.user_agent,
        )
        response = await orchestrator.search(request.query, options, request.engines)
    except GooglyException as e:
        logger.warning(f"[API] Search rejected: {e}")
        return SearchResponseModel(
            status="error",
            data=None,
            message=e.message,
            error_code=e.error_code,
        )

    return to_response_model(response)


@router.get("/engines", response_model=list[EngineInfo])
async def list_engines():
    """사용 가능한 엔진 목록"""
    return [
        EngineInfo(
            name=adapter.name,
            base_url=adapter.base_url,
            browser_families=[f.value for f in adapter.browser_config.enabled_families()],
            supports_date_range=adapter.supports_date_range,
        )
        for adapter in ENGINES.values()
    ]
