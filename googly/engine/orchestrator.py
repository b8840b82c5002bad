"""Search Orchestrator - Main Engine Entry Point

Coordinates the multi-engine search:
1. Resolve requested engines from the adapter registry
2. Fan out one CrawlSession per engine (asyncio.gather)
3. Join on every session; each slot holds its own EngineOutcome
4. Merge successful result lists (round-robin + dedup)

A failure or deadline in one engine only affects that engine's slot; sibling
sessions keep running to completion.
"""

import asyncio
from asyncio import TimeoutError as AsyncTimeoutError
from typing import Mapping, Optional, Sequence

from googly.core.config import settings
from googly.core.exceptions import InvalidQueryException, UnknownEngineException
from googly.core.logging import logger, sanitize_for_log
from googly.crawlers.http_client import PageFetcher, get_shared_http_client

from .adapter import EngineAdapter
from .merger import merge_results
from .options import SearchOptions
from .result import EngineOutcome, EngineStatus, SearchResponse
from .session import CrawlSession
from .user_agent import UserAgentGenerator


class SearchOrchestrator:
    """검색 엔진 오케스트레이터

    Usage:
        orchestrator = SearchOrchestrator()
        response = await orchestrator.search("rust ownership", SearchOptions(pages=2), ["google", "ddg"])
    """

    def __init__(
        self,
        registry: Optional[Mapping[str, EngineAdapter]] = None,
        fetcher: Optional[PageFetcher] = None,
        ua_generator: Optional[UserAgentGenerator] = None,
        engine_timeout_s: Optional[float] = None,
        max_pages: Optional[int] = None,
    ):
        """
        Args:
            registry: 엔진 이름 -> 어댑터 (기본값: googly.engines.ENGINES)
            fetcher: 페이지 요청 구현 (기본값: 공유 curl_cffi 클라이언트)
            ua_generator: User-Agent 생성기
            engine_timeout_s: 엔진 1개의 크롤 데드라인 (초)
            max_pages: pages=-1 크롤의 페이지 상한
        """
        if registry is None:
            from googly.engines import ENGINES
            registry = ENGINES

        self.registry = registry
        self.fetcher = fetcher or get_shared_http_client()
        self.ua_generator = ua_generator or UserAgentGenerator()
        self.engine_timeout_s = engine_timeout_s or settings.crawler_engine_timeout_s
        self.max_pages = max_pages or settings.crawler_max_pages

    def resolve(self, engines: Sequence[str]) -> list[EngineAdapter]:
        """엔진 이름 -> 어댑터 (요청 순서 유지, 중복 이름은 첫 번째만)

        Raises:
            InvalidQueryException: 엔진 목록이 비어 있는 경우
            UnknownEngineException: 레지스트리에 없는 엔진
        """
        if not engines:
            raise InvalidQueryException("at least one engine must be selected")

        adapters: list[EngineAdapter] = []
        seen: set[str] = set()
        for name in engines:
            key = (name or "").strip().lower()
            if key not in self.registry:
                raise UnknownEngineException(name, list(self.registry))
            if key in seen:
                continue
            seen.add(key)
            adapters.append(self.registry[key])
        return adapters

    async def crawl_all(
        self, query: str, options: SearchOptions, engines: Sequence[str]
    ) -> list[EngineOutcome]:
        """엔진별 크롤을 동시에 실행하고 모두 끝날 때까지 대기

        Returns:
            list[EngineOutcome]: 요청한 엔진 순서대로의 결과
        """
        if not query or not isinstance(query, str) or not query.strip():
            raise InvalidQueryException(f"invalid query: {query!r}")

        adapters = self.resolve(engines)
        logger.info(
            f"[ORCHESTRATOR] Search started: query='{sanitize_for_log(query)}', "
            f"engines={[a.name for a in adapters]}, pages={options.pages}"
        )

        outcomes = await asyncio.gather(
            *(self._run_engine(adapter, query, options) for adapter in adapters)
        )

        for outcome in outcomes:
            if outcome.is_success:
                logger.info(
                    f"[ORCHESTRATOR] {outcome.engine}: {len(outcome.results)} results "
                    f"from {outcome.pages_fetched} pages"
                )
            else:
                logger.warning(
                    f"[ORCHESTRATOR] {outcome.engine}: {outcome.status.value} "
                    f"(status_code={outcome.status_code})"
                )
        return list(outcomes)

    async def search(
        self, query: str, options: SearchOptions, engines: Sequence[str]
    ) -> SearchResponse:
        """크롤 + 병합

        실패/타임아웃 엔진은 빈 리스트로 병합됩니다.
        """
        outcomes = await self.crawl_all(query, options, engines)
        merged = merge_results([o.results if o.is_success else [] for o in outcomes])
        logger.info(f"[ORCHESTRATOR] Search completed: {len(merged)} merged results")
        return SearchResponse(query=query, results=merged, outcomes=outcomes)

    async def _run_engine(
        self, adapter: EngineAdapter, query: str, options: SearchOptions
    ) -> EngineOutcome:
        session = CrawlSession(
            adapter,
            query,
            options,
            self.fetcher,
            ua_generator=self.ua_generator,
            max_pages=self.max_pages,
        )
        try:
            return await asyncio.wait_for(session.run(), timeout=self.engine_timeout_s)
        except AsyncTimeoutError:
            logger.warning(
                f"[ORCHESTRATOR] {adapter.name}: deadline {self.engine_timeout_s}s exceeded "
                f"after {session.pages_fetched} pages"
            )
            return EngineOutcome.timeout(
                engine=adapter.name,
                timeout_s=self.engine_timeout_s,
                pages_fetched=session.pages_fetched,
                elapsed_ms=session.elapsed_ms,
                user_agent=session.user_agent,
            )
        except Exception as e:
            # 어댑터/파서 오류도 해당 엔진 슬롯에만 기록
            logger.error(
                f"[ORCHESTRATOR] {adapter.name}: crawl crashed: {type(e).__name__}: {e}",
                exc_info=True,
            )
            return EngineOutcome(
                engine=adapter.name,
                status=EngineStatus.FAILED,
                pages_fetched=session.pages_fetched,
                status_code=session.status_code,
                error_message=f"{type(e).__name__}: {e}",
                elapsed_ms=session.elapsed_ms,
                user_agent=session.user_agent,
            )
