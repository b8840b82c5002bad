"""Crawl Session - single-engine pagination state machine

States:
    INIT -> FETCHING -> PARSING -> (FETCHING | DONE | FAILED)

- INIT: build the first-page URL, pick the session user agent
- FETCHING: one GET; transport error or non-2xx -> FAILED
- PARSING: collect results in document order, then follow the first
  pagination control while the page limit allows it; a target that was
  already fetched (including redirect targets) ends the session as DONE

Pages are fetched strictly one after another (page k+1 is only known after
page k has been parsed). There are no retries: one failed request ends the
session.
"""

from enum import Enum
from time import time
from typing import Optional

from googly.core.config import settings
from googly.core.exceptions import FetchFailedException
from googly.core.logging import logger, sanitize_for_log
from googly.crawlers.document import Document
from googly.crawlers.http_client import PageFetcher, default_headers

from .adapter import EngineAdapter
from .options import SearchOptions
from .result import EngineOutcome, Result
from .user_agent import UserAgentGenerator, resolve_user_agent


class CrawlState(str, Enum):
    """크롤 세션 상태"""

    INIT = "init"
    FETCHING = "fetching"
    PARSING = "parsing"
    DONE = "done"
    FAILED = "failed"


TERMINAL_STATES = (CrawlState.DONE, CrawlState.FAILED)


class CrawlSession:
    """엔진 1개에 대한 페이지네이션 크롤

    Usage:
        session = CrawlSession(GOOGLE, "rust ownership", SearchOptions(pages=2), fetcher)
        outcome = await session.run()
    """

    def __init__(
        self,
        adapter: EngineAdapter,
        query: str,
        options: SearchOptions,
        fetcher: PageFetcher,
        ua_generator: Optional[UserAgentGenerator] = None,
        max_pages: Optional[int] = None,
        request_timeout_s: Optional[float] = None,
    ):
        self.adapter = adapter
        self.query = query
        self.options = options
        self.fetcher = fetcher
        self.ua_generator = ua_generator or UserAgentGenerator()
        self.max_pages = max_pages or settings.crawler_max_pages
        self.request_timeout_s = request_timeout_s or settings.crawler_http_timeout_s

        self.state = CrawlState.INIT
        self.page = 1
        self.results: list[Result] = []
        self.pages_fetched = 0
        self.status_code: Optional[int] = None
        self.error_message: Optional[str] = None
        self.user_agent = ""
        self.url = ""
        self._visited: set[str] = set()
        self._document: Optional[Document] = None
        self._started_at: Optional[float] = None

    @property
    def elapsed_ms(self) -> float:
        if self._started_at is None:
            return 0.0
        return (time() - self._started_at) * 1000

    async def run(self) -> EngineOutcome:
        """종료 상태(DONE/FAILED)에 도달할 때까지 상태 전이"""
        self._started_at = time()
        while self.state not in TERMINAL_STATES:
            if self.state == CrawlState.INIT:
                self._init()
            elif self.state == CrawlState.FETCHING:
                await self._fetch()
            elif self.state == CrawlState.PARSING:
                self._parse()
        return self.outcome()

    def outcome(self) -> EngineOutcome:
        if self.state == CrawlState.FAILED:
            return EngineOutcome.failed(
                engine=self.adapter.name,
                status_code=self.status_code,
                error=self.error_message or "request failed",
                pages_fetched=self.pages_fetched,
                elapsed_ms=self.elapsed_ms,
                user_agent=self.user_agent,
            )
        return EngineOutcome.done(
            engine=self.adapter.name,
            results=self.results,
            pages_fetched=self.pages_fetched,
            elapsed_ms=self.elapsed_ms,
            user_agent=self.user_agent,
            status_code=self.status_code,
        )

    def _init(self) -> None:
        self.user_agent = resolve_user_agent(
            self.options.user_agent, self.adapter.browser_config, self.ua_generator
        )
        self.url = self.adapter.search_url(self.query, self.options)
        self._diag(f"[CRAWL] {self.adapter.name}: user agent {self.user_agent}")
        self.state = CrawlState.FETCHING

    async def _fetch(self) -> None:
        self._diag(f"[CRAWL] {self.adapter.name}: page {self.page} GET {sanitize_for_log(self.url, 200)}")
        headers = default_headers(self.user_agent, self.options.lang)
        try:
            response = await self.fetcher.get_text(
                self.url, headers=headers, timeout_s=self.request_timeout_s
            )
        except FetchFailedException as e:
            self._fail(e.status_code, str(e))
            return

        self._visited.add(self.url)
        self.pages_fetched += 1
        self.status_code = response.status_code
        if not response.ok:
            self._fail(response.status_code, f"GET {self.url} returned status {response.status_code}")
            return

        if response.url:
            self._visited.add(response.url)
        self._document = Document(response.text, url=response.url or self.url)
        self.state = CrawlState.PARSING

    def _parse(self) -> None:
        document = self._document
        self._document = None

        matched = document.css(self.adapter.result_selector)
        for element in matched:
            self.results.append(self.adapter.extract_result(element))
        self._diag(f"[CRAWL] {self.adapter.name}: page {self.page} -> {len(matched)} results")

        control = document.css_first(self.adapter.pagination_selector)
        if control is None:
            self._diag(f"[CRAWL] {self.adapter.name}: no pagination control on page {self.page}")
            self.state = CrawlState.DONE
            return

        if not self._may_continue():
            self.state = CrawlState.DONE
            return

        next_url = self.adapter.pagination_url(self.page + 1, self.options, control)
        if not next_url:
            logger.debug(f"[CRAWL] {self.adapter.name}: pagination control without target on page {self.page}")
            self.state = CrawlState.DONE
            return
        if next_url in self._visited:
            logger.debug(
                f"[CRAWL] {self.adapter.name}: page {self.page + 1} target already fetched "
                f"({sanitize_for_log(next_url, 200)})"
            )
            self.state = CrawlState.DONE
            return

        self.page += 1
        self.url = next_url
        self.state = CrawlState.FETCHING

    def _may_continue(self) -> bool:
        if not self.options.unlimited:
            return self.page < self.options.pages
        if self.page >= self.max_pages:
            logger.warning(
                f"[CRAWL] {self.adapter.name}: stopping unlimited crawl at page cap {self.max_pages}"
            )
            return False
        return True

    def _fail(self, status_code: int, message: str) -> None:
        self.status_code = status_code
        self.error_message = message
        self.state = CrawlState.FAILED
        logger.warning(f"[CRAWL] {self.adapter.name}: failed with status {status_code}")
        if self.options.verbose:
            logger.info(
                f"[CRAWL] {self.adapter.name}: failing request {sanitize_for_log(self.url, 300)} "
                f"(user agent: {self.user_agent}): {message}"
            )

    def _diag(self, message: str) -> None:
        if self.options.verbose:
            logger.info(message)
        else:
            logger.debug(message)
