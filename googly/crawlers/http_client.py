"""공유 HTTP 클라이언트 (curl_cffi)

- 크롤 세션마다 AsyncSession을 만들면 TLS/커넥션 오버헤드가 커지므로
  프로세스 단위로 세션을 재사용합니다. User-Agent는 요청마다 헤더로 지정합니다.
- 응답 압축은 끕니다(Accept-Encoding: identity).
- 종료 시 close()로 정리합니다.
"""

from __future__ import annotations

import asyncio
from dataclasses import dataclass
from typing import Optional, Dict, Protocol

from curl_cffi.requests import AsyncSession
from curl_cffi.requests.exceptions import RequestException

from googly.core.config import settings
from googly.core.exceptions import FetchFailedException
from googly.core.logging import logger, sanitize_for_log


@dataclass(frozen=True)
class FetchResponse:
    status_code: int
    text: str
    url: str

    @property
    def ok(self) -> bool:
        return 200 <= self.status_code < 300


class PageFetcher(Protocol):
    """크롤 세션이 사용하는 페이지 요청 인터페이스"""

    async def get_text(
        self,
        url: str,
        *,
        headers: Dict[str, str],
        timeout_s: float,
    ) -> FetchResponse:
        """GET 요청

        Raises:
            FetchFailedException: 응답을 받지 못한 경우 (status_code=0)
        """
        ...


def default_headers(user_agent: str, lang: str) -> Dict[str, str]:
    return {
        "User-Agent": user_agent,
        "Accept": "text/html,application/xhtml+xml,application/xml;q=0.9,*/*;q=0.8",
        "Accept-Language": f"{lang},en;q=0.8" if lang and lang != "en" else "en-US,en;q=0.9",
        "Accept-Encoding": "identity",
    }


class SharedHttpClient:
    def __init__(self) -> None:
        self._lock = asyncio.Lock()
        self._session: Optional[AsyncSession] = None

    async def _ensure_session(self) -> AsyncSession:
        async with self._lock:
            if self._session is not None:
                return self._session
            self._session = AsyncSession(
                impersonate=settings.crawler_http_impersonate or None,
                allow_redirects=True,
                max_clients=settings.crawler_http_max_clients,
                trust_env=False,
            )
            return self._session

    async def get_text(
        self,
        url: str,
        *,
        headers: Dict[str, str],
        timeout_s: float,
    ) -> FetchResponse:
        sess = await self._ensure_session()
        try:
            resp = await sess.get(
                url,
                headers=headers,
                timeout=timeout_s,
                allow_redirects=True,
            )
        except RequestException as e:
            logger.info(f"[HTTP_CLIENT] GET failed: {sanitize_for_log(url)} {type(e).__name__}: {e!r}")
            raise FetchFailedException(url, 0, reason=type(e).__name__) from e

        status = getattr(resp, "status_code", 0) or 0
        text = getattr(resp, "text", "") or ""
        final_url = str(getattr(resp, "url", "") or url)
        return FetchResponse(status_code=status, text=text, url=final_url)

    async def close(self) -> None:
        async with self._lock:
            if self._session is None:
                return
            session, self._session = self._session, None
            try:
                await session.close()
            except RequestException as e:
                logger.warning(f"[HTTP_CLIENT] close failed: {type(e).__name__}: {e!r}")


_shared_http_client = SharedHttpClient()


def get_shared_http_client() -> SharedHttpClient:
    return _shared_http_client


async def shutdown_shared_http_client() -> None:
    await _shared_http_client.close()
