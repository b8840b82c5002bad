"""전역 테스트 설정

역할:
- 테스트 환경 구성
- 공통 Fake 주입 (네트워크 없는 PageFetcher, 테스트용 엔진 어댑터)
"""

from __future__ import annotations

import asyncio
import os
import sys
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

import pytest


# googly 설정은 import 시점에 읽으므로 import 전에 지정
os.environ["ENVIRONMENT"] = "test"
os.environ["GOOGLY_LOG_LEVEL"] = "INFO"

# 프로젝트 루트를 경로에 추가
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from googly.core.exceptions import FetchFailedException  # noqa: E402
from googly.crawlers.http_client import FetchResponse  # noqa: E402
from tests.fixtures.pages import make_adapter  # noqa: E402


@dataclass
class FakeFetcher:
    """URL별로 준비된 HTML을 돌려주는 PageFetcher

    - pages: URL -> (status, html)
    - default: pages에 없는 URL의 응답 (없으면 404)
    - fail_urls: 응답 없이 실패하는 URL (status_code=0)
    - delay_s: 요청마다 대기 시간 (동시성/타임아웃 테스트용)
    """

    pages: dict[str, tuple[int, str]] = field(default_factory=dict)
    default: Optional[tuple[int, str]] = None
    fail_urls: set[str] = field(default_factory=set)
    delay_s: float = 0.0
    requests: list[tuple[str, dict[str, str]]] = field(default_factory=list)
    in_flight: int = 0
    max_in_flight: int = 0

    @property
    def urls(self) -> list[str]:
        return [url for url, _ in self.requests]

    async def get_text(self, url: str, *, headers: dict[str, str], timeout_s: float) -> FetchResponse:
        _ = timeout_s
        self.requests.append((url, dict(headers)))
        self.in_flight += 1
        self.max_in_flight = max(self.max_in_flight, self.in_flight)
        try:
            if self.delay_s:
                await asyncio.sleep(self.delay_s)
            if url in self.fail_urls:
                raise FetchFailedException(url, 0, reason="ConnectError")
            status, html = self.pages.get(url, self.default or (404, ""))
            return FetchResponse(status_code=status, text=html, url=url)
        finally:
            self.in_flight -= 1


@pytest.fixture
def fake_fetcher() -> FakeFetcher:
    return FakeFetcher()


@pytest.fixture
def engine_x():
    return make_adapter("x", "https://x.example")


@pytest.fixture
def engine_y():
    return make_adapter("y", "https://y.example")
