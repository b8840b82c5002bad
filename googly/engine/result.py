"""Search Result - Standardized Result Format

Result values produced by engine adapters, and the per-engine outcome that
the orchestrator joins on (one slot per requested engine).
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional

from googly.core.exceptions import EngineTimeoutException


@dataclass(frozen=True)
class Result:
    """검색 결과 1건

    추출에 실패한 필드는 None이 아니라 빈 문자열입니다.
    link는 엔진 간 병합 시 중복 제거 키로 사용됩니다.
    """

    title: str = ""
    link: str = ""
    description: str = ""

    def to_dict(self) -> dict[str, str]:
        return {"Title": self.title, "Link": self.link, "Description": self.description}


class EngineStatus(str, Enum):
    """엔진 크롤 세션의 종료 상태"""

    DONE = "done"  # 정상 종료 (결과 0건 포함)
    FAILED = "failed"  # 요청 실패 (status_code 참고)
    TIMEOUT = "timeout"  # 엔진 데드라인 초과


@dataclass
class EngineOutcome:
    """엔진 1개의 크롤 결과 (성공 또는 실패 중 하나)

    Attributes:
        engine: 엔진 이름
        status: 종료 상태
        results: 페이지 순서대로 누적된 결과 (실패 시 빈 리스트)
        pages_fetched: 요청한 페이지 수
        status_code: 마지막(실패한) 요청의 HTTP 상태 코드, 응답이 없었으면 0
        error_message: 오류 메시지
        elapsed_ms: 소요 시간 (밀리초)
        user_agent: 세션에서 사용한 User-Agent
    """

    engine: str
    status: EngineStatus
    results: list[Result] = field(default_factory=list)
    pages_fetched: int = 0
    status_code: Optional[int] = None
    error_message: Optional[str] = None
    elapsed_ms: Optional[float] = None
    user_agent: Optional[str] = None

    @property
    def is_success(self) -> bool:
        return self.status == EngineStatus.DONE

    @classmethod
    def done(
        cls, engine: str, results: list[Result], pages_fetched: int,
        elapsed_ms: float, user_agent: Optional[str] = None,
        status_code: Optional[int] = None,
    ) -> "EngineOutcome":
        return cls(
            engine=engine,
            status=EngineStatus.DONE,
            results=list(results),
            pages_fetched=pages_fetched,
            status_code=status_code,
            elapsed_ms=elapsed_ms,
            user_agent=user_agent,
        )

    @classmethod
    def failed(
        cls, engine: str, status_code: Optional[int], error: str,
        pages_fetched: int, elapsed_ms: float, user_agent: Optional[str] = None,
    ) -> "EngineOutcome":
        """요청 실패 결과 생성

        부분 결과는 버립니다. 실패한 엔진은 병합 단계에서 빈 리스트로 취급됩니다.
        """
        return cls(
            engine=engine,
            status=EngineStatus.FAILED,
            pages_fetched=pages_fetched,
            status_code=status_code,
            error_message=error,
            elapsed_ms=elapsed_ms,
            user_agent=user_agent,
        )

    @classmethod
    def timeout(
        cls, engine: str, timeout_s: float, pages_fetched: int,
        elapsed_ms: float, user_agent: Optional[str] = None,
    ) -> "EngineOutcome":
        return cls(
            engine=engine,
            status=EngineStatus.TIMEOUT,
            pages_fetched=pages_fetched,
            error_message=str(EngineTimeoutException(engine, timeout_s)),
            elapsed_ms=elapsed_ms,
            user_agent=user_agent,
        )


@dataclass
class SearchResponse:
    """병합된 결과와 엔진별 결과"""

    query: str
    results: list[Result]
    outcomes: list[EngineOutcome]

    @property
    def failed_engines(self) -> list[EngineOutcome]:
        return [o for o in self.outcomes if not o.is_success]

    @property
    def all_failed(self) -> bool:
        return bool(self.outcomes) and all(not o.is_success for o in self.outcomes)
