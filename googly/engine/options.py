"""Search Options - immutable configuration for one crawl"""

from dataclasses import dataclass
from datetime import date
from enum import Enum
from typing import Optional, Union

from googly.core.exceptions import InvalidSearchOptionsException


UNLIMITED_PAGES = -1


class Timerange(str, Enum):
    """최신성 필터 (From/To 날짜 범위와는 별개)"""

    ANY = "any"
    HOUR = "hour"
    DAY = "day"
    WEEK = "week"
    MONTH = "month"
    YEAR = "year"


TIMERANGE_CHOICES = tuple(t.value for t in Timerange)


@dataclass(frozen=True)
class SearchOptions:
    """검색 옵션

    Attributes:
        lang: 결과 언어 코드 (엔진별 언어 파라미터로 전달)
        pages: 최대 페이지 수, -1이면 무제한
        date_from: 시작 날짜 (선택)
        date_to: 종료 날짜 (선택)
        timerange: 최신성 필터, date_from/date_to가 있으면 날짜 범위를 지원하는 엔진에서는 무시
        user_agent: 지정 시 그대로 사용, 비어 있으면 엔진별로 생성
        verbose: 진단 로그 출력 여부
    """

    lang: str = "en"
    pages: int = 5
    date_from: Optional[date] = None
    date_to: Optional[date] = None
    timerange: Union[Timerange, str] = Timerange.ANY
    user_agent: str = ""
    verbose: bool = False

    def __post_init__(self):
        """옵션 검증"""
        if self.pages != UNLIMITED_PAGES and self.pages < 1:
            raise InvalidSearchOptionsException("pages", f"must be -1 (unlimited) or >= 1, got {self.pages}")

        try:
            object.__setattr__(self, "timerange", Timerange(self.timerange))
        except ValueError:
            raise InvalidSearchOptionsException(
                "timerange", f"must be one of {', '.join(TIMERANGE_CHOICES)}, got {self.timerange!r}"
            ) from None

        if self.date_from and self.date_to and self.date_from > self.date_to:
            raise InvalidSearchOptionsException(
                "date_from", f"{self.date_from.isoformat()} is after date_to {self.date_to.isoformat()}"
            )

        if not self.lang or not self.lang.strip():
            raise InvalidSearchOptionsException("lang", "must not be empty")

    @property
    def has_date_range(self) -> bool:
        return self.date_from is not None or self.date_to is not None

    @property
    def unlimited(self) -> bool:
        return self.pages == UNLIMITED_PAGES
