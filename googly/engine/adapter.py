"""Engine Adapter - per-engine search protocol description

An adapter is an immutable value: how to build the first-page URL, which CSS
patterns mark a result item and the "next page" control, how to read a Result
out of a matched item, and how to build the next-page URL. Each engine module
under ``googly.engines`` defines exactly one adapter literal.
"""

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Callable, Mapping

from googly.crawlers.document import Element
from googly.utils.url_utils import normalize_href, set_query_params

from .options import SearchOptions, Timerange
from .result import Result
from .user_agent import BrowserConfig


SearchUrlBuilder = Callable[[str, SearchOptions], str]
ResultExtractor = Callable[[Element], Result]
PaginationUrlBuilder = Callable[[int, SearchOptions, Element], str]

TimerangeTable = Mapping[Timerange, Mapping[str, str]]


@dataclass(frozen=True)
class EngineAdapter:
    """검색 엔진 어댑터

    Attributes:
        name: 레지스트리 키
        base_url: 엔진 호스트 (상대 href 정규화 기준)
        search_url: (query, options) -> 첫 페이지 URL
        result_selector: 결과 1건을 가리키는 CSS 셀렉터
        extract_result: 매칭된 요소 -> Result
        pagination_selector: "다음 페이지" 컨트롤 CSS 셀렉터
        pagination_url: (다음 페이지 번호, options, 컨트롤 요소) -> 다음 페이지 절대 URL
        browser_config: 이 엔진에 자연스러운 User-Agent 계열
        timerange_table: Timerange -> 쿼리 파라미터 (ANY 제외)
        supports_date_range: From/To 명시 날짜 범위 지원 여부
    """

    name: str
    base_url: str
    search_url: SearchUrlBuilder
    result_selector: str
    extract_result: ResultExtractor
    pagination_selector: str
    pagination_url: PaginationUrlBuilder
    browser_config: BrowserConfig
    timerange_table: TimerangeTable = field(default_factory=lambda: MappingProxyType({}))
    supports_date_range: bool = False

    def timerange_params(self, timerange: Timerange) -> dict[str, str]:
        return timerange_params(self.timerange_table, timerange)


def freeze_timerange_table(table: Mapping[Timerange, Mapping[str, str]]) -> TimerangeTable:
    """엔진 모듈의 timerange 테이블을 읽기 전용으로 고정"""
    return MappingProxyType({key: MappingProxyType(dict(value)) for key, value in table.items()})


def timerange_params(table: TimerangeTable, timerange: Timerange) -> dict[str, str]:
    """Timerange에 해당하는 쿼리 파라미터, ANY이면 빈 dict"""
    timerange = Timerange(timerange)
    if timerange == Timerange.ANY:
        return {}
    return dict(table[timerange])


def rewrite_href(element: Element, base_url: str, lang_param: str, lang: str) -> str:
    """컨트롤의 href를 절대 URL로 만들고 언어 파라미터를 교체"""
    href = element.attr("href")
    if not href:
        return ""
    return set_query_params(normalize_href(href, base_url), {lang_param: lang})
