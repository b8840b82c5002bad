"""Naver (웹문서 탭)

- 결과 목록은 ul.lst_total 아래 li.bx 항목
- "다음" 링크 href는 "?where=web&...&start=N" 형태의 쿼리 전용 상대경로라
  현재 페이지 URL 기준으로 결합합니다.
- 마지막 페이지에서는 btn_next가 aria-disabled="true"라 활성 링크만 매칭합니다.
"""

from googly.crawlers.document import Element
from googly.engine.adapter import EngineAdapter, freeze_timerange_table, timerange_params
from googly.engine.options import SearchOptions, Timerange
from googly.engine.result import Result
from googly.engine.user_agent import DESKTOP_AND_MOBILE
from googly.utils.url_utils import build_url, normalize_href, set_query_params

BASE_URL = "https://search.naver.com"
LANG_PARAM = "hl"

TIMERANGES = freeze_timerange_table({
    Timerange.HOUR: {"nso": "so:r,p:1h,a:all"},
    Timerange.DAY: {"nso": "so:r,p:1d,a:all"},
    Timerange.WEEK: {"nso": "so:r,p:1w,a:all"},
    Timerange.MONTH: {"nso": "so:r,p:1m,a:all"},
    Timerange.YEAR: {"nso": "so:r,p:1y,a:all"},
})


def search_url(query: str, options: SearchOptions) -> str:
    params = {"where": "web", "query": query}
    params.update(timerange_params(TIMERANGES, options.timerange))
    params[LANG_PARAM] = options.lang
    return build_url(BASE_URL, "search.naver", params)


def extract_result(element: Element) -> Result:
    return Result(
        title=element.child_text(".link_tit"),
        link=element.child_attr("a.link_tit", "href"),
        description=element.child_text(".total_dsc"),
    )


def pagination_url(page: int, options: SearchOptions, control: Element) -> str:
    href = control.attr("href")
    if not href or href == "#":
        return ""
    return set_query_params(normalize_href(href, control.page_url), {LANG_PARAM: options.lang})


NAVER = EngineAdapter(
    name="naver",
    base_url=BASE_URL,
    search_url=search_url,
    result_selector="ul.lst_total li.bx",
    extract_result=extract_result,
    pagination_selector="a.btn_next[aria-disabled='false']",
    pagination_url=pagination_url,
    browser_config=DESKTOP_AND_MOBILE,
    timerange_table=TIMERANGES,
)
