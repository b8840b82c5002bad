"""Yahoo

- hour/year 필터가 없어 각각 1d/1m으로 근사합니다.
- "다음" 링크 href가 이미 절대 URL이라 그대로 따라갑니다.
- 결과 링크는 Yahoo 리다이렉트 URL일 수 있으며, RU 세그먼트가 있으면 원본 URL로 풀어냅니다.
"""

import re
from urllib.parse import unquote

from googly.crawlers.document import Element
from googly.engine.adapter import EngineAdapter, freeze_timerange_table, timerange_params
from googly.engine.options import SearchOptions, Timerange
from googly.engine.result import Result
from googly.engine.user_agent import DESKTOP_AND_MOBILE
from googly.utils.url_utils import build_url, normalize_href

BASE_URL = "https://search.yahoo.com"
LANG_PARAM = "lang"

TIMERANGES = freeze_timerange_table({
    Timerange.HOUR: {"fr2": "time", "age": "1d", "btf": "d"},  # 근사값
    Timerange.DAY: {"fr2": "time", "age": "1d", "btf": "d"},
    Timerange.WEEK: {"fr2": "time", "age": "1w", "btf": "w"},
    Timerange.MONTH: {"fr2": "time", "age": "1m", "btf": "m"},
    Timerange.YEAR: {"fr2": "time", "age": "1m", "btf": "m"},  # 근사값
})

_REDIRECT_TARGET = re.compile(r"/RU=([^/]+)/R[KS]=")


def unwrap_redirect(link: str) -> str:
    """r.search.yahoo.com/.../RU=<encoded url>/RK=... -> 원본 URL"""
    match = _REDIRECT_TARGET.search(link or "")
    if not match:
        return link
    return unquote(match.group(1))


def search_url(query: str, options: SearchOptions) -> str:
    params = {"p": query}
    params.update(timerange_params(TIMERANGES, options.timerange))
    params[LANG_PARAM] = options.lang
    return build_url(BASE_URL, "search", params)


def extract_result(element: Element) -> Result:
    return Result(
        title=element.child_text("h3.title"),
        link=unwrap_redirect(element.child_attr("h3.title a", "href")),
        description=element.child_text("div.compText"),
    )


def pagination_url(page: int, options: SearchOptions, control: Element) -> str:
    return normalize_href(control.attr("href"), BASE_URL)


YAHOO = EngineAdapter(
    name="yahoo",
    base_url=BASE_URL,
    search_url=search_url,
    result_selector=".algo-sr",
    extract_result=extract_result,
    pagination_selector=".compPagination a.next",
    pagination_url=pagination_url,
    browser_config=DESKTOP_AND_MOBILE,
    timerange_table=TIMERANGES,
)
