"""Ecosia

hour/year 필터가 없어 각각 day/month로 근사합니다.
"""

from googly.crawlers.document import Element
from googly.engine.adapter import EngineAdapter, freeze_timerange_table, rewrite_href, timerange_params
from googly.engine.options import SearchOptions, Timerange
from googly.engine.result import Result
from googly.engine.user_agent import DESKTOP_AND_MOBILE
from googly.utils.url_utils import build_url

BASE_URL = "https://www.ecosia.org"
LANG_PARAM = "hl"

TIMERANGES = freeze_timerange_table({
    Timerange.HOUR: {"freshness": "day"},  # 근사값
    Timerange.DAY: {"freshness": "day"},
    Timerange.WEEK: {"freshness": "week"},
    Timerange.MONTH: {"freshness": "month"},
    Timerange.YEAR: {"freshness": "month"},  # 근사값
})


def search_url(query: str, options: SearchOptions) -> str:
    params = {"q": query}
    params.update(timerange_params(TIMERANGES, options.timerange))
    params[LANG_PARAM] = options.lang
    return build_url(BASE_URL, "search", params)


def extract_result(element: Element) -> Result:
    return Result(
        title=element.child_text(".result-title"),
        link=element.child_attr("a.result-title", "href"),
        description=element.child_text(".result-snippet"),
    )


def pagination_url(page: int, options: SearchOptions, control: Element) -> str:
    return rewrite_href(control, BASE_URL, LANG_PARAM, options.lang)


ECOSIA = EngineAdapter(
    name="ecosia",
    base_url=BASE_URL,
    search_url=search_url,
    result_selector=".js-result .result-body",
    extract_result=extract_result,
    pagination_selector="a.pagination-next",
    pagination_url=pagination_url,
    browser_config=DESKTOP_AND_MOBILE,
    timerange_table=TIMERANGES,
)
