"""Google

- 명시 날짜 범위(tbs=cdr:1,cd_min,cd_max)를 지원하는 유일한 엔진
- 페이지네이션: "다음" 링크 href의 hl 파라미터를 교체
"""

from googly.crawlers.document import Element
from googly.engine.adapter import EngineAdapter, freeze_timerange_table, rewrite_href, timerange_params
from googly.engine.options import SearchOptions, Timerange
from googly.engine.result import Result
from googly.engine.user_agent import DESKTOP
from googly.utils.url_utils import build_url

BASE_URL = "https://www.google.com"
LANG_PARAM = "hl"

TIMERANGES = freeze_timerange_table({
    Timerange.HOUR: {"tbs": "qdr:h"},
    Timerange.DAY: {"tbs": "qdr:d"},
    Timerange.WEEK: {"tbs": "qdr:w"},
    Timerange.MONTH: {"tbs": "qdr:m"},
    Timerange.YEAR: {"tbs": "qdr:y"},
})


def date_range_param(options: SearchOptions) -> str:
    """cdr:1,cd_min:MM/DD/YYYY,cd_max:MM/DD/YYYY"""
    value = "cdr:1"
    if options.date_from:
        value += f",cd_min:{options.date_from.month:02d}/{options.date_from.day:02d}/{options.date_from.year}"
    if options.date_to:
        value += f",cd_max:{options.date_to.month:02d}/{options.date_to.day:02d}/{options.date_to.year}"
    return value


def search_url(query: str, options: SearchOptions) -> str:
    params = {"q": query}
    if options.has_date_range:
        params["tbs"] = date_range_param(options)
    else:
        params.update(timerange_params(TIMERANGES, options.timerange))
    params[LANG_PARAM] = options.lang
    return build_url(BASE_URL, "search", params)


def extract_result(element: Element) -> Result:
    return Result(
        title=element.child_text("h3"),
        link=element.child_attr("a", "href"),
        description=element.child_text("span.st"),
    )


def pagination_url(page: int, options: SearchOptions, control: Element) -> str:
    return rewrite_href(control, BASE_URL, LANG_PARAM, options.lang)


GOOGLE = EngineAdapter(
    name="google",
    base_url=BASE_URL,
    search_url=search_url,
    result_selector=".g .rc",
    extract_result=extract_result,
    pagination_selector="a.pn",
    pagination_url=pagination_url,
    browser_config=DESKTOP,
    timerange_table=TIMERANGES,
    supports_date_range=True,
)
