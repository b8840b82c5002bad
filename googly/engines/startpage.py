"""Startpage

페이지네이션 컨트롤이 form 버튼이라 href가 없습니다.
현재 요청 URL의 page 파라미터를 다음 페이지 번호로 바꿔 이동합니다.
"""

from googly.crawlers.document import Element
from googly.engine.adapter import EngineAdapter, freeze_timerange_table, timerange_params
from googly.engine.options import SearchOptions, Timerange
from googly.engine.result import Result
from googly.engine.user_agent import DESKTOP_AND_MOBILE
from googly.utils.url_utils import build_url, set_query_params

BASE_URL = "https://www.startpage.com"
LANG_PARAM = "language"

# 결과 페이지 설정(prfe) 쿠키 대체 파라미터
PREFERENCES = (
    "36c84513558a2d34bf0d89ea505333ad761002405484af2476571afac1710d79"
    "d80647dbf3b0d6646044dd543d05df3a"
)

TIMERANGES = freeze_timerange_table({
    Timerange.HOUR: {"with_date": "h"},
    Timerange.DAY: {"with_date": "d"},
    Timerange.WEEK: {"with_date": "w"},
    Timerange.MONTH: {"with_date": "m"},
    Timerange.YEAR: {"with_date": "y"},
})


def search_url(query: str, options: SearchOptions) -> str:
    params = {"query": query, "prfe": PREFERENCES}
    params.update(timerange_params(TIMERANGES, options.timerange))
    params[LANG_PARAM] = options.lang
    return build_url(BASE_URL, "do/search", params)


def extract_result(element: Element) -> Result:
    return Result(
        title=element.child_text(".w-gl__result-title h3"),
        link=element.child_attr("a.w-gl__result-title", "href"),
        description=element.child_text(".w-gl__description"),
    )


def pagination_url(page: int, options: SearchOptions, control: Element) -> str:
    return set_query_params(control.page_url, {"page": str(page)})


STARTPAGE = EngineAdapter(
    name="startpage",
    base_url=BASE_URL,
    search_url=search_url,
    result_selector=".w-gl__result",
    extract_result=extract_result,
    pagination_selector="button.next",
    pagination_url=pagination_url,
    browser_config=DESKTOP_AND_MOBILE,
    timerange_table=TIMERANGES,
)
