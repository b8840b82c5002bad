"""DuckDuckGo (HTML 버전)

"다음" 버튼은 hidden input(s, dc)을 가진 form 안에 있습니다.
form의 값을 현재 요청 URL의 쿼리에 덮어써 다음 페이지 URL을 만듭니다.
hour 필터가 없어 d로 근사합니다.
"""

from googly.crawlers.document import Element
from googly.engine.adapter import EngineAdapter, freeze_timerange_table, timerange_params
from googly.engine.options import SearchOptions, Timerange
from googly.engine.result import Result
from googly.engine.user_agent import DESKTOP_AND_MOBILE
from googly.utils.url_utils import build_url, set_query_params

BASE_URL = "https://duckduckgo.com"
LANG_PARAM = "kl"

# 광고/자동완성/인스턴트 답변 등 부가 기능 비활성화
SETTINGS_PARAMS = {
    "kd": "-1", "kc": "-1", "kac": "-1", "k1": "-1", "kk": "-1", "kak": "-1",
    "kax": "-1", "kaq": "-1", "kao": "-1", "kap": "-1", "kau": "-1", "kz": "-1",
}

FORM_FIELDS = ("s", "dc")

TIMERANGES = freeze_timerange_table({
    Timerange.HOUR: {"df": "d"},  # 근사값
    Timerange.DAY: {"df": "d"},
    Timerange.WEEK: {"df": "w"},
    Timerange.MONTH: {"df": "m"},
    Timerange.YEAR: {"df": "y"},
})


def search_url(query: str, options: SearchOptions) -> str:
    params = {"q": query, **SETTINGS_PARAMS}
    params.update(timerange_params(TIMERANGES, options.timerange))
    params[LANG_PARAM] = options.lang
    return build_url(BASE_URL, "html", params)


def extract_result(element: Element) -> Result:
    return Result(
        title=element.child_text(".result__title"),
        link=element.child_attr("a.result__a", "href"),
        description=element.child_text(".result__snippet"),
    )


def pagination_url(page: int, options: SearchOptions, control: Element) -> str:
    form = control.parent or control
    values = {}
    for name in FORM_FIELDS:
        values[name] = form.child_attr(f"[name='{name}']", "value")
    return set_query_params(control.page_url, values)


DUCKDUCKGO = EngineAdapter(
    name="ddg",
    base_url=BASE_URL,
    search_url=search_url,
    result_selector=".serp__results .result",
    extract_result=extract_result,
    pagination_selector=".nav-link [value='Next']",
    pagination_url=pagination_url,
    browser_config=DESKTOP_AND_MOBILE,
    timerange_table=TIMERANGES,
)
