"""테스트용 검색 결과 페이지와 엔진 어댑터

실제 엔진 마크업 대신 단순한 구조를 사용합니다:
    <div class="result"><a class="title" href=LINK>TITLE</a><p class="desc">DESC</p></div>
    <a class="next" href="?page=N">Next</a>
"""

from __future__ import annotations

from typing import Optional, Sequence

from googly.crawlers.document import Element
from googly.engine.adapter import EngineAdapter, freeze_timerange_table, timerange_params
from googly.engine.options import SearchOptions, Timerange
from googly.engine.result import Result
from googly.engine.user_agent import BrowserConfig
from googly.utils.url_utils import build_url, set_query_params


def result_page(items: Sequence[tuple[str, str, str]], has_next: bool = True) -> str:
    """(title, link, description) 목록으로 결과 페이지 HTML 생성"""
    body = []
    for title, link, description in items:
        body.append(
            f'<div class="result"><a class="title" href="{link}">{title}</a>'
            f'<p class="desc">{description}</p></div>'
        )
    if has_next:
        body.append('<nav><a class="next" href="#">Next</a></nav>')
    return "<html><body>" + "".join(body) + "</body></html>"


def make_adapter(
    name: str,
    base_url: str,
    browser_config: Optional[BrowserConfig] = None,
) -> EngineAdapter:
    """현재 URL의 page 파라미터를 바꿔 페이지를 넘기는 테스트 엔진"""
    table = freeze_timerange_table({
        Timerange.HOUR: {"t": "h"},
        Timerange.DAY: {"t": "d"},
        Timerange.WEEK: {"t": "w"},
        Timerange.MONTH: {"t": "m"},
        Timerange.YEAR: {"t": "y"},
    })

    def search_url(query: str, options: SearchOptions) -> str:
        params = {"q": query, **timerange_params(table, options.timerange), "lang": options.lang}
        return build_url(base_url, "search", params)

    def extract_result(element: Element) -> Result:
        return Result(
            title=element.child_text(".title"),
            link=element.child_attr("a.title", "href"),
            description=element.child_text(".desc"),
        )

    def pagination_url(page: int, options: SearchOptions, control: Element) -> str:
        return set_query_params(control.page_url, {"page": str(page)})

    return EngineAdapter(
        name=name,
        base_url=base_url,
        search_url=search_url,
        result_selector="div.result",
        extract_result=extract_result,
        pagination_selector="a.next",
        pagination_url=pagination_url,
        browser_config=browser_config or BrowserConfig(chrome=True),
        timerange_table=table,
    )


def page_url(adapter: EngineAdapter, query: str, page: int, options: Optional[SearchOptions] = None) -> str:
    """어댑터가 page번째에 요청할 URL"""
    first = adapter.search_url(query, options or SearchOptions())
    if page == 1:
        return first
    return set_query_params(first, {"page": str(page)})
