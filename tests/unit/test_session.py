"""CrawlSession 상태 머신 테스트

검증 항목:
- 페이지 한도까지 정확히 순차 요청
- 페이지네이션 컨트롤이 없으면 종료
- 요청 실패 시 FAILED + 상태 코드 기록 (응답 없음 = 0)
- User-Agent 지정/생성, 압축 비활성화 헤더
- 무제한(pages=-1) 크롤의 페이지 상한
- 이미 요청한 URL을 가리키는 다음 페이지는 다시 요청하지 않음
- verbose 모드의 실패 요청 로그 (URL, User-Agent)
"""

import logging
import random

import pytest

from googly.engine.options import SearchOptions, Timerange
from googly.engine.result import EngineStatus, Result
from googly.engine.session import CrawlSession, CrawlState
from googly.engine.user_agent import BrowserConfig, BrowserFamily, UserAgentGenerator, family_of
from tests.fixtures.pages import page_url, result_page


def items(prefix: str, n: int = 2):
    return [(f"{prefix}{i}", f"https://{prefix}.example/{i}", f"desc {prefix}{i}") for i in range(1, n + 1)]


def make_session(adapter, fetcher, options, **kwargs):
    kwargs.setdefault("ua_generator", UserAgentGenerator(rng=random.Random(0)))
    return CrawlSession(adapter, "rust ownership", options, fetcher, **kwargs)


@pytest.mark.asyncio
async def test_fetches_exactly_the_page_limit(engine_x, fake_fetcher):
    options = SearchOptions(pages=2)
    fake_fetcher.default = (200, result_page(items("x")))

    outcome = await make_session(engine_x, fake_fetcher, options).run()

    assert outcome.status == EngineStatus.DONE
    assert outcome.pages_fetched == 2
    assert fake_fetcher.urls == [
        page_url(engine_x, "rust ownership", 1, options),
        page_url(engine_x, "rust ownership", 2, options),
    ]
    assert len(outcome.results) == 4


@pytest.mark.asyncio
async def test_results_accumulate_in_page_then_document_order(engine_x, fake_fetcher):
    options = SearchOptions(pages=2)
    fake_fetcher.pages = {
        page_url(engine_x, "rust ownership", 1, options): (200, result_page(items("a"))),
        page_url(engine_x, "rust ownership", 2, options): (200, result_page(items("b"))),
    }

    outcome = await make_session(engine_x, fake_fetcher, options).run()

    assert [r.title for r in outcome.results] == ["a1", "a2", "b1", "b2"]
    assert outcome.results[0] == Result(title="a1", link="https://a.example/1", description="desc a1")


@pytest.mark.asyncio
async def test_single_page_limit_never_follows_pagination(engine_x, fake_fetcher):
    fake_fetcher.default = (200, result_page(items("x")))

    outcome = await make_session(engine_x, fake_fetcher, SearchOptions(pages=1)).run()

    assert outcome.pages_fetched == 1
    assert len(fake_fetcher.requests) == 1


@pytest.mark.asyncio
async def test_unlimited_stops_when_pagination_disappears(engine_x, fake_fetcher):
    options = SearchOptions(pages=-1)
    fake_fetcher.pages = {
        page_url(engine_x, "rust ownership", 1, options): (200, result_page(items("a"))),
        page_url(engine_x, "rust ownership", 2, options): (200, result_page(items("b"))),
        page_url(engine_x, "rust ownership", 3, options): (200, result_page(items("c"), has_next=False)),
    }

    outcome = await make_session(engine_x, fake_fetcher, options).run()

    assert outcome.status == EngineStatus.DONE
    assert outcome.pages_fetched == 3
    assert len(outcome.results) == 6


@pytest.mark.asyncio
async def test_missing_pagination_before_limit_ends_successfully(engine_x, fake_fetcher):
    fake_fetcher.default = (200, result_page(items("x"), has_next=False))

    outcome = await make_session(engine_x, fake_fetcher, SearchOptions(pages=5)).run()

    assert outcome.is_success
    assert outcome.pages_fetched == 1


@pytest.mark.asyncio
async def test_page_without_results_is_not_an_error(engine_x, fake_fetcher):
    fake_fetcher.default = (200, "<html><body><p>nothing</p></body></html>")

    outcome = await make_session(engine_x, fake_fetcher, SearchOptions(pages=3)).run()

    assert outcome.is_success
    assert outcome.results == []


@pytest.mark.asyncio
async def test_non_2xx_status_fails_the_session(engine_x, fake_fetcher):
    options = SearchOptions(pages=3)
    fake_fetcher.pages = {
        page_url(engine_x, "rust ownership", 1, options): (200, result_page(items("a"))),
        page_url(engine_x, "rust ownership", 2, options): (429, "rate limited"),
    }

    session = make_session(engine_x, fake_fetcher, options)
    outcome = await session.run()

    assert session.state == CrawlState.FAILED
    assert outcome.status == EngineStatus.FAILED
    assert outcome.status_code == 429
    assert outcome.results == []
    assert outcome.pages_fetched == 2
    assert len(fake_fetcher.requests) == 2


@pytest.mark.asyncio
async def test_transport_failure_records_status_zero(engine_x, fake_fetcher):
    options = SearchOptions(pages=2)
    fake_fetcher.fail_urls = {page_url(engine_x, "rust ownership", 1, options)}

    outcome = await make_session(engine_x, fake_fetcher, options).run()

    assert outcome.status == EngineStatus.FAILED
    assert outcome.status_code == 0
    assert outcome.pages_fetched == 0
    assert "FETCH_FAILED" in outcome.error_message


@pytest.mark.asyncio
async def test_user_agent_override_is_sent_on_every_request(engine_x, fake_fetcher):
    fake_fetcher.default = (200, result_page(items("x")))
    options = SearchOptions(pages=3, user_agent="my-agent/1.0")

    outcome = await make_session(engine_x, fake_fetcher, options).run()

    assert outcome.user_agent == "my-agent/1.0"
    assert [h["User-Agent"] for _, h in fake_fetcher.requests] == ["my-agent/1.0"] * 3


@pytest.mark.asyncio
async def test_generated_user_agent_is_stable_for_the_session(fake_fetcher):
    from tests.fixtures.pages import make_adapter

    adapter = make_adapter("m", "https://m.example", BrowserConfig(firefox_mobile=True))
    fake_fetcher.default = (200, result_page(items("m")))

    outcome = await make_session(adapter, fake_fetcher, SearchOptions(pages=3)).run()

    agents = {h["User-Agent"] for _, h in fake_fetcher.requests}
    assert len(agents) == 1
    assert family_of(outcome.user_agent) == BrowserFamily.FIREFOX_MOBILE


@pytest.mark.asyncio
async def test_requests_disable_compression(engine_x, fake_fetcher):
    fake_fetcher.default = (200, result_page(items("x")))

    await make_session(engine_x, fake_fetcher, SearchOptions(pages=1)).run()

    _, headers = fake_fetcher.requests[0]
    assert headers["Accept-Encoding"] == "identity"


@pytest.mark.asyncio
async def test_unlimited_crawl_is_capped(engine_x, fake_fetcher):
    fake_fetcher.default = (200, result_page(items("x", 1)))

    outcome = await make_session(engine_x, fake_fetcher, SearchOptions(pages=-1), max_pages=4).run()

    assert outcome.is_success
    assert outcome.pages_fetched == 4


@pytest.mark.asyncio
async def test_timerange_and_lang_reach_the_first_url(engine_x, fake_fetcher):
    options = SearchOptions(pages=1, timerange=Timerange.WEEK, lang="de")
    fake_fetcher.default = (200, result_page([]))

    await make_session(engine_x, fake_fetcher, options).run()

    assert fake_fetcher.urls == ["https://x.example/search?q=rust+ownership&t=w&lang=de"]


@pytest.mark.asyncio
async def test_empty_pagination_target_ends_the_session(fake_fetcher):
    from dataclasses import replace

    from tests.fixtures.pages import make_adapter

    adapter = replace(
        make_adapter("z", "https://z.example"),
        pagination_url=lambda page, options, control: "",
    )
    fake_fetcher.default = (200, result_page(items("z")))

    outcome = await make_session(adapter, fake_fetcher, SearchOptions(pages=5)).run()

    assert outcome.is_success
    assert outcome.pages_fetched == 1


@pytest.mark.asyncio
@pytest.mark.parametrize("pages", [-1, 5])
async def test_next_page_pointing_to_a_fetched_url_ends_the_session(fake_fetcher, pages):
    from dataclasses import replace

    from tests.fixtures.pages import make_adapter

    adapter = replace(
        make_adapter("s", "https://s.example"),
        pagination_url=lambda page, options, control: control.page_url,
    )
    fake_fetcher.default = (200, result_page(items("s")))

    session = make_session(adapter, fake_fetcher, SearchOptions(pages=pages))
    outcome = await session.run()

    assert session.state == CrawlState.DONE
    assert outcome.is_success
    assert outcome.pages_fetched == 1
    assert len(fake_fetcher.requests) == 1
    assert [r.title for r in outcome.results] == ["s1", "s2"]


@pytest.mark.asyncio
async def test_next_page_pointing_back_to_an_earlier_page_ends_the_session(engine_x, fake_fetcher):
    from dataclasses import replace

    first = page_url(engine_x, "rust ownership", 1, SearchOptions())
    second = page_url(engine_x, "rust ownership", 2, SearchOptions())
    adapter = replace(
        engine_x,
        pagination_url=lambda page, options, control: second if control.page_url == first else first,
    )
    fake_fetcher.default = (200, result_page(items("x")))

    outcome = await make_session(adapter, fake_fetcher, SearchOptions(pages=-1)).run()

    assert outcome.is_success
    assert fake_fetcher.urls == [first, second]
    assert len(outcome.results) == 4


def crawl_log(caplog) -> str:
    return " ".join(r.getMessage() for r in caplog.records if r.name == "googly")


@pytest.mark.asyncio
async def test_verbose_failure_logs_url_and_user_agent(engine_x, fake_fetcher, caplog):
    caplog.set_level(logging.INFO, logger="googly")
    options = SearchOptions(pages=1, verbose=True, user_agent="agent/verbose-1")
    fake_fetcher.default = (503, "busy")

    outcome = await make_session(engine_x, fake_fetcher, options).run()

    assert outcome.status == EngineStatus.FAILED
    failing = [r.getMessage() for r in caplog.records if "failing request" in r.getMessage()]
    assert len(failing) == 1
    assert page_url(engine_x, "rust ownership", 1, options) in failing[0]
    assert "agent/verbose-1" in failing[0]


@pytest.mark.asyncio
async def test_quiet_failure_keeps_url_and_user_agent_out_of_the_log(engine_x, fake_fetcher, caplog):
    caplog.set_level(logging.INFO, logger="googly")
    options = SearchOptions(pages=1, user_agent="agent/quiet-1")
    fake_fetcher.default = (503, "busy")

    outcome = await make_session(engine_x, fake_fetcher, options).run()

    log = crawl_log(caplog)
    assert outcome.status == EngineStatus.FAILED
    assert "failed with status 503" in log
    assert page_url(engine_x, "rust ownership", 1, options) not in log
    assert "agent/quiet-1" not in log
