"""User-Agent 생성기 테스트"""

import random

import pytest

from googly.engine.user_agent import (
    DEFAULT_POOLS,
    DESKTOP,
    FAMILY_PATTERNS,
    BrowserConfig,
    BrowserFamily,
    UserAgentGenerator,
    family_of,
    resolve_user_agent,
)


@pytest.fixture
def generator() -> UserAgentGenerator:
    return UserAgentGenerator(rng=random.Random(1234))


@pytest.mark.parametrize("family", list(BrowserFamily))
def test_single_family_config_only_produces_that_family(generator, family):
    config = BrowserConfig.only(family)

    for _ in range(200):
        ua = generator.generate(config)
        assert FAMILY_PATTERNS[family].match(ua), ua
        assert family_of(ua) == family


def test_disabled_families_are_never_generated(generator):
    config = BrowserConfig(firefox=True, chrome_mobile=True)
    seen = set()

    for _ in range(300):
        seen.add(family_of(generator.generate(config)))

    assert seen == {BrowserFamily.FIREFOX, BrowserFamily.CHROME_MOBILE}


def test_empty_config_raises(generator):
    with pytest.raises(ValueError):
        generator.generate(BrowserConfig())


def test_enabled_families_order():
    config = BrowserConfig(chrome=True, firefox=True, opera=True, chrome_mobile=True, firefox_mobile=True)

    assert config.enabled_families() == (
        BrowserFamily.CHROME,
        BrowserFamily.FIREFOX,
        BrowserFamily.OPERA,
        BrowserFamily.CHROME_MOBILE,
        BrowserFamily.FIREFOX_MOBILE,
    )
    assert DESKTOP.enabled_families() == (BrowserFamily.CHROME, BrowserFamily.FIREFOX)


def test_generation_is_deterministic_for_a_seeded_random_source():
    a = UserAgentGenerator(rng=random.Random(7))
    b = UserAgentGenerator(rng=random.Random(7))

    assert [a.generate(DESKTOP) for _ in range(20)] == [b.generate(DESKTOP) for _ in range(20)]


def test_generated_strings_use_pool_values(generator):
    ua = generator.generate_family(BrowserFamily.CHROME)

    assert any(f"({os_name})" in ua for os_name in DEFAULT_POOLS.desktop_os)
    assert any(f"Chrome/{v} " in ua for v in DEFAULT_POOLS.chrome_versions)


def test_firefox_template_repeats_version(generator):
    ua = generator.generate_family(BrowserFamily.FIREFOX)

    version = ua.rsplit("Firefox/", 1)[1]
    assert f"rv:{version})" in ua
    assert "Gecko/20100101" in ua


def test_custom_pools_are_used():
    from googly.engine.user_agent import UserAgentPools

    pools = UserAgentPools(
        firefox_versions=(99.0,),
        chrome_versions=("1.2.3.4",),
        opera_versions=("2.12.388 Version/12.18",),
        android_versions=("14",),
        android_devices=("Pixel 8",),
        android_form_factors=("Mobile",),
        desktop_os=("X11; Linux x86_64",),
    )
    generator = UserAgentGenerator(pools=pools, rng=random.Random(0))

    assert generator.generate_family(BrowserFamily.CHROME_MOBILE) == (
        "Mozilla/5.0 (Linux; Android 14; Pixel 8) AppleWebKit/537.36 "
        "(KHTML, like Gecko) Chrome/1.2.3.4 Mobile Safari/537.36"
    )
    assert generator.generate_family(BrowserFamily.FIREFOX_MOBILE) == (
        "Mozilla/5.0 (Android 14; Mobile; rv:99.0) Gecko/99.0 Firefox/99.0"
    )
    assert generator.generate_family(BrowserFamily.OPERA) == (
        "Opera/9.80 (X11; Linux x86_64; U; en) Presto/2.12.388 Version/12.18"
    )


def test_resolve_user_agent_prefers_override(generator):
    assert resolve_user_agent("my-agent/1.0", DESKTOP, generator) == "my-agent/1.0"
    assert family_of(resolve_user_agent("", DESKTOP, generator)) in DESKTOP.enabled_families()


def test_family_of_unknown_string():
    assert family_of("curl/8.0") is None
    assert family_of("") is None
