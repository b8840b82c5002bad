"""User-Agent Generator

Builds a plausible browser-identification string per crawl session. Version,
OS and device tables are immutable and passed in at construction; generation
depends only on the browser family and the random source.
"""

from __future__ import annotations

import random
import re
from dataclasses import dataclass
from enum import Enum
from typing import Callable, Optional


class BrowserFamily(str, Enum):
    """User-Agent 생성기 계열"""

    CHROME = "chrome"
    FIREFOX = "firefox"
    OPERA = "opera"
    CHROME_MOBILE = "chrome_mobile"
    FIREFOX_MOBILE = "firefox_mobile"


@dataclass(frozen=True)
class BrowserConfig:
    """엔진별로 허용되는 User-Agent 계열"""

    chrome: bool = False
    firefox: bool = False
    opera: bool = False
    chrome_mobile: bool = False
    firefox_mobile: bool = False

    def enabled_families(self) -> tuple[BrowserFamily, ...]:
        flags = (
            (BrowserFamily.CHROME, self.chrome),
            (BrowserFamily.FIREFOX, self.firefox),
            (BrowserFamily.OPERA, self.opera),
            (BrowserFamily.CHROME_MOBILE, self.chrome_mobile),
            (BrowserFamily.FIREFOX_MOBILE, self.firefox_mobile),
        )
        return tuple(family for family, enabled in flags if enabled)

    @classmethod
    def only(cls, family: BrowserFamily) -> "BrowserConfig":
        return cls(**{BrowserFamily(family).value: True})


DESKTOP = BrowserConfig(chrome=True, firefox=True)
DESKTOP_AND_MOBILE = BrowserConfig(chrome=True, firefox=True, chrome_mobile=True, firefox_mobile=True)


@dataclass(frozen=True)
class UserAgentPools:
    """User-Agent 조합에 쓰는 고정 테이블"""

    firefox_versions: tuple[float, ...]
    chrome_versions: tuple[str, ...]
    opera_versions: tuple[str, ...]
    android_versions: tuple[str, ...]
    android_devices: tuple[str, ...]
    android_form_factors: tuple[str, ...]
    desktop_os: tuple[str, ...]


DEFAULT_POOLS = UserAgentPools(
    firefox_versions=(
        69.0, 68.0, 67.0, 66.0, 65.0, 64.0, 63.0, 62.0, 60.0,
        59.0, 58.0, 57.0, 56.0, 52.0, 48.0, 41.0, 40.0,
    ),
    chrome_versions=(
        "37.0.2062.124",
        "40.0.2214.93",
        "41.0.2228.0",
        "49.0.2623.112",
        "55.0.2883.87",
        "56.0.2924.87",
        "57.0.2987.133",
        "61.0.3163.100",
        "63.0.3239.132",
        "64.0.3282.0",
        "65.0.3325.146",
        "68.0.3440.106",
        "69.0.3497.100",
        "70.0.3538.102",
        "74.0.3729.169",
        "75.0.3770.0",
        "76.0.3809.0",
        "77.0.3865.166",
    ),
    opera_versions=(
        "2.7.62 Version/11.00",
        "2.2.15 Version/10.10",
        "2.9.168 Version/11.50",
        "2.2.15 Version/10.00",
        "2.8.131 Version/11.11",
        "2.5.24 Version/10.54",
    ),
    android_versions=(
        "4.4.2", "4.4.4", "5.0", "5.0.1", "5.0.2", "5.1", "5.1.1", "5.1.2",
        "6.0", "6.0.1", "7.0", "7.1.1", "7.1.2", "8.0.0", "8.1.0", "9", "10",
    ),
    android_devices=("GM1913", "A3001", "lettuce", "Pixel 2", "Mi Mix"),
    android_form_factors=("Mobile", "Tablet"),
    desktop_os=(
        "Macintosh; Intel Mac OS X",
        "Macintosh; PPC Mac OS X",
        "Windows NT 10.0",
        "Windows NT 5.1",
        "Windows NT 6.1; WOW64",
        "Windows NT 6.1; Win64; x64",
        "X11; Linux x86_64",
        "X11; Linux i686",
    ),
)


# 계열별 템플릿 검증 패턴 (family_of / 테스트에서 사용)
FAMILY_PATTERNS: dict[BrowserFamily, re.Pattern] = {
    BrowserFamily.OPERA: re.compile(
        r"^Opera/9\.80 \([^)]+; U; en\) Presto/[\d.]+ Version/[\d.]+$"
    ),
    BrowserFamily.CHROME_MOBILE: re.compile(
        r"^Mozilla/5\.0 \(Linux; Android [\d.]+; [^)]+\) AppleWebKit/537\.36 "
        r"\(KHTML, like Gecko\) Chrome/[\d.]+ Mobile Safari/537\.36$"
    ),
    BrowserFamily.CHROME: re.compile(
        r"^Mozilla/5\.0 \((?!Linux; Android)[^)]+\) AppleWebKit/537\.36 "
        r"\(KHTML, like Gecko\) Chrome/[\d.]+ Safari/537\.36$"
    ),
    BrowserFamily.FIREFOX_MOBILE: re.compile(
        r"^Mozilla/5\.0 \(Android [\d.]+; (?:Mobile|Tablet); rv:(\d+\.\d)\) "
        r"Gecko/\1 Firefox/\1$"
    ),
    BrowserFamily.FIREFOX: re.compile(
        r"^Mozilla/5\.0 \([^)]+; rv:(\d+\.\d)\) Gecko/20100101 Firefox/\1$"
    ),
}


def family_of(user_agent: str) -> Optional[BrowserFamily]:
    """User-Agent 문자열이 어떤 생성기 계열 템플릿인지 판별"""
    for family, pattern in FAMILY_PATTERNS.items():
        if pattern.match(user_agent or ""):
            return family
    return None


class UserAgentGenerator:
    """BrowserConfig에 허용된 계열 중 하나를 균등하게 골라 User-Agent를 만듭니다.

    Usage:
        generator = UserAgentGenerator(rng=random.Random(42))
        ua = generator.generate(BrowserConfig(chrome=True, firefox=True))
    """

    def __init__(self, pools: UserAgentPools = DEFAULT_POOLS, rng: Optional[random.Random] = None):
        self.pools = pools
        self.rng = rng or random.Random()
        self._generators: dict[BrowserFamily, Callable[[], str]] = {
            BrowserFamily.CHROME: self._chrome,
            BrowserFamily.FIREFOX: self._firefox,
            BrowserFamily.OPERA: self._opera,
            BrowserFamily.CHROME_MOBILE: self._chrome_mobile,
            BrowserFamily.FIREFOX_MOBILE: self._firefox_mobile,
        }

    def generate(self, config: BrowserConfig) -> str:
        """허용된 계열 중 하나로 User-Agent 생성

        Raises:
            ValueError: 허용된 계열이 하나도 없는 경우
        """
        families = config.enabled_families()
        if not families:
            raise ValueError("BrowserConfig enables no user-agent family")
        return self.generate_family(self.rng.choice(families))

    def generate_family(self, family: BrowserFamily) -> str:
        return self._generators[BrowserFamily(family)]()

    def _chrome(self) -> str:
        version = self.rng.choice(self.pools.chrome_versions)
        os_name = self.rng.choice(self.pools.desktop_os)
        return f"Mozilla/5.0 ({os_name}) AppleWebKit/537.36 (KHTML, like Gecko) Chrome/{version} Safari/537.36"

    def _firefox(self) -> str:
        version = self.rng.choice(self.pools.firefox_versions)
        os_name = self.rng.choice(self.pools.desktop_os)
        return f"Mozilla/5.0 ({os_name}; rv:{version:.1f}) Gecko/20100101 Firefox/{version:.1f}"

    def _opera(self) -> str:
        version = self.rng.choice(self.pools.opera_versions)
        os_name = self.rng.choice(self.pools.desktop_os)
        return f"Opera/9.80 ({os_name}; U; en) Presto/{version}"

    def _chrome_mobile(self) -> str:
        version = self.rng.choice(self.pools.chrome_versions)
        android = self.rng.choice(self.pools.android_versions)
        device = self.rng.choice(self.pools.android_devices)
        return (
            f"Mozilla/5.0 (Linux; Android {android}; {device}) AppleWebKit/537.36 "
            f"(KHTML, like Gecko) Chrome/{version} Mobile Safari/537.36"
        )

    def _firefox_mobile(self) -> str:
        version = self.rng.choice(self.pools.firefox_versions)
        android = self.rng.choice(self.pools.android_versions)
        form_factor = self.rng.choice(self.pools.android_form_factors)
        return f"Mozilla/5.0 (Android {android}; {form_factor}; rv:{version:.1f}) Gecko/{version:.1f} Firefox/{version:.1f}"


def resolve_user_agent(user_agent: str, config: BrowserConfig, generator: UserAgentGenerator) -> str:
    """지정된 User-Agent가 있으면 그대로, 없으면 생성"""
    if user_agent:
        return user_agent
    return generator.generate(config)
