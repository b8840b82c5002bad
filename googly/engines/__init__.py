"""Search engine adapters.

구조:
- 엔진별 모듈 1개 = EngineAdapter 리터럴 1개
- ENGINES : 엔진 이름 -> 어댑터 (읽기 전용 레지스트리)
"""

from types import MappingProxyType
from typing import Mapping

from googly.core.exceptions import UnknownEngineException
from googly.engine.adapter import EngineAdapter

from .duckduckgo import DUCKDUCKGO
from .ecosia import ECOSIA
from .google import GOOGLE
from .naver import NAVER
from .startpage import STARTPAGE
from .yahoo import YAHOO

ENGINES: Mapping[str, EngineAdapter] = MappingProxyType({
    adapter.name: adapter
    for adapter in (GOOGLE, ECOSIA, STARTPAGE, YAHOO, DUCKDUCKGO, NAVER)
})


def engine_names() -> list[str]:
    return list(ENGINES)


def get_engine(name: str) -> EngineAdapter:
    """이름으로 어댑터 조회

    Raises:
        UnknownEngineException: 레지스트리에 없는 이름
    """
    key = (name or "").strip().lower()
    try:
        return ENGINES[key]
    except KeyError:
        raise UnknownEngineException(name, engine_names()) from None


__all__ = [
    "ENGINES",
    "engine_names",
    "get_engine",
    "GOOGLE",
    "ECOSIA",
    "STARTPAGE",
    "YAHOO",
    "DUCKDUCKGO",
    "NAVER",
]
