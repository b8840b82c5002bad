"""테스트 자산 레이어

규칙:
- 네트워크 의존 없음
- 엔진 마크업 샘플은 engine_pages, 단순 테스트 엔진은 pages
"""

from .engine_pages import ENGINE_PAGES
from .pages import make_adapter, page_url, result_page

__all__ = [
    "ENGINE_PAGES",
    "make_adapter",
    "page_url",
    "result_page",
]
