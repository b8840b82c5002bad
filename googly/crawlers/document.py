"""HTML 문서 질의 (selectolax)

엔진 어댑터가 사용하는 최소한의 질의 인터페이스:
- CSS 셀렉터 → 문서 순서대로 매칭된 요소 목록
- 요소의 텍스트/속성 읽기, 하위 셀렉터 질의

각 요소는 자신이 속한 페이지의 URL을 알고 있어 페이지네이션 URL 계산에 사용할 수 있습니다.
"""

from __future__ import annotations

from typing import Optional

from selectolax.lexbor import LexborHTMLParser, LexborNode


class Element:
    """매칭된 HTML 요소"""

    __slots__ = ("node", "page_url")

    def __init__(self, node: LexborNode, page_url: str) -> None:
        self.node = node
        self.page_url = page_url

    def text(self) -> str:
        return (self.node.text(deep=True) or "").strip()

    def attr(self, name: str) -> str:
        return (self.node.attributes.get(name) or "").strip()

    def css(self, selector: str) -> list["Element"]:
        return [Element(n, self.page_url) for n in self.node.css(selector)]

    def css_first(self, selector: str) -> Optional["Element"]:
        node = self.node.css_first(selector)
        return Element(node, self.page_url) if node is not None else None

    def child_text(self, selector: str) -> str:
        """하위 요소들의 텍스트를 이어붙여 반환, 매칭이 없으면 빈 문자열"""
        return "".join(n.text(deep=True) or "" for n in self.node.css(selector)).strip()

    def child_attr(self, selector: str, name: str) -> str:
        """첫 번째로 매칭된 하위 요소의 속성값, 없으면 빈 문자열"""
        for n in self.node.css(selector):
            value = n.attributes.get(name)
            if value is not None:
                return value.strip()
        return ""

    @property
    def parent(self) -> Optional["Element"]:
        node = self.node.parent
        return Element(node, self.page_url) if node is not None else None


class Document:
    """가져온 페이지 1개"""

    def __init__(self, html: str, url: str) -> None:
        self.url = url
        self._parser = LexborHTMLParser(html or "")

    def css(self, selector: str) -> list[Element]:
        return [Element(n, self.url) for n in self._parser.css(selector)]

    def css_first(self, selector: str) -> Optional[Element]:
        node = self._parser.css_first(selector)
        return Element(node, self.url) if node is not None else None
