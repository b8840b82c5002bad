"""URL 조립/정규화 유틸리티"""
from typing import Mapping, Optional
from urllib.parse import parse_qsl, urlencode, urljoin, urlsplit, urlunsplit


def normalize_href(href: str, base_url: str) -> str:
    """상대/프로토콜-상대 href를 절대 URL로 정규화합니다.

    - "//host/path" -> "https://host/path"
    - "/path", "?a=b", "path" -> base_url 기준으로 결합
    - "http(s)://..." -> 그대로
    """
    if not href:
        return ""

    h = href.strip()
    if not h:
        return ""

    if h.startswith("//"):
        return f"https:{h}"

    if h.startswith(("http://", "https://")):
        return h

    return urljoin(base_url, h)


def set_query_params(url: str, params: Mapping[str, Optional[str]]) -> str:
    """URL의 쿼리 파라미터를 교체/추가합니다.

    기존 파라미터의 순서는 유지하고, 같은 이름은 한 번만 남깁니다.
    값이 None인 파라미터는 제거합니다.

    Examples:
        >>> set_query_params("https://a.com/s?q=x&page=1", {"page": "2"})
        'https://a.com/s?q=x&page=2'
    """
    parts = urlsplit(url)
    pairs = parse_qsl(parts.query, keep_blank_values=True)

    merged: list[tuple[str, str]] = []
    seen: set[str] = set()
    for key, value in pairs:
        if key in seen:
            continue
        seen.add(key)
        if key in params:
            if params[key] is None:
                continue
            merged.append((key, params[key]))
        else:
            merged.append((key, value))

    for key, value in params.items():
        if key not in seen and value is not None:
            merged.append((key, value))

    return urlunsplit((parts.scheme, parts.netloc, parts.path, urlencode(merged), parts.fragment))


def build_url(base_url: str, path: str, params: Mapping[str, str]) -> str:
    """base_url + path에 쿼리 파라미터를 붙여 URL 생성"""
    url = f"{base_url.rstrip('/')}/{path.lstrip('/')}"
    return set_query_params(url, params)


def get_query_param(url: str, name: str) -> Optional[str]:
    """URL에서 쿼리 파라미터 1개 읽기, 없으면 None"""
    if not url:
        return None
    for key, value in parse_qsl(urlsplit(url).query, keep_blank_values=True):
        if key == name:
            return value
    return None
