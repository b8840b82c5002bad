"""HTTP 요청과 HTML 질의 (크롤 세션의 I/O 경계).

공개 API는 이 파일에서만 export합니다.
"""

from .document import Document, Element
from .http_client import (
    FetchResponse,
    PageFetcher,
    SharedHttpClient,
    default_headers,
    get_shared_http_client,
    shutdown_shared_http_client,
)

__all__ = [
        "Document",
        "Element",
        "FetchResponse",
        "PageFetcher",
        "SharedHttpClient",
        "default_headers",
        "get_shared_http_client",
        "shutdown_shared_http_client",
]
