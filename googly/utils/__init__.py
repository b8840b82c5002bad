"""Utilities package - Flat structure (no nested directories)"""

# URL utilities
from .url_utils import build_url, get_query_param, normalize_href, set_query_params

__all__ = [
    # url
    "build_url",
    "get_query_param",
    "normalize_href",
    "set_query_params",
]
