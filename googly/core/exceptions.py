"""커스텀 예외 정의 (Structured Exception Hierarchy)"""
from typing import Any, Optional


# 기본 예외 클래스
class GooglyException(Exception):
    """기본 예외 클래스 - 모든 커스텀 예외의 부모"""
    def __init__(self, message: str, error_code: str = "UNKNOWN_ERROR", details: Optional[dict[str, Any]] = None):
        self.message = message
        self.error_code = error_code
        self.details = details or {}
        super().__init__(self.message)

    def __str__(self) -> str:
        return f"[{self.error_code}] {self.message}"


# 크롤러 관련 예외
class CrawlerException(GooglyException):
    """크롤러 관련 예외의 기본 클래스"""
    def __init__(self, message: str, error_code: str = "CRAWLER_ERROR", details: Optional[dict[str, Any]] = None):
        super().__init__(message, error_code or "CRAWLER_ERROR", details)


class FetchFailedException(CrawlerException):
    """페이지 요청 실패 (네트워크 오류 또는 2xx 이외의 응답)

    status_code가 0이면 응답 자체를 받지 못한 경우입니다.
    """
    def __init__(self, url: str, status_code: int, reason: str = "", details: Optional[dict[str, Any]] = None):
        self.url = url
        self.status_code = status_code
        message = f"GET {url} failed with status {status_code}"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message, "FETCH_FAILED",
                        details or {"url": url, "status_code": status_code, "reason": reason})


class EngineTimeoutException(CrawlerException):
    """엔진 크롤 세션 데드라인 초과"""
    def __init__(self, engine: str, timeout_s: float, details: Optional[dict[str, Any]] = None):
        message = f"Engine '{engine}' did not finish within {timeout_s}s"
        super().__init__(message, "ENGINE_TIMEOUT",
                        details or {"engine": engine, "timeout_s": timeout_s})


# 유효성 검증 관련 예외
class ValidationException(GooglyException):
    """유효성 검증 예외"""
    def __init__(self, field: str, reason: str, details: Optional[dict[str, Any]] = None):
        message = f"Validation failed for '{field}': {reason}"
        super().__init__(message, "VALIDATION_ERROR",
                        details or {"field": field, "reason": reason})


class InvalidQueryException(ValidationException):
    """유효하지 않은 검색어"""
    def __init__(self, reason: str, details: Optional[dict[str, Any]] = None):
        super().__init__("query", reason, details)


class UnknownEngineException(ValidationException):
    """레지스트리에 없는 검색 엔진"""
    def __init__(self, engine: str, available: Optional[list[str]] = None):
        self.engine = engine
        reason = f"unknown engine '{engine}'"
        if available:
            reason = f"{reason} (available: {', '.join(available)})"
        super().__init__("engine", reason, {"engine": engine, "available": available or []})


class InvalidSearchOptionsException(ValidationException):
    """유효하지 않은 검색 옵션 (pages, timerange, 날짜 범위 등)"""
    def __init__(self, field: str, reason: str, details: Optional[dict[str, Any]] = None):
        super().__init__(field, reason, details)
