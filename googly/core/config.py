"""설정 관리 - 환경 변수 로드 및 검증"""
from pydantic_settings import BaseSettings
from pydantic import field_validator


class Settings(BaseSettings):
    """애플리케이션 설정"""

    # 크롤러 (HTTP)
    # - crawler_http_timeout_s: 페이지 1회 요청 타임아웃
    # - crawler_engine_timeout_s: 엔진 1개의 크롤 세션 전체 데드라인
    crawler_http_timeout_s: float = 10.0
    crawler_engine_timeout_s: float = 60.0
    crawler_http_impersonate: str = ""  # 빈 값이면 TLS 지문 위장 비활성화
    crawler_http_max_clients: int = 10

    # pages=-1(무제한) 크롤이 끝나지 않는 경우를 막는 상한
    crawler_max_pages: int = 100

    # 검색 기본값 (CLI/API에서 값이 없을 때)
    default_lang: str = "en"
    default_pages: int = 5
    default_engines: str = "google"

    # API
    api_title: str = "googly"
    api_version: str = "1.0.0"
    api_description: str = "여러 검색 엔진의 결과를 모아 중복 없이 반환합니다."
    api_cors_origins: str = "*"  # 쉼표로 구분

    # 로깅
    log_level: str = "INFO"

    @field_validator("crawler_http_timeout_s", "crawler_engine_timeout_s")
    @classmethod
    def validate_timeouts(cls, v: float) -> float:
        if v <= 0:
            raise ValueError("crawler timeouts must be positive")
        return v

    @field_validator("crawler_max_pages", "crawler_http_max_clients")
    @classmethod
    def validate_positive_counts(cls, v: int) -> int:
        if v <= 0:
            raise ValueError("crawler_max_pages and crawler_http_max_clients must be positive")
        return v

    @field_validator("default_pages")
    @classmethod
    def validate_default_pages(cls, v: int) -> int:
        if v != -1 and v < 1:
            raise ValueError("default_pages must be -1 (unlimited) or >= 1")
        return v

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        level = v.upper()
        if level not in ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"):
            raise ValueError(f"unknown log_level: {v}")
        return level

    @property
    def default_engine_list(self) -> list[str]:
        return [name.strip() for name in self.default_engines.split(",") if name.strip()]

    @property
    def api_cors_origin_list(self) -> list[str]:
        return [origin.strip() for origin in self.api_cors_origins.split(",") if origin.strip()]

    class Config:
        env_file = ".env"
        env_prefix = "GOOGLY_"
        case_sensitive = False


settings = Settings()
