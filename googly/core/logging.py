"""로깅 설정

- logger 이름: googly (모듈별 태그로 구분: [CRAWL], [ORCHESTRATOR], [HTTP_CLIENT], [API])
- 출력: stderr (stdout은 CLI 검색 결과 전용)
- ENVIRONMENT=production 이면 DEBUG를 INFO로 올리고 짧은 포맷 사용
"""
import logging
import os
import sys

from googly.core.config import settings

LOGGER_NAME = "googly"

IS_PRODUCTION = os.getenv("ENVIRONMENT", "development") == "production"

PRODUCTION_FORMAT = "%(asctime)s - %(levelname)s - %(message)s"
DEVELOPMENT_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(funcName)s:%(lineno)d - %(message)s"


def _configured_level() -> int:
    level = settings.log_level.upper()
    if IS_PRODUCTION and level == "DEBUG":
        level = "INFO"
    return getattr(logging, level)


def setup_logging() -> logging.Logger:
    """googly 로거 초기화 (핸들러는 한 번만 추가)"""
    logger = logging.getLogger(LOGGER_NAME)
    level = _configured_level()
    logger.setLevel(level)

    if not logger.handlers:
        handler = logging.StreamHandler(sys.stderr)
        handler.setLevel(level)
        handler.setFormatter(logging.Formatter(
            fmt=PRODUCTION_FORMAT if IS_PRODUCTION else DEVELOPMENT_FORMAT,
            datefmt="%Y-%m-%d %H:%M:%S",
        ))
        logger.addHandler(handler)

    return logger


logger = setup_logging()


def set_verbose(enabled: bool) -> None:
    """CLI -v 플래그: 세션 진단 로그(DEBUG)까지 출력"""
    level = logging.DEBUG if enabled else _configured_level()
    logger.setLevel(level)
    for handler in logger.handlers:
        handler.setLevel(level)


def sanitize_for_log(value: str, max_length: int = 100) -> str:
    """검색어/URL을 한 줄로 만들고 길이를 제한 (빈 값은 [empty])"""
    if not value:
        return "[empty]"

    result = value.replace("\n", " ").replace("\r", " ")
    if len(result) > max_length:
        result = result[:max_length] + "..."
    return result
