"""Pydantic 스키마 정의 (검색 API)"""
from datetime import date, datetime
from typing import Optional, List

from pydantic import BaseModel, Field, field_validator, model_validator

from googly.engine.options import TIMERANGE_CHOICES


class SearchRequest(BaseModel):
    """검색 요청"""
    query: str = Field(..., min_length=1, max_length=500, description="검색어")
    engines: List[str] = Field(default_factory=lambda: ["google"], min_length=1, max_length=10, description="사용할 엔진 이름")
    lang: str = Field("en", min_length=1, max_length=10, description="결과 언어")
    pages: int = Field(1, ge=-1, le=100, description="엔진별 최대 페이지 수 (-1: 무제한)")
    date_from: Optional[date] = Field(None, description="시작 날짜")
    date_to: Optional[date] = Field(None, description="종료 날짜")
    timerange: str = Field("any", description="최신성 필터")
    user_agent: str = Field("", max_length=500, description="User-Agent 지정 (비우면 생성)")

    @field_validator("query")
    @classmethod
    def validate_query(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("검색어는 공백만으로 구성될 수 없습니다")
        return v.strip()

    @field_validator("pages")
    @classmethod
    def validate_pages(cls, v: int) -> int:
        if v == 0:
            raise ValueError("pages는 -1 또는 1 이상이어야 합니다")
        return v

    @field_validator("timerange")
    @classmethod
    def validate_timerange(cls, v: str) -> str:
        if v not in TIMERANGE_CHOICES:
            raise ValueError(f"timerange는 {', '.join(TIMERANGE_CHOICES)} 중 하나여야 합니다")
        return v

    @model_validator(mode="after")
    def validate_date_range(self) -> "SearchRequest":
        if self.date_from and self.date_to and self.date_from > self.date_to:
            raise ValueError("date_from은 date_to보다 늦을 수 없습니다")
        return self


class ResultItem(BaseModel):
    """검색 결과 1건"""
    title: str = Field("", description="제목")
    link: str = Field("", description="링크")
    description: str = Field("", description="요약")


class EngineReport(BaseModel):
    """엔진별 실행 결과"""
    engine: str = Field(..., description="엔진 이름")
    status: str = Field(..., description="done | failed | timeout")
    result_count: int = Field(0, ge=0, description="결과 수 (중복 제거 전)")
    pages_fetched: int = Field(0, ge=0, description="요청한 페이지 수")
    status_code: Optional[int] = Field(None, description="마지막 요청 상태 코드")
    error_message: Optional[str] = Field(None, description="오류 메시지")
    elapsed_ms: Optional[float] = Field(None, description="소요 시간 (ms)")


class SearchData(BaseModel):
    query: str
    results: List[ResultItem]
    engines: List[EngineReport]


class SearchResponseModel(BaseModel):
    """검색 응답"""
    status: str = Field(..., description="success | partial | error")
    data: Optional[SearchData] = None
    message: str = ""
    error_code: Optional[str] = None


class EngineInfo(BaseModel):
    name: str
    base_url: str
    browser_families: List[str]
    supports_date_range: bool


class HealthResponse(BaseModel):
    status: str
    timestamp: datetime
    version: str
    engines: List[str]
