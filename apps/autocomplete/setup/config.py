"""Autocomplete Service Configuration."""

from functools import lru_cache
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """광고 등록 자동완성 서비스 설정."""

    # Service
    service_name: str = "autocomplete-api"
    service_version: str = "1.0.0"
    environment: str = "development"

    # Logging
    log_level: str = "INFO"
    log_format: Literal["json", "text"] = "json"

    # Places API
    places_api_url: str = "https://xegr-geography.herokuapp.com/places/autocomplete"
    places_api_timeout: float = Field(10.0, gt=0, description="Places API 타임아웃 (초)")

    # Suggestions
    min_query_length: int = Field(3, ge=1, description="자동완성 조회 최소 글자 수")
    suggestion_cache_max_entries: int | None = Field(
        None,
        ge=1,
        description="화면당 캐시 항목 상한 (None이면 무제한)",
    )
    discard_stale_responses: bool = Field(
        False,
        description="최신 요청보다 먼저 보낸 요청의 응답을 화면에 반영하지 않음",
    )

    model_config = SettingsConfigDict(
        env_prefix="AUTOCOMPLETE_",
        case_sensitive=False,
        extra="ignore",
        validate_default=True,
    )


@lru_cache
def get_settings() -> Settings:
    """설정 싱글톤을 반환합니다."""
    return Settings()
