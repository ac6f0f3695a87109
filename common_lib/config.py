"""공통 설정 모듈(Common configuration module)."""
from __future__ import annotations

from functools import lru_cache
from typing import Any

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

LOG_FORMATS = ("plain", "json")


class Settings(BaseSettings):
    """시스템 환경설정(System environment settings)."""

    model_config = SettingsConfigDict(
        env_prefix="SCAN_TYPES_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    app_name: str = Field(default="package-scan-types", description="서비스 이름(Service name)")
    environment: str = Field(default="development", description="실행 환경(Runtime environment)")

    log_level: str = Field(default="INFO", description="로그 레벨(Log level)")
    log_format: str = Field(default="plain", description="로그 형식 plain|json(Log output format)")

    schema_dir: str = Field(
        default="schemas",
        description="JSON 스키마 출력 디렉터리(Output directory for published JSON schemas)",
    )

    @field_validator("log_level", mode="before")
    @classmethod
    def normalize_log_level(cls, v: Any) -> str:
        """Upper-case the configured level so `debug` and `DEBUG` both work."""
        if v is None:
            return "INFO"
        return str(v).strip().upper()

    @field_validator("log_format", mode="before")
    @classmethod
    def parse_log_format(cls, v: Any) -> str:
        if v is None:
            return "plain"
        value = str(v).strip().lower()
        if value not in LOG_FORMATS:
            raise ValueError(f"log_format must be one of {list(LOG_FORMATS)}; got {v!r}")
        return value


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """설정 인스턴스 반환(Return a cached settings instance)."""

    return Settings()
