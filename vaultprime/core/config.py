"""
핵심 설정 모듈
환경 변수 기반 설정 관리
"""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


# 비밀번호 길이 제한
MIN_PASSWORD_LENGTH = 8
MAX_PASSWORD_LENGTH = 128


class Settings(BaseSettings):
    """애플리케이션 설정"""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore"
    )

    # Application Settings
    app_name: str = Field(default="VaultPrime", alias="APP_NAME")
    app_version: str = Field(default="0.1.0", alias="APP_VERSION")
    debug: bool = Field(default=False, alias="DEBUG")
    log_level: str = Field(default="INFO", alias="LOG_LEVEL")

    # Password Settings
    password_default_length: int = Field(
        default=12,
        ge=MIN_PASSWORD_LENGTH,
        le=MAX_PASSWORD_LENGTH,
        alias="PASSWORD_DEFAULT_LENGTH"
    )


# 전역 설정 인스턴스
settings = Settings()
