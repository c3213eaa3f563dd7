from __future__ import annotations

from typing import List

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Defaults:
    """Default values used throughout the application."""

    # File defaults
    DEFAULT_FILENAME: str = "upload"

    # MIME type defaults
    DEFAULT_MIME_TYPE: str = "application/octet-stream"

    SUPPORTED_MIME_TYPES: set[str] = {
        "text/plain",
        "application/pdf",
        "image/*",  # any image type goes to the vision model
    }

    # Recommended (not enforced) summary options
    PURPOSES: List[str] = ["정보 파악", "보고용", "SNS 공유", "보도자료 작성", "회의 자료", "개인 학습"]
    STYLES: List[str] = ["객관적/중립적", "친근하게", "전문가 시각", "간결하게", "유머러스하게", "분석적으로"]
    LANGUAGES: List[str] = ["Korean", "English"]


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False, extra="ignore")

    # OpenAI
    openai_api_key: str = Field(default="")
    openai_model: str = Field(default="gpt-4.1")
    openai_vision_model: str = Field(default="gpt-4.1")
    openai_timeout: float = Field(default=120.0, gt=0)
    openai_max_retries: int = Field(default=0, ge=0, le=3)

    # Generation
    summary_temperature: float = Field(default=0.3, ge=0, le=2)
    summary_max_tokens: int = Field(default=2000, ge=1)
    extraction_max_tokens: int = Field(default=4000, ge=1)
    default_language: str = Field(default="Korean", min_length=1)

    # Upload
    max_upload_bytes: int = Field(default=20_000_000, ge=1)

    log_level: str = Field(default="INFO")

    @property
    def is_summarizer_enabled(self) -> bool:
        """Check if summarizer is enabled based on OpenAI API key."""
        return bool(self.openai_api_key.strip())


def load_settings(**overrides) -> Settings:
    """Build the settings once at boot; callers pass the result around explicitly."""
    return Settings(**overrides)
