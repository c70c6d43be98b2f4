"""Application configuration."""

import os

from pydantic_settings import BaseSettings, SettingsConfigDict

_ENVIRONMENT = os.getenv("ENVIRONMENT", "local")

DEFAULT_GENERATION_ERROR = "خطایی در ارتباط با سرور رخ داد. لطفا دوباره تلاش کنید."
DEFAULT_UPLOAD_ERROR = "خواندن فایل انتخاب‌شده ممکن نبود. لطفا فایل دیگری را امتحان کنید."


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    gemini_api_key: str
    gemini_model: str = "gemini-2.5-flash-image"
    gemini_base_url: str = "https://generativelanguage.googleapis.com/v1beta"
    gemini_timeout_seconds: float | None = None
    generation_error_message: str = DEFAULT_GENERATION_ERROR
    upload_error_message: str = DEFAULT_UPLOAD_ERROR
    default_mime_type: str = "image/jpeg"
    environment: str = _ENVIRONMENT

    model_config = SettingsConfigDict(
        env_file=(f".env.{_ENVIRONMENT}", ".env"),
        extra="ignore",
    )
