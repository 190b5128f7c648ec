"""
ScanLingo — Application Configuration
Reads settings from environment variables / .env file.
"""

from pydantic_settings import BaseSettings, SettingsConfigDict
from functools import lru_cache


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # ── App ──────────────────────────────────────────────────
    app_name: str = "ScanLingo — Multilingual Assistant API"
    app_version: str = "0.1.0"
    debug: bool = False

    # ── Languages ────────────────────────────────────────────
    # Translation requests for this language are never sent to the backend.
    base_language: str = "en"

    # ── Generative backend (Gemini generateContent) ──────────
    gemini_api_key: str = ""
    gemini_api_url: str = "https://generativelanguage.googleapis.com/v1beta/models"
    gemini_model: str = "gemini-2.0-flash"
    request_timeout: float = 60.0

    # Search answers: creative enough for overviews, long enough for 4 parts
    search_temperature: float = 0.7
    search_max_output_tokens: int = 2048
    # Translation: keep it literal
    translation_temperature: float = 0.3
    translation_max_output_tokens: int = 1024
    top_k: int = 40
    top_p: float = 0.95

    # ── Image lookup (Google Custom Search) ──────────────────
    google_search_api_key: str = ""
    google_search_cx: str = ""
    google_search_url: str = "https://www.googleapis.com/customsearch/v1"
    image_search_count: int = 5

    # ── Speech defaults ──────────────────────────────────────
    tts_rate: float = 0.5
    tts_pitch: float = 1.0

    # ── Settings store ───────────────────────────────────────
    database_url: str = "sqlite:///./scanlingo.db"


@lru_cache
def get_settings() -> Settings:
    """Cache-backed settings loader."""
    return Settings()
