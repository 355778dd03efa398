"""
config/settings.py
──────────────────
Application configuration loaded from environment variables.
"""
import os
from dataclasses import dataclass


@dataclass
class Settings:
    # Server
    DEBUG: bool = os.getenv("DEBUG", "true").lower() == "true"
    PORT: int = int(os.getenv("PORT", "8050"))
    HOST: str = os.getenv("HOST", "0.0.0.0")

    # Content backend (REST)
    API_BASE_URL: str = os.getenv("API_BASE_URL", "http://localhost:3000/api")
    API_TOKEN: str = os.getenv("API_TOKEN", "")
    API_TIMEOUT_S: float = float(os.getenv("API_TIMEOUT_S", "10"))

    # Machine translation
    TRANSLATE_URL: str = os.getenv(
        "TRANSLATE_URL", "https://translate.googleapis.com/translate_a/single"
    )
    TRANSLATE_TIMEOUT_S: float = float(os.getenv("TRANSLATE_TIMEOUT_S", "10"))
    TRANSLATE_DEBOUNCE_MS: int = int(os.getenv("TRANSLATE_DEBOUNCE_MS", "100"))
    TRANSLATE_DISCARD_STALE: bool = os.getenv("TRANSLATE_DISCARD_STALE", "false").lower() == "true"

    # i18n
    DEFAULT_LANG: str = os.getenv("DEFAULT_LANG", "en")
    LANG_STORAGE_PATH: str = os.getenv("LANG_STORAGE_PATH", "bloginfo_prefs.json")
    LANG_STORAGE_KEY: str = os.getenv("LANG_STORAGE_KEY", "selectedLanguage")

    # Logging
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")


settings = Settings()
