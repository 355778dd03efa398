"""
config/languages.py
───────────────────
Supported languages and language-toggle display configuration.

The site is authored in English and can be switched to Bangla on the fly.
"""

from enum import Enum


class Language(str, Enum):
    EN = "en"
    BN = "bn"


SOURCE_LANGUAGE: str = Language.EN.value
TARGET_LANGUAGE: str = Language.BN.value

SUPPORTED_LANGUAGES: tuple[str, ...] = (Language.EN.value, Language.BN.value)

# Label shown on the toggle button: the language you would switch *to*
TOGGLE_LABELS: dict[str, str] = {
    Language.EN.value: "বাংলা",
    Language.BN.value: "English",
}

TOGGLE_TITLES: dict[str, str] = {
    Language.EN.value: "Switch to Bangla",
    Language.BN.value: "Switch to English",
}


def is_supported(code: object) -> bool:
    return isinstance(code, str) and code in SUPPORTED_LANGUAGES


def other_language(code: str) -> str:
    """Return the other half of the en/bn pair."""
    return Language.EN.value if code == Language.BN.value else Language.BN.value
