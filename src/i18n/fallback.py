"""
src/i18n/fallback.py
────────────────────
Static phrasebook used when the machine translation endpoint is unavailable.

Usage:
    from src.i18n.fallback import fallback_translation

    fallback_translation("Login", "bn")     # → "লগইন"
    fallback_translation("Xyzzy42", "bn")   # → "Xyzzy42" (no entry)
"""

from __future__ import annotations

import json
from functools import lru_cache
from pathlib import Path

from config.languages import Language

_LOCALES_DIR = Path(__file__).parent / "locales"


@lru_cache(maxsize=1)
def _load_phrasebook() -> dict[str, dict[str, str]]:
    with open(_LOCALES_DIR / "fallback.json", encoding="utf-8") as f:
        return json.load(f)


def _direction(target: str) -> str:
    return "en_to_bn" if target == Language.BN.value else "bn_to_en"


def fallback_translation(text: str, target: str) -> str:
    """
    Look up an exact source string in the bundled phrasebook.

    Args:
        text: Source text, matched exactly (no trimming or case folding)
        target: Target language code ("bn" or "en")

    Returns:
        The mapped phrase, or `text` unchanged if there is no entry.
    """
    return _load_phrasebook().get(_direction(target), {}).get(text, text)
