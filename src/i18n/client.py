"""
src/i18n/client.py
──────────────────
Machine translation client for English ↔ Bangla.

Each fragment is sent to the public Google Translate endpoint on its own
(`client=gtx`, one `q` per request). Successful results are memoised in the
shared `translation_cache`; failures of any kind fall back to the bundled
phrasebook and, failing that, to the untouched source text. Callers never see
an exception from `translate_text`.

Usage:
    from src.i18n.client import translation_service

    await translation_service.translate_text("Health", "bn")
    await translation_service.translate_element(page_root, "bn")
"""
from __future__ import annotations

import asyncio
import logging
from collections.abc import Callable
from contextlib import asynccontextmanager

import httpx
from dash.development.base_component import Component

from config.languages import TARGET_LANGUAGE, other_language
from config.settings import settings
from src.i18n.cache import TranslationCache, translation_cache
from src.i18n.extraction import TextFragment, get_text_fragments
from src.i18n.fallback import fallback_translation

logger = logging.getLogger(__name__)


class TranslationResponseError(ValueError):
    """The endpoint answered, but not with a usable translation."""


def parse_translation(payload: object) -> str:
    """
    Pull the translated text out of a `translate_a/single` response.

    The payload looks like `[[["অনুবাদ", "source", ...], ...], ...]`; long
    inputs are split into several sentence segments, which are joined back.
    """
    try:
        segments = payload[0]  # type: ignore[index]
        parts = [seg[0] for seg in segments if seg and isinstance(seg[0], str)]
    except (IndexError, KeyError, TypeError) as exc:
        raise TranslationResponseError(f"unexpected response shape: {payload!r:.120}") from exc
    translated = "".join(parts)
    if not translated:
        raise TranslationResponseError("response carried no translated text")
    return translated


class TranslationClient:
    def __init__(
        self,
        cache: TranslationCache | None = None,
        url: str | None = None,
        timeout: float | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self.cache = cache if cache is not None else translation_cache
        self.url = url or settings.TRANSLATE_URL
        self.timeout = settings.TRANSLATE_TIMEOUT_S if timeout is None else timeout
        self._transport = transport

    @asynccontextmanager
    async def session(self):
        """One pooled HTTP client, shared by every request inside the block."""
        async with httpx.AsyncClient(timeout=self.timeout, transport=self._transport) as http:
            yield http

    async def _request(self, http: httpx.AsyncClient, text: str, target: str) -> str:
        params = {
            "client": "gtx",
            "sl": other_language(target),
            "tl": target,
            "dt": "t",
            "q": text,
        }
        response = await http.get(self.url, params=params)
        response.raise_for_status()
        return parse_translation(response.json())

    async def translate_text(
        self,
        text: str,
        target: str = TARGET_LANGUAGE,
        http: httpx.AsyncClient | None = None,
    ) -> str:
        """
        Translate one fragment into `target`.

        Args:
            text: Source text; blank input is returned as-is
            target: "bn" or "en" (the source language is the other one)
            http: Optional open client from `session()` to reuse connections

        Returns:
            The translation, a phrasebook entry, or `text` unchanged.
        """
        if not text or not text.strip():
            return text

        cached = self.cache.get(text, target)
        if cached is not None:
            return cached

        try:
            if http is None:
                async with self.session() as own:
                    translated = await self._request(own, text, target)
            else:
                translated = await self._request(http, text, target)
        except (httpx.HTTPError, ValueError) as exc:
            logger.warning("Translation failed, using fallback for %r: %s", text[:60], exc)
            return fallback_translation(text, target)

        return self.cache.put(text, target, translated)

    async def _translate_fragment(
        self,
        fragment: TextFragment,
        target: str,
        http: httpx.AsyncClient,
        should_write: Callable[[], bool] | None,
    ) -> None:
        try:
            raw = fragment.text
            source = raw.strip()
            translated = await self.translate_text(source, target, http=http)
            if translated != source and (should_write is None or should_write()):
                # Keep the surrounding whitespace that separates inline pieces
                leading = raw[: len(raw) - len(raw.lstrip())]
                trailing = raw[len(raw.rstrip()):]
                fragment.text = f"{leading}{translated}{trailing}"
        except Exception:
            logger.exception("Fragment translation failed; leaving text as-is")

    async def translate_element(
        self,
        root: Component | None,
        target: str,
        should_write: Callable[[], bool] | None = None,
    ) -> None:
        """
        Translate every eligible text fragment under `root` in place.

        Each fragment is translated without its surrounding whitespace, which
        is put back around the result.

        Fragments are translated concurrently; this returns once all of them
        have settled. `should_write` is consulted right before each write and
        can veto it (used to drop results of superseded passes).
        """
        fragments = get_text_fragments(root)
        if not fragments:
            return
        async with self.session() as http:
            await asyncio.gather(
                *(self._translate_fragment(f, target, http, should_write) for f in fragments)
            )


translation_service = TranslationClient()
