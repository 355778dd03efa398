"""
tests/conftest.py
─────────────────
Shared pytest fixtures for the BlogInfo test suite.
"""
import os
import tempfile

import httpx
import pytest

# Point every external collaborator at fake hosts for tests
os.environ.setdefault("API_BASE_URL", "http://api.test/api")
os.environ.setdefault("TRANSLATE_URL", "https://mt.test/translate_a/single")
os.environ.setdefault("TRANSLATE_DEBOUNCE_MS", "20")
os.environ.setdefault("LANG_STORAGE_PATH", os.path.join(tempfile.gettempdir(), "bloginfo-test-prefs.json"))


def google_payload(translated: str, source: str = "") -> list:
    """Shape of a `translate_a/single?dt=t` answer with one segment."""
    return [[[translated, source, None, None, 10]], None, "en"]


class FakeTranslator:
    """MockTransport handler that 'translates' by tagging the text with the target."""

    def __init__(self) -> None:
        self.requests: list[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        q = request.url.params["q"]
        tl = request.url.params["tl"]
        return httpx.Response(200, json=google_payload(f"[{tl}] {q}", q))

    @property
    def count(self) -> int:
        return len(self.requests)

    def queries(self) -> list[str]:
        return [r.url.params["q"] for r in self.requests]


def failing_handler(request: httpx.Request) -> httpx.Response:
    raise httpx.ConnectError("network unreachable", request=request)


@pytest.fixture
def cache():
    from src.i18n.cache import TranslationCache
    return TranslationCache()


@pytest.fixture
def translator() -> FakeTranslator:
    return FakeTranslator()


@pytest.fixture
def client(cache, translator):
    from src.i18n.client import TranslationClient
    return TranslationClient(cache=cache, transport=httpx.MockTransport(translator))


@pytest.fixture
def offline_client(cache):
    from src.i18n.client import TranslationClient
    return TranslationClient(cache=cache, transport=httpx.MockTransport(failing_handler))


@pytest.fixture
def state():
    """Language state without persistence, starting in English."""
    from src.i18n.state import LanguageState
    return LanguageState(store=None)


@pytest.fixture
def page():
    """Small page: a heading, a marked identifier and a paragraph."""
    from dash import html
    return html.Div(
        [
            html.H1("Hello"),
            html.P("ID-123", **{"data-no-translate": True}),
            html.Div([html.Span("Health"), " Read more "]),
        ]
    )
