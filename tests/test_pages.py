"""
tests/test_pages.py
────────────────────
Routing and layout tests: pages are built offline and translated in place.
"""
import threading
import time

import httpx
import pytest
from dash import dcc
from dash.development.base_component import Component

from src.callbacks import article as article_callbacks
from src.callbacks import navigation
from src.data import content
from src.data.content import ApiError
from src.data.models import Article
from src.i18n.client import TranslationClient
from src.i18n.extraction import get_text_fragments
from src.i18n.hook import render_translated
from src.i18n.state import get_language_state, reset_language_state
from src.layout.components.language_toggle import SPINNER_HIDDEN, TOGGLE_BUSY, language_toggle
from src.layout.main import create_layout
from src.layout.navbar import create_navbar


def _texts(root) -> list[str]:
    return [f.text for f in get_text_fragments(root)]


def _walk(node):
    yield node
    children = getattr(node, "children", None)
    items = children if isinstance(children, (list, tuple)) else [children]
    for child in items:
        if isinstance(child, Component):
            yield from _walk(child)


def _find(node, component_id):
    return next((n for n in _walk(node) if getattr(n, "id", None) == component_id), None)


def _slow_client(cache, started: threading.Event, delay: float = 0.3) -> TranslationClient:
    """Client whose every request stalls, then fails over to the phrasebook."""

    def handler(request: httpx.Request) -> httpx.Response:
        started.set()
        time.sleep(delay)
        raise httpx.ConnectError("slow network", request=request)

    return TranslationClient(cache=cache, transport=httpx.MockTransport(handler))


@pytest.fixture
def articles():
    return [
        Article(id="1", title="Morning walks", category="health", description="Walk daily."),
        Article(id="2", title="New chips", tags=["tech"], description="Faster."),
    ]


@pytest.fixture
def offline_api(monkeypatch, articles):
    monkeypatch.setattr(content, "fetch_articles", lambda category=None: articles)
    monkeypatch.setattr(
        content, "fetch_article", lambda article_id, lang="en": articles[0] if article_id == "1" else None
    )
    monkeypatch.setattr(content, "fetch_health", lambda token=None: {"status": "ok"})


@pytest.fixture
def shared_state(state):
    reset_language_state(state)
    yield state
    reset_language_state(None)


class TestRouting:
    def test_home_lists_articles(self, offline_api):
        texts = _texts(navigation.build_page("/", "en"))
        assert "Latest Articles" in texts
        # Article titles are marked as not translatable
        assert "Morning walks" not in texts

    def test_category_page(self, offline_api):
        assert "Health & Wellness" in _texts(navigation.build_page("/health", "en"))

    def test_article_page(self, offline_api):
        page = navigation.build_page("/article/1", "en")
        assert _find(page, "article-id").data == "1"

    def test_missing_article(self, offline_api):
        assert "Article not found." in _texts(navigation.build_page("/article/99", "en"))

    def test_admin_page(self, offline_api):
        page = navigation.build_page("/admin/", "en")
        texts = _texts(page)
        assert "Total Articles" in texts
        assert "Backend" in texts
        assert "View →" in texts
        assert "Manage →" not in texts
        assert any(isinstance(c, dcc.Graph) for c in page.children[-1].children)

    def test_admin_category_cards_link_to_listings(self, offline_api):
        page = navigation.build_page("/admin", "en")
        hrefs = [n.href for n in _walk(page) if isinstance(n, dcc.Link)]
        assert "/health" in hrefs

    def test_backend_status_reported(self, monkeypatch):
        monkeypatch.setattr(content, "fetch_health", lambda token=None: {"status": "degraded"})
        assert navigation._backend_status() == "degraded"

    def test_backend_status_unavailable(self, monkeypatch):
        def boom(token=None):
            raise ApiError("Server error. Please try again later.", 500)

        monkeypatch.setattr(content, "fetch_health", boom)
        assert navigation._backend_status() == "unavailable"

    def test_unknown_path(self, offline_api):
        assert "Page not found" in _texts(navigation.build_page("/nowhere", "en"))

    def test_backend_down(self, monkeypatch):
        def boom(category=None):
            raise ApiError("down", 503)

        monkeypatch.setattr(content, "fetch_articles", boom)
        assert "Unable to load articles. Please try again later." in _texts(navigation.build_page("/", "en"))

    def test_network_error(self, monkeypatch):
        def boom(category=None):
            raise httpx.ConnectError("refused")

        monkeypatch.setattr(content, "fetch_articles", boom)
        assert "Unable to load articles. Please try again later." in _texts(navigation.build_page("/sport", "en"))


class TestLanguageToggle:
    def test_label_names_other_language(self):
        button = _find(language_toggle("en"), "lang-toggle-btn")
        assert button.children[0].children == "বাংলা"
        assert _find(language_toggle("bn"), "lang-toggle-btn").children[0].children == "English"

    def test_rendered_enabled_with_spinner_hidden(self):
        toggle = language_toggle("bn")
        assert _find(toggle, "lang-toggle-btn").disabled is False
        assert _find(toggle, "lang-toggle-spinner").style == SPINNER_HIDDEN

    def test_disabled_only_while_a_pass_runs(self):
        button = TOGGLE_BUSY[0]
        assert (button[0].component_id, button[0].component_property) == ("lang-toggle-btn", "disabled")
        assert button[1:] == (True, False)

    def test_unsupported_language_labelled_as_english(self):
        assert _find(language_toggle("fr"), "lang-toggle-btn").children[0].children == "বাংলা"

    def test_toggle_never_translated(self):
        assert _texts(language_toggle("en")) == []

    def test_next_language(self):
        assert navigation.next_language("en") == "bn"
        assert navigation.next_language("bn") == "en"
        assert navigation.next_language(None) == "bn"

    def test_page_language_falls_back_to_default(self):
        assert navigation.page_language("bn") == "bn"
        assert navigation.page_language("fr") == "en"
        assert navigation.page_language(None) == "en"


class TestTranslatedChrome:
    def test_navbar_links_translated(self, state, offline_client):
        state.toggle_language()
        navbar = render_translated(create_navbar("bn"), state=state, client=offline_client)
        texts = _texts(navbar)
        assert "স্বাস্থ্য" in texts
        assert "Health" not in texts

    def test_root_layout_has_stores(self):
        root = create_layout("bn")
        store = _find(root, "store-lang")
        assert store.data == "bn"
        assert store.storage_type == "local"
        assert _find(root, "page-content") is not None

    def test_root_layout_prerenders_toggle(self):
        assert _find(create_layout("en"), "lang-toggle-btn") is not None


class TestPerVisitorLanguage:
    def test_two_visitors_see_their_own_language(self, shared_state, offline_client):
        english, _ = navigation.render_chrome("en", client=offline_client)
        bangla, _ = navigation.render_chrome("bn", client=offline_client)

        assert "Health" in _texts(english)
        assert "স্বাস্থ্য" in _texts(bangla)
        assert "Health" not in _texts(bangla)
        assert get_language_state() is shared_state
        assert shared_state.current_language == "en"

    def test_pages_follow_the_request_language(self, shared_state, offline_api, offline_client):
        english = navigation.render_page("/admin", "en", client=offline_client)
        bangla = navigation.render_page("/admin", "bn", client=offline_client)

        assert "Health" in _texts(english)
        assert "স্বাস্থ্য" in _texts(bangla)
        assert shared_state.current_language == "en"

    def test_toggle_stays_enabled_during_a_slow_pass(self, shared_state, cache, offline_client):
        started = threading.Event()
        slow = _slow_client(cache, started)
        worker = threading.Thread(target=navigation.render_page, args=("/nowhere", "bn"), kwargs={"client": slow})
        worker.start()
        try:
            assert started.wait(timeout=5)
            navbar, _ = navigation.render_chrome("bn", client=offline_client)
            assert _find(navbar, "lang-toggle-btn").disabled is False
            assert shared_state.is_translating is False
        finally:
            worker.join(timeout=10)

        assert not worker.is_alive()
        navbar, _ = navigation.render_chrome("en", client=offline_client)
        assert _find(navbar, "lang-toggle-btn").disabled is False


class TestComments:
    @pytest.fixture
    def comment_api(self, monkeypatch):
        posted = []

        def create(article_id, text, token):
            if not (text or "").strip():
                raise ValueError("Comment text is required.")
            posted.append((article_id, text))

        monkeypatch.setattr(content, "create_comment", create)
        monkeypatch.setattr(content, "fetch_comments", lambda article_id: [])
        return posted

    def test_blank_comment_rejected(self, comment_api, offline_client):
        status, version, value = article_callbacks.submit_comment("  ", "7", 2, "en", client=offline_client)
        assert _texts(status) == ["Comment text is required."]
        assert (version, value) == (2, "  ")
        assert comment_api == []

    def test_posted_comment_bumps_version(self, comment_api, offline_client):
        status, version, value = article_callbacks.submit_comment("Nice", "7", None, "en", client=offline_client)
        assert _texts(status) == ["Comment posted."]
        assert (version, value) == (1, "")
        assert comment_api == [("7", "Nice")]

    def test_network_failure_keeps_text(self, monkeypatch, offline_client):
        def boom(article_id, text, token):
            raise httpx.ConnectError("refused")

        monkeypatch.setattr(content, "create_comment", boom)
        status, version, value = article_callbacks.submit_comment("Nice", "7", 3, "en", client=offline_client)
        assert _texts(status) == ["Failed to post comment."]
        assert (version, value) == (3, "Nice")

    def test_video_article_has_empty_thread(self, monkeypatch, offline_client):
        def reject(article_id):
            raise ValueError("not numeric")

        monkeypatch.setattr(content, "fetch_comments", reject)
        section = article_callbacks.render_comments("video-abc", "bn", client=offline_client)
        texts = _texts(section)
        assert "মন্তব্য" in texts
        assert "এখনও কোন মন্তব্য নেই। প্রথম মন্তব্য করুন!" in texts
