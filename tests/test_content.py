"""
tests/test_content.py
──────────────────────
Tests for the content REST client, served by an in-process httpx transport.
"""
import json

import httpx
import pytest

from src.data import content
from src.data.content import (
    ApiError,
    create_comment,
    fetch_article,
    fetch_articles,
    fetch_comments,
    fetch_health,
    fetch_suggestions,
    normalize_article_id,
)


@pytest.fixture
def backend(monkeypatch):
    """Install a routing table {(method, path): response-or-callable}."""
    routes: dict = {}
    seen: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        route = routes.get((request.method, request.url.path))
        if route is None:
            return httpx.Response(404, json={"error": "no route"})
        return route(request) if callable(route) else route

    monkeypatch.setattr(content, "_transport", httpx.MockTransport(handler))
    routes["_seen"] = seen
    return routes


class TestArticles:
    def test_list(self, backend):
        backend[("GET", "/api/articles")] = httpx.Response(
            200, json=[{"id": 1, "title": "A"}, {"title": "no id"}, {"id": 2, "title": "B"}]
        )
        assert [a.id for a in fetch_articles()] == ["1", "2"]

    def test_wrapped_items_and_category_param(self, backend):
        backend[("GET", "/api/articles")] = httpx.Response(200, json={"items": [{"id": 3}]})
        articles = fetch_articles("sport")
        assert [a.id for a in articles] == ["3"]
        assert backend["_seen"][0].url.params["category"] == "sport"

    def test_server_error(self, backend):
        backend[("GET", "/api/articles")] = httpx.Response(500, json={"message": "db down"})
        with pytest.raises(ApiError) as err:
            fetch_articles()
        assert err.value.status == 500
        assert str(err.value) == "db down"

    def test_single_article(self, backend):
        backend[("GET", "/api/articles/42/bn")] = httpx.Response(200, json={"id": 42, "title": "শিরোনাম"})
        assert fetch_article("42", "bn").title == "শিরোনাম"

    def test_missing_article(self, backend):
        assert fetch_article("404", "en") is None

    def test_forbidden_article(self, backend):
        backend[("GET", "/api/articles/9/en")] = httpx.Response(403)
        with pytest.raises(ApiError, match="permission"):
            fetch_article("9")


class TestComments:
    def test_normalize_article_id(self):
        assert normalize_article_id(" 12 ") == "12"
        assert normalize_article_id(12) == "12"
        for bad in (None, "", "abc", "1.5"):
            with pytest.raises(ValueError, match="Invalid article ID"):
                normalize_article_id(bad)

    def test_fetch(self, backend):
        backend[("GET", "/api/articles/7/comments")] = httpx.Response(
            200, json=[{"id": 1, "article_id": 7, "body": "Hi", "author_display_name": "Rina"}]
        )
        comments = fetch_comments(7)
        assert [c.body for c in comments] == ["Hi"]

    def test_fetch_missing_article(self, backend):
        assert fetch_comments("8") == []

    def test_fetch_non_list_body(self, backend):
        backend[("GET", "/api/articles/7/comments")] = httpx.Response(200, json={"oops": True})
        assert fetch_comments("7") == []

    def test_fetch_failure(self, backend):
        backend[("GET", "/api/articles/7/comments")] = httpx.Response(503)
        with pytest.raises(ApiError, match="status 503"):
            fetch_comments("7")

    def test_create(self, backend):
        def created(request):
            assert request.headers["Authorization"] == "Bearer tok"
            return httpx.Response(201, json={"id": 10, "article_id": 7, "body": "Great"})

        backend[("POST", "/api/articles/7/comments")] = created
        assert create_comment("7", "  Great  ", "tok").body == "Great"
        assert json.loads(backend["_seen"][0].content) == {"body": "Great"}

    def test_create_requires_text_and_token(self, backend):
        with pytest.raises(ValueError, match="Comment text is required"):
            create_comment("7", "   ", "tok")
        with pytest.raises(ValueError, match="logged in"):
            create_comment("7", "text", None)
        assert backend["_seen"] == []

    @pytest.mark.parametrize(
        "status,message",
        [
            (400, "Comment text is required."),
            (401, "You must be logged in to comment."),
            (404, "Article not found or not published."),
            (500, "Failed to create comment (status 500)"),
        ],
    )
    def test_create_errors(self, backend, status, message):
        backend[("POST", "/api/articles/7/comments")] = httpx.Response(status)
        with pytest.raises(ApiError) as err:
            create_comment("7", "text", "tok")
        assert str(err.value) == message
        assert err.value.status == status


class TestSuggestions:
    def test_empty_query_skips_request(self, backend):
        assert fetch_suggestions("   ") == []
        assert backend["_seen"] == []

    def test_parameters_and_parsing(self, backend):
        backend[("GET", "/api/search/suggestions")] = httpx.Response(
            200,
            json={
                "suggestions": [
                    {"type": "articles", "id": 1, "title": "Morning walks"},
                    {"type": "bogus", "id": 2, "label": "skip me"},
                    {"type": "tags", "id": "fitness", "label": "fitness"},
                ]
            },
        )
        results = fetch_suggestions("walk", lang="bn", limit=8, per_type_limit=3)
        assert [(s.type.value, s.label) for s in results] == [
            ("articles", "Morning walks"),
            ("tags", "fitness"),
        ]
        params = backend["_seen"][0].url.params
        assert params["q"] == "walk"
        assert params["lang"] == "bn"
        assert params["limit"] == "8"
        assert params["perTypeLimit"] == "3"
        assert params["types"] == "articles,categories,tags"

    def test_failure_returns_empty(self, backend):
        backend[("GET", "/api/search/suggestions")] = httpx.Response(500)
        assert fetch_suggestions("walk") == []


class TestHealth:
    def test_ok(self, backend):
        backend[("GET", "/api/health")] = httpx.Response(200, json={"status": "ok"})
        assert fetch_health() == {"status": "ok"}
