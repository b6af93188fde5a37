# tests/test_proxy_routes.py

"""
Tests for the backend proxy routes.
"""

import json

import httpx
import pytest

AUTH = {"Authorization": "Bearer admin-token"}


class TestAuthorization:
    """Protected routes require an Authorization header."""

    @pytest.mark.parametrize(
        "method,path",
        [
            ("POST", "/api/categories"),
            ("PUT", "/api/categories/c1"),
            ("DELETE", "/api/categories/c1"),
            ("DELETE", "/api/comments/cm1"),
            ("GET", "/api/comments/admin"),
            ("GET", "/api/comments/admin/settings"),
            ("PATCH", "/api/comments/admin/settings"),
            ("GET", "/api/contact/admin"),
            ("GET", "/api/contact/admin/stats"),
            ("GET", "/api/contact/admin/m1"),
            ("PATCH", "/api/contact/admin/m1/status"),
            ("DELETE", "/api/contact/admin/m1"),
            ("GET", "/api/admin/stats"),
            ("GET", "/api/admin/analytics"),
            ("GET", "/api/admin/users"),
            ("POST", "/api/admin/users"),
            ("PUT", "/api/admin/users/u1"),
            ("DELETE", "/api/admin/users/u1"),
        ],
    )
    def test_missing_header_is_401(self, client, backend, method, path):
        body = {"name": "x"} if method in ("POST", "PUT", "PATCH") else None

        response = client.request(method, path, json=body)

        assert response.status_code == 401
        assert response.json() == {
            "success": False,
            "error": "Authorization header required",
        }
        assert backend.requests == []

    def test_header_is_forwarded_verbatim(self, client, backend):
        backend.add("GET", "/api/admin/stats", json={"success": True, "totalArticles": 12})

        response = client.get("/api/admin/stats", headers=AUTH)

        assert response.status_code == 200
        assert response.json() == {"success": True, "totalArticles": 12}
        assert backend.last_request.headers["Authorization"] == "Bearer admin-token"


class TestRelay:
    def test_articles_query_string_forwarded(self, client, backend):
        backend.add("GET", "/api/articles", json={"success": True, "docs": []})

        response = client.get("/api/articles?page=2&limit=5&category=sports")

        assert response.status_code == 200
        params = backend.last_request.url.params
        assert params["page"] == "2"
        assert params["limit"] == "5"
        assert params["category"] == "sports"

    def test_success_status_is_relayed(self, client, backend):
        backend.add(
            "POST", "/api/comments", status=201, json={"success": True, "comment": {"_id": "c"}}
        )

        response = client.post("/api/comments", json={"content": "Nice", "articleId": "a"})

        assert response.status_code == 201
        assert response.json()["comment"] == {"_id": "c"}
        assert json.loads(backend.last_request.content) == {"content": "Nice", "articleId": "a"}

    def test_array_body_forwarded_verbatim(self, client, backend):
        backend.add("PUT", "/api/categories/c1", json={"success": True})
        body = [{"op": "rename", "name": "World"}]

        response = client.put("/api/categories/c1", json=body, headers=AUTH)

        assert response.status_code == 200
        assert json.loads(backend.last_request.content) == body

    def test_backend_error_message_passthrough(self, client, backend):
        backend.add(
            "POST",
            "/api/categories",
            status=409,
            json={"success": False, "error": "Category already exists"},
        )

        response = client.post("/api/categories", json={"name": "World"}, headers=AUTH)

        assert response.status_code == 409
        assert response.json() == {"success": False, "error": "Category already exists"}

    def test_backend_message_field_is_used(self, client, backend):
        backend.add(
            "GET",
            "/api/comments/admin",
            status=403,
            json={"success": False, "message": "Not allowed"},
        )

        response = client.get("/api/comments/admin", headers=AUTH)

        assert response.status_code == 403
        assert response.json() == {"success": False, "error": "Not allowed"}

    def test_route_fallback_message(self, client, backend):
        backend.add("GET", "/api/comments/admin", status=500, json={"success": False})

        response = client.get("/api/comments/admin", headers=AUTH)

        assert response.status_code == 500
        assert response.json() == {"success": False, "error": "Failed to fetch comments"}

    def test_network_failure_is_500(self, client, backend):
        backend.add("GET", "/api/admin/users", error=httpx.ConnectError("refused"))

        response = client.get("/api/admin/users", headers=AUTH)

        assert response.status_code == 500
        assert response.json() == {"success": False, "error": "Internal server error"}

    def test_malformed_backend_json_is_500(self, client, backend):
        backend.add("GET", "/api/contact/admin/stats", text="<html>oops</html>")

        response = client.get("/api/contact/admin/stats", headers=AUTH)

        assert response.status_code == 500
        assert response.json() == {"success": False, "error": "Internal server error"}

    def test_malformed_request_body_is_400(self, client, backend):
        response = client.post(
            "/api/contact",
            content=b"not json",
            headers={"Content-Type": "application/json"},
        )

        assert response.status_code == 400
        assert response.json()["success"] is False
        assert backend.requests == []


class TestQueryDefaults:
    def test_article_comments_defaults(self, client, backend):
        backend.add("GET", "/api/comments/article/a1", json={"success": True, "comments": []})

        client.get("/api/comments/article/a1")

        params = backend.last_request.url.params
        assert params["page"] == "1"
        assert params["limit"] == "10"

    def test_moderation_queue_filters(self, client, backend):
        backend.add("GET", "/api/comments/admin", json={"success": True})

        client.get("/api/comments/admin?status=pending&articleId=a1", headers=AUTH)

        params = backend.last_request.url.params
        assert params["page"] == "1"
        assert params["limit"] == "20"
        assert params["status"] == "pending"
        assert params["articleId"] == "a1"

    def test_contact_filters_omitted_when_empty(self, client, backend):
        backend.add("GET", "/api/contact/admin", json={"success": True})

        client.get("/api/contact/admin", headers=AUTH)

        params = backend.last_request.url.params
        assert dict(params) == {"page": "1", "limit": "20"}

    def test_contact_status_update(self, client, backend):
        backend.add("PATCH", "/api/contact/admin/m1/status", json={"success": True})

        response = client.patch(
            "/api/contact/admin/m1/status", json={"status": "resolved"}, headers=AUTH
        )

        assert response.status_code == 200
        assert backend.last_request.method == "PATCH"


class TestCategories:
    def test_unwraps_categories_list(self, client, backend):
        categories = [{"_id": "1", "name": "World", "slug": "world"}]
        backend.add("GET", "/api/categories", json={"success": True, "categories": categories})

        response = client.get("/api/categories")

        assert response.status_code == 200
        assert response.json() == categories

    def test_other_shapes_relayed(self, client, backend):
        categories = [{"_id": "1", "name": "World", "slug": "world"}]
        backend.add("GET", "/api/categories", json=categories)

        response = client.get("/api/categories")

        assert response.json() == categories

    def test_empty_categories_list_unwrapped(self, client, backend):
        backend.add("GET", "/api/categories", json={"success": True, "categories": []})

        response = client.get("/api/categories")

        assert response.status_code == 200
        assert response.json() == []


class TestArticleBySlug:
    def test_found_has_short_cache(self, client, backend):
        backend.add(
            "GET",
            "/api/articles/slug/hello-world",
            json={"success": True, "article": {"slug": "hello-world"}},
        )

        response = client.get("/api/articles/slug/hello-world")

        assert response.status_code == 200
        assert response.json()["article"]["slug"] == "hello-world"
        assert (
            response.headers["cache-control"]
            == "public, max-age=60, stale-while-revalidate=300"
        )

    def test_missing_has_longer_cache(self, client, backend):
        backend.add(
            "GET", "/api/articles/slug/nope", status=404, json={"message": "no such article"}
        )

        response = client.get("/api/articles/slug/nope")

        assert response.status_code == 404
        assert response.json() == {"success": False, "error": "Article not found"}
        assert (
            response.headers["cache-control"]
            == "public, max-age=300, stale-while-revalidate=600"
        )

    def test_failure_is_not_cached(self, client, backend):
        backend.add("GET", "/api/articles/slug/boom", error=httpx.ReadTimeout("slow"))

        response = client.get("/api/articles/slug/boom")

        assert response.status_code == 500
        assert response.json() == {"success": False, "error": "Internal server error"}
        assert response.headers["cache-control"] == "no-cache, no-store, must-revalidate"


class TestCategoryIdentification:
    def test_requires_title_and_content(self, client, backend):
        response = client.post("/api/rss-feeds/test-category", json={"title": "Only title"})

        assert response.status_code == 400
        assert response.json() == {
            "success": False,
            "error": "Title and content are required",
        }
        assert backend.requests == []

    def test_bearer_token_forwarded(self, client, backend):
        backend.add(
            "POST",
            "/api/rss-feeds/test-category",
            json={"success": True, "category": "technology"},
        )

        response = client.post(
            "/api/rss-feeds/test-category",
            json={"title": "New chip", "content": "Faster processors"},
            headers={"Authorization": "Bearer tok"},
        )

        assert response.status_code == 200
        assert response.json()["category"] == "technology"
        assert backend.last_request.headers["Authorization"] == "Bearer tok"

    def test_raw_token_gets_bearer_prefix(self, client, backend):
        backend.add("POST", "/api/rss-feeds/test-category", json={"success": True})

        client.post(
            "/api/rss-feeds/test-category",
            json={"title": "t", "content": "c"},
            headers={"Authorization": "tok"},
        )

        assert backend.last_request.headers["Authorization"] == "Bearer tok"


class TestServiceEndpoints:
    def test_root(self, client):
        response = client.get("/")

        assert response.status_code == 200
        assert response.json()["status"] == "running"

    def test_health(self, client):
        response = client.get("/health")

        assert response.status_code == 200
        assert response.json()["status"] == "healthy"
