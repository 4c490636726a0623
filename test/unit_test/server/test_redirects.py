"""Unit tests for request inspection and redirect helpers."""

from typing import Dict, Optional

import pytest
from fastapi import Request

from ultrashots.server.redirects import (
    expects_json,
    has_session,
    is_page_request,
    previous_url,
    redirect_back,
    redirect_to,
)


def make_request(
    method: str = "GET",
    path: str = "/customers",
    headers: Optional[Dict[str, str]] = None,
    session: Optional[dict] = None,
) -> Request:
    scope = {
        "type": "http",
        "method": method,
        "scheme": "http",
        "server": ("testserver", 80),
        "path": path,
        "query_string": b"",
        "headers": [(k.lower().encode(), v.encode()) for k, v in (headers or {}).items()],
    }
    if session is not None:
        scope["session"] = session
    return Request(scope)


class TestRequestInspection:
    def test_page_request(self):
        assert is_page_request(make_request(headers={"X-Inertia": "true"}))
        assert not is_page_request(make_request())

    def test_has_session(self):
        assert has_session(make_request(session={}))
        assert not has_session(make_request())

    @pytest.mark.parametrize(
        "headers, expected",
        [
            ({"Accept": "application/json"}, True),
            ({"Accept": "application/vnd.api+json, */*"}, True),
            ({"Accept": "text/html,application/json"}, False),
            ({"X-Requested-With": "XMLHttpRequest"}, True),
            ({"X-Requested-With": "XMLHttpRequest", "Accept": "*/*"}, True),
            ({"X-Requested-With": "XMLHttpRequest", "Accept": "text/html"}, False),
            ({"X-Inertia": "true", "Accept": "application/json"}, False),
            ({}, False),
        ],
    )
    def test_expects_json(self, headers, expected):
        assert expects_json(make_request(headers=headers)) is expected


class TestRedirects:
    @pytest.mark.parametrize("method, status", [("GET", 302), ("POST", 302), ("PUT", 303), ("PATCH", 303), ("DELETE", 303)])
    def test_status_follows_method(self, method, status):
        response = redirect_to(make_request(method=method), "/customers")

        assert response.status_code == status
        assert response.headers["location"] == "/customers"

    def test_previous_url_prefers_same_host_referer(self):
        request = make_request(
            headers={"Referer": "http://testserver/projects?page=2"},
            session={"_previous_url": "http://testserver/customers"},
        )

        assert previous_url(request) == "http://testserver/projects?page=2"

    def test_foreign_referer_is_ignored(self):
        request = make_request(
            headers={"Referer": "https://evil.example/phish"},
            session={"_previous_url": "http://testserver/customers"},
        )

        assert previous_url(request) == "http://testserver/customers"

    def test_previous_url_defaults_to_root(self):
        assert previous_url(make_request(session={})) == "/"
        assert previous_url(make_request()) == "/"

    def test_redirect_back_after_delete(self):
        request = make_request(method="DELETE", headers={"Referer": "http://testserver/projects"})

        response = redirect_back(request)

        assert response.status_code == 303
        assert response.headers["location"] == "http://testserver/projects"
