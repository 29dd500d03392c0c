"""Tests for github_rest.client."""

from __future__ import annotations

import httpx
import pytest

from github_rest.client import GitHub
from github_rest.infrastructure.config import DEFAULT_BASE_URL, DEFAULT_UPLOAD_URL, Settings

from tests.conftest import BASE_URL, url


class TestConstruction:
    def test_defaults(self):
        client = GitHub()
        assert client.base_url == DEFAULT_BASE_URL
        assert client.upload_url == DEFAULT_UPLOAD_URL
        assert str(client.new_request("GET", "zen").url) == "https://api.github.com/zen"

    def test_services_share_the_client(self):
        client = GitHub()
        for service in (
            client.activity,
            client.gists,
            client.issues,
            client.meta,
            client.organizations,
            client.rate_limit,
            client.repositories,
            client.search,
            client.users,
        ):
            assert service._client is client

    def test_from_settings(self):
        settings = Settings(
            github_token="ghp_settings",
            github_base_url="https://ghe.test/api/v3",
            github_upload_url="https://ghe.test/api/uploads",
            github_user_agent="my-tool/1.0",
        )
        client = GitHub.from_settings(settings)
        req = client.new_request("GET", "zen")
        assert str(req.url) == "https://ghe.test/api/v3/zen"
        assert req.headers["Authorization"] == "Bearer ghp_settings"
        assert req.headers["User-Agent"] == "my-tool/1.0"
        assert client.upload_url == "https://ghe.test/api/uploads/"

    def test_from_settings_without_token(self):
        client = GitHub.from_settings(Settings(github_token=None))
        assert "Authorization" not in client.new_request("GET", "zen").headers


class TestEnterpriseUrls:
    @pytest.mark.parametrize(
        ("base", "upload", "expected_base", "expected_upload"),
        [
            (
                "https://ghe.example.com",
                "https://ghe.example.com",
                "https://ghe.example.com/api/v3/",
                "https://ghe.example.com/api/uploads/",
            ),
            (
                "https://ghe.example.com/api/v3/",
                "https://ghe.example.com/api/uploads/",
                "https://ghe.example.com/api/v3/",
                "https://ghe.example.com/api/uploads/",
            ),
            (
                "https://ghe.example.com/api/v3",
                "https://ghe.example.com/api/uploads",
                "https://ghe.example.com/api/v3/",
                "https://ghe.example.com/api/uploads/",
            ),
            (
                "https://api.octocorp.ghe.com/",
                "https://api.octocorp.ghe.com/",
                "https://api.octocorp.ghe.com/",
                "https://api.octocorp.ghe.com/",
            ),
        ],
    )
    def test_normalization(self, base, upload, expected_base, expected_upload):
        client = GitHub.with_enterprise_urls(base, upload)
        assert client.base_url == expected_base
        assert client.upload_url == expected_upload

    def test_passes_options_through(self):
        client = GitHub.with_enterprise_urls("https://ghe.example.com/", "https://ghe.example.com/", token="t")
        assert client.new_request("GET", "zen").headers["Authorization"] == "Bearer t"


class TestWithToken:
    @pytest.mark.asyncio
    async def test_copy_authenticates_differently_on_shared_transport(self, gh, api):
        route = api.get(url("user")).mock(return_value=httpx.Response(200, json={"login": "other"}))
        other = gh.with_token("ghp_other")

        user, _ = await other.users.get()

        assert user.login == "other"
        assert route.calls.last.request.headers["Authorization"] == "Bearer ghp_other"
        assert other.base_url == BASE_URL
        assert other._http is gh._http

    @pytest.mark.asyncio
    async def test_closing_copy_keeps_shared_transport_open(self, gh):
        other = gh.with_token("ghp_other")
        await other.close()
        assert not gh._http.is_closed

    @pytest.mark.asyncio
    async def test_injected_transport_is_not_closed(self):
        http = httpx.AsyncClient()
        async with GitHub(http, base_url=BASE_URL) as client:
            assert client._http is http
        assert not http.is_closed
        await http.aclose()
