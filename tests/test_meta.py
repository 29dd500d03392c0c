"""Tests for github_rest.services.meta and rate_limit."""

from __future__ import annotations

import time

import httpx
import pytest

from github_rest.domain.entities import RateCategory
from github_rest.domain.exceptions import RateLimitError

from tests.conftest import url


class TestMeta:
    @pytest.mark.asyncio
    async def test_get(self, gh, api):
        api.get(url("meta")).mock(
            return_value=httpx.Response(
                200,
                json={"verifiable_password_authentication": True, "hooks": ["192.30.252.0/22"], "ssh_key_fingerprints": {"SHA256_RSA": "x"}},
            )
        )
        meta, _ = await gh.meta.get()
        assert meta.hooks == ["192.30.252.0/22"]
        assert meta.ssh_key_fingerprints["SHA256_RSA"] == "x"

    @pytest.mark.asyncio
    async def test_zen(self, gh, api):
        api.get(url("zen")).mock(return_value=httpx.Response(200, text="Keep it logically awesome."))
        text, _ = await gh.meta.zen()
        assert text == "Keep it logically awesome."

    @pytest.mark.asyncio
    async def test_octocat(self, gh, api):
        route = api.get(url("octocat")).mock(return_value=httpx.Response(200, text="  MMM  hello there"))
        text, _ = await gh.meta.octocat("hello there")
        assert "hello there" in text
        assert route.calls.last.request.url.params["s"] == "hello there"

    @pytest.mark.asyncio
    async def test_emojis(self, gh, api):
        api.get(url("emojis")).mock(return_value=httpx.Response(200, json={"+1": "https://github.githubassets.com/+1.png"}))
        emojis, _ = await gh.meta.list_emojis()
        assert "+1" in emojis

    @pytest.mark.asyncio
    async def test_codes_of_conduct(self, gh, api):
        api.get(url("codes_of_conduct")).mock(return_value=httpx.Response(200, json=[{"key": "citizen_code_of_conduct"}]))
        api.get(url("codes_of_conduct/contributor_covenant")).mock(
            return_value=httpx.Response(200, json={"key": "contributor_covenant", "body": "# Contributor Covenant"})
        )
        codes, _ = await gh.meta.list_codes_of_conduct()
        assert codes[0].key == "citizen_code_of_conduct"
        code, _ = await gh.meta.get_code_of_conduct("contributor_covenant")
        assert code.body.startswith("# Contributor")


class TestRateLimitService:
    @pytest.mark.asyncio
    async def test_get_refreshes_remembered_rates(self, gh, api):
        reset = int(time.time()) + 3600
        api.get(url("rate_limit")).mock(
            return_value=httpx.Response(
                200,
                json={
                    "resources": {
                        "core": {"limit": 5000, "remaining": 4999, "used": 1, "reset": reset},
                        "search": {"limit": 30, "remaining": 18, "used": 12, "reset": reset},
                    },
                    "rate": {"limit": 5000, "remaining": 4999, "reset": reset},
                },
            )
        )
        limits, _ = await gh.rate_limit.get()
        assert limits.core.remaining == 4999
        assert limits.search.used == 12
        assert limits.graphql is None
        remembered = gh.rate_limits()
        assert remembered[RateCategory.SEARCH].remaining == 18
        assert int(remembered[RateCategory.CORE].reset.timestamp()) == reset

    @pytest.mark.asyncio
    async def test_get_is_sent_while_core_is_exhausted(self, gh, api):
        reset = int(time.time()) + 3600
        exhausted = {"X-RateLimit-Limit": "60", "X-RateLimit-Remaining": "0", "X-RateLimit-Reset": str(reset)}
        api.get(url("users/octocat")).mock(
            return_value=httpx.Response(403, json={"message": "API rate limit exceeded"}, headers=exhausted)
        )
        route = api.get(url("rate_limit")).mock(
            return_value=httpx.Response(
                200,
                json={"resources": {"core": {"limit": 5000, "remaining": 5000, "reset": reset}}},
            )
        )
        with pytest.raises(RateLimitError):
            await gh.users.get("octocat")
        limits, _ = await gh.rate_limit.get()
        assert route.called
        assert limits.core.remaining == 5000
        assert gh.rate_limits()[RateCategory.CORE].remaining == 5000
