"""Tests for github_rest.services.gists and activity (starring)."""

from __future__ import annotations

import json
from datetime import datetime, timezone

import httpx
import pytest

from github_rest.domain.models import Gist, GistFile
from github_rest.domain.options import ActivityListStarredOptions, GistListOptions
from github_rest.infrastructure.api_client import MEDIA_TYPE_STAR

from tests.conftest import url


class TestGists:
    @pytest.mark.asyncio
    async def test_listings(self, gh, api):
        user = api.get(url("users/octocat/gists")).mock(return_value=httpx.Response(200, json=[{"id": "a"}]))
        api.get(url("gists")).mock(return_value=httpx.Response(200, json=[]))
        api.get(url("gists/public")).mock(return_value=httpx.Response(200, json=[]))
        api.get(url("gists/starred")).mock(return_value=httpx.Response(200, json=[]))

        since = datetime(2024, 5, 1, tzinfo=timezone.utc)
        gists, _ = await gh.gists.list_for_user("octocat", GistListOptions(since=since))
        assert gists[0].id == "a"
        assert user.calls.last.request.url.params["since"] == "2024-05-01T00:00:00+00:00"
        await gh.gists.list_for_user()
        await gh.gists.list_all()
        await gh.gists.list_starred()

    @pytest.mark.asyncio
    async def test_get_decodes_files(self, gh, api):
        api.get(url("gists/aa5a315d")).mock(
            return_value=httpx.Response(
                200,
                json={"id": "aa5a315d", "files": {"hello.py": {"filename": "hello.py", "language": "Python"}}},
            )
        )
        gist, _ = await gh.gists.get("aa5a315d")
        assert gist.files["hello.py"].language == "Python"

    @pytest.mark.asyncio
    async def test_create(self, gh, api):
        route = api.post(url("gists")).mock(return_value=httpx.Response(201, json={"id": "new"}))
        gist = Gist(description="d", public=False, files={"a.txt": GistFile(content="x")})
        created, _ = await gh.gists.create(gist)
        assert created.id == "new"
        assert json.loads(route.calls.last.request.content) == {
            "description": "d",
            "public": False,
            "files": {"a.txt": {"content": "x"}},
        }

    @pytest.mark.asyncio
    async def test_edit_deletes_file(self, gh, api):
        route = api.patch(url("gists/g1")).mock(return_value=httpx.Response(200, json={"id": "g1"}))
        await gh.gists.edit("g1", Gist(files={"gone.txt": None}))
        assert json.loads(route.calls.last.request.content) == {"files": {"gone.txt": None}}

    @pytest.mark.asyncio
    async def test_delete_fork_and_stars(self, gh, api):
        api.delete(url("gists/g1")).mock(return_value=httpx.Response(204))
        api.post(url("gists/g1/forks")).mock(return_value=httpx.Response(201, json={"id": "g2"}))
        api.put(url("gists/g1/star")).mock(return_value=httpx.Response(204))
        api.delete(url("gists/g1/star")).mock(return_value=httpx.Response(204))
        api.get(url("gists/g1/star")).mock(return_value=httpx.Response(404, json={"message": "Not Found"}))

        assert (await gh.gists.fork("g1"))[0].id == "g2"
        await gh.gists.star("g1")
        await gh.gists.unstar("g1")
        starred, _ = await gh.gists.is_starred("g1")
        assert starred is False
        assert (await gh.gists.delete("g1")).status_code == 204


class TestStarring:
    @pytest.mark.asyncio
    async def test_list_starred_uses_star_media_type(self, gh, api):
        route = api.get(url("users/octocat/starred")).mock(
            return_value=httpx.Response(
                200, json=[{"starred_at": "2011-01-16T19:06:43Z", "repo": {"full_name": "o/r"}}]
            )
        )
        starred, _ = await gh.activity.list_starred("octocat", ActivityListStarredOptions(sort="created"))
        assert starred[0].repo.full_name == "o/r"
        assert starred[0].starred_at == datetime(2011, 1, 16, 19, 6, 43, tzinfo=timezone.utc)
        assert route.calls.last.request.headers["Accept"] == MEDIA_TYPE_STAR

    @pytest.mark.asyncio
    async def test_list_starred_for_authenticated_user(self, gh, api):
        api.get(url("user/starred")).mock(return_value=httpx.Response(200, json=[]))
        starred, _ = await gh.activity.list_starred()
        assert starred == []

    @pytest.mark.asyncio
    async def test_stargazers(self, gh, api):
        api.get(url("repos/o/r/stargazers")).mock(
            return_value=httpx.Response(200, json=[{"starred_at": "2011-01-16T19:06:43Z", "user": {"login": "u"}}])
        )
        gazers, _ = await gh.activity.list_stargazers("o", "r")
        assert gazers[0].user.login == "u"

    @pytest.mark.asyncio
    async def test_star_toggle(self, gh, api):
        api.get(url("user/starred/o/r")).mock(return_value=httpx.Response(204))
        star = api.put(url("user/starred/o/r")).mock(return_value=httpx.Response(204))
        unstar = api.delete(url("user/starred/o/r")).mock(return_value=httpx.Response(204))
        assert (await gh.activity.is_starred("o", "r"))[0] is True
        await gh.activity.star("o", "r")
        await gh.activity.unstar("o", "r")
        assert star.called and unstar.called
