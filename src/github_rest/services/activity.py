"""Activity API, starring section: https://docs.github.com/rest/activity/starring"""

from __future__ import annotations

from github_rest.domain.models import Stargazer, StarredRepository
from github_rest.domain.options import ActivityListStarredOptions, ListOptions
from github_rest.domain.value_objects import path_segment, repo_path
from github_rest.infrastructure.api_client import MEDIA_TYPE_STAR
from github_rest.infrastructure.response import Response
from github_rest.services.base import Service


class ActivityService(Service):
    """Endpoint wrappers for stars and stargazers.

    The listings request the ``star+json`` media type so every entry carries
    its ``starred_at`` timestamp.
    """

    async def list_starred(
        self, user: str = "", opts: ActivityListStarredOptions | None = None
    ) -> tuple[list[StarredRepository], Response]:
        """Repositories starred by *user*, or by the authenticated user when empty."""
        url = f"users/{path_segment(user, 'user')}/starred" if user else "user/starred"
        return await self._client.request(
            "GET", url, opts=opts, result_type=list[StarredRepository], accept=MEDIA_TYPE_STAR
        )

    async def list_stargazers(
        self, owner: str, repo: str, opts: ListOptions | None = None
    ) -> tuple[list[Stargazer], Response]:
        return await self._client.request(
            "GET",
            f"{repo_path(owner, repo)}/stargazers",
            opts=opts,
            result_type=list[Stargazer],
            accept=MEDIA_TYPE_STAR,
        )

    async def is_starred(self, owner: str, repo: str) -> tuple[bool, Response]:
        """Whether the authenticated user starred the repository."""
        url = f"user/starred/{path_segment(owner, 'owner')}/{path_segment(repo, 'repo')}"
        return await self._client.request_bool("GET", url)

    async def star(self, owner: str, repo: str) -> Response:
        url = f"user/starred/{path_segment(owner, 'owner')}/{path_segment(repo, 'repo')}"
        _, response = await self._client.request("PUT", url)
        return response

    async def unstar(self, owner: str, repo: str) -> Response:
        url = f"user/starred/{path_segment(owner, 'owner')}/{path_segment(repo, 'repo')}"
        _, response = await self._client.request("DELETE", url)
        return response
