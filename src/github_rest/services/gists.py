"""Gists API, see https://docs.github.com/rest/gists"""

from __future__ import annotations

from github_rest.domain.models import Gist
from github_rest.domain.options import GistListOptions
from github_rest.domain.value_objects import path_segment
from github_rest.infrastructure.response import Response
from github_rest.services.base import Service


class GistsService(Service):
    """Endpoint wrappers for gists."""

    async def list_for_user(
        self, user: str = "", opts: GistListOptions | None = None
    ) -> tuple[list[Gist], Response]:
        """List gists of *user*, or of the authenticated user when empty."""
        url = f"users/{path_segment(user, 'user')}/gists" if user else "gists"
        return await self._client.request("GET", url, opts=opts, result_type=list[Gist])

    async def list_all(self, opts: GistListOptions | None = None) -> tuple[list[Gist], Response]:
        return await self._client.request("GET", "gists/public", opts=opts, result_type=list[Gist])

    async def list_starred(
        self, opts: GistListOptions | None = None
    ) -> tuple[list[Gist], Response]:
        return await self._client.request("GET", "gists/starred", opts=opts, result_type=list[Gist])

    async def get(self, gist_id: str) -> tuple[Gist, Response]:
        return await self._client.request(
            "GET", f"gists/{path_segment(gist_id, 'gist_id')}", result_type=Gist
        )

    async def create(self, gist: Gist) -> tuple[Gist, Response]:
        return await self._client.request("POST", "gists", body=gist, result_type=Gist)

    async def edit(self, gist_id: str, gist: Gist) -> tuple[Gist, Response]:
        """Edit a gist.  Map a filename to ``None`` in ``gist.files`` to delete it."""
        return await self._client.request(
            "PATCH", f"gists/{path_segment(gist_id, 'gist_id')}", body=gist, result_type=Gist
        )

    async def delete(self, gist_id: str) -> Response:
        _, response = await self._client.request(
            "DELETE", f"gists/{path_segment(gist_id, 'gist_id')}"
        )
        return response

    async def star(self, gist_id: str) -> Response:
        _, response = await self._client.request(
            "PUT", f"gists/{path_segment(gist_id, 'gist_id')}/star"
        )
        return response

    async def unstar(self, gist_id: str) -> Response:
        _, response = await self._client.request(
            "DELETE", f"gists/{path_segment(gist_id, 'gist_id')}/star"
        )
        return response

    async def is_starred(self, gist_id: str) -> tuple[bool, Response]:
        return await self._client.request_bool(
            "GET", f"gists/{path_segment(gist_id, 'gist_id')}/star"
        )

    async def fork(self, gist_id: str) -> tuple[Gist, Response]:
        return await self._client.request(
            "POST", f"gists/{path_segment(gist_id, 'gist_id')}/forks", result_type=Gist
        )
