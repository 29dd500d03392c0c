"""Search API, see https://docs.github.com/rest/search

Search requests count against the ``search`` rate limit (``code_search``
for code), not the core one.
"""

from __future__ import annotations

from typing import TypeVar
from urllib.parse import urlencode

from github_rest.domain.exceptions import InvalidPathError
from github_rest.domain.models import (
    CodeSearchResult,
    IssuesSearchResult,
    RepositoriesSearchResult,
    UsersSearchResult,
)
from github_rest.domain.options import SearchOptions
from github_rest.infrastructure.api_client import MEDIA_TYPE_TEXT_MATCH
from github_rest.infrastructure.response import Response
from github_rest.services.base import Service

R = TypeVar("R")


class SearchService(Service):
    """Endpoint wrappers for the search endpoints."""

    async def repositories(
        self, query: str, opts: SearchOptions | None = None
    ) -> tuple[RepositoriesSearchResult, Response]:
        return await self._search("repositories", query, opts, RepositoriesSearchResult)

    async def issues(
        self, query: str, opts: SearchOptions | None = None
    ) -> tuple[IssuesSearchResult, Response]:
        """Search issues and pull requests."""
        return await self._search("issues", query, opts, IssuesSearchResult)

    async def users(
        self, query: str, opts: SearchOptions | None = None
    ) -> tuple[UsersSearchResult, Response]:
        return await self._search("users", query, opts, UsersSearchResult)

    async def code(
        self, query: str, opts: SearchOptions | None = None
    ) -> tuple[CodeSearchResult, Response]:
        return await self._search("code", query, opts, CodeSearchResult)

    async def _search(
        self, kind: str, query: str, opts: SearchOptions | None, result_type: type[R]
    ) -> tuple[R, Response]:
        if not query.strip():
            raise InvalidPathError("search query must not be empty")
        accept = MEDIA_TYPE_TEXT_MATCH if opts is not None and opts.text_match else None
        url = f"search/{kind}?{urlencode({'q': query})}"
        return await self._client.request(
            "GET", url, opts=opts, result_type=result_type, accept=accept
        )
