"""The :class:`GitHub` client — one object exposing every endpoint service."""

from __future__ import annotations

import logging
from typing import Any

import httpx

from github_rest.infrastructure.api_client import ApiClient
from github_rest.infrastructure.config import Settings, get_settings
from github_rest.services.activity import ActivityService
from github_rest.services.gists import GistsService
from github_rest.services.issues import IssuesService
from github_rest.services.meta import MetaService
from github_rest.services.organizations import OrganizationsService
from github_rest.services.rate_limit import RateLimitService
from github_rest.services.repositories import RepositoriesService
from github_rest.services.search import SearchService
from github_rest.services.users import UsersService

logger = logging.getLogger(__name__)


def _enterprise_url(url: str, suffix: str) -> str:
    parsed = httpx.URL(url)
    path = parsed.path if parsed.path.endswith("/") else parsed.path + "/"
    host = parsed.host
    if not path.endswith(suffix) and not host.startswith("api.") and ".api." not in host:
        path += suffix.lstrip("/")
    return str(parsed.copy_with(path=path))


class GitHub(ApiClient):
    """Async GitHub REST API client.

    Usage::

        async with GitHub(token="ghp_...") as gh:
            user, _ = await gh.users.get("octocat")
            repos, resp = await gh.repositories.list_by_user("octocat")

    Authenticated clients send their token with every call, so they should
    not be shared between different users; see :meth:`with_token`.
    """

    def __init__(self, http_client: httpx.AsyncClient | None = None, **kwargs: Any) -> None:
        super().__init__(http_client, **kwargs)
        self.activity = ActivityService(self)
        self.gists = GistsService(self)
        self.issues = IssuesService(self)
        self.meta = MetaService(self)
        self.organizations = OrganizationsService(self)
        self.rate_limit = RateLimitService(self)
        self.repositories = RepositoriesService(self)
        self.search = SearchService(self)
        self.users = UsersService(self)

    async def __aenter__(self) -> GitHub:
        return self

    @classmethod
    def from_settings(
        cls,
        settings: Settings | None = None,
        http_client: httpx.AsyncClient | None = None,
    ) -> GitHub:
        """Build a client from environment-driven :class:`Settings`."""
        settings = settings or get_settings()
        token = settings.github_token.get_secret_value() if settings.github_token else None
        return cls(
            http_client,
            token=token,
            base_url=settings.github_base_url,
            upload_url=settings.github_upload_url,
            user_agent=settings.github_user_agent,
            api_version=settings.github_api_version,
            timeout=settings.http_timeout,
        )

    @classmethod
    def with_enterprise_urls(
        cls,
        base_url: str,
        upload_url: str,
        http_client: httpx.AsyncClient | None = None,
        **kwargs: Any,
    ) -> GitHub:
        """Client for a GitHub Enterprise Server instance.

        ``api/v3/`` and ``api/uploads/`` are appended when missing, unless
        the host already is an ``api.`` subdomain.
        """
        base = _enterprise_url(base_url, "/api/v3/")
        upload = _enterprise_url(upload_url, "/api/uploads/")
        logger.debug("Enterprise endpoints: api=%s uploads=%s", base, upload)
        return cls(http_client, base_url=base, upload_url=upload, **kwargs)

    def with_token(self, token: str) -> GitHub:
        """Copy of this client authenticating with *token*.

        The copy shares the transport, which stays owned by the original.
        """
        return GitHub(
            self._http,
            token=token,
            base_url=self.base_url,
            upload_url=self.upload_url,
            user_agent=self.user_agent,
            api_version=self.api_version,
        )
