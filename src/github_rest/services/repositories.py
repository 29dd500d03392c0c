"""Repositories API, see https://docs.github.com/rest/repos

Covers repositories themselves plus the branch, commit status and release
sub-resources.
"""

from __future__ import annotations

import mimetypes
from urllib.parse import urlencode

from github_rest.domain.exceptions import InvalidPathError
from github_rest.domain.models import (
    Branch,
    CombinedStatus,
    Release,
    ReleaseAsset,
    RepoStatus,
    Repository,
    RepositoryCreateForkOptions,
    Topics,
)
from github_rest.domain.options import (
    BranchListOptions,
    ListOptions,
    RepositoryListAllOptions,
    RepositoryListByAuthenticatedUserOptions,
    RepositoryListByOrgOptions,
    RepositoryListByUserOptions,
    RepositoryListForksOptions,
)
from github_rest.domain.value_objects import path_segment, repo_path
from github_rest.infrastructure.response import Response
from github_rest.services.base import Service


class RepositoriesService(Service):
    """Endpoint wrappers for repositories."""

    # ── Listing ─────────────────────────────────────────────────────────

    async def list_by_user(
        self, user: str, opts: RepositoryListByUserOptions | None = None
    ) -> tuple[list[Repository], Response]:
        url = f"users/{path_segment(user, 'user')}/repos"
        return await self._client.request("GET", url, opts=opts, result_type=list[Repository])

    async def list_by_authenticated_user(
        self, opts: RepositoryListByAuthenticatedUserOptions | None = None
    ) -> tuple[list[Repository], Response]:
        return await self._client.request(
            "GET", "user/repos", opts=opts, result_type=list[Repository]
        )

    async def list_by_org(
        self, org: str, opts: RepositoryListByOrgOptions | None = None
    ) -> tuple[list[Repository], Response]:
        url = f"orgs/{path_segment(org, 'org')}/repos"
        return await self._client.request("GET", url, opts=opts, result_type=list[Repository])

    async def list_all(
        self, opts: RepositoryListAllOptions | None = None
    ) -> tuple[list[Repository], Response]:
        """List all public repositories in creation order; paginate with ``since``."""
        return await self._client.request(
            "GET", "repositories", opts=opts, result_type=list[Repository]
        )

    # ── CRUD ────────────────────────────────────────────────────────────

    async def create(self, org: str, repo: Repository) -> tuple[Repository, Response]:
        """Create a repository under *org*, or for the authenticated user when empty."""
        url = f"orgs/{path_segment(org, 'org')}/repos" if org else "user/repos"
        return await self._client.request("POST", url, body=repo, result_type=Repository)

    async def get(self, owner: str, repo: str) -> tuple[Repository, Response]:
        return await self._client.request("GET", repo_path(owner, repo), result_type=Repository)

    async def get_by_id(self, repo_id: int) -> tuple[Repository, Response]:
        return await self._client.request(
            "GET", f"repositories/{int(repo_id)}", result_type=Repository
        )

    async def edit(
        self, owner: str, repo: str, changes: Repository
    ) -> tuple[Repository, Response]:
        return await self._client.request(
            "PATCH", repo_path(owner, repo), body=changes, result_type=Repository
        )

    async def delete(self, owner: str, repo: str) -> Response:
        _, response = await self._client.request("DELETE", repo_path(owner, repo))
        return response

    # ── Forks ───────────────────────────────────────────────────────────

    async def list_forks(
        self, owner: str, repo: str, opts: RepositoryListForksOptions | None = None
    ) -> tuple[list[Repository], Response]:
        return await self._client.request(
            "GET", f"{repo_path(owner, repo)}/forks", opts=opts, result_type=list[Repository]
        )

    async def create_fork(
        self, owner: str, repo: str, opts: RepositoryCreateForkOptions | None = None
    ) -> tuple[Repository, Response]:
        """Fork a repository.

        Forking happens asynchronously; GitHub usually answers 202 and this
        method then raises :class:`~github_rest.domain.exceptions.AcceptedError`
        whose ``raw`` body holds the future fork.
        """
        return await self._client.request(
            "POST",
            f"{repo_path(owner, repo)}/forks",
            body=opts or RepositoryCreateForkOptions(),
            result_type=Repository,
        )

    # ── Metadata ────────────────────────────────────────────────────────

    async def list_languages(self, owner: str, repo: str) -> tuple[dict[str, int], Response]:
        """Language name → bytes of code."""
        return await self._client.request(
            "GET", f"{repo_path(owner, repo)}/languages", result_type=dict[str, int]
        )

    async def list_topics(self, owner: str, repo: str) -> tuple[list[str], Response]:
        topics, response = await self._client.request(
            "GET", f"{repo_path(owner, repo)}/topics", result_type=Topics
        )
        return topics.names or [], response

    # ── Branches ────────────────────────────────────────────────────────

    async def list_branches(
        self, owner: str, repo: str, opts: BranchListOptions | None = None
    ) -> tuple[list[Branch], Response]:
        return await self._client.request(
            "GET", f"{repo_path(owner, repo)}/branches", opts=opts, result_type=list[Branch]
        )

    async def get_branch(self, owner: str, repo: str, branch: str) -> tuple[Branch, Response]:
        url = f"{repo_path(owner, repo)}/branches/{path_segment(branch, 'branch')}"
        return await self._client.request("GET", url, result_type=Branch)

    # ── Commit statuses ─────────────────────────────────────────────────

    async def list_statuses(
        self, owner: str, repo: str, ref: str, opts: ListOptions | None = None
    ) -> tuple[list[RepoStatus], Response]:
        """List statuses for *ref* (a SHA, branch name or tag name)."""
        url = f"{repo_path(owner, repo)}/commits/{path_segment(ref, 'ref')}/statuses"
        return await self._client.request("GET", url, opts=opts, result_type=list[RepoStatus])

    async def create_status(
        self, owner: str, repo: str, sha: str, status: RepoStatus
    ) -> tuple[RepoStatus, Response]:
        url = f"{repo_path(owner, repo)}/statuses/{path_segment(sha, 'sha')}"
        return await self._client.request("POST", url, body=status, result_type=RepoStatus)

    async def get_combined_status(
        self, owner: str, repo: str, ref: str, opts: ListOptions | None = None
    ) -> tuple[CombinedStatus, Response]:
        url = f"{repo_path(owner, repo)}/commits/{path_segment(ref, 'ref')}/status"
        return await self._client.request("GET", url, opts=opts, result_type=CombinedStatus)

    # ── Releases ────────────────────────────────────────────────────────

    async def list_releases(
        self, owner: str, repo: str, opts: ListOptions | None = None
    ) -> tuple[list[Release], Response]:
        return await self._client.request(
            "GET", f"{repo_path(owner, repo)}/releases", opts=opts, result_type=list[Release]
        )

    async def get_release(self, owner: str, repo: str, release_id: int) -> tuple[Release, Response]:
        url = f"{repo_path(owner, repo)}/releases/{int(release_id)}"
        return await self._client.request("GET", url, result_type=Release)

    async def get_latest_release(self, owner: str, repo: str) -> tuple[Release, Response]:
        url = f"{repo_path(owner, repo)}/releases/latest"
        return await self._client.request("GET", url, result_type=Release)

    async def create_release(
        self, owner: str, repo: str, release: Release
    ) -> tuple[Release, Response]:
        url = f"{repo_path(owner, repo)}/releases"
        return await self._client.request("POST", url, body=release, result_type=Release)

    async def delete_release(self, owner: str, repo: str, release_id: int) -> Response:
        url = f"{repo_path(owner, repo)}/releases/{int(release_id)}"
        _, response = await self._client.request("DELETE", url)
        return response

    async def upload_release_asset(
        self,
        owner: str,
        repo: str,
        release_id: int,
        name: str,
        content: bytes,
        *,
        label: str | None = None,
        media_type: str | None = None,
    ) -> tuple[ReleaseAsset, Response]:
        """Upload *content* as asset *name*; the media type defaults to one
        guessed from the file extension."""
        if not name:
            raise InvalidPathError("asset name must not be empty")
        media_type = media_type or mimetypes.guess_type(name)[0] or "application/octet-stream"
        query = {"name": name}
        if label:
            query["label"] = label
        url = f"{repo_path(owner, repo)}/releases/{int(release_id)}/assets?{urlencode(query)}"
        request = self._client.new_upload_request(url, content, media_type)
        return await self._client.do(request, ReleaseAsset)
